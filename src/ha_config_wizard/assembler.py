"""Fold wizard answers into a discovery document and its topics."""

from __future__ import annotations

import dataclasses

from .models import NO_UNIT, DeviceAnswers, DeviceConfig, DeviceInfo, Topics

DEFAULT_DISCOVERY_PREFIX = "homeassistant"


def build_topics(
    device_type: str, unique_id: str, discovery_prefix: str = DEFAULT_DISCOVERY_PREFIX
) -> Topics:
    """Config and state topics for a device.

    Format: <discovery_prefix>/<device type lower-cased>/<unique_id>/<suffix>
    Spaces in the device type are kept ("Media player" -> "media player").
    """
    base = f"{discovery_prefix}/{device_type.lower()}/{unique_id}"
    return Topics(config_topic=f"{base}/config", state_topic=f"{base}/state")


def build_device_info(answers: DeviceAnswers) -> DeviceInfo:
    return DeviceInfo(
        name=answers.name,
        identifiers=(answers.name,),
        # copied so later edits to the answers leave built configs untouched
        metadata=dataclasses.replace(answers.metadata),
    )


def assemble(
    answers: DeviceAnswers, discovery_prefix: str = DEFAULT_DISCOVERY_PREFIX
) -> tuple[DeviceConfig, Topics]:
    """Build the discovery document and topics; no side effects."""
    topics = build_topics(answers.device_type, answers.unique_id, discovery_prefix)
    config = DeviceConfig(
        device_class=answers.device_class,
        unit_of_measurement=answers.unit or NO_UNIT,
        value_template=answers.value_template,
        state_topic=topics.state_topic,
        unique_id=answers.unique_id,
        device=build_device_info(answers),
    )
    return config, topics


__all__ = ["DEFAULT_DISCOVERY_PREFIX", "assemble", "build_device_info", "build_topics"]
