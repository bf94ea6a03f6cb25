"""Validation utilities for generated discovery payloads (importable by tests)."""

from __future__ import annotations

from typing import Any

REQUIRED_PAYLOAD_KEYS = ("unit_of_meas", "val_tpl", "stat_t", "unique_id", "dev")
OPTIONAL_DEVICE_KEYS = {"mf", "mdl", "mdl_id", "sn", "hw", "sw", "cu"}


def validate_device_config(payload: Any) -> list[str]:
    """Validate a single-entity discovery payload built by the wizard.

    Returns a list of error strings; empty list means OK.
    Optional ``dev`` fields must be absent rather than empty.
    """
    errors: list[str] = []
    if not isinstance(payload, dict):
        return ["config: payload not dict"]

    for key in REQUIRED_PAYLOAD_KEYS:
        if key not in payload:
            errors.append(f"config: missing {key}")

    if "dev_cla" in payload and not isinstance(payload["dev_cla"], str):
        errors.append("config: dev_cla must be a string when present")

    unique_id = payload.get("unique_id")
    if "unique_id" in payload and not unique_id:
        errors.append("config: empty unique_id")

    state_topic = payload.get("stat_t")
    if isinstance(state_topic, str):
        if not state_topic.endswith("/state"):
            errors.append("config: stat_t does not end with /state")
        if unique_id and f"/{unique_id}/" not in state_topic:
            errors.append("config: stat_t does not contain unique_id")

    dev = payload.get("dev")
    if dev is None:
        return errors
    if not isinstance(dev, dict):
        errors.append("config: dev not dict")
        return errors

    if not dev.get("name"):
        errors.append("config: dev missing name")
    ids = dev.get("ids")
    if not isinstance(ids, list) or not ids:
        errors.append("config: dev.ids must be a non-empty list")

    unknown = sorted(set(dev) - OPTIONAL_DEVICE_KEYS - {"name", "ids"})
    if unknown:
        errors.append(f"config: dev has unexpected keys {unknown}")
    for key in sorted(OPTIONAL_DEVICE_KEYS & set(dev)):
        if not dev[key]:
            errors.append(f"config: dev.{key} present but empty")

    return errors


__all__ = ["validate_device_config"]
