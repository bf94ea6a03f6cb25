"""Data models for the discovery config wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_VALUE_TEMPLATE = "{{ value_json.value }}"
NO_UNIT = "None"

# Sensor classes whose readings come from a field named after the class
SENSOR_VALUE_TEMPLATES: dict[str, str] = {
    "temperature": "{{ value_json.temperature }}",
    "humidity": "{{ value_json.humidity }}",
    "pressure": "{{ value_json.pressure }}",
}


@dataclass
class DeviceMetadata:
    """Optional device registry details; empty answers stay None."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    model_id: Optional[str] = None
    serial_number: Optional[str] = None
    hw_version: Optional[str] = None
    sw_version: Optional[str] = None
    configuration_url: Optional[str] = None


# Attribute name -> abbreviated discovery key, in emission order
METADATA_KEYS: tuple[tuple[str, str], ...] = (
    ("manufacturer", "mf"),
    ("model", "mdl"),
    ("model_id", "mdl_id"),
    ("serial_number", "sn"),
    ("hw_version", "hw"),
    ("sw_version", "sw"),
    ("configuration_url", "cu"),
)


@dataclass
class DeviceAnswers:
    """Operator answers accumulated over one wizard run."""

    name: str = ""
    device_type: str = ""
    device_class: Optional[str] = None
    unit: Optional[str] = None
    state: Optional[str] = None  # binary sensors only; not part of the payload
    value_template: str = DEFAULT_VALUE_TEMPLATE
    unique_id: str = ""
    metadata: DeviceMetadata = field(default_factory=DeviceMetadata)


@dataclass(frozen=True)
class DeviceInfo:
    """The ``dev`` block of a discovery payload."""

    name: str
    identifiers: tuple[str, ...]
    metadata: DeviceMetadata = field(default_factory=DeviceMetadata)

    def as_payload(self) -> dict[str, Any]:
        dev: dict[str, Any] = {"name": self.name, "ids": list(self.identifiers)}
        for attr, key in METADATA_KEYS:
            value = getattr(self.metadata, attr)
            if value:
                dev[key] = value
        return dev


@dataclass(frozen=True)
class Topics:
    config_topic: str
    state_topic: str


@dataclass(frozen=True)
class DeviceConfig:
    """Assembled discovery document for one device."""

    device_class: Optional[str]
    unit_of_measurement: str
    value_template: str
    state_topic: str
    unique_id: str
    device: DeviceInfo

    def as_payload(self) -> dict[str, Any]:
        """Abbreviated discovery payload; ``dev_cla`` is omitted when unset."""
        payload: dict[str, Any] = {}
        if self.device_class is not None:
            payload["dev_cla"] = self.device_class
        payload["unit_of_meas"] = self.unit_of_measurement
        payload["val_tpl"] = self.value_template
        payload["stat_t"] = self.state_topic
        payload["unique_id"] = self.unique_id
        payload["dev"] = self.device.as_payload()
        return payload


__all__ = [
    "DEFAULT_VALUE_TEMPLATE",
    "METADATA_KEYS",
    "NO_UNIT",
    "SENSOR_VALUE_TEMPLATES",
    "DeviceAnswers",
    "DeviceConfig",
    "DeviceInfo",
    "DeviceMetadata",
    "Topics",
]
