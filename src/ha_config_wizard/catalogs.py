"""Reference tables for Home Assistant MQTT discovery.

Static catalogs of device types and of the device classes each typed
component accepts, together with the units (or states) allowed per class.
All lookups by display number are 1-based and bounds-checked; a miss is
reported as ``None`` rather than an exception so the wizard can decide how
to fail.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
import re
from types import MappingProxyType
from typing import Optional

DEVICE_TYPES: tuple[str, ...] = (
    "Binary Sensor",
    "Button",
    "Cover",
    "Event",
    "Humidifier",
    "Media player",
    "Number",
    "Sensor",
    "Switch",
    "Update",
    "Valve",
)

_ENERGY_UNITS = (
    "J", "kJ", "MJ", "GJ", "mWh", "Wh", "kWh", "MWh", "GWh", "TWh",
    "cal", "kcal", "Mcal", "Gcal",
)
_VOLUME_UNITS = ("L", "mL", "gal", "fl. oz.", "m³", "ft³", "CCF")
_MICROGRAMS = ("µg/m³",)
_ON_OFF = ("on_off",)
_PLAIN_NUMBER = re.compile(r"[0-9]+")


def select_by_number(options: Sequence[str], choice: str) -> Optional[str]:
    """Return ``options[choice - 1]`` for a 1-based numeric answer.

    Non-numeric input, zero, negative numbers and numbers past the end of
    ``options`` all yield ``None``.
    """
    if not isinstance(choice, str):
        return None
    text = choice.strip()
    # ASCII digits only: int() would also take "+3", "1_0" and non-Latin digits
    if not _PLAIN_NUMBER.fullmatch(text):
        return None
    number = int(text)
    if 1 <= number <= len(options):
        return options[number - 1]
    return None


def lookup_device_type(choice: str) -> Optional[str]:
    """Resolve a device type display number to its label."""
    return select_by_number(DEVICE_TYPES, choice)


class ClassCatalog(Mapping[str, tuple[str, ...]]):
    """Read-only ordered mapping of class name to allowed units or states."""

    def __init__(self, label: str, entries: Mapping[str, Sequence[str]]):
        self.label = label
        self._entries = MappingProxyType(
            {name: tuple(values) for name, values in entries.items()}
        )
        self._names = tuple(self._entries)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ClassCatalog({self.label!r}, {len(self)} classes)"

    def names(self) -> tuple[str, ...]:
        return self._names

    def options(self, name: str) -> tuple[str, ...]:
        return self._entries[name]

    def by_number(self, choice: str) -> Optional[str]:
        """Class name for a 1-based display number, or None."""
        return select_by_number(self._names, choice)


SENSOR_CLASSES = ClassCatalog(
    "sensor",
    {
        "apparent_power": ("VA",),
        "aqi": ("unitless",),
        "area": ("m²", "cm²", "km²", "mm²", "in²", "ft²", "yd²", "mi²", "ac", "ha"),
        "atmospheric_pressure": (
            "cbar", "bar", "hPa", "mmHg", "inHg", "kPa", "mbar", "Pa", "psi",
        ),
        "battery": ("%",),
        "blood_glucose_concentration": ("mg/dL", "mmol/L"),
        "carbon_dioxide": ("ppm",),
        "carbon_monoxide": ("ppm",),
        "current": ("A", "mA"),
        "data_rate": (
            "bit/s", "kbit/s", "Mbit/s", "Gbit/s", "B/s", "kB/s", "MB/s",
            "GB/s", "KiB/s", "MiB/s", "GiB/s",
        ),
        "data_size": (
            "bit", "kbit", "Mbit", "Gbit", "B", "kB", "MB", "GB", "TB", "PB",
            "EB", "ZB", "YB", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB",
            "YiB",
        ),
        "date": ("ISO 8601",),
        "distance": ("km", "m", "cm", "mm", "mi", "nmi", "yd", "in"),
        "duration": ("d", "h", "min", "s", "ms"),
        "energy": _ENERGY_UNITS,
        "energy_storage": _ENERGY_UNITS,
        "enum": ("non-numeric states",),
        "frequency": ("Hz", "kHz", "MHz", "GHz"),
        "gas": ("m³", "ft³", "CCF"),
        "humidity": ("%",),
        "illuminance": ("lx",),
        "irradiance": ("W/m²", "BTU/(h⋅ft²)"),
        "moisture": ("%",),
        "monetary": ("ISO 4217",),
        "nitrogen_dioxide": _MICROGRAMS,
        "nitrogen_monoxide": _MICROGRAMS,
        "nitrous_oxide": _MICROGRAMS,
        "ozone": _MICROGRAMS,
        "ph": ("pH",),
        "pm1": _MICROGRAMS,
        "pm25": _MICROGRAMS,
        "pm10": _MICROGRAMS,
        "power_factor": ("unitless", "%"),
        "power": ("mW", "W", "kW", "MW", "GW", "TW"),
        "precipitation": ("cm", "in", "mm"),
        "precipitation_intensity": ("in/d", "in/h", "mm/d", "mm/h"),
        "pressure": ("Pa", "kPa", "hPa", "bar", "cbar", "mbar", "mmHg", "inHg", "psi"),
        "reactive_power": ("var",),
        "signal_strength": ("dB", "dBm"),
        "sound_pressure": ("dB", "dBA"),
        "speed": (
            "ft/s", "in/d", "in/h", "in/s", "km/h", "kn", "m/s", "mph", "mm/d",
            "mm/s",
        ),
        "sulphur_dioxide": _MICROGRAMS,
        "temperature": ("°C", "°F", "K"),
        "timestamp": ("ISO 8601",),
        "volatile_organic_compounds": _MICROGRAMS,
        "volatile_organic_compounds_parts": ("ppm", "ppb"),
        "voltage": ("V", "mV", "µV"),
        "volume": _VOLUME_UNITS,
        "volume_flow_rate": ("m³/h", "ft³/min", "L/min", "gal/min", "mL/s"),
        "volume_storage": _VOLUME_UNITS,
        "water": ("L", "gal", "m³", "ft³", "CCF"),
        "weight": ("kg", "g", "mg", "µg", "oz", "lb", "st"),
        "wind_speed": ("Beaufort", "ft/s", "km/h", "kn", "m/s", "mph"),
    },
)

BINARY_SENSOR_CLASSES = ClassCatalog(
    "binary sensor",
    {
        name: _ON_OFF
        for name in (
            "none",
            "battery",
            "battery_charging",
            "carbon_monoxide",
            "cold",
            "connectivity",
            "door",
            "garage_door",
            "gas",
            "heat",
            "light",
            "lock",
            "moisture",
            "motion",
            "moving",
            "occupancy",
            "opening",
            "plug",
            "power",
            "presence",
            "problem",
            "running",
            "safety",
            "smoke",
            "sound",
            "tamper",
            "update",
            "vibration",
            "window",
        )
    },
)

# "None" is capitalised on purpose: it is emitted verbatim as dev_cla.
BUTTON_CLASSES = ClassCatalog(
    "button",
    {name: _ON_OFF for name in ("None", "identify", "restart", "update")},
)

_CLASS_CATALOGS: dict[str, ClassCatalog] = {
    "Sensor": SENSOR_CLASSES,
    "Binary Sensor": BINARY_SENSOR_CLASSES,
    "Button": BUTTON_CLASSES,
}

# CLI names for the ``catalog`` command
CATALOGS_BY_KEY: dict[str, ClassCatalog] = {
    "sensor": SENSOR_CLASSES,
    "binary_sensor": BINARY_SENSOR_CLASSES,
    "button": BUTTON_CLASSES,
}


def catalog_for(device_type: str) -> Optional[ClassCatalog]:
    """Class catalog used by ``device_type``; None when it takes no class."""
    return _CLASS_CATALOGS.get(device_type)


__all__ = [
    "BINARY_SENSOR_CLASSES",
    "BUTTON_CLASSES",
    "CATALOGS_BY_KEY",
    "DEVICE_TYPES",
    "SENSOR_CLASSES",
    "ClassCatalog",
    "catalog_for",
    "lookup_device_type",
    "select_by_number",
]
