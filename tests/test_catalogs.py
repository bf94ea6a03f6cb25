"""Tests for the static reference tables and numbered lookups."""

import pytest

from ha_config_wizard.catalogs import (
    BINARY_SENSOR_CLASSES,
    BUTTON_CLASSES,
    CATALOGS_BY_KEY,
    DEVICE_TYPES,
    SENSOR_CLASSES,
    catalog_for,
    lookup_device_type,
    select_by_number,
)

EXPECTED_TYPES = [
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
]


class TestDeviceTypes:
    @pytest.mark.parametrize("number,label", list(enumerate(EXPECTED_TYPES, start=1)))
    def test_every_number_resolves(self, number, label):
        assert lookup_device_type(str(number)) == label

    @pytest.mark.parametrize(
        "choice", ["0", "12", "-1", "abc", "", "3.5", "1e1", "1_0", "+3", "\u0663", "0x3"]
    )
    def test_invalid_choice_not_found(self, choice):
        assert lookup_device_type(choice) is None

    def test_surrounding_whitespace_ignored(self):
        assert lookup_device_type(" 8 ") == "Sensor"

    def test_catalog_is_immutable_tuple(self):
        assert isinstance(DEVICE_TYPES, tuple)
        assert list(DEVICE_TYPES) == EXPECTED_TYPES


class TestClassCatalogs:
    def test_sizes(self):
        assert len(SENSOR_CLASSES) == 53
        assert len(BINARY_SENSOR_CLASSES) == 29
        assert len(BUTTON_CLASSES) == 4

    def test_sensor_units(self):
        assert SENSOR_CLASSES["temperature"] == ("°C", "°F", "K")
        assert SENSOR_CLASSES.options("date") == ("ISO 8601",)
        assert SENSOR_CLASSES.options("monetary") == ("ISO 4217",)
        assert SENSOR_CLASSES.options("enum") == ("non-numeric states",)
        assert SENSOR_CLASSES.options("power_factor") == ("unitless", "%")

    def test_order_preserved(self):
        names = SENSOR_CLASSES.names()
        assert names[0] == "apparent_power"
        assert names[-1] == "wind_speed"
        assert BINARY_SENSOR_CLASSES.names()[0] == "none"
        assert BUTTON_CLASSES.names() == ("None", "identify", "restart", "update")

    def test_binary_and_button_classes_are_on_off(self):
        for catalog in (BINARY_SENSOR_CLASSES, BUTTON_CLASSES):
            assert all(catalog[name] == ("on_off",) for name in catalog)

    def test_by_number(self):
        assert SENSOR_CLASSES.by_number("1") == "apparent_power"
        assert BUTTON_CLASSES.by_number("4") == "update"
        assert BUTTON_CLASSES.by_number("5") is None
        assert BINARY_SENSOR_CLASSES.by_number("0") is None
        assert BINARY_SENSOR_CLASSES.by_number("door") is None

    def test_catalog_cannot_be_mutated(self):
        with pytest.raises(TypeError):
            SENSOR_CLASSES["new_class"] = ("x",)  # type: ignore[index]

    def test_catalog_for(self):
        assert catalog_for("Sensor") is SENSOR_CLASSES
        assert catalog_for("Binary Sensor") is BINARY_SENSOR_CLASSES
        assert catalog_for("Button") is BUTTON_CLASSES
        assert catalog_for("Cover") is None

    def test_cli_keys(self):
        assert set(CATALOGS_BY_KEY) == {"sensor", "binary_sensor", "button"}


def test_select_by_number_bounds():
    options = ("a", "b")
    assert select_by_number(options, "1") == "a"
    assert select_by_number(options, "2") == "b"
    assert select_by_number(options, "3") is None
    assert select_by_number((), "1") is None


def test_select_by_number_rejects_non_plain_digits():
    options = tuple("abcdefghijk")
    assert select_by_number(options, "10") == "j"
    assert select_by_number(options, "010") == "j"
    assert select_by_number(options, "1_0") is None
    assert select_by_number(options, "+3") is None
    assert select_by_number(options, "٣") is None  # Arabic-Indic three
