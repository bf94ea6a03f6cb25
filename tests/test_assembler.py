"""Tests for folding wizard answers into the discovery document."""

from ha_config_wizard.assembler import assemble, build_topics
from ha_config_wizard.models import DeviceAnswers, DeviceMetadata


def _answers(**overrides) -> DeviceAnswers:
    answers = DeviceAnswers(name="Lamp", device_type="Sensor", unique_id="ABCD1234")
    for key, value in overrides.items():
        setattr(answers, key, value)
    return answers


class TestBuildTopics:
    def test_sensor_topics(self):
        topics = build_topics("Sensor", "ABCD1234")
        assert topics.config_topic == "homeassistant/sensor/ABCD1234/config"
        assert topics.state_topic == "homeassistant/sensor/ABCD1234/state"

    def test_space_in_device_type_is_kept(self):
        topics = build_topics("Media player", "tv1")
        assert topics.config_topic == "homeassistant/media player/tv1/config"

    def test_custom_prefix(self):
        topics = build_topics("Binary Sensor", "x", discovery_prefix="ha")
        assert topics.state_topic == "ha/binary sensor/x/state"


class TestAssemble:
    def test_full_sensor_payload(self):
        config, topics = assemble(
            _answers(
                device_class="temperature",
                unit="°C",
                value_template="{{ value_json.temperature }}",
            )
        )
        assert config.as_payload() == {
            "dev_cla": "temperature",
            "unit_of_meas": "°C",
            "val_tpl": "{{ value_json.temperature }}",
            "stat_t": "homeassistant/sensor/ABCD1234/state",
            "unique_id": "ABCD1234",
            "dev": {"name": "Lamp", "ids": ["Lamp"]},
        }
        assert topics.config_topic == "homeassistant/sensor/ABCD1234/config"
        assert config.state_topic == topics.state_topic

    def test_missing_class_and_unit(self):
        config, _ = assemble(_answers(device_type="Switch"))
        payload = config.as_payload()
        assert "dev_cla" not in payload
        assert payload["unit_of_meas"] == "None"
        assert payload["val_tpl"] == "{{ value_json.value }}"

    def test_key_order(self):
        config, _ = assemble(_answers(device_class="battery", unit="%"))
        assert list(config.as_payload()) == [
            "dev_cla",
            "unit_of_meas",
            "val_tpl",
            "stat_t",
            "unique_id",
            "dev",
        ]

    def test_metadata_present_fields_only(self):
        metadata = DeviceMetadata(
            manufacturer="Acme",
            model="",
            serial_number="SN-1",
            sw_version="1.2.3",
            configuration_url="http://lamp.local",
        )
        config, _ = assemble(_answers(metadata=metadata))
        assert config.as_payload()["dev"] == {
            "name": "Lamp",
            "ids": ["Lamp"],
            "mf": "Acme",
            "sn": "SN-1",
            "sw": "1.2.3",
            "cu": "http://lamp.local",
        }

    def test_all_metadata_keys_in_order(self):
        metadata = DeviceMetadata("mf", "mdl", "mdl_id", "sn", "hw", "sw", "cu")
        config, _ = assemble(_answers(metadata=metadata))
        dev = config.as_payload()["dev"]
        assert list(dev) == ["name", "ids", "mf", "mdl", "mdl_id", "sn", "hw", "sw", "cu"]
        assert all(dev[key] == key for key in list(dev)[2:])

    def test_assemble_is_pure(self):
        answers = _answers(device_class="door")
        first, _ = assemble(answers)
        second, _ = assemble(answers)
        assert first == second
        assert answers.unique_id == "ABCD1234"


def test_built_config_unaffected_by_later_answer_changes():
    answers = _answers(device_type="Cover")
    config, _ = assemble(answers)
    before = config.as_payload()

    answers.metadata.manufacturer = "Mutated"
    answers.name = "Other"

    assert config.as_payload() == before
    assert config.as_payload()["dev"] == {"name": "Lamp", "ids": ["Lamp"]}
