from ha_config_wizard.assembler import assemble
from ha_config_wizard.models import DeviceAnswers
from ha_config_wizard.validation_utils import validate_device_config


def _payload():
    answers = DeviceAnswers(name="Door1", device_type="Cover", unique_id="Door1A1B2")
    config, _ = assemble(answers)
    return config.as_payload()


def test_assembled_payload_is_valid():
    assert validate_device_config(_payload()) == []


def test_not_a_dict():
    assert validate_device_config(["x"]) == ["config: payload not dict"]


def test_missing_keys_reported():
    payload = _payload()
    del payload["stat_t"]
    del payload["unique_id"]
    errors = validate_device_config(payload)
    assert "config: missing stat_t" in errors
    assert "config: missing unique_id" in errors


def test_state_topic_must_match_unique_id():
    payload = _payload()
    payload["stat_t"] = "homeassistant/cover/other/state"
    assert validate_device_config(payload) == [
        "config: stat_t does not contain unique_id"
    ]


def test_empty_optional_device_field_flagged():
    payload = _payload()
    payload["dev"]["mf"] = ""
    assert validate_device_config(payload) == ["config: dev.mf present but empty"]


def test_unknown_device_key_flagged():
    payload = _payload()
    payload["dev"]["manufacturer"] = "Acme"
    errors = validate_device_config(payload)
    assert errors == ["config: dev has unexpected keys ['manufacturer']"]


def test_dev_ids_required():
    payload = _payload()
    payload["dev"]["ids"] = []
    assert "config: dev.ids must be a non-empty list" in validate_device_config(payload)
