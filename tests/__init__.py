"""Test suite for ha_config_wizard."""
