"""
HA Config Wizard - interactive builder for Home Assistant MQTT discovery configs.

Asks for a device's name, type, class, unit and registry details and prints
the discovery JSON document together with its config and state topics.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ha_config_wizard")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
]
