"""Interactive question/answer flow that fills in :class:`DeviceAnswers`.

Each step reads from and writes to the streams held by a
:class:`WizardSession`. Invalid selections raise
:class:`InvalidSelectionError`; the caller decides how to report them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
import json
import logging
import sys
from typing import Optional, TextIO

from .catalogs import (
    DEVICE_TYPES,
    ClassCatalog,
    catalog_for,
    lookup_device_type,
    select_by_number,
)
from .identifiers import generate_unique_id
from .models import (
    DEFAULT_VALUE_TEMPLATE,
    SENSOR_VALUE_TEMPLATES,
    DeviceAnswers,
    DeviceConfig,
    Topics,
)

logger = logging.getLogger(__name__)

WELCOME = "Welcome to the Home Assistant JSON Config Generator!"

# (attribute on DeviceMetadata, prompt)
METADATA_PROMPTS: tuple[tuple[str, str], ...] = (
    ("manufacturer", "Enter the manufacturer (optional): "),
    ("model", "Enter the model (optional): "),
    ("model_id", "Enter the model ID (optional): "),
    ("serial_number", "Enter the serial number (optional): "),
    ("hw_version", "Enter the hardware version (optional): "),
    ("sw_version", "Enter the software version (optional): "),
    (
        "configuration_url",
        "Enter the configuration URL !!!!Must be a valid address!!!! (optional): ",
    ),
)


class WizardError(Exception):
    """Base class for errors that end a wizard run without a document."""


class InvalidSelectionError(WizardError):
    """A numbered choice did not match any listed option."""

    def __init__(self, category: str, choice: str = ""):
        self.category = category
        self.choice = choice
        super().__init__(f"Invalid {category}.")


class WizardAborted(WizardError):
    """Input ended while a question was waiting for an answer."""

    def __init__(self, prompt: str = ""):
        self.prompt = prompt
        super().__init__("Input closed before the configuration was complete.")


@dataclass
class WizardSession:
    """State for one run: the answers so far plus the console streams."""

    input_stream: TextIO = field(default_factory=lambda: sys.stdin)
    output_stream: TextIO = field(default_factory=lambda: sys.stdout)
    answers: DeviceAnswers = field(default_factory=DeviceAnswers)
    default_value_template: str = DEFAULT_VALUE_TEMPLATE
    value_templates: Mapping[str, str] = field(
        default_factory=lambda: dict(SENSOR_VALUE_TEMPLATES)
    )

    def say(self, text: str = "") -> None:
        print(text, file=self.output_stream)

    def ask(self, prompt: str) -> str:
        """Write ``prompt`` and return one line of input without its newline."""
        self.output_stream.write(prompt)
        self.output_stream.flush()
        line = self.input_stream.readline()
        if not line:
            raise WizardAborted(prompt)
        return line.rstrip("\r\n")

    def show_options(self, heading: str, options: Sequence[str]) -> None:
        self.say(heading)
        for number, option in enumerate(options, start=1):
            self.say(f"{number}. {option}")


def ask_name(session: WizardSession) -> None:
    session.answers.name = session.ask("Enter the device name: ")


def ask_device_type(session: WizardSession) -> None:
    session.show_options(
        "\nPick a device type from the list (number corresponds to device type):",
        DEVICE_TYPES,
    )
    choice = session.ask("\nEnter the number corresponding to the device type: ")
    device_type = lookup_device_type(choice)
    if device_type is None:
        raise InvalidSelectionError("device type", choice)
    session.answers.device_type = device_type
    logger.debug("Device type %r selected", device_type)


def _ask_class(
    session: WizardSession, heading: str, prompt: str
) -> tuple[ClassCatalog, str]:
    catalog = catalog_for(session.answers.device_type)
    if catalog is None:
        raise ValueError(f"{session.answers.device_type!r} takes no device class")
    session.show_options(heading, catalog.names())
    choice = session.ask(prompt)
    device_class = catalog.by_number(choice)
    if device_class is None:
        raise InvalidSelectionError(f"{catalog.label} class", choice)
    session.answers.device_class = device_class
    logger.debug("%s class %r selected", catalog.label, device_class)
    return catalog, device_class


def ask_sensor_class(session: WizardSession) -> None:
    """Sensor class, then its unit, then the matching value template."""
    catalog, sensor_class = _ask_class(
        session,
        "\nChoose a device class from the following options:",
        "\nEnter the number corresponding to the sensor class: ",
    )

    units = catalog.options(sensor_class)
    session.show_options(f"\nChoose a unit of measurement for {sensor_class}:", units)
    choice = session.ask(
        "\nEnter the number corresponding to the unit of measurement: "
    )
    unit = select_by_number(units, choice)
    if unit is None:
        raise InvalidSelectionError("unit of measurement", choice)
    session.answers.unit = unit

    session.answers.value_template = session.value_templates.get(
        sensor_class, session.default_value_template
    )


def ask_binary_sensor_class(session: WizardSession) -> None:
    catalog, binary_class = _ask_class(
        session,
        "\nChoose a binary sensor class from the following options:",
        "\nEnter the number corresponding to the binary sensor class: ",
    )

    states = catalog.options(binary_class)
    session.show_options(f"\nChoose a state for {binary_class}:", states)
    choice = session.ask("\nEnter the number corresponding to the state (on/off): ")
    state = select_by_number(states, choice)
    if state is None:
        raise InvalidSelectionError("binary sensor state", choice)
    session.answers.state = state
    session.answers.value_template = session.default_value_template


def ask_button_class(session: WizardSession) -> None:
    _ask_class(
        session,
        "\nChoose a button class from the following options:",
        "\nEnter the number corresponding to the button class: ",
    )
    session.answers.value_template = session.default_value_template


CLASS_STEPS = {
    "Sensor": ask_sensor_class,
    "Binary Sensor": ask_binary_sensor_class,
    "Button": ask_button_class,
}


def ask_unique_id(session: WizardSession) -> None:
    choice = session.ask("Do you want to enter a unique ID manually? (yes/no): ")
    if choice.strip().lower() == "yes":
        session.answers.unique_id = session.ask("Enter the unique ID: ")
    else:
        session.answers.unique_id = generate_unique_id(session.answers.name)


def ask_metadata(session: WizardSession) -> None:
    """Optional device details; empty answers are left unset."""
    metadata = session.answers.metadata
    for attr, prompt in METADATA_PROMPTS:
        value = session.ask(prompt)
        setattr(metadata, attr, value or None)


def run_wizard(session: WizardSession) -> DeviceAnswers:
    """Run every step in order and return the completed answers."""
    session.say(WELCOME)
    ask_name(session)
    ask_device_type(session)

    session.answers.value_template = session.default_value_template
    class_step = CLASS_STEPS.get(session.answers.device_type)
    if class_step is not None:
        class_step(session)

    ask_unique_id(session)
    ask_metadata(session)
    logger.debug("Wizard answers complete: %s", session.answers)
    return session.answers


def print_document(
    session: WizardSession,
    config: DeviceConfig,
    topics: Topics,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> None:
    """Print the payload, config topic and state topic as JSON."""
    session.say("\nGenerated JSON Config:")
    session.say(
        json.dumps(config.as_payload(), indent=indent, ensure_ascii=ensure_ascii)
    )

    session.say("\nGenerated Configuration Topic:")
    session.say(json.dumps(topics.config_topic, ensure_ascii=ensure_ascii))

    session.say("\nGenerated Device State Update Topic:")
    session.say(json.dumps(topics.state_topic, ensure_ascii=ensure_ascii))


def new_session(
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None,
    value_templates: Optional[Mapping[str, str]] = None,
    default_value_template: str = DEFAULT_VALUE_TEMPLATE,
) -> WizardSession:
    """Build a session; unspecified streams fall back to stdin/stdout."""
    return WizardSession(
        input_stream=input_stream if input_stream is not None else sys.stdin,
        output_stream=output_stream if output_stream is not None else sys.stdout,
        value_templates=dict(
            SENSOR_VALUE_TEMPLATES if value_templates is None else value_templates
        ),
        default_value_template=default_value_template,
    )


__all__ = [
    "InvalidSelectionError",
    "WizardAborted",
    "WizardError",
    "WizardSession",
    "new_session",
    "print_document",
    "run_wizard",
]
