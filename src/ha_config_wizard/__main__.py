#!/usr/bin/env python3
"""
HA Config Wizard CLI.

Runs the interactive discovery config wizard, or prints the reference
catalogs it draws its choices from.
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .assembler import assemble
from .catalogs import CATALOGS_BY_KEY, DEVICE_TYPES
from .config import Config, ConfigError
from .validation_utils import validate_device_config
from .wizard import WizardError, new_session, print_document, run_wizard

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI commands."""
    parser = argparse.ArgumentParser(
        prog="ha-config-wizard",
        description="Build Home Assistant MQTT discovery configs interactively",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ha-config-wizard                          # Run the wizard (default)
  ha-config-wizard run                      # Run the wizard
  ha-config-wizard catalog                  # List device types
  ha-config-wizard catalog sensor           # List sensor classes and units
  ha-config-wizard catalog button --format json
  ha-config-wizard --config wizard.yaml run # Use custom settings
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_get_version()}"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="path to a YAML configuration file (defaults are used otherwise)",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug output")

    subparsers = parser.add_subparsers(
        dest="command", help="available commands", required=False
    )

    subparsers.add_parser("run", help="run the interactive config wizard")

    catalog_parser = subparsers.add_parser(
        "catalog", help="show device types or the classes of a device type"
    )
    catalog_parser.add_argument(
        "table",
        nargs="?",
        choices=["types", *CATALOGS_BY_KEY],
        default="types",
        help="which table to show (default: types)",
    )
    catalog_parser.add_argument(
        "--format",
        choices=["simple", "json"],
        default="simple",
        help="output format: simple (default) or json",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    try:
        from ha_config_wizard import __version__

        return __version__
    except ImportError:
        return "0.0.0-dev"


def _setup_logging(debug: bool = False) -> None:
    """Setup logging configuration."""
    # Prompts share the terminal, so only warnings surface by default.
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_config(path: Optional[str]) -> Config:
    config = Config.from_file(path) if path else Config.from_defaults()
    # Fail before the first prompt rather than after the last one
    config.validate()
    return config


def cmd_run(config: Config, args) -> int:
    """Handle the run command."""
    session = new_session(
        value_templates=config.value_templates,
        default_value_template=config.default_value_template,
    )
    try:
        answers = run_wizard(session)
    except WizardError as e:
        logging.debug("Wizard ended without a document: %r", e)
        session.say(str(e))
        return EXIT_FAILURE

    device_config, topics = assemble(answers, config.discovery_prefix)
    for problem in validate_device_config(device_config.as_payload()):
        logging.warning("Generated config looks wrong: %s", problem)

    print_document(
        session,
        device_config,
        topics,
        indent=config.output_indent,
        ensure_ascii=config.output_ensure_ascii,
    )
    return EXIT_OK


def cmd_catalog(config: Config, args) -> int:
    """Handle the catalog command."""
    if args.table == "types":
        if args.format == "json":
            print(json.dumps(list(DEVICE_TYPES), indent=config.output_indent))
        else:
            for number, device_type in enumerate(DEVICE_TYPES, start=1):
                print(f"{number}. {device_type}")
        return EXIT_OK

    catalog = CATALOGS_BY_KEY[args.table]
    if args.format == "json":
        table = {name: list(values) for name, values in catalog.items()}
        print(
            json.dumps(
                table,
                indent=config.output_indent,
                ensure_ascii=config.output_ensure_ascii,
            )
        )
    else:
        for number, name in enumerate(catalog.names(), start=1):
            print(f"{number}. {name}: {', '.join(catalog.options(name))}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Setup logging
    _setup_logging(args.debug)

    try:
        config = _load_config(args.config)

        # Route to command
        if args.command in (None, "run"):
            return cmd_run(config, args)
        elif args.command == "catalog":
            return cmd_catalog(config, args)
        else:
            print(f"❌ Unknown command: {args.command}")
            return EXIT_FAILURE

    except KeyboardInterrupt:
        print()
        return EXIT_INTERRUPTED
    except (FileNotFoundError, ConfigError) as e:
        print(f"❌ Error: {e}")
        if args.debug:
            import traceback

            traceback.print_exc()
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
