"""Command-line interface for shortcode2blocks.

This module provides the ``shortcode2blocks`` console script: it converts
page-builder shortcode documents into block markup, inventories shortcode
usage, dumps the parsed AST and lists the known tag catalog.

Configuration Files
-------------------
Conversion options are read from the first config file found walking up
from the working directory (``.shortcode2blocks.toml``, ``.yaml``, ``.yml``,
``.json``, or a ``[tool.shortcode2blocks]`` table in ``pyproject.toml``),
from ``--config PATH``, or from the path in ``SHORTCODE2BLOCKS_CONFIG``.
Command-line flags always override config values.

Examples
--------
Convert a post export::

    $ shortcode2blocks convert post.txt --out post.html --css-out post.css

Convert several posts with consecutive document ids::

    $ shortcode2blocks convert posts/*.txt --output-dir ./blocks --document-id 100

Inventory shortcode usage::

    $ shortcode2blocks analyze posts/*.txt
    $ shortcode2blocks analyze posts/*.txt --json

Inspect the parsed tree::

    $ shortcode2blocks parse post.txt

"""

import argparse
import logging
import os
import sys
from dataclasses import fields
from typing import Any

from shortcode2blocks import __version__
from shortcode2blocks.cli.commands import (
    EXIT_VALIDATION_ERROR,
    dispatch_command,
    get_exit_code_for_exception,
)
from shortcode2blocks.cli.config import CONFIG_ENV_VAR, build_options, load_config_with_priority
from shortcode2blocks.exceptions import Shortcode2BlocksError
from shortcode2blocks.logging_utils import configure_logging
from shortcode2blocks.options import ConversionOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "add_options_arguments", "resolve_options"]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per ``ConversionOptions`` field, driven by field metadata.

    Boolean fields that default to true get a negated ``store_false`` flag
    (named by the ``cli_name`` metadata). Every flag defaults to ``None`` so
    that only flags actually given override config values.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser (or subparser) to extend

    """
    group = parser.add_argument_group("conversion options")
    for field in fields(ConversionOptions):
        metadata = field.metadata
        cli_name = "--" + metadata.get("cli_name", field.name.replace("_", "-"))
        kwargs: dict[str, Any] = {"dest": field.name, "default": None}

        help_text = metadata.get("help", "")
        if isinstance(field.default, bool):
            kwargs["action"] = "store_false" if field.default else "store_true"
        else:
            if "choices" in metadata:
                kwargs["choices"] = metadata["choices"]
            help_text = f"{help_text} (default: {field.default})"
        kwargs["help"] = help_text

        group.add_argument(cli_name, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="shortcode2blocks",
        description="Convert WPBakery and Jupiter shortcodes into block editor markup.",
    )
    parser.add_argument("--version", action="version", version=f"shortcode2blocks {__version__}")
    parser.add_argument("--config", help=f"Configuration file (overrides discovery and ${CONFIG_ENV_VAR})")
    parser.add_argument("--no-config", action="store_true", help="Ignore all configuration files")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose debug logging with timestamps")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    convert_parser = subparsers.add_parser("convert", help="Convert documents to block markup")
    convert_parser.add_argument("input", nargs="+", help="Input files ('-' for stdin)")
    destination = convert_parser.add_mutually_exclusive_group()
    destination.add_argument("--out", "-o", help="Write all markup to this file (default: stdout)")
    destination.add_argument("--output-dir", help="Write one <name>.html file per input into this directory")
    convert_parser.add_argument("--css-out", help="Write the generated CSS of all documents to this file")
    convert_parser.add_argument("--fonts-out", help="Write the merged web font manifest (JSON) to this file")
    convert_parser.add_argument(
        "--document-id",
        type=_non_negative_int,
        default=0,
        help="Document id of the first input; later inputs get consecutive ids (default: 0)",
    )
    convert_parser.add_argument("--attachments", help="JSON or YAML map of attachment ids to URLs")
    add_options_arguments(convert_parser)

    analyze_parser = subparsers.add_parser("analyze", help="Count shortcode usage by tag")
    analyze_parser.add_argument("input", nargs="+", help="Input files ('-' for stdin)")
    analyze_parser.add_argument("--json", action="store_true", help="Print counts as JSON")

    parse_parser = subparsers.add_parser("parse", help="Dump the parsed shortcode tree as JSON")
    parse_parser.add_argument("input", help="Input file ('-' for stdin)")
    parse_parser.add_argument("--no-source", action="store_true", help="Omit the raw source text of each shortcode")

    tags_parser = subparsers.add_parser("tags", help="List known shortcode tags and their tiers")
    tags_parser.add_argument("--json", action="store_true", help="Print the catalog as JSON")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def resolve_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Build conversion options from the config file and command-line flags.

    Raises
    ------
    ConfigError
        If a config file cannot be loaded
    ValidationError
        If a config key is unknown or a value is invalid

    """
    if parsed_args.no_config:
        config: dict[str, Any] = {}
    else:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))

    overrides = {name: getattr(parsed_args, name, None) for name in ConversionOptions.field_names()}
    return build_options(config, overrides)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.command is None:
        parser.print_help(sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    if parsed_args.command == "convert":
        try:
            options = resolve_options(parsed_args)
        except Shortcode2BlocksError as e:
            print(f"Error: {e}", file=sys.stderr)
            return get_exit_code_for_exception(e)
    else:
        options = ConversionOptions()

    return dispatch_command(parsed_args, options)


if __name__ == "__main__":
    sys.exit(main())
