#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/shortcode2blocks/cli/commands.py
"""CLI command handlers for shortcode2blocks.

Each handler takes the parsed arguments and the resolved conversion options
and returns a process exit code. Handlers raise library exceptions; the
entry point maps them to exit codes with ``get_exit_code_for_exception``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from shortcode2blocks.api import ConversionResult, analyze, convert, parse
from shortcode2blocks.ast import nodes_to_json
from shortcode2blocks.attachments import AttachmentResolver, MappingAttachmentResolver
from shortcode2blocks.catalog import KNOWN_TAGS
from shortcode2blocks.converters import DEFAULT_CONVERTERS, tag_tier, validate_registry
from shortcode2blocks.exceptions import FileError, Shortcode2BlocksError, ValidationError
from shortcode2blocks.options import ConversionOptions
from shortcode2blocks.utils.fonts import google_fonts_url, merge_font_manifests

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

STDIN_MARKER = "-"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR


def read_input(source: str) -> str:
    """Read a document from a path, or from standard input for ``-``.

    Raises
    ------
    FileError
        If the file cannot be read or decoded as UTF-8

    """
    if source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read input file {source}: {e}", file_path=source, original_error=e) from e


def write_output(path: Path, content: str) -> None:
    """Write text to ``path``, creating parent directories.

    Raises
    ------
    FileError
        If the file cannot be written

    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write output file {path}: {e}", file_path=str(path), original_error=e) from e


def _output_name(source: str) -> str:
    return "stdin.html" if source == STDIN_MARKER else f"{Path(source).stem}.html"


def handle_convert_command(parsed_args: argparse.Namespace, options: ConversionOptions) -> int:
    """Convert one or more documents.

    Documents get consecutive ids starting at ``--document-id``. Markup goes
    to stdout, ``--out`` or one file per input under ``--output-dir``; the
    CSS of all documents is concatenated and their fonts merged.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    options : ConversionOptions
        Resolved conversion options

    Returns
    -------
    int
        Exit code

    """
    resolver: AttachmentResolver | None = None
    if parsed_args.attachments:
        resolver = MappingAttachmentResolver.from_file(parsed_args.attachments)
        logger.info("Loaded %d attachments from %s", len(resolver), parsed_args.attachments)

    documents: list[tuple[str, ConversionResult, bool]] = []
    for offset, source in enumerate(parsed_args.input):
        text = read_input(source)
        document_id = parsed_args.document_id + offset
        result = convert(text, document_id, options=options, attachment_resolver=resolver)
        skipped = result.markup == text
        if skipped:
            logger.info("Skipped %s: no shortcodes found", source)
        else:
            logger.info("Converted %s as document %d", source, document_id)
        documents.append((source, result, skipped))

    if parsed_args.output_dir:
        output_dir = Path(parsed_args.output_dir)
        for source, result, _ in documents:
            write_output(output_dir / _output_name(source), result.markup)
    elif parsed_args.out:
        write_output(Path(parsed_args.out), "\n".join(result.markup for _, result, _ in documents))
    else:
        sys.stdout.write("\n".join(result.markup for _, result, _ in documents))

    if parsed_args.css_out:
        css = "\n".join(result.css for _, result, _ in documents if result.css)
        write_output(Path(parsed_args.css_out), f"{css}\n" if css else "")

    if parsed_args.fonts_out:
        fonts: dict[str, list[str]] = {}
        for _, result, _ in documents:
            merge_font_manifests(fonts, result.fonts)
        manifest = {"families": fonts, "url": google_fonts_url(fonts)}
        write_output(Path(parsed_args.fonts_out), json.dumps(manifest, indent=2) + "\n")

    skipped_count = sum(1 for _, _, skipped in documents if skipped)
    console = Console(stderr=True)
    console.print(
        f"[green]Converted {len(documents) - skipped_count} document(s)[/green], "
        f"skipped {skipped_count} without shortcodes"
    )
    return EXIT_SUCCESS


def collect_tag_counts(sources: list[str]) -> dict[str, int]:
    """Sum tag counts over several documents, ordered by descending count."""
    totals: Counter[str] = Counter()
    for source in sources:
        totals.update(analyze(read_input(source)))
    return dict(totals.most_common())


def handle_analyze_command(parsed_args: argparse.Namespace, options: ConversionOptions) -> int:
    """Print a tag inventory of the inputs as a table or JSON."""
    counts = collect_tag_counts(parsed_args.input)

    if parsed_args.json:
        print(json.dumps(counts, indent=2))
        return EXIT_SUCCESS

    console = Console()
    if not counts:
        console.print("[yellow]No shortcodes found[/yellow]")
        return EXIT_SUCCESS

    table = Table(title=f"Shortcode Inventory ({sum(counts.values())} occurrences)")
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Count", style="yellow", justify="right")
    table.add_column("Tier", style="magenta")
    for tag, count in counts.items():
        tier = tag_tier(tag)
        style = "green" if tier == "convertible" else "white"
        table.add_row(tag, str(count), f"[{style}]{tier}[/{style}]")
    console.print(table)
    return EXIT_SUCCESS


def handle_parse_command(parsed_args: argparse.Namespace, options: ConversionOptions) -> int:
    """Dump the AST of a document as JSON."""
    nodes = parse(read_input(parsed_args.input))
    print(nodes_to_json(nodes, include_source=not parsed_args.no_source))
    return EXIT_SUCCESS


def catalog_rows() -> list[dict[str, Any]]:
    """Describe every known tag with its tier and converter family."""
    owners = validate_registry(DEFAULT_CONVERTERS)
    rows = []
    for tag in KNOWN_TAGS:
        converter_class = owners.get(tag)
        rows.append(
            {
                "tag": tag,
                "tier": tag_tier(tag),
                "converter": converter_class.__name__ if converter_class else None,
            }
        )
    return rows


def handle_tags_command(parsed_args: argparse.Namespace, options: ConversionOptions) -> int:
    """List the known tag catalog with tiers."""
    rows = catalog_rows()

    if parsed_args.json:
        print(json.dumps(rows, indent=2))
        return EXIT_SUCCESS

    table = Table(title=f"Known Shortcode Tags ({len(rows)})")
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Tier", style="magenta")
    table.add_column("Converter", style="white")
    for row in rows:
        table.add_row(row["tag"], row["tier"], row["converter"] or "-")
    Console().print(table)
    return EXIT_SUCCESS


COMMAND_HANDLERS = {
    "convert": handle_convert_command,
    "analyze": handle_analyze_command,
    "parse": handle_parse_command,
    "tags": handle_tags_command,
}


def dispatch_command(parsed_args: argparse.Namespace, options: ConversionOptions) -> int:
    """Run the handler for ``parsed_args.command`` and map failures to exit codes."""
    handler = COMMAND_HANDLERS[parsed_args.command]
    try:
        return handler(parsed_args, options)
    except Shortcode2BlocksError as e:
        logger.debug("Command %s failed", parsed_args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "get_exit_code_for_exception",
    "read_input",
    "write_output",
    "collect_tag_counts",
    "catalog_rows",
    "dispatch_command",
    "handle_convert_command",
    "handle_analyze_command",
    "handle_parse_command",
    "handle_tags_command",
]
