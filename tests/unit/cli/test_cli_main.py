#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_main.py
"""Unit tests for the command-line parser and entry point."""

import pytest

from shortcode2blocks.cli import create_parser, main, resolve_options
from shortcode2blocks.cli.commands import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_VALIDATION_ERROR,
    catalog_rows,
    get_exit_code_for_exception,
)
from shortcode2blocks.exceptions import (
    ConfigError,
    ConverterRegistryError,
    FileError,
    InvalidOptionsError,
    Shortcode2BlocksError,
    ValidationError,
)
from shortcode2blocks.options import ConversionOptions


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parsing."""

    def test_convert_defaults(self):
        args = create_parser().parse_args(["convert", "post.txt"])
        assert args.command == "convert"
        assert args.input == ["post.txt"]
        assert args.document_id == 0
        assert args.out is None and args.output_dir is None
        assert all(getattr(args, name) is None for name in ConversionOptions.field_names())

    def test_option_flags(self):
        args = create_parser().parse_args(
            [
                "convert",
                "a.txt",
                "b.txt",
                "--class-prefix",
                "site",
                "--paragraph-html-mode",
                "escape",
                "--no-text-separator-title",
                "--document-id",
                "10",
            ]
        )
        assert args.input == ["a.txt", "b.txt"]
        assert args.class_prefix == "site"
        assert args.paragraph_html_mode == "escape"
        assert args.include_text_separator_title is False
        assert args.document_id == 10

    def test_invalid_choice(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["convert", "a.txt", "--paragraph-html-mode", "shout"])

    def test_negative_document_id(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["convert", "a.txt", "--document-id", "-1"])

    def test_out_and_output_dir_exclusive(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["convert", "a.txt", "--out", "x.html", "--output-dir", "out"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "shortcode2blocks 1.0.0" in capsys.readouterr().out

    def test_help_lists_option_defaults(self, capsys, monkeypatch):
        monkeypatch.setenv("COLUMNS", "200")
        with pytest.raises(SystemExit):
            create_parser().parse_args(["convert", "--help"])
        out = capsys.readouterr().out
        assert "--class-prefix" in out
        assert "(default: dtg)" in out


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (InvalidOptionsError("X", int, str), EXIT_VALIDATION_ERROR),
            (FileError("missing"), EXIT_FILE_ERROR),
            (ConfigError("broken"), EXIT_FILE_ERROR),
            (ConverterRegistryError("dup"), EXIT_ERROR),
            (Shortcode2BlocksError("other"), EXIT_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, code):
        assert get_exit_code_for_exception(error) == code

    def test_no_command(self, capsys):
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "usage:" in capsys.readouterr().err

    def test_missing_input_file(self, isolated_cwd, capsys):
        assert main(["convert", "missing.txt"]) == EXIT_FILE_ERROR
        assert "Error: Cannot read input file missing.txt" in capsys.readouterr().err

    def test_missing_config_file(self, isolated_cwd, capsys):
        (isolated_cwd / "post.txt").write_text("[vc_row][/vc_row]", encoding="utf-8")
        assert main(["--config", "nope.toml", "convert", "post.txt"]) == EXIT_FILE_ERROR
        assert "Configuration file does not exist" in capsys.readouterr().err

    def test_unknown_config_key(self, isolated_cwd, capsys):
        (isolated_cwd / ".shortcode2blocks.json").write_text('{"colour": "red"}', encoding="utf-8")
        (isolated_cwd / "post.txt").write_text("[vc_row][/vc_row]", encoding="utf-8")
        assert main(["convert", "post.txt"]) == EXIT_VALIDATION_ERROR
        assert "Unknown option 'colour'" in capsys.readouterr().err

    def test_broken_config_does_not_affect_tags(self, isolated_cwd, capsys):
        (isolated_cwd / ".shortcode2blocks.json").write_text("{broken", encoding="utf-8")
        assert main(["tags", "--json"]) == 0


@pytest.mark.unit
@pytest.mark.cli
class TestResolveOptions:
    """Test option resolution from config and flags."""

    def test_no_config(self, isolated_cwd):
        (isolated_cwd / ".shortcode2blocks.toml").write_text('class_prefix = "cfg"\n', encoding="utf-8")
        args = create_parser().parse_args(["--no-config", "convert", "x.txt"])
        assert resolve_options(args).class_prefix == "dtg"

    def test_flags_override_config(self, isolated_cwd):
        (isolated_cwd / ".shortcode2blocks.toml").write_text(
            'class_prefix = "cfg"\ndefault_spacer_height = "10px"\n', encoding="utf-8"
        )
        args = create_parser().parse_args(["convert", "x.txt", "--class-prefix", "flag"])
        options = resolve_options(args)
        assert options.class_prefix == "flag"
        assert options.default_spacer_height == "10px"

    def test_env_var_config(self, isolated_cwd, monkeypatch):
        config = isolated_cwd / "elsewhere.yaml"
        config.write_text("responsive_breakpoint: 600px\n", encoding="utf-8")
        monkeypatch.setenv("SHORTCODE2BLOCKS_CONFIG", str(config))
        args = create_parser().parse_args(["convert", "x.txt"])
        assert resolve_options(args).responsive_breakpoint == "600px"


@pytest.mark.unit
@pytest.mark.cli
def test_catalog_rows():
    rows = {row["tag"]: row for row in catalog_rows()}
    assert rows["vc_row"] == {"tag": "vc_row", "tier": "convertible", "converter": "LayoutConverter"}
    assert rows["vc_gallery"] == {"tag": "vc_gallery", "tier": "pass-through", "converter": None}
