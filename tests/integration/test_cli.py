"""
Integration tests for the CLI via Typer's CliRunner.

CliRunner invokes the command programmatically without spawning a
subprocess. Real temporary files are used so the whole path from
argument parsing through file loading to stdout is exercised; only
the "no filesystem access" checks patch the orchestrator.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from minigrep.cli.main import app

runner = CliRunner()

pytestmark = pytest.mark.integration


# -----------------------------------------------------------------------
# Root app and version
# -----------------------------------------------------------------------


class TestRootApp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "QUERY" in result.output
        assert "FILENAME" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "minigrep" in result.output


# -----------------------------------------------------------------------
# Successful searches
# -----------------------------------------------------------------------


class TestSearch:
    def test_prints_matching_line(self, poem_file):
        result = runner.invoke(app, ["frog", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout == "How public, like a frog\n"

    def test_multiple_matches_in_order(self, poem_file):
        result = runner.invoke(app, ["body", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "I'm nobody! Who are you?",
            "Are you nobody, too?",
            "How dreary to be somebody!",
        ]

    def test_zero_matches_exit_zero(self, poem_file):
        result = runner.invoke(app, ["xylophone", str(poem_file)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_case_sensitive_by_default(self, tmp_path, rust_text):
        path = tmp_path / "rust.txt"
        path.write_text(rust_text, encoding="utf-8")
        result = runner.invoke(app, ["rUsT", str(path)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_case_insensitive_env(self, tmp_path, rust_text):
        path = tmp_path / "rust.txt"
        path.write_text(rust_text, encoding="utf-8")
        result = runner.invoke(app, ["rUsT", str(path)], env={"CASE_INSENSITIVE": "1"})
        assert result.exit_code == 0
        assert result.stdout == "Rust:\n"

    def test_empty_case_insensitive_env_is_sensitive(self, tmp_path, rust_text):
        path = tmp_path / "rust.txt"
        path.write_text(rust_text, encoding="utf-8")
        result = runner.invoke(app, ["rUsT", str(path)], env={"CASE_INSENSITIVE": ""})
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_query_starting_with_dash(self, tmp_path):
        path = tmp_path / "flags.txt"
        path.write_text("grep -v pattern\nplain\n", encoding="utf-8")
        result = runner.invoke(app, ["-v", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "grep -v pattern\n"

    def test_long_option_like_query(self, tmp_path):
        path = tmp_path / "flags.txt"
        path.write_text("run --level=3\nplain\n", encoding="utf-8")
        result = runner.invoke(app, ["--level=3", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "run --level=3\n"

    def test_extra_arguments_ignored(self, poem_file):
        result = runner.invoke(app, ["frog", str(poem_file), "extra", "more"])
        assert result.exit_code == 0
        assert result.stdout == "How public, like a frog\n"

    def test_lone_carriage_return_kept_in_line(self, tmp_path):
        path = tmp_path / "cr.txt"
        path.write_bytes(b"alpha\rbeta\ngamma\n")
        result = runner.invoke(app, ["beta", str(path)])
        assert result.exit_code == 0
        assert result.stdout == "alpha\rbeta\n"

    def test_markup_like_lines_printed_verbatim(self, tmp_path):
        path = tmp_path / "markup.txt"
        path.write_text("[bold]not styled[/bold]\nplain\n", encoding="utf-8")
        result = runner.invoke(app, ["bold", str(path)])
        assert result.stdout == "[bold]not styled[/bold]\n"


# -----------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------


class TestConfigurationErrors:
    def test_no_arguments(self):
        with patch("minigrep.cli.main.run") as mock_run:
            result = runner.invoke(app, [])
        assert result.exit_code != 0
        assert "Problem parsing arguments" in result.output
        mock_run.assert_not_called()

    def test_missing_filename_never_touches_filesystem(self):
        with patch("minigrep.cli.main.run") as mock_run:
            result = runner.invoke(app, ["needle"])
        assert result.exit_code != 0
        assert "filename" in result.output
        mock_run.assert_not_called()

    def test_empty_query_rejected(self, poem_file):
        result = runner.invoke(app, ["", str(poem_file)])
        assert result.exit_code != 0
        assert "query string" in result.output

    def test_invalid_encoding_setting(self, poem_file):
        result = runner.invoke(
            app, ["frog", str(poem_file)], env={"MINIGREP_ENCODING": "no-such-codec"}
        )
        assert result.exit_code != 0
        assert "Invalid settings" in result.output


class TestReadErrors:
    def test_nonexistent_file(self, tmp_path):
        result = runner.invoke(app, ["frog", str(tmp_path / "missing.txt")])
        assert result.exit_code != 0
        assert "Application error" in result.output
        assert "frog" not in result.output

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.bin"
        path.write_bytes(b"frog\n\xff\xfe\n")
        result = runner.invoke(app, ["frog", str(path)])
        assert result.exit_code != 0
        assert "invalid-encoding" in result.output
