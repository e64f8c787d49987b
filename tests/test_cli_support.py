"""Tests for CLI support utilities."""
import pytest
import typer
from rich.console import Console

from scriptkit.cli_support import (
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
)
from scriptkit.core.runner import CommandError


@pytest.fixture
def console():
    return Console(record=True, width=200)


class TestHandleCliError:
    """Test error reporting and exit codes."""

    def test_exits_with_code(self, console):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(ValueError("bad [input]"), console)

        assert exc_info.value.exit_code == 1
        assert "Error: bad [input]" in console.export_text()

    def test_custom_exit_code(self, console):
        with pytest.raises(typer.Exit) as exc_info:
            handle_cli_error(RuntimeError("boom"), console, exit_code=3)

        assert exc_info.value.exit_code == 3

    def test_prints_error_data(self, console):
        with pytest.raises(typer.Exit):
            handle_cli_error(CommandError("git push", 128, cwd="/repo"), console)

        output = console.export_text()
        assert "exit code 128: git push" in output
        assert "error.data =" in output
        assert "'returncode': 128" in output

    def test_no_data_line_without_data(self, console):
        with pytest.raises(typer.Exit):
            handle_cli_error(ValueError("x"), console)

        assert "error.data" not in console.export_text()


class TestPrintHelpers:
    """Test message helpers."""

    def test_prefixes(self, console):
        print_success(console, "done")
        print_warning(console, "careful")
        print_info(console, "note")

        lines = console.export_text().splitlines()
        assert lines == ["✓ done", "⚠ careful", "ℹ note"]
