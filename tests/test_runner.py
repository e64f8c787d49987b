"""Tests for the shell command runner."""
import subprocess
from unittest.mock import patch

import pytest

from scriptkit.core.runner import CommandError, CommandRunner


class TestCommandRunner:
    """Test CommandRunner execution and logging."""

    @patch("scriptkit.core.runner.subprocess.run")
    def test_run_uses_shell_and_cwd(self, mock_run, tmp_path):
        """Commands run through the shell from the runner's cwd."""
        mock_run.return_value = subprocess.CompletedProcess("echo hi", 0)
        runner = CommandRunner(cwd=tmp_path)

        result = runner.run("echo hi")

        assert result.returncode == 0
        mock_run.assert_called_once_with("echo hi", shell=True, check=True, cwd=str(tmp_path))

    @patch("scriptkit.core.runner.subprocess.run")
    def test_set_cwd_applies_to_later_commands(self, mock_run, tmp_path):
        mock_run.return_value = subprocess.CompletedProcess("ls", 0)
        runner = CommandRunner()

        runner.set_cwd(tmp_path / "project")
        runner.run("ls")

        assert mock_run.call_args.kwargs["cwd"] == str(tmp_path / "project")

    @patch("scriptkit.core.runner.subprocess.run")
    def test_options_override_defaults(self, mock_run):
        """Keyword options are forwarded and win over the defaults."""
        mock_run.return_value = subprocess.CompletedProcess("git status", 0)
        runner = CommandRunner(cwd="/repo")

        runner.run("git status", cwd="/other", capture_output=True, text=True)

        kwargs = mock_run.call_args.kwargs
        assert kwargs["cwd"] == "/other"
        assert kwargs["capture_output"] is True
        assert kwargs["shell"] is True

    def test_default_cwd_is_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert CommandRunner().cwd == str(tmp_path)

    @patch("scriptkit.core.runner.subprocess.run")
    def test_failure_raises_command_error(self, mock_run):
        """A non-zero exit becomes CommandError with data attached."""
        mock_run.side_effect = subprocess.CalledProcessError(127, "bun add x")
        runner = CommandRunner(cwd="/repo")

        with pytest.raises(CommandError) as exc_info:
            runner.run("bun add x")

        error = exc_info.value
        assert error.returncode == 127
        assert error.command == "bun add x"
        assert error.data == {"command": "bun add x", "returncode": 127, "cwd": "/repo"}
        assert "exit code 127" in str(error)

    @patch("scriptkit.core.runner.subprocess.run")
    def test_dry_run_does_not_execute(self, mock_run):
        runner = CommandRunner(dry_run=True)

        result = runner.run("git push")

        assert result.returncode == 0
        mock_run.assert_not_called()

    @patch("scriptkit.core.runner.subprocess.run")
    def test_command_is_logged(self, mock_run, capsys):
        """Each command is announced with a timestamp before it runs."""
        mock_run.return_value = subprocess.CompletedProcess("git init", 0)

        CommandRunner().run("git init")

        out = capsys.readouterr().out
        assert "run cmd: git init" in out
        assert out.lstrip().startswith("[")
