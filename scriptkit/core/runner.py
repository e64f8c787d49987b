"""Sequential shell command execution with logging."""
import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from rich.markup import escape

from scriptkit.core.logger import console, get_logger

logger = get_logger(__name__)


class CommandError(RuntimeError):
    """Raised when a shell command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, cwd: Optional[str] = None):
        super().__init__(f"Command failed with exit code {returncode}: {command}")
        self.command = command
        self.returncode = returncode
        self.data: Dict[str, Any] = {"command": command, "returncode": returncode, "cwd": cwd}


class CommandRunner:
    """Runs shell commands one after another from a persistent cwd."""

    def __init__(self, cwd: Optional[Union[str, Path]] = None, dry_run: bool = False):
        self.cwd = str(cwd) if cwd else os.getcwd()
        self.dry_run = dry_run

    def set_cwd(self, path: Union[str, Path]) -> None:
        """Run later commands from ``path``."""
        self.cwd = str(path)
        logger.debug(f"Command cwd set to {self.cwd}")

    def run(self, command: str, **options: Any) -> subprocess.CompletedProcess:
        """Run a shell command, streaming its output to the terminal.

        Args:
            command: Shell command line
            **options: Extra keyword arguments for subprocess.run

        Returns:
            The completed process

        Raises:
            CommandError: If the command exits with a non-zero status
        """
        timestamp = datetime.now().strftime("%H:%M:%S")
        console.print(
            f"[dim]\\[{timestamp}][/dim] [bold]run cmd:[/bold] [green]{escape(command)}[/green]",
            highlight=False,
        )

        if self.dry_run:
            logger.info(f"DRY RUN: would run '{command}' in {self.cwd}")
            return subprocess.CompletedProcess(command, 0)

        kwargs: Dict[str, Any] = {"shell": True, "check": True, "cwd": self.cwd}
        kwargs.update(options)

        try:
            return subprocess.run(command, **kwargs)
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed ({e.returncode}): {command}")
            raise CommandError(command, e.returncode, cwd=kwargs.get("cwd")) from e
