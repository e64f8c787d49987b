#!/usr/bin/env python3
"""scriptkit CLI - scaffold new apps from the terminal."""
from typing import Optional

import typer
from rich.console import Console

from scriptkit.cli_scaffold_commands import register_scaffold_commands
from scriptkit.cli_support import setup_file_logging

app = typer.Typer(
    name="scriptkit",
    help="""scriptkit - project scaffolding and scripting helpers

Quick start:
  scriptkit new-app --name my-app                  # client/server app in ~/code
  scriptkit new-app -n tool --type node --repo none
""",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tracebacks on errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)


register_scaffold_commands(app, console)

if __name__ == "__main__":
    app()
