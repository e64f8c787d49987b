"""Scaffolding CLI commands - new-app."""
from typing import Optional

import typer
from rich.console import Console

from scriptkit.core.config import get_config
from scriptkit.core.runner import CommandError, CommandRunner
from scriptkit.core.style import Timer, label
from scriptkit.scaffold import ProjectType, RepoVisibility, ScaffoldError, ScaffoldManager

# Module-level console instance (will be set by register function)
console: Console = Console()


def new_app(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Folder and app name"),
    path: Optional[str] = typer.Option(None, "--path", "-p",
                                       help="Parent directory (default: configured code path, ~/code)"),
    project_type: Optional[ProjectType] = typer.Option(None, "--type", case_sensitive=False,
                                                       help="Project type (default: client-server)"),
    repo: Optional[RepoVisibility] = typer.Option(None, "--repo", case_sensitive=False,
                                                  help="GitHub repo type (default: public)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print commands and files without running them"),
):
    """Set up a new app: skeleton, dependencies, git and GitHub remote.

    Examples:
        scriptkit new-app -n my-app                       # client/server app in ~/code
        scriptkit new-app -n tool --type node --repo none # local script project
        scriptkit new-app -n site -p ~/work --repo private
    """
    from scriptkit.cli_support import handle_cli_error, print_info, print_success

    verbose = bool(ctx.parent and ctx.parent.params.get("verbose"))
    config = get_config()
    timer = Timer()

    try:
        project_type = project_type or ProjectType(config.default_type)
        repo = repo or RepoVisibility(config.default_repo)

        manager = ScaffoldManager(runner=CommandRunner(dry_run=dry_run), config=config)
        root = manager.scaffold_app(name, path=path, project_type=project_type, repo=repo)
    except (ScaffoldError, CommandError, ValueError) as e:
        handle_cli_error(e, console, verbose=verbose)
        return

    if dry_run:
        print_info(console, f"Dry run finished, nothing was written for {project_type.value} app at {root}")
    else:
        print_success(console, f"Created {project_type.value} app at {root}")
    console.print(label("⏱︎ done in", f"[yellow]{timer.elapsed()}s[/yellow]"))


def register_scaffold_commands(app: typer.Typer, shared_console: Console) -> None:
    """Attach scaffolding commands to the main Typer app."""
    global console
    console = shared_console

    app.command("new-app")(new_app)
