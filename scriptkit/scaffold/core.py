"""Core scaffolding functionality for new applications."""
import shlex
from pathlib import Path
from typing import List, Optional, Union

from scriptkit.cli_support import print_info
from scriptkit.core.config import ScriptkitConfig, get_config
from scriptkit.core.disk import Disk
from scriptkit.core.logger import console, get_logger
from scriptkit.core.runner import CommandRunner
from scriptkit.core.style import header
from scriptkit.core.text_block import text_block

from .templates import (
    BASE_DEPENDENCIES,
    BUN_RUN,
    CLIENT_SERVER_DEPENDENCIES,
    COMMON_ASSETS,
    DEV_COMMAND,
    ProjectType,
    RepoVisibility,
    asset_path,
)

logger = get_logger(__name__)


class ScaffoldError(Exception):
    """Raised when a project cannot be scaffolded."""


class ScaffoldManager:
    """Manages new application scaffolding."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        disk: Optional[Disk] = None,
        config: Optional[ScriptkitConfig] = None,
    ):
        self.config = config or get_config()
        self.runner = runner or CommandRunner()
        self.disk = disk or Disk(runner=self.runner, dry_run=self.runner.dry_run)

    def scaffold_app(
        self,
        name: str,
        path: Optional[Union[str, Path]] = None,
        project_type: Union[ProjectType, str] = ProjectType.CLIENT_SERVER,
        repo: Union[RepoVisibility, str] = RepoVisibility.PUBLIC,
    ) -> Path:
        """Scaffold a new application.

        Args:
            name: Folder and app name (e.g., "my-app")
            path: Parent directory (defaults to the configured code path)
            project_type: node or client-server
            repo: GitHub visibility, or none to skip the remote

        Returns:
            Path to the created project

        Raises:
            ScaffoldError: If the project directory already exists
            CommandError: If an install or git command fails
        """
        project_type = ProjectType(project_type)
        repo = RepoVisibility(repo)
        root = Path(path or self.config.code_path).expanduser() / name

        logger.info(f"✨ Creating {project_type.value} app: {name}")

        console.print(header("create root"))
        if root.exists():
            raise ScaffoldError(f'root "{root}" already exists')

        self.disk.set_root(root)
        self.disk.create_dir(".")
        for asset, target in COMMON_ASSETS.items():
            self.disk.copy_file(asset_path(asset), target)
        self.disk.copy_file(asset_path("vscode.code-workspace"), f"{name}.code-workspace")
        self.runner.set_cwd(root)

        self.disk.write_json_file(
            "package.json",
            {
                "name": name,
                "private": True,
                "scripts": {
                    "lint": "oxlint --fix",
                    "test": "bun test",
                },
            },
        )

        dependencies = list(BASE_DEPENDENCIES)
        if project_type is ProjectType.NODE:
            self._scaffold_node(name)
        else:
            self._scaffold_client_server()
            dependencies.extend(CLIENT_SERVER_DEPENDENCIES)

        self._install_dependencies(dependencies)
        self._init_git(name, repo)

        return root

    def _scaffold_node(self, name: str) -> None:
        """Single-entry bun script project."""
        self.disk.copy_file(asset_path("AGENTS.node.md"), "AGENTS.md")
        self.disk.create_dir("src")
        self.disk.write_file(
            "src/index.ts",
            text_block("console.log('Hello, {name}!');", name=name) + "\n",
        )
        self.disk.update_json_file(
            "package.json",
            lambda data: {
                **data,
                "scripts": {**data["scripts"], "dev": "bun --watch src/index.ts"},
            },
        )

    def _scaffold_client_server(self) -> None:
        """Bun workspace with a Bun.serve API and a Vite React client."""
        self.disk.copy_file(asset_path("AGENTS.client-server.md"), "AGENTS.md")
        self.disk.write_file(
            ".env",
            text_block("""
                API_PORT={api_port}
                CLIENT_PORT={client_port}
                VITE_API_URL=http://localhost:{api_port}
            """, api_port=3001, client_port=3000) + "\n",
        )

        console.print(header("create server"))
        self.disk.copy_dir(asset_path("server"), "server")

        console.print(header("create client"))
        self.disk.copy_dir(asset_path("client"), "client")

        self.disk.update_json_file(
            "package.json",
            lambda data: {
                **data,
                "workspaces": ["server", "client"],
                "scripts": {
                    **data["scripts"],
                    "server:dev": BUN_RUN + "server dev",
                    "client:dev": BUN_RUN + "client dev",
                    "dev": DEV_COMMAND,
                },
            },
        )

    def _install_dependencies(self, dependencies: List[str]) -> None:
        console.print(header("install dependencies"))
        packages = " ".join(shlex.quote(dep) for dep in sorted(set(dependencies)))
        self.runner.run(f"{self.config.package_manager} add {packages}")

    def _init_git(self, name: str, repo: RepoVisibility) -> None:
        console.print(header("init git"))
        self.runner.run("git init")
        self.runner.run("git add -A")
        self.runner.run(f"git commit -m {shlex.quote(self.config.commit_message)}")

        if repo is RepoVisibility.NONE:
            print_info(console, "Skipping GitHub repository (--repo none)")
            return

        self.runner.run(
            f"gh repo create {shlex.quote(name)} --{repo.value} --source=. --remote=origin"
        )
        self.runner.run("git push -u origin HEAD")
