"""File-system mutation helpers that remember what they touched."""
import json
import os
import shlex
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from rich.markup import escape

from scriptkit.cli_support import print_warning
from scriptkit.core.logger import console
from scriptkit.core.runner import CommandRunner

PathLike = Union[str, Path]


class Disk:
    """Creates, writes and updates files relative to a project root.

    Every destination is logged and recorded in ``touched_paths`` so the
    caller can stage exactly what it generated.
    """

    def __init__(
        self,
        root: Optional[PathLike] = None,
        runner: Optional[CommandRunner] = None,
        dry_run: bool = False,
    ):
        self.root = Path(root) if root else Path.cwd()
        self.runner = runner
        self.dry_run = dry_run
        self._touched: Dict[str, None] = {}

    @property
    def touched_paths(self) -> List[str]:
        return list(self._touched)

    def set_root(self, path: PathLike) -> None:
        self.root = Path(path)

    def resolve(self, path: PathLike) -> Path:
        """Resolve ``path`` against the root unless it is absolute."""
        path = Path(path)
        return path if path.is_absolute() else self.root / path

    @staticmethod
    def pretty_path(path: PathLike) -> str:
        """Path relative to the process cwd, for display."""
        try:
            text = str(Path(path).relative_to(os.getcwd()))
        except ValueError:
            text = str(path)
        return text.lstrip("/") or "."

    def _touch(self, verb: str, path: PathLike) -> Path:
        target = self.resolve(path)
        self._touched[str(target)] = None
        console.print(f"[bold]- {verb}:[/bold] [green]{escape(self.pretty_path(target))}[/green]")
        return target

    def create_dir(self, path: PathLike) -> Path:
        target = self._touch("create dir", path)
        if not self.dry_run:
            target.mkdir(parents=True, exist_ok=True)
        return target

    def write_file(self, path: PathLike, content: str) -> Path:
        target = self._touch("write file", path)
        if not self.dry_run:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return target

    def write_json_file(self, path: PathLike, data: Dict[str, Any]) -> Path:
        return self.write_file(path, json.dumps(data, indent=4) + "\n")

    def update_json_file(
        self,
        path: PathLike,
        update: Callable[[Dict[str, Any]], Dict[str, Any]],
    ) -> Path:
        """Read a JSON file, pass its data through ``update`` and write it back."""
        target = self._touch("update file", path)
        if self.dry_run:
            return target
        data = json.loads(target.read_text(encoding="utf-8"))
        target.write_text(json.dumps(update(data), indent=4) + "\n", encoding="utf-8")
        return target

    def copy_file(self, src: PathLike, dst: PathLike) -> Path:
        target = self._touch("copy file", dst)
        if not self.dry_run:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, target)
        return target

    def copy_dir(self, src: PathLike, dst: PathLike) -> Path:
        """Copy a directory tree, merging into ``dst`` if it exists."""
        target = self._touch("copy dir", dst)
        if not self.dry_run:
            shutil.copytree(
                src,
                target,
                dirs_exist_ok=True,
                ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
            )
        return target

    def git_add_touched_paths(self, reset: bool = False, commit: str = "") -> None:
        """Stage the touched paths, optionally resetting the index and committing.

        Raises:
            ValueError: If no command runner is attached
        """
        if self.runner is None:
            raise ValueError("git_add_touched_paths needs a CommandRunner")
        if not self._touched:
            print_warning(console, "No touched paths to add")
            return

        if reset:
            self.runner.run("git reset")
        self.runner.run("git add " + " ".join(shlex.quote(p) for p in self._touched))
        if commit:
            self.runner.run(f"git commit -m {shlex.quote(commit)}")
