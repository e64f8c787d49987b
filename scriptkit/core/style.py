"""Rich markup helpers for script output."""
import json
import time
from typing import Any, Optional

from rich.markup import escape

from scriptkit.core.logger import console


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def trunc(n: int, text: str) -> str:
    """Truncate ``text`` to at most ``n`` characters, ending in an ellipsis."""
    if len(text) <= n:
        return text
    return text[: max(n - 1, 0)] + "…"


def header(title: str, width: Optional[int] = None) -> str:
    """Full-width white-on-blue title bar."""
    width = width or console.width
    return f"[bold white on blue]{escape(f' ⬥ {title}'.ljust(width))}[/]"


def label(name: Any, value: Any) -> str:
    """``name: value`` with a bold name; empty when there is no value."""
    if _is_empty(value):
        return ""
    if isinstance(value, (dict, list)):
        value = escape(trunc(30, json.dumps(value)))
    return f"[bold]{escape(f'{name}: ')}[/bold]{value}"


def bool_badge(value: Any, name: str) -> str:
    if _is_empty(value):
        return ""
    return label(name, "[green]✔[/green]" if value else "[red]✘[/red]")


def number(value: Any, name: str) -> str:
    if _is_empty(value):
        return ""
    rounded = round(float(value), 2)
    text = str(int(rounded)) if rounded.is_integer() else str(rounded)
    return label(name, f"[yellow]{text}[/yellow]")


class Timer:
    """Measures elapsed wall time since creation."""

    def __init__(self):
        self.start = time.monotonic()

    def elapsed(self) -> float:
        return round(time.monotonic() - self.start, 1)

    def lap(self, message: Optional[str] = None) -> float:
        """Return elapsed seconds, printing them under ``message`` if given."""
        seconds = self.elapsed()
        if message:
            console.print(label(f"⏱︎ {message}", f"[yellow]{seconds}s[/yellow]"))
        return seconds
