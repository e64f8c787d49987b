"""Tests for console style helpers."""
from scriptkit.core.style import Timer, bool_badge, header, label, number, trunc


class TestTrunc:
    def test_short_text_unchanged(self):
        assert trunc(10, "abc") == "abc"

    def test_long_text_ends_with_ellipsis(self):
        assert trunc(5, "abcdefgh") == "abcd…"
        assert len(trunc(30, "x" * 100)) == 30


class TestLabels:
    """Test label-based formatting."""

    def test_label(self):
        assert label("size", 3) == "[bold]size: [/bold]3"

    def test_empty_values_render_nothing(self):
        assert label("size", None) == ""
        assert label("size", "") == ""
        assert bool_badge(None, "ok") == ""
        assert number("", "n") == ""

    def test_label_zero_is_not_empty(self):
        assert label("count", 0) == "[bold]count: [/bold]0"

    def test_structured_values_are_json_truncated(self):
        result = label("data", {"key": "a" * 50})
        value = result[len("[bold]data: [/bold]"):]
        assert value.startswith('{"key": "aaa')
        assert value.endswith("…")
        assert len(value) == 30

    def test_bool_badge(self):
        assert bool_badge(True, "ok") == "[bold]ok: [/bold][green]✔[/green]"
        assert bool_badge(False, "ok") == "[bold]ok: [/bold][red]✘[/red]"

    def test_number_rounds_to_two_decimals(self):
        assert number(3.14159, "pi") == "[bold]pi: [/bold][yellow]3.14[/yellow]"
        assert number(2.0, "n") == "[bold]n: [/bold][yellow]2[/yellow]"

    def test_header_fills_width(self):
        assert header("title", width=20) == (
            "[bold white on blue]" + " ⬥ title".ljust(20) + "[/]"
        )


class TestTimer:
    def test_elapsed_rounds_to_tenths(self, monkeypatch):
        ticks = iter([100.0, 102.34])
        monkeypatch.setattr("scriptkit.core.style.time.monotonic", lambda: next(ticks))

        assert Timer().elapsed() == 2.3

    def test_lap_prints_message(self, monkeypatch, capsys):
        ticks = iter([10.0, 11.5])
        monkeypatch.setattr("scriptkit.core.style.time.monotonic", lambda: next(ticks))

        seconds = Timer().lap("install")

        assert seconds == 1.5
        assert "install: 1.5s" in capsys.readouterr().out
