"""Indentation-normalizing text templates.

Lets scripts write file contents and shell snippets as indented triple-quoted
strings that line up with the surrounding code. Interpolated values are
re-indented to the slot they occupy and the result is dedented as a whole.

Example:
    >>> text_block('''
    ...     [tool]
    ...     names = [{names}]
    ...     items:
    ...         {items}
    ... ''', names=["a", "b"], items=["x", "y"])
    '[tool]\\nnames = [a,b]\\nitems:\\n    x\\n    y'
"""
import re
from string import Formatter
from typing import Any, List, Optional, Sequence

BLOCK_SLOT_RE = re.compile(r"\n([ \t]*)$")
LINE_INDENT_RE = re.compile(r"^([ \t]*)")
LEADING_SPACE_RE = re.compile(r"^\s*")

# Rendering of absent values and absent literal segments
MISSING = "undefined"


class TextBlockError(ValueError):
    """Raised for malformed templates."""


def to_text(value: Any) -> str:
    """Coerce an interpolated value to text.

    ``None`` renders as ``"undefined"``; everything else uses ``str()``.
    """
    if value is None:
        return MISSING
    return str(value)


def is_sequence(value: Any) -> bool:
    """Return True for values interpolated element-wise (lists and tuples)."""
    return isinstance(value, (list, tuple))


def _reindent(text: str, indent: str) -> str:
    """Prefix every non-empty line after the first with ``indent``."""
    lines = text.split("\n")
    return "\n".join(
        [lines[0]] + [indent + line if line else line for line in lines[1:]]
    )


def format_text_block(literals: Sequence[Optional[str]], values: Sequence[Any]) -> str:
    """Interleave literal segments with values and normalize indentation.

    Args:
        literals: Literal text segments, one more than ``values``
        values: Values for the slots between segments; lists and tuples are
            joined one item per line in block position and with commas inline

    Returns:
        Dedented text without leading/trailing blank lines or trailing spaces

    Raises:
        TextBlockError: If ``len(literals) != len(values) + 1``
    """
    if len(literals) != len(values) + 1:
        raise TextBlockError(
            f"Expected {len(values) + 1} literal segments for {len(values)} values, "
            f"got {len(literals)}"
        )

    parts: List[str] = []
    for i, literal in enumerate(literals):
        prefix = MISSING if literal is None else literal
        parts.append(prefix)
        if i >= len(values):
            continue

        value = values[i]
        block = BLOCK_SLOT_RE.search(prefix)
        if block:
            indent = block.group(1)
            if is_sequence(value):
                if value:
                    parts.append(("\n" + indent).join(to_text(item) for item in value))
                else:
                    # Empty list collapses the line it would have occupied
                    parts[-1] = prefix[:block.start()]
            else:
                parts.append(_reindent(to_text(value), indent))
        else:
            if is_sequence(value):
                parts.append(",".join(to_text(item) for item in value))
            else:
                last_line = prefix.split("\n")[-1]
                indent = LINE_INDENT_RE.match(last_line).group(1)
                parts.append(_reindent(to_text(value), indent))

    lines = "".join(parts).split("\n")

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    min_indent: Optional[str] = None
    for line in lines:
        indent = LEADING_SPACE_RE.match(line).group(0)
        if len(indent) == len(line):
            continue
        if min_indent is None or len(indent) < len(min_indent):
            min_indent = indent
            if not min_indent:
                break
    min_indent = min_indent or ""

    result = []
    for line in lines:
        if min_indent and line.startswith(min_indent):
            line = line[len(min_indent):]
        result.append(line.rstrip())
    return "\n".join(result)


class TextBlock:
    """Builder that accumulates literal text and values before rendering.

    Useful when the template is assembled piecewise, e.g. in a loop::

        block = TextBlock().text("deps:\\n    ").value(sorted(deps)).text("\\n")
        content = block.render()
    """

    def __init__(self):
        self._literals: List[str] = [""]
        self._values: List[Any] = []

    def text(self, fragment: str) -> "TextBlock":
        self._literals[-1] += fragment
        return self

    def value(self, value: Any) -> "TextBlock":
        self._values.append(value)
        self._literals.append("")
        return self

    def render(self) -> str:
        return format_text_block(self._literals, self._values)


def text_block(template: str, **values: Any) -> str:
    """Render a ``str.format`` style template through the text block rules.

    Placeholders name keyword arguments (``{name}``, ``{port!r}``,
    ``{ratio:.2f}``). Conversions and format specs apply to scalars and to
    each element of a list or tuple.

    Raises:
        TextBlockError: For unknown names, positional or nested fields
    """
    literals: List[str] = [""]
    slots: List[Any] = []

    for literal, field, format_spec, conversion in Formatter().parse(template):
        literals[-1] += literal
        if field is None:
            continue
        if not field.isidentifier():
            raise TextBlockError(f"Unsupported placeholder '{{{field}}}': use a keyword name")
        if field not in values:
            raise TextBlockError(f"No value for placeholder '{{{field}}}'")
        if "{" in (format_spec or ""):
            raise TextBlockError(f"Nested placeholder in format spec of '{{{field}}}'")

        value = values[field]
        if is_sequence(value):
            value = [_format_field(item, format_spec, conversion) for item in value]
        elif conversion or format_spec:
            value = _format_field(value, format_spec, conversion)
        slots.append(value)
        literals.append("")

    return format_text_block(literals, slots)


def _format_field(value: Any, format_spec: Optional[str], conversion: Optional[str]) -> Any:
    if value is None and not conversion:
        return to_text(value)
    if conversion == "r":
        value = repr(value)
    elif conversion == "s":
        value = str(value)
    elif conversion == "a":
        value = ascii(value)
    return format(value, format_spec or "")
