"""
Human-readable text handler.

Output looks like::

    2026-01-03T09:33:35.366Z [INFO ] message: 'Hello, World!' user.id: 42
"""

from typing import IO

from .base import BaseHandler
from .record import Record
from .severity import Severity
from .value import Field, ValueKind

RESET = "\033[0m"

LEVEL_COLORS = {
    Severity.TRACE: "\033[90m",
    Severity.DEBUG: "\033[36m",
    Severity.INFO: "\033[32m",
    Severity.WARN: "\033[33m",
    Severity.ERROR: "\033[31m",
    Severity.FATAL: "\033[1;41m",
}

LEVEL_WIDTH = 5


class TextHandler(BaseHandler):
    """
    Renders each record as one line of space-separated tokens.

    The ``timestamp`` field is written bare, the ``level`` field as a
    fixed-width ``[LEVEL]`` tag, map values expand to ``name.key: value``
    tokens and everything else is ``name: value``. Values containing a
    space are quoted.
    """

    def __init__(self, stream: IO | None = None, colors: bool = False):
        """
        Initialize a text handler.

        Args:
            stream: Output stream (default: sys.stdout)
            colors: Wrap the level tag in ANSI color codes
        """
        super().__init__(stream)
        self.colors = colors

    def handle(self, record: Record) -> None:
        self.write(self.render(record))

    def render(self, record: Record) -> str:
        """Render a record to a single newline-terminated line."""
        tokens: list[str] = []
        for field in record.fields:
            tokens.extend(self._tokens(field))
        return " ".join(tokens) + "\n"

    def _tokens(self, field: Field) -> list[str]:
        if field.name == "timestamp":
            return [str(field.value)]

        if field.name == "level":
            level = _as_severity(field)
            if level is not None:
                tag = self.level_tag(level)
                return [tag] if tag else []

        if field.value.kind is ValueKind.MAP:
            return [
                f"{field.name}.{key}: {quote(str(value))}" for key, value in field.value.data.items()
            ]

        return [f"{field.name}: {quote(str(field.value))}"]

    def level_tag(self, level: Severity) -> str:
        """``[INFO ]``-style tag for a severity, colored if enabled; empty for ``none``."""
        if level is Severity.NONE:
            return ""
        tag = f"[{level.value.upper():<{LEVEL_WIDTH}}]"
        if self.colors:
            return f"{LEVEL_COLORS[level]}{tag}{RESET}"
        return tag


def quote(text: str) -> str:
    """Quote ``text`` if it contains a space, preferring single quotes."""
    if " " not in text:
        return text
    if "'" in text:
        return f'"{text}"'
    return f"'{text}'"


def _as_severity(field: Field) -> Severity | None:
    if field.value.kind is not ValueKind.STRING:
        return None
    try:
        return Severity(field.value.data)
    except ValueError:
        return None
