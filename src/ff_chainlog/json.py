"""
JSON lines handler for structured output.
"""

import math
from typing import IO, Any

import structlog

from .base import BaseHandler
from .record import Record
from .value import Value, ValueKind

_NON_FINITE = {math.inf: "Infinity", -math.inf: "-Infinity"}


class JSONHandler(BaseHandler):
    """
    Writes each record as one compact JSON object followed by a newline.

    Duplicate field names collapse with the last one winning. Non-finite
    floats are written as the strings ``"NaN"``, ``"Infinity"`` and
    ``"-Infinity"`` so every line stays valid JSON.
    """

    def __init__(self, stream: IO | None = None):
        """
        Initialize a JSON handler.

        Args:
            stream: Output stream (default: sys.stdout)
        """
        super().__init__(stream)
        self._renderer = structlog.processors.JSONRenderer(
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def handle(self, record: Record) -> None:
        self.write(self.render(record))

    def render(self, record: Record) -> str:
        """Render a record to a single newline-terminated JSON line."""
        event_dict = {name: _jsonable(value) for name, value in record.fields.as_map().items()}
        return self._renderer(None, record.level.value, event_dict) + "\n"


def _jsonable(value: Value) -> Any:
    if value.kind is ValueKind.FLOAT and not math.isfinite(value.data):
        return "NaN" if math.isnan(value.data) else _NON_FINITE[value.data]
    if value.kind is ValueKind.ARRAY:
        return [_jsonable(item) for item in value.data]
    if value.kind is ValueKind.MAP:
        return {key: _jsonable(item) for key, item in value.data.items()}
    return value.data
