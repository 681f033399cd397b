"""
Immutable log records built through chained calls.

Example:
    logger.info().message("user logged in").field("user_id", 42).send()

Every builder call returns a new :class:`Record`; the receiver is left
untouched and can be extended again or sent on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .exceptions import ChainlogError
from .severity import Severity
from .value import Field, Fields, Value, to_value

if TYPE_CHECKING:
    from .pipeline import Channel


@dataclass(frozen=True)
class Record:
    """
    A severity level plus an ordered sequence of fields.

    ``destination`` is the channel of the logger that created the record.
    It is carried unchanged through every builder call.
    """

    level: Severity
    fields: Fields = field(default_factory=Fields)
    destination: Channel | None = field(default=None, repr=False, compare=False)

    def append(self, *fields: Field) -> Record:
        """Return a new record with ``fields`` added at the end."""
        if not fields:
            return self
        return replace(self, fields=Fields(self.fields + fields))

    def prepend(self, *fields: Field) -> Record:
        """Return a new record with ``fields`` added at the start."""
        if not fields:
            return self
        return replace(self, fields=Fields(fields + self.fields))

    def field(self, name: str, value: Any) -> Record:
        """Append a single named field."""
        return self.append(Field(name, to_value(value)))

    def with_fields(self, **kwargs: Any) -> Record:
        """Append one field per keyword argument, in keyword order."""
        return self.append(*(Field(name, to_value(value)) for name, value in kwargs.items()))

    def message(self, text: str) -> Record:
        """Append a ``message`` field."""
        return self.field("message", text)

    def error(self, err: Any) -> Record:
        """
        Append an ``error`` field holding ``{"msg": ..., "code": ...}``.

        Accepts any object with a textual message and a numeric code.
        Exceptions without them fall back to ``str(err)`` and code ``0``.
        """
        return self.field("error", Value.map({"msg": _error_message(err), "code": _error_code(err)}))

    def send(self) -> None:
        """
        Enqueue this record on its logger.

        Blocks while the logger's queue is full.

        Raises:
            LoggerClosedError: If the logger has been closed
            ChainlogError: If the record was not created by a logger
        """
        if self.destination is None:
            raise ChainlogError("record is not bound to a logger")
        self.destination.put(self)


def _error_message(err: Any) -> str:
    for attr in ("msg", "message"):
        text = getattr(err, attr, None)
        if isinstance(text, str):
            return text
    return str(err)


def _error_code(err: Any) -> int:
    for attr in ("code", "errno"):
        code = getattr(err, attr, None)
        if isinstance(code, int) and not isinstance(code, bool):
            return code
    return 0
