"""
Handler contract and the shared stream-holding base.
"""

import io
import sys
from typing import IO, Protocol, runtime_checkable

from .exceptions import HandlerError
from .record import Record


@runtime_checkable
class Handler(Protocol):
    """
    Anything that can take an enriched record and write it somewhere.

    ``handle`` is called exactly once per record that passes the logger's
    severity floor, always from the logger's consumer thread. It signals
    failure by raising.
    """

    def handle(self, record: Record) -> None: ...


class BaseHandler:
    """
    Base handler that owns a writable stream and does nothing on ``handle``.

    Subclasses render the record and call :meth:`write`. The stream is
    never opened, closed or rotated here; that stays with whoever passed it in.
    """

    def __init__(self, stream: IO | None = None):
        """
        Initialize the handler.

        Args:
            stream: Text or binary output stream (default: sys.stdout)
        """
        self.stream = stream or sys.stdout
        self._binary = isinstance(self.stream, io.RawIOBase | io.BufferedIOBase)

    def handle(self, record: Record) -> None:
        """Discard the record."""
        return None

    def write(self, data: str) -> None:
        """
        Write ``data`` to the stream in a single call and flush it.

        Raises:
            HandlerError: If the stream cannot be written
        """
        try:
            if self._binary:
                self.stream.write(data.encode("utf-8"))
            else:
                self.stream.write(data)
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as e:
            raise HandlerError(str(e), handler=self.__class__.__name__) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(stream={self.stream!r})"
