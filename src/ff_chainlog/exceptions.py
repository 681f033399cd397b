"""
Custom exceptions for the ff-chainlog package.
"""


class ChainlogError(Exception):
    """Base exception for all ff-chainlog errors."""

    pass


class LoggerClosedError(ChainlogError):
    """Raised when a record is sent to a logger that has been closed."""

    def __init__(self, message: str = "logger is closed; no further records can be sent"):
        super().__init__(message)


class HandlerError(ChainlogError):
    """Raised by a handler when its sink cannot be written."""

    def __init__(self, message: str, handler: str | None = None):
        self.handler = handler

        if handler:
            message = f"{handler}: {message}"

        super().__init__(message)
