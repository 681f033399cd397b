"""
ff-chainlog: Chained structured logging for Fenixflow applications.

Records are built through immutable chained calls and written by a
single background consumer per logger.
"""

__version__ = "0.1.0"

from .base import BaseHandler, Handler
from .config import LoggerSettings, get_logger
from .exceptions import ChainlogError, HandlerError, LoggerClosedError
from .json import JSONHandler
from .logger import Logger
from .models import LoggerConfig, TimestampConfig
from .null import CaptureHandler, NullHandler
from .record import Record
from .severity import Severity
from .text import TextHandler
from .timestamp import TimestampFormat, format_timestamp
from .value import Field, Fields, Value, ValueKind, to_value

__all__ = [
    "Logger",
    "LoggerConfig",
    "LoggerSettings",
    "TimestampConfig",
    "TimestampFormat",
    "Record",
    "Severity",
    "Field",
    "Fields",
    "Value",
    "ValueKind",
    "Handler",
    "BaseHandler",
    "TextHandler",
    "JSONHandler",
    "NullHandler",
    "CaptureHandler",
    "ChainlogError",
    "HandlerError",
    "LoggerClosedError",
    "format_timestamp",
    "get_logger",
    "to_value",
]
