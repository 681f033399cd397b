"""
Configuration system for ff-chainlog.

Settings come from ``FF_LOG_*`` environment variables and an optional
``.env`` file; keyword arguments passed to :func:`get_logger` take
priority over both.
"""

from typing import IO, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base import BaseHandler
from .json import JSONHandler
from .logger import Logger
from .models import LoggerConfig, TimestampConfig
from .null import NullHandler
from .pipeline import DEFAULT_CAPACITY
from .severity import Severity
from .text import TextHandler
from .timestamp import TimestampFormat

# Handler type mapping
_HANDLER_TYPES: dict[str, type[BaseHandler]] = {
    "text": TextHandler,
    "console": TextHandler,  # Alias for text
    "json": JSONHandler,
    "null": NullHandler,
    "none": NullHandler,  # Alias for null
}


class LoggerSettings(BaseSettings):
    """
    Logger settings loaded from the environment.

    Environment variables:
        FF_LOG_LEVEL: Minimum severity (none, fatal, error, warn, info, debug, trace)
        FF_LOG_FORMAT: Output format (text, json, null)
        FF_LOG_COLORS: Color the level tag in text output
        FF_LOG_ADD_LEVEL: Prepend the ``level`` field
        FF_LOG_ADD_TIMESTAMP: Prepend the ``timestamp`` field
        FF_LOG_TIMESTAMP_FORMAT: One of the ``TimestampFormat`` values
        FF_LOG_TIMESTAMP_PATTERN: strftime pattern for the ``custom`` format
        FF_LOG_TIMESTAMP_LOCAL: Use local time instead of UTC
        FF_LOG_QUEUE_SIZE: Capacity of the record queue
    """

    model_config = SettingsConfigDict(
        env_prefix="FF_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: Severity = Severity.INFO
    format: str = "text"
    colors: bool = False
    add_level: bool = True
    add_timestamp: bool = True
    timestamp_format: TimestampFormat = TimestampFormat.DEFAULT
    timestamp_pattern: str | None = None
    timestamp_local: bool = False
    queue_size: int = DEFAULT_CAPACITY

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Severity:
        return Severity.parse(value)

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> str:
        return str(value).strip().lower()

    @field_validator("colors", "add_level", "add_timestamp", "timestamp_local", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes")
        return value

    def timestamp(self) -> TimestampConfig:
        return TimestampConfig(
            format=self.timestamp_format,
            pattern=self.timestamp_pattern,
            local=self.timestamp_local,
        )

    def build_handler(self, logger_type: str | None = None, stream: IO | None = None) -> BaseHandler:
        """
        Create the handler for ``logger_type`` (default: the configured format).

        Raises:
            ValueError: If the type is unknown
        """
        logger_type = (logger_type or self.format).lower()
        handler_class = _HANDLER_TYPES.get(logger_type)
        if handler_class is None:
            raise ValueError(
                f"Unknown logger type: {logger_type}. Supported types: {', '.join(_HANDLER_TYPES)}"
            )

        if handler_class is TextHandler:
            return TextHandler(stream, colors=self.colors)
        return handler_class(stream)

    def to_config(self, handler: Any = None, **overrides: Any) -> LoggerConfig:
        """Convert to a :class:`LoggerConfig`, with ``overrides`` taking priority."""
        options: dict[str, Any] = {
            "level": self.level,
            "timestamp": self.timestamp(),
            "add_level": self.add_level,
            "add_timestamp": self.add_timestamp,
            "handler": handler if handler is not None else self.build_handler(),
            "queue_size": self.queue_size,
        }
        options.update(overrides)
        return LoggerConfig(**options)


def get_logger(
    logger_type: str | None = None,
    stream: IO | None = None,
    settings: LoggerSettings | None = None,
    **overrides: Any,
) -> Logger:
    """
    Create a logger from environment settings.

    Args:
        logger_type: Override the output format (text, json, null)
        stream: Output stream for the handler (default: sys.stdout)
        settings: Settings to use instead of reading the environment
        **overrides: ``LoggerConfig`` fields applied last

    Returns:
        A started Logger; call ``close()`` on it before exiting

    Example:
        # Uses FF_LOG_* settings
        logger = get_logger()

        # Override format and level
        logger = get_logger("json", level="debug")
    """
    settings = settings or LoggerSettings()
    handler = overrides.pop("handler", None)
    if handler is None:
        handler = settings.build_handler(logger_type, stream)
    return Logger(settings.to_config(handler=handler, **overrides))
