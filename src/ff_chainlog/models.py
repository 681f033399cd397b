"""
Validated construction options for :class:`~ff_chainlog.logger.Logger`.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .base import Handler
from .pipeline import DEFAULT_CAPACITY
from .severity import Severity
from .timestamp import TimestampFormat


class TimestampConfig(BaseModel):
    """How the ``timestamp`` enrichment field is rendered."""

    model_config = ConfigDict(frozen=True)

    format: TimestampFormat = TimestampFormat.DEFAULT
    pattern: str | None = None
    local: bool = False

    @model_validator(mode="after")
    def _require_pattern_for_custom(self) -> "TimestampConfig":
        if self.format is TimestampFormat.CUSTOM and not self.pattern:
            raise ValueError("timestamp format 'custom' requires a pattern")
        return self


class LoggerConfig(BaseModel):
    """
    Logger construction options.

    ``handler`` may be any object with a ``handle(record)`` method; when
    omitted the logger writes text lines to standard output. ``exit_func``
    is called with the exit status after a fatal record has been handled.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: Severity = Severity.INFO
    timestamp: TimestampConfig = Field(default_factory=TimestampConfig)
    add_level: bool = True
    add_timestamp: bool = True
    handler: Any = None
    queue_size: int = Field(default=DEFAULT_CAPACITY, gt=0)
    exit_func: Callable[[int], Any] | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Severity:
        return Severity.parse(value)

    @field_validator("handler")
    @classmethod
    def _check_handler(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, Handler):
            raise ValueError(f"handler {value!r} has no handle() method")
        return value
