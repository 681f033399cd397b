"""
The logger: record factory, severity filter and single-consumer dispatch.
"""

import os
import sys
from typing import Any

from .base import Handler
from .diagnostics import get_diagnostic_logger
from .models import LoggerConfig
from .pipeline import Channel, Worker
from .record import Record
from .severity import Severity
from .text import TextHandler
from .timestamp import format_timestamp
from .value import Field, to_value

FATAL_EXIT_CODE = 1


def terminate(status: int) -> None:
    """Flush the standard streams and end the process immediately."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass
    os._exit(status)


class Logger:
    """
    Builds records and hands them to one background consumer thread.

    The consumer is started by the constructor and stopped by
    :meth:`close`, which must run before the process exits for every sent
    record to be written. Records below ``level`` are dropped by the
    consumer. The rest get ``timestamp`` and ``level`` fields prepended
    (when enabled) and are passed to the handler. A fatal record ends the
    process once its handler call has returned.

    Example:
        with Logger(level="debug") as log:
            log.info().message("Hello, World!").send()
    """

    def __init__(self, config: LoggerConfig | None = None, **overrides: Any):
        """
        Initialize a logger and start its consumer thread.

        Args:
            config: Construction options
            **overrides: Individual ``LoggerConfig`` fields, applied over ``config``
        """
        if config is None:
            config = LoggerConfig(**overrides)
        elif overrides:
            config = LoggerConfig(**{**dict(config), **overrides})

        self.config = config
        self.level = config.level
        self.handler: Handler = config.handler if config.handler is not None else TextHandler()
        self._exit = config.exit_func or terminate
        self._diagnostics = get_diagnostic_logger().bind(handler=type(self.handler).__name__)

        self._channel = Channel(config.queue_size)
        self._worker = Worker(self._channel, self._dispatch)
        self._worker.start()

    def record(self, level: Severity | str) -> Record:
        """Create an empty record at ``level`` bound to this logger."""
        return Record(Severity.parse(level), destination=self._channel)

    def fatal(self) -> Record:
        return self.record(Severity.FATAL)

    def error(self) -> Record:
        return self.record(Severity.ERROR)

    def warn(self) -> Record:
        return self.record(Severity.WARN)

    def info(self) -> Record:
        return self.record(Severity.INFO)

    def debug(self) -> Record:
        return self.record(Severity.DEBUG)

    def trace(self) -> Record:
        return self.record(Severity.TRACE)

    def enabled(self, level: Severity | str) -> bool:
        """Whether records at ``level`` would reach the handler."""
        return self.level.allows(Severity.parse(level))

    def close(self) -> None:
        """
        Stop accepting records and wait for the consumer to finish.

        Every record sent before this call has been handled when it
        returns. Calling it again is a no-op.
        """
        self._worker.stop()

    @property
    def closed(self) -> bool:
        return self._channel.closed

    def _dispatch(self, record: Record) -> bool:
        """Consumer callback; returns False to stop consuming. Never raises."""
        if not self.level.allows(record.level):
            return True

        try:
            enriched = record.prepend(*self._enrichment(record))
        except Exception as e:
            self._report("enrichment failed", record, e)
            enriched = record

        try:
            self.handler.handle(enriched)
        except Exception as e:
            self._report("handler failed", record, e)

        if record.level is Severity.FATAL:
            try:
                self._exit(FATAL_EXIT_CODE)
            except Exception as e:
                self._report("exit failed", record, e)
            return False
        return True

    def _report(self, event: str, record: Record, error: Exception) -> None:
        try:
            detail = str(error)
        except Exception:
            detail = object.__repr__(error)
        try:
            self._diagnostics.error(
                event,
                record_level=record.level.value,
                error=detail,
                error_type=type(error).__name__,
            )
        except (OSError, ValueError):
            # stderr itself is unusable
            pass

    def _enrichment(self, record: Record) -> list[Field]:
        fields = []
        if self.config.add_timestamp:
            ts = self.config.timestamp
            fields.append(Field("timestamp", format_timestamp(ts.format, ts.pattern, ts.local)))
        if self.config.add_level:
            fields.append(Field("level", to_value(record.level.value)))
        return fields

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(level={self.level.value!r}, handler={self.handler!r})"
