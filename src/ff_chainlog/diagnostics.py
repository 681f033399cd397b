"""
Side-channel logger for failures inside the logging pipeline itself.

Records never pass through here; it only reports problems such as a
handler failing to write, using structlog on standard error.
"""

import sys
from typing import TextIO

import structlog
from structlog.types import Processor


def _get_default_processors() -> list[Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=False),
    ]


def get_diagnostic_logger(stream: TextIO | None = None) -> structlog.BoundLogger:
    """
    Build a diagnostic logger writing to ``stream`` (default: the current ``sys.stderr``).

    Returns:
        A bound structlog logger tagged with ``logger="ff_chainlog"``
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(file=stream or sys.stderr),
        processors=_get_default_processors(),
        wrapper_class=structlog.BoundLogger,
    ).bind(logger="ff_chainlog")
