"""
Timestamp rendering for the ``timestamp`` enrichment field.
"""

import time
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from .value import Value

NANOS_PER_SECOND = 1_000_000_000


class TimestampFormat(str, Enum):
    """Supported timestamp formats."""

    DEFAULT = "default"
    RFC3339 = "rfc3339"
    RFC3339_MICRO = "rfc3339_micro"
    RFC3339_NANO = "rfc3339_nano"
    UNIX_STRING = "unix_string"
    UNIX_MICRO_STRING = "unix_micro_string"
    UNIX_NANO_STRING = "unix_nano_string"
    UNIX = "unix"
    UNIX_MILLI = "unix_milli"
    UNIX_MICRO = "unix_micro"
    UNIX_NANO = "unix_nano"
    CUSTOM = "custom"


# Digits of sub-second precision for each string format
_RFC3339_DIGITS = {
    TimestampFormat.DEFAULT: 3,
    TimestampFormat.RFC3339: 0,
    TimestampFormat.RFC3339_MICRO: 6,
    TimestampFormat.RFC3339_NANO: 9,
}

_UNIX_STRING_DIGITS = {
    TimestampFormat.UNIX_STRING: 3,
    TimestampFormat.UNIX_MICRO_STRING: 6,
    TimestampFormat.UNIX_NANO_STRING: 9,
}

_UNIX_DIVISORS = {
    TimestampFormat.UNIX: NANOS_PER_SECOND,
    TimestampFormat.UNIX_MILLI: 1_000_000,
    TimestampFormat.UNIX_MICRO: 1_000,
    TimestampFormat.UNIX_NANO: 1,
}


def format_timestamp(
    fmt: TimestampFormat = TimestampFormat.DEFAULT,
    pattern: str | None = None,
    local: bool = False,
    clock: Callable[[], int] = time.time_ns,
) -> Value:
    """
    Render the current time as a field value.

    Args:
        fmt: Timestamp format
        pattern: ``strftime`` pattern, used only with ``TimestampFormat.CUSTOM``
        local: Use the local timezone instead of UTC
        clock: Source of the current time in nanoseconds since the epoch

    Returns:
        An INT value for the integer ``unix*`` formats, a STRING value otherwise
    """
    fmt = TimestampFormat(fmt)
    now_ns = clock()

    if fmt in _UNIX_DIVISORS:
        return Value.int(now_ns // _UNIX_DIVISORS[fmt])

    seconds, nanos = divmod(now_ns, NANOS_PER_SECOND)

    if fmt in _UNIX_STRING_DIGITS:
        return Value.string(f"{seconds}.{_fraction(nanos, _UNIX_STRING_DIGITS[fmt])}")

    moment = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanos // 1_000)
    if local:
        moment = moment.astimezone()

    if fmt is TimestampFormat.CUSTOM:
        return Value.string(moment.strftime(pattern or ""))

    digits = _RFC3339_DIGITS[fmt]
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if digits:
        text += "." + _fraction(nanos, digits)
    return Value.string(text + _zone_suffix(moment, local))


def _fraction(nanos: int, digits: int) -> str:
    return f"{nanos:09d}"[:digits]


def _zone_suffix(moment: datetime, local: bool) -> str:
    if not local:
        return "Z"
    offset = moment.strftime("%z")
    return f"{offset[:3]}:{offset[3:]}"
