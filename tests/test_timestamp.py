"""
Tests for timestamp formatting.
"""

import re

import pytest
from ff_chainlog import TimestampFormat, Value, ValueKind, format_timestamp

# 2026-01-03T09:33:35.366123456Z
NOW_NS = 1_767_432_815_366_123_456


def fixed_clock():
    return NOW_NS


class TestStringFormats:
    """Test the RFC3339 and epoch-string families."""

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (TimestampFormat.DEFAULT, "2026-01-03T09:33:35.366Z"),
            (TimestampFormat.RFC3339, "2026-01-03T09:33:35Z"),
            (TimestampFormat.RFC3339_MICRO, "2026-01-03T09:33:35.366123Z"),
            (TimestampFormat.RFC3339_NANO, "2026-01-03T09:33:35.366123456Z"),
            (TimestampFormat.UNIX_STRING, "1767432815.366"),
            (TimestampFormat.UNIX_MICRO_STRING, "1767432815.366123"),
            (TimestampFormat.UNIX_NANO_STRING, "1767432815.366123456"),
        ],
    )
    def test_utc_strings(self, fmt, expected):
        """String formats render UTC with the expected precision."""
        assert format_timestamp(fmt, clock=fixed_clock) == Value.string(expected)

    def test_format_accepts_plain_string(self):
        """The format can be given by name."""
        assert str(format_timestamp("rfc3339", clock=fixed_clock)) == "2026-01-03T09:33:35Z"

    def test_local_time_has_offset(self):
        """Local time ends in a numeric offset instead of Z."""
        value = format_timestamp(TimestampFormat.RFC3339, local=True, clock=fixed_clock)
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", value.data)

    def test_real_clock(self):
        """The default clock produces a well-formed default timestamp."""
        value = format_timestamp()
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", value.data)


class TestIntegerFormats:
    """Test raw epoch integers."""

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (TimestampFormat.UNIX, 1_767_432_815),
            (TimestampFormat.UNIX_MILLI, 1_767_432_815_366),
            (TimestampFormat.UNIX_MICRO, 1_767_432_815_366_123),
            (TimestampFormat.UNIX_NANO, NOW_NS),
        ],
    )
    def test_epoch_integers(self, fmt, expected):
        """Integer formats truncate to their precision."""
        value = format_timestamp(fmt, clock=fixed_clock)
        assert value.kind is ValueKind.INT
        assert value.data == expected


class TestCustomFormat:
    """Test strftime patterns."""

    def test_custom_pattern(self):
        """custom delegates to strftime."""
        value = format_timestamp(TimestampFormat.CUSTOM, "%Y/%m/%d %H:%M", clock=fixed_clock)
        assert value == Value.string("2026/01/03 09:33")

    def test_custom_microseconds(self):
        """Sub-second precision is available to the pattern."""
        value = format_timestamp(TimestampFormat.CUSTOM, "%S.%f", clock=fixed_clock)
        assert value.data == "35.366123"
