"""
Severity levels and their filtering order.
"""

from enum import Enum


class Severity(Enum):
    """
    Record severity, from most restrictive (``NONE``) to least (``TRACE``).

    The value is the display string used for the ``level`` field.
    Ordering is defined by :data:`_RANK`, not by declaration order.
    """

    NONE = "none"
    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().lower()
            name = _ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        return None

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """
        Parse a severity name (case-insensitive, ``warning``/``critical`` accepted).

        Raises:
            ValueError: If the name is not a known severity
        """
        return cls(value)

    @property
    def rank(self) -> int:
        """Position in the filtering order; ``none`` is 0 and ``trace`` is 6."""
        return _RANK[self]

    def allows(self, level: "Severity") -> bool:
        """
        Whether a record at ``level`` passes when ``self`` is the configured floor.

        ``none`` on either side never passes.
        """
        if self is Severity.NONE or level is Severity.NONE:
            return False
        return _RANK[level] <= _RANK[self]

    def __str__(self) -> str:
        return self.value


_RANK = {
    Severity.NONE: 0,
    Severity.FATAL: 1,
    Severity.ERROR: 2,
    Severity.WARN: 3,
    Severity.INFO: 4,
    Severity.DEBUG: 5,
    Severity.TRACE: 6,
}

_ALIASES = {
    "warning": "warn",
    "critical": "fatal",
}
