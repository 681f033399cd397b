"""
Typed field values for log records.

A :class:`Value` is a closed tagged union over integers, floats,
strings, booleans, arrays and string-keyed maps. Arrays and maps nest
arbitrarily; every variant can be displayed and converted to plain
Python data for serializers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class ValueKind(Enum):
    """Discriminator for :class:`Value`."""

    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    ARRAY = "array"
    MAP = "map"


INT_WIDTHS = (8, 16, 32, 64)


@dataclass(frozen=True, slots=True)
class Value:
    """
    An immutable field value.

    ``data`` holds the Python payload for the kind: an ``int`` for
    INT/UINT, ``float``, ``str``, ``bool``, a ``tuple`` of Value for
    ARRAY and a read-only mapping of ``str`` to Value for MAP. ``bits`` is the
    declared width of integer values and ``None`` for other kinds.

    Prefer the named constructors or :func:`to_value` over calling the
    class directly.
    """

    kind: ValueKind
    data: Any
    bits: int | None = None

    @classmethod
    def int(cls, value: int, bits: int = 64) -> "Value":
        """
        Build a signed integer of the given width.

        Raises:
            ValueError: If ``bits`` is not a supported width or ``value`` does not fit
        """
        _check_width(bits)
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in int{bits}")
        return cls(ValueKind.INT, value, bits)

    @classmethod
    def uint(cls, value: int, bits: int = 64) -> "Value":
        """
        Build an unsigned integer of the given width.

        Raises:
            ValueError: If ``bits`` is not a supported width or ``value`` does not fit
        """
        _check_width(bits)
        if not 0 <= value < (1 << bits):
            raise ValueError(f"{value} does not fit in uint{bits}")
        return cls(ValueKind.UINT, value, bits)

    @classmethod
    def float(cls, value: float) -> "Value":
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def string(cls, value: str) -> "Value":
        return cls(ValueKind.STRING, value)

    @classmethod
    def bool(cls, value: bool) -> "Value":
        return cls(ValueKind.BOOL, bool(value))

    @classmethod
    def array(cls, items: Iterable[Any]) -> "Value":
        return cls(ValueKind.ARRAY, tuple(to_value(item) for item in items))

    @classmethod
    def map(cls, entries: Mapping[Any, Any]) -> "Value":
        data = {str(k): to_value(v) for k, v in entries.items()}
        return cls(ValueKind.MAP, MappingProxyType(data))

    def to_python(self) -> Any:
        """Convert to plain Python data (lists and dicts for containers)."""
        if self.kind is ValueKind.ARRAY:
            return [item.to_python() for item in self.data]
        if self.kind is ValueKind.MAP:
            return {key: item.to_python() for key, item in self.data.items()}
        return self.data

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOL:
            return "true" if self.data else "false"
        if self.kind is ValueKind.FLOAT:
            return repr(self.data)
        if self.kind is ValueKind.ARRAY:
            return "[" + ", ".join(str(item) for item in self.data) + "]"
        if self.kind is ValueKind.MAP:
            return "{" + ", ".join(f"{key}: {item}" for key, item in self.data.items()) + "}"
        return str(self.data)


def _check_width(bits: int) -> None:
    if bits not in INT_WIDTHS:
        raise ValueError(f"Unsupported integer width: {bits}. Supported widths: {INT_WIDTHS}")


_INT64_MAX = (1 << 63) - 1


def to_value(obj: Any) -> Value:
    """
    Convert an arbitrary Python object to a :class:`Value`.

    Never fails: objects outside the supported kinds are stored as their
    ``str()`` form. Integers above the signed 64-bit range become UINT.
    """
    if isinstance(obj, Value):
        return obj
    # bool before int, bool is an int subclass
    if isinstance(obj, bool):
        return Value(ValueKind.BOOL, obj)
    if isinstance(obj, int):
        if obj > _INT64_MAX:
            return Value(ValueKind.UINT, obj, 64)
        return Value(ValueKind.INT, obj, 64)
    if isinstance(obj, float):
        return Value(ValueKind.FLOAT, obj)
    if isinstance(obj, str):
        return Value(ValueKind.STRING, obj)
    if isinstance(obj, Mapping):
        return Value.map(obj)
    if isinstance(obj, list | tuple | set | frozenset):
        return Value.array(obj)
    return Value(ValueKind.STRING, str(obj))


@dataclass(frozen=True, slots=True)
class Field:
    """A named value attached to a record."""

    name: str
    value: Value

    @classmethod
    def of(cls, name: str, value: Any) -> "Field":
        """Build a field, converting ``value`` with :func:`to_value`."""
        return cls(name, to_value(value))

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


class Fields(tuple):
    """
    Ordered, immutable sequence of :class:`Field`.

    Duplicate names are kept in order; only the map conversions collapse
    them, with the last occurrence winning.
    """

    __slots__ = ()

    def __new__(cls, fields: Iterable[Field] = ()):
        return super().__new__(cls, fields)

    def as_map(self) -> dict[str, Value]:
        """Map of field name to value, last duplicate wins."""
        return {field.name: field.value for field in self}

    def to_dict(self) -> dict[str, Any]:
        """Map of field name to plain Python data, last duplicate wins."""
        return {name: value.to_python() for name, value in self.as_map().items()}

    def names(self) -> list[str]:
        return [field.name for field in self]

    def __repr__(self) -> str:
        return f"Fields({list(self)!r})"
