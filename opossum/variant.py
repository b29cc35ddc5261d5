"""Values stored in the database: the supported data types and SQL NULL."""

from __future__ import annotations

import enum
import math
import re
from typing import Union

from opossum.utils import fail

__all__ = [
    "NullValue",
    "NULL_VALUE",
    "DATA_TYPES",
    "AllTypeVariant",
    "variant_is_null",
    "type_cast",
    "resolve_data_type",
]


class _Truth(enum.Enum):
    """Truth values of SQL's three-valued logic."""

    FALSE = "false"
    TRUE = "true"
    UNKNOWN = "unknown"

    def __bool__(self) -> bool:
        # Only a definite TRUE counts as true; UNKNOWN behaves like FALSE.
        return self is _Truth.TRUE


def _compare_with_null(other: object) -> _Truth:
    """Result of comparing NULL with ``other``: always UNKNOWN."""
    del other
    return _Truth.UNKNOWN


class NullValue:
    """SQL NULL.

    Following ternary logic, every comparison involving NULL is false,
    including comparisons of NULL with NULL. Use :func:`variant_is_null`
    to check whether a value is NULL.
    """

    __slots__ = ()
    _instance: NullValue | None = None

    def __new__(cls) -> NullValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __ne__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __lt__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __le__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __gt__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __ge__(self, other: object) -> bool:
        return bool(_compare_with_null(other))

    def __neg__(self) -> NullValue:
        return self

    def __hash__(self) -> int:
        return 0

    def __str__(self) -> str:
        return "NULL"

    def __repr__(self) -> str:
        return "NULL"


NULL_VALUE = NullValue()

AllTypeVariant = Union[NullValue, int, float, str]

_PYTHON_TYPES: dict[str, type] = {
    "int": int,
    "long": int,
    "float": float,
    "double": float,
    "string": str,
}

DATA_TYPES: tuple[str, ...] = tuple(_PYTHON_TYPES)

_INTEGER_RANGES = {
    "int": (-(2**31), 2**31 - 1),
    "long": (-(2**63), 2**63 - 1),
}

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def variant_is_null(value: object) -> bool:
    """Whether ``value`` is the SQL NULL value."""
    return isinstance(value, NullValue)


def resolve_data_type(type_string: str) -> type:
    """Return the Python type that holds values of the named data type."""
    try:
        return _PYTHON_TYPES[type_string]
    except KeyError:
        fail(f"Unknown data type: {type_string!r}")


def _to_string(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, NullValue):
        return "NULL"
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _parse_float(text: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(text):
        fail(f"Cannot convert {text!r} to a floating point number")
    return float(text)


def _to_float(value: object) -> float:
    if isinstance(value, NullValue):
        fail("Cannot convert NULL to a floating point number")
    if isinstance(value, str):
        return _parse_float(value)
    try:
        return float(value)  # type: ignore[arg-type]
    except OverflowError:
        fail(f"Value {value!r} is out of range for a floating point number")


def _to_integer(value: object, data_type: str) -> int:
    if isinstance(value, NullValue):
        fail("Cannot convert NULL to an integer")
    if isinstance(value, str):
        if _INTEGER_PATTERN.fullmatch(value):
            result = int(value)
        else:
            value = _parse_float(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            fail(f"Cannot convert {value!r} to an integer")
        result = int(value)
    elif isinstance(value, int):
        result = value
    lowest, highest = _INTEGER_RANGES[data_type]
    if not lowest <= result <= highest:
        fail(f"Value {result} is out of range for data type {data_type!r}")
    return result


def type_cast(value: object, data_type: str) -> int | float | str:
    """Convert ``value`` to the named data type.

    Values that already have the target type are returned unchanged. Other
    values are converted through their text form; integers also accept
    numbers with a fractional part, which are truncated towards zero.
    Conversions that cannot succeed raise an OpossumError.
    """
    target = resolve_data_type(data_type)
    if isinstance(value, bool):
        value = int(value)
    if not isinstance(value, (NullValue, int, float, str)):
        fail(f"Unsupported value of type {type(value).__name__}")
    if target is str:
        return _to_string(value)
    if target is float:
        return _to_float(value)
    return _to_integer(value, data_type)