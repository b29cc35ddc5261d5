"""Attribute vectors storing value ids with a fixed integer width."""

from __future__ import annotations

from array import array
from collections.abc import Iterable, Iterator

from opossum.storage.base import AbstractAttributeVector
from opossum.types import MAX_VALUE_ID, AttributeVectorWidth, ValueID
from opossum.utils import fail

__all__ = ["FixedWidthIntegerVector", "width_for"]

_WIDTHS = (1, 2, 4)


def width_for(max_value_id: int) -> AttributeVectorWidth:
    """Return the smallest width in bytes able to hold ``max_value_id``."""
    if not 0 <= max_value_id <= MAX_VALUE_ID:
        fail(f"Value id {max_value_id} cannot be stored in an attribute vector")
    for width in _WIDTHS:
        if max_value_id < 1 << (8 * width):
            return width
    fail(f"Value id {max_value_id} cannot be stored in an attribute vector")


def _typecode_for(width: int) -> str:
    for typecode in "BHIL":
        if array(typecode).itemsize == width:
            return typecode
    fail(f"Unsupported attribute vector width: {width}")


class FixedWidthIntegerVector(AbstractAttributeVector):
    """Value ids stored as unsigned integers of 1, 2 or 4 bytes each."""

    def __init__(self, value_ids: Iterable[int] = (), width: int | None = None) -> None:
        value_ids = list(value_ids)
        if width is None:
            width = width_for(max(value_ids, default=0))
        elif width not in _WIDTHS:
            fail(f"Unsupported attribute vector width: {width}")
        self._width = width
        try:
            self._values = array(_typecode_for(width), value_ids)
        except OverflowError:
            fail(f"Value ids do not fit into {width} byte(s)")

    def get(self, index: int) -> ValueID:
        return ValueID(self._values[index])

    def set(self, index: int, value_id: ValueID) -> None:
        try:
            self._values[index] = value_id
        except OverflowError:
            fail(f"Value id {value_id} does not fit into {self._width} byte(s)")

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[ValueID]:
        return (ValueID(value_id) for value_id in self._values)

    def width(self) -> AttributeVectorWidth:
        return self._width