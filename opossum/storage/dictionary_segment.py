"""Segments that store their values dictionary-encoded."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from opossum.storage.attribute_vector import FixedWidthIntegerVector
from opossum.storage.base import AbstractAttributeVector, AbstractSegment
from opossum.types import INVALID_VALUE_ID, ChunkOffset, ValueID
from opossum.utils import ensure, fail
from opossum.variant import NULL_VALUE, AllTypeVariant, type_cast, variant_is_null

__all__ = ["DictionarySegment"]

# Bytes taken up by a single dictionary entry of each data type.
_VALUE_SIZES = {"int": 4, "long": 8, "float": 4, "double": 8, "string": 32}


class DictionarySegment(AbstractSegment):
    """Stores a sorted dictionary of distinct values and one value id per row.

    NULL values are encoded with the value id one past the last dictionary
    entry, see :meth:`null_value_id`.
    """

    def __init__(self, segment: AbstractSegment) -> None:
        data_type = getattr(segment, "data_type", None)
        ensure(data_type is not None, "Cannot encode a segment without a known data type")
        self._data_type: str = data_type
        values = [segment[offset] for offset in range(len(segment))]
        self._dictionary = sorted({value for value in values if not variant_is_null(value)})
        value_ids = {value: value_id for value_id, value in enumerate(self._dictionary)}
        null_id = len(self._dictionary)
        self._attribute_vector = FixedWidthIntegerVector(
            null_id if variant_is_null(value) else value_ids[value] for value in values
        )

    @property
    def data_type(self) -> str:
        """Name of the data type the values have."""
        return self._data_type

    def _value_id_at(self, chunk_offset: ChunkOffset) -> int:
        if not 0 <= chunk_offset < len(self._attribute_vector):
            raise IndexError(f"Chunk offset {chunk_offset} is out of range")
        return self._attribute_vector.get(chunk_offset)

    def __getitem__(self, chunk_offset: ChunkOffset) -> AllTypeVariant:
        value_id = self._value_id_at(chunk_offset)
        if value_id == self.null_value_id():
            return NULL_VALUE
        return self._dictionary[value_id]

    def get(self, chunk_offset: ChunkOffset):
        """Return the value at ``chunk_offset``; raise OpossumError if it is NULL."""
        value_id = self._value_id_at(chunk_offset)
        ensure(value_id != self.null_value_id(), f"Value at offset {chunk_offset} is NULL")
        return self._dictionary[value_id]

    def get_typed_value(self, chunk_offset: ChunkOffset):
        """Return the value at ``chunk_offset``, or None if it is NULL."""
        value_id = self._value_id_at(chunk_offset)
        if value_id == self.null_value_id():
            return None
        return self._dictionary[value_id]

    def dictionary(self) -> list:
        """Return the sorted distinct values."""
        return self._dictionary

    def attribute_vector(self) -> AbstractAttributeVector:
        """Return the value ids, one per row."""
        return self._attribute_vector

    def null_value_id(self) -> ValueID:
        """Return the value id that encodes NULL."""
        return ValueID(len(self._dictionary))

    def value_of_value_id(self, value_id: ValueID):
        """Return the dictionary entry for ``value_id``."""
        ensure(0 <= value_id < len(self._dictionary), f"Value id {value_id} is not in the dictionary")
        return self._dictionary[value_id]

    def _search_key(self, value: AllTypeVariant):
        if variant_is_null(value):
            fail("Cannot search a dictionary for NULL")
        return type_cast(value, self._data_type)

    def lower_bound(self, value: AllTypeVariant) -> ValueID:
        """Return the first value id whose value is >= ``value``, or INVALID_VALUE_ID."""
        position = bisect_left(self._dictionary, self._search_key(value))
        if position == len(self._dictionary):
            return INVALID_VALUE_ID
        return ValueID(position)

    def upper_bound(self, value: AllTypeVariant) -> ValueID:
        """Return the first value id whose value is > ``value``, or INVALID_VALUE_ID."""
        position = bisect_right(self._dictionary, self._search_key(value))
        if position == len(self._dictionary):
            return INVALID_VALUE_ID
        return ValueID(position)

    def unique_values_count(self) -> int:
        """Return the number of dictionary entries."""
        return len(self._dictionary)

    def __len__(self) -> int:
        return len(self._attribute_vector)

    def estimate_memory_usage(self) -> int:
        dictionary_bytes = _VALUE_SIZES[self._data_type] * len(self._dictionary)
        return dictionary_bytes + self._attribute_vector.width() * len(self._attribute_vector)