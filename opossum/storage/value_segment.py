"""Segments that store their values uncompressed."""

from __future__ import annotations

from opossum.storage.base import AbstractSegment
from opossum.types import ChunkOffset
from opossum.utils import ensure
from opossum.variant import NULL_VALUE, AllTypeVariant, resolve_data_type, type_cast, variant_is_null

__all__ = ["ValueSegment"]

# Bytes taken up by a single value of each data type.
_VALUE_SIZES = {"int": 4, "long": 8, "float": 4, "double": 8, "string": 32}


class ValueSegment(AbstractSegment):
    """Stores all values of a column in a chunk in a plain list."""

    def __init__(self, data_type: str, nullable: bool = False) -> None:
        self._default = resolve_data_type(data_type)()
        self._data_type = data_type
        self._nullable = nullable
        self._values: list = []
        self._null_values: list[bool] = []

    @property
    def data_type(self) -> str:
        """Name of the data type the values have."""
        return self._data_type

    def _check_offset(self, chunk_offset: ChunkOffset) -> None:
        if not 0 <= chunk_offset < len(self._values):
            raise IndexError(f"Chunk offset {chunk_offset} is out of range")

    def __getitem__(self, chunk_offset: ChunkOffset) -> AllTypeVariant:
        self._check_offset(chunk_offset)
        if self._nullable and self._null_values[chunk_offset]:
            return NULL_VALUE
        return self._values[chunk_offset]

    def is_null(self, chunk_offset: ChunkOffset) -> bool:
        """Whether the value at ``chunk_offset`` is NULL."""
        self._check_offset(chunk_offset)
        return self._nullable and self._null_values[chunk_offset]

    def get(self, chunk_offset: ChunkOffset):
        """Return the value at ``chunk_offset``; raise OpossumError if it is NULL."""
        ensure(not self.is_null(chunk_offset), f"Value at offset {chunk_offset} is NULL")
        return self._values[chunk_offset]

    def get_typed_value(self, chunk_offset: ChunkOffset):
        """Return the value at ``chunk_offset``, or None if it is NULL."""
        if self.is_null(chunk_offset):
            return None
        return self._values[chunk_offset]

    def append(self, value: AllTypeVariant) -> None:
        """Add ``value`` at the end, converted to the segment's data type."""
        if variant_is_null(value):
            ensure(self._nullable, "Cannot append NULL to a segment that is not nullable")
            self._values.append(self._default)
            self._null_values.append(True)
            return
        converted = type_cast(value, self._data_type)
        self._values.append(converted)
        if self._nullable:
            self._null_values.append(False)

    def __len__(self) -> int:
        return len(self._values)

    def values(self) -> list:
        """Return the stored values; NULL positions hold the type's default."""
        return self._values

    def is_nullable(self) -> bool:
        """Whether the segment accepts NULL values."""
        return self._nullable

    def null_values(self) -> list[bool]:
        """Return one flag per value telling whether it is NULL."""
        ensure(self._nullable, "Segment is not nullable and has no NULL values")
        return self._null_values

    def estimate_memory_usage(self) -> int:
        return _VALUE_SIZES[self._data_type] * len(self._values)