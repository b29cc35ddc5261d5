"""Horizontal partitions of a table."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from opossum.storage.base import AbstractSegment
from opossum.storage.value_segment import ValueSegment
from opossum.types import ChunkOffset, ColumnCount, ColumnID
from opossum.utils import ensure
from opossum.variant import AllTypeVariant

__all__ = ["Chunk"]


class Chunk:
    """Holds one segment for each column of a table."""

    def __init__(self) -> None:
        self._segments: list[AbstractSegment] = []

    def add_segment(self, segment: AbstractSegment) -> None:
        """Add a segment to the right of the chunk."""
        self._segments.append(segment)

    def column_count(self) -> ColumnCount:
        """Return the number of columns."""
        return ColumnCount(len(self._segments))

    def size(self) -> ChunkOffset:
        """Return the number of rows."""
        if not self._segments:
            return 0
        return len(self._segments[0])

    def append(self, values: Sequence[AllTypeVariant]) -> None:
        """Add a row given as one value per column; slow, meant for tests."""
        ensure(
            len(values) == len(self._segments),
            f"Row has {len(values)} values but the chunk has {len(self._segments)} columns",
        )
        ensure(
            all(isinstance(segment, ValueSegment) for segment in self._segments),
            "Cannot append to a chunk holding encoded segments",
        )
        for segment, value in zip(self._segments, values):
            segment.append(value)

    def get_segment(self, column_id: ColumnID) -> AbstractSegment:
        """Return the segment of the given column."""
        ensure(0 <= column_id < len(self._segments), f"Column id {column_id} is out of range")
        return self._segments[column_id]

    def __iter__(self) -> Iterator[AbstractSegment]:
        return iter(self._segments)