"""Segments that refer to values of another table by position."""

from __future__ import annotations

from collections.abc import Sequence

from opossum.storage.base import AbstractSegment
from opossum.storage.table import Table
from opossum.types import ChunkOffset, ColumnID, RowID
from opossum.utils import ensure
from opossum.variant import NULL_VALUE, AllTypeVariant

__all__ = ["ReferenceSegment"]

# A row id is a four byte chunk id and a four byte chunk offset.
_ROW_ID_SIZE = 8


class ReferenceSegment(AbstractSegment):
    """Holds a list of positions into one column of a referenced table."""

    def __init__(self, referenced_table: Table, referenced_column_id: ColumnID, pos: Sequence[RowID]) -> None:
        ensure(
            0 <= referenced_column_id < referenced_table.column_count(),
            f"Column id {referenced_column_id} is out of range",
        )
        self._table = referenced_table
        self._column_id = referenced_column_id
        self._pos_list = pos

    @property
    def data_type(self) -> str:
        """Name of the data type of the referenced column."""
        return self._table.column_type(self._column_id)

    def __getitem__(self, chunk_offset: ChunkOffset) -> AllTypeVariant:
        if not 0 <= chunk_offset < len(self._pos_list):
            raise IndexError(f"Chunk offset {chunk_offset} is out of range")
        row_id = self._pos_list[chunk_offset]
        if row_id.is_null():
            return NULL_VALUE
        segment = self._table.get_chunk(row_id.chunk_id).get_segment(self._column_id)
        return segment[row_id.chunk_offset]

    def __len__(self) -> int:
        return len(self._pos_list)

    def pos_list(self) -> Sequence[RowID]:
        """Return the referenced positions."""
        return self._pos_list

    def referenced_table(self) -> Table:
        """Return the table the positions point into."""
        return self._table

    def referenced_column_id(self) -> ColumnID:
        """Return the id of the referenced column."""
        return self._column_id

    def estimate_memory_usage(self) -> int:
        return _ROW_ID_SIZE * len(self._pos_list)