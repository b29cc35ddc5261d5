"""Tables partitioned horizontally into chunks."""

from __future__ import annotations

from collections.abc import Sequence

from opossum.storage.chunk import Chunk
from opossum.storage.dictionary_segment import DictionarySegment
from opossum.storage.value_segment import ValueSegment
from opossum.types import MAX_CHUNK_OFFSET, MAX_COLUMN_ID, ChunkID, ChunkOffset, ColumnCount, ColumnID
from opossum.utils import ensure, fail
from opossum.variant import AllTypeVariant, resolve_data_type

__all__ = ["Table"]


class Table:
    """A table made of chunks of at most ``target_chunk_size`` rows each.

    A target chunk size of 0 lets chunks grow without limit. A table always
    holds at least one chunk.
    """

    def __init__(self, target_chunk_size: ChunkOffset = MAX_CHUNK_OFFSET - 1) -> None:
        ensure(0 <= target_chunk_size <= MAX_CHUNK_OFFSET, "Target chunk size is out of range")
        self._target_chunk_size = target_chunk_size
        self._column_names: list[str] = []
        self._column_types: list[str] = []
        self._column_nullables: list[bool] = []
        self._chunks: list[Chunk] = []
        self.create_new_chunk()

    def column_count(self) -> ColumnCount:
        """Return the number of columns."""
        return ColumnCount(len(self._column_names))

    def row_count(self) -> int:
        """Return the number of rows across all chunks."""
        return sum(chunk.size() for chunk in self._chunks)

    def chunk_count(self) -> ChunkID:
        """Return the number of chunks."""
        return ChunkID(len(self._chunks))

    def get_chunk(self, chunk_id: ChunkID) -> Chunk:
        """Return the chunk with the given id."""
        ensure(0 <= chunk_id < len(self._chunks), f"Chunk id {chunk_id} is out of range")
        return self._chunks[chunk_id]

    def column_names(self) -> list[str]:
        """Return the names of all columns."""
        return list(self._column_names)

    def _check_column_id(self, column_id: ColumnID) -> None:
        ensure(0 <= column_id < len(self._column_names), f"Column id {column_id} is out of range")

    def column_name(self, column_id: ColumnID) -> str:
        """Return the name of the given column."""
        self._check_column_id(column_id)
        return self._column_names[column_id]

    def column_type(self, column_id: ColumnID) -> str:
        """Return the data type of the given column."""
        self._check_column_id(column_id)
        return self._column_types[column_id]

    def column_nullable(self, column_id: ColumnID) -> bool:
        """Whether the given column accepts NULL values."""
        self._check_column_id(column_id)
        return self._column_nullables[column_id]

    def column_id_by_name(self, column_name: str) -> ColumnID:
        """Return the id of the first column with the given name."""
        try:
            return ColumnID(self._column_names.index(column_name))
        except ValueError:
            fail(f"No column named {column_name!r}")

    def target_chunk_size(self) -> ChunkOffset:
        """Return the maximum number of rows per chunk."""
        return self._target_chunk_size

    def add_column_definition(self, name: str, type_name: str, nullable: bool) -> None:
        """Record a column without creating segments for it."""
        resolve_data_type(type_name)
        ensure(len(self._column_names) <= MAX_COLUMN_ID, "Too many columns")
        self._column_names.append(name)
        self._column_types.append(type_name)
        self._column_nullables.append(nullable)

    def add_column(self, name: str, type_name: str, nullable: bool) -> None:
        """Add a column to the right of the table; only allowed while it holds no rows."""
        ensure(self.row_count() == 0, "Cannot add a column to a table that already holds rows")
        self.add_column_definition(name, type_name, nullable)
        for chunk in self._chunks:
            chunk.add_segment(ValueSegment(type_name, nullable))

    def _accepts_rows(self, chunk: Chunk) -> bool:
        if 0 < self._target_chunk_size <= chunk.size():
            return False
        return all(isinstance(segment, ValueSegment) for segment in chunk)

    def append(self, values: Sequence[AllTypeVariant]) -> None:
        """Add a row at the end of the table; slow, meant for tests."""
        ensure(
            len(values) == len(self._column_names),
            f"Row has {len(values)} values but the table has {len(self._column_names)} columns",
        )
        if not self._accepts_rows(self._chunks[-1]):
            self.create_new_chunk()
        self._chunks[-1].append(values)

    def create_new_chunk(self) -> None:
        """Append an empty chunk with one value segment per column."""
        chunk = Chunk()
        for type_name, nullable in zip(self._column_types, self._column_nullables):
            chunk.add_segment(ValueSegment(type_name, nullable))
        self._chunks.append(chunk)

    def compress_chunk(self, chunk_id: ChunkID) -> None:
        """Replace the segments of a chunk with dictionary-encoded ones."""
        chunk = self.get_chunk(chunk_id)
        compressed = Chunk()
        for segment in chunk:
            compressed.add_segment(DictionarySegment(segment))
        self._chunks[chunk_id] = compressed