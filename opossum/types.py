"""Basic identifier types, row positions and scan predicates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType

__all__ = [
    "ChunkID",
    "ColumnID",
    "ColumnCount",
    "ValueID",
    "ChunkOffset",
    "AttributeVectorWidth",
    "MAX_CHUNK_ID",
    "MAX_COLUMN_ID",
    "MAX_VALUE_ID",
    "MAX_CHUNK_OFFSET",
    "INVALID_CHUNK_OFFSET",
    "INVALID_CHUNK_ID",
    "INVALID_VALUE_ID",
    "RowID",
    "NULL_ROW_ID",
    "ScanType",
    "PosList",
]

# Distinct identifier types keep chunk ids, column ids and value ids apart
# for type checkers while remaining plain integers at run time.
ChunkID = NewType("ChunkID", int)
ColumnID = NewType("ColumnID", int)
ColumnCount = NewType("ColumnCount", int)
ValueID = NewType("ValueID", int)

ChunkOffset = int
AttributeVectorWidth = int

MAX_CHUNK_ID = 2**32 - 1
MAX_COLUMN_ID = 2**16 - 1
MAX_VALUE_ID = 2**32 - 1
MAX_CHUNK_OFFSET = 2**32 - 1

INVALID_CHUNK_OFFSET: ChunkOffset = MAX_CHUNK_OFFSET
INVALID_CHUNK_ID = ChunkID(MAX_CHUNK_ID)
INVALID_VALUE_ID = ValueID(MAX_VALUE_ID)


@dataclass(frozen=True, order=True)
class RowID:
    """Position of a row: the chunk it lives in and its offset within that chunk."""

    chunk_id: ChunkID
    chunk_offset: ChunkOffset

    def is_null(self) -> bool:
        """Whether this position stands for a NULL row."""
        return self.chunk_offset == INVALID_CHUNK_OFFSET


NULL_ROW_ID = RowID(INVALID_CHUNK_ID, INVALID_CHUNK_OFFSET)


class ScanType(Enum):
    """Comparison applied by a table scan."""

    OpEquals = "="
    OpNotEquals = "!="
    OpLessThan = "<"
    OpLessThanEquals = "<="
    OpGreaterThan = ">"
    OpGreaterThanEquals = ">="


PosList = list[RowID]