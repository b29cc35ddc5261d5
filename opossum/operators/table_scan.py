"""Operator that filters the rows of a table by comparing one column with a value."""

from __future__ import annotations

import operator
from collections.abc import Callable
from itertools import repeat

from opossum.operators.abstract_operator import AbstractOperator
from opossum.storage.base import AbstractSegment
from opossum.storage.chunk import Chunk
from opossum.storage.dictionary_segment import DictionarySegment
from opossum.storage.reference_segment import ReferenceSegment
from opossum.storage.table import Table
from opossum.storage.value_segment import ValueSegment
from opossum.types import INVALID_VALUE_ID, ChunkID, ColumnID, PosList, RowID, ScanType
from opossum.utils import ensure, fail
from opossum.variant import AllTypeVariant, type_cast, variant_is_null

__all__ = ["TableScan"]

_COMPARATORS: dict[ScanType, Callable[[object, object], bool]] = {
    ScanType.OpEquals: operator.eq,
    ScanType.OpNotEquals: operator.ne,
    ScanType.OpLessThan: operator.lt,
    ScanType.OpLessThanEquals: operator.le,
    ScanType.OpGreaterThan: operator.gt,
    ScanType.OpGreaterThanEquals: operator.ge,
}


class TableScan(AbstractOperator):
    """Keeps the rows whose value in one column satisfies a comparison.

    The output table has a single chunk of reference segments that point
    into the table holding the actual values, so scanning the output of a
    scan never leads to references to references. NULL values never match.
    """

    def __init__(
        self,
        in_operator: AbstractOperator,
        column_id: ColumnID,
        scan_type: ScanType,
        search_value: AllTypeVariant,
    ) -> None:
        super().__init__(in_operator)
        self._column_id = column_id
        self._scan_type = scan_type
        self._search_value = search_value

    def column_id(self) -> ColumnID:
        """Return the id of the scanned column."""
        return self._column_id

    def scan_type(self) -> ScanType:
        """Return the comparison applied."""
        return self._scan_type

    def search_value(self) -> AllTypeVariant:
        """Return the value rows are compared with."""
        return self._search_value

    def _on_execute(self) -> Table:
        input_table = self._left_input_table()
        ensure(input_table is not None, "Input operator has not been executed")
        column_type = input_table.column_type(self._column_id)

        search_value = None
        if not variant_is_null(self._search_value):
            search_value = type_cast(self._search_value, column_type)

        source: tuple[Table, list[ColumnID]] | None = None
        positions: PosList = []
        for chunk_id in range(input_table.chunk_count()):
            chunk = input_table.get_chunk(ChunkID(chunk_id))
            if chunk.size() == 0:
                continue
            chunk_source = _chunk_source(input_table, chunk)
            if source is None:
                source = chunk_source
            else:
                ensure(
                    source[0] is chunk_source[0] and source[1] == chunk_source[1],
                    "All chunks of the input must refer to the same table",
                )
            if search_value is not None:
                segment = chunk.get_segment(self._column_id)
                positions.extend(_scan_segment(segment, ChunkID(chunk_id), self._scan_type, search_value))

        if source is None:
            source = (input_table, [ColumnID(column_id) for column_id in range(input_table.column_count())])
        return _build_output(input_table, source, positions)


def _chunk_source(input_table: Table, chunk: Chunk) -> tuple[Table, list[ColumnID]]:
    """Return the table holding a chunk's values and the column ids within it."""
    segments = list(chunk)
    references = [segment for segment in segments if isinstance(segment, ReferenceSegment)]
    if not references:
        return input_table, [ColumnID(column_id) for column_id in range(len(segments))]
    ensure(len(references) == len(segments), "A chunk must not mix reference and data segments")
    table = references[0].referenced_table()
    pos_list = references[0].pos_list()
    for segment in references:
        ensure(segment.referenced_table() is table, "Segments of a chunk must refer to the same table")
        ensure(
            segment.pos_list() is pos_list or segment.pos_list() == pos_list,
            "Segments of a chunk must share their positions",
        )
    return table, [segment.referenced_column_id() for segment in references]


def _scan_segment(
    segment: AbstractSegment, chunk_id: ChunkID, scan_type: ScanType, search_value: object
) -> list[RowID]:
    if isinstance(segment, ValueSegment):
        return _scan_value_segment(segment, chunk_id, scan_type, search_value)
    if isinstance(segment, DictionarySegment):
        return _scan_dictionary_segment(segment, chunk_id, scan_type, search_value)
    if isinstance(segment, ReferenceSegment):
        return _scan_reference_segment(segment, scan_type, search_value)
    fail(f"Cannot scan a segment of type {type(segment).__name__}")


def _scan_value_segment(
    segment: ValueSegment, chunk_id: ChunkID, scan_type: ScanType, search_value: object
) -> list[RowID]:
    compare = _COMPARATORS[scan_type]
    nulls = segment.null_values() if segment.is_nullable() else repeat(False)
    return [
        RowID(chunk_id, offset)
        for offset, (value, is_null) in enumerate(zip(segment.values(), nulls))
        if not is_null and compare(value, search_value)
    ]


def _scan_dictionary_segment(
    segment: DictionarySegment, chunk_id: ChunkID, scan_type: ScanType, search_value: object
) -> list[RowID]:
    dictionary_size = segment.unique_values_count()
    lower = segment.lower_bound(search_value)
    upper = segment.upper_bound(search_value)
    lower = dictionary_size if lower == INVALID_VALUE_ID else lower
    upper = dictionary_size if upper == INVALID_VALUE_ID else upper

    # Half-open ranges of matching value ids; the NULL value id lies past all of them.
    ranges = {
        ScanType.OpEquals: [(lower, upper)],
        ScanType.OpNotEquals: [(0, lower), (upper, dictionary_size)],
        ScanType.OpLessThan: [(0, lower)],
        ScanType.OpLessThanEquals: [(0, upper)],
        ScanType.OpGreaterThan: [(upper, dictionary_size)],
        ScanType.OpGreaterThanEquals: [(lower, dictionary_size)],
    }[scan_type]
    ranges = [(start, stop) for start, stop in ranges if start < stop]
    if not ranges:
        return []
    return [
        RowID(chunk_id, offset)
        for offset, value_id in enumerate(segment.attribute_vector())
        if any(start <= value_id < stop for start, stop in ranges)
    ]


def _scan_reference_segment(segment: ReferenceSegment, scan_type: ScanType, search_value: object) -> list[RowID]:
    compare = _COMPARATORS[scan_type]
    matches = []
    for offset, row_id in enumerate(segment.pos_list()):
        value = segment[offset]
        if not variant_is_null(value) and compare(value, search_value):
            matches.append(row_id)
    return matches


def _build_output(input_table: Table, source: tuple[Table, list[ColumnID]], positions: PosList) -> Table:
    output = Table()
    for column_id in range(input_table.column_count()):
        output.add_column_definition(
            input_table.column_name(ColumnID(column_id)),
            input_table.column_type(ColumnID(column_id)),
            input_table.column_nullable(ColumnID(column_id)),
        )
    referenced_table, referenced_column_ids = source
    chunk = output.get_chunk(ChunkID(0))
    for referenced_column_id in referenced_column_ids:
        chunk.add_segment(ReferenceSegment(referenced_table, referenced_column_id, positions))
    return output