"""Operator that writes a table with its data in readable form."""

from __future__ import annotations

import sys
from typing import TextIO

from opossum.operators.abstract_operator import AbstractOperator
from opossum.operators.table_wrapper import TableWrapper
from opossum.storage.table import Table
from opossum.types import ChunkID, ColumnID
from opossum.variant import variant_is_null

__all__ = ["Print"]


def _format_value(value: object) -> str:
    if variant_is_null(value):
        return "NULL"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_column_type(table: Table, column_id: ColumnID) -> str:
    text = table.column_type(column_id)
    if table.column_nullable(column_id):
        text += "_null"
    return text


class Print(AbstractOperator):
    """Writes the columns and every chunk of its input table; the output is the input."""

    def __init__(self, in_operator: AbstractOperator, out: TextIO | None = None) -> None:
        super().__init__(in_operator)
        self._out = sys.stdout if out is None else out

    @staticmethod
    def print(table: Table, out: TextIO | None = None) -> None:
        """Write ``table`` to ``out`` (standard output by default)."""
        wrapper = TableWrapper(table)
        wrapper.execute()
        Print(wrapper, out).execute()

    def _on_execute(self) -> Table:
        table = self._left_input_table()
        widths = self.column_string_widths(8, 20, table)
        column_ids = [ColumnID(column_id) for column_id in range(table.column_count())]

        lines = ["=== Columns"]
        lines.append(
            "".join(f"|{table.column_name(c):>{widths[c]}}" for c in column_ids) + "|"
        )
        lines.append(
            "".join(f"|{_format_column_type(table, c):>{widths[c]}}" for c in column_ids) + "|"
        )

        for chunk_id in range(table.chunk_count()):
            chunk = table.get_chunk(ChunkID(chunk_id))
            lines.append(f"=== Chunk {chunk_id} === ")
            if chunk.size() == 0:
                lines.append("Empty chunk.")
                continue
            segments = list(chunk)
            for row in range(chunk.size()):
                cells = (
                    f"{_format_value(segment[row]):>{widths[column_id]}}|"
                    for column_id, segment in enumerate(segments)
                )
                lines.append("|" + "".join(cells))

        self._out.write("\n".join(lines) + "\n")
        return table

    def column_string_widths(self, min_width: int, max_width: int, table: Table) -> list[int]:
        """Return the printed width of each column.

        Each column is at least ``min_width`` wide and fits its name; cells
        widen it up to ``max_width``.
        """
        widths = [max(min_width, len(name)) for name in table.column_names()]
        for chunk_id in range(table.chunk_count()):
            chunk = table.get_chunk(ChunkID(chunk_id))
            for column_id, segment in enumerate(chunk):
                for row in range(len(segment)):
                    cell_length = len(_format_value(segment[row]))
                    widths[column_id] = max(min_width, widths[column_id], min(max_width, cell_length))
        return widths