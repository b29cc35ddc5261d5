"""Operator that hands on an existing table."""

from __future__ import annotations

from opossum.operators.abstract_operator import AbstractOperator
from opossum.storage.table import Table

__all__ = ["TableWrapper"]


class TableWrapper(AbstractOperator):
    """Leaf operator whose output is the table it was created with."""

    def __init__(self, table: Table) -> None:
        super().__init__()
        self._table = table

    def _on_execute(self) -> Table:
        return self._table