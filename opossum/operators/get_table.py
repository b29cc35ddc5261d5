"""Operator that fetches a table from the storage manager."""

from __future__ import annotations

from opossum.operators.abstract_operator import AbstractOperator
from opossum.storage.storage_manager import StorageManager
from opossum.storage.table import Table

__all__ = ["GetTable"]


class GetTable(AbstractOperator):
    """Leaf operator whose output is the registered table of the given name."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    def table_name(self) -> str:
        """Return the name of the table to fetch."""
        return self._name

    def _on_execute(self) -> Table:
        return StorageManager.get().get_table(self._name)