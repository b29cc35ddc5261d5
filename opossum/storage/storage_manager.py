"""Registry of all tables by name."""

from __future__ import annotations

import sys
from typing import ClassVar, TextIO

from opossum.storage.table import Table
from opossum.utils import ensure

__all__ = ["StorageManager"]


class StorageManager:
    """Maps table names to tables; :meth:`get` returns the shared instance."""

    _instance: ClassVar[StorageManager | None] = None

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    @classmethod
    def get(cls) -> StorageManager:
        """Return the process-wide storage manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_table(self, name: str, table: Table) -> None:
        """Register ``table`` under ``name``."""
        ensure(name not in self._tables, f"A table named {name!r} already exists")
        self._tables[name] = table

    def drop_table(self, name: str) -> None:
        """Remove the table called ``name``."""
        ensure(name in self._tables, f"No table named {name!r}")
        del self._tables[name]

    def get_table(self, name: str) -> Table:
        """Return the table called ``name``."""
        ensure(name in self._tables, f"No table named {name!r}")
        return self._tables[name]

    def has_table(self, name: str) -> bool:
        """Whether a table called ``name`` is registered."""
        return name in self._tables

    def table_names(self) -> list[str]:
        """Return the names of all tables in the order they were added."""
        return list(self._tables)

    def print(self, out: TextIO | None = None) -> None:
        """Write name, column count, row count and chunk count of every table."""
        stream = sys.stdout if out is None else out
        for name, table in self._tables.items():
            stream.write(
                f"({name}, {table.column_count()}, {table.row_count()}, {table.chunk_count()})\n"
            )

    def reset(self) -> None:
        """Remove all tables."""
        self._tables.clear()