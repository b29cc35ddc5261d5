"""Base class of all operators of a query plan."""

from __future__ import annotations

from abc import ABC, abstractmethod

from opossum.storage.table import Table
from opossum.utils import ensure

__all__ = ["AbstractOperator"]


class AbstractOperator(ABC):
    """An operator with up to two input operators and one output table.

    An operator is constructed first; its inputs need not have run yet. Then
    :meth:`execute` does the actual work, by which time the inputs have
    executed. Finally consumers fetch the result with :meth:`get_output`,
    which returns None until the operator has been executed. Operators are
    not meant to be executed twice.
    """

    def __init__(self, left: AbstractOperator | None = None, right: AbstractOperator | None = None) -> None:
        self._left_input = left
        self._right_input = right
        self._output: Table | None = None

    def execute(self) -> None:
        """Run the operator and keep its result."""
        self._output = self._on_execute()

    def get_output(self) -> Table | None:
        """Return the result table, or None if the operator has not run yet."""
        return self._output

    def left_input(self) -> AbstractOperator | None:
        """Return the left input operator."""
        return self._left_input

    def right_input(self) -> AbstractOperator | None:
        """Return the right input operator."""
        return self._right_input

    @abstractmethod
    def _on_execute(self) -> Table:
        """Compute and return the result table."""

    def _left_input_table(self) -> Table | None:
        ensure(self._left_input is not None, "Operator has no left input")
        return self._left_input.get_output()

    def _right_input_table(self) -> Table | None:
        ensure(self._right_input is not None, "Operator has no right input")
        return self._right_input.get_output()