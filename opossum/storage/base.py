"""Abstract interfaces for attribute vectors and segments."""

from __future__ import annotations

from abc import ABC, abstractmethod

from opossum.types import AttributeVectorWidth, ChunkOffset, ValueID
from opossum.variant import AllTypeVariant

__all__ = ["AbstractAttributeVector", "AbstractSegment"]


class AbstractAttributeVector(ABC):
    """A sequence of value ids, e.g. stored with a fixed integer width."""

    @abstractmethod
    def get(self, index: int) -> ValueID:
        """Return the value id at ``index``."""

    @abstractmethod
    def set(self, index: int, value_id: ValueID) -> None:
        """Store ``value_id`` at ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of value ids."""

    @abstractmethod
    def width(self) -> AttributeVectorWidth:
        """Return the number of bytes used for each value id."""


class AbstractSegment(ABC):
    """The values of one column within one chunk."""

    @abstractmethod
    def __getitem__(self, chunk_offset: ChunkOffset) -> AllTypeVariant:
        """Return the value at ``chunk_offset``; slow, meant for tests and printing."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of values."""

    @abstractmethod
    def estimate_memory_usage(self) -> int:
        """Return the estimated number of bytes the values take up."""