"""Error handling and small string helpers shared across the package."""

from __future__ import annotations

from typing import NoReturn

__all__ = [
    "OpossumError",
    "fail",
    "ensure",
    "trim_and_split",
    "split_string_by_delimiter",
    "trim_source_file_path",
]


class OpossumError(Exception):
    """Raised when an invariant of the database is violated or a request is illegal."""


def fail(message: str) -> NoReturn:
    """Raise an OpossumError carrying ``message``."""
    raise OpossumError(message)


def ensure(condition: object, message: str) -> None:
    """Raise an OpossumError with ``message`` unless ``condition`` is truthy."""
    if not condition:
        fail(message)


def trim_and_split(text: str) -> list[str]:
    """Collapse whitespace and split the text into words.

    Leading and trailing whitespace is removed and runs of whitespace between
    words count as a single separator. An input without any words yields a
    single empty string.
    """
    return " ".join(text.split()).split(" ")


def split_string_by_delimiter(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``.

    Empty fields in between are kept, but a trailing delimiter does not start
    a new, empty field, and an empty text yields no fields at all.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def trim_source_file_path(path: str) -> str:
    """Shorten a path to the part starting at its ``src/`` directory."""
    position = path.find("/src/")
    if position == -1:
        return path
    return path[position + 1 :]