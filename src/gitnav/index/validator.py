"""Bounds-check parsed indices and map them back to snapshot entries."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from gitnav.errors import IndexOutOfRangeError, NoFilesAvailableError, ZeroIndexError

T = TypeVar("T")


def validate(indices: Sequence[int], max_index: int) -> None:
    """Fail fast on the first bad index in ascending order."""
    if max_index == 0:
        raise NoFilesAvailableError()

    for index in sorted(indices):
        if index == 0:
            raise ZeroIndexError()
        if index > max_index:
            raise IndexOutOfRangeError(index, max_index)


def resolve(indices: Sequence[int], entries: Sequence[T]) -> List[T]:
    """Return ``entries[i - 1]`` for each index, ascending and without repeats."""
    validate(indices, len(entries))
    return [entries[i - 1] for i in sorted(set(indices))]
