"""Parse user index expressions such as ``"1 3-5,8"``.

Spaces and commas are equivalent separators. A token is either a
non-negative integer or an inclusive range ``start-end``. The result is a
sorted, duplicate-free list. Bounds against a snapshot are checked later by
:mod:`gitnav.index.validator`.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Set

from gitnav.errors import (
    InvalidNumberError,
    InvalidRangeFormatError,
    InvalidRangeNumberError,
    InvalidRangeOrderError,
    RangeTooLargeError,
)

_SEPARATORS_RE = re.compile(r"[ ,]+")
_DIGITS_RE = re.compile(r"^[0-9]+$")

# Most indices a single range may name.
MAX_RANGE_SPAN = 10_000


def _to_int(text: str) -> int | None:
    text = text.strip()
    if not _DIGITS_RE.match(text):
        return None
    return int(text)


def _parse_range(token: str) -> range:
    parts = token.split("-")
    if len(parts) != 2:
        raise InvalidRangeFormatError(token)

    start = _to_int(parts[0])
    if start is None:
        raise InvalidRangeNumberError(parts[0])
    end = _to_int(parts[1])
    if end is None:
        raise InvalidRangeNumberError(parts[1])

    if start > end:
        raise InvalidRangeOrderError(start, end)
    if end - start >= MAX_RANGE_SPAN:
        raise RangeTooLargeError(start, end, MAX_RANGE_SPAN)
    return range(start, end + 1)


def parse_indices(text: str) -> List[int]:
    """Return the sorted set of indices named by *text*.

    Empty or whitespace-only input gives an empty list; callers decide whether
    that is an error.
    """
    indices: Set[int] = set()
    for token in _SEPARATORS_RE.split(text.strip()):
        token = token.strip()
        if not token:
            continue
        if "-" in token:
            indices.update(_parse_range(token))
            continue
        number = _to_int(token)
        if number is None:
            raise InvalidNumberError(token)
        indices.add(number)
    return sorted(indices)


def parse_args(args: Iterable[str]) -> List[int]:
    """Parse CLI arguments: ``["1", "3-5,8"]`` is read as ``"1 3-5,8"``."""
    return parse_indices(" ".join(args))


def format_indices(indices: Iterable[int]) -> str:
    """Ascending, comma-joined form that parses back to the same set."""
    return ",".join(str(i) for i in sorted(set(indices)))
