"""Exception hierarchy for gitnav.

Every error a command can surface derives from :class:`NavigatorError`, so the
CLI can print one message and exit with ``exit_code``. Each kind maps to a
different remediation, which is why cache failures are not collapsed into a
single type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

_FORMAT_HINT = "Use format like: 1, 1-3, or 1,3,5"


class NavigatorError(Exception):
    """Base exception for all gitnav errors."""

    exit_code: int = 1


# ── repository ───────────────────────────────────────────────────────────────


class NotInGitRepoError(NavigatorError):
    """Raised when the working directory is not inside a git work tree."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__("Not in a git repository")


# ── index expressions ────────────────────────────────────────────────────────


class IndexParseError(NavigatorError):
    """Raised when an index expression is syntactically invalid."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{detail}. {_FORMAT_HINT}")


class InvalidNumberError(IndexParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid number: '{token}'")


class InvalidRangeFormatError(IndexParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid range format: '{token}'. Ranges look like '3-6'")


class InvalidRangeNumberError(IndexParseError):
    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(f"Invalid number in range: '{number}'")


class InvalidRangeOrderError(IndexParseError):
    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: start ({start}) must be <= end ({end})")


class RangeTooLargeError(IndexParseError):
    def __init__(self, start: int, end: int, limit: int) -> None:
        self.start = start
        self.end = end
        self.limit = limit
        super().__init__(f"Range too large: {start}-{end} spans more than {limit} indices")


class NoIndicesProvidedError(NavigatorError):
    def __init__(self) -> None:
        super().__init__("No file indices provided")


class NoValidIndicesError(NavigatorError):
    def __init__(self) -> None:
        super().__init__(f"No valid indices provided. {_FORMAT_HINT}")


# ── validation ───────────────────────────────────────────────────────────────


class IndexValidationError(NavigatorError):
    """Raised when parsed indices do not fit the cached snapshot."""


class ZeroIndexError(IndexValidationError):
    def __init__(self) -> None:
        super().__init__("Index must be positive (got 0)")


class IndexOutOfRangeError(IndexValidationError):
    def __init__(self, index: int, max_index: int) -> None:
        self.index = index
        self.max_index = max_index
        super().__init__(f"Index {index} is out of range (1-{max_index} available)")


class NoFilesAvailableError(IndexValidationError):
    def __init__(self) -> None:
        super().__init__("No files available to operate on")


# ── cache ────────────────────────────────────────────────────────────────────


class CacheError(NavigatorError):
    """Base class for cache store failures."""


class CacheNotFoundError(CacheError):
    def __init__(self, path: Path, list_command: str = "gitnav status") -> None:
        self.path = path
        super().__init__(
            f"Cache file does not exist at '{path}'. "
            f"Run '{list_command}' first to generate the list."
        )


class CacheReadError(CacheError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read cache file '{path}': {cause}")


class CacheCorruptError(CacheError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse cache file '{path}': {cause}")


class CacheEmptyError(CacheError):
    def __init__(self, kind: str, list_command: str = "gitnav status") -> None:
        self.kind = kind
        super().__init__(
            f"No cached {kind} found. Run '{list_command}' first to generate the list."
        )


class CacheWriteError(CacheError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write cache file '{path}': {cause}")


class CacheLoadError(CacheError):
    """A cache failure re-raised with a command-specific message.

    The original error stays reachable through ``cause`` (and ``__cause__``).
    """

    def __init__(self, message: str, cause: CacheError) -> None:
        self.message = message
        self.cause = cause
        super().__init__(f"{message}: {cause}")


# ── command level ────────────────────────────────────────────────────────────


class NothingAvailableError(NavigatorError):
    def __init__(self, message: str, list_command: str = "gitnav status") -> None:
        self.message = message
        super().__init__(f"{message}. Run '{list_command}' first to see what is available.")


class NoChangesError(NavigatorError):
    """Raised when the working tree has nothing left to act on."""


class StaleSelectionError(NavigatorError):
    def __init__(self, paths: list[str]) -> None:
        self.paths = paths
        listed = ", ".join(paths)
        super().__init__(
            f"Cached entries changed since the last listing: {listed}. "
            "Run 'gitnav status' again."
        )
