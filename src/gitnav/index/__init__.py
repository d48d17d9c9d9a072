"""Index expressions: parsing, validation, and command initialization."""

from gitnav.index.context import IndexCommandContext, initialize
from gitnav.index.parser import format_indices, parse_args, parse_indices
from gitnav.index.validator import resolve, validate

__all__ = [
    "IndexCommandContext",
    "format_indices",
    "initialize",
    "parse_args",
    "parse_indices",
    "resolve",
    "validate",
]
