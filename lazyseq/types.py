"""
lazyseq.types - Shared type definitions for lazyseq

This module contains the small value types and exceptions used by every
other module:
- EmptySequenceError: Raised when a value is requested from an empty sequence
- InvalidArgumentError: Raised for invalid counts passed to take/drop/nth
- Pair: Immutable 2-tuple produced by zip, enumerate and consumed by unzip
- _MISSING: Sentinel for "no value" where None is a legitimate element
"""

from dataclasses import dataclass
from typing import Any, Iterator

# Sentinel for missing values
_MISSING = object()


class EmptySequenceError(IndexError):
    """Raised when the first value of an empty sequence is requested."""

    pass


class InvalidArgumentError(ValueError):
    """Raised when an operator receives an argument outside its domain."""

    pass


@dataclass(frozen=True)
class Pair:
    """
    An immutable pair of values.

    Pairs compare and hash structurally over both components. They unpack
    like a tuple, so ``index, value = pair`` works for enumerate results.

    Attributes:
        first: The first value
        second: The second value
    """

    first: Any
    second: Any

    def __str__(self):
        return f"({self.first}, {self.second})"

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second


# Type exports
__all__ = [
    "EmptySequenceError",
    "InvalidArgumentError",
    "Pair",
]
