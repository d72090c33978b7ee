"""
lazyseq.plist - Persistent list

A PList is a non-lazy sequence that knows its size. Lists only grow by
prepending with ``conj``, which returns a new list and leaves the original
untouched; the two share every existing cell.

    lst = plist(1, 2, 3)      # (1, 2, 3), size 3
    bigger = lst.conj(0)      # (0, 1, 2, 3), size 4; lst is unchanged
"""

from typing import Any, Optional, TypeVar

from lazyseq.seq import Cons, Seq
from lazyseq.types import EmptySequenceError

T = TypeVar("T")


class PList(Seq[T]):
    """Base class of the persistent list variants."""

    __slots__ = ("_size",)

    def __init__(self, size: int):
        self._size = size

    @property
    def size(self) -> int:
        """Number of elements, in O(1)."""
        return self._size

    def __len__(self):
        return self._size

    def conj(self, value: T) -> "PList[T]":
        """Return a new list with value prepended. Size grows by one."""
        return PListCons(value, self)


class PListEmpty(PList[Any]):
    """The empty persistent list. Only one instance exists."""

    __slots__ = ()

    _instance: Optional["PListEmpty"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        super().__init__(0)

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def first(self):
        raise EmptySequenceError("Empty list")

    @property
    def rest(self) -> "PListEmpty":
        return self


EMPTY_LIST: PListEmpty = PListEmpty()


class PListCons(PList[T]):
    """A non-empty persistent list: a cons cell plus the list size."""

    __slots__ = ("_cell",)

    def __init__(self, first: T, rest: PList[T]):
        if not isinstance(rest, PList):
            raise TypeError(
                f"PListCons rest must be a PList, got {type(rest).__name__}"
            )
        super().__init__(rest.size + 1)
        self._cell = Cons(first, rest)

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def first(self) -> T:
        return self._cell.first

    @property
    def rest(self) -> PList[T]:
        return self._cell.rest


def plist(*values) -> PList:
    """Return a persistent list of the given values, in order."""
    result = EMPTY_LIST
    for value in reversed(values):
        result = result.conj(value)
    return result


__all__ = [
    "PList",
    "PListEmpty",
    "PListCons",
    "EMPTY_LIST",
    "plist",
]
