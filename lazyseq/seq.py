"""
lazyseq.seq - The sequence abstraction and its variants

A Seq is an immutable, possibly infinite, ordered sequence. Unlike an
iterator it never mutates: advancing means asking for the ``rest``, which is
itself a Seq. Three read-only properties make up the whole contract:

- is_empty: True for the empty sequence
- first:    the first value (raises EmptySequenceError when empty)
- rest:     the remaining values (the empty sequence stays empty)

Variants:
- Empty:  the single empty sequence, EMPTY
- Cons:   a value in front of another sequence
- Repeat: one value forever
- Lazy:   a sequence computed on first access by a generator function,
          memoized and safe to force from several threads

Everything else (equality, hashing, printing, iteration) is derived from the
contract by the structural helpers at the bottom of this module, so all
variants compare, hash and print the same way.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from lazyseq.config import get_config
from lazyseq.types import EmptySequenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# djb2
_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1


class Seq(ABC, Generic[T]):
    """
    Base class of every sequence.

    A basic example of consuming a Seq by hand:

        while not s.is_empty:
            print(s.first)
            s = s.rest

    Seqs are also Python iterables, so ``for value in s`` does the same.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """True if this sequence has no values.

        If False, ``first`` is guaranteed to return a value.
        """

    @property
    @abstractmethod
    def first(self) -> T:
        """The first value. Raises EmptySequenceError on the empty sequence."""

    @property
    @abstractmethod
    def rest(self) -> "Seq[T]":
        """The remaining values as a sub-sequence."""

    def cons(self, value: T) -> "Seq[T]":
        """Return a new sequence with value in front of this one."""
        return Cons(value, self)

    def pipe(self, *fns: Callable[[Any], Any]) -> Any:
        """
        Thread this sequence through one-argument functions, left to right.

            seq_of(1, 2, 3).pipe(curried.seq_map(inc), curried.take(2))
        """
        result = self
        for fn in fns:
            result = fn(result)
        return result

    # A static method so the generator frame does not keep the head alive
    # through a bound self while it walks an infinite sequence.
    @staticmethod
    def _iter(s: "Seq[T]") -> Iterator[T]:
        while not s.is_empty:
            yield s.first
            s = s.rest

    def __iter__(self) -> Iterator[T]:
        return self._iter(self)

    def __bool__(self):
        return not self.is_empty

    def __str__(self):
        return stringify(self)

    def __repr__(self):
        return stringify(self, get_config().print_length)

    def __eq__(self, other):
        if not isinstance(other, Seq):
            return NotImplemented
        return seq_equals(self, other)

    def __hash__(self):
        return seq_hash(self)


class Empty(Seq[Any]):
    """
    The empty sequence.

    It is the terminal sub-sequence of every finite sequence, including
    itself. Only one instance exists; it is shared by sequences of every
    element type since it holds no values.
    """

    __slots__ = ()

    _instance: Optional["Empty"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def first(self):
        """Always raises. Check is_empty before asking for first."""
        raise EmptySequenceError("Empty sequence")

    @property
    def rest(self) -> "Empty":
        return self


EMPTY: Empty = Empty()


class Cons(Seq[T]):
    """A cons cell: a value in front of another sequence."""

    __slots__ = ("_first", "_rest")

    def __init__(self, first: T, rest: Seq[T]):
        if not isinstance(rest, Seq):
            raise TypeError(f"Cons rest must be a Seq, got {type(rest).__name__}")
        self._first = first
        self._rest = rest

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def first(self) -> T:
        return self._first

    @property
    def rest(self) -> Seq[T]:
        return self._rest


class Repeat(Seq[T]):
    """An infinite sequence of a single value. Its rest is itself."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def first(self) -> T:
        return self._value

    @property
    def rest(self) -> "Repeat[T]":
        return self


LazyGenerator = Callable[[], Seq[T]]


class Lazy(Seq[T]):
    """
    A sequence produced on demand by a generator function.

    The generator is not called until is_empty, first or rest is first
    accessed. It then runs exactly once, even when several threads force the
    sequence at the same moment: readers take a lock-free path once a result
    is cached, and a miss re-checks under the lock before calling the
    generator. On success the result is cached and the generator is dropped,
    releasing whatever it captured.

    If the generator raises, the exception reaches whoever forced the
    sequence and nothing is cached; the next access calls the generator
    again.

    The generator must be deterministic and must not depend on external
    state, since it runs at an unpredictable later time. It may return
    another Lazy; such chains are unwrapped in a loop rather than by
    recursion, so skipping long runs of values does not grow the stack.
    """

    __slots__ = ("_gen", "_seq", "_lock", "_evaluating")

    def __init__(self, generator: LazyGenerator):
        if not callable(generator):
            raise TypeError(
                f"Lazy generator must be callable, got {type(generator).__name__}"
            )
        self._gen: Optional[LazyGenerator] = generator
        self._seq: Optional[Seq[T]] = None
        self._lock = threading.RLock()
        self._evaluating = False

    def _step(self) -> Seq[T]:
        """Return the generator's result, calling it at most once per success.

        The result may itself be a Lazy.
        """
        seq = self._seq
        if seq is not None:
            return seq
        with self._lock:
            seq = self._seq
            if seq is not None:
                return seq
            if self._evaluating:
                logger.debug("Lazy %#x forced itself from its own generator", id(self))
                raise RuntimeError("Lazy sequence forced itself during evaluation")
            self._evaluating = True
            try:
                seq = self._gen()
            except Exception:
                logger.debug(
                    "Lazy %#x generator failed, result not cached",
                    id(self),
                    exc_info=True,
                )
                raise
            finally:
                self._evaluating = False
            if not isinstance(seq, Seq):
                raise TypeError(
                    f"Lazy generator must return a Seq, got {type(seq).__name__}"
                )
            self._seq = seq
            self._gen = None
            return seq

    def _realize(self) -> Seq[T]:
        seq = self._seq
        if seq is not None and not isinstance(seq, Lazy):
            return seq
        seq = self._step()
        while isinstance(seq, Lazy):
            seq = seq._step()
        # Equivalent to the cached value, so no lock is needed to replace it.
        self._seq = seq
        return seq

    @property
    def realized(self) -> bool:
        """True once the generator has completed successfully."""
        return self._seq is not None

    @property
    def is_empty(self) -> bool:
        return self._realize().is_empty

    @property
    def first(self) -> T:
        return self._realize().first

    @property
    def rest(self) -> Seq[T]:
        return self._realize().rest


# =============================================================================
# Structural helpers
# =============================================================================


def stringify(seq: Seq, limit: Optional[int] = None) -> str:
    """
    Render a sequence as "(e1, e2, ..., en)", or "()" when empty.

    Elements are rendered with str(). With a limit, at most that many
    elements are rendered and a trailing "..." marks that more exist; the
    same limit applies to elements that are themselves sequences. Without a
    limit, an infinite sequence never finishes rendering.
    """
    parts = []
    while not seq.is_empty:
        if limit is not None and len(parts) >= limit:
            parts.append("...")
            break
        value = seq.first
        if limit is not None and isinstance(value, Seq):
            parts.append(stringify(value, limit))
        else:
            parts.append(str(value))
        seq = seq.rest
    return f"({', '.join(parts)})"


def seq_equals(a: Seq, b: Seq) -> bool:
    """
    Structural equality: both empty, or equal firsts and equal rests.

    Runs forever on two infinite sequences that never differ (unless they
    are the very same object).
    """
    while True:
        if a is b:
            return True
        if a.is_empty:
            return b.is_empty
        if b.is_empty:
            return False
        if a.first != b.first:
            return False
        a = a.rest
        b = b.rest


def seq_hash(seq: Seq) -> int:
    """
    Hash a sequence by folding its elements: h = h * 33 + hash(e).

    Equal sequences hash equally whatever variants built them.
    """
    h = _HASH_SEED
    while not seq.is_empty:
        h = (h * 33 + hash(seq.first)) & _HASH_MASK
        seq = seq.rest
    return h


__all__ = [
    "Seq",
    "Empty",
    "EMPTY",
    "Cons",
    "Repeat",
    "Lazy",
    "LazyGenerator",
    "stringify",
    "seq_equals",
    "seq_hash",
]
