"""
lazyseq.core - Sequence constructors and operators

This module is the working vocabulary of the library. Every lazy operator
returns a Lazy that computes nothing until it is traversed, and because Lazy
memoizes, traversing the same result twice never repeats work.

Categories:
- Construction: empty, cons, lazy, repeat, seq_of, seq, lazy_seq
- Lazy transformations: seq_map, seq_filter, distinct, take, take_while,
  concat, cycle, flatten, flatten_safe, flat_map, seq_zip, seq_enumerate,
  interleave, iterate, seq_range, unzip
- Eager consumers: fold_left, fold_right, reduce, for_each, reverse, find,
  seq_any, seq_all, seq_min, seq_max, min_by, max_by, drop, drop_while, nth,
  count, to_list

Operators whose natural name shadows a Python builtin carry a ``seq_``
prefix. Any argument documented as a sequence may also be a plain Python
iterable; it is adapted with lazy_seq.

Hazards:
- Eager consumers (folds, count, to_list, reverse, equality, hashing) never
  return on an infinite sequence.
- Long sequences are safe to traverse, but every stacked lazy operator adds
  a few Python frames to each force. A pipeline a few hundred operators
  deep (seq_map applied to its own result in a loop, for example) can
  exceed the recursion limit and raise RecursionError.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from lazyseq.plist import PList
from lazyseq.seq import EMPTY, Cons, Lazy, Repeat, Seq
from lazyseq.types import _MISSING, EmptySequenceError, InvalidArgumentError, Pair

T = TypeVar("T")
U = TypeVar("U")

# =============================================================================
# Construction
# =============================================================================


def empty() -> Seq:
    """Return the empty sequence."""
    return EMPTY


def cons(value, seq: Seq) -> Seq:
    """Return a new sequence with value in front of seq."""
    return Cons(value, seq)


def lazy(generator: Callable[[], Seq]) -> Seq:
    """Return a sequence computed by generator on first access."""
    return Lazy(generator)


def repeat(value) -> Seq:
    """Return an infinite sequence of value."""
    return Repeat(value)


def seq_of(*values) -> Seq:
    """Return a sequence of the given values, in order."""
    result = EMPTY
    for value in reversed(values):
        result = Cons(value, result)
    return result


def seq(iterable: Optional[Iterable]) -> Seq:
    """Eagerly convert an iterable to a sequence of cons cells.

    Seqs are returned unchanged and None becomes the empty sequence. The
    iterable must be finite.
    """
    if iterable is None:
        return EMPTY
    if isinstance(iterable, Seq):
        return iterable
    return seq_of(*iterable)


def lazy_seq(iterable: Optional[Iterable]) -> Seq:
    """Lazily convert an iterable to a sequence.

    Each element is pulled from the underlying iterator only when its node
    is first forced, so infinite iterators and generators are fine. Seqs
    are returned unchanged and None becomes the empty sequence.
    """
    if iterable is None:
        return EMPTY
    if isinstance(iterable, Seq):
        return iterable
    return _iterator_seq(iter(iterable))


def _iterator_seq(it: Iterator) -> Seq:
    # Pulling from an iterator cannot be repeated, so a failed pull is
    # remembered and re-raised on every later force of this node.
    failure = []

    def gen():
        if failure:
            raise failure[0]
        try:
            value = next(it, _MISSING)
        except Exception as e:
            failure.append(e)
            raise
        if value is _MISSING:
            return EMPTY
        return Cons(value, _iterator_seq(it))

    return Lazy(gen)


_as_seq = lazy_seq


def _check_count(n: int, name: str) -> None:
    if n < 0:
        raise InvalidArgumentError(f"{name} count must be >= 0, got {n}")


# =============================================================================
# Map and filter
# =============================================================================


def seq_map(f: Callable[[T], U], coll) -> Seq:
    """Lazily apply f to each element. The length is unchanged."""
    s = _as_seq(coll)

    def gen():
        if s.is_empty:
            return EMPTY
        return Cons(f(s.first), seq_map(f, s.rest))

    return Lazy(gen)


def seq_filter(pred: Callable[[T], Any], coll) -> Seq:
    """Lazily keep only the elements satisfying pred, in order."""
    s = _as_seq(coll)

    def gen():
        cur = s
        while not cur.is_empty:
            value = cur.first
            if pred(value):
                return Cons(value, seq_filter(pred, cur.rest))
            cur = cur.rest
        return EMPTY

    return Lazy(gen)


def distinct(coll) -> Seq:
    """Lazily keep the first occurrence of each distinct element.

    Each call tracks seen elements in its own set, shared by every traversal
    of the returned sequence. Unhashable elements fall back to a linear
    equality scan.
    """
    seen = set()
    seen_unhashable = []

    def first_sighting(value):
        try:
            if value in seen:
                return False
            seen.add(value)
            return True
        except TypeError:
            if value in seen_unhashable:
                return False
            seen_unhashable.append(value)
            return True

    return seq_filter(first_sighting, coll)


def unzip(pairs) -> Pair:
    """Split a sequence of pairs into a Pair of two lazy sequences.

    Plain 2-tuples are accepted as well as Pair values.
    """
    s = _as_seq(pairs)
    return Pair(seq_map(_pair_first, s), seq_map(_pair_second, s))


def _pair_first(p):
    return p.first if isinstance(p, Pair) else p[0]


def _pair_second(p):
    return p.second if isinstance(p, Pair) else p[1]


# =============================================================================
# Folds and eager consumers
# =============================================================================


def fold_left(f: Callable[[U, T], U], initial: U, coll) -> U:
    """Left-associative fold: f(...f(f(initial, e1), e2)..., en).

    Iterative, so any finite length is safe.
    """
    result = initial
    s = _as_seq(coll)
    while not s.is_empty:
        result = f(result, s.first)
        s = s.rest
    return result


def reduce(f: Callable[[T, T], T], coll) -> T:
    """fold_left using the first element as the initial value.

    Raises EmptySequenceError on an empty sequence.
    """
    s = _as_seq(coll)
    if s.is_empty:
        raise EmptySequenceError("reduce of empty sequence")
    return fold_left(f, s.first, s.rest)


def fold_right(f: Callable[[T, U], U], coll, initial: U) -> U:
    """Right-associative fold: f(e1, f(e2, ...f(en, initial))).

    The sequence is realized into a list first and folded from the end, so
    long finite sequences do not exhaust the stack. Never returns for an
    infinite sequence.
    """
    result = initial
    for value in reversed(to_list(coll)):
        result = f(value, result)
    return result


def for_each(f: Callable[[T], Any], coll) -> None:
    """Call f on each element, in order, for its side effects."""

    def step(acc, value):
        f(value)
        return acc

    fold_left(step, None, coll)


def reverse(coll) -> Seq:
    """Return a finite sequence in reverse order."""
    return fold_left(lambda rest, first: Cons(first, rest), EMPTY, coll)


def find(pred: Callable[[T], Any], coll, default=None):
    """Return the first element satisfying pred, or default if none does."""
    s = _as_seq(coll)
    while not s.is_empty:
        value = s.first
        if pred(value):
            return value
        s = s.rest
    return default


def seq_any(pred: Callable[[T], Any], coll) -> bool:
    """True if some element satisfies pred. Stops at the first match."""
    return find(pred, coll, _MISSING) is not _MISSING


def seq_all(pred: Callable[[T], Any], coll) -> bool:
    """True if every element satisfies pred. Stops at the first failure."""
    return find(lambda value: not pred(value), coll, _MISSING) is _MISSING


def min_by(compare: Callable[[T, T], int], coll) -> T:
    """Return the smallest element according to a comparator.

    compare(a, b) returns a negative number when a sorts before b. Ties keep
    the earliest element. Raises EmptySequenceError on an empty sequence.
    """
    s = _as_seq(coll)
    if s.is_empty:
        raise EmptySequenceError("min of empty sequence")
    result = s.first
    s = s.rest
    while not s.is_empty:
        value = s.first
        if compare(value, result) < 0:
            result = value
        s = s.rest
    return result


def max_by(compare: Callable[[T, T], int], coll) -> T:
    """Return the largest element according to a comparator.

    Ties keep the earliest element. Raises EmptySequenceError on an empty
    sequence.
    """
    return min_by(lambda a, b: compare(b, a), coll)


def _key_compare(key: Optional[Callable[[T], Any]]) -> Callable[[T, T], int]:
    def compare(a, b):
        if key is not None:
            a, b = key(a), key(b)
        return (a > b) - (a < b)

    return compare


def seq_min(coll, key: Optional[Callable[[T], Any]] = None) -> T:
    """Return the smallest element, optionally by key. Earliest wins ties."""
    return min_by(_key_compare(key), coll)


def seq_max(coll, key: Optional[Callable[[T], Any]] = None) -> T:
    """Return the largest element, optionally by key. Earliest wins ties."""
    return max_by(_key_compare(key), coll)


def count(coll) -> int:
    """Return the number of elements in a finite sequence."""
    s = _as_seq(coll)
    if isinstance(s, PList):
        return len(s)
    n = 0
    while not s.is_empty:
        n += 1
        s = s.rest
    return n


def to_list(coll) -> list:
    """Return the elements of a finite sequence as a Python list."""
    return list(_as_seq(coll))


# =============================================================================
# Take and drop
# =============================================================================


def take_while(pred: Callable[[T], Any], coll) -> Seq:
    """Lazily yield the prefix whose elements satisfy pred."""
    s = _as_seq(coll)

    def gen():
        if s.is_empty:
            return EMPTY
        value = s.first
        if pred(value):
            return Cons(value, take_while(pred, s.rest))
        return EMPTY

    return Lazy(gen)


def take(n: int, coll) -> Seq:
    """Lazily yield the first n elements, or fewer if the sequence is shorter.

    Raises InvalidArgumentError immediately if n is negative.
    """
    _check_count(n, "take")
    s = _as_seq(coll)

    def gen():
        if n == 0 or s.is_empty:
            return EMPTY
        return Cons(s.first, take(n - 1, s.rest))

    return Lazy(gen)


def drop_while(pred: Callable[[T], Any], coll) -> Seq:
    """Skip the prefix satisfying pred and return the remaining sequence.

    The skip is eager; the remainder keeps its own laziness.
    """
    s = _as_seq(coll)
    while not s.is_empty and pred(s.first):
        s = s.rest
    return s


def drop(n: int, coll) -> Seq:
    """Skip the first n elements and return the remaining sequence.

    Raises InvalidArgumentError if n is negative.
    """
    _check_count(n, "drop")
    s = _as_seq(coll)
    while n > 0 and not s.is_empty:
        s = s.rest
        n -= 1
    return s


def nth(n: int, coll, default=None):
    """Return the element at index n, or default if the sequence is shorter."""
    _check_count(n, "nth")
    s = drop(n, coll)
    if s.is_empty:
        return default
    return s.first


# =============================================================================
# Concatenation
# =============================================================================


def _concat(a: Seq, b: Seq) -> Seq:
    def gen():
        if a.is_empty:
            return b
        return Cons(a.first, _concat(a.rest, b))

    return Lazy(gen)


def concat(*colls) -> Seq:
    """Lazily yield all elements of each sequence in turn."""
    if not colls:
        return EMPTY
    result = _as_seq(colls[-1])
    for coll in reversed(colls[:-1]):
        result = _concat(_as_seq(coll), result)
    return result


def cycle(coll) -> Seq:
    """Lazily repeat a finite sequence forever.

    The empty sequence cycles to the empty sequence.
    """
    s = _as_seq(coll)

    def gen():
        if s.is_empty:
            return EMPTY
        return _concat(s, cycle(s))

    return Lazy(gen)


def flatten(coll) -> Seq:
    """Lazily flatten nested sequences of any depth.

    Only Seq values are expanded; every other value, strings and Python
    lists included, is yielded as is.
    """
    s = _as_seq(coll)

    def gen():
        if s.is_empty:
            return EMPTY
        value = s.first
        if isinstance(value, Seq):
            return _concat(flatten(value), flatten(s.rest))
        return Cons(value, flatten(s.rest))

    return Lazy(gen)


def flatten_safe(colls) -> Seq:
    """Lazily concatenate a sequence of sequences, one level deep."""
    s = _as_seq(colls)

    def gen():
        if s.is_empty:
            return EMPTY
        return _concat(_as_seq(s.first), flatten_safe(s.rest))

    return Lazy(gen)


def flat_map(f: Callable[[T], Any], coll) -> Seq:
    """Lazily map f over a sequence and concatenate the resulting sequences."""
    return flatten_safe(seq_map(f, coll))


def interleave(a, b) -> Seq:
    """Lazily alternate elements of a and b.

    Once either side runs out, the rest of the other follows unchanged.
    """
    a = _as_seq(a)
    b = _as_seq(b)

    def gen():
        if a.is_empty:
            return b
        if b.is_empty:
            return a
        return Cons(a.first, interleave(b, a.rest))

    return Lazy(gen)


# =============================================================================
# Zip and generation
# =============================================================================


def seq_zip(a, b) -> Seq:
    """Lazily pair elements positionally. Stops at the shorter sequence."""
    a = _as_seq(a)
    b = _as_seq(b)

    def gen():
        if a.is_empty or b.is_empty:
            return EMPTY
        return Cons(Pair(a.first, b.first), seq_zip(a.rest, b.rest))

    return Lazy(gen)


def seq_enumerate(coll) -> Seq:
    """Lazily pair each element with its index, starting at 0."""
    return seq_zip(seq_range(), coll)


def iterate(f: Callable[[T], T], initial: T) -> Seq:
    """Lazily yield initial, f(initial), f(f(initial)), ... forever.

    f is applied only when the next element is actually needed.
    """
    return Lazy(lambda: Cons(initial, _iterate_from(f, initial)))


def _iterate_from(f: Callable[[T], T], previous: T) -> Seq:
    def gen():
        value = f(previous)
        return Cons(value, _iterate_from(f, value))

    return Lazy(gen)


def seq_range(*args) -> Seq:
    """Lazily generate an arithmetic progression.

    seq_range()                  -> 0, 1, 2, ... (infinite)
    seq_range(end)               -> 0, 1, ..., end-1
    seq_range(start, end)        -> start, start+1, ..., end-1
    seq_range(start, end, step)  -> start, start+step, ... while < end

    The progression stops at the first value not less than end, so a step
    that never gets there (zero or negative) never ends.
    """
    if len(args) == 0:
        return iterate(_inc, 0)
    if len(args) == 1:
        start, end, step = 0, args[0], 1
    elif len(args) == 2:
        start, end, step = args[0], args[1], 1
    elif len(args) == 3:
        start, end, step = args
    else:
        raise TypeError(f"seq_range takes 0-3 arguments, got {len(args)}")
    return take_while(lambda x: x < end, iterate(lambda x: x + step, start))


def _inc(x):
    return x + 1


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Construction
    "empty",
    "cons",
    "lazy",
    "repeat",
    "seq_of",
    "seq",
    "lazy_seq",
    # Map and filter
    "seq_map",
    "seq_filter",
    "distinct",
    "unzip",
    # Folds and eager consumers
    "fold_left",
    "reduce",
    "fold_right",
    "for_each",
    "reverse",
    "find",
    "seq_any",
    "seq_all",
    "min_by",
    "max_by",
    "seq_min",
    "seq_max",
    "count",
    "to_list",
    # Take and drop
    "take_while",
    "take",
    "drop_while",
    "drop",
    "nth",
    # Concatenation
    "concat",
    "cycle",
    "flatten",
    "flatten_safe",
    "flat_map",
    "interleave",
    # Zip and generation
    "seq_zip",
    "seq_enumerate",
    "iterate",
    "seq_range",
]
