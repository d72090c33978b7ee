"""
lazyseq.curried - Operators with the sequence argument left pending

Each function here takes every argument of its lazyseq.core counterpart
except the sequence, and returns a one-argument function of the sequence.
They compose with Seq.pipe:

    from lazyseq import curried, seq_range

    seq_range(10).pipe(
        curried.seq_filter(lambda x: x % 2 == 0),
        curried.seq_map(lambda x: x * x),
        curried.take(3),
    )                                         # (0, 4, 16)

Operators that already take only a sequence (distinct, reverse, cycle,
flatten, ...) are re-exported unchanged so that one import covers a whole
pipeline.
"""

from functools import partial

from lazyseq import core
from lazyseq.core import (
    count,
    cycle,
    distinct,
    flatten,
    flatten_safe,
    reverse,
    seq_enumerate,
    to_list,
    unzip,
)


def seq_map(f):
    return partial(core.seq_map, f)


def seq_filter(pred):
    return partial(core.seq_filter, pred)


def fold_left(f, initial):
    return partial(core.fold_left, f, initial)


def fold_right(f, initial):
    def apply(coll):
        return core.fold_right(f, coll, initial)

    return apply


def reduce(f):
    return partial(core.reduce, f)


def for_each(f):
    return partial(core.for_each, f)


def find(pred, default=None):
    def apply(coll):
        return core.find(pred, coll, default)

    return apply


def seq_any(pred):
    return partial(core.seq_any, pred)


def seq_all(pred):
    return partial(core.seq_all, pred)


def min_by(compare):
    return partial(core.min_by, compare)


def max_by(compare):
    return partial(core.max_by, compare)


def seq_min(key=None):
    return partial(core.seq_min, key=key)


def seq_max(key=None):
    return partial(core.seq_max, key=key)


def take_while(pred):
    return partial(core.take_while, pred)


def take(n):
    """Validates n now, not when the pipeline runs."""
    core._check_count(n, "take")
    return partial(core.take, n)


def drop_while(pred):
    return partial(core.drop_while, pred)


def drop(n):
    core._check_count(n, "drop")
    return partial(core.drop, n)


def nth(n, default=None):
    core._check_count(n, "nth")

    def apply(coll):
        return core.nth(n, coll, default)

    return apply


def concat(*others):
    """Append others after the piped sequence."""

    def apply(coll):
        return core.concat(coll, *others)

    return apply


def interleave(other):
    def apply(coll):
        return core.interleave(coll, other)

    return apply


def seq_zip(other):
    def apply(coll):
        return core.seq_zip(coll, other)

    return apply


def flat_map(f):
    return partial(core.flat_map, f)


__all__ = [
    "seq_map",
    "seq_filter",
    "fold_left",
    "fold_right",
    "reduce",
    "for_each",
    "find",
    "seq_any",
    "seq_all",
    "min_by",
    "max_by",
    "seq_min",
    "seq_max",
    "take_while",
    "take",
    "drop_while",
    "drop",
    "nth",
    "concat",
    "interleave",
    "seq_zip",
    "flat_map",
    # One-argument operators, unchanged
    "count",
    "cycle",
    "distinct",
    "flatten",
    "flatten_safe",
    "reverse",
    "seq_enumerate",
    "to_list",
    "unzip",
]
