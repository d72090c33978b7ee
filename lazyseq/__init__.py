"""
lazyseq - Immutable, lazy, possibly infinite sequences

Submodules:
- types: Shared types (Pair, EmptySequenceError, InvalidArgumentError)
- seq: The Seq abstraction and its variants (EMPTY, Cons, Repeat, Lazy)
- core: Constructors and operators (seq_map, seq_filter, take, concat, ...)
- plist: Persistent list with O(1) size (PList, EMPTY_LIST, plist)
- curried: Operators with the sequence left pending, for Seq.pipe
- config: Presentation settings (SeqConfig, configure)

Example:
    >>> from lazyseq import seq_range, seq_filter, take
    >>> print(take(3, seq_filter(lambda x: x % 2, seq_range())))
    (1, 3, 5)
"""

import logging

from lazyseq.config import SeqConfig, configure, get_config, set_config
from lazyseq.core import (
    concat,
    cons,
    count,
    cycle,
    distinct,
    drop,
    drop_while,
    empty,
    find,
    flat_map,
    flatten,
    flatten_safe,
    fold_left,
    fold_right,
    for_each,
    interleave,
    iterate,
    lazy,
    lazy_seq,
    max_by,
    min_by,
    nth,
    reduce,
    repeat,
    reverse,
    seq,
    seq_all,
    seq_any,
    seq_enumerate,
    seq_filter,
    seq_map,
    seq_max,
    seq_min,
    seq_of,
    seq_range,
    seq_zip,
    take,
    take_while,
    to_list,
    unzip,
)
from lazyseq.plist import EMPTY_LIST, PList, PListCons, PListEmpty, plist
from lazyseq.seq import (
    EMPTY,
    Cons,
    Empty,
    Lazy,
    Repeat,
    Seq,
    seq_equals,
    seq_hash,
    stringify,
)
from lazyseq.types import EmptySequenceError, InvalidArgumentError, Pair

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Types
    "EmptySequenceError",
    "InvalidArgumentError",
    "Pair",
    # Sequence variants
    "Seq",
    "Empty",
    "EMPTY",
    "Cons",
    "Repeat",
    "Lazy",
    "stringify",
    "seq_equals",
    "seq_hash",
    # Persistent list
    "PList",
    "PListEmpty",
    "PListCons",
    "EMPTY_LIST",
    "plist",
    # Construction
    "empty",
    "cons",
    "lazy",
    "repeat",
    "seq_of",
    "seq",
    "lazy_seq",
    # Operators
    "seq_map",
    "seq_filter",
    "distinct",
    "unzip",
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
    "take_while",
    "take",
    "drop_while",
    "drop",
    "nth",
    "concat",
    "cycle",
    "flatten",
    "flatten_safe",
    "flat_map",
    "interleave",
    "seq_zip",
    "seq_enumerate",
    "iterate",
    "seq_range",
    # Config
    "SeqConfig",
    "get_config",
    "set_config",
    "configure",
]
