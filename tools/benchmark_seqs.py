#!/usr/bin/env python3
"""
lazyseq Benchmark Suite
-----------------------
Compares lazyseq sequences and operators against Python lists, generators
and itertools doing the same work.

Usage:
    python3 tools/benchmark_seqs.py --size 10000 --iter 20
"""

import argparse
import gc
import itertools
import time
from typing import Callable

from lazyseq import (
    EMPTY_LIST,
    count,
    cycle,
    distinct,
    fold_left,
    lazy_seq,
    nth,
    plist,
    reverse,
    seq,
    seq_filter,
    seq_map,
    seq_range,
    seq_zip,
    take,
    to_list,
)

# --- Utilities ---


class Colors:
    HEADER = "\033[95m"
    GREEN = "\033[92m"  # Fastest
    YELLOW = "\033[93m"  # Up to 1.5x
    ORANGE = "\033[38;5;208m"  # Up to 3x
    RED = "\033[91m"  # Up to 10x
    DARK_RED = "\033[38;5;160m"  # Beyond 10x
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def format_time(seconds: float) -> str:
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.2f} µs"
    elif seconds < 1.0:
        return f"{seconds * 1000:.2f} ms"
    else:
        return f"{seconds:.4f} s"


def run_benchmark(func: Callable, iterations: int) -> float:
    """Average wall time of func over iterations, with GC paused."""
    func()

    gc.collect()
    gc.disable()
    try:
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        end = time.perf_counter()
    finally:
        gc.enable()

    return (end - start) / iterations


def format_ratio(baseline_time: float, challenger_time: float) -> tuple[str, str]:
    """Returns (color, verdict) for a timing relative to the fastest."""
    ratio = challenger_time / baseline_time
    if ratio <= 1.1:
        return Colors.GREEN, "~same"
    elif ratio <= 1.5:
        return Colors.YELLOW, f"{ratio:.2f}x slower"
    elif ratio <= 3.0:
        return Colors.ORANGE, f"{ratio:.2f}x slower"
    elif ratio <= 10.0:
        return Colors.RED, f"{ratio:.1f}x slower"
    return Colors.DARK_RED, f"{ratio:.0f}x slower"


def print_group(title: str, results: list[tuple[str, float]]):
    """Print results fastest first, each compared to the fastest."""
    print(f"{Colors.BOLD}--- {title} ---{Colors.ENDC}")
    if not results:
        return

    sorted_results = sorted(results, key=lambda x: x[1])
    _, baseline_time = sorted_results[0]
    col_width = max(max(len(name) for name, _ in results) + 2, 28)

    for i, (name, time_val) in enumerate(sorted_results):
        time_str = format_time(time_val)
        if i == 0:
            print(
                f"  {Colors.GREEN}{name:<{col_width}} {time_str:>12}  (fastest){Colors.ENDC}"
            )
        else:
            color, verdict = format_ratio(baseline_time, time_val)
            print(
                f"  {color}{name:<{col_width}} {time_str:>12}  ({verdict}){Colors.ENDC}"
            )
    print()


def print_header(title: str):
    print(f"\n{Colors.HEADER}{'=' * 60}{Colors.ENDC}")
    print(f"{Colors.HEADER}  {title}{Colors.ENDC}")
    print(f"{Colors.HEADER}{'=' * 60}{Colors.ENDC}\n")


# --- Benchmark Implementations ---


class Benchmarks:
    def __init__(self, size: int, iterations: int):
        self.N = size
        self.ITERS = iterations
        self.data = list(range(self.N))

        print(f"generating pre-built structures (N={self.N})...", end="", flush=True)
        self.eager_seq = seq(self.data)
        self.plist = plist(*self.data)
        print(" done.\n")

    def time(self, func: Callable) -> float:
        return run_benchmark(func, self.ITERS)

    def bench_construction(self):
        def py_list():
            return list(self.data)

        def eager_seq():
            return seq(self.data)

        def realized_lazy_seq():
            return count(lazy_seq(self.data))

        def plist_conj():
            lst = EMPTY_LIST
            for i in self.data:
                lst = lst.conj(i)
            return lst

        print_group(
            "Construction",
            [
                ("Python list(data)", self.time(py_list)),
                ("seq(data)", self.time(eager_seq)),
                ("lazy_seq(data), realized", self.time(realized_lazy_seq)),
                ("PList conj loop", self.time(plist_conj)),
            ],
        )

    def bench_iteration(self):
        def py_list_iter():
            return sum(self.data)

        def seq_iter():
            return sum(self.eager_seq)

        def plist_iter():
            return sum(self.plist)

        def seq_fold_left():
            return fold_left(lambda acc, x: acc + x, 0, self.eager_seq)

        print_group(
            "Iteration (sum)",
            [
                ("Python sum(list)", self.time(py_list_iter)),
                ("sum(Seq)", self.time(seq_iter)),
                ("sum(PList)", self.time(plist_iter)),
                ("fold_left over Seq", self.time(seq_fold_left)),
            ],
        )

    def bench_pipeline(self):
        inc = lambda x: x + 1
        even = lambda x: x % 2 == 0

        def py_comprehension():
            return [x + 1 for x in self.data if (x + 1) % 2 == 0]

        def py_generators():
            return list(filter(even, map(inc, self.data)))

        def seq_pipeline():
            return to_list(seq_filter(even, seq_map(inc, self.eager_seq)))

        def seq_pipeline_pipe():
            return self.eager_seq.pipe(
                lambda s: seq_map(inc, s),
                lambda s: seq_filter(even, s),
                to_list,
            )

        print_group(
            "map + filter pipeline",
            [
                ("Python comprehension", self.time(py_comprehension)),
                ("Python map/filter", self.time(py_generators)),
                ("seq_filter(seq_map(...))", self.time(seq_pipeline)),
                ("Seq.pipe", self.time(seq_pipeline_pipe)),
            ],
        )

    def bench_infinite(self):
        n = self.N

        def py_islice_count():
            return list(itertools.islice(itertools.count(), n))

        def seq_take_range():
            return to_list(take(n, seq_range()))

        def py_islice_cycle():
            return list(itertools.islice(itertools.cycle([1, 2, 3]), n))

        def seq_take_cycle():
            return to_list(take(n, cycle(seq([1, 2, 3]))))

        print_group(
            "Prefix of an infinite sequence",
            [
                ("islice(count())", self.time(py_islice_count)),
                ("take(seq_range())", self.time(seq_take_range)),
                ("islice(cycle())", self.time(py_islice_cycle)),
                ("take(cycle())", self.time(seq_take_cycle)),
            ],
        )

    def bench_memoized_reads(self):
        pipeline = seq_map(lambda x: x * 2, self.eager_seq)
        count(pipeline)
        last = self.N - 1

        def first_read_nth():
            return nth(last, seq_map(lambda x: x * 2, self.eager_seq))

        def memoized_nth():
            return nth(last, pipeline)

        def py_list_index():
            return self.data[last] * 2

        print_group(
            "Reading the last element",
            [
                ("Python list index", self.time(py_list_index)),
                ("nth on a fresh pipeline", self.time(first_read_nth)),
                ("nth on a realized pipeline", self.time(memoized_nth)),
            ],
        )

    def bench_misc(self):
        repeated = [x % 100 for x in self.data]

        def py_dict_fromkeys():
            return list(dict.fromkeys(repeated))

        def seq_distinct():
            return to_list(distinct(seq(repeated)))

        def py_reversed():
            return list(reversed(self.data))

        def seq_reverse():
            return reverse(self.eager_seq)

        def py_zip():
            return list(zip(self.data, self.data))

        def seq_zip_pairs():
            return to_list(seq_zip(self.eager_seq, self.eager_seq))

        print_group(
            "distinct",
            [
                ("dict.fromkeys", self.time(py_dict_fromkeys)),
                ("distinct", self.time(seq_distinct)),
            ],
        )
        print_group(
            "reverse",
            [
                ("reversed(list)", self.time(py_reversed)),
                ("reverse(Seq)", self.time(seq_reverse)),
            ],
        )
        print_group(
            "zip",
            [
                ("zip(list, list)", self.time(py_zip)),
                ("seq_zip", self.time(seq_zip_pairs)),
            ],
        )

    def bench_count(self):
        print_group(
            "count",
            [
                ("len(list)", self.time(lambda: len(self.data))),
                ("count(PList)", self.time(lambda: count(self.plist))),
                ("count(Seq)", self.time(lambda: count(self.eager_seq))),
            ],
        )


def main():
    parser = argparse.ArgumentParser(description="lazyseq Benchmark Suite")
    parser.add_argument(
        "--size", type=int, default=10000, help="Number of elements in sequences"
    )
    parser.add_argument(
        "--iter", type=int, default=20, help="Number of iterations for timing"
    )
    args = parser.parse_args()

    print(f"{Colors.BOLD}lazyseq Performance Benchmark{Colors.ENDC}")
    print(f"Size: {args.size}, Iterations: {args.iter}")
    print("-" * 60)

    b = Benchmarks(args.size, args.iter)

    print_header("CONSTRUCTION AND ITERATION")
    b.bench_construction()
    b.bench_iteration()
    b.bench_count()

    print_header("LAZY OPERATORS")
    b.bench_pipeline()
    b.bench_infinite()
    b.bench_memoized_reads()
    b.bench_misc()


if __name__ == "__main__":
    main()
