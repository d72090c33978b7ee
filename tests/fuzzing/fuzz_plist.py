#!/usr/bin/env python3
"""Fuzz testing for the persistent list.

Drives a PList and a reference Python list with random conj/rest steps and
checks size, contents and that earlier versions never change.
"""

import random
from typing import Any

from lazyseq import EMPTY_LIST, PList, count, reverse, seq_of, to_list

from .fuzz import Fuzzer, random_value


class PListFuzzer(Fuzzer):
    """Fuzz tester that maintains a PList and a reference list."""

    name = "PList"

    def __init__(self):
        super().__init__()
        self.plist: PList = EMPTY_LIST
        self.reference: list = []
        self.old_versions: list[tuple[PList, list]] = []
        self.max_size = 0

    def reset(self):
        self.plist = EMPTY_LIST
        self.reference = []
        self.old_versions.clear()

    def get_stats(self) -> dict[str, Any]:
        return {"Max list size": self.max_size}

    def save_version(self):
        self.old_versions.append((self.plist, self.reference.copy()))
        if len(self.old_versions) > 20:
            self.old_versions = self.old_versions[-10:]

    def check_invariants(self):
        assert self.plist.size == len(self.reference), (
            f"Size mismatch: {self.plist.size} vs {len(self.reference)}"
        )
        assert count(self.plist) == len(self.reference)
        assert self.plist.is_empty == (not self.reference)

        actual = to_list(self.plist)
        assert actual == self.reference, (
            f"Content mismatch:\n  PList: {actual[:10]}...\n  "
            f"Reference: {self.reference[:10]}..."
        )
        if self.reference:
            assert self.plist.first == self.reference[0]

        for old_list, old_reference in self.old_versions[-5:]:
            assert to_list(old_list) == old_reference, "Persistence violation!"
            assert old_list.size == len(old_reference)

        self.max_size = max(self.max_size, len(self.reference))

    def do_conj(self):
        self.save_version()
        value = random_value()
        self.plist = self.plist.conj(value)
        self.reference.insert(0, value)
        self.record_op("conj")

    def do_conj_multiple(self):
        self.save_version()
        for _ in range(random.randint(1, 20)):
            value = random_value()
            self.plist = self.plist.conj(value)
            self.reference.insert(0, value)
        self.record_op("conj_multi")

    def do_rest(self):
        """Step to the tail. The empty list is its own rest."""
        self.save_version()
        self.plist = self.plist.rest
        self.reference = self.reference[1:]
        self.record_op("rest")

    def do_branch(self):
        """conj onto an old version and make the branch current."""
        if not self.old_versions:
            return
        old_list, old_reference = random.choice(self.old_versions)
        value = random_value()
        self.save_version()
        self.plist = old_list.conj(value)
        self.reference = [value] + old_reference
        self.record_op("branch")

    def do_compare(self):
        """A PList equals any sequence with the same elements."""
        other = seq_of(*self.reference)
        assert self.plist == other
        assert hash(self.plist) == hash(other)
        assert to_list(reverse(self.plist)) == self.reference[::-1]
        self.record_op("compare")

    def do_random_operation(self):
        self.pick(
            [
                (self.do_conj, 40),
                (self.do_conj_multiple, 10),
                (self.do_rest, 30),
                (self.do_branch, 10),
                (self.do_compare, 10),
            ]
        )
