"""
Test suite for the curried operators and Seq.pipe pipelines.
"""

import unittest

from lazyseq import EMPTY, InvalidArgumentError, Pair, curried, seq_of, seq_range


class TestCurried(unittest.TestCase):
    """Each curried operator matches its lazyseq.core counterpart."""

    def test_pipeline(self):
        result = seq_range(10).pipe(
            curried.seq_filter(lambda x: x % 2 == 0),
            curried.seq_map(lambda x: x * x),
            curried.take(3),
        )
        self.assertEqual(result, seq_of(0, 4, 16))

    def test_map_upper(self):
        result = seq_of("a", "b", "c").pipe(curried.seq_map(str.upper))
        self.assertEqual(result, seq_of("A", "B", "C"))

    def test_folds(self):
        s = seq_of("a", "b", "c")
        concat_strings = lambda a, b: a + b
        self.assertEqual(s.pipe(curried.fold_left(concat_strings, "_")), "_abc")
        self.assertEqual(s.pipe(curried.fold_right(concat_strings, "_")), "abc_")
        self.assertEqual(s.pipe(curried.reduce(concat_strings)), "abc")

    def test_for_each(self):
        seen = []
        seq_of(1, 2).pipe(curried.for_each(seen.append))
        self.assertEqual(seen, [1, 2])

    def test_find_any_all(self):
        s = seq_of(1, 2, 3)
        self.assertEqual(s.pipe(curried.find(lambda x: x > 1)), 2)
        self.assertEqual(s.pipe(curried.find(lambda x: x > 5, "none")), "none")
        self.assertTrue(s.pipe(curried.seq_any(lambda x: x == 3)))
        self.assertFalse(s.pipe(curried.seq_all(lambda x: x < 3)))

    def test_min_max(self):
        s = seq_of("bb", "a", "ccc")
        self.assertEqual(s.pipe(curried.seq_min()), "a")
        self.assertEqual(s.pipe(curried.seq_max(key=len)), "ccc")
        by_length = lambda a, b: len(a) - len(b)
        self.assertEqual(s.pipe(curried.min_by(by_length)), "a")
        self.assertEqual(s.pipe(curried.max_by(by_length)), "ccc")

    def test_take_drop(self):
        s = seq_range(10)
        self.assertEqual(s.pipe(curried.drop(8)), seq_of(8, 9))
        self.assertEqual(s.pipe(curried.take_while(lambda x: x < 2)), seq_of(0, 1))
        self.assertEqual(s.pipe(curried.drop_while(lambda x: x < 8)), seq_of(8, 9))
        self.assertEqual(s.pipe(curried.nth(3)), 3)
        self.assertEqual(s.pipe(curried.nth(30, "none")), "none")

    def test_negative_counts_fail_when_curried(self):
        for fn in (curried.take, curried.drop, curried.nth):
            with self.assertRaises(InvalidArgumentError):
                fn(-1)

    def test_combining(self):
        s = seq_of(1, 2)
        self.assertEqual(s.pipe(curried.concat(seq_of(3), seq_of(4))), seq_of(1, 2, 3, 4))
        self.assertEqual(s.pipe(curried.interleave(seq_of("a", "b"))), seq_of(1, "a", 2, "b"))
        self.assertEqual(s.pipe(curried.seq_zip(seq_of("a"))), seq_of(Pair(1, "a")))
        self.assertEqual(s.pipe(curried.flat_map(lambda x: seq_of(x, x))), seq_of(1, 1, 2, 2))

    def test_one_argument_operators(self):
        result = seq_of(3, 1, 3, 2).pipe(
            curried.distinct,
            curried.reverse,
            curried.to_list,
        )
        self.assertEqual(result, [2, 1, 3])
        self.assertEqual(EMPTY.pipe(curried.cycle), EMPTY)
        self.assertEqual(EMPTY.pipe(curried.count), 0)


if __name__ == "__main__":
    unittest.main()
