import itertools

import pytest
from alternate import Alternate, alternate
from exotic import at_least, exactly_n, perfectly_balanced
from utils import CountingIterator


class ReviveAfterStop:
    """Iterator that reports exhaustion once and then starts yielding again"""

    def __init__(self):
        self.calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.calls == 1:
            raise StopIteration
        return 99


class TestAlternate:
    """Test the alternating merge state machine"""

    def test_equal_lengths(self):
        """Both sources drained, exhaustion seen on first's turn"""
        first = CountingIterator([1, 3])
        second = CountingIterator([2, 4])
        assert list(alternate(first, second)) == [1, 2, 3, 4]
        assert first.exhausted
        assert not second.exhausted, "second should not be pulled once first is exhausted"

    def test_first_longer(self):
        first = CountingIterator("abc")
        second = CountingIterator("xy")
        assert list(alternate(first, second)) == ["a", "x", "b", "y", "c"]
        assert second.exhausted
        assert first.pulled == 3 and not first.exhausted

    def test_second_longer_is_not_drained(self):
        second = iter("xyz")
        assert list(alternate("ab", second)) == ["a", "x", "b", "y"]
        assert next(second) == "z", "Leftover item must stay in the longer source"

    def test_empty_first(self):
        second = CountingIterator([1, 2, 3])
        assert list(alternate([], second)) == []
        assert second.pulled == 0

    def test_empty_second(self):
        assert list(alternate([1, 2], [])) == [1]

    def test_length_formula(self):
        for k in range(5):
            for j in range(5):
                merged = list(alternate(range(k), range(10, 10 + j)))
                expected = 2 * min(k, j) + (1 if k > j else 0)
                assert len(merged) == expected, f"k={k}, j={j}: got {merged}"

    def test_stays_finished(self):
        """Test that a source reviving after exhaustion is never pulled again"""
        second = ReviveAfterStop()
        merged = alternate([1, 2, 3], second)
        assert list(merged) == [1]
        assert merged.finished
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(merged)
        assert second.calls == 1

    def test_turn_flag(self):
        """Test that the turn flips on every pull, the exhausted one included"""
        merged = Alternate([1], [])
        assert merged.turn == "first"
        assert next(merged) == 1
        assert merged.turn == "second"
        with pytest.raises(StopIteration):
            next(merged)
        assert merged.finished
        assert merged.turn == "first"
        with pytest.raises(StopIteration):
            next(merged)
        assert merged.turn == "first", "Turn should not change once finished"

    def test_infinite_first(self):
        assert list(alternate(itertools.count(), "xy")) == [0, "x", 1, "y", 2]

    def test_nested(self):
        inner = alternate("ac", "bd")
        assert list(alternate(inner, "12345")) == ["a", "1", "b", "2", "c", "3", "d", "4"]

    def test_repr(self):
        merged = alternate([1], [])
        assert repr(merged) == "Alternate(next=first)"
        list(merged)
        assert repr(merged) == "Alternate(next=finished)"


class TestAlternateWithCombinators:
    """The merge is an ordinary iterable for every combinator"""

    def test_at_least_over_infinite_merge(self):
        merged = alternate(itertools.count(0, 2), itertools.count(1, 2))
        assert at_least(merged, 3, lambda x: x % 2 == 1) is True
        assert next(merged) == 6, "Merge should resume right after the 3rd odd number"

    def test_exactly_n(self):
        assert exactly_n(alternate("ab", "12"), 2, str.isdigit) is True

    def test_perfectly_balanced(self):
        merged = alternate([0, 2, 4], [1, 3, 5])
        assert perfectly_balanced(merged, lambda x: x % 2 == 0) is True
