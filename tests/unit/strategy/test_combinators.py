# tests/unit/strategy/test_combinators.py
"""Unit tests for the Map, Filter and Boxed combinators."""

from __future__ import annotations

import pytest

from proptree.entropy import EntropySource
from proptree.errors import Rejection, ShrinkInvariantError
from proptree.sanity import SanityOptions, check_strategy_sanity
from proptree.strategy.combinators import BoxedStrategy, BoxedTree, Filter, FilterTree, Map, MapTree
from proptree.strategy.numeric import BinarySearch, int_range
from proptree.strategy.traits import Just, Strategy, ValueTree

# =============================================================================
# Helpers
# =============================================================================


class _StuckTree(ValueTree[int]):
    """Tree that simplifies once to an odd value and cannot complicate."""

    def __init__(self) -> None:
        self._value = 4

    def current(self) -> int:
        return self._value

    def simplify(self) -> bool:
        if self._value == 4:
            self._value = 3
            return True
        return False

    def complicate(self) -> bool:
        return False


class _StuckStrategy(Strategy[int]):
    def new_tree(self, source: EntropySource) -> _StuckTree:
        return _StuckTree()


class _RejectingStrategy(Strategy[int]):
    def new_tree(self, source: EntropySource) -> ValueTree[int]:
        raise Rejection("inner says no")


def _is_even(n: int) -> bool:
    return n % 2 == 0


# =============================================================================
# Map
# =============================================================================


class TestMap:
    """Map translates values and delegates shrinking."""

    def test_current_applies_function(self, source: EntropySource) -> None:
        tree = Map(Just(20), lambda n: n * 2).new_tree(source)
        assert isinstance(tree, MapTree)
        assert tree.current() == 40

    def test_shrinking_delegates(self) -> None:
        tree = MapTree(BinarySearch(10), str)
        assert tree.simplify()
        assert tree.current() == "5"
        assert tree.complicate()
        assert tree.current() == "8"

    def test_same_draws_as_source(self) -> None:
        strategy = int_range(0, 1000)
        plain = strategy.new_tree(EntropySource(seed=11)).current()
        mapped = strategy.map(lambda n: -n).new_tree(EntropySource(seed=11)).current()
        assert mapped == -plain

    def test_function_errors_propagate(self, source: EntropySource) -> None:
        tree = Map(Just(0), lambda n: 1 // n).new_tree(source)
        with pytest.raises(ZeroDivisionError):
            tree.current()

    def test_sanity(self) -> None:
        check_strategy_sanity(int_range(-50, 50).map(lambda n: n * 3), SanityOptions(trees=64))


# =============================================================================
# Filter
# =============================================================================


class TestFilterDraw:
    """Filter.new_tree retries, then rejects."""

    def test_values_satisfy_predicate(self, source: EntropySource) -> None:
        strategy = Filter(int_range(0, 100), _is_even, "even")
        for _ in range(200):
            tree = strategy.new_tree(source)
            assert isinstance(tree, FilterTree)
            assert tree.current() % 2 == 0

    def test_rejects_after_budget(self, source: EntropySource) -> None:
        strategy = Filter(int_range(0, 10), lambda n: n > 100, "above one hundred", max_attempts=7)
        with pytest.raises(Rejection) as exc_info:
            strategy.new_tree(source)
        assert "above one hundred" in exc_info.value.reason
        assert "7" in exc_info.value.reason

    def test_budget_counts_draws(self) -> None:
        draws = []

        def record(n: int) -> bool:
            draws.append(n)
            return False

        with pytest.raises(Rejection):
            Filter(int_range(0, 10), record, "never", max_attempts=5).new_tree(EntropySource(seed=1))
        assert len(draws) == 5

    def test_inner_rejection_propagates(self, source: EntropySource) -> None:
        with pytest.raises(Rejection, match="inner says no"):
            Filter(_RejectingStrategy(), _is_even, "even").new_tree(source)

    def test_invalid_budget(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            Filter(int_range(0, 10), _is_even, "even", max_attempts=0)


class TestFilterShrink:
    """FilterTree never exposes a rejected value."""

    def test_simplify_skips_rejected_values(self) -> None:
        tree = FilterTree(BinarySearch(10), _is_even, "even")
        seen = [tree.current()]
        while tree.simplify():
            seen.append(tree.current())
        assert all(value % 2 == 0 for value in seen)
        assert seen[-1] < 10

    def test_simplify_may_stop_above_accepted_minimum(self) -> None:
        """Bisection that only lands on rejected values gives up, even though 0 is even."""
        tree = FilterTree(BinarySearch(2), _is_even, "even")
        assert not tree.simplify()
        assert tree.current() == 2

    def test_simplify_false_when_only_rejected_below(self) -> None:
        tree = FilterTree(BinarySearch(1), lambda n: n != 0, "non-zero")
        assert not tree.simplify()
        assert tree.current() == 1

    def test_complicate_without_simplify(self) -> None:
        tree = FilterTree(BinarySearch(10), _is_even, "even")
        assert not tree.complicate()
        assert tree.current() == 10

    def test_complicate_revalidates(self) -> None:
        tree = FilterTree(BinarySearch(12), lambda n: n % 3 == 0, "multiple of three")
        assert tree.simplify()
        while tree.complicate():
            assert tree.current() % 3 == 0
        assert tree.current() == 12

    def test_stuck_source_is_invariant_error(self, source: EntropySource) -> None:
        tree = Filter(_StuckStrategy(), _is_even, "even").new_tree(source)
        with pytest.raises(ShrinkInvariantError, match="even"):
            tree.simplify()

    def test_sanity(self) -> None:
        check_strategy_sanity(int_range(-100, 100).filter(_is_even, "even"), SanityOptions(trees=64))


# =============================================================================
# Boxed
# =============================================================================


class TestBoxed:
    """Boxed forwards every operation."""

    def test_forwards_current_and_shrinking(self) -> None:
        tree = BoxedTree(BinarySearch(6))
        assert tree.current() == 6
        assert tree.simplify()
        assert tree.current() == 3
        assert tree.complicate()
        assert tree.current() == 5

    def test_same_draws_as_inner(self) -> None:
        inner = int_range(0, 1000)
        boxed = BoxedStrategy(inner)
        tree = boxed.new_tree(EntropySource(seed=9))
        assert isinstance(tree, BoxedTree)
        assert tree.current() == inner.new_tree(EntropySource(seed=9)).current()

    def test_inner_rejection_propagates(self, source: EntropySource) -> None:
        with pytest.raises(Rejection):
            BoxedStrategy(_RejectingStrategy()).new_tree(source)
