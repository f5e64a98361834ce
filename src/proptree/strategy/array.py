# src/proptree/strategy/array.py
"""Strategies producing fixed-length arrays.

A sequence of N strategies is itself a strategy (ArrayStrategy) generating
N-tuples whose element i is drawn from strategy i. UniformArrayStrategy
draws all N elements from one strategy:

    pair = ArrayStrategy([int_range(0, 32), int_range(0, 32)])
    block = uniform(any_int(U8), 32)

Both produce an ArrayValueTree, which shrinks its elements left to right:
element 0 is simplified until exhausted, then element 1, and so on. No
cross-element moves are attempted, and only the most recent successful
step can be undone.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from proptree.strategy.traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.entropy import EntropySource


class ArrayValueTree[T](ValueTree[tuple[T, ...]]):
    """Value tree over a fixed-size array of independently owned sub-trees.

    Attributes:
        _trees: The N sub-trees, in element order. Never reordered.
        _shrinker: Index of the sub-tree currently being simplified (0..N).
        _last_shrinker: Index of the last sub-tree that simplified
            successfully, or None when there is nothing to undo.
    """

    def __init__(self, trees: Sequence[ValueTree[T]]) -> None:
        self._trees: list[ValueTree[T]] = list(trees)
        self._shrinker = 0
        self._last_shrinker: int | None = None

    def __len__(self) -> int:
        return len(self._trees)

    @property
    def trees(self) -> tuple[ValueTree[T], ...]:
        """Read-only view of the sub-trees, for inspection."""
        return tuple(self._trees)

    def current(self) -> tuple[T, ...]:
        return tuple(tree.current() for tree in self._trees)

    def simplify(self) -> bool:
        while self._shrinker < len(self._trees):
            if self._trees[self._shrinker].simplify():
                self._last_shrinker = self._shrinker
                return True
            self._shrinker += 1

        return False

    def complicate(self) -> bool:
        if self._last_shrinker is None:
            return False

        self._shrinker = self._last_shrinker
        if self._trees[self._shrinker].complicate():
            return True

        self._last_shrinker = None
        return False

    def __repr__(self) -> str:
        return f"ArrayValueTree(shrinker={self._shrinker}, last_shrinker={self._last_shrinker}, trees={self._trees!r})"


def _draw_all[T](strategies: Iterable[Strategy[T]], source: EntropySource) -> ArrayValueTree[T]:
    # A Rejection from any element aborts the whole draw.
    return ArrayValueTree([strategy.new_tree(source) for strategy in strategies])


class ArrayStrategy[T](Strategy[tuple[T, ...]]):
    """Fixed-length arrays drawing element i from ``strategies[i]``."""

    def __init__(self, strategies: Iterable[Strategy[T]]) -> None:
        self._strategies: tuple[Strategy[T], ...] = tuple(strategies)

    @property
    def size(self) -> int:
        return len(self._strategies)

    def new_tree(self, source: EntropySource) -> ArrayValueTree[T]:
        return _draw_all(self._strategies, source)

    def __repr__(self) -> str:
        return f"ArrayStrategy({list(self._strategies)!r})"


class UniformArrayStrategy[T](Strategy[tuple[T, ...]]):
    """Fixed-length arrays with every element drawn from one strategy.

    Useful when building the same strategy N times would be wasteful or the
    strategy is only available as a single instance.
    """

    def __init__(self, strategy: Strategy[T], size: int) -> None:
        if size < 0:
            raise ValueError(f"array size must be non-negative, got {size}")
        self._strategy = strategy
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def new_tree(self, source: EntropySource) -> ArrayValueTree[T]:
        return _draw_all((self._strategy for _ in range(self._size)), source)

    def __repr__(self) -> str:
        return f"UniformArrayStrategy({self._strategy!r}, size={self._size})"


def uniform[T](strategy: Strategy[T], size: int) -> UniformArrayStrategy[T]:
    """Strategy for ``size``-element tuples drawn from ``strategy``."""
    return UniformArrayStrategy(strategy, size)
