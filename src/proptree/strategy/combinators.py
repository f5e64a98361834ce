# src/proptree/strategy/combinators.py
"""Strategy transformers: Map, Filter and Boxed.

Each combinator wraps an inner strategy and, on new_tree(), wraps the inner
tree. Shrinking always happens on the inner tree; the wrappers only
translate (Map), guard (Filter) or hide the concrete type (Boxed).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from proptree.errors import Rejection, ShrinkInvariantError
from proptree.strategy.traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.entropy import EntropySource

logger = structlog.get_logger(__name__)

# Consecutive rejected draws a Filter tolerates within one new_tree() call.
DEFAULT_MAX_FILTER_ATTEMPTS = 65_536


# =============================================================================
# Map
# =============================================================================


class MapTree[T, U](ValueTree[U]):
    """Tree applying ``fn`` to the source tree's current value on demand."""

    def __init__(self, source: ValueTree[T], fn: Callable[[T], U]) -> None:
        self._source = source
        self._fn = fn

    def current(self) -> U:
        return self._fn(self._source.current())

    def simplify(self) -> bool:
        return self._source.simplify()

    def complicate(self) -> bool:
        return self._source.complicate()

    def __repr__(self) -> str:
        return f"MapTree({self._source!r})"


class Map[T, U](Strategy[U]):
    """Strategy translating values of ``source`` through a pure function."""

    def __init__(self, source: Strategy[T], fn: Callable[[T], U]) -> None:
        self._source = source
        self._fn = fn

    def new_tree(self, source: EntropySource) -> MapTree[T, U]:
        return MapTree(self._source.new_tree(source), self._fn)

    def __repr__(self) -> str:
        return f"Map({self._source!r}, {getattr(self._fn, '__name__', self._fn)!r})"


# =============================================================================
# Filter
# =============================================================================


class FilterTree[T](ValueTree[T]):
    """Tree whose current value always satisfies ``predicate``.

    A shrink step that lands the source on a rejected value is not exposed:
    the source is complicated until the value is acceptable again. Since
    complicating converges back to the previous (accepted) value, this
    always terminates for a well-behaved source.
    """

    def __init__(
        self,
        source: ValueTree[T],
        predicate: Callable[[T], bool],
        whence: str,
    ) -> None:
        self._source = source
        self._predicate = predicate
        self._whence = whence

    def _ensure_acceptable(self) -> None:
        while not self._predicate(self._source.current()):
            if not self._source.complicate():
                raise ShrinkInvariantError(
                    f"Unable to complicate filtered tree ({self._whence}) back into an acceptable value; "
                    f"source tree {self._source!r} is stuck at {self._source.current()!r}"
                )

    def current(self) -> T:
        return self._source.current()

    def simplify(self) -> bool:
        before = self._source.current()
        while self._source.simplify():
            self._ensure_acceptable()
            # Backing off may land on the value we started from; that is
            # not a step, so keep searching past it.
            if self._source.current() != before:
                return True
        return False

    def complicate(self) -> bool:
        if self._source.complicate():
            self._ensure_acceptable()
            return True
        return False

    def __repr__(self) -> str:
        return f"FilterTree({self._source!r}, whence={self._whence!r})"


class Filter[T](Strategy[T]):
    """Strategy rejecting draws of ``source`` that fail ``predicate``.

    Draws are retried up to ``max_attempts`` times per new_tree() call;
    running out raises Rejection rather than looping forever.
    """

    def __init__(
        self,
        source: Strategy[T],
        predicate: Callable[[T], bool],
        whence: str,
        *,
        max_attempts: int = DEFAULT_MAX_FILTER_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self._source = source
        self._predicate = predicate
        self._whence = whence
        self._max_attempts = max_attempts

    @property
    def whence(self) -> str:
        return self._whence

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def new_tree(self, source: EntropySource) -> FilterTree[T]:
        for _ in range(self._max_attempts):
            tree = self._source.new_tree(source)
            if self._predicate(tree.current()):
                return FilterTree(tree, self._predicate, self._whence)

        logger.debug(
            "filter_budget_exhausted",
            whence=self._whence,
            attempts=self._max_attempts,
        )
        raise Rejection(f"{self._whence}: rejected {self._max_attempts} consecutive draws")

    def __repr__(self) -> str:
        return f"Filter({self._source!r}, whence={self._whence!r})"


# =============================================================================
# Boxed
# =============================================================================


class BoxedTree[T](ValueTree[T]):
    """Uniform handle over any value tree."""

    def __init__(self, inner: ValueTree[T]) -> None:
        self._inner = inner

    def current(self) -> T:
        return self._inner.current()

    def simplify(self) -> bool:
        return self._inner.simplify()

    def complicate(self) -> bool:
        return self._inner.complicate()

    def __repr__(self) -> str:
        return f"BoxedTree({self._inner!r})"


class BoxedStrategy[T](Strategy[T]):
    """Uniform handle over any strategy."""

    def __init__(self, inner: Strategy[T]) -> None:
        self._inner = inner

    def new_tree(self, source: EntropySource) -> BoxedTree[T]:
        return BoxedTree(self._inner.new_tree(source))

    def boxed(self) -> BoxedStrategy[T]:
        return self

    def __repr__(self) -> str:
        return f"BoxedStrategy({self._inner!r})"
