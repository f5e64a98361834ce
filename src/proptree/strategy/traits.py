# src/proptree/strategy/traits.py
"""Core Strategy and ValueTree contracts.

A Strategy is an immutable description of a value distribution. Its only
job is to materialize a fresh ValueTree from an entropy source.

A ValueTree wraps one concrete candidate value plus the private state of
its shrink search. The driver reads current(), and when the value makes a
test fail it walks the tree with simplify() and complicate():

    tree = strategy.new_tree(source)
    while True:
        if passes(tree.current()):
            if not tree.complicate():
                break
        elif not tree.simplify():
            break

Contract for every ValueTree:

- current() is pure and stable between shrink calls.
- simplify() moves to a "smaller" value and records the step for undo, or
  returns False once the search is exhausted.
- complicate() undoes the most recent successful simplify(), landing
  strictly between the post- and pre-simplify values or exactly on the
  pre-simplify value. Undo is bounded to one level. Repeated complicate()
  calls after one simplify() converge back to the pre-simplify value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from proptree.entropy import EntropySource
    from proptree.strategy.combinators import BoxedStrategy, Filter, Map


class ValueTree[T](ABC):
    """Mutable cursor over one candidate value and its shrink search."""

    @abstractmethod
    def current(self) -> T:
        """Value this tree currently represents."""

    @abstractmethod
    def simplify(self) -> bool:
        """Attempt to move to a simpler value.

        Returns:
            True if the current value changed, False if no simpler value
            exists.
        """

    @abstractmethod
    def complicate(self) -> bool:
        """Undo the most recent successful simplify().

        Returns:
            True if the current value changed, False if there is no step
            left to undo.
        """


class Strategy[T](ABC):
    """Immutable factory of value trees."""

    @abstractmethod
    def new_tree(self, source: EntropySource) -> ValueTree[T]:
        """Draw one candidate from ``source``.

        Raises:
            Rejection: If no acceptable value could be produced. The caller
                should discard the attempt and draw again.
        """

    def map[U](self, fn: Callable[[T], U]) -> Map[T, U]:
        """Strategy whose values are ``fn`` applied to this strategy's values.

        ``fn`` must be pure and total over every value this strategy can
        produce. Exceptions it raises propagate to the caller.
        """
        from proptree.strategy.combinators import Map

        return Map(self, fn)

    def filter(
        self,
        predicate: Callable[[T], bool],
        whence: str | None = None,
        *,
        max_attempts: int | None = None,
    ) -> Filter[T]:
        """Strategy restricted to values satisfying ``predicate``.

        Args:
            predicate: Acceptance test.
            whence: Description used in rejection messages. Defaults to the
                predicate's name.
            max_attempts: Consecutive draws allowed before giving up.
        """
        from proptree.strategy.combinators import DEFAULT_MAX_FILTER_ATTEMPTS, Filter

        return Filter(
            self,
            predicate,
            whence if whence is not None else getattr(predicate, "__name__", repr(predicate)),
            max_attempts=max_attempts if max_attempts is not None else DEFAULT_MAX_FILTER_ATTEMPTS,
        )

    def boxed(self) -> BoxedStrategy[T]:
        """Type-erased handle to this strategy."""
        from proptree.strategy.combinators import BoxedStrategy

        return BoxedStrategy(self)


# Return type of Strategy.new_tree, for callers that want to name it.
type NewTree[T] = ValueTree[T]


class JustTree[T](ValueTree[T]):
    """Tree holding a constant that never shrinks."""

    def __init__(self, value: T) -> None:
        self._value = value

    def current(self) -> T:
        return self._value

    def simplify(self) -> bool:
        return False

    def complicate(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"JustTree({self._value!r})"


class Just[T](Strategy[T]):
    """Strategy that always produces the same value, consuming no entropy."""

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def new_tree(self, source: EntropySource) -> JustTree[T]:
        return JustTree(self._value)

    def __repr__(self) -> str:
        return f"Just({self._value!r})"


def just(value: Any) -> Just[Any]:
    """Strategy producing exactly ``value``."""
    return Just(value)
