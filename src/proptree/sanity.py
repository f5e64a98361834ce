# src/proptree/sanity.py
"""Self-check of the simplify/complicate contract for a strategy.

check_strategy_sanity() draws many trees from a strategy and, for every
simplify step along each tree's full shrink path, verifies on a clone that:

- complicate() on an untouched tree returns False and changes nothing;
- complicate() right after a successful simplify() returns True (strict mode);
- complicating to exhaustion lands back on the pre-simplify value.

Intended for strategy authors' test suites:

    def test_my_strategy_is_sane() -> None:
        check_strategy_sanity(my_strategy())
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from proptree.entropy import EntropySource
from proptree.errors import Rejection, ShrinkInvariantError
from proptree.strategy.traits import Strategy, ValueTree

# Loop guard for simplify/complicate runs that never report exhaustion.
_MAX_STEPS = 65_536


@dataclass(frozen=True, slots=True)
class SanityOptions:
    """Knobs for check_strategy_sanity().

    Attributes:
        trees: Number of trees to draw and walk.
        max_generation_rejects: Consecutive Rejections tolerated per draw.
        strict_complicate_after_simplify: Require complicate() to succeed
            immediately after every successful simplify().
    """

    trees: int = 256
    max_generation_rejects: int = 100
    strict_complicate_after_simplify: bool = True


def _same(left: Any, right: Any) -> bool:
    # Values that do not equal themselves (NaN) count as equal to each other.
    return bool(left == right) or (left != left and right != right)


def _draw[T](strategy: Strategy[T], source: EntropySource, options: SanityOptions) -> ValueTree[T]:
    last_error: Rejection | None = None
    for _ in range(options.max_generation_rejects):
        try:
            return strategy.new_tree(source)
        except Rejection as e:
            last_error = e
    raise ShrinkInvariantError(f"Strategy {strategy!r} rejected too many times: {last_error}")


def check_strategy_sanity[T](
    strategy: Strategy[T],
    options: SanityOptions | None = None,
    *,
    source: EntropySource | None = None,
) -> None:
    """Exercise ``strategy`` and raise on any contract violation.

    Args:
        strategy: Strategy under test. Its trees must support copy.deepcopy.
        options: Check parameters (defaults to SanityOptions()).
        source: Entropy source (defaults to a deterministic one).

    Raises:
        ShrinkInvariantError: Describing the first violation found.
    """
    options = options if options is not None else SanityOptions()
    source = source if source is not None else EntropySource.deterministic()

    for _ in range(options.trees):
        state = _draw(strategy, source, options)

        untouched = copy.deepcopy(state)
        initial = untouched.current()
        if untouched.complicate():
            raise ShrinkInvariantError(f"complicate() returned True before any simplify(): {state!r}")
        if not _same(initial, untouched.current()):
            raise ShrinkInvariantError(
                f"complicate() before any simplify() changed the value from {initial!r} to {untouched.current()!r}"
            )

        num_simplifies = 0
        while True:
            before_simplified = copy.deepcopy(state)
            if not state.simplify():
                break

            complicated = copy.deepcopy(state)
            if options.strict_complicate_after_simplify and not complicated.complicate():
                raise ShrinkInvariantError(
                    f"complicate() returned False immediately after simplify() returned True. "
                    f"State after {num_simplifies} calls to simplify(): {before_simplified!r}; "
                    f"simplified to: {state!r}"
                )

            num_complications = 0
            while complicated.complicate():
                num_complications += 1
                if num_complications > _MAX_STEPS:
                    raise ShrinkInvariantError(
                        f"complicate() returned True over {_MAX_STEPS} times in a row; "
                        f"aborting due to possible infinite loop. State: {complicated!r}"
                    )

            if not _same(before_simplified.current(), complicated.current()):
                raise ShrinkInvariantError(
                    f"Calling complicate() on a simplified state did not return to the original value "
                    f"after {num_complications} calls: expected {before_simplified.current()!r}, "
                    f"got {complicated.current()!r}"
                )

            num_simplifies += 1
            if num_simplifies > _MAX_STEPS:
                raise ShrinkInvariantError(
                    f"simplify() returned True over {_MAX_STEPS} times in a row; "
                    f"aborting due to possible infinite loop. State: {state!r}"
                )
