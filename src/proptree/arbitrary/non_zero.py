# src/proptree/arbitrary/non_zero.py
"""Non-zero integers for every fixed-width integer kind.

The strategy filters the kind's full-range strategy on ``value != 0`` and
then wraps the survivor in NonZero. The wrapper's constructor rejects zero,
but the filter guarantees it is never handed one.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from proptree.strategy.combinators import BoxedStrategy
from proptree.strategy.numeric import INT_KINDS, IntKind, any_int


@dataclass(frozen=True, slots=True)
class NonZero:
    """An integer of ``kind`` that is statically known not to be zero."""

    kind: IntKind
    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise ValueError(f"NonZero {self.kind} must be non-zero")
        if not self.kind.contains(self.value):
            raise ValueError(f"{self.value} is out of range for {self.kind}")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class NonZeroKind:
    """Registry key for the non-zero variant of an integer kind."""

    base: IntKind

    @property
    def name(self) -> str:
        return f"NonZero{self.base.name.capitalize()}"

    def __str__(self) -> str:
        return self.name


NON_ZERO_KINDS: tuple[NonZeroKind, ...] = tuple(NonZeroKind(kind) for kind in INT_KINDS)


def _is_non_zero(value: int) -> bool:
    return value != 0


def non_zero(kind: IntKind) -> BoxedStrategy[NonZero]:
    """Every non-zero value of ``kind``."""
    return any_int(kind).filter(_is_non_zero, "must be non-zero").map(partial(NonZero, kind)).boxed()
