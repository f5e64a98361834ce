# src/proptree/strategy/numeric.py
"""Primitive integer and boolean strategies.

Integers are drawn uniformly (the distribution shape is not part of any
contract) and shrink by binary search toward a target: zero for full-range
integers, the bound closest to zero for ranges.

Fixed-width integer kinds are described by a table of IntKind entries
rather than one class per width; every width-dependent computation goes
through the kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from proptree.strategy.traits import Strategy, ValueTree

if TYPE_CHECKING:
    from proptree.entropy import EntropySource


# =============================================================================
# Integer kinds
# =============================================================================


@dataclass(frozen=True, slots=True)
class IntKind:
    """A fixed-width machine integer type.

    Attributes:
        name: Conventional type name (e.g., "u8", "i64").
        bits: Width in bits.
        signed: Two's-complement signed if True, unsigned otherwise.
    """

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def from_bits(self, raw: int) -> int:
        """Reinterpret an unsigned ``bits``-wide pattern as a value of this kind."""
        if self.signed and raw >> (self.bits - 1):
            return raw - (1 << self.bits)
        return raw

    def to_bits(self, value: int) -> int:
        """Bit pattern of ``value`` as an unsigned ``bits``-wide integer."""
        return value & ((1 << self.bits) - 1)

    def __str__(self) -> str:
        return self.name


# Pointer-width kinds follow a 64-bit target.
U8 = IntKind("u8", 8, False)
U16 = IntKind("u16", 16, False)
U32 = IntKind("u32", 32, False)
U64 = IntKind("u64", 64, False)
U128 = IntKind("u128", 128, False)
USIZE = IntKind("usize", 64, False)
I8 = IntKind("i8", 8, True)
I16 = IntKind("i16", 16, True)
I32 = IntKind("i32", 32, True)
I64 = IntKind("i64", 64, True)
I128 = IntKind("i128", 128, True)
ISIZE = IntKind("isize", 64, True)

INT_KINDS: tuple[IntKind, ...] = (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)


# =============================================================================
# Binary search value tree
# =============================================================================


def _half(interval: int) -> int:
    """interval / 2, rounded toward zero."""
    return interval // 2 if interval >= 0 else -((-interval) // 2)


class BinarySearch(ValueTree[int]):
    """Integer tree shrinking toward ``target`` by bisection.

    ``lo`` is the closest-to-target value not yet ruled out and ``hi`` the
    closest value known to fail; ``curr`` probes between them. Works in
    either direction: the step sign is fixed by which side of ``target``
    the start value lies on.
    """

    def __init__(self, start: int, target: int = 0) -> None:
        self._lo = target
        self._curr = start
        self._hi = start
        self._step = 1 if start >= target else -1

    def _has_room(self) -> bool:
        return (self._hi - self._lo) * self._step > 0

    def _reposition(self) -> bool:
        new_mid = self._lo + _half(self._hi - self._lo)
        if new_mid == self._curr:
            return False
        self._curr = new_mid
        return True

    def current(self) -> int:
        return self._curr

    def simplify(self) -> bool:
        if not self._has_room():
            return False
        self._hi = self._curr
        return self._reposition()

    def complicate(self) -> bool:
        # curr == hi: nothing simplified yet, or already back at the last failing value.
        if not self._has_room() or self._curr == self._hi:
            return False
        self._lo = self._curr + self._step
        return self._reposition()

    def __repr__(self) -> str:
        return f"BinarySearch(lo={self._lo}, curr={self._curr}, hi={self._hi})"


# =============================================================================
# Integer strategies
# =============================================================================


class AnyInt(Strategy[int]):
    """Every value of a fixed-width integer kind, drawn from raw bits."""

    def __init__(self, kind: IntKind) -> None:
        self._kind = kind

    @property
    def kind(self) -> IntKind:
        return self._kind

    def new_tree(self, source: EntropySource) -> BinarySearch:
        return BinarySearch(self._kind.from_bits(source.next_bits(self._kind.bits)))

    def __repr__(self) -> str:
        return f"AnyInt({self._kind})"


def _shrink_target(low: int, high: int) -> int:
    """Value of [low, high] closest to zero."""
    if low >= 0:
        return low
    if high <= 0:
        return high
    return 0


class IntRange(Strategy[int]):
    """Integers uniformly drawn from the inclusive range [low, high].

    Build half-open ranges with int_range() and closed ones with
    int_range_inclusive().
    """

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise ValueError(f"empty integer range [{low}, {high}]")
        self._low = low
        self._high = high

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    def new_tree(self, source: EntropySource) -> BinarySearch:
        value = source.next_int(self._low, self._high)
        return BinarySearch(value, _shrink_target(self._low, self._high))

    def __repr__(self) -> str:
        return f"IntRange({self._low}..={self._high})"


def any_int(kind: IntKind) -> AnyInt:
    return AnyInt(kind)


def int_range(start: int, stop: int) -> IntRange:
    """Integers in the half-open range [start, stop), like ``range(start, stop)``."""
    if start >= stop:
        raise ValueError(f"empty integer range [{start}, {stop})")
    return IntRange(start, stop - 1)


def int_range_inclusive(low: int, high: int) -> IntRange:
    return IntRange(low, high)


# =============================================================================
# Booleans
# =============================================================================


class _BoolShrink(Enum):
    UNTOUCHED = "untouched"
    SIMPLIFIED = "simplified"
    FINAL = "final"


class BoolValueTree(ValueTree[bool]):
    """Shrinks True to False once; complicate() restores True."""

    def __init__(self, value: bool) -> None:
        self._current = value
        self._state = _BoolShrink.UNTOUCHED

    def current(self) -> bool:
        return self._current

    def simplify(self) -> bool:
        if self._state is _BoolShrink.UNTOUCHED and self._current:
            self._current = False
            self._state = _BoolShrink.SIMPLIFIED
            return True
        self._state = _BoolShrink.FINAL
        return False

    def complicate(self) -> bool:
        if self._state is _BoolShrink.SIMPLIFIED:
            self._current = True
            self._state = _BoolShrink.FINAL
            return True
        return False

    def __repr__(self) -> str:
        return f"BoolValueTree({self._current}, {self._state.value})"


class AnyBool(Strategy[bool]):
    def new_tree(self, source: EntropySource) -> BoolValueTree:
        return BoolValueTree(source.next_bool())

    def __repr__(self) -> str:
        return "AnyBool()"


def any_bool() -> AnyBool:
    return AnyBool()
