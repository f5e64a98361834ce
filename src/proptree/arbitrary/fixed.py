# src/proptree/arbitrary/fixed.py
"""Fixed-width hash identifiers and big unsigned integers.

Both families are built from a block of raw entropy of their exact width:

- FixedHash subclasses (H128, H160, H256, H512) reinterpret a block of
  WIDTH bytes, keeping byte order.
- FixedUint subclasses (Uint128, Uint256, Uint512) reinterpret a block of
  WORDS 64-bit words, word 0 being least significant.

Both constructions are total and bijective: every block yields a value and
to_bytes()/to_words() returns the exact block it was built from.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import total_ordering
from typing import Any, ClassVar, Self

from proptree.strategy.array import uniform
from proptree.strategy.combinators import Map
from proptree.strategy.numeric import U8, U64, any_int

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


# =============================================================================
# Hash-like identifiers
# =============================================================================


@total_ordering
class FixedHash:
    """Opaque identifier of exactly WIDTH bytes."""

    WIDTH: ClassVar[int]

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) != self.WIDTH:
            raise ValueError(f"{type(self).__name__} requires exactly {self.WIDTH} bytes, got {len(data)}")
        self._data = bytes(data)

    @classmethod
    def from_bytes(cls, block: Sequence[int]) -> Self:
        """Build from a block of WIDTH byte values (bytes or ints in 0..255)."""
        return cls(bytes(block))

    @classmethod
    def zero(cls) -> Self:
        return cls(bytes(cls.WIDTH))

    def to_bytes(self) -> bytes:
        return self._data

    def hex(self) -> str:
        return "0x" + self._data.hex()

    def is_zero(self) -> bool:
        return not any(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class H128(FixedHash):
    WIDTH = 16
    __slots__ = ()


class H160(FixedHash):
    WIDTH = 20
    __slots__ = ()


class H256(FixedHash):
    WIDTH = 32
    __slots__ = ()


class H512(FixedHash):
    WIDTH = 64
    __slots__ = ()


HASH_TYPES: tuple[type[FixedHash], ...] = (H128, H160, H256, H512)


# =============================================================================
# Big unsigned integers
# =============================================================================


@total_ordering
class FixedUint:
    """Unsigned integer of exactly WORDS 64-bit words."""

    WORDS: ClassVar[int]

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not 0 <= value <= self.max_value():
            raise ValueError(f"{type(self).__name__} out of range: {value}")
        self._value = value

    @classmethod
    def bits(cls) -> int:
        return cls.WORDS * _WORD_BITS

    @classmethod
    def max_value(cls) -> int:
        return (1 << cls.bits()) - 1

    @classmethod
    def from_words(cls, words: Sequence[int]) -> Self:
        """Build from WORDS little-endian-ordered 64-bit words."""
        if len(words) != cls.WORDS:
            raise ValueError(f"{cls.__name__} requires exactly {cls.WORDS} words, got {len(words)}")
        value = 0
        for index, word in enumerate(words):
            if not 0 <= word <= _WORD_MASK:
                raise ValueError(f"word {index} is not a 64-bit unsigned value: {word}")
            value |= word << (index * _WORD_BITS)
        return cls(value)

    def to_words(self) -> tuple[int, ...]:
        return tuple((self._value >> (index * _WORD_BITS)) & _WORD_MASK for index in range(self.WORDS))

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value:#x})"


class Uint128(FixedUint):
    WORDS = 2
    __slots__ = ()


class Uint256(FixedUint):
    WORDS = 4
    __slots__ = ()


class Uint512(FixedUint):
    WORDS = 8
    __slots__ = ()


UINT_TYPES: tuple[type[FixedUint], ...] = (Uint128, Uint256, Uint512)


# =============================================================================
# Strategies
# =============================================================================


def hash_strategy[H: FixedHash](hash_type: type[H]) -> Map[tuple[int, ...], H]:
    """Every value of ``hash_type``, one entropy byte per identifier byte."""
    return uniform(any_int(U8), hash_type.WIDTH).map(hash_type.from_bytes)


def uint_strategy[N: FixedUint](uint_type: type[N]) -> Map[tuple[int, ...], N]:
    """Every value of ``uint_type``, one entropy word per integer word."""
    return uniform(any_int(U64), uint_type.WORDS).map(uint_type.from_words)
