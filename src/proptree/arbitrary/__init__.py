# src/proptree/arbitrary/__init__.py
"""Canonical strategies for type keys.

Built-in keys:
- bool and every IntKind (U8 ... ISIZE): full-range values
- H128, H160, H256, H512: hash-like identifiers from raw bytes
- Uint128, Uint256, Uint512: big unsigned integers from raw 64-bit words
- NonZeroKind(kind) for every IntKind: non-zero integers

Usage:
    from proptree.arbitrary import H256, any_of

    tree = any_of(H256).new_tree(source)
"""

from proptree.arbitrary.fixed import (
    HASH_TYPES,
    UINT_TYPES,
    H128,
    H160,
    H256,
    H512,
    FixedHash,
    FixedUint,
    Uint128,
    Uint256,
    Uint512,
    hash_strategy,
    uint_strategy,
)
from proptree.arbitrary.hookspecs import hookimpl
from proptree.arbitrary.non_zero import NON_ZERO_KINDS, NonZero, NonZeroKind, non_zero
from proptree.arbitrary.registry import ArbitraryRegistry, any_of, default_registry

__all__ = [
    "H128",
    "H160",
    "H256",
    "H512",
    "HASH_TYPES",
    "NON_ZERO_KINDS",
    "UINT_TYPES",
    "ArbitraryRegistry",
    "FixedHash",
    "FixedUint",
    "NonZero",
    "NonZeroKind",
    "Uint128",
    "Uint256",
    "Uint512",
    "any_of",
    "default_registry",
    "hash_strategy",
    "hookimpl",
    "non_zero",
    "uint_strategy",
]
