# src/proptree/arbitrary/builtin.py
"""Plugin registering the built-in arbitrary strategies."""

from functools import partial

from proptree.arbitrary.fixed import HASH_TYPES, UINT_TYPES, hash_strategy, uint_strategy
from proptree.arbitrary.hookspecs import ArbitraryEntry, hookimpl
from proptree.arbitrary.non_zero import NON_ZERO_KINDS, non_zero
from proptree.strategy.numeric import INT_KINDS, any_bool, any_int


class BuiltinArbitraryPlugin:
    """Plugin that registers strategies for every built-in type key."""

    @hookimpl
    def proptree_arbitrary(self) -> list[ArbitraryEntry]:
        """Return built-in (key, factory) pairs."""
        entries: list[ArbitraryEntry] = [(bool, any_bool)]
        entries.extend((kind, partial(any_int, kind)) for kind in INT_KINDS)
        entries.extend((hash_type, partial(hash_strategy, hash_type)) for hash_type in HASH_TYPES)
        entries.extend((uint_type, partial(uint_strategy, uint_type)) for uint_type in UINT_TYPES)
        entries.extend((nz_kind, partial(non_zero, nz_kind.base)) for nz_kind in NON_ZERO_KINDS)
        return entries
