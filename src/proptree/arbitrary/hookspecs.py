# src/proptree/arbitrary/hookspecs.py
"""pluggy hook specifications for arbitrary-strategy providers.

A provider maps type keys (a class, an IntKind, a NonZeroKind, ...) to
zero-argument factories returning the canonical strategy for that key.
The registry calls these hooks once when it is built.

Usage (implementing a provider plugin):
    from proptree.arbitrary.hookspecs import hookimpl

    class MoneyPlugin:
        @hookimpl
        def proptree_arbitrary(self):
            return [(Money, lambda: int_range(0, 10_000).map(Money))]
"""

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any

import pluggy

if TYPE_CHECKING:
    from proptree.strategy.traits import Strategy

PROJECT_NAME = "proptree"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for provider plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

type ArbitraryEntry = tuple[Hashable, Callable[[], "Strategy[Any]"]]


class ProptreeArbitrarySpec:
    """Hook specifications for arbitrary-strategy provider plugins."""

    @hookspec
    def proptree_arbitrary(self) -> list[ArbitraryEntry]:  # type: ignore[empty-body]
        """Return (key, factory) pairs.

        Returns:
            List of pairs where ``factory()`` builds the canonical strategy
            for values of ``key``.
        """
