# src/proptree/arbitrary/registry.py
"""Lookup of the canonical strategy for a type key.

Providers are discovered through the ``proptree_arbitrary`` pluggy hook.
The built-in provider is always registered first; extra provider objects
can be passed when building a dedicated registry:

    registry = ArbitraryRegistry(plugins=[MoneyPlugin()])
    strategy = registry.strategy_for(Money)

Most callers use the process-wide default through any_of():

    any_of(H256).new_tree(source)
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from functools import cache
from typing import Any

import pluggy
import structlog

from proptree.arbitrary.builtin import BuiltinArbitraryPlugin
from proptree.arbitrary.hookspecs import PROJECT_NAME, ProptreeArbitrarySpec
from proptree.strategy.traits import Strategy

logger = structlog.get_logger(__name__)


class ArbitraryRegistry:
    """Key -> strategy factory table built from provider plugins."""

    def __init__(self, plugins: Iterable[Any] = ()) -> None:
        """Discover providers and build the factory table.

        Args:
            plugins: Additional plugin objects implementing
                ``proptree_arbitrary``.

        Raises:
            ValueError: If two providers register the same key, or a plugin
                does not match the hook specification.
        """
        plugin_manager = pluggy.PluginManager(PROJECT_NAME)
        plugin_manager.add_hookspecs(ProptreeArbitrarySpec)

        for plugin in [BuiltinArbitraryPlugin(), *plugins]:
            try:
                plugin_manager.register(plugin)
                plugin_manager.check_pending()
            except (pluggy.PluginValidationError, ValueError) as e:
                # ValueError: the same plugin object was passed twice
                if isinstance(e, pluggy.PluginValidationError):
                    plugin_manager.unregister(plugin=plugin)
                raise ValueError(f"Invalid arbitrary provider plugin {type(plugin).__name__}: {e}") from e

        factories: dict[Hashable, Callable[[], Strategy[Any]]] = {}
        for entries in plugin_manager.hook.proptree_arbitrary():
            for key, factory in entries:
                if key in factories:
                    raise ValueError(f"Duplicate arbitrary strategy for {key!r}")
                factories[key] = factory

        self._factories = factories
        logger.debug("arbitrary_registry_built", keys=len(factories))

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def keys(self) -> list[Hashable]:
        return list(self._factories)

    def strategy_for(self, key: Hashable) -> Strategy[Any]:
        """Build the canonical strategy for ``key``.

        Raises:
            LookupError: If no provider registered ``key``.
        """
        factory = self._factories.get(key)
        if factory is None:
            raise LookupError(f"No arbitrary strategy registered for {key!r}")
        return factory()


@cache
def default_registry() -> ArbitraryRegistry:
    """Process-wide registry holding the built-in providers."""
    return ArbitraryRegistry()


def any_of(key: Hashable) -> Strategy[Any]:
    """Canonical strategy for ``key`` from the default registry."""
    return default_registry().strategy_for(key)
