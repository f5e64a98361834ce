# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import seeds, STANDARD_SETTINGS
"""

from tests.strategies.entropy import int_kinds, seeds
from tests.strategies.settings import QUICK_SETTINGS, SLOW_SETTINGS, STANDARD_SETTINGS

__all__ = [
    "QUICK_SETTINGS",
    "SLOW_SETTINGS",
    "STANDARD_SETTINGS",
    "int_kinds",
    "seeds",
]
