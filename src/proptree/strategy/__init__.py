# src/proptree/strategy/__init__.py
"""Strategy and ValueTree contracts, combinators and primitive strategies."""

from proptree.strategy.array import ArrayStrategy, ArrayValueTree, UniformArrayStrategy, uniform
from proptree.strategy.combinators import (
    DEFAULT_MAX_FILTER_ATTEMPTS,
    BoxedStrategy,
    BoxedTree,
    Filter,
    FilterTree,
    Map,
    MapTree,
)
from proptree.strategy.numeric import (
    I8,
    I16,
    I32,
    I64,
    I128,
    INT_KINDS,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    AnyBool,
    AnyInt,
    BinarySearch,
    BoolValueTree,
    IntKind,
    IntRange,
    any_bool,
    any_int,
    int_range,
    int_range_inclusive,
)
from proptree.strategy.traits import Just, JustTree, NewTree, Strategy, ValueTree, just

__all__ = [
    "DEFAULT_MAX_FILTER_ATTEMPTS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "INT_KINDS",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "AnyBool",
    "AnyInt",
    "ArrayStrategy",
    "ArrayValueTree",
    "BinarySearch",
    "BoolValueTree",
    "BoxedStrategy",
    "BoxedTree",
    "Filter",
    "FilterTree",
    "IntKind",
    "IntRange",
    "Just",
    "JustTree",
    "Map",
    "MapTree",
    "NewTree",
    "Strategy",
    "UniformArrayStrategy",
    "ValueTree",
    "any_bool",
    "any_int",
    "int_range",
    "int_range_inclusive",
    "just",
    "uniform",
]
