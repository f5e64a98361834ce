"""
proptree: property-based test-input generation and shrinking.

A Strategy describes a value distribution and materializes ValueTrees from
an entropy source. A ValueTree holds one candidate value and can search for
a smaller one (simplify) or undo its last step (complicate), which is all a
driver needs to find minimal counterexamples.
"""

__version__ = "0.1.0"

from proptree.arbitrary import H128, H160, H256, H512, NonZero, NonZeroKind, Uint128, Uint256, Uint512, any_of, non_zero
from proptree.entropy import EntropySource
from proptree.errors import PropertyFailure, Rejection, ShrinkInvariantError, TooManyRejections
from proptree.runner import RunnerConfig, TestRunner, assume, given, load_config
from proptree.sanity import SanityOptions, check_strategy_sanity
from proptree.strategy import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    ArrayStrategy,
    BoxedStrategy,
    Filter,
    IntKind,
    Just,
    Map,
    Strategy,
    UniformArrayStrategy,
    ValueTree,
    any_bool,
    any_int,
    int_range,
    int_range_inclusive,
    just,
    uniform,
)

__all__ = [
    "H128",
    "H160",
    "H256",
    "H512",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "ArrayStrategy",
    "BoxedStrategy",
    "EntropySource",
    "Filter",
    "IntKind",
    "Just",
    "Map",
    "NonZero",
    "NonZeroKind",
    "PropertyFailure",
    "Rejection",
    "RunnerConfig",
    "SanityOptions",
    "ShrinkInvariantError",
    "Strategy",
    "TestRunner",
    "TooManyRejections",
    "Uint128",
    "Uint256",
    "Uint512",
    "UniformArrayStrategy",
    "ValueTree",
    "__version__",
    "any_bool",
    "any_int",
    "any_of",
    "assume",
    "check_strategy_sanity",
    "given",
    "int_range",
    "int_range_inclusive",
    "just",
    "load_config",
    "non_zero",
    "uniform",
]
