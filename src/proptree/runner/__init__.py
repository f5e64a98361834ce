# src/proptree/runner/__init__.py
"""Reference driver: configuration, TestRunner and test-authoring sugar."""

from proptree.runner.config import ENVVAR_PREFIX, RunnerConfig, deep_merge, load_config
from proptree.runner.runner import TestRunner, run_property
from proptree.runner.sugar import assume, given

__all__ = [
    "ENVVAR_PREFIX",
    "RunnerConfig",
    "TestRunner",
    "assume",
    "deep_merge",
    "given",
    "load_config",
    "run_property",
]
