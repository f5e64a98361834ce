# src/proptree/runner/sugar.py
"""Test-authoring helpers: given() and assume().

given() turns a function of generated arguments into a test that takes
none of them, driving it with a TestRunner:

    @given(int_range(0, 10), b=int_range(1, 10))
    def test_addition(a: int, b: int) -> None:
        assume(a != 9 or b != 9)
        assert a + b < 18

Positional strategies fill the function's trailing positional parameters
(so methods keep ``self``); keyword strategies fill parameters by name.
Anything else in the signature stays visible to the caller, which lets
pytest still inject fixtures. Generated values are passed by keyword
(unless the parameter is positional-only) so they never collide with
fixtures pytest passes by name.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from proptree.errors import Rejection
from proptree.runner.config import RunnerConfig, load_config
from proptree.runner.runner import TestRunner
from proptree.strategy.array import ArrayStrategy
from proptree.strategy.traits import Strategy

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def assume(condition: object, message: str | None = None) -> None:
    """Reject the current case unless ``condition`` holds.

    Raises:
        Rejection: If ``condition`` is falsy.
    """
    if not condition:
        raise Rejection(message if message is not None else "assumption failed")


def given(
    *strategies: Strategy[Any],
    config: RunnerConfig | None = None,
    **named: Strategy[Any],
) -> Callable[[Callable[..., Any]], Callable[..., None]]:
    """Decorate a function so it runs as a property over the given strategies.

    Args:
        strategies: Strategies for the trailing positional parameters.
        config: Runner settings. Loaded from the environment on each call
            when omitted (see load_config()).
        named: Strategies for parameters by name.

    Raises:
        TypeError: At decoration time, if the strategies do not match the
            function's parameters.
    """
    if not strategies and not named:
        raise TypeError("given() requires at least one strategy")

    combined = ArrayStrategy([*strategies, *named.values()])
    names = list(named)
    npos = len(strategies)

    def decorator(fn: Callable[..., Any]) -> Callable[..., None]:
        signature = inspect.signature(fn)
        missing = [name for name in names if name not in signature.parameters]
        if missing:
            raise TypeError(f"{fn.__qualname__}() has no parameters named {missing}")

        positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL and p.name not in named]
        if npos > len(positional):
            raise TypeError(f"{fn.__qualname__}() takes {len(positional)} positional parameters, got {npos} strategies")
        generated_positional = positional[len(positional) - npos :]
        generated = {p.name for p in generated_positional} | set(names)
        # Positional-only parameters cannot be passed by keyword.
        by_position = sum(1 for p in generated_positional if p.kind is inspect.Parameter.POSITIONAL_ONLY)
        by_name = [p.name for p in generated_positional[by_position:]] + names

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> None:
            runner = TestRunner(config if config is not None else load_config())

            def test(values: tuple[Any, ...]) -> None:
                fn(*args, *values[:by_position], **kwargs, **dict(zip(by_name, values[by_position:], strict=True)))

            runner.run(combined, test)

        # Hide generated parameters from callers (and from pytest's fixture lookup)
        wrapper.__signature__ = signature.replace(  # type: ignore[attr-defined]
            parameters=[p for p in signature.parameters.values() if p.name not in generated]
        )
        return wrapper

    return decorator
