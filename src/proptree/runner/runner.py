# src/proptree/runner/runner.py
"""Reference driver for strategies and value trees.

The TestRunner owns the entropy source and runs the loop every driver
follows:

1. Draw a tree; a Rejection means "discard and redraw".
2. Evaluate the test against tree.current().
3. On failure, shrink: simplify() while the value keeps failing,
   complicate() when a simplified value passes, until either call reports
   exhaustion or the iteration budget runs out.
4. Report the last value seen failing as the minimal counterexample.

Usage:
    runner = TestRunner(RunnerConfig(cases=100))
    runner.run(int_range(0, 100), lambda n: check(n))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from proptree.entropy import EntropySource
from proptree.errors import PropertyFailure, Rejection, TooManyRejections
from proptree.runner.config import RunnerConfig
from proptree.strategy.traits import Strategy, ValueTree

logger = structlog.get_logger(__name__)


class TestRunner:
    """Runs a property against a strategy and shrinks failures.

    Not thread-safe. Run independent properties in parallel by giving each
    runner its own source (see EntropySource.fork()).
    """

    __test__ = False  # Not a pytest test class despite the name

    def __init__(
        self,
        config: RunnerConfig | None = None,
        *,
        source: EntropySource | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Runner settings (defaults to RunnerConfig()).
            source: Entropy source. Built from config.seed when omitted.
        """
        self._config = config if config is not None else RunnerConfig()
        self._source = source if source is not None else EntropySource(seed=self._config.seed)
        self._global_rejects = 0
        self._successes = 0

    @classmethod
    def deterministic(cls, config: RunnerConfig | None = None) -> TestRunner:
        """Runner whose entropy source uses a fixed seed."""
        return cls(config, source=EntropySource.deterministic())

    @property
    def config(self) -> RunnerConfig:
        return self._config

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def global_rejects(self) -> int:
        """Rejections counted by the most recent run()."""
        return self._global_rejects

    @property
    def successes(self) -> int:
        """Passing cases counted by the most recent run()."""
        return self._successes

    def _reject(self, reason: str) -> None:
        self._global_rejects += 1
        logger.debug("case_rejected", reason=reason, rejects=self._global_rejects)
        if self._global_rejects > self._config.max_global_rejects:
            raise TooManyRejections(self._global_rejects, reason)

    @staticmethod
    def _evaluate[T](test: Callable[[T], object], value: T) -> Exception | None:
        """Run the test once; return the exception it raised, if any."""
        try:
            test(value)
        except Exception as e:  # Any exception raised by the test is the outcome being measured
            return e
        return None

    def run[T](self, strategy: Strategy[T], test: Callable[[T], object]) -> None:
        """Check ``test`` against ``config.cases`` values of ``strategy``.

        The test passes a case by returning and fails it by raising.
        Raising Rejection (see assume()) discards the case.
        Counters start from zero on every call, so one runner can check
        several properties in turn; the entropy source keeps advancing.

        Raises:
            PropertyFailure: With the minimal failing value, chained to the
                exception the test raised for it.
            TooManyRejections: If more than ``config.max_global_rejects``
                draws or cases were rejected.
        """
        log = logger.bind(seed=self._source.seed, strategy=repr(strategy))
        log_case = log.info if self._config.verbose else log.debug
        self._successes = 0
        self._global_rejects = 0
        case_index = 0

        while self._successes < self._config.cases:
            try:
                tree = strategy.new_tree(self._source)
            except Rejection as e:
                self._reject(e.reason)
                continue

            value = tree.current()
            outcome = self._evaluate(test, value)
            if outcome is None:
                self._successes += 1
                log_case("case_passed", case=case_index, value=repr(value))
            elif isinstance(outcome, Rejection):
                self._reject(outcome.reason)
            else:
                log.info("case_failed", case=case_index, value=repr(value), error=repr(outcome))
                minimal, error, steps = self._shrink(tree, test, value, outcome)
                log.info("shrink_finished", case=case_index, minimal=repr(minimal), shrink_steps=steps)
                raise PropertyFailure(
                    f"Test failed: {error}",
                    minimal=minimal,
                    original=value,
                    shrink_steps=steps,
                    case_index=case_index,
                ) from error
            case_index += 1

        log.debug("property_passed", cases=self._successes, rejects=self._global_rejects)

    def _shrink[T](
        self,
        tree: ValueTree[T],
        test: Callable[[T], object],
        value: T,
        error: Exception,
    ) -> tuple[T, Exception, int]:
        """Search for a smaller failing value.

        Returns:
            (minimal failing value, exception it raised, iterations used)
        """
        minimal, last_error = value, error
        iterations = 0
        if self._config.max_shrink_iters == 0 or not tree.simplify():
            return minimal, last_error, iterations

        while iterations < self._config.max_shrink_iters:
            iterations += 1
            candidate = tree.current()
            outcome = self._evaluate(test, candidate)
            if outcome is None or isinstance(outcome, Rejection):
                if not tree.complicate():
                    break
            else:
                minimal, last_error = candidate, outcome
                if not tree.simplify():
                    break

        return minimal, last_error, iterations

    def __repr__(self) -> str:
        return f"TestRunner(seed={self._source.seed:#x}, successes={self._successes}, rejects={self._global_rejects})"


def run_property[T](
    strategy: Strategy[T],
    test: Callable[[T], Any],
    config: RunnerConfig | None = None,
) -> None:
    """Run ``test`` against ``strategy`` with a fresh runner."""
    TestRunner(config).run(strategy, test)
