# tests/unit/runner/test_runner.py
"""Tests for the TestRunner driver loop and shrinking."""

from __future__ import annotations

import json

import pytest

from proptree.core.logging import configure_logging
from proptree.entropy import EntropySource
from proptree.errors import PropertyFailure, Rejection, TooManyRejections
from proptree.runner.config import RunnerConfig
from proptree.runner.runner import TestRunner, run_property
from proptree.runner.sugar import assume
from proptree.strategy.array import ArrayStrategy
from proptree.strategy.numeric import any_bool, int_range

# =============================================================================
# Passing properties
# =============================================================================


class TestPassingProperty:
    """A property that never raises counts config.cases successes."""

    def test_counts_successes(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(cases=50))
        seen: list[int] = []

        runner.run(int_range(0, 100), seen.append)

        assert runner.successes == 50
        assert len(seen) == 50
        assert runner.global_rejects == 0

    def test_seed_from_config(self) -> None:
        runner = TestRunner(RunnerConfig(seed=1234))
        assert runner.source.seed == 1234

    def test_explicit_source_wins(self) -> None:
        source = EntropySource(seed=7)
        runner = TestRunner(RunnerConfig(seed=1234), source=source)
        assert runner.source is source

    def test_same_seed_same_values(self) -> None:
        first: list[int] = []
        second: list[int] = []
        TestRunner(RunnerConfig(cases=20, seed=5)).run(int_range(0, 10**9), first.append)
        TestRunner(RunnerConfig(cases=20, seed=5)).run(int_range(0, 10**9), second.append)
        assert first == second

    def test_run_property_helper(self) -> None:
        run_property(any_bool(), lambda b: None, RunnerConfig(cases=5))

    def test_not_collected_by_pytest(self) -> None:
        assert TestRunner.__test__ is False

    def test_reused_runner_checks_second_property(self) -> None:
        """A runner that already finished one property still tests the next."""
        runner = TestRunner.deterministic(RunnerConfig(cases=10))
        runner.run(int_range(0, 100), lambda n: None)
        assert runner.successes == 10

        with pytest.raises(PropertyFailure):
            runner.run(int_range(0, 1000), _below_37)

    def test_counters_reset_between_runs(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(cases=5, max_global_rejects=7))
        calls = 0

        def every_other(n: int) -> None:
            nonlocal calls
            calls += 1
            assume(calls % 2 == 0, "odd call")

        runner.run(int_range(0, 10), every_other)
        assert runner.global_rejects == 5

        runner.run(int_range(0, 10), every_other)
        assert runner.successes == 5
        assert runner.global_rejects == 5


# =============================================================================
# Failing properties
# =============================================================================


def _below_37(n: int) -> None:
    assert n < 37, f"{n} is too big"


class TestFailingProperty:
    """Failures are shrunk and reported as PropertyFailure."""

    def test_shrinks_to_boundary(self) -> None:
        runner = TestRunner.deterministic()

        with pytest.raises(PropertyFailure) as exc_info:
            runner.run(int_range(0, 1000), _below_37)

        failure = exc_info.value
        assert failure.minimal == 37
        assert failure.original >= 37
        assert failure.shrink_steps > 0
        assert isinstance(failure.__cause__, AssertionError)
        assert "37 is too big" in str(failure.__cause__)
        assert "minimal failing input: 37" in str(failure)

    def test_shrinking_disabled(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(max_shrink_iters=0))

        with pytest.raises(PropertyFailure) as exc_info:
            runner.run(int_range(0, 1000), _below_37)

        assert exc_info.value.minimal == exc_info.value.original
        assert exc_info.value.shrink_steps == 0

    def test_shrink_budget_respected(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(max_shrink_iters=2))

        with pytest.raises(PropertyFailure) as exc_info:
            runner.run(int_range(0, 10**6), _below_37)

        assert exc_info.value.shrink_steps <= 2

    def test_pair_shrinks_to_local_minimum(self) -> None:
        def product_small(pair: tuple[int, int]) -> None:
            a, b = pair
            assert a * b <= 9

        runner = TestRunner.deterministic()
        with pytest.raises(PropertyFailure) as exc_info:
            runner.run(ArrayStrategy([int_range(0, 32), int_range(0, 32)]), product_small)

        a, b = exc_info.value.minimal
        assert a * b > 9
        assert (a - 1) * b <= 9
        assert a * (b - 1) <= 9

    def test_non_assertion_errors_fail_too(self) -> None:
        def explode(n: int) -> None:
            if n > 500:
                raise KeyError(n)

        with pytest.raises(PropertyFailure) as exc_info:
            TestRunner.deterministic().run(int_range(0, 1000), explode)

        assert exc_info.value.minimal == 501
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_case_index_reported(self) -> None:
        calls = 0

        def fail_on_third(n: int) -> None:
            nonlocal calls
            calls += 1
            if calls == 3:
                raise AssertionError("third")

        with pytest.raises(PropertyFailure) as exc_info:
            TestRunner.deterministic().run(int_range(0, 10), fail_on_third)

        assert exc_info.value.case_index == 2


# =============================================================================
# Rejections
# =============================================================================


class TestRejections:
    """Rejected draws and assume() failures are discarded, up to a budget."""

    def test_assume_discards_cases(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(cases=30))
        seen: list[int] = []

        def even_only(n: int) -> None:
            assume(n % 2 == 0)
            seen.append(n)

        runner.run(int_range(0, 1000), even_only)

        assert runner.successes == 30
        assert runner.global_rejects > 0
        assert all(n % 2 == 0 for n in seen)

    def test_too_many_assume_failures(self) -> None:
        runner = TestRunner.deterministic(RunnerConfig(max_global_rejects=10))

        with pytest.raises(TooManyRejections) as exc_info:
            runner.run(int_range(0, 10), lambda n: assume(False, "never"))

        assert exc_info.value.rejections == 11
        assert exc_info.value.last_reason == "never"

    def test_strategy_rejections_count(self) -> None:
        strategy = int_range(0, 10).filter(lambda n: False, "nothing passes", max_attempts=1)
        runner = TestRunner.deterministic(RunnerConfig(max_global_rejects=3))

        with pytest.raises(TooManyRejections, match="nothing passes"):
            runner.run(strategy, lambda n: None)

        assert runner.global_rejects == 4

    def test_rejection_during_shrink_treated_as_pass(self) -> None:
        def odd_big_fails(n: int) -> None:
            if n % 2 == 0:
                raise Rejection("even")
            assert n < 100

        with pytest.raises(PropertyFailure) as exc_info:
            TestRunner.deterministic().run(int_range(0, 1000), odd_big_fails)

        minimal = exc_info.value.minimal
        assert minimal % 2 == 1
        assert minimal >= 100


# =============================================================================
# Logging
# =============================================================================


@pytest.mark.usefixtures("reset_logging")
class TestRunnerLogging:
    """Runner events go through structlog."""

    def test_failure_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        with pytest.raises(PropertyFailure):
            TestRunner.deterministic().run(int_range(0, 1000), _below_37)

        events = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        names = [event["event"] for event in events]
        assert "case_failed" in names
        assert "shrink_finished" in names
        finished = next(event for event in events if event["event"] == "shrink_finished")
        assert finished["minimal"] == "37"

    def test_verbose_logs_passing_cases(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        TestRunner.deterministic(RunnerConfig(cases=3, verbose=True)).run(int_range(0, 10), lambda n: None)

        events = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        assert [event["event"] for event in events].count("case_passed") == 3

    def test_quiet_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="INFO")

        TestRunner.deterministic(RunnerConfig(cases=3)).run(int_range(0, 10), lambda n: None)

        assert "case_passed" not in capsys.readouterr().out
