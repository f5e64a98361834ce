# src/proptree/errors.py
"""Error types shared by strategies, value trees and the runner.

Two failure kinds never mix:

- Rejection is a control flow signal. A strategy (or a test via assume())
  could not use the current draw; the driver discards it and draws again.
  It is never reported as a test failure.
- Everything else is either a genuine property failure (PropertyFailure,
  raised by the runner after shrinking) or a programmer error that must
  propagate untouched (ShrinkInvariantError, or whatever a map function
  raised).
"""

from __future__ import annotations

from typing import Any


class Rejection(Exception):
    """Raised when a draw cannot produce an acceptable value.

    This is NOT an error condition - the driver treats it as
    "discard this attempt and draw again".

    Attributes:
        reason: Human-readable explanation of why the draw was rejected.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ShrinkInvariantError(RuntimeError):
    """Raised when a value tree breaks the simplify/complicate contract.

    Example: a filtered tree whose source cannot be complicated back into
    a value accepted by the filter. The source tree is buggy; retrying
    would hide the defect.
    """


class TooManyRejections(Exception):
    """Raised by the runner when the global rejection budget is exhausted.

    Attributes:
        rejections: Number of rejections counted before giving up.
        last_reason: Reason attached to the final rejection.
    """

    def __init__(self, rejections: int, last_reason: str) -> None:
        self.rejections = rejections
        self.last_reason = last_reason
        super().__init__(f"Too many global rejects ({rejections}); last reason: {last_reason}")


class PropertyFailure(AssertionError):
    """Report of a failing property, after shrinking.

    The exception that made the minimal case fail is chained as __cause__.

    Attributes:
        minimal: Smallest failing value found by the shrink search.
        original: Value of the first failing draw, before shrinking.
        shrink_steps: Number of shrink iterations performed.
        case_index: Zero-based index of the case that first failed.
    """

    def __init__(
        self,
        message: str,
        *,
        minimal: Any,
        original: Any,
        shrink_steps: int,
        case_index: int,
    ) -> None:
        self.message = message
        self.minimal = minimal
        self.original = original
        self.shrink_steps = shrink_steps
        self.case_index = case_index
        super().__init__(
            f"{message}\n"
            f"minimal failing input: {minimal!r}\n"
            f"original failing input: {original!r} "
            f"(case {case_index}, {shrink_steps} shrink steps)"
        )
