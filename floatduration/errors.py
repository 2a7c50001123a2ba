"""floatduration exception hierarchy.

All floatduration-specific exceptions inherit from FloatDurationError. Both
concrete errors are also ValueErrors, so callers that already guard
conversions with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from floatduration.clock import MonotonicDuration


class FloatDurationError(Exception):
    """Base exception for all floatduration errors."""

    pass


class OutOfRangeError(FloatDurationError, ValueError):
    """A duration cannot be represented by the requested target type.

    Raised when converting to a fixed-width or bounded representation and the
    value's sign or magnitude falls outside that representation's domain.

    Examples:
        - Converting a negative duration to a MonotonicDuration
        - Converting ``FloatDuration.max_value()`` to a timedelta
        - Decomposing an infinite or NaN duration
    """

    def __init__(self, message: str = "The converted duration value is out of range."):
        super().__init__(message)


class ClockOrderingError(FloatDurationError, ValueError):
    """Elapsed wall-clock time would be negative.

    Raised when asking for the time elapsed since a wall-clock instant that
    is actually later than the reference instant. The system clock is not
    monotonic, so this surfaces the inconsistency instead of clamping.

    Attributes:
        earlier: The instant that was expected to come first.
        later: The instant that was expected to come second.
        gap: How far ``earlier`` is ahead of ``later``.
    """

    def __init__(self, earlier: Any, later: Any, gap: "MonotonicDuration"):
        self.earlier: Any = earlier
        self.later: Any = later
        self.gap: MonotonicDuration = gap
        super().__init__(
            f"Wall-clock instant {earlier!r} is after {later!r} "
            f"by {gap.seconds}s {gap.nanoseconds}ns.\n"
            f"Hint: the system clock moved backwards between readings; "
            f"use MonotonicInstant to measure elapsed time."
        )


__all__ = [
    "FloatDurationError",
    "OutOfRangeError",
    "ClockOrderingError",
]
