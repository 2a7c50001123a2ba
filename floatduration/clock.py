"""Fixed-width durations and clock instants.

Provides the two instant kinds floatduration can measure between:
- MonotonicInstant: wraps time.monotonic_ns(); immune to system clock
  changes, so elapsed time can never be negative
- WallClockInstant: wraps time.time_ns(); can move backwards, so elapsed
  time raises ClockOrderingError instead of going negative

Both report elapsed time as a MonotonicDuration, an always non-negative
(seconds, nanoseconds) pair with an unsigned 64-bit seconds field.
"""

import logging
import time
from dataclasses import dataclass

from floatduration.errors import ClockOrderingError
from floatduration.util import MAX_MONOTONIC_SECONDS, NANOS_PER_SEC_INT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class MonotonicDuration:
    """A non-negative span of time with nanosecond resolution.

    Attributes:
        seconds: Whole seconds, in ``[0, 2**64 - 1]``
        nanoseconds: Sub-second part, in ``[0, 10**9)``
    """

    seconds: int
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= MAX_MONOTONIC_SECONDS:
            raise ValueError(
                f"MonotonicDuration seconds must be in [0, {MAX_MONOTONIC_SECONDS}], "
                f"got {self.seconds}"
            )
        if not 0 <= self.nanoseconds < NANOS_PER_SEC_INT:
            raise ValueError(
                f"MonotonicDuration nanoseconds must be in [0, {NANOS_PER_SEC_INT}), "
                f"got {self.nanoseconds}"
            )

    @classmethod
    def from_nanoseconds(cls, total: int) -> "MonotonicDuration":
        seconds, nanos = divmod(total, NANOS_PER_SEC_INT)
        return cls(seconds, nanos)

    def total_nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SEC_INT + self.nanoseconds


@dataclass(frozen=True, order=True)
class MonotonicInstant:
    """A reading of the monotonic clock, in nanoseconds from an arbitrary epoch.

    Only differences between two readings are meaningful.
    """

    nanoseconds: int

    @classmethod
    def now(cls) -> "MonotonicInstant":
        return cls(time.monotonic_ns())

    def duration_since(self, earlier: "MonotonicInstant") -> MonotonicDuration:
        """Time elapsed from ``earlier`` to this instant, saturating at zero."""
        return MonotonicDuration.from_nanoseconds(
            max(self.nanoseconds - earlier.nanoseconds, 0)
        )

    def elapsed(self) -> MonotonicDuration:
        return MonotonicInstant.now().duration_since(self)


@dataclass(frozen=True, order=True)
class WallClockInstant:
    """A reading of the system clock, in nanoseconds since the Unix epoch."""

    nanoseconds: int

    @classmethod
    def now(cls) -> "WallClockInstant":
        return cls(time.time_ns())

    def duration_since(self, earlier: "WallClockInstant") -> MonotonicDuration:
        """Time elapsed from ``earlier`` to this instant.

        Raises:
            ClockOrderingError: If ``earlier`` is actually after this instant.
        """
        delta = self.nanoseconds - earlier.nanoseconds
        if delta < 0:
            gap = MonotonicDuration.from_nanoseconds(-delta)
            logger.debug(
                "Wall clock went backwards: %r is %d ns after %r",
                earlier,
                -delta,
                self,
            )
            raise ClockOrderingError(earlier, self, gap)
        return MonotonicDuration.from_nanoseconds(delta)

    def elapsed(self) -> MonotonicDuration:
        return WallClockInstant.now().duration_since(self)
