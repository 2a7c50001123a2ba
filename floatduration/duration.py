"""Floating-point duration type `FloatDuration` and helpers."""

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from functools import reduce
from numbers import Real
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from floatduration.util import (
    DISPLAY_UNITS,
    FALLBACK_UNIT,
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_YEAR,
    format_number,
    ieee_div,
)

if TYPE_CHECKING:
    from dateutil.relativedelta import relativedelta

    from floatduration.clock import MonotonicDuration
    from floatduration.decomposed import DecomposedTime


@dataclass(frozen=True, eq=False)
class FloatDuration:
    """A time duration stored as a floating point quantity.

    Unlike ``datetime.timedelta``, ``FloatDuration`` aims to be convenient and
    fast to use in simulation and mathematical expressions rather than to
    behave like a calendar or to represent time scales perfectly.

    Internally a ``FloatDuration`` stores a single float number of seconds,
    so it is exactly as precise as a float. Infinite and NaN values are
    legal and propagate through arithmetic like any other float.

    Examples:
        >>> FloatDuration.minutes(5.0) + FloatDuration.seconds(30.0)
        FloatDuration(secs=330.0)
        >>> str(FloatDuration.minutes(3.5))
        '3.5 minutes'
        >>> FloatDuration.minutes(10.0) / FloatDuration.seconds(60.0)
        10.0
    """

    secs: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.secs, Real):
            raise TypeError(
                f"FloatDuration requires a real number of seconds.\n"
                f"Got {type(self.secs).__name__!r}: {self.secs!r}\n"
                f"Hint: parse text first, e.g. FloatDuration.seconds(float(text))"
            )
        object.__setattr__(self, "secs", float(self.secs))

    @classmethod
    def years(cls, years: float) -> "FloatDuration":
        """Create a duration of ``years`` 365-day years (no leap years)."""
        return cls(years * SECS_PER_YEAR)

    @classmethod
    def days(cls, days: float) -> "FloatDuration":
        return cls(days * SECS_PER_DAY)

    @classmethod
    def hours(cls, hours: float) -> "FloatDuration":
        return cls(hours * SECS_PER_HOUR)

    @classmethod
    def minutes(cls, mins: float) -> "FloatDuration":
        return cls(mins * SECS_PER_MINUTE)

    @classmethod
    def seconds(cls, secs: float) -> "FloatDuration":
        return cls(secs)

    @classmethod
    def milliseconds(cls, millis: float) -> "FloatDuration":
        return cls(millis / MILLIS_PER_SEC)

    @classmethod
    def microseconds(cls, micros: float) -> "FloatDuration":
        return cls(micros / MICROS_PER_SEC)

    @classmethod
    def nanoseconds(cls, nanos: float) -> "FloatDuration":
        return cls(nanos / NANOS_PER_SEC)

    def as_years(self) -> float:
        """Total fractional 365-day years in this duration."""
        return self.secs / SECS_PER_YEAR

    def as_days(self) -> float:
        return self.secs / SECS_PER_DAY

    def as_hours(self) -> float:
        return self.secs / SECS_PER_HOUR

    def as_minutes(self) -> float:
        return self.secs / SECS_PER_MINUTE

    def as_seconds(self) -> float:
        return self.secs

    def as_milliseconds(self) -> float:
        return self.secs * MILLIS_PER_SEC

    def as_microseconds(self) -> float:
        return self.secs * MICROS_PER_SEC

    def as_nanoseconds(self) -> float:
        return self.secs * NANOS_PER_SEC

    def abs(self) -> "FloatDuration":
        return FloatDuration(abs(self.secs))

    @classmethod
    def zero(cls) -> "FloatDuration":
        return cls(0.0)

    def is_zero(self) -> bool:
        """True if this duration equals zero; ``-0.0`` counts as zero."""
        return self.secs == 0.0

    def is_positive(self) -> bool:
        """True if the sign bit is clear (``+0.0`` is positive)."""
        return math.copysign(1.0, self.secs) > 0

    def is_negative(self) -> bool:
        """True if the sign bit is set (``-0.0`` is negative)."""
        return math.copysign(1.0, self.secs) < 0

    @classmethod
    def min_value(cls) -> "FloatDuration":
        return cls(-sys.float_info.max)

    @classmethod
    def max_value(cls) -> "FloatDuration":
        return cls(sys.float_info.max)

    def is_close(
        self, other: "FloatDuration", *, rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        """Approximate equality on the underlying seconds count."""
        return math.isclose(self.secs, other.secs, rel_tol=rel_tol, abs_tol=abs_tol)

    # Decomposition

    def decompose(self) -> "DecomposedTime":
        """Break this duration into days, hours, minutes, seconds and a fraction.

        Raises:
            OutOfRangeError: If the duration is infinite or NaN.
        """
        from floatduration.decomposed import decompose

        return decompose(self)

    @classmethod
    def from_decomposed(cls, view: "DecomposedTime") -> "FloatDuration":
        """Recombine a decomposed view, applying its sign."""
        return view.to_duration()

    # Conversions. Imported at runtime to avoid a circular dependency.

    def to_monotonic(self) -> "MonotonicDuration":
        from floatduration.convert import to_monotonic

        return to_monotonic(self)

    @classmethod
    def from_monotonic(cls, duration: "MonotonicDuration") -> "FloatDuration":
        from floatduration.convert import from_monotonic

        return from_monotonic(duration)

    def to_timedelta(self) -> timedelta:
        from floatduration.convert import to_timedelta

        return to_timedelta(self)

    @classmethod
    def from_timedelta(cls, duration: timedelta) -> "FloatDuration":
        from floatduration.convert import from_timedelta

        return from_timedelta(duration)

    def to_relativedelta(self) -> "relativedelta":
        from floatduration.convert import to_relativedelta

        return to_relativedelta(self)

    @classmethod
    def from_relativedelta(cls, duration: "relativedelta") -> "FloatDuration":
        from floatduration.convert import from_relativedelta

        return from_relativedelta(duration)

    @classmethod
    def from_duration(cls, value: Any) -> "FloatDuration":
        """Build a FloatDuration from any supported duration representation."""
        from floatduration.convert import from_duration

        return from_duration(value)

    def into_duration(self, target: type) -> Any:
        """Convert into ``target`` (e.g. ``timedelta`` or ``MonotonicDuration``)."""
        from floatduration.convert import into_duration

        return into_duration(self, target)

    # Display

    @override
    def __str__(self) -> str:
        """Summarize using the coarsest unit the value strictly exceeds.

        The comparison is on the signed value, so a duration of exactly one
        day renders in hours and negative durations render in nanoseconds.
        """
        for threshold, unit in DISPLAY_UNITS:
            if self.secs > threshold:
                return f"{format_number(getattr(self, f'as_{unit}')())} {unit}"
        _, unit = FALLBACK_UNIT
        return f"{format_number(self.as_nanoseconds())} {unit}"

    def __float__(self) -> float:
        return self.secs

    # Comparison

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs == other.secs

    @override
    def __ne__(self, other: object) -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs != other.secs

    def __lt__(self, other: "FloatDuration") -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs < other.secs

    def __le__(self, other: "FloatDuration") -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs <= other.secs

    def __gt__(self, other: "FloatDuration") -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs > other.secs

    def __ge__(self, other: "FloatDuration") -> bool:
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return self.secs >= other.secs

    @override
    def __hash__(self) -> int:
        return hash(self.secs)

    # Arithmetic. Augmented assignment falls back to these and rebinds.

    def __neg__(self) -> "FloatDuration":
        return FloatDuration(-self.secs)

    def __pos__(self) -> "FloatDuration":
        return self

    def __abs__(self) -> "FloatDuration":
        return self.abs()

    def __add__(self, other: "FloatDuration") -> "FloatDuration":
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return FloatDuration(self.secs + other.secs)

    def __radd__(self, other: Any) -> "FloatDuration":
        # Lets the builtin sum() start from its integer 0.
        if isinstance(other, Real) and other == 0:
            return FloatDuration(other + self.secs)
        return NotImplemented

    def __sub__(self, other: "FloatDuration") -> "FloatDuration":
        if not isinstance(other, FloatDuration):
            return NotImplemented
        return FloatDuration(self.secs - other.secs)

    def __mul__(self, other: float) -> "FloatDuration":
        if isinstance(other, FloatDuration) or not isinstance(other, Real):
            return NotImplemented
        return FloatDuration(self.secs * float(other))

    def __rmul__(self, other: float) -> "FloatDuration":
        return self.__mul__(other)

    def __truediv__(self, other: "float | FloatDuration") -> Any:
        if isinstance(other, FloatDuration):
            return ieee_div(self.secs, other.secs)
        if isinstance(other, Real):
            return FloatDuration(ieee_div(self.secs, float(other)))
        return NotImplemented


def sum_durations(durations: Iterable[FloatDuration]) -> FloatDuration:
    """Fold durations left-to-right starting from zero.

    An empty iterable sums to ``FloatDuration.zero()``.
    """

    def reducer(acc: FloatDuration, nxt: FloatDuration) -> FloatDuration:
        return acc + nxt

    return reduce(reducer, durations, FloatDuration.zero())
