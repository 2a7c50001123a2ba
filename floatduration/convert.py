"""Bridges between FloatDuration and external duration representations.

Conversions *to* bounded representations raise OutOfRangeError; conversions
*from* them always succeed (possibly with a documented precision loss):

- MonotonicDuration: non-negative, whole seconds up to 2**64 - 1 plus
  nanoseconds
- datetime.timedelta: signed, microsecond resolution, at most 999999999 days
- dateutil relativedelta: signed; only its fixed-length fields are accepted

Also provides float_duration_since(), which measures the elapsed time between
two instants of the same kind with one implementation per instant kind.
"""

import logging
import math
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

from dateutil.relativedelta import relativedelta

from floatduration.clock import MonotonicDuration, MonotonicInstant, WallClockInstant
from floatduration.duration import FloatDuration
from floatduration.errors import OutOfRangeError
from floatduration.util import (
    MAX_EXACT_FLOAT_INT,
    MAX_MONOTONIC_SECONDS,
    NANOS_PER_SEC,
    NANOS_PER_SEC_INT,
)

logger = logging.getLogger(__name__)

_ONE_MICROSECOND = timedelta(microseconds=1)

# Arbitrary day used to turn wall times into subtractable datetimes
_TIME_ANCHOR = date(2000, 1, 1)

# relativedelta fields whose length depends on the calendar
_CALENDAR_FIELDS = ("years", "months", "leapdays")
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def _out_of_range(duration: FloatDuration, target: str, reason: str) -> OutOfRangeError:
    logger.debug("Rejected conversion of %r to %s: %s", duration, target, reason)
    return OutOfRangeError(
        f"Cannot convert {duration!r} to {target}: {reason}.\n"
        f"Hint: check the value with is_negative() or compare against "
        f"FloatDuration.seconds({MAX_MONOTONIC_SECONDS}) before converting"
    )


def to_monotonic(duration: FloatDuration) -> MonotonicDuration:
    """Convert to a MonotonicDuration.

    Whole seconds are truncated; the fractional part is rounded to the
    nearest nanosecond, carrying into the seconds if it rounds up to a full
    second.

    Raises:
        OutOfRangeError: If the duration is NaN, negative, or its whole
            seconds exceed ``2**64 - 1`` (this includes infinity).
    """
    secs = duration.secs
    if math.isnan(secs):
        raise _out_of_range(duration, "MonotonicDuration", "value is NaN")
    if secs < 0:
        raise _out_of_range(duration, "MonotonicDuration", "value is negative")
    if math.isinf(secs):
        raise _out_of_range(duration, "MonotonicDuration", "value is infinite")

    fraction, whole = math.modf(secs)
    seconds = int(whole)
    nanos = round(fraction * NANOS_PER_SEC)
    if nanos >= NANOS_PER_SEC_INT:
        seconds += 1
        nanos -= NANOS_PER_SEC_INT

    if seconds > MAX_MONOTONIC_SECONDS:
        raise _out_of_range(
            duration, "MonotonicDuration", "whole seconds exceed an unsigned 64-bit count"
        )
    return MonotonicDuration(seconds, nanos)


def from_monotonic(duration: MonotonicDuration) -> FloatDuration:
    """Convert from a MonotonicDuration. Never fails.

    Precision is limited by the float mantissa for very large inputs.
    """
    return FloatDuration.seconds(duration.seconds + duration.nanoseconds / NANOS_PER_SEC)


def to_timedelta(duration: FloatDuration) -> timedelta:
    """Convert to a ``datetime.timedelta``.

    The magnitude goes through to_monotonic() and the sign is reapplied
    afterwards. Nanoseconds are rounded to timedelta's microsecond resolution.

    Raises:
        OutOfRangeError: If to_monotonic() fails on the magnitude or the
            magnitude exceeds ``timedelta.max``.
    """
    negative = duration.is_negative()
    magnitude = to_monotonic(duration.abs())
    try:
        result = timedelta(
            seconds=magnitude.seconds, microseconds=magnitude.nanoseconds / 1000
        )
    except OverflowError as exc:
        raise _out_of_range(duration, "timedelta", str(exc)) from exc
    return -result if negative else result


def from_timedelta(duration: timedelta) -> FloatDuration:
    """Convert from a ``datetime.timedelta``.

    The exact microsecond count is used when a float can hold it. Beyond
    ``2**53`` microseconds (roughly 285 years) the float cannot resolve single
    microseconds, so the duration is rebuilt from its whole milliseconds
    (truncated toward zero) instead.
    """
    micros = duration // _ONE_MICROSECOND
    if abs(micros) <= MAX_EXACT_FLOAT_INT:
        return FloatDuration.microseconds(micros)

    millis = abs(micros) // 1000
    logger.debug(
        "timedelta %r exceeds exact microsecond range; using millisecond precision",
        duration,
    )
    return FloatDuration.milliseconds(-millis if micros < 0 else millis)


def to_relativedelta(duration: FloatDuration) -> relativedelta:
    """Convert to a normalized relativedelta with a single consistent sign.

    Raises:
        OutOfRangeError: Under the same conditions as to_timedelta().
    """
    delta = to_timedelta(duration)
    negative = delta < timedelta(0)
    magnitude = abs(delta)
    result = relativedelta(
        days=magnitude.days,
        seconds=magnitude.seconds,
        microseconds=magnitude.microseconds,
    )
    return -result if negative else result


def from_relativedelta(duration: relativedelta) -> FloatDuration:
    """Convert from a relativedelta that only uses fixed-length fields.

    Raises:
        OutOfRangeError: If the relativedelta has years, months, leap days or
            any absolute field, none of which have a fixed length in seconds.
    """
    calendar = [name for name in _CALENDAR_FIELDS if getattr(duration, name)]
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(duration, name) is not None]
    if calendar or absolute:
        fields = ", ".join(calendar + absolute)
        logger.debug("Rejected relativedelta %r with calendar fields: %s", duration, fields)
        raise OutOfRangeError(
            f"relativedelta fields have no fixed length: {fields}.\n"
            f"Hint: only weeks, days, hours, minutes, seconds and microseconds "
            f"can be converted; one year is not assumed to be 365 days here"
        )

    try:
        delta = timedelta(
            days=duration.days,
            hours=duration.hours,
            minutes=duration.minutes,
            seconds=duration.seconds,
            microseconds=duration.microseconds,
        )
    except OverflowError as exc:
        raise OutOfRangeError(
            f"relativedelta {duration!r} exceeds the timedelta range: {exc}"
        ) from exc
    return from_timedelta(delta)


@singledispatch
def from_duration(value: Any) -> FloatDuration:
    """Build a FloatDuration from any supported duration representation."""
    raise TypeError(
        f"Cannot build a FloatDuration from {type(value).__name__!r}: {value!r}\n"
        f"Supported: FloatDuration, MonotonicDuration, timedelta, relativedelta"
    )


@from_duration.register
def _(value: FloatDuration) -> FloatDuration:
    return value


from_duration.register(MonotonicDuration, from_monotonic)
from_duration.register(timedelta, from_timedelta)
from_duration.register(relativedelta, from_relativedelta)


def _identity(duration: FloatDuration) -> FloatDuration:
    return duration


_CONVERTERS: dict[type, Callable[[FloatDuration], Any]] = {
    FloatDuration: _identity,
    MonotonicDuration: to_monotonic,
    timedelta: to_timedelta,
    relativedelta: to_relativedelta,
}


def into_duration(duration: FloatDuration, target: type) -> Any:
    """Convert ``duration`` into an instance of ``target``.

    Raises:
        OutOfRangeError: If ``target`` cannot represent the duration.
        TypeError: If ``target`` is not a supported representation.
    """
    converter = _CONVERTERS.get(target)
    if converter is None:
        supported = ", ".join(cls.__name__ for cls in _CONVERTERS)
        raise TypeError(
            f"Cannot convert a FloatDuration into {target!r}.\n"
            f"Supported targets: {supported}"
        )
    return converter(duration)


@runtime_checkable
class TimePoint(Protocol):
    """Anything that can report the elapsed duration since another instant
    of its own kind."""

    def float_duration_since(self, earlier: Any) -> FloatDuration: ...


def _require_same_kind(later: Any, earlier: Any, kind: type) -> None:
    if not isinstance(earlier, kind) or (
        kind is date and isinstance(earlier, datetime)
    ):
        raise TypeError(
            f"Cannot measure elapsed time between {type(later).__name__!r} "
            f"and {type(earlier).__name__!r}.\n"
            f"Hint: both instants must be of the same kind"
        )


@singledispatch
def float_duration_since(later: Any, earlier: Any) -> FloatDuration:
    """The amount of time from ``earlier`` to ``later``.

    Implemented once per instant kind:
    - MonotonicInstant: never fails, saturates at zero
    - WallClockInstant: raises ClockOrderingError if ``earlier`` is later
    - datetime, date, time: signed result, may be negative
    - any TimePoint: delegates to its float_duration_since() method

    Raises:
        TypeError: If the instants are of different or unsupported kinds.
    """
    if isinstance(later, TimePoint):
        return later.float_duration_since(earlier)
    raise TypeError(
        f"{type(later).__name__!r} is not a supported instant.\n"
        f"Supported: MonotonicInstant, WallClockInstant, datetime, date, time, "
        f"or any object with a float_duration_since() method"
    )


@float_duration_since.register
def _(later: MonotonicInstant, earlier: Any) -> FloatDuration:
    _require_same_kind(later, earlier, MonotonicInstant)
    return from_monotonic(later.duration_since(earlier))


@float_duration_since.register
def _(later: WallClockInstant, earlier: Any) -> FloatDuration:
    _require_same_kind(later, earlier, WallClockInstant)
    return from_monotonic(later.duration_since(earlier))


@float_duration_since.register
def _(later: datetime, earlier: Any) -> FloatDuration:
    _require_same_kind(later, earlier, datetime)
    return from_timedelta(later - earlier)


@float_duration_since.register
def _(later: date, earlier: Any) -> FloatDuration:
    _require_same_kind(later, earlier, date)
    return from_timedelta(later - earlier)


@float_duration_since.register
def _(later: time, earlier: Any) -> FloatDuration:
    _require_same_kind(later, earlier, time)
    return from_timedelta(
        datetime.combine(_TIME_ANCHOR, later) - datetime.combine(_TIME_ANCHOR, earlier)
    )
