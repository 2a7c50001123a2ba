from .clock import MonotonicDuration, MonotonicInstant, WallClockInstant
from .convert import (
    TimePoint,
    float_duration_since,
    from_duration,
    from_monotonic,
    from_relativedelta,
    from_timedelta,
    into_duration,
    to_monotonic,
    to_relativedelta,
    to_timedelta,
)
from .decomposed import DecomposedTime, decompose
from .duration import FloatDuration, sum_durations
from .errors import ClockOrderingError, FloatDurationError, OutOfRangeError
from .sequence import Subdivide, subdivide, subdivide_with_step
from .util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    SECS_PER_YEAR,
)

__all__ = [
    "FloatDuration",
    "sum_durations",
    "DecomposedTime",
    "decompose",
    "MonotonicDuration",
    "MonotonicInstant",
    "WallClockInstant",
    "TimePoint",
    "float_duration_since",
    "from_duration",
    "into_duration",
    "to_monotonic",
    "from_monotonic",
    "to_timedelta",
    "from_timedelta",
    "to_relativedelta",
    "from_relativedelta",
    "Subdivide",
    "subdivide",
    "subdivide_with_step",
    "FloatDurationError",
    "OutOfRangeError",
    "ClockOrderingError",
    "NANOS_PER_SEC",
    "MICROS_PER_SEC",
    "MILLIS_PER_SEC",
    "SECS_PER_MINUTE",
    "SECS_PER_HOUR",
    "SECS_PER_DAY",
    "SECS_PER_YEAR",
]
