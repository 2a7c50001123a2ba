"""Utility constants and helpers for floatduration.

Unit ratios are expressed relative to one second. A year is always exactly
365 days; there is no leap-year adjustment anywhere in the package.
"""

import math

# Sub-second units per second
NANOS_PER_SEC = 1.0e9
MICROS_PER_SEC = 1.0e6
MILLIS_PER_SEC = 1.0e3

# Seconds per coarser unit
SECS_PER_MINUTE = 60.0
SECS_PER_HOUR = SECS_PER_MINUTE * 60.0
SECS_PER_DAY = SECS_PER_HOUR * 24.0
SECS_PER_YEAR = SECS_PER_DAY * 365.0

# Largest whole-seconds count a MonotonicDuration can hold (unsigned 64-bit)
MAX_MONOTONIC_SECONDS = 2**64 - 1
NANOS_PER_SEC_INT = 1_000_000_000

# Integer magnitudes above this cannot all be represented exactly by a float
MAX_EXACT_FLOAT_INT = 2**53

# Display thresholds, coarsest first: (unit size in seconds, plural name)
DISPLAY_UNITS: tuple[tuple[float, str], ...] = (
    (SECS_PER_YEAR, "years"),
    (SECS_PER_DAY, "days"),
    (SECS_PER_HOUR, "hours"),
    (SECS_PER_MINUTE, "minutes"),
    (1.0, "seconds"),
    (1.0 / MILLIS_PER_SEC, "milliseconds"),
    (1.0 / MICROS_PER_SEC, "microseconds"),
)
FALLBACK_UNIT = (1.0 / NANOS_PER_SEC, "nanoseconds")


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    ``x / 0.0`` is ``±inf`` following the signs of both operands, and
    ``0.0 / 0.0`` or ``nan / 0.0`` is ``nan``.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def format_number(value: float) -> str:
    """Render a float the way the duration summaries expect.

    Integral values drop the trailing ``.0``; everything else uses the
    shortest round-tripping repr.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)
