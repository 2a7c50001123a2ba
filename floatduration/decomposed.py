"""Calendar-like breakdown of a duration into days, hours, minutes and seconds.

`DecomposedTime` is a more human-readable representation of a
`FloatDuration`. It uses sign-and-magnitude: every field holds a
non-negative magnitude and the direction lives only in ``sign``. Converting
back with `DecomposedTime.to_duration` applies that sign, so a round trip
preserves negative durations too.
"""

import math
from dataclasses import dataclass, replace
from decimal import Decimal

from typing_extensions import override

from floatduration.duration import FloatDuration
from floatduration.errors import OutOfRangeError
from floatduration.util import SECS_PER_DAY, SECS_PER_HOUR, SECS_PER_MINUTE


@dataclass(frozen=True, order=True)
class DecomposedTime:
    days: int
    hours: int
    minutes: int
    seconds: int
    fractional_seconds: float
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"DecomposedTime sign must be 1 or -1, got {self.sign}")
        for name in ("days", "hours", "minutes", "seconds"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(
                    f"DecomposedTime {name} must be non-negative, got {value}.\n"
                    f"Hint: carry the direction in sign=-1 instead"
                )
        if not 0.0 <= self.fractional_seconds < 1.0:
            raise ValueError(
                f"DecomposedTime fractional_seconds must be in [0, 1), "
                f"got {self.fractional_seconds}"
            )

    @classmethod
    def zero(cls) -> "DecomposedTime":
        return cls(0, 0, 0, 0, 0.0)

    @classmethod
    def from_components(
        cls,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        fractional_seconds: float,
    ) -> "DecomposedTime":
        """Build a positive view from its magnitude fields."""
        return cls(days, hours, minutes, seconds, fractional_seconds, sign=1)

    def negate(self) -> "DecomposedTime":
        """Return a copy with only the sign flipped."""
        return replace(self, sign=-self.sign)

    def to_duration(self) -> FloatDuration:
        """Recombine the fields into one duration, applying ``sign``."""
        magnitude = (
            self.days * SECS_PER_DAY
            + self.hours * SECS_PER_HOUR
            + self.minutes * SECS_PER_MINUTE
            + self.seconds
            + self.fractional_seconds
        )
        return FloatDuration(self.sign * magnitude)

    @override
    def __str__(self) -> str:
        """Render as ``[<days>d ][-]HH:MM:SS[.fraction]``.

        The fraction is printed exactly as computed: shortest positional
        decimal, no rounding to a fixed number of digits.
        """
        parts: list[str] = []
        if self.days:
            parts.append(f"{self.days}d ")
        if self.sign < 0:
            parts.append("-")
        parts.append(f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}")
        if self.fractional_seconds > 0.0:
            # Decimal(repr(x)) keeps the shortest digits but never switches
            # to scientific notation when formatted with "f".
            digits = format(Decimal(repr(self.fractional_seconds)), "f")
            parts.append(digits[1:])
        return "".join(parts)


def _split(remainder: float, unit: float) -> tuple[int, float]:
    # Floored divmod keeps the remainder in [0, unit) for non-negative input.
    count, rest = divmod(remainder, unit)
    return int(count), rest


def decompose(duration: FloatDuration) -> DecomposedTime:
    """Decompose ``duration`` into a `DecomposedTime`.

    Works on the absolute value, peeling off days, hours, minutes and whole
    seconds in turn. The sign is -1 for negative durations and +1 for zero
    (including ``-0.0``) and positive ones.

    Raises:
        OutOfRangeError: If ``duration`` is infinite or NaN.
    """
    if not math.isfinite(duration.secs):
        raise OutOfRangeError(
            f"Cannot decompose a non-finite duration ({duration.secs}).\n"
            f"Hint: check FloatDuration.is_zero() or math.isfinite() on the "
            f"divisor before dividing"
        )

    remainder = abs(duration.secs)
    days, remainder = _split(remainder, SECS_PER_DAY)
    hours, remainder = _split(remainder, SECS_PER_HOUR)
    minutes, remainder = _split(remainder, SECS_PER_MINUTE)
    seconds, fractional = _split(remainder, 1.0)

    sign = -1 if duration.secs < 0 else 1
    return DecomposedTime(days, hours, minutes, seconds, fractional, sign)
