"""JSON representation of durations.

A FloatDuration serializes as a single number, its seconds count, rather
than as an object with fields:

    >>> to_json(FloatDuration.minutes(1.5))
    90.0
    >>> from_json(90)
    FloatDuration(secs=90.0)
    >>> dumps(FloatDuration.hours(1.0))
    '3600.0'

Deserialization accepts any real number and applies no range restriction;
infinite and NaN values travel as the ``Infinity`` / ``NaN`` extensions of
the standard ``json`` module.
"""

import json
from decimal import Decimal
from numbers import Real
from typing import Any

from floatduration.duration import FloatDuration


def to_json(duration: FloatDuration) -> float:
    """Convert a duration to its JSON value (seconds as a float)."""
    return duration.as_seconds()


def from_json(value: Any) -> FloatDuration:
    """Create a duration from a JSON number of seconds.

    Raises:
        TypeError: If ``value`` is not a real number. Booleans are rejected
            even though ``bool`` is an ``int`` subclass.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise TypeError(
            f"A serialized FloatDuration must be a number of seconds.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    return FloatDuration.seconds(float(value))


def dumps(duration: FloatDuration, **kwargs: Any) -> str:
    """Serialize a duration to JSON text."""
    return json.dumps(to_json(duration), **kwargs)


def loads(text: str | bytes) -> FloatDuration:
    """Parse JSON text holding a single number into a duration."""
    return from_json(json.loads(text))
