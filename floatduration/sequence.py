"""Evenly spaced iteration over a span of durations."""

from collections.abc import Iterator
from itertools import repeat

from typing_extensions import override

from floatduration.duration import FloatDuration


class Subdivide(Iterator[FloatDuration]):
    """An iterator over an evenly spaced lattice of durations.

    Returned by `subdivide` and not meant to be instantiated directly.
    Elements can be taken from either end: `__next__` advances the front and
    `next_back` retreats the back, and both share one remaining count, so
    together they visit every element exactly once.

    A single instance is one traversal. ``copy.copy`` of an instance gives an
    independent traversal at the same position.
    """

    def __init__(self, start: FloatDuration, end: FloatDuration, steps: int):
        if steps < 2:
            raise ValueError(
                f"subdivide() requires at least two steps, got {steps}.\n"
                f"Both endpoints are always visited, so steps=2 yields "
                f"[start, end]"
            )
        self._start: FloatDuration = start
        self._end: FloatDuration = end
        self._last: int = steps - 1
        self._step_size: FloatDuration = (end - start) / (steps - 1)
        self._index: int = 0
        self._len: int = steps

    @property
    def step_size(self) -> FloatDuration:
        """The distance between consecutive elements."""
        return self._step_size

    def _at(self, index: int) -> FloatDuration:
        # The final point is the endpoint itself, not start + step * (steps - 1).
        if index == self._last:
            return self._end
        return self._start + self._step_size * index

    @override
    def __next__(self) -> FloatDuration:
        if self._index >= self._len:
            raise StopIteration
        index = self._index
        self._index += 1
        return self._at(index)

    def next_back(self) -> FloatDuration:
        """Take the last remaining element.

        Raises:
            StopIteration: If the front and back have met.
        """
        if self._index >= self._len:
            raise StopIteration
        self._len -= 1
        return self._at(self._len)

    def __len__(self) -> int:
        return self._len - self._index

    def __length_hint__(self) -> int:
        return len(self)

    def __reversed__(self) -> Iterator[FloatDuration]:
        """Iterate from the back, consuming this same traversal."""
        while True:
            try:
                yield self.next_back()
            except StopIteration:
                return

    @override
    def __repr__(self) -> str:
        return (
            f"Subdivide(start={self._start!r}, step_size={self._step_size!r}, "
            f"remaining={len(self)})"
        )


def subdivide(begin: FloatDuration, end: FloatDuration, steps: int) -> Subdivide:
    """Split the distance between two durations into ``steps`` evenly spaced points.

    The returned iterator lazily yields exactly ``steps`` points. It is
    inclusive: ``begin`` is the first element and ``end`` the last. It can be
    reversed or consumed from both sides.

    Raises:
        ValueError: If ``steps < 2``, which could not visit both endpoints.

    Example:
        >>> points = subdivide(FloatDuration.zero(), FloatDuration.minutes(1.0), 3)
        >>> [p.as_seconds() for p in points]
        [0.0, 30.0, 60.0]
        >>> total = sum(0.5 * t.as_seconds() ** 2 for t in
        ...             subdivide(FloatDuration.zero(), FloatDuration.minutes(10.0), 100))
    """
    return Subdivide(begin, end, steps)


def subdivide_with_step(
    begin: FloatDuration, end: FloatDuration, steps: int
) -> Iterator[tuple[FloatDuration, FloatDuration]]:
    """Like `subdivide`, but pair each point with the step size.

    A convenience for running a simulation over discrete time steps:

        >>> x, v = 5.0, 0.0
        >>> for t, dt in subdivide_with_step(
        ...     FloatDuration.zero(), FloatDuration.hours(1.0), 100
        ... ):
        ...     a = x * x - v * x
        ...     v = a * dt.as_seconds()
        ...     x = v * dt.as_seconds()

    Exactly equivalent to ``zip(sub, itertools.repeat(sub.step_size))``.
    """
    sub = subdivide(begin, end, steps)
    return zip(sub, repeat(sub.step_size))
