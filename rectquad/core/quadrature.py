"""Right-endpoint rectangle rule."""

from __future__ import annotations

from rectquad.core.problem import Interval, RealFunction
from rectquad.errors import InvalidArgumentError


def right_rectangle_sum(function: RealFunction, interval: Interval, partitions: int) -> float:
    """Integrate ``function`` over ``interval`` with ``partitions`` right rectangles.

    Evaluates the function at lo + i*dx for i = 1..n, summing in that order,
    and never at lo itself.

    Raises:
        InvalidArgumentError: If partitions < 1.
    """
    if partitions < 1:
        raise InvalidArgumentError(f"partitions must be >= 1, got {partitions}")

    dx = interval.width / partitions
    total = 0.0
    for i in range(1, partitions + 1):
        total += function(interval.lo + i * dx)
    return total * dx
