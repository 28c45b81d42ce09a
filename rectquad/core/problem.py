"""Typed inputs for one integration run."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from rectquad.errors import InvalidArgumentError

RealFunction = Callable[[float], float]


@dataclass(frozen=True)
class Interval:
    """Closed integration domain [lo, hi] with lo < hi.

    Raises:
        InvalidArgumentError: If a bound is not finite or lo >= hi.
    """

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise InvalidArgumentError(
                f"Interval bounds must be finite, got lo={self.lo}, hi={self.hi}"
            )
        if not self.lo < self.hi:
            raise InvalidArgumentError(
                f"Interval requires lo < hi, got lo={self.lo}, hi={self.hi}"
            )

    @property
    def width(self) -> float:
        return self.hi - self.lo


@dataclass(frozen=True)
class IntegrationProblem:
    """The four inputs of a run.

    Any field may be None while the problem is being assembled (for example
    from partially supplied command-line flags); validation reports which
    ones are absent before anything is evaluated.

    Attributes:
        interval: Integration domain.
        precision: Maximum acceptable absolute error of the estimate.
        function: The integrand.
        derivative: First derivative of the integrand, supplied by the caller.
    """

    interval: Interval | None = None
    precision: float | None = None
    function: RealFunction | None = None
    derivative: RealFunction | None = None
