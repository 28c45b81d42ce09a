"""Partition count estimation.

The right-endpoint rectangle rule on n equal panels satisfies

    |error| <= M * (hi - lo)^2 / (2n),    M = max |f'(x)| on [lo, hi]

so the smallest n meeting a precision target is taken as
floor(M * (hi - lo)^2 / (2 * precision)), clamped into [1, max_steps].
M is located with a bounded maximizer (Brent's method by default), so it is
only as accurate as the maximizer's tolerances allow.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from rectquad.core.problem import Interval, RealFunction
from rectquad.numerics.optimization import Maximizer, brent_maximize

logger = logging.getLogger(__name__)

MAX_STEPS = 1_000_000


@dataclass(frozen=True)
class EstimatorSettings:
    """Tuning knobs for partition estimation.

    Attributes:
        rel_tol: Relative tolerance of the peak search.
        abs_tol: Absolute tolerance of the peak search.
        max_evals: Evaluation budget of the peak search.
        max_steps: Ceiling on the partition count.
    """

    rel_tol: float = 1e-3
    abs_tol: float = 1e-3
    max_evals: int = 1000
    max_steps: int = MAX_STEPS


@dataclass(frozen=True)
class PartitionEstimate:
    """Details of one partition estimate.

    Attributes:
        partitions: The clamped partition count.
        raw: The unclamped count produced by the error formula (inf when
            the formula overflows).
        peak_point: Where the maximizer found the peak of |f'|.
        peak_value: |f'| at peak_point (the M of the error bound).
        converged: Whether the peak search met its tolerance.
    """

    partitions: int
    raw: float
    peak_point: float
    peak_value: float
    converged: bool


class PartitionEstimator:
    """Turns a precision target into a partition count.

    Args:
        settings: Search tolerances and partition ceiling.
        maximizer: Bounded maximizer called as
            ``maximizer(g, lo, hi, rel_tol, abs_tol, max_evals)``.
    """

    def __init__(
        self,
        settings: EstimatorSettings | None = None,
        maximizer: Maximizer = brent_maximize,
    ):
        self.settings = settings or EstimatorSettings()
        self.maximizer = maximizer

    def analyze(
        self, interval: Interval, precision: float, derivative: RealFunction
    ) -> PartitionEstimate:
        """Estimate the partition count and report how it was derived."""
        settings = self.settings

        def abs_derivative(x: float) -> float:
            return abs(derivative(x))

        peak = self.maximizer(
            abs_derivative,
            interval.lo,
            interval.hi,
            settings.rel_tol,
            settings.abs_tol,
            settings.max_evals,
        )

        factor = interval.width**2 / (2.0 * precision)
        raw = self._floor_count(factor * peak.fun)
        partitions = min(max(raw, 1), settings.max_steps)

        logger.debug(
            "max |f'| = %g at x = %g (converged=%s); raw partitions %g, using %d",
            peak.fun, peak.x, peak.converged, raw, partitions,
        )
        return PartitionEstimate(
            partitions=partitions,
            raw=raw,
            peak_point=peak.x,
            peak_value=peak.fun,
            converged=peak.converged,
        )

    def estimate(self, interval: Interval, precision: float, derivative: RealFunction) -> int:
        """Return the partition count needed to meet ``precision``."""
        return self.analyze(interval, precision, derivative).partitions

    @staticmethod
    def _floor_count(value: float) -> float:
        # NaN counts as 0; inf stays inf so the clamp is visible.
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return value
        return math.floor(value)
