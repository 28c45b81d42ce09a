"""Precision-driven integration entry point.

Validates the inputs, sizes the partition from the derivative bound and
evaluates the right-endpoint rectangle rule::

    >>> import math
    >>> from rectquad import Interval, compute_integral
    >>> estimate, n = compute_integral(Interval(0.0, 1.0), 1e-3, math.exp, math.exp)

Requests that would need more than ``max_steps`` partitions are evaluated
with ``max_steps`` partitions and no warning, so the precision target is not
met in that case.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from rectquad.core.partition import EstimatorSettings, PartitionEstimator
from rectquad.core.problem import IntegrationProblem, Interval, RealFunction
from rectquad.core.quadrature import right_rectangle_sum
from rectquad.core.validation import validate_problem
from rectquad.errors import InvalidArgumentError
from rectquad.numerics.optimization import Maximizer, brent_maximize

logger = logging.getLogger(__name__)


class IntegrationResult(NamedTuple):
    """Integral estimate and the partition count used to compute it."""

    estimate: float
    partitions: int


def integrate(
    problem: IntegrationProblem,
    *,
    settings: EstimatorSettings | None = None,
    maximizer: Maximizer = brent_maximize,
) -> IntegrationResult:
    """Integrate ``problem.function`` to within ``problem.precision``.

    Args:
        problem: The interval, precision, function and derivative.
        settings: Peak search tolerances and partition ceiling.
        maximizer: Bounded maximizer used to find max |f'|.

    Returns:
        IntegrationResult(estimate, partitions).

    Raises:
        MissingInputError: If any input is absent. Raised before the function
            or derivative is evaluated.
        InvalidArgumentError: If an input is malformed or the partition count
            falls outside [1, max_steps].
    """
    validate_problem(problem)

    estimator = PartitionEstimator(settings, maximizer)
    partitions = estimator.estimate(problem.interval, problem.precision, problem.derivative)

    if not 1 <= partitions <= estimator.settings.max_steps:
        raise InvalidArgumentError(
            f"partition count {partitions} outside [1, {estimator.settings.max_steps}]"
        )

    estimate = right_rectangle_sum(problem.function, problem.interval, partitions)
    logger.info("Integrated over [%g, %g] with %d partitions: %.17g",
                problem.interval.lo, problem.interval.hi, partitions, estimate)
    return IntegrationResult(estimate=estimate, partitions=partitions)


def compute_integral(
    interval: Interval | None,
    precision: float | None,
    function: RealFunction | None,
    derivative: RealFunction | None,
    *,
    settings: EstimatorSettings | None = None,
    maximizer: Maximizer = brent_maximize,
) -> IntegrationResult:
    """Integrate ``function`` over ``interval`` to within ``precision``.

    Convenience wrapper around :func:`integrate` taking the four inputs
    directly.
    """
    problem = IntegrationProblem(
        interval=interval, precision=precision, function=function, derivative=derivative
    )
    return integrate(problem, settings=settings, maximizer=maximizer)
