"""Compare a rectangle-rule estimate against a reference integral."""

from __future__ import annotations

from dataclasses import dataclass

from rectquad.core.partition import EstimatorSettings
from rectquad.core.problem import IntegrationProblem
from rectquad.integrator import integrate
from rectquad.numerics.integration import integrate_reference


@dataclass(frozen=True)
class ReferenceComparison:
    """An estimate next to an independently computed reference value.

    Attributes:
        estimate: Rectangle-rule estimate.
        partitions: Partition count used for the estimate.
        reference: Adaptive Simpson value for the same integral.
        difference: ``estimate - reference``.
    """

    estimate: float
    partitions: int
    reference: float
    difference: float

    @property
    def abs_error(self) -> float:
        return abs(self.difference)


def compare_with_reference(
    problem: IntegrationProblem,
    *,
    settings: EstimatorSettings | None = None,
    reference_tol: float = 1e-10,
) -> ReferenceComparison:
    """Integrate ``problem`` and measure the result against adaptive Simpson.

    The problem is validated by :func:`rectquad.integrate` before the
    reference integral is computed.
    """
    result = integrate(problem, settings=settings)
    reference = integrate_reference(
        problem.function, problem.interval.lo, problem.interval.hi, tol=reference_tol
    )
    return ReferenceComparison(
        estimate=result.estimate,
        partitions=result.partitions,
        reference=reference.value,
        difference=result.estimate - reference.value,
    )
