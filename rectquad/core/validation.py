"""Pre-flight checks run before any evaluation."""

from __future__ import annotations

import math

from rectquad.core.problem import IntegrationProblem
from rectquad.errors import InvalidArgumentError, MissingInputError

REQUIRED_INPUTS = ("interval", "precision", "function", "derivative")


def validate_problem(problem: IntegrationProblem) -> None:
    """Check that every input is present and well formed.

    Never calls the function or the derivative.

    Raises:
        MissingInputError: If any of interval, precision, function or
            derivative is absent. All absent names are reported at once.
        InvalidArgumentError: If precision is not a positive finite number,
            or function/derivative is not callable.
    """
    missing = [name for name in REQUIRED_INPUTS if getattr(problem, name) is None]
    if missing:
        raise MissingInputError(missing)

    precision = problem.precision
    if (
        isinstance(precision, bool)
        or not isinstance(precision, (int, float))
        or not (math.isfinite(precision) and precision > 0)
    ):
        raise InvalidArgumentError(
            f"precision must be a positive finite number, got {precision!r}"
        )
    for name in ("function", "derivative"):
        if not callable(getattr(problem, name)):
            raise InvalidArgumentError(f"{name} must be callable")
