"""Bounded single-variable maximization.

Provides Brent's method (golden-section search with parabolic interpolation)
for locating the maximum of a function on a closed interval without
derivatives. Used to find the peak of |f'| when sizing a partition.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

GOLDEN_SECTION = 0.5 * (3.0 - math.sqrt(5.0))
MIN_RELATIVE_TOLERANCE = 2 * sys.float_info.epsilon


@dataclass(frozen=True)
class OptimizeResult:
    """Result of a bounded maximization.

    Attributes:
        x: The best point found.
        fun: The function value at ``x``.
        converged: Whether the tolerance test was met within the budget.
        iterations: Number of iterations performed.
        function_calls: Number of function evaluations.
    """

    x: float
    fun: float
    converged: bool
    iterations: int
    function_calls: int


Maximizer = Callable[..., OptimizeResult]
"""Signature: ``(f, lo, hi, rel_tol, abs_tol, max_evals) -> OptimizeResult``."""


def brent_maximize(
    f: Callable[[float], float],
    lo: float,
    hi: float,
    rel_tol: float = 1e-3,
    abs_tol: float = 1e-3,
    max_evals: int = 1000,
) -> OptimizeResult:
    """Maximize f on [lo, hi] using Brent's method.

    The search starts at the midpoint and stops once the bracket around the
    best point is narrower than ``2 * (rel_tol * |x| + abs_tol)``. If the
    evaluation budget runs out first, the best point seen so far is returned
    with ``converged=False`` instead of raising.

    When f has several equal peaks, the one returned depends on the search
    path; the reported value is always f evaluated at the returned point.

    Args:
        f: Function to maximize.
        lo: Lower bound of the search interval.
        hi: Upper bound of the search interval.
        rel_tol: Relative tolerance on the location of the maximum.
        abs_tol: Absolute tolerance on the location of the maximum.
        max_evals: Maximum number of function evaluations.

    Returns:
        OptimizeResult with the maximizing point and its value.

    Raises:
        ValueError: If the interval or tolerances are invalid.
    """
    if not lo < hi:
        raise ValueError(f"lo must be less than hi, got lo={lo}, hi={hi}")
    if rel_tol < MIN_RELATIVE_TOLERANCE:
        raise ValueError(f"rel_tol must be at least {MIN_RELATIVE_TOLERANCE}, got {rel_tol}")
    if abs_tol <= 0:
        raise ValueError(f"abs_tol must be positive, got {abs_tol}")
    if max_evals < 1:
        raise ValueError(f"max_evals must be >= 1, got {max_evals}")

    func_calls = 0

    # Minimize the negated function; x always holds the best point so far.
    def eval_f(x: float) -> float:
        nonlocal func_calls
        func_calls += 1
        return -f(x)

    a = lo
    b = hi
    x = lo + 0.5 * (hi - lo)
    v = w = x
    d = 0.0
    e = 0.0
    fx = eval_f(x)
    fv = fw = fx

    iteration = 0
    while True:
        m = 0.5 * (a + b)
        tol1 = rel_tol * abs(x) + abs_tol
        tol2 = 2.0 * tol1

        if abs(x - m) <= tol2 - 0.5 * (b - a):
            return OptimizeResult(
                x=x, fun=-fx, converged=True, iterations=iteration, function_calls=func_calls
            )

        if func_calls >= max_evals:
            logger.debug(
                "Evaluation budget of %d exhausted; best point x=%g, f(x)=%g",
                max_evals, x, -fx,
            )
            return OptimizeResult(
                x=x, fun=-fx, converged=False, iterations=iteration, function_calls=func_calls
            )

        iteration += 1

        if abs(e) > tol1:
            # Try a parabola through x, v and w
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)

            if q > 0:
                p = -p
            else:
                q = -q

            r = e
            e = d

            if p > q * (a - x) and p < q * (b - x) and abs(p) < abs(0.5 * q * r):
                d = p / q
                u = x + d
                # Keep away from the bracket ends
                if u - a < tol2 or b - u < tol2:
                    d = tol1 if x <= m else -tol1
            else:
                e = (b - x) if x < m else (a - x)
                d = GOLDEN_SECTION * e
        else:
            e = (b - x) if x < m else (a - x)
            d = GOLDEN_SECTION * e

        if abs(d) < tol1:
            u = x + tol1 if d >= 0 else x - tol1
        else:
            u = x + d

        fu = eval_f(u)

        if fu <= fx:
            if u < x:
                b = x
            else:
                a = x
            v, fv = w, fw
            w, fw = x, fx
            x, fx = u, fu
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, fv = w, fw
                w, fw = u, fu
            elif fu <= fv or v == x or v == w:
                v, fv = u, fu
