"""Reference integration.

Adaptive Simpson's rule with Richardson correction. Produces a high-accuracy
value to compare rectangle-rule estimates against; it carries no precision
guarantee of its own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceIntegral:
    """Result of reference integration.

    Attributes:
        value: The integral value.
        error_estimate: Sum of the per-panel Richardson error estimates.
        evaluations: Number of function evaluations.
    """

    value: float
    error_estimate: float
    evaluations: int


def integrate_reference(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = 1e-10,
    max_depth: int = 50,
    rel_tol: float = 1e-12,
) -> ReferenceIntegral:
    """Integrate f over [a, b] with adaptive Simpson's rule.

    Panels are halved until the Richardson error estimate drops below the
    panel's share of the tolerance or ``max_depth`` is reached. The
    tolerance is ``tol``, raised to ``rel_tol`` times the first Simpson
    estimate when that is larger, so large-magnitude integrands stop at
    floating-point resolution.

    Args:
        f: Function to integrate.
        a: Lower bound.
        b: Upper bound.
        tol: Absolute error tolerance.
        max_depth: Maximum subdivision depth.
        rel_tol: Relative tolerance floor.

    Returns:
        ReferenceIntegral with the value, error estimate and evaluation count.

    Raises:
        ValueError: If tol is not positive, or max_depth or rel_tol is negative.
    """
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    if rel_tol < 0:
        raise ValueError(f"rel_tol must be >= 0, got {rel_tol}")

    if a == b:
        return ReferenceIntegral(value=0.0, error_estimate=0.0, evaluations=0)

    if a > b:
        flipped = integrate_reference(f, b, a, tol, max_depth, rel_tol)
        return ReferenceIntegral(
            value=-flipped.value,
            error_estimate=flipped.error_estimate,
            evaluations=flipped.evaluations,
        )

    evaluations = 0

    def eval_f(x: float) -> float:
        nonlocal evaluations
        evaluations += 1
        return f(x)

    def simpson(fa: float, fm: float, fb: float, width: float) -> float:
        return width / 6.0 * (fa + 4.0 * fm + fb)

    def refine(
        lo: float,
        hi: float,
        f_lo: float,
        f_mid: float,
        f_hi: float,
        whole: float,
        depth: int,
        panel_tol: float,
    ) -> tuple[float, float]:
        mid = 0.5 * (lo + hi)
        f_left = eval_f(0.5 * (lo + mid))
        f_right = eval_f(0.5 * (mid + hi))

        left = simpson(f_lo, f_left, f_mid, mid - lo)
        right = simpson(f_mid, f_right, f_hi, hi - mid)
        correction = (left + right - whole) / 15.0

        if depth >= max_depth or abs(correction) < panel_tol:
            return left + right + correction, abs(correction)

        left_value, left_error = refine(
            lo, mid, f_lo, f_left, f_mid, left, depth + 1, panel_tol / 2.0
        )
        right_value, right_error = refine(
            mid, hi, f_mid, f_right, f_hi, right, depth + 1, panel_tol / 2.0
        )
        return left_value + right_value, left_error + right_error

    fa = eval_f(a)
    fm = eval_f(0.5 * (a + b))
    fb = eval_f(b)

    whole = simpson(fa, fm, fb, b - a)
    value, error = refine(a, b, fa, fm, fb, whole, 0, max(tol, rel_tol * abs(whole)))
    return ReferenceIntegral(value=value, error_estimate=error, evaluations=evaluations)
