"""Precision sweeps.

Runs the integrator for a series of precision targets and tabulates how the
partition count and the actual error respond.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

import pandas as pd

from rectquad.core.partition import EstimatorSettings
from rectquad.core.problem import IntegrationProblem
from rectquad.integrator import integrate
from rectquad.numerics.integration import integrate_reference

logger = logging.getLogger(__name__)

COLUMNS = ["precision", "partitions", "estimate", "reference", "abs_error", "within_precision"]


def convergence_table(
    problem: IntegrationProblem,
    precisions: Iterable[float],
    *,
    settings: EstimatorSettings | None = None,
    reference_tol: float = 1e-12,
) -> pd.DataFrame:
    """Integrate ``problem`` once per precision target.

    ``problem.precision`` is ignored and may be None. The reference integral
    is computed once and shared by every row.

    Returns:
        DataFrame with one row per precision, in the order given, and the
        columns listed in ``COLUMNS``.
    """
    precisions = list(precisions)
    if not precisions:
        raise ValueError("precisions must not be empty")

    rows = []
    reference = None
    for precision in precisions:
        result = integrate(replace(problem, precision=precision), settings=settings)
        if reference is None:
            reference = integrate_reference(
                problem.function, problem.interval.lo, problem.interval.hi, tol=reference_tol
            ).value
        abs_error = abs(result.estimate - reference)
        rows.append(
            {
                "precision": precision,
                "partitions": result.partitions,
                "estimate": result.estimate,
                "reference": reference,
                "abs_error": abs_error,
                "within_precision": abs_error <= precision,
            }
        )
        logger.debug("precision=%g partitions=%d abs_error=%g",
                     precision, result.partitions, abs_error)

    return pd.DataFrame(rows, columns=COLUMNS)


def plot_convergence(table: pd.DataFrame, path: str | Path, title: str | None = None) -> Path:
    """Save a log-log plot of error and partition count against precision.

    Args:
        table: Output of :func:`convergence_table`.
        path: Image file to write. Parent directories are created.
        title: Optional figure title.

    Returns:
        The path written.
    """
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    table = table.sort_values("precision")

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)

    ax1.loglog(table["precision"], table["abs_error"], "o-", label="|estimate - reference|")
    ax1.loglog(table["precision"], table["precision"], "k--", alpha=0.6, label="precision target")
    ax1.set_ylabel("Absolute error")
    ax1.legend(loc="upper left")
    ax1.grid(True, which="both", alpha=0.3)

    ax2.loglog(table["precision"], table["partitions"], "s-", color="tab:orange")
    ax2.set_xlabel("Precision target")
    ax2.set_ylabel("Partitions")
    ax2.grid(True, which="both", alpha=0.3)

    if title:
        fig.suptitle(title)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
