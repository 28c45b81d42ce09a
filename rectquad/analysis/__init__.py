"""Diagnostics built on top of the integrator."""

from rectquad.analysis.comparison import ReferenceComparison, compare_with_reference
from rectquad.analysis.convergence import COLUMNS, convergence_table, plot_convergence

__all__ = [
    "COLUMNS",
    "ReferenceComparison",
    "compare_with_reference",
    "convergence_table",
    "plot_convergence",
]
