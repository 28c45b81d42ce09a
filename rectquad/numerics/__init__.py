"""Numerical building blocks.

Pure Python implementations of:
- Bounded maximization (Brent's method)
- Reference integration (Adaptive Simpson's rule)
"""

from rectquad.numerics.integration import ReferenceIntegral, integrate_reference
from rectquad.numerics.optimization import Maximizer, OptimizeResult, brent_maximize

__all__ = [
    "Maximizer",
    "OptimizeResult",
    "ReferenceIntegral",
    "brent_maximize",
    "integrate_reference",
]
