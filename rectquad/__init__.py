"""rectquad - right-rectangle quadrature sized from a derivative bound.

Given an interval, a precision target, a function and its derivative,
rectquad finds max |f'| on the interval, solves the rectangle rule's error
bound for the partition count, and evaluates the integral with that many
right rectangles.
"""

import logging

logging.getLogger("rectquad").addHandler(logging.NullHandler())

__version__ = "0.1.0"

from rectquad.core import (
    MAX_STEPS,
    EstimatorSettings,
    IntegrationProblem,
    Interval,
    PartitionEstimate,
    PartitionEstimator,
    right_rectangle_sum,
    validate_problem,
)
from rectquad.errors import InvalidArgumentError, MissingInputError, RectquadError
from rectquad.integrator import IntegrationResult, compute_integral, integrate
from rectquad.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from rectquad.numerics import OptimizeResult, ReferenceIntegral, brent_maximize, integrate_reference

__all__ = [
    # Core
    "MAX_STEPS",
    "EstimatorSettings",
    "IntegrationProblem",
    "IntegrationResult",
    "Interval",
    "PartitionEstimate",
    "PartitionEstimator",
    "compute_integral",
    "integrate",
    "right_rectangle_sum",
    "validate_problem",
    # Errors
    "InvalidArgumentError",
    "MissingInputError",
    "RectquadError",
    # Numerics
    "OptimizeResult",
    "ReferenceIntegral",
    "brent_maximize",
    "integrate_reference",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]
