"""Validation, partition estimation and quadrature."""

from rectquad.core.partition import (
    MAX_STEPS,
    EstimatorSettings,
    PartitionEstimate,
    PartitionEstimator,
)
from rectquad.core.problem import IntegrationProblem, Interval, RealFunction
from rectquad.core.quadrature import right_rectangle_sum
from rectquad.core.validation import REQUIRED_INPUTS, validate_problem

__all__ = [
    "MAX_STEPS",
    "REQUIRED_INPUTS",
    "EstimatorSettings",
    "IntegrationProblem",
    "Interval",
    "PartitionEstimate",
    "PartitionEstimator",
    "RealFunction",
    "right_rectangle_sum",
    "validate_problem",
]
