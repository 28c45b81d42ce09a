"""Exceptions raised by rectquad."""

from __future__ import annotations


class RectquadError(Exception):
    """Base class for all rectquad errors."""


class MissingInputError(RectquadError, ValueError):
    """One or more required inputs were absent when a run started.

    Attributes:
        missing: Names of the absent inputs, in declaration order.
    """

    def __init__(self, missing: tuple[str, ...] | list[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required input(s): {', '.join(self.missing)}")


class InvalidArgumentError(RectquadError, ValueError):
    """An input or derived value is outside its valid range."""
