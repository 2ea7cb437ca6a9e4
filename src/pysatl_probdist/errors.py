"""
Errors and Warnings
===================

Exception taxonomy shared by the numerical primitives and the distribution
framework:

- :class:`DomainError`: an argument lies outside the valid mathematical domain.
- :class:`DimensionMismatchError`: a coordinate vector has the wrong length.
- :class:`ConvergenceError`: an iterative evaluator exhausted its iteration budget.
- :class:`InternalInvariantError`: a framework consistency check failed.

Non-fatal diagnostics are reported with :mod:`warnings` using the categories below.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ProbDistError(Exception):
    """Base class for all errors raised by PySATL ProbDist."""


class DomainError(ProbDistError, ValueError):
    """Argument outside the mathematically valid domain."""


class DimensionMismatchError(ProbDistError, ValueError):
    """
    Coordinate vector of the wrong length.

    Parameters
    ----------
    expected : int
        Dimension of the distribution.
    actual : int
        Length of the supplied coordinate vector.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected a coordinate vector of length {expected}, got {actual}.")
        self.expected = expected
        self.actual = actual


class ConvergenceError(ProbDistError, RuntimeError):
    """
    Iteration budget of a series or continued-fraction evaluator exceeded.

    Signals a configuration problem (parameter too large for the configured
    tolerance and iteration cap), not bad data.
    """


class InternalInvariantError(ProbDistError, AssertionError):
    """A framework consistency check failed; indicates a logic defect."""


class ProbDistWarning(UserWarning):
    """Base category for PySATL ProbDist warnings."""


class ExpectationTruncationWarning(ProbDistWarning):
    """An infinite-support expectation was cut off before it converged."""


__all__ = [
    "ProbDistError",
    "DomainError",
    "DimensionMismatchError",
    "ConvergenceError",
    "InternalInvariantError",
    "ProbDistWarning",
    "ExpectationTruncationWarning",
]
