from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_probdist.errors import (
    ConvergenceError,
    DimensionMismatchError,
    DomainError,
    ExpectationTruncationWarning,
    InternalInvariantError,
    ProbDistError,
    ProbDistWarning,
)


class TestTaxonomy:
    @pytest.mark.parametrize(
        "error, builtin",
        [
            (DomainError, ValueError),
            (DimensionMismatchError, ValueError),
            (ConvergenceError, RuntimeError),
            (InternalInvariantError, AssertionError),
        ],
        ids=["domain", "dimension", "convergence", "invariant"],
    )
    def test_subclasses(self, error: type[Exception], builtin: type[Exception]) -> None:
        assert issubclass(error, ProbDistError)
        assert issubclass(error, builtin)

    def test_dimension_mismatch_carries_lengths(self) -> None:
        err = DimensionMismatchError(3, 1)
        assert (err.expected, err.actual) == (3, 1)
        assert "length 3" in str(err)

    def test_warning_categories(self) -> None:
        assert issubclass(ExpectationTruncationWarning, ProbDistWarning)
        assert issubclass(ProbDistWarning, UserWarning)
