from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_probdist.distributions import Distribution, VectorForm, coordinates
from pysatl_probdist.errors import DimensionMismatchError
from tests.unit.distributions.test_basic import DistributionTestBase


class TestCoordinates:
    def test_returns_float_array(self) -> None:
        arr = coordinates([1, 2, 3], 3)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    @pytest.mark.parametrize(
        "x, dimension",
        [([], 1), ([1.0, 2.0], 1), ([1.0], 2)],
        ids=["empty", "too_long", "too_short"],
    )
    def test_dimension_mismatch(self, x: list[float], dimension: int) -> None:
        with pytest.raises(DimensionMismatchError) as excinfo:
            coordinates(x, dimension)
        assert excinfo.value.expected == dimension
        assert excinfo.value.actual == len(x)


class TestVectorForm(DistributionTestBase):
    def test_is_vector_distribution(self) -> None:
        vector = self.make_die().vector
        assert isinstance(vector, VectorForm)
        assert isinstance(vector, Distribution)
        assert vector.dimension == 1
        assert vector.is_finite is True

    def test_delegates_to_scalar_methods(self) -> None:
        distr = self.make_die()
        vector = VectorForm(distr)
        assert vector.distribution is distr
        assert vector.pmf([3.0]) == distr.pmf(3.0)
        assert vector.log_pmf([3.0]) == distr.log_pmf(3.0)
        assert vector.pdf([3.0]) == inf
        assert vector.log_pdf([3.5]) == -inf
        assert vector.cdf([2.0]) == distr.cdf(2.0)
        assert vector.log_cdf([2.0]) == distr.log_cdf(2.0)
        assert vector.ucdf([5.0]) == distr.ucdf(5.0)
        assert vector.log_ucdf([5.0]) == distr.log_ucdf(5.0)
        assert vector.is_atom([4.0]) is True

    @pytest.mark.parametrize(
        "method",
        ["pdf", "log_pdf", "pmf", "log_pmf", "cdf", "log_cdf", "ucdf", "log_ucdf", "is_atom"],
    )
    def test_wrong_length_rejected(self, method: str) -> None:
        vector = self.make_uniform().vector
        with pytest.raises(DimensionMismatchError, match="length 1, got 2"):
            getattr(vector, method)([0.1, 0.2])
