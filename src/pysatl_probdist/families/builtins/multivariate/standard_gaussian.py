"""
Multivariate standard Gaussian distribution.

``d`` independent standard normal coordinates, evaluated through the vector
:class:`~pysatl_probdist.distributions.distribution.Distribution` interface:

    log f(x) = -(d * ln(2 pi) + |x|**2) / 2
    log F(x) = sum(log Phi(x_i))

where ``F(x) = P(X <= x)`` componentwise.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import exp, inf, log, pi
from typing import TYPE_CHECKING

import numpy as np
from scipy import special as _sp_special

from pysatl_probdist.distributions.distribution import coordinates
from pysatl_probdist.errors import DomainError
from pysatl_probdist.types import EuclideanDistributionType, FamilyName, Kind

if TYPE_CHECKING:
    from collections.abc import Sequence

_LN_2PI = log(2.0 * pi)


@dataclass(frozen=True, slots=True)
class MultivariateStandardGaussian:
    """
    Standard normal distribution on ``R**dimension``.

    Parameters
    ----------
    dimension : int
        Number of coordinates, ``dimension >= 1``.

    Notes
    -----
    Every method raises
    :class:`~pysatl_probdist.errors.DimensionMismatchError` when the coordinate
    vector does not have exactly ``dimension`` entries.
    """

    dimension: int

    def __post_init__(self) -> None:
        dimension = self.dimension
        if isinstance(dimension, bool) or not isinstance(dimension, int) or dimension < 1:
            raise DomainError(f"dimension must be a positive integer, got {dimension}")

    @property
    def family_name(self) -> str:
        return FamilyName.MULTIVARIATE_STANDARD_GAUSSIAN

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=self.dimension)

    @property
    def is_finite(self) -> bool:
        return False

    def log_pdf(self, x: Sequence[float]) -> float:
        arr = coordinates(x, self.dimension)
        return -0.5 * (self.dimension * _LN_2PI + float(np.dot(arr, arr)))

    def pdf(self, x: Sequence[float]) -> float:
        return exp(self.log_pdf(x))

    def log_pmf(self, x: Sequence[float]) -> float:
        coordinates(x, self.dimension)
        return -inf

    def pmf(self, x: Sequence[float]) -> float:
        coordinates(x, self.dimension)
        return 0.0

    def log_cdf(self, x: Sequence[float]) -> float:
        arr = coordinates(x, self.dimension)
        return float(np.sum(_sp_special.log_ndtr(arr)))

    def cdf(self, x: Sequence[float]) -> float:
        return exp(self.log_cdf(x))

    def log_ucdf(self, x: Sequence[float]) -> float:
        arr = coordinates(x, self.dimension)
        return float(np.sum(_sp_special.log_ndtr(-arr)))

    def ucdf(self, x: Sequence[float]) -> float:
        return exp(self.log_ucdf(x))

    def is_atom(self, x: Sequence[float]) -> bool:
        coordinates(x, self.dimension)
        return False


__all__ = ["MultivariateStandardGaussian"]
