"""
Continuous Distributions
========================

:class:`ContinuousDistribution`: distributions with a density and no atoms.
Concrete subclasses supply ``log_pdf``, ``log_cdf``, ``min`` and ``max``;
interval masses come from cdf differences and expectations from adaptive
quadrature.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, log1p, nan
from typing import TYPE_CHECKING, ClassVar

from pysatl_probdist.numerics.logspace import ln
from pysatl_probdist.types import Interval, IntervalType, UnivariateContinuous

from .base import AbstractUnivariateDistribution
from .strategies import ExpectationStrategy, QuadratureExpectation

if TYPE_CHECKING:
    from pysatl_probdist.types import DistributionType, ScalarFunc


class ContinuousDistribution(AbstractUnivariateDistribution):
    """
    Distribution with a density and no atoms.

    Attributes
    ----------
    expectation_strategy : ExpectationStrategy
        Used by :meth:`expect`; adaptive quadrature by default.
    """

    expectation_strategy: ClassVar[ExpectationStrategy] = QuadratureExpectation()

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def is_finite(self) -> bool:
        return False

    @property
    def support(self) -> Interval:
        return Interval(self.min(), self.max(), IntervalType.OPEN)

    def pmf(self, x: float) -> float:
        return 0.0

    def log_pmf(self, x: float) -> float:
        return -inf

    def is_atom(self, x: float) -> bool:
        return False

    def closest_atom(self, x: float) -> float:
        return nan

    def ucdf(self, x: float) -> float:
        return 1.0 - self.cdf(x)

    def log_ucdf(self, x: float) -> float:
        c = self.cdf(x)
        if c >= 1.0:
            return -inf
        return log1p(-c)

    def interval_mass(self, ab: Interval) -> float:
        if ab.is_nan:
            return nan
        if ab.is_empty or ab.left == ab.right:
            return 0.0
        return max(self.cdf(ab.right) - self.cdf(ab.left), 0.0)

    def log_interval_mass(self, ab: Interval) -> float:
        return ln(self.interval_mass(ab))

    def expect(self, h: ScalarFunc) -> float:
        return self.expectation_strategy.expect(h, self)

    def _log_weight(self, x: float) -> float:
        return self.log_pdf(x)


__all__ = ["ContinuousDistribution"]
