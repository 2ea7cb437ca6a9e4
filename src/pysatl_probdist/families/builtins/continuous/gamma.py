"""
Gamma distribution.

Shape ``k`` and scale ``theta``:

    f(x) = x**(k - 1) * exp(-x / theta) / (Gamma(k) * theta**k),    x > 0

The cdf is the regularized lower incomplete gamma function ``P(k, x / theta)``.
Quantiles and central moments use the generic framework paths.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf, isnan, log, sqrt

import numpy as np
from scipy import special as _sp_special

from pysatl_probdist.distributions.continuous import ContinuousDistribution
from pysatl_probdist.errors import DomainError
from pysatl_probdist.numerics.logspace import ln
from pysatl_probdist.numerics.special import gamma_p, gamma_q, lngamma
from pysatl_probdist.types import NONNEGATIVE_REALS, FamilyName, Interval


@dataclass(frozen=True, slots=True)
class Gamma(ContinuousDistribution):
    """
    Gamma distribution.

    Parameters
    ----------
    shape : float
        Shape ``k > 0``.
    scale : float, default 1.0
        Scale ``theta > 0``.
    """

    shape: float
    scale: float = 1.0

    def __post_init__(self) -> None:
        for name in ("shape", "scale"):
            value = getattr(self, name)
            if isnan(value) or not 0.0 < value < inf:
                raise DomainError(f"Gamma: {name} must be positive and finite, got {value}")

    @property
    def family_name(self) -> str:
        return FamilyName.GAMMA

    @property
    def support(self) -> Interval:
        return NONNEGATIVE_REALS

    def log_pdf(self, x: float) -> float:
        k, theta = self.shape, self.scale
        if x < 0.0 or x == inf:
            return -inf
        if x == 0.0:
            if k < 1.0:
                return inf
            if k == 1.0:
                return -log(theta)
            return -inf
        return (k - 1.0) * log(x) - x / theta - lngamma(k) - k * log(theta)

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return gamma_p(self.shape, x / self.scale)

    def log_cdf(self, x: float) -> float:
        return ln(self.cdf(x))

    def ucdf(self, x: float) -> float:
        if x <= 0.0:
            return 1.0
        return gamma_q(self.shape, x / self.scale)

    def log_ucdf(self, x: float) -> float:
        return ln(self.ucdf(x))

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return inf

    def mean(self) -> float:
        return self.shape * self.scale

    def var(self) -> float:
        return self.shape * self.scale**2

    def skewness(self) -> float:
        return 2.0 / sqrt(self.shape)

    def kurtosis_excess(self) -> float:
        return 6.0 / self.shape

    def kurtosis_proper(self) -> float:
        return self.kurtosis_excess() + 3.0

    def moment(self, m: float) -> float:
        """Raw moment ``theta**m * Gamma(k + m) / Gamma(k)`` (infinite for ``k + m <= 0``)."""
        if m == 0.0:
            return 1.0
        if self.shape + m <= 0.0:
            return inf
        log_moment = m * log(self.scale) + lngamma(self.shape + m) - lngamma(self.shape)
        with np.errstate(over="ignore"):
            return float(np.exp(log_moment))

    def entropy(self) -> float:
        k = self.shape
        return k + log(self.scale) + lngamma(k) + (1.0 - k) * float(_sp_special.digamma(k))

    def mode(self) -> float:
        """``(k - 1) * theta`` for ``k >= 1``, else the left end ``0``."""
        if self.shape >= 1.0:
            return (self.shape - 1.0) * self.scale
        return 0.0

    def mode_interval(self) -> Interval:
        return Interval.point(self.mode())


__all__ = ["Gamma"]
