"""
Univariate Distribution Base
============================

:class:`AbstractUnivariateDistribution` implements the full
:class:`~pysatl_probdist.distributions.distribution.UnivariateDistribution`
interface on top of a small abstract contract:

- ``log_pdf``, ``log_pmf``, ``log_cdf`` and ``log_interval_mass``;
- ``is_atom`` and ``closest_atom``;
- ``min``, ``max``, ``is_finite``, ``support`` and ``distribution_type``;
- ``expect``.

Everything else (plain-scale forms, moments, quantiles, box plot statistics,
sampling and likelihood) has a generic default built from that contract and the
pluggable strategies of :mod:`pysatl_probdist.distributions.strategies`.
Concrete families override any default with a closed form.

Notes
-----
- Derived shape statistics follow IEEE division: a zero variance gives
  infinite or NaN skewness and kurtosis, never an exception.
- Defaults are not cached; instances are immutable and can be shared between
  threads.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from math import exp, sqrt
from typing import TYPE_CHECKING, ClassVar, overload

import numpy as np

from .distribution import BoxPlotStatistics, VectorForm
from .sampling import ArraySample
from .strategies import (
    BisectionQuantile,
    InversionSamplingStrategy,
    QuantileStrategy,
    SamplingStrategy,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    import numpy.typing as npt

    from pysatl_probdist.types import DistributionType, Interval, ScalarFunc


def _power(x: float, m: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.power(np.float64(x), m))


def _ratio(num: float, den: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


class AbstractUnivariateDistribution(ABC):
    """
    Generic univariate distribution.

    Attributes
    ----------
    quantile_strategy : QuantileStrategy
        Algorithm behind the default :meth:`ppf`.
    sampling_strategy : SamplingStrategy
        Algorithm behind :meth:`sample` and :meth:`random`.
    """

    quantile_strategy: ClassVar[QuantileStrategy] = BisectionQuantile()
    sampling_strategy: ClassVar[SamplingStrategy] = InversionSamplingStrategy()

    # ---- abstract contract ---------------------------------------------

    @property
    @abstractmethod
    def distribution_type(self) -> DistributionType: ...

    @property
    @abstractmethod
    def is_finite(self) -> bool:
        """``True`` iff the distribution has finitely many atoms and no density."""

    @property
    @abstractmethod
    def support(self) -> Interval: ...

    @abstractmethod
    def log_pdf(self, x: float) -> float: ...

    @abstractmethod
    def log_pmf(self, x: float) -> float: ...

    @abstractmethod
    def log_cdf(self, x: float) -> float: ...

    @abstractmethod
    def log_ucdf(self, x: float) -> float: ...

    @abstractmethod
    def log_interval_mass(self, ab: Interval) -> float: ...

    @abstractmethod
    def is_atom(self, x: float) -> bool: ...

    @abstractmethod
    def closest_atom(self, x: float) -> float: ...

    @abstractmethod
    def min(self) -> float:
        """Infimum of the support (may be ``-inf``)."""

    @abstractmethod
    def max(self) -> float:
        """Supremum of the support (may be ``inf``)."""

    @abstractmethod
    def expect(self, h: ScalarFunc) -> float:
        """Expectation ``E[h(X)]``."""

    @abstractmethod
    def _log_weight(self, x: float) -> float:
        """Log of the pmf or density, whichever carries the probability."""

    # ---- plain-scale forms ---------------------------------------------

    @property
    def family_name(self) -> str:
        return type(self).__name__

    def pdf(self, x: float) -> float:
        return exp(self.log_pdf(x))

    def pmf(self, x: float) -> float:
        return exp(self.log_pmf(x))

    def cdf(self, x: float) -> float:
        return exp(self.log_cdf(x))

    def ucdf(self, x: float) -> float:
        """Upper cdf ``P(X >= x)``."""
        return exp(self.log_ucdf(x))

    def interval_mass(self, ab: Interval) -> float:
        """Probability of the interval ``ab``."""
        return exp(self.log_interval_mass(ab))

    # ---- moments -------------------------------------------------------

    def mean(self) -> float:
        return self.moment(1.0)

    def moment(self, m: float) -> float:
        """Raw moment ``E[X**m]``."""
        return self.expect(lambda x: _power(x, m))

    def central_moment(self, m: float) -> float:
        """Central moment ``E[(X - mean)**m]``."""
        mu = self.mean()
        return self.expect(lambda x: _power(x - mu, m))

    def var(self) -> float:
        return self.central_moment(2.0)

    def std(self) -> float:
        return sqrt(self.var())

    def skewness(self) -> float:
        return _ratio(self.central_moment(3.0), _power(self.var(), 1.5))

    def kurtosis_proper(self) -> float:
        return _ratio(self.central_moment(4.0), _power(self.var(), 2.0))

    def kurtosis_excess(self) -> float:
        return self.kurtosis_proper() - 3.0

    def entropy(self) -> float:
        """Shannon entropy in nats (differential entropy for densities)."""
        return self.expect(lambda x: -self._log_weight(x))

    # ---- quantiles -----------------------------------------------------

    def ppf(self, p: float) -> float:
        """
        Quantile function ``inf {x : cdf(x) >= p}``.

        Raises
        ------
        DomainError
            If ``p`` is NaN or outside ``[0, 1]``.
        """
        return self.quantile_strategy.ppf(p, self)

    def median(self) -> float:
        return self.ppf(0.5)

    def iqr(self) -> float:
        """Interquartile range ``ppf(0.75) - ppf(0.25)``."""
        return self.ppf(0.75) - self.ppf(0.25)

    def box_plot_statistics(self) -> BoxPlotStatistics:
        """
        Box plot markers.

        The whiskers are placed 1.5 interquartile ranges outside the quartiles.
        """
        lower_quartile = self.ppf(0.25)
        upper_quartile = self.ppf(0.75)
        iqr = upper_quartile - lower_quartile
        return BoxPlotStatistics(
            lower_whisker=lower_quartile - 1.5 * iqr,
            lower_quartile=lower_quartile,
            median=self.median(),
            upper_whisker=upper_quartile + 1.5 * iqr,
            upper_quartile=upper_quartile,
        )

    # ---- sampling and likelihood ---------------------------------------

    def sample(self, n: int, **options: Any) -> ArraySample:
        """Draw ``n`` variates as an ``(n, 1)`` sample."""
        return self.sampling_strategy.sample(n, self, **options)

    @overload
    def random(self, n: None = None, **options: Any) -> float: ...
    @overload
    def random(self, n: int, **options: Any) -> npt.NDArray[np.float64]: ...

    def random(self, n: int | None = None, **options: Any) -> float | npt.NDArray[np.float64]:
        """
        Draw one variate, or a 1D array of ``n`` variates.

        Options are forwarded to the sampling strategy (``rng``, ``seed``).
        """
        if n is None:
            return float(self.sample(1, **options).array[0, 0])
        return self.sample(n, **options).univariate_values()

    def log_likelihood(self, data: ArraySample | Iterable[float]) -> float:
        """
        Sum of log-pmf (discrete) or log-density (continuous) over ``data``.
        """
        values = data.univariate_values() if isinstance(data, ArraySample) else data
        return float(sum(self._log_weight(float(x)) for x in values))

    # ---- adapters ------------------------------------------------------

    @property
    def vector(self) -> VectorForm:
        """This distribution as a one-dimensional vector distribution."""
        return VectorForm(self)


__all__ = ["AbstractUnivariateDistribution"]
