"""
Distribution Interfaces
=======================

Public protocols of the framework:

- :class:`Distribution`: general distribution evaluated at coordinate vectors
  (multivariate entry point).
- :class:`UnivariateDistribution`: scalar interface with the full set of derived
  statistics.
- :class:`UnimodalDistribution`: univariate distribution with a known mode.

and the :class:`VectorForm` adapter that exposes any univariate distribution
through the vector interface.

Notes
-----
- Every ``log_*`` method returns the natural logarithm of its counterpart;
  implementations may compute it more accurately than ``log(counterpart)``.
- ``ucdf(x)`` is the upper cdf ``P(X >= x)``; together with ``cdf(x) = P(X <= x)``
  it counts an atom at ``x`` on both sides.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, NamedTuple, Protocol, overload, runtime_checkable

import numpy as np

from pysatl_probdist.errors import DimensionMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import Any

    import numpy.typing as npt

    from pysatl_probdist.distributions.sampling import ArraySample
    from pysatl_probdist.types import DistributionType, Interval, ScalarFunc


class BoxPlotStatistics(NamedTuple):
    """Markers of a box-and-whisker plot."""

    lower_whisker: float
    lower_quartile: float
    median: float
    upper_whisker: float
    upper_quartile: float


@runtime_checkable
class Distribution(Protocol):
    """Distribution evaluated at coordinate vectors of length :attr:`dimension`."""

    @property
    def dimension(self) -> int: ...
    @property
    def is_finite(self) -> bool: ...

    def pdf(self, x: Sequence[float]) -> float: ...
    def log_pdf(self, x: Sequence[float]) -> float: ...
    def pmf(self, x: Sequence[float]) -> float: ...
    def log_pmf(self, x: Sequence[float]) -> float: ...
    def cdf(self, x: Sequence[float]) -> float: ...
    def log_cdf(self, x: Sequence[float]) -> float: ...
    def ucdf(self, x: Sequence[float]) -> float: ...
    def log_ucdf(self, x: Sequence[float]) -> float: ...
    def is_atom(self, x: Sequence[float]) -> bool: ...


@runtime_checkable
class UnivariateDistribution(Protocol):
    """Scalar interface of a one-dimensional distribution."""

    @property
    def distribution_type(self) -> DistributionType: ...
    @property
    def is_finite(self) -> bool: ...
    @property
    def support(self) -> Interval: ...
    @property
    def vector(self) -> VectorForm: ...

    def pdf(self, x: float) -> float: ...
    def log_pdf(self, x: float) -> float: ...
    def pmf(self, x: float) -> float: ...
    def log_pmf(self, x: float) -> float: ...
    def cdf(self, x: float) -> float: ...
    def log_cdf(self, x: float) -> float: ...
    def ucdf(self, x: float) -> float: ...
    def log_ucdf(self, x: float) -> float: ...
    def interval_mass(self, ab: Interval) -> float: ...
    def log_interval_mass(self, ab: Interval) -> float: ...
    def is_atom(self, x: float) -> bool: ...
    def closest_atom(self, x: float) -> float: ...
    def min(self) -> float: ...
    def max(self) -> float: ...

    def expect(self, h: ScalarFunc) -> float: ...
    def mean(self) -> float: ...
    def var(self) -> float: ...
    def std(self) -> float: ...
    def skewness(self) -> float: ...
    def kurtosis_excess(self) -> float: ...
    def kurtosis_proper(self) -> float: ...
    def moment(self, m: float) -> float: ...
    def central_moment(self, m: float) -> float: ...
    def entropy(self) -> float: ...
    def median(self) -> float: ...
    def iqr(self) -> float: ...
    def box_plot_statistics(self) -> BoxPlotStatistics: ...
    def ppf(self, p: float) -> float: ...

    @overload
    def random(self, n: None = None, **options: Any) -> float: ...
    @overload
    def random(self, n: int, **options: Any) -> npt.NDArray[np.float64]: ...

    def sample(self, n: int, **options: Any) -> ArraySample: ...
    def log_likelihood(self, data: ArraySample | Iterable[float]) -> float: ...


@runtime_checkable
class UnimodalDistribution(UnivariateDistribution, Protocol):
    """Univariate distribution whose pmf or density has a single (interval) maximum."""

    def mode(self) -> float:
        """Smallest mode."""
        ...

    def mode_interval(self) -> Interval:
        """The whole interval of modes."""
        ...


def coordinates(x: Sequence[float], dimension: int) -> npt.NDArray[np.float64]:
    """
    Validate a coordinate vector and return it as a float array.

    Raises
    ------
    DimensionMismatchError
        If ``len(x) != dimension``.
    """
    arr = np.asarray(x, dtype=np.float64).reshape(-1)
    if arr.size != dimension:
        raise DimensionMismatchError(dimension, int(arr.size))
    return arr


class VectorForm:
    """
    Vector-coordinate view of a univariate distribution.

    Implements :class:`Distribution` for ``dimension == 1``: every method takes a
    coordinate sequence of length exactly one and delegates to the scalar method.

    Parameters
    ----------
    distribution : UnivariateDistribution
        The wrapped distribution.
    """

    __slots__ = ("_distribution",)

    dimension = 1

    def __init__(self, distribution: UnivariateDistribution) -> None:
        self._distribution = distribution

    @property
    def distribution(self) -> UnivariateDistribution:
        return self._distribution

    @property
    def is_finite(self) -> bool:
        return self._distribution.is_finite

    @staticmethod
    def _scalar(x: Sequence[float]) -> float:
        return float(coordinates(x, 1)[0])

    def pdf(self, x: Sequence[float]) -> float:
        return self._distribution.pdf(self._scalar(x))

    def log_pdf(self, x: Sequence[float]) -> float:
        return self._distribution.log_pdf(self._scalar(x))

    def pmf(self, x: Sequence[float]) -> float:
        return self._distribution.pmf(self._scalar(x))

    def log_pmf(self, x: Sequence[float]) -> float:
        return self._distribution.log_pmf(self._scalar(x))

    def cdf(self, x: Sequence[float]) -> float:
        return self._distribution.cdf(self._scalar(x))

    def log_cdf(self, x: Sequence[float]) -> float:
        return self._distribution.log_cdf(self._scalar(x))

    def ucdf(self, x: Sequence[float]) -> float:
        return self._distribution.ucdf(self._scalar(x))

    def log_ucdf(self, x: Sequence[float]) -> float:
        return self._distribution.log_ucdf(self._scalar(x))

    def is_atom(self, x: Sequence[float]) -> bool:
        return self._distribution.is_atom(self._scalar(x))


__all__ = [
    "BoxPlotStatistics",
    "Distribution",
    "UnivariateDistribution",
    "UnimodalDistribution",
    "VectorForm",
    "coordinates",
]
