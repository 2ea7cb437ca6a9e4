"""
Poisson distribution.

Number of events of a Poisson process with mean ``lam``:

    P(X = k) = lam**k * exp(-lam) / k!,    k = 0, 1, 2, ...

Tail probabilities come from the regularized incomplete gamma functions:
``P(X <= k) = Q(k + 1, lam)`` and ``P(X >= k) = P(k, lam)``. ``lam == 0`` is the
point mass at zero.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from math import ceil, floor, inf, isnan, nan
from typing import TYPE_CHECKING

import numpy as np

from pysatl_probdist.distributions.discrete import DiscreteDistribution
from pysatl_probdist.distributions.support import LatticeSupport
from pysatl_probdist.errors import DomainError
from pysatl_probdist.numerics.logspace import ln
from pysatl_probdist.numerics.precision import xround
from pysatl_probdist.numerics.special import gamma_p, gamma_q, lnfactorial
from pysatl_probdist.types import NONNEGATIVE_REALS, ZERO_INTERVAL, FamilyName, Interval

if TYPE_CHECKING:
    from collections.abc import Iterator

# Largest integer index evaluated exactly; beyond it the tail probabilities are
# saturated at their limits for every lam the gamma evaluators can handle.
_MAX_INDEX = 2.0**53

# Intervals with at most this many atoms are summed directly.
_DIRECT_SUM_ATOMS = 10


@dataclass(frozen=True, slots=True)
class Poisson(DiscreteDistribution):
    """
    Poisson distribution with mean ``lam``.

    Parameters
    ----------
    lam : float
        Mean, ``lam >= 0``.

    Raises
    ------
    DomainError
        If ``lam`` is negative, infinite or NaN.
    """

    lam: float
    lnlam: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isnan(self.lam) or not 0.0 <= self.lam < inf:
            raise DomainError(f"Poisson: lam must be finite and non-negative, got {self.lam}")
        object.__setattr__(self, "lnlam", ln(self.lam))

    @property
    def family_name(self) -> str:
        return FamilyName.POISSON

    @property
    def is_finite(self) -> bool:
        return self.lam == 0.0

    @property
    def support(self) -> Interval:
        return ZERO_INTERVAL if self.lam == 0.0 else NONNEGATIVE_REALS

    @property
    def lattice(self) -> LatticeSupport:
        return LatticeSupport(0.0, 1.0, 0 if self.lam == 0.0 else None)

    # ---- mass ----------------------------------------------------------

    def log_pmf(self, x: float) -> float:
        if not self.is_atom(x):
            return -inf
        if self.lam == 0.0:
            return 0.0
        return -self.lam + x * self.lnlam - lnfactorial(x)

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if self.lam == 0.0 or x == inf:
            return 1.0
        return gamma_q(min(floor(x), _MAX_INDEX) + 1.0, self.lam)

    def log_cdf(self, x: float) -> float:
        return ln(self.cdf(x))

    def ucdf(self, x: float) -> float:
        if x <= 0.0:
            return 1.0
        if self.lam == 0.0 or x == inf:
            return 0.0
        return gamma_p(min(ceil(x), _MAX_INDEX), self.lam)

    def log_ucdf(self, x: float) -> float:
        return ln(self.ucdf(x))

    def interval_mass(self, ab: Interval) -> float:
        """
        Probability of ``ab``.

        Short runs of atoms are summed; longer ones use the upper tail when they
        lie right of ``lam`` and the cdf otherwise.
        """
        if ab.is_nan:
            return nan
        lattice = ab.contained_eps_lattice(1.0)
        first = max(lattice.left, 0.0)
        last = lattice.right
        if last < first:
            return 0.0
        if first == last:
            return self.pmf(first)
        if last - first <= _DIRECT_SUM_ATOMS:
            return sum((self.pmf(x) for x in self.atoms(ab)), 0.0)
        if first > self.lam:
            mass = self.ucdf(first) - self.ucdf(last + 1.0)
        else:
            mass = self.cdf(last) - self.cdf(first - 1.0)
        return max(mass, 0.0)

    def log_interval_mass(self, ab: Interval) -> float:
        return ln(self.interval_mass(ab))

    def is_atom(self, x: float) -> bool:
        if self.lam == 0.0:
            return x == 0.0
        return 0.0 <= x < inf and x == xround(x)

    def closest_atom(self, x: float) -> float:
        if x <= 0.0 or self.lam == 0.0:
            return 0.0
        return xround(x)

    def atoms(self, ab: Interval | None = None) -> Iterator[float]:
        if ab is None:
            return self.lattice.iter_points()
        return self.lattice.iter_in(ab)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return 0.0 if self.lam == 0.0 else inf

    # ---- statistics ----------------------------------------------------

    def mean(self) -> float:
        return self.lam

    def var(self) -> float:
        return self.lam

    def skewness(self) -> float:
        with np.errstate(divide="ignore"):
            return float(1.0 / np.sqrt(np.float64(self.lam)))

    def kurtosis_excess(self) -> float:
        with np.errstate(divide="ignore"):
            return float(1.0 / np.float64(self.lam))

    def kurtosis_proper(self) -> float:
        return self.kurtosis_excess() + 3.0

    def mode(self) -> float:
        """Smallest mode: ``lam - 1`` for integral ``lam``, else ``floor(lam)``."""
        if self.lam == 0.0:
            return 0.0
        if self.lam == floor(self.lam):
            return self.lam - 1.0
        return float(floor(self.lam))

    def mode_interval(self) -> Interval:
        return Interval(self.mode(), float(floor(self.lam)))


__all__ = ["Poisson"]
