"""
Binomial distribution.

Number of successes in ``n`` independent trials with success probability ``p``:

    P(X = k) = C(n, k) * p**k * (1 - p)**(n - k),    k = 0, 1, ..., n

The degenerate cases ``p == 0`` and ``p == 1`` are exact point masses at ``0``
and ``n``. A tiny failure probability ``q = 1 - p`` can be supplied directly to
keep it exact in log space.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from math import ceil, exp, floor, inf, isnan, log, log1p
from typing import TYPE_CHECKING

import numpy as np

from pysatl_probdist.distributions.discrete import FiniteDistribution
from pysatl_probdist.distributions.sampling import ArraySample
from pysatl_probdist.distributions.support import LatticeSupport
from pysatl_probdist.errors import DomainError, InternalInvariantError
from pysatl_probdist.numerics.precision import xround
from pysatl_probdist.numerics.special import lnbincoeff
from pysatl_probdist.types import FamilyName, Interval

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def _log_or_minus_inf(x: float) -> float:
    return -inf if x == 0.0 else log(x)


def _log1m_or_minus_inf(x: float) -> float:
    return -inf if x == 1.0 else log1p(-x)


@dataclass(frozen=True, slots=True)
class Binomial(FiniteDistribution):
    """
    Binomial distribution ``B(n, p)``.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    p : float
        Success probability in ``[0, 1]``.
    q : float, optional
        Failure probability. When given, ``p`` must be ``1.0`` and the log
        probabilities are derived from ``q``; see :meth:`from_failure_probability`.

    Raises
    ------
    DomainError
        If a parameter is outside its domain.
    """

    n: int
    p: float
    q: float | None = None
    lnp: float = field(init=False, repr=False, compare=False)
    lnq: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not 0 <= self.n < inf or self.n != int(self.n):
            raise DomainError(f"Binomial: n must be a non-negative integer, got {self.n}")
        object.__setattr__(self, "n", int(self.n))
        if isnan(self.p) or not 0.0 <= self.p <= 1.0:
            raise DomainError(f"Binomial: p must be in [0, 1], got {self.p}")

        if self.q is None:
            lnp = _log_or_minus_inf(self.p)
            lnq = _log1m_or_minus_inf(self.p)
        else:
            if self.p != 1.0:
                raise DomainError("Binomial: p must be 1.0 when q is given")
            if isnan(self.q) or not 0.0 <= self.q <= 1.0:
                raise DomainError(f"Binomial: q must be in [0, 1], got {self.q}")
            lnp = _log1m_or_minus_inf(self.q)
            lnq = _log_or_minus_inf(self.q)
        object.__setattr__(self, "lnp", lnp)
        object.__setattr__(self, "lnq", lnq)

    @classmethod
    def from_failure_probability(cls, n: int, q: float) -> Binomial:
        """Build ``B(n, 1 - q)`` without rounding ``1 - q``."""
        return cls(n, 1.0, q=q)

    @staticmethod
    def p_from_sample(n: int, data: ArraySample | Iterable[float]) -> float:
        """
        Maximum-likelihood estimate of ``p`` from observed success counts.

        Returns ``sum(data) / (n * len(data))``.
        """
        values = data.univariate_values() if isinstance(data, ArraySample) else list(data)
        if n <= 0:
            raise DomainError(f"Binomial.p_from_sample: n must be positive, got {n}")
        if len(values) == 0:
            raise DomainError("Binomial.p_from_sample: data must be non-empty")
        return float(np.sum(values)) / (n * len(values))

    @property
    def success_probability(self) -> float:
        """``p``, or ``1 - q`` evaluated from the log form when ``q`` was given."""
        return self.p if self.q is None else exp(self.lnp)

    @property
    def family_name(self) -> str:
        return FamilyName.BINOMIAL

    @property
    def lattice(self) -> LatticeSupport:
        return LatticeSupport(0.0, 1.0, self.n)

    # ---- mass ----------------------------------------------------------

    def log_pmf(self, x: float) -> float:
        if not self.is_atom(x):
            return -inf
        n = self.n
        if n == 0:
            return 0.0
        if x == 0:
            return 0.0 if self.lnp == -inf else n * self.lnq
        if x == n:
            return 0.0 if self.lnq == -inf else n * self.lnp
        return lnbincoeff(n, x) + x * self.lnp + (n - x) * self.lnq

    def is_atom(self, x: float) -> bool:
        return 0 <= x <= self.n and x == xround(x)

    def closest_atom(self, x: float) -> float:
        if x <= 0:
            return 0.0
        if x >= self.n:
            return float(self.n)
        return xround(x)

    def atoms(self, ab: Interval | None = None) -> Iterator[float]:
        if ab is None:
            return self.lattice.iter_points()
        return self.lattice.iter_in(ab)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return float(self.n)

    # ---- statistics ----------------------------------------------------

    def mean(self) -> float:
        return self.n * self.success_probability

    def var(self) -> float:
        return self.mean() * exp(self.lnq)

    def skewness(self) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0 - 2.0 * self.success_probability) / np.float64(self.std()))

    def kurtosis_excess(self) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0 - 6.0 * exp(self.lnp + self.lnq)) / np.float64(self.var()))

    def kurtosis_proper(self) -> float:
        return self.kurtosis_excess() + 3.0

    def median(self) -> float:
        """
        Median by a local search around the mean.

        The median lies within one of ``floor(mean)``; the candidates
        ``floor(mean) - 1 .. floor(mean) + 1`` are checked against the cdf.
        """
        x = float(floor(self.mean())) - 1.0
        if not self.cdf(x - 1.0) < 0.5:
            raise InternalInvariantError(
                f"Binomial median: cdf({x - 1.0}) >= 0.5 for n={self.n}, p={self.p}"
            )
        for candidate in (x, x + 1.0, x + 2.0):
            if self.cdf(candidate) >= 0.5:
                return candidate
        raise InternalInvariantError(
            f"Binomial median: no candidate near {x} reaches 0.5 for n={self.n}, p={self.p}"
        )

    def mode(self) -> float:
        """Smallest mode ``ceil((n + 1) p) - 1``, clipped at 0."""
        m = (self.n + 1) * self.success_probability
        return float(max(ceil(m) - 1, 0))

    def mode_interval(self) -> Interval:
        """Interval of modes; two modes when ``(n + 1) p`` is an integer."""
        m = (self.n + 1) * self.success_probability
        return Interval(self.mode(), float(min(floor(m), self.n)))


__all__ = ["Binomial"]
