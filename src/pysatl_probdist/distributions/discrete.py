"""
Discrete Distributions
======================

- :class:`DiscreteDistribution`: countable set of atoms enumerated in
  ascending order; density is an infinite spike at each atom.
- :class:`FiniteDistribution`: finitely many atoms; interval masses,
  atom tests and expectations by enumeration.

Concrete subclasses supply ``log_pmf``, ``atoms``, ``closest_atom``, ``min``
and ``max`` (plus ``log_interval_mass`` for infinite supports).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import abstractmethod
from math import inf
from typing import TYPE_CHECKING, ClassVar

from pysatl_probdist.numerics.logspace import logsum
from pysatl_probdist.types import Interval, IntervalType, UnivariateDiscrete

from .base import AbstractUnivariateDistribution
from .strategies import EnumerationExpectation, ExpectationStrategy, SeriesExpectation

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_probdist.types import DistributionType, ScalarFunc


class DiscreteDistribution(AbstractUnivariateDistribution):
    """
    Distribution concentrated on a countable set of atoms.

    Attributes
    ----------
    finite_expectation : ExpectationStrategy
        Used by :meth:`expect` when :attr:`is_finite` holds.
    series_expectation : ExpectationStrategy
        Used by :meth:`expect` otherwise.
    """

    finite_expectation: ClassVar[ExpectationStrategy] = EnumerationExpectation()
    series_expectation: ClassVar[ExpectationStrategy] = SeriesExpectation()

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateDiscrete

    @abstractmethod
    def atoms(self, ab: Interval | None = None) -> Iterator[float]:
        """
        Iterate over the atoms in ascending order.

        Parameters
        ----------
        ab : Interval, optional
            Restrict the enumeration to atoms inside ``ab``.
        """

    def __iter__(self) -> Iterator[float]:
        return self.atoms()

    def pdf(self, x: float) -> float:
        return inf if self.is_atom(x) else 0.0

    def log_pdf(self, x: float) -> float:
        return inf if self.is_atom(x) else -inf

    def log_cdf(self, x: float) -> float:
        if x >= self.max():
            return 0.0
        return self.log_interval_mass(Interval(self.min(), x, IntervalType.CLOSED))

    def log_ucdf(self, x: float) -> float:
        if x <= self.min():
            return 0.0
        return self.log_interval_mass(Interval(x, self.max(), IntervalType.CLOSED))

    def ppf(self, p: float) -> float:
        x = super().ppf(p)
        if x == -inf:
            return x
        return self.closest_atom(x)

    def expect(self, h: ScalarFunc) -> float:
        strategy = self.finite_expectation if self.is_finite else self.series_expectation
        return strategy.expect(h, self)

    def _log_weight(self, x: float) -> float:
        return self.log_pmf(x)


class FiniteDistribution(DiscreteDistribution):
    """Discrete distribution with finitely many atoms."""

    @property
    def is_finite(self) -> bool:
        return True

    @property
    def support(self) -> Interval:
        return Interval(self.min(), self.max(), IntervalType.CLOSED)

    def is_atom(self, x: float) -> bool:
        return any(x == a for a in self.atoms())

    def interval_mass(self, ab: Interval) -> float:
        return sum((self.pmf(x) for x in self.atoms(ab)), 0.0)

    def log_interval_mass(self, ab: Interval) -> float:
        acc = -inf
        for x in self.atoms(ab):
            acc = logsum(acc, self.log_pmf(x))
        return acc


__all__ = ["DiscreteDistribution", "FiniteDistribution"]
