"""
Tabulated discrete distribution.

Explicit finite list of atoms with their probabilities. Apart from the mass
lookup everything (atom test, moments, entropy, interval masses, quantiles)
comes from the generic finite-support paths.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_probdist.distributions.discrete import FiniteDistribution
from pysatl_probdist.distributions.support import ExplicitTableDiscreteSupport
from pysatl_probdist.errors import DomainError
from pysatl_probdist.numerics.logspace import ln
from pysatl_probdist.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_probdist.types import Interval, Number, NumericArray

_MASS_TOLERANCE = 1e-9


class TableDistribution(FiniteDistribution):
    """
    Finite distribution given by a table of atoms and probabilities.

    Parameters
    ----------
    points : Iterable[Number]
        Distinct finite points.
    probabilities : Iterable[float]
        Non-negative probabilities, one per point, summing to 1 within ``1e-9``.

    Raises
    ------
    DomainError
        If the table is empty, ragged, has repeated or non-finite points, or the
        probabilities are not a probability vector.

    Notes
    -----
    Points listed with probability 0 are kept in :attr:`points` and
    :attr:`probabilities` but are not atoms: the support, :meth:`atoms`,
    :meth:`is_atom` and :meth:`closest_atom` only see points of positive mass.

    Examples
    --------
    >>> d = TableDistribution([1.0, 2.0, 4.0], [0.25, 0.5, 0.25])
    >>> d.mean()
    2.25
    """

    __slots__ = ("_points", "_support", "_masses")

    def __init__(self, points: Iterable[Number], probabilities: Iterable[float]) -> None:
        pts = np.asarray(list(points), dtype=float)
        probs = np.asarray(list(probabilities), dtype=float)
        if pts.shape != probs.shape or pts.ndim != 1:
            raise DomainError(
                f"TableDistribution: {pts.size} points but {probs.size} probabilities"
            )
        if not np.all(np.isfinite(pts)):
            raise DomainError("TableDistribution: points must be finite")
        if np.unique(pts).size != pts.size:
            raise DomainError("TableDistribution: points must be distinct")
        if not np.all(np.isfinite(probs)) or np.any(probs < 0.0):
            raise DomainError("TableDistribution: probabilities must be finite and non-negative")
        total = float(np.sum(probs))
        if abs(total - 1.0) > _MASS_TOLERANCE:
            raise DomainError(f"TableDistribution: probabilities sum to {total}, expected 1")

        order = np.argsort(pts)
        self._points = pts[order]
        self._support = ExplicitTableDiscreteSupport(pts[probs > 0.0])
        self._masses = {float(x): float(p) for x, p in zip(pts, probs, strict=True)}

    def __repr__(self) -> str:
        return (
            f"TableDistribution(points={self.points.tolist()}, "
            f"probabilities={self.probabilities.tolist()})"
        )

    @property
    def family_name(self) -> str:
        return FamilyName.TABLE

    @property
    def points(self) -> NumericArray:
        return self._points.copy()

    @property
    def probabilities(self) -> NumericArray:
        return np.array([self._masses[float(x)] for x in self._points])

    def pmf(self, x: float) -> float:
        return self._masses.get(float(x), 0.0)

    def log_pmf(self, x: float) -> float:
        return ln(self.pmf(x))

    def closest_atom(self, x: float) -> float:
        return self._support.nearest(x)

    def atoms(self, ab: Interval | None = None) -> Iterator[float]:
        if ab is None:
            return self._support.iter_points()
        return self._support.iter_in(ab)

    def min(self) -> float:
        return self._support.first()

    def max(self) -> float:
        return self._support.last()


__all__ = ["TableDistribution"]
