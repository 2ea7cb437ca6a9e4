"""
Discrete Supports
=================

Enumerable supports of discrete distributions:

- :class:`LatticeSupport`: the lattice ``shift + scale * i`` for ``i = 0..n``,
  possibly infinite;
- :class:`ExplicitTableDiscreteSupport`: an explicit sorted table of points.

Both enumerate their points in ascending order (for a positive scale) and can be
iterated any number of times; every call to ``iter`` restarts the enumeration.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from itertools import count
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_probdist.errors import DomainError
from pysatl_probdist.types import BoolArray, Interval, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@runtime_checkable
class DiscreteSupport(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def iter_points(self) -> Iterator[float]: ...

    def iter_in(self, ab: Interval) -> Iterator[float]: ...


@dataclass(frozen=True, slots=True)
class LatticeSupport(DiscreteSupport):
    """
    Lattice iterator over ``shift + scale * i`` for ``i = 0, 1, ..., n``.

    Parameters
    ----------
    shift : float, default 0.0
        First point.
    scale : float, default 1.0
        Lattice spacing, ``scale > 0``.
    n : int or None, default None
        Index of the last point. ``None`` yields an infinite lazy sequence that
        the consumer must stop itself; a negative ``n`` yields nothing.

    Examples
    --------
    >>> list(LatticeSupport(shift=2.0, scale=0.5, n=3))
    [2.0, 2.5, 3.0, 3.5]
    """

    shift: float = 0.0
    scale: float = 1.0
    n: int | None = None

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise DomainError(f"Lattice scale must be positive, got {self.scale}")

    @property
    def is_finite(self) -> bool:
        return self.n is not None

    def __len__(self) -> int:
        if self.n is None:
            raise TypeError("An unbounded lattice has no length.")
        return max(self.n + 1, 0)

    def iter_points(self) -> Iterator[float]:
        indices: Iterable[int] = count() if self.n is None else range(self.n + 1)
        for i in indices:
            yield self.shift + self.scale * i

    __iter__ = iter_points

    def iter_in(self, ab: Interval) -> Iterator[float]:
        """Iterate over the lattice points inside ``ab``."""
        if ab.is_nan or ab.is_empty:
            return iter(())
        lo = ab.left - self.shift
        hi = ab.right - self.shift
        sub = Interval(lo / self.scale, hi / self.scale, ab.kind).contained_eps_lattice(1.0)
        first = max(sub.left, 0.0)
        last = sub.right if self.n is None else min(sub.right, float(self.n))
        if last < first:
            return iter(())
        i0 = int(first)
        restricted = LatticeSupport(
            shift=self.shift + self.scale * i0,
            scale=self.scale,
            n=None if last == np.inf else int(last) - i0,
        )
        return restricted.iter_points()

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        k = (xf - self.shift) / self.scale
        mask = (k == np.floor(k)) & (k >= 0)
        if self.n is not None:
            mask &= k <= self.n
        result = mask & np.isfinite(xf)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


class ExplicitTableDiscreteSupport(DiscreteSupport):
    """
    Sorted table of distinct support points.

    Parameters
    ----------
    points : Iterable[Number]
        Support points; duplicates are removed.
    assume_sorted : bool, default False
        Skip sorting when the points are already ascending.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Number], assume_sorted: bool = False) -> None:
        arr = np.array(list(points), dtype=float)

        if arr.size == 0:
            raise DomainError("Points must be non-empty")
        if not np.all(np.isfinite(arr)):
            raise DomainError("Points must be finite")

        if not assume_sorted:
            arr.sort()

        unique_mask = np.empty(arr.size, dtype=bool)
        unique_mask[0] = True
        unique_mask[1:] = arr[1:] != arr[:-1]

        self._points = arr[unique_mask]

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        arr = np.asarray(x, dtype=float)
        idx = np.searchsorted(self._points, arr, side="left")

        size = self._points.size
        in_bounds = idx < size

        idx_clipped = np.minimum(idx, size - 1)
        result = in_bounds & (self._points[idx_clipped] == arr)

        if np.ndim(arr) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return int(self._points.size)

    def iter_points(self) -> Iterator[float]:
        return (float(p) for p in self._points)

    __iter__ = iter_points

    def iter_in(self, ab: Interval) -> Iterator[float]:
        """Iterate over the table points inside ``ab``."""
        mask = ab.contains(self._points)
        return (float(p) for p in self._points[mask])

    def nearest(self, x: float) -> float:
        """Return the table point closest to ``x`` (the smaller one on ties)."""
        idx = int(np.searchsorted(self._points, x, side="left"))
        if idx == 0:
            return float(self._points[0])
        if idx == self._points.size:
            return float(self._points[-1])
        below, above = float(self._points[idx - 1]), float(self._points[idx])
        return below if x - below <= above - x else above

    def first(self) -> float:
        return float(self._points[0])

    def last(self) -> float:
        return float(self._points[-1])

    @property
    def points(self) -> NumericArray:
        return cast(NumericArray, self._points.copy())


__all__ = [
    "DiscreteSupport",
    "LatticeSupport",
    "ExplicitTableDiscreteSupport",
]
