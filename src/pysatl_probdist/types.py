"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL ProbDist:
distribution kinds, numeric aliases and the immutable :class:`Interval` value type.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf, isnan, nan
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Base class for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class IntervalType(Enum):
    """
    Boundary closure of a one-dimensional interval.

    Attributes
    ----------
    CLOSED
        ``[a, b]``
    OPEN
        ``(a, b)``
    OPEN_CLOSED
        ``(a, b]``
    CLOSED_OPEN
        ``[a, b)``
    NAN
        Not well-defined: one of the endpoints is NaN.
    """

    CLOSED = auto()
    OPEN = auto()
    OPEN_CLOSED = auto()
    CLOSED_OPEN = auto()
    NAN = auto()

    @property
    def left_closed(self) -> bool:
        return self in (IntervalType.CLOSED, IntervalType.CLOSED_OPEN)

    @property
    def right_closed(self) -> bool:
        return self in (IntervalType.CLOSED, IntervalType.OPEN_CLOSED)


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Immutable 1D interval.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    kind : IntervalType, default=IntervalType.CLOSED
        Closure of the endpoints. Forced to ``IntervalType.NAN`` when either
        endpoint is NaN.

    Notes
    -----
    Infinite endpoints keep the requested closure; they only matter for
    :meth:`contains`, where ``±inf`` is never a member of the real line.
    """

    left: float = -inf
    right: float = inf
    kind: IntervalType = IntervalType.CLOSED

    def __post_init__(self) -> None:
        """Mark intervals with an undefined endpoint as NaN intervals."""
        if isnan(self.left) or isnan(self.right):
            object.__setattr__(self, "kind", IntervalType.NAN)

    @classmethod
    def point(cls, x: float) -> "Interval":
        """Closed degenerate interval ``[x, x]``."""
        return cls(x, x, IntervalType.CLOSED)

    @classmethod
    def nan(cls) -> "Interval":
        """The undefined interval."""
        return cls(nan, nan, IntervalType.NAN)

    @property
    def is_nan(self) -> bool:
        return self.kind is IntervalType.NAN

    @property
    def is_point(self) -> bool:
        """``True`` iff the interval is closed and of zero width."""
        return self.left == self.right and self.kind is IntervalType.CLOSED

    @property
    def is_empty(self) -> bool:
        """``True`` iff the bounds are reversed or equal but not both closed."""
        if self.is_nan:
            return False
        if self.left > self.right:
            return True
        return self.left == self.right and self.kind is not IntervalType.CLOSED

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x, dtype=float)

        if self.is_nan:
            result = np.zeros_like(arr, dtype=bool)
        else:
            left_ok = (arr > self.left) | (self.kind.left_closed & (arr == self.left))
            right_ok = (arr < self.right) | (self.kind.right_closed & (arr == self.right))
            result = left_ok & right_ok & np.isfinite(arr)

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def contained_eps_lattice(self, eps: float) -> "Interval":
        """
        Largest closed sub-interval whose endpoints are multiples of ``eps``.

        Parameters
        ----------
        eps : float
            Granularity of the lattice (e.g. ``1.0`` for integers). ``0`` returns
            the interval unchanged.

        Returns
        -------
        Interval
            A closed interval (possibly empty), or the NaN interval when this
            interval is undefined.
        """
        if eps == 0:
            return self
        if self.is_nan:
            return NAN_INTERVAL

        first = float(eps * np.ceil(self.left / eps))
        last = float(eps * np.floor(self.right / eps))
        if not self.kind.left_closed and first == self.left:
            first += eps
        if not self.kind.right_closed and last == self.right:
            last -= eps
        return Interval(first, last, IntervalType.CLOSED)


EMPTY_INTERVAL = Interval(0.0, 0.0, IntervalType.OPEN)
"""The empty interval ``(0, 0)``."""

REAL_LINE = Interval(-inf, inf, IntervalType.OPEN)
"""The whole real line, open at infinity."""

NONNEGATIVE_REALS = Interval(0.0, inf, IntervalType.CLOSED_OPEN)
"""``[0, inf)``."""

ZERO_INTERVAL = Interval(0.0, 0.0, IntervalType.CLOSED)
"""The point interval ``[0, 0]``."""

NAN_INTERVAL = Interval(nan, nan, IntervalType.NAN)
"""The undefined interval."""


class FamilyName(StrEnum):
    BINOMIAL = "Binomial"
    POISSON = "Poisson"
    TABLE = "Table"
    GAMMA = "Gamma"
    MULTIVARIATE_STANDARD_GAUSSIAN = "MultivariateStandardGaussian"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "DistributionType",
    "ScalarFunc",
    "IntervalType",
    "Interval",
    "EMPTY_INTERVAL",
    "REAL_LINE",
    "NONNEGATIVE_REALS",
    "ZERO_INTERVAL",
    "NAN_INTERVAL",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FamilyName",
]
