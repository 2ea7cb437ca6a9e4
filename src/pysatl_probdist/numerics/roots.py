"""
Root Finding
============

Bracket expansion and bisection for arbitrary real functions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, isnan
from typing import TYPE_CHECKING

from pysatl_probdist.config import numeric_config
from pysatl_probdist.errors import DomainError
from pysatl_probdist.numerics.precision import double_equal
from pysatl_probdist.types import NAN_INTERVAL, Interval, IntervalType

if TYPE_CHECKING:
    from pysatl_probdist.types import ScalarFunc

_BRACKET_CLAMP = float.fromhex("0x1.fffffffffffffp+511")


def find_root_interval(f: ScalarFunc, a: float, b: float) -> Interval:
    """
    Expand ``(a, b)`` until ``f`` changes sign between the endpoints.

    Parameters
    ----------
    f : Callable[[float], float]
        Real function.
    a, b : float
        Initial bracket, ``a < b``. Infinite endpoints are clamped to a large
        finite magnitude so that the expansion cannot overflow.

    Returns
    -------
    Interval
        Open interval with ``f(a) * f(b) < 0``, or the NaN interval if no sign
        change was found within ``NumericConfig.root_expand_iterations`` steps.

    Raises
    ------
    DomainError
        If ``a >= b`` or an endpoint is NaN.
    """
    if isnan(a) or isnan(b) or a >= b:
        raise DomainError(f"find_root_interval requires a < b, got a={a}, b={b}")
    config = numeric_config()
    if a == -inf:
        a = -_BRACKET_CLAMP
    if b == inf:
        b = _BRACKET_CLAMP

    fa = f(a)
    fb = f(b)
    for _ in range(config.root_expand_iterations):
        if fa * fb < 0.0:
            return Interval(a, b, IntervalType.OPEN)
        if abs(fa) < abs(fb):
            a += config.root_expand_factor * (a - b)
            fa = f(a)
        else:
            b += config.root_expand_factor * (b - a)
            fb = f(b)
    return NAN_INTERVAL


def find_root_bisection(f: ScalarFunc, a: float, b: float, xacc: float = 0.0) -> float:
    """
    Locate a root of ``f`` in ``[a, b]`` by bisection.

    Parameters
    ----------
    f : Callable[[float], float]
        Real function with ``f(a)`` and ``f(b)`` of opposite signs.
    a, b : float
        Bracket endpoints.
    xacc : float, default 0.0
        Stop as soon as the half-width drops below ``xacc``. ``0`` refines until
        the bracket ends are numerically indistinguishable.

    Returns
    -------
    float
        Approximation of a root. If the roots form an interval, the
        approximation lies at its boundary facing the negative side of ``f``.

    Raises
    ------
    DomainError
        If ``f(a)`` and ``f(b)`` have the same sign.
    """
    fa = f(a)
    if fa == 0.0:
        return a
    fb = f(b)
    if fb == 0.0:
        return b
    if fa * fb > 0.0:
        raise DomainError(
            f"f(a), f(b) must have opposite signs: [a,b]=[{a}, {b}], f(a)={fa}, f(b)={fb}"
        )

    # Walk from the endpoint where f is negative.
    x, dx = (a, b - a) if fa < 0.0 else (b, a - b)
    while True:
        dx *= 0.5
        mid = x + dx
        fmid = f(mid)
        if fmid <= 0.0:
            x = mid
        if fmid == 0.0 or abs(dx) < xacc:
            return x
        lo, hi = (x, x + dx) if dx > 0.0 else (x + dx, x)
        if double_equal(lo, hi):
            return 0.5 * (lo + hi)


__all__ = ["find_root_interval", "find_root_bisection"]
