"""
Floating-Point Precision Helpers
================================

IEEE-754 double precision constants, rounding to a granularity and a
numerically robust equality test.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys

import numpy as np

DBL_EPS = 2.0**-52
"""Distance from 1.0 to the next larger double."""

TOL_FACTOR = 2.0
"""Safety factor applied to :data:`DBL_EPS`."""

DBL_TOL = TOL_FACTOR * DBL_EPS
"""Relative tolerance used by all convergence tests."""

DBL_MIN_NORMAL = 2.0**-1022
"""Smallest positive normal double."""

DBL_MIN_SUBNORMAL = 5e-324
"""Smallest positive subnormal double."""

DBL_MAX = sys.float_info.max
"""Largest finite double."""


def xround(x: float, eps: float = 1.0) -> float:
    """
    Round ``x`` to the nearest multiple of ``eps``.

    Parameters
    ----------
    x : float
        Value to round. Infinite values are returned unchanged.
    eps : float, default 1.0
        Granularity.

    Returns
    -------
    float
        ``eps * floor(x/eps + 0.5)``. The rounding is applied twice so that
        ``xround(xround(x, eps), eps) == xround(x, eps)`` holds even when
        ``eps`` is not exactly representable.
    """
    y = eps * float(np.floor(x / eps + 0.5))
    return eps * float(np.floor(y / eps + 0.5))


def double_accuracy_in(a: float, b: float) -> float:
    """Return ``min(|x| : x in [a, b]) * DBL_TOL``, floored near zero."""
    if b < a:
        a, b = b, a
    if b < 0:
        m = -b
    elif a >= 0:
        m = a
    else:
        m = 0.0
    return TOL_FACTOR * DBL_MIN_NORMAL if m <= DBL_MIN_NORMAL else DBL_TOL * m


def double_equal(a: float, b: float) -> bool:
    """
    Check whether ``a <= b`` are numerically indistinguishable.

    Parameters
    ----------
    a, b : float
        Values with ``a <= b``; the order is not checked.

    Returns
    -------
    bool
        ``b - a <= DBL_TOL * max(|a|, |b|)``. Close to zero the comparison
        falls back to a few subnormal units.
    """
    m = max(abs(a), abs(b))
    if m <= TOL_FACTOR * DBL_MIN_NORMAL:
        return b - a <= TOL_FACTOR * DBL_MIN_SUBNORMAL
    return b - a <= DBL_TOL * m


__all__ = [
    "DBL_EPS",
    "TOL_FACTOR",
    "DBL_TOL",
    "DBL_MIN_NORMAL",
    "DBL_MIN_SUBNORMAL",
    "DBL_MAX",
    "xround",
    "double_accuracy_in",
    "double_equal",
]
