"""
Log-Space Arithmetic
====================

Addition of probabilities represented by their natural logarithms, without
forming the probabilities themselves.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import exp, inf, log, log1p


def ln(x: float) -> float:
    """Natural logarithm with ``ln(0) == -inf``."""
    if x == 0.0:
        return -inf
    return log(x)


def logsum(*lv: float) -> float:
    """
    Compute ``ln(sum(exp(l) for l in lv))`` in a numerically stable way.

    Parameters
    ----------
    *lv : float
        Logarithms ``ln(v1), ln(v2), ...`` of non-negative numbers.

    Returns
    -------
    float
        Logarithm of the sum. No arguments give ``-inf`` (the empty sum).

    Notes
    -----
    Two values use ``hi + log1p(exp(lo - hi))``. For more values the maximum
    ``m`` is factored out and ``m + log1p(sum(exp(l - m)))`` is returned, the sum
    running over all other entries.

    Examples
    --------
    >>> from math import inf, log
    >>> logsum(-inf, -0.5)
    -0.5
    >>> abs(logsum(log(1.0), log(2.0), log(3.0)) - log(6.0)) < 1e-12
    True
    """
    if len(lv) <= 2:
        if len(lv) == 2:
            lx, ly = lv
            hi, lo = (lx, ly) if lx >= ly else (ly, lx)
            if lo == -inf:
                return hi
            return hi + log1p(exp(lo - hi))
        if len(lv) == 1:
            return lv[0]
        return -inf

    m = -inf
    mj = 0
    for j, value in enumerate(lv):
        if value > m:
            m, mj = value, j
    if m == -inf:
        return m

    total = 0.0
    for j, value in enumerate(lv):
        if j != mj:
            total += exp(value - m)
    return m + log1p(total)


__all__ = ["ln", "logsum"]
