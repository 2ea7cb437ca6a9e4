"""
Special Functions
=================

Logarithmic gamma and beta functions, factorials and binomial coefficients, and
the regularized incomplete gamma functions ``P(a, x)`` and ``Q(a, x)``.

Notes
-----
- Exact factorials of small integers and log-factorials of small integers are
  kept in a :class:`FactorialCache` owned by this module
  (:data:`FACTORIAL_CACHE`). The tables only grow; extension is serialized by a
  lock, lookups of published entries are lock-free.
- ``P`` and ``Q`` are never both evaluated: depending on ``x < a + 1`` either the
  series for ``P`` or the continued fraction for ``Q`` is computed and the other
  value is obtained as the complement.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from math import exp, inf, log

from pysatl_probdist.config import numeric_config
from pysatl_probdist.errors import ConvergenceError, DomainError
from pysatl_probdist.numerics.precision import DBL_MIN_NORMAL, DBL_TOL, xround

_LNGAMMA_COEFFICIENTS = (
    76.18009172947146,
    -86.50532032941677,
    24.01409824083091,
    -1.231739572450155,
    0.1208650973866179e-02,
    -0.5395239384953e-05,
)

_LOG_DBL_MAX = 709.782712893384


def lngamma(x: float) -> float:
    """
    Natural logarithm of the gamma function (Lanczos approximation).

    Parameters
    ----------
    x : float
        Argument, ``x > 0``.

    Returns
    -------
    float
        ``ln Γ(x)``.

    Raises
    ------
    DomainError
        If ``x`` is not positive.
    """
    if not x > 0:
        raise DomainError(f"lngamma: argument {x} > 0 required")
    y = x
    tmp = x + 5.5
    tmp -= (x + 0.5) * log(tmp)
    ser = 1.000000000190015
    for coefficient in _LNGAMMA_COEFFICIENTS:
        y += 1.0
        ser += coefficient / y
    return -tmp + log(2.5066282746310005 * ser / x)


class FactorialCache:
    """
    Lazily grown tables of ``n!`` and ``ln(n!)`` for small integers.

    Parameters
    ----------
    factorial_bound : int, default 32
        Largest ``n`` whose factorial is tabulated. The running product is kept
        as an exact ``int`` and each entry is its correctly rounded float.
    lnfactorial_bound : int, default 100
        Largest integer whose log-factorial is cached.

    Notes
    -----
    Both tables start as ``[0!, 1!]`` and are extended contiguously on demand.
    The extend-and-publish step holds :attr:`_lock`; readers index the lists
    without locking because entries are appended only after being computed.
    """

    __slots__ = (
        "factorial_bound",
        "lnfactorial_bound",
        "_lock",
        "_product",
        "_factorials",
        "_lnfactorials",
    )

    def __init__(self, factorial_bound: int = 32, lnfactorial_bound: int = 100) -> None:
        if factorial_bound < 1 or lnfactorial_bound < 1:
            raise DomainError("Factorial table bounds must be at least 1.")
        self.factorial_bound = factorial_bound
        self.lnfactorial_bound = lnfactorial_bound
        self._lock = threading.Lock()
        self._product = 1
        self._factorials: list[float] = [1.0, 1.0]
        self._lnfactorials: list[float] = [0.0, 0.0]

    @property
    def factorials_filled(self) -> int:
        """Number of published factorial entries."""
        return len(self._factorials)

    @property
    def lnfactorials_filled(self) -> int:
        """Number of published log-factorial entries."""
        return len(self._lnfactorials)

    def factorial(self, n: int) -> float:
        """Return ``n!`` for ``0 <= n <= factorial_bound``."""
        if not 0 <= n <= self.factorial_bound:
            raise DomainError(f"factorial table covers 0..{self.factorial_bound}, got {n}")
        table = self._factorials
        if n < len(table):
            return table[n]
        with self._lock:
            while len(table) <= n:
                j = len(table)
                self._product *= j
                table.append(float(self._product))
            return table[n]

    def lnfactorial(self, n: int) -> float:
        """Return ``ln(n!)`` for ``0 <= n <= lnfactorial_bound``."""
        if not 0 <= n <= self.lnfactorial_bound:
            raise DomainError(f"log-factorial table covers 0..{self.lnfactorial_bound}, got {n}")
        table = self._lnfactorials
        if n < len(table):
            return table[n]
        with self._lock:
            while len(table) <= n:
                j = len(table)
                table.append(lngamma(j + 1.0))
            return table[n]


def _new_factorial_cache() -> FactorialCache:
    config = numeric_config()
    return FactorialCache(config.factorial_table_bound, config.lnfactorial_table_bound)


FACTORIAL_CACHE = _new_factorial_cache()
"""Process-wide factorial tables used by :func:`factorial` and :func:`lnfactorial`."""


def factorial(n: int) -> float:
    """
    Return ``n!`` as a float.

    Parameters
    ----------
    n : int
        Non-negative integer.

    Returns
    -------
    float
        Tabulated value for small ``n``, otherwise ``round(exp(lngamma(n+1)))``;
        ``inf`` when the result overflows.

    Raises
    ------
    DomainError
        If ``n`` is negative or not integral.
    """
    if not n >= 0 or n != int(n):
        raise DomainError(f"factorial: non-negative integer required, got {n}")
    n = int(n)
    if n <= FACTORIAL_CACHE.factorial_bound:
        return FACTORIAL_CACHE.factorial(n)
    lg = lngamma(n + 1.0)
    if lg > _LOG_DBL_MAX:
        return inf
    return xround(exp(lg))


def lnfactorial(x: float) -> float:
    """
    Return ``ln(x!) = lngamma(x + 1)`` for real ``x > -1``.

    Integers up to the cache bound are served from :data:`FACTORIAL_CACHE`.
    """
    if not x > -1.0:
        raise DomainError(f"lnfactorial: argument {x} > -1 required")
    if x != xround(x) or x > FACTORIAL_CACHE.lnfactorial_bound:
        return lngamma(x + 1.0)
    if x <= 1.0:
        return 0.0
    return FACTORIAL_CACHE.lnfactorial(int(x))


def lnbincoeff(n: float, k: float) -> float:
    """Logarithm of the binomial coefficient ``(n choose k)``."""
    return lnfactorial(n) - lnfactorial(k) - lnfactorial(n - k)


def bincoeff(n: float, k: float) -> float:
    """Binomial coefficient ``(n choose k)`` of real arguments."""
    return exp(lnbincoeff(n, k))


def bincoeff_rounded(n: float, k: float) -> float:
    """Binomial coefficient rounded to the nearest integer, as a float."""
    return xround(exp(lnbincoeff(n, k)))


def bincoeff_int(n: int, k: int) -> int:
    """Binomial coefficient of integer arguments as an ``int``."""
    return round(exp(lnbincoeff(n, k)))


def lnbeta(z: float, w: float) -> float:
    """Logarithm of the beta function ``B(z, w)``."""
    return lngamma(z) + lngamma(w) - lngamma(z + w)


def beta(z: float, w: float) -> float:
    """Beta function ``B(z, w)``."""
    return exp(lnbeta(z, w))


def _check_gamma_arguments(a: float, x: float) -> None:
    if not a > 0.0 or not x >= 0.0:
        raise DomainError(f"incomplete gamma requires a > 0 and x >= 0, got a={a}, x={x}")


def gamma_series(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma ``P(a, x)`` by its power series.

    Converges quickly for ``x < a + 1``.

    Raises
    ------
    ConvergenceError
        If ``NumericConfig.gamma_max_iterations`` terms do not suffice.
    """
    _check_gamma_arguments(a, x)
    if x == 0.0:
        return 0.0
    max_iterations = numeric_config().gamma_max_iterations
    gln = lngamma(a)
    ap = a
    delta = total = 1.0 / a
    for _ in range(max_iterations):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * DBL_TOL:
            return total * exp(-x + a * log(x) - gln)
    raise ConvergenceError(
        f"gamma series did not converge in {max_iterations} iterations "
        f"(a={a} too large for the iteration cap)"
    )


def gamma_cf(a: float, x: float) -> float:
    """
    Regularized upper incomplete gamma ``Q(a, x)`` by a continued fraction.

    Uses the modified Lentz algorithm; converges quickly for ``x >= a + 1``.

    Raises
    ------
    ConvergenceError
        If ``NumericConfig.gamma_max_iterations`` steps do not suffice.
    """
    _check_gamma_arguments(a, x)
    max_iterations = numeric_config().gamma_max_iterations
    gln = lngamma(a)
    b = x + 1.0 - a
    c = 1.0 / DBL_MIN_NORMAL
    d = 1.0 / b
    h = d
    for i in range(1, max_iterations + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < DBL_MIN_NORMAL:
            d = DBL_MIN_NORMAL
        c = b + an / c
        if abs(c) < DBL_MIN_NORMAL:
            c = DBL_MIN_NORMAL
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < 2 * DBL_TOL:
            return exp(-x + a * log(x) - gln) * h
    raise ConvergenceError(
        f"gamma continued fraction did not converge in {max_iterations} iterations "
        f"(a={a} too large for the iteration cap)"
    )


def gamma_p(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma function ``P(a, x)``.

    This is the cdf of a Gamma distribution with shape ``a`` and scale 1.

    Parameters
    ----------
    a : float
        Shape, ``a > 0``.
    x : float
        Argument, ``x >= 0``.

    Returns
    -------
    float
        ``P(a, x)`` in ``[0, 1]``.
    """
    _check_gamma_arguments(a, x)
    if x == inf:
        return 1.0
    if x < a + 1.0:
        return gamma_series(a, x)
    return 1.0 - gamma_cf(a, x)


def gamma_q(a: float, x: float) -> float:
    """
    Regularized upper incomplete gamma function ``Q(a, x) = 1 - P(a, x)``.

    This is the upper cdf of a Gamma distribution with shape ``a`` and scale 1.
    """
    _check_gamma_arguments(a, x)
    if x == inf:
        return 0.0
    if x < a + 1.0:
        return 1.0 - gamma_series(a, x)
    return gamma_cf(a, x)


__all__ = [
    "FACTORIAL_CACHE",
    "FactorialCache",
    "lngamma",
    "factorial",
    "lnfactorial",
    "lnbincoeff",
    "bincoeff",
    "bincoeff_rounded",
    "bincoeff_int",
    "lnbeta",
    "beta",
    "gamma_series",
    "gamma_cf",
    "gamma_p",
    "gamma_q",
]
