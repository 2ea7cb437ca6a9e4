"""
Quantile, Expectation and Sampling Strategies
=============================================

Pluggable algorithms used by the default distribution layers:

- :class:`QuantileStrategy` / :class:`BisectionQuantile`: quantile function by
  bisection on the cdf.
- :class:`ExpectationStrategy` with
  :class:`EnumerationExpectation` (finite support),
  :class:`SeriesExpectation` (countably infinite support) and
  :class:`QuadratureExpectation` (continuous distributions).
- :class:`SamplingStrategy` / :class:`InversionSamplingStrategy`: inversion
  method on i.i.d. uniforms.

Notes
-----
- Strategies are stateless; tolerances and iteration budgets come from
  :func:`pysatl_probdist.config.numeric_config` at call time.
- Concrete distributions swap a strategy by overriding the corresponding class
  attribute, or bypass it entirely by overriding the statistic with a closed form.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from math import inf, isnan
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
from scipy import integrate as _sp_integrate

from pysatl_probdist.config import numeric_config
from pysatl_probdist.errors import DomainError, ExpectationTruncationWarning, InternalInvariantError
from pysatl_probdist.numerics.precision import DBL_MAX

from .sampling import ArraySample

if TYPE_CHECKING:
    from pysatl_probdist.distributions.base import AbstractUnivariateDistribution
    from pysatl_probdist.distributions.discrete import DiscreteDistribution
    from pysatl_probdist.types import ScalarFunc


class QuantileStrategy(Protocol):
    """Protocol for quantile function implementations."""

    def ppf(self, p: float, distr: AbstractUnivariateDistribution) -> float: ...


class BisectionQuantile(QuantileStrategy):
    """
    Generic quantile function ``ppf(p) = inf {x : cdf(x) >= p}``.

    The bracket ``[min(), max()]`` (infinite ends replaced by ``∓DBL_MAX``) is
    halved while a representable midpoint exists, keeping
    ``cdf(left) < p <= cdf(right)``.

    Raises
    ------
    DomainError
        If ``p`` is NaN or outside ``[0, 1]``.
    InternalInvariantError
        If the final right end violates ``cdf(right) >= p``.
    """

    def ppf(self, p: float, distr: AbstractUnivariateDistribution) -> float:
        if isnan(p) or p < 0.0 or p > 1.0:
            raise DomainError(f"ppf(p): p must be in [0, 1], got {p}")
        if p == 0.0:
            return -inf
        if p == 1.0:
            return distr.max()

        left = distr.min()
        right = distr.max()
        if left == -inf:
            left = -DBL_MAX
        if right == inf:
            right = DBL_MAX

        cdf = distr.cdf
        while True:
            # halves first so that neither the width nor the sum overflows
            mid = (right / 2 - left / 2) + left if left < 0.0 < right else left / 2 + right / 2
            if not left < mid < right:
                break
            if p <= cdf(mid):
                right = mid
            else:
                left = mid

        if cdf(right) < p:
            raise InternalInvariantError(
                f"quantile bisection ended with cdf({right}) = {cdf(right)} < p = {p}"
            )
        return right


class ExpectationStrategy(Protocol):
    """Protocol for ``E[h(X)]`` implementations."""

    def expect(self, h: ScalarFunc, distr: Any) -> float: ...


class EnumerationExpectation(ExpectationStrategy):
    """
    Exact expectation over a finite support.

    Sums ``pmf(x) * h(x)`` over all atoms; atoms with zero probability and
    zero contributions are skipped, so ``h`` is never evaluated where the
    distribution puts no mass.
    """

    def expect(self, h: ScalarFunc, distr: DiscreteDistribution) -> float:
        total = 0.0
        for x in distr.atoms():
            p = distr.pmf(x)
            if p == 0.0:
                continue
            hx = h(x)
            if hx == 0.0:
                continue
            total += p * hx
        return total


class SeriesExpectation(ExpectationStrategy):
    """
    Convergence-monitored expectation over a countably infinite support.

    Atoms are visited in ascending order while a running sum is accumulated.
    The summation stops once all of the following hold:

    * the accumulated probability is within
      ``NumericConfig.expectation_mass_tolerance`` of 1;
    * the probability has decreased at each of the last
      ``NumericConfig.expectation_stable_steps`` atoms;
    * the running sum has not changed for as many atoms.

    After ``NumericConfig.expectation_max_terms`` atoms the partial sum is
    returned with an :class:`ExpectationTruncationWarning`.
    """

    def expect(self, h: ScalarFunc, distr: DiscreteDistribution) -> float:
        config = numeric_config()
        steps = config.expectation_stable_steps

        total = 0.0
        mass = 0.0
        p = 0.0
        decreasing = 0
        unchanged = 0
        for visited, x in enumerate(distr.atoms(), start=1):
            if visited > config.expectation_max_terms:
                warnings.warn(
                    f"Expectation over infinite support stopped after "
                    f"{config.expectation_max_terms} atoms (accumulated mass {mass!r}).",
                    ExpectationTruncationWarning,
                    stacklevel=3,
                )
                break

            previous = p
            p = distr.pmf(x)
            mass += p
            if p == 0.0:
                continue
            decreasing = decreasing + 1 if p < previous else 0

            term = p * h(x)
            unchanged = unchanged + 1 if total + term == total else 0
            total += term

            if (
                abs(mass - 1.0) < config.expectation_mass_tolerance
                and decreasing >= steps
                and unchanged >= steps
            ):
                break
        return total


class QuadratureExpectation(ExpectationStrategy):
    """
    Expectation of a continuous distribution by adaptive quadrature.

    Integrates ``pdf(x) * h(x)`` over ``[min(), max()]`` with
    :func:`scipy.integrate.quad`.
    """

    def expect(self, h: ScalarFunc, distr: AbstractUnivariateDistribution) -> float:
        pdf = distr.pdf

        def integrand(t: float) -> float:
            density = pdf(t)
            if density == 0.0:
                return 0.0
            return density * h(t)

        val, _ = _sp_integrate.quad(
            integrand, distr.min(), distr.max(), limit=numeric_config().quadrature_limit
        )
        return float(val)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(
        self, n: int, distr: AbstractUnivariateDistribution, **options: Any
    ) -> ArraySample: ...


class InversionSamplingStrategy(SamplingStrategy):
    """
    Inversion-method sampler.

    Draws ``U ~ U[0, 1)`` and returns ``ppf(U)``; ``U == 0`` maps to ``max()``.

    Options
    -------
    rng : numpy.random.Generator, optional
        Source of uniform variates.
    seed : int, optional
        Seed for a fresh generator when ``rng`` is not given.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: AbstractUnivariateDistribution, **options: Any) -> ArraySample:
        if n < 0:
            raise DomainError(f"Sample size must be non-negative, got {n}")
        rng = options.get("rng")
        if rng is None:
            rng = np.random.default_rng(options.get("seed"))
        U = rng.random(n)
        upper = distr.max()
        vals = np.array(
            [upper if u == 0.0 else distr.ppf(float(u)) for u in U], dtype=np.float64
        ).reshape(n, 1)
        return ArraySample(vals)


__all__ = [
    "QuantileStrategy",
    "BisectionQuantile",
    "ExpectationStrategy",
    "EnumerationExpectation",
    "SeriesExpectation",
    "QuadratureExpectation",
    "SamplingStrategy",
    "InversionSamplingStrategy",
]
