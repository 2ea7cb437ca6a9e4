"""
Tests for the Binomial distribution

Closed-form mass and statistics against scipy, the degenerate success
probabilities, quantiles and the small failure probability constructor.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_probdist.distributions import ArraySample, UnimodalDistribution, UnivariateDistribution
from pysatl_probdist.errors import DomainError
from pysatl_probdist.families import Binomial
from pysatl_probdist.types import FamilyName, Interval, IntervalType, UnivariateDiscrete

from ..base import BaseDistributionTest


class TestBinomial(BaseDistributionTest):
    """Test suite for the Binomial distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.n = 10
        self.p = 0.3
        self.dist = Binomial(self.n, self.p)

    def test_properties(self):
        """Test basic properties."""
        assert isinstance(self.dist, UnivariateDistribution)
        assert isinstance(self.dist, UnimodalDistribution)
        assert self.dist.family_name == FamilyName.BINOMIAL
        assert self.dist.distribution_type == UnivariateDiscrete
        assert self.dist.is_finite is True
        support = self.dist.support
        assert (support.left, support.right, support.kind) == (0.0, 10.0, IntervalType.CLOSED)
        assert (self.dist.min(), self.dist.max()) == (0.0, 10.0)

    def test_parameter_validation(self):
        """Test parameter constraints validation."""
        with pytest.raises(DomainError, match="n must be"):
            Binomial(-1, 0.5)
        with pytest.raises(DomainError, match="n must be"):
            Binomial(2.5, 0.5)  # type: ignore[arg-type]
        with pytest.raises(DomainError, match="n must be"):
            Binomial(True, 0.5)
        with pytest.raises(DomainError, match="p must be"):
            Binomial(3, 1.5)
        with pytest.raises(DomainError, match="p must be"):
            Binomial(3, math.nan)
        with pytest.raises(DomainError, match="p must be 1.0"):
            Binomial(3, 0.5, q=0.5)

    def test_pmf(self):
        """Test probability mass against scipy."""
        ks = np.arange(0, self.n + 1)
        actual = np.array([self.dist.pmf(float(k)) for k in ks])
        self.assert_relatively_close(actual, binom.pmf(ks, self.n, self.p), self.LNGAMMA_PRECISION)
        assert self.dist.pmf(2.5) == 0.0
        assert self.dist.pmf(-1.0) == 0.0
        assert self.dist.pmf(11.0) == 0.0
        assert self.dist.log_pmf(2.5) == -math.inf

    def test_atoms(self):
        """Test the atom enumeration and lookup."""
        assert list(self.dist) == [float(k) for k in range(11)]
        assert list(self.dist.atoms(Interval(2.5, 5.0, IntervalType.CLOSED_OPEN))) == [3.0, 4.0]
        assert self.dist.is_atom(3.0)
        assert not self.dist.is_atom(3.5)
        assert not self.dist.is_atom(11.0)
        assert self.dist.closest_atom(3.4) == 3.0
        assert self.dist.closest_atom(-7.0) == 0.0
        assert self.dist.closest_atom(42.0) == 10.0

    def test_cdf(self):
        """Test cdf and upper cdf against scipy."""
        xs = [0.0, 1.0, 3.0, 3.5, 7.0, 9.0]
        cdf = np.array([self.dist.cdf(x) for x in xs])
        ucdf = np.array([self.dist.ucdf(x) for x in xs])
        self.assert_relatively_close(cdf, binom.cdf(xs, self.n, self.p), self.LNGAMMA_PRECISION)
        expected_ucdf = binom.sf(np.ceil(xs) - 1.0, self.n, self.p)
        self.assert_relatively_close(ucdf, expected_ucdf, self.LNGAMMA_PRECISION)

        assert self.dist.cdf(-0.5) == 0.0
        assert self.dist.cdf(10.0) == 1.0
        assert self.dist.ucdf(0.0) == 1.0
        assert self.dist.ucdf(10.5) == 0.0

    def test_interval_mass(self):
        """Test interval masses for all boundary kinds."""
        pmf = self.dist.pmf
        closed = self.dist.interval_mass(Interval(2.0, 4.0))
        opened = self.dist.interval_mass(Interval(2.0, 4.0, IntervalType.OPEN))
        assert closed == pytest.approx(pmf(2.0) + pmf(3.0) + pmf(4.0), rel=1e-14)
        assert opened == pytest.approx(pmf(3.0), rel=1e-14)
        assert self.dist.log_interval_mass(Interval(2.0, 4.0)) == pytest.approx(
            math.log(closed), rel=1e-12
        )
        assert self.dist.interval_mass(Interval(4.2, 4.8)) == 0.0

    def test_closed_form_statistics(self):
        """Test moments against scipy."""
        mean, var, skew, kurt = binom.stats(self.n, self.p, moments="mvsk")
        assert self.dist.mean() == pytest.approx(mean, rel=self.CALCULATION_PRECISION)
        assert self.dist.var() == pytest.approx(var, rel=self.CALCULATION_PRECISION)
        assert self.dist.skewness() == pytest.approx(skew, rel=self.CALCULATION_PRECISION)
        assert self.dist.kurtosis_excess() == pytest.approx(kurt, rel=self.CALCULATION_PRECISION)
        assert self.dist.kurtosis_proper() == pytest.approx(kurt + 3.0, rel=1e-10)

    def test_enumerated_statistics(self):
        """Test the generic moments and entropy computed by enumeration."""
        third = self.dist.central_moment(3.0)
        assert third == pytest.approx(self.dist.skewness() * self.dist.std() ** 3, rel=1e-7)
        assert self.dist.moment(2.0) == pytest.approx(
            self.dist.var() + self.dist.mean() ** 2, rel=1e-8
        )
        assert self.dist.entropy() == pytest.approx(binom.entropy(self.n, self.p), rel=1e-8)

    @pytest.mark.parametrize("p", [0.0, 1.0], ids=["never", "always"])
    def test_degenerate_probabilities_are_exact(self, p):
        """Test that p == 0 and p == 1 give exact point masses."""
        dist = Binomial(self.n, p)
        atom = 0.0 if p == 0.0 else float(self.n)
        assert dist.pmf(atom) == 1.0
        assert dist.pmf(5.0) == 0.0
        assert dist.cdf(atom) == 1.0
        assert dist.mean() == atom
        assert dist.var() == 0.0
        assert dist.median() == atom
        assert dist.ppf(0.5) == atom
        assert dist.mode() == atom
        assert dist.entropy() == 0.0

    def test_zero_trials(self):
        """Test the single-atom distribution B(0, p)."""
        dist = Binomial(0, 0.3)
        assert list(dist) == [0.0]
        assert dist.pmf(0.0) == 1.0
        assert dist.mean() == 0.0
        assert dist.median() == 0.0

    @pytest.mark.parametrize("k", range(0, 65, 1), ids=lambda k: f"{k}/64")
    def test_median_matches_quantile(self, k):
        """Test the closed-form median against the generic quantile."""
        dist = Binomial(20, k / 64)
        assert dist.median() == dist.ppf(0.5)

    def test_quantile_inverts_cdf(self):
        """Test ppf(cdf(k)) == k on every atom."""
        for k in range(self.n + 1):
            assert self.dist.ppf(self.dist.cdf(float(k))) == float(k)

    def test_quantile_domain(self):
        """Test the quantile at and outside the probability range."""
        assert self.dist.ppf(0.0) == -math.inf
        assert self.dist.ppf(1.0) == 10.0
        with pytest.raises(DomainError, match="ppf"):
            self.dist.ppf(1.5)
        with pytest.raises(DomainError, match="ppf"):
            self.dist.ppf(math.nan)

    def test_box_plot_statistics(self):
        """Test that the box plot markers are ordered."""
        stats = self.dist.box_plot_statistics()
        assert stats.lower_whisker <= stats.lower_quartile <= stats.median
        assert stats.median <= stats.upper_quartile <= stats.upper_whisker
        assert stats.median == self.dist.median()
        assert self.dist.iqr() == stats.upper_quartile - stats.lower_quartile

    @pytest.mark.parametrize(
        "n, p, mode, upper",
        [(10, 0.3, 3.0, 3.0), (9, 0.5, 4.0, 5.0), (10, 0.0, 0.0, 0.0), (10, 1.0, 10.0, 10.0)],
        ids=["single", "double", "never", "always"],
    )
    def test_mode(self, n, p, mode, upper):
        """Test the smallest mode and the mode interval."""
        dist = Binomial(n, p)
        assert dist.mode() == mode
        interval = dist.mode_interval()
        assert (interval.left, interval.right) == (mode, upper)

    def test_small_failure_probability(self):
        """Test that a tiny q survives where 1 - q would round to 1."""
        dist = Binomial.from_failure_probability(100, 1e-20)
        assert dist.success_probability == 1.0
        assert dist.pmf(99.0) == pytest.approx(1e-18, rel=self.LNGAMMA_PRECISION)
        assert dist.var() == pytest.approx(1e-18, rel=1e-12)
        assert Binomial(100, 1.0 - 1e-20).pmf(99.0) == 0.0

    def test_success_probability_estimate(self):
        """Test the maximum-likelihood estimate of p."""
        assert Binomial.p_from_sample(10, [3.0, 4.0, 5.0]) == pytest.approx(0.4)
        sample = ArraySample(np.array([[2.0], [6.0]]))
        assert Binomial.p_from_sample(8, sample) == pytest.approx(0.5)
        with pytest.raises(DomainError, match="n must be positive"):
            Binomial.p_from_sample(0, [1.0])
        with pytest.raises(DomainError, match="non-empty"):
            Binomial.p_from_sample(10, [])

    def test_sampling(self):
        """Test that samples are atoms of the distribution."""
        values = self.dist.random(50, seed=7)
        assert values.shape == (50,)
        assert all(self.dist.is_atom(float(v)) for v in values)
        np.testing.assert_array_equal(values, self.dist.random(50, seed=7))

    def test_log_likelihood(self):
        """Test the log-likelihood of observed counts."""
        data = [1.0, 3.0, 3.0]
        expected = sum(math.log(self.dist.pmf(x)) for x in data)
        assert self.dist.log_likelihood(data) == pytest.approx(expected, rel=1e-14)
        assert self.dist.log_likelihood([2.5]) == -math.inf

    @pytest.mark.parametrize("p", [0.0, 1.0], ids=["never", "always"])
    def test_degenerate_mass_on_every_atom(self, p):
        """Test the exact point mass and step cdf over the whole support."""
        dist = Binomial(20, p)
        atom = 20 * p
        for i in range(21):
            assert dist.pmf(float(i)) == (1.0 if i == atom else 0.0)
            assert dist.cdf(float(i)) == (1.0 if i >= atom else 0.0)

    @pytest.mark.parametrize("p", [0.001, 0.05, 0.2, 0.5, 0.77, 0.95, 0.999], ids=str)
    def test_quantile_is_generalized_inverse(self, p):
        """Test cdf(ppf(p)) >= p > cdf(ppf(p) - 1)."""
        x = self.dist.ppf(p)
        assert self.dist.cdf(x) >= p
        assert self.dist.cdf(x - 1.0) < p
