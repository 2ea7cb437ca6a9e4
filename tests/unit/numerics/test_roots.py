from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, isfinite, nan, sqrt

import pytest

from pysatl_probdist.config import numeric_config_context
from pysatl_probdist.errors import DomainError
from pysatl_probdist.numerics.roots import find_root_bisection, find_root_interval
from pysatl_probdist.types import IntervalType


class TestFindRootInterval:
    def test_bracket_already_contains_sign_change(self) -> None:
        ab = find_root_interval(lambda x: x - 0.5, 0.0, 1.0)
        assert ab.kind is IntervalType.OPEN
        assert (ab.left, ab.right) == (0.0, 1.0)

    def test_expands_towards_root(self) -> None:
        ab = find_root_interval(lambda x: x - 3.0, 0.0, 1.0)
        assert ab.kind is IntervalType.OPEN
        assert ab.left < 3.0 < ab.right

    def test_expands_left(self) -> None:
        ab = find_root_interval(lambda x: x + 10.0, 0.0, 1.0)
        assert ab.left < -10.0 < ab.right

    def test_no_sign_change_gives_nan_interval(self) -> None:
        assert find_root_interval(lambda x: x * x + 1.0, -1.0, 1.0).is_nan

    def test_expansion_budget_is_configurable(self) -> None:
        with numeric_config_context(root_expand_iterations=1):
            assert find_root_interval(lambda x: x - 100.0, 0.0, 1.0).is_nan

    def test_infinite_endpoints_are_clamped(self) -> None:
        ab = find_root_interval(lambda x: x, -inf, inf)
        assert ab.kind is IntervalType.OPEN
        assert isfinite(ab.left)
        assert isfinite(ab.right)
        assert ab.left == -ab.right

    @pytest.mark.parametrize(
        "a, b",
        [(1.0, 0.0), (1.0, 1.0), (nan, 1.0), (0.0, nan)],
        ids=["reversed", "degenerate", "nan_left", "nan_right"],
    )
    def test_domain(self, a: float, b: float) -> None:
        with pytest.raises(DomainError, match="a < b"):
            find_root_interval(lambda x: x, a, b)


class TestFindRootBisection:
    def test_increasing_function(self) -> None:
        root = find_root_bisection(lambda x: x * x - 2.0, 0.0, 2.0)
        assert root == pytest.approx(sqrt(2.0), rel=1e-14)

    def test_decreasing_function(self) -> None:
        root = find_root_bisection(lambda x: 2.0 - x * x, 0.0, 2.0)
        assert root == pytest.approx(sqrt(2.0), rel=1e-14)

    def test_root_at_endpoint(self) -> None:
        assert find_root_bisection(lambda x: x, 0.0, 1.0) == 0.0
        assert find_root_bisection(lambda x: x - 1.0, 0.0, 1.0) == 1.0

    def test_exact_midpoint_root(self) -> None:
        assert find_root_bisection(lambda x: x - 1.0, 0.0, 2.0) == 1.0

    def test_accuracy_stops_early(self) -> None:
        calls: list[float] = []

        def f(x: float) -> float:
            calls.append(x)
            return x - 1.3

        root = find_root_bisection(f, 0.0, 2.0, xacc=0.1)
        assert abs(root - 1.3) < 0.2
        assert len(calls) < 10

    def test_same_sign_endpoints(self) -> None:
        with pytest.raises(DomainError, match="opposite signs"):
            find_root_bisection(lambda x: x * x + 1.0, -1.0, 1.0)

    def test_combined_with_bracketing(self) -> None:
        ab = find_root_interval(lambda x: x**3 - 50.0, 0.0, 1.0)
        root = find_root_bisection(lambda x: x**3 - 50.0, ab.left, ab.right)
        assert root == pytest.approx(50.0 ** (1.0 / 3.0), rel=1e-13)

    def test_identity_on_symmetric_bracket(self) -> None:
        assert find_root_bisection(lambda x: x, -1.0, 1.0, xacc=1e-10) == pytest.approx(
            0.0, abs=1e-10
        )
