from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, isnan, nan

import numpy as np
import pytest

from pysatl_probdist.types import (
    EMPTY_INTERVAL,
    NAN_INTERVAL,
    NONNEGATIVE_REALS,
    REAL_LINE,
    ZERO_INTERVAL,
    Interval,
    IntervalType,
)


class TestInterval:
    def test_defaults_to_closed_real_line(self) -> None:
        ab = Interval()
        assert (ab.left, ab.right, ab.kind) == (-inf, inf, IntervalType.CLOSED)

    @pytest.mark.parametrize(
        "left, right",
        [(nan, 1.0), (0.0, nan), (nan, nan)],
        ids=["left_nan", "right_nan", "both_nan"],
    )
    def test_nan_endpoint_forces_nan_kind(self, left: float, right: float) -> None:
        ab = Interval(left, right, IntervalType.OPEN)
        assert ab.kind is IntervalType.NAN
        assert ab.is_nan
        assert not ab.is_empty
        assert not ab.contains(0.5)

    def test_constructors(self) -> None:
        point = Interval.point(2.0)
        assert point.is_point
        assert not point.is_empty
        assert Interval.nan().is_nan

    @pytest.mark.parametrize(
        "ab, expected",
        [
            (Interval(1.0, 0.0), True),
            (Interval(1.0, 1.0, IntervalType.OPEN), True),
            (Interval(1.0, 1.0, IntervalType.CLOSED_OPEN), True),
            (Interval(1.0, 1.0), False),
            (Interval(0.0, 1.0, IntervalType.OPEN), False),
        ],
        ids=["reversed", "open_point", "half_open_point", "closed_point", "open"],
    )
    def test_is_empty(self, ab: Interval, expected: bool) -> None:
        assert ab.is_empty is expected

    @pytest.mark.parametrize(
        "kind, left_in, right_in",
        [
            (IntervalType.CLOSED, True, True),
            (IntervalType.OPEN, False, False),
            (IntervalType.OPEN_CLOSED, False, True),
            (IntervalType.CLOSED_OPEN, True, False),
        ],
        ids=["closed", "open", "open_closed", "closed_open"],
    )
    def test_contains_boundaries(self, kind: IntervalType, left_in: bool, right_in: bool) -> None:
        ab = Interval(0.0, 1.0, kind)
        assert ab.contains(0.0) is left_in
        assert ab.contains(1.0) is right_in
        assert (0.5 in ab) is True
        assert (1.5 in ab) is False

    def test_contains_array(self) -> None:
        mask = Interval(0.0, 1.0, IntervalType.CLOSED_OPEN).contains(
            np.array([-1.0, 0.0, 0.5, 1.0, nan])
        )
        np.testing.assert_array_equal(mask, [False, True, True, False, False])

    def test_infinity_is_never_contained(self) -> None:
        assert inf not in Interval()
        assert -inf not in REAL_LINE

    def test_constants(self) -> None:
        assert EMPTY_INTERVAL.is_empty
        assert ZERO_INTERVAL.is_point
        assert NAN_INTERVAL.is_nan
        assert 0.0 in NONNEGATIVE_REALS
        assert -1e-300 not in NONNEGATIVE_REALS


class TestContainedEpsLattice:
    @pytest.mark.parametrize(
        "ab, eps, expected",
        [
            (Interval(0.5, 3.5), 1.0, (1.0, 3.0)),
            (Interval(1.0, 3.0), 1.0, (1.0, 3.0)),
            (Interval(1.0, 3.0, IntervalType.OPEN), 1.0, (2.0, 2.0)),
            (Interval(1.0, 3.0, IntervalType.OPEN_CLOSED), 1.0, (2.0, 3.0)),
            (Interval(1.0, 3.0, IntervalType.CLOSED_OPEN), 1.0, (1.0, 2.0)),
            (Interval(-0.7, 0.7), 0.5, (-0.5, 0.5)),
            (Interval(0.2, 0.8), 1.0, (1.0, 0.0)),
            (Interval(2.0, inf, IntervalType.CLOSED_OPEN), 1.0, (2.0, inf)),
            (Interval(-inf, 2.5), 1.0, (-inf, 2.0)),
        ],
        ids=[
            "inner",
            "closed_on_lattice",
            "open_on_lattice",
            "open_closed",
            "closed_open",
            "fine_lattice",
            "no_lattice_point",
            "unbounded_right",
            "unbounded_left",
        ],
    )
    def test_bounds(self, ab: Interval, eps: float, expected: tuple[float, float]) -> None:
        sub = ab.contained_eps_lattice(eps)
        assert sub.kind is IntervalType.CLOSED
        assert (sub.left, sub.right) == expected

    def test_no_lattice_point_is_empty(self) -> None:
        assert Interval(0.2, 0.8).contained_eps_lattice(1.0).is_empty

    def test_zero_eps_returns_same_interval(self) -> None:
        ab = Interval(0.2, 0.8, IntervalType.OPEN)
        assert ab.contained_eps_lattice(0.0) is ab

    def test_nan_interval(self) -> None:
        sub = Interval.nan().contained_eps_lattice(1.0)
        assert sub.is_nan
        assert isnan(sub.left)
