"""
Numerics subpackage

Numerically stable primitives used by the distribution framework:

- precision constants, rounding and robust equality (:mod:`.precision`);
- log-space summation (:mod:`.logspace`);
- gamma-family special functions with cached factorials (:mod:`.special`);
- bracket expansion and bisection root finding (:mod:`.roots`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .logspace import ln, logsum
from .precision import (
    DBL_EPS,
    DBL_MAX,
    DBL_MIN_NORMAL,
    DBL_TOL,
    TOL_FACTOR,
    double_accuracy_in,
    double_equal,
    xround,
)
from .roots import find_root_bisection, find_root_interval
from .special import (
    FACTORIAL_CACHE,
    FactorialCache,
    beta,
    bincoeff,
    bincoeff_int,
    bincoeff_rounded,
    factorial,
    gamma_cf,
    gamma_p,
    gamma_q,
    gamma_series,
    lnbeta,
    lnbincoeff,
    lnfactorial,
    lngamma,
)

__all__ = [
    # precision
    "DBL_EPS",
    "DBL_MAX",
    "DBL_MIN_NORMAL",
    "DBL_TOL",
    "TOL_FACTOR",
    "double_accuracy_in",
    "double_equal",
    "xround",
    # log-space
    "ln",
    "logsum",
    # special functions
    "FACTORIAL_CACHE",
    "FactorialCache",
    "beta",
    "bincoeff",
    "bincoeff_int",
    "bincoeff_rounded",
    "factorial",
    "gamma_cf",
    "gamma_p",
    "gamma_q",
    "gamma_series",
    "lnbeta",
    "lnbincoeff",
    "lnfactorial",
    "lngamma",
    # roots
    "find_root_bisection",
    "find_root_interval",
]
