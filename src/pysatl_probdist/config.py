"""
Numeric Configuration
=====================

Tunable tolerances and iteration budgets of the iterative algorithms.

- :class:`NumericConfig`: immutable bundle of tunables.
- :func:`numeric_config`: the configuration currently in effect.
- :func:`configure_numerics` / :func:`reset_numeric_config`: replace or restore it.
- :func:`numeric_config_context`: temporary override.

Notes
-----
Algorithms read the configuration at call time, so changes take effect
immediately. The factorial tables are sized once, when
:mod:`pysatl_probdist.numerics.special` is imported.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

from pysatl_probdist.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any


@dataclass(frozen=True, slots=True)
class NumericConfig:
    """
    Tolerances and iteration caps.

    Parameters
    ----------
    gamma_max_iterations : int, default 200
        Cap for the incomplete gamma series and continued fraction.
    root_expand_factor : float, default 1.6
        Geometric factor for bracket expansion in root finding.
    root_expand_iterations : int, default 50
        Maximum bracket expansions.
    expectation_mass_tolerance : float, default 1e-8
        Distance from 1 of the accumulated mass required before an
        infinite-support expectation may stop.
    expectation_stable_steps : int, default 20
        Consecutive steps of decreasing probability and unchanged running sum
        required before an infinite-support expectation may stop.
    expectation_max_terms : int, default 1_000_000
        Hard limit of atoms visited by an infinite-support expectation.
    quadrature_limit : int, default 200
        Subinterval limit passed to :func:`scipy.integrate.quad`.
    factorial_table_bound : int, default 32
        Largest ``n`` whose factorial is tabulated exactly.
    lnfactorial_table_bound : int, default 100
        Largest integer whose log-factorial is cached.
    """

    gamma_max_iterations: int = 200
    root_expand_factor: float = 1.6
    root_expand_iterations: int = 50
    expectation_mass_tolerance: float = 1e-8
    expectation_stable_steps: int = 20
    expectation_max_terms: int = 1_000_000
    quadrature_limit: int = 200
    factorial_table_bound: int = 32
    lnfactorial_table_bound: int = 100

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise DomainError(f"{f.name} must be positive, got {value!r}")
        if self.root_expand_factor <= 1.0:
            raise DomainError(
                f"root_expand_factor must exceed 1, got {self.root_expand_factor!r}"
            )


_lock = threading.Lock()
_current = NumericConfig()


def numeric_config() -> NumericConfig:
    """Return the configuration currently in effect."""
    return _current


def configure_numerics(**changes: Any) -> NumericConfig:
    """
    Replace selected fields of the process-wide configuration.

    Parameters
    ----------
    **changes
        Field names of :class:`NumericConfig` and their new values.

    Returns
    -------
    NumericConfig
        The new configuration.
    """
    global _current
    with _lock:
        _current = replace(_current, **changes)
        return _current


def reset_numeric_config() -> None:
    """Restore the default configuration."""
    global _current
    with _lock:
        _current = NumericConfig()


@contextmanager
def numeric_config_context(**changes: Any) -> Iterator[NumericConfig]:
    """
    Temporarily override configuration fields.

    On exit only the overridden fields are restored; changes made to other
    fields while the block runs are kept.

    Examples
    --------
    >>> from pysatl_probdist.config import numeric_config_context
    >>> with numeric_config_context(gamma_max_iterations=500):
    ...     pass
    """
    global _current
    with _lock:
        saved = {name: getattr(_current, name) for name in changes}
        _current = replace(_current, **changes)
        active = _current
    try:
        yield active
    finally:
        with _lock:
            _current = replace(_current, **saved)


__all__ = [
    "NumericConfig",
    "numeric_config",
    "configure_numerics",
    "reset_numeric_config",
    "numeric_config_context",
]
