"""
Built-in discrete distribution families.

This module contains implementations of discrete distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.discrete.binomial import Binomial
from pysatl_probdist.families.builtins.discrete.poisson import Poisson
from pysatl_probdist.families.builtins.discrete.table import TableDistribution

__all__ = [
    "Binomial",
    "Poisson",
    "TableDistribution",
]
