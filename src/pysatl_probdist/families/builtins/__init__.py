"""
Built-in distribution families for PySATL ProbDist.

This package contains the standard distributions that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.continuous import Gamma
from pysatl_probdist.families.builtins.discrete import Binomial, Poisson, TableDistribution
from pysatl_probdist.families.builtins.multivariate import MultivariateStandardGaussian

__all__ = [
    "Binomial",
    "Poisson",
    "TableDistribution",
    "Gamma",
    "MultivariateStandardGaussian",
]
