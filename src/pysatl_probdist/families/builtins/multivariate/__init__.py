"""
Built-in multivariate distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.multivariate.standard_gaussian import (
    MultivariateStandardGaussian,
)

__all__ = [
    "MultivariateStandardGaussian",
]
