"""
Distribution families.

Concrete distributions built on the framework defaults of
:mod:`pysatl_probdist.distributions`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import (
    Binomial,
    Gamma,
    MultivariateStandardGaussian,
    Poisson,
    TableDistribution,
)

__all__ = [
    "Binomial",
    "Poisson",
    "TableDistribution",
    "Gamma",
    "MultivariateStandardGaussian",
]
