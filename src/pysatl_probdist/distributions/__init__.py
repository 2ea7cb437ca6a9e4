"""
Distributions subpackage

Interfaces and default implementations of the probability distribution
framework:

- distribution protocols and the vector adapter (:mod:`.distribution`);
- the generic univariate base (:mod:`.base`) with discrete (:mod:`.discrete`)
  and continuous (:mod:`.continuous`) default layers;
- quantile, expectation and sampling strategies (:mod:`.strategies`);
- sample containers (:mod:`.sampling`) and discrete supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .base import AbstractUnivariateDistribution
from .continuous import ContinuousDistribution
from .discrete import DiscreteDistribution, FiniteDistribution
from .distribution import (
    BoxPlotStatistics,
    Distribution,
    UnimodalDistribution,
    UnivariateDistribution,
    VectorForm,
    coordinates,
)
from .sampling import ArraySample, Sample
from .strategies import (
    BisectionQuantile,
    EnumerationExpectation,
    ExpectationStrategy,
    InversionSamplingStrategy,
    QuadratureExpectation,
    QuantileStrategy,
    SamplingStrategy,
    SeriesExpectation,
)
from .support import DiscreteSupport, ExplicitTableDiscreteSupport, LatticeSupport

__all__ = [
    # protocols
    "Distribution",
    "UnivariateDistribution",
    "UnimodalDistribution",
    "BoxPlotStatistics",
    "VectorForm",
    "coordinates",
    # default layers
    "AbstractUnivariateDistribution",
    "DiscreteDistribution",
    "FiniteDistribution",
    "ContinuousDistribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "QuantileStrategy",
    "BisectionQuantile",
    "ExpectationStrategy",
    "EnumerationExpectation",
    "SeriesExpectation",
    "QuadratureExpectation",
    "SamplingStrategy",
    "InversionSamplingStrategy",
    # supports
    "DiscreteSupport",
    "LatticeSupport",
    "ExplicitTableDiscreteSupport",
]
