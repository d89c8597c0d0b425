"""
Statistics subpackage

Statistics derived from pairs of distributions:

- uniform random sources (:mod:`.random`);
- online statistics (:mod:`.streaming`);
- p-Wasserstein distance (:mod:`.wasserstein`);
- density-space and quantile-space interpolation (:mod:`.interpolation`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .interpolation import (
    DensityBlendStrategy,
    DistributionInterpolator,
    InterpolatedDensity,
    InterpolationResult,
    InterpolationStrategy,
    QuantileBlendStrategy,
)
from .random import PCGUniformSource, UniformSource, make_uniform_source
from .streaming import RunningMean
from .wasserstein import (
    WassersteinEstimator,
    wasserstein_distance,
    wasserstein_distance_quad,
)

__all__ = [
    # random sources
    "UniformSource",
    "PCGUniformSource",
    "make_uniform_source",
    # streaming
    "RunningMean",
    # wasserstein
    "WassersteinEstimator",
    "wasserstein_distance",
    "wasserstein_distance_quad",
    # interpolation
    "InterpolationStrategy",
    "DensityBlendStrategy",
    "QuantileBlendStrategy",
    "DistributionInterpolator",
    "InterpolatedDensity",
    "InterpolationResult",
]
