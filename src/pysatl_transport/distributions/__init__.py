"""
Distributions subpackage

Distributions on the unit interval used by PySATL Transport:

- distribution protocol and base class (:mod:`.distribution`);
- closed-form variants (:mod:`.analytic`);
- discretised CDF tables and their inversion (:mod:`.table`);
- table-backed fitters (:mod:`.fitters`);
- tabulated distributions built from arbitrary densities (:mod:`.tabulated`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .analytic import LinearDistribution, QuadraticDistribution, UniformDistribution
from .computation import AnalyticalComputation, FittedComputationMethod
from .distribution import Distribution, UnitIntervalDistribution
from .table import CDFTable, invert_table
from .tabulated import GaussianBump, PolynomialDensity, TabulatedDistribution

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    "UnitIntervalDistribution",
    # closed-form variants
    "UniformDistribution",
    "LinearDistribution",
    "QuadraticDistribution",
    # tabulated
    "CDFTable",
    "invert_table",
    "TabulatedDistribution",
    "GaussianBump",
    "PolynomialDensity",
]
