"""
Common fixtures and utilities for distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np

from pysatl_transport.distributions import (
    LinearDistribution,
    QuadraticDistribution,
    UniformDistribution,
)


class BaseDistributionTest:
    """Base class for distribution tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Dense probe grid on [0, 1]
    PROBES = np.linspace(0.0, 1.0, 1001)

    ANALYTIC_CASES = [
        (UniformDistribution, lambda x: x),
        (LinearDistribution, lambda x: x * x),
        (QuadraticDistribution, lambda x: x * x * x),
    ]
    ANALYTIC_IDS = ["uniform", "linear", "quadratic"]

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))
