"""
Closed-form distributions on ``[0, 1]``.

These have exact ``pdf``, ``cdf`` and ``ppf`` formulas and serve as ground
truth for the tabulated path:

======================  =========  ========  ===========
Distribution            pdf        cdf       ppf
======================  =========  ========  ===========
UniformDistribution     ``1``      ``x``     ``u``
LinearDistribution      ``2x``     ``x²``    ``√u``
QuadraticDistribution   ``3x²``    ``x³``    ``∛u``
======================  =========  ========  ===========
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_transport.distributions.computation import AnalyticalComputation
from pysatl_transport.distributions.distribution import UnitIntervalDistribution
from pysatl_transport.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_transport.types import NumericArray


class UniformDistribution(UnitIntervalDistribution):
    """Uniform distribution, ``pdf(x) = 1``."""

    def __init__(self) -> None:
        super().__init__(
            [
                AnalyticalComputation[Any, Any](CharacteristicName.PDF, _uniform_pdf),
                AnalyticalComputation[Any, Any](CharacteristicName.CDF, _identity),
                AnalyticalComputation[Any, Any](CharacteristicName.PPF, _identity),
            ]
        )


class LinearDistribution(UnitIntervalDistribution):
    """Linear density, ``pdf(x) = 2x``."""

    def __init__(self) -> None:
        super().__init__(
            [
                AnalyticalComputation[Any, Any](CharacteristicName.PDF, _linear_pdf),
                AnalyticalComputation[Any, Any](CharacteristicName.CDF, _linear_cdf),
                AnalyticalComputation[Any, Any](CharacteristicName.PPF, np.sqrt),
            ]
        )


class QuadraticDistribution(UnitIntervalDistribution):
    """Quadratic density, ``pdf(x) = 3x²``."""

    def __init__(self) -> None:
        super().__init__(
            [
                AnalyticalComputation[Any, Any](CharacteristicName.PDF, _quadratic_pdf),
                AnalyticalComputation[Any, Any](CharacteristicName.CDF, _quadratic_cdf),
                AnalyticalComputation[Any, Any](CharacteristicName.PPF, np.cbrt),
            ]
        )


def _identity(x: NumericArray) -> NumericArray:
    return x


def _uniform_pdf(x: NumericArray) -> NumericArray:
    return cast("NumericArray", np.ones_like(x))


def _linear_pdf(x: NumericArray) -> NumericArray:
    return 2.0 * x


def _linear_cdf(x: NumericArray) -> NumericArray:
    return x * x


def _quadratic_pdf(x: NumericArray) -> NumericArray:
    return 3.0 * x * x


def _quadratic_cdf(x: NumericArray) -> NumericArray:
    return x * x * x


__all__ = [
    "LinearDistribution",
    "QuadraticDistribution",
    "UniformDistribution",
]
