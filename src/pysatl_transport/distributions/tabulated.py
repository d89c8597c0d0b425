"""
Tabulated Distributions
=======================

A :class:`TabulatedDistribution` is defined only through a caller-supplied
density. Its ``cdf`` and ``ppf`` are fitted from a
:class:`~pysatl_transport.distributions.table.CDFTable` that the instance
builds eagerly at construction and owns exclusively.

The module also provides small parameter-holding density types that can be
passed as the density callable:

- :class:`GaussianBump` — unnormalised Gaussian with a given mean and width;
- :class:`PolynomialDensity` — polynomial divided by a scale factor.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from numpy.polynomial import polynomial as _np_poly

from pysatl_transport.config import transport_config
from pysatl_transport.distributions.computation import AnalyticalComputation
from pysatl_transport.distributions.distribution import UnitIntervalDistribution
from pysatl_transport.distributions.fitters import (
    fit_table_to_cdf_1C,
    fit_table_to_ppf_1C,
)
from pysatl_transport.distributions.helpers import (
    as_float_array,
    evaluate_scalar_function,
    restore_shape,
)
from pysatl_transport.distributions.table import CDFTable
from pysatl_transport.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_transport.distributions.distribution import Distribution
    from pysatl_transport.types import DensityFunc, Number, NumericArray


class TabulatedDistribution(UnitIntervalDistribution):
    """
    Distribution represented by a discretised CDF table.

    Parameters
    ----------
    density : DensityFunc
        Scalar density on ``[0, 1]``, non-negative, not necessarily normalised.
    pdf_samples : int, optional
        Fine sampling resolution. Defaults to ``transport_config().pdf_samples``.
    cdf_samples : int, optional
        Table length. Defaults to ``transport_config().cdf_samples``.

    Raises
    ------
    ValueError
        On invalid resolutions or negative / non-finite density samples.
    DegenerateDensityError
        If the density has (numerically) zero mass on ``[0, 1]``.

    Notes
    -----
    ``pdf`` returns the density divided by its Riemann mass
    (:attr:`CDFTable.mass`), so densities that differ by a constant factor
    give the same distribution in every characteristic.
    """

    def __init__(
        self,
        density: DensityFunc,
        *,
        pdf_samples: int | None = None,
        cdf_samples: int | None = None,
    ) -> None:
        config = transport_config()
        self._pdf_samples = config.pdf_samples if pdf_samples is None else int(pdf_samples)
        self._cdf_samples = config.cdf_samples if cdf_samples is None else int(cdf_samples)
        self._density = density
        self._table = CDFTable.from_density(density, self._pdf_samples, self._cdf_samples)

        super().__init__(
            [
                AnalyticalComputation[Any, Any](CharacteristicName.PDF, self._evaluate_density),
                fit_table_to_cdf_1C(self._table),
                fit_table_to_ppf_1C(self._table),
            ]
        )

    @classmethod
    def from_distribution(
        cls,
        distribution: Distribution,
        *,
        pdf_samples: int | None = None,
        cdf_samples: int | None = None,
    ) -> TabulatedDistribution:
        """
        Tabulate the density of another distribution.

        The closed-form variants in :mod:`~pysatl_transport.distributions.analytic`
        can be tabulated this way to validate the table inversion against their
        exact ``ppf``.
        """

        def _density(x: float) -> float:
            return float(distribution.pdf(x))

        return cls(_density, pdf_samples=pdf_samples, cdf_samples=cdf_samples)

    @property
    def table(self) -> CDFTable:
        return self._table

    @property
    def density(self) -> DensityFunc:
        return self._density

    @property
    def pdf_samples(self) -> int:
        return self._pdf_samples

    @property
    def cdf_samples(self) -> int:
        return self._cdf_samples

    def _evaluate_density(self, x: Number | NumericArray) -> float | NumericArray:
        arr = as_float_array(x)
        values = evaluate_scalar_function(self._density, np.atleast_1d(arr).ravel())
        values /= self._table.mass
        return restore_shape(cast("NumericArray", values.reshape(arr.shape)), arr)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(density={self._density!r}, "
            f"pdf_samples={self._pdf_samples}, cdf_samples={self._cdf_samples})"
        )


@dataclass(frozen=True, slots=True)
class GaussianBump:
    """
    Unnormalised Gaussian density ``exp(-(x - mean)² / (2 std²))``.

    Parameters
    ----------
    mean : float
        Centre of the bump.
    std : float
        Width of the bump, must be positive.
    """

    mean: float
    std: float

    def __post_init__(self) -> None:
        if not self.std > 0:
            raise ValueError(f"std must be > 0, got {self.std}.")

    def __call__(self, x: Number | NumericArray) -> Any:
        z = (as_float_array(x) - self.mean) / self.std
        return restore_shape(cast("NumericArray", np.exp(-0.5 * z * z)), as_float_array(x))


@dataclass(frozen=True, slots=True)
class PolynomialDensity:
    """
    Polynomial density ``sum(c_k x^k) / scale``.

    Parameters
    ----------
    coefficients : Sequence[float]
        Coefficients in increasing order of degree.
    scale : float, default 1.0
        Positive divisor.
    """

    coefficients: Sequence[float]
    scale: float = 1.0

    def __post_init__(self) -> None:
        if len(self.coefficients) == 0:
            raise ValueError("coefficients must be non-empty.")
        if not self.scale > 0:
            raise ValueError(f"scale must be > 0, got {self.scale}.")
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))

    @classmethod
    def cubic_example(cls) -> PolynomialDensity:
        """``(x³ - 10x² + 5x + 11) / 10.417``."""
        return cls((11.0, 5.0, -10.0, 1.0), scale=10.417)

    def __call__(self, x: Number | NumericArray) -> Any:
        arr = as_float_array(x)
        values = _np_poly.polyval(arr, self.coefficients) / self.scale
        return restore_shape(cast("NumericArray", np.asarray(values)), arr)


__all__ = [
    "GaussianBump",
    "PolynomialDensity",
    "TabulatedDistribution",
]
