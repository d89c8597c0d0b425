"""
Discretised CDF Tables
======================

This module implements the lookup table behind tabulated distributions:

- :class:`CDFTable` — a normalised, non-decreasing cumulative table built
  from an arbitrary density by a fine Riemann pass bucketed into a coarse
  table.
- :func:`invert_table` — lower-bound binary search over a non-decreasing
  table with linear reconstruction between the bracketing entries.

Notes
-----
- Table entry ``i`` approximates ``CDF(i / cdf_samples)``.
- The fine sampling resolution (``pdf_samples``) controls the accuracy of the
  mass estimate, the coarse resolution (``cdf_samples``) controls table size
  and inversion granularity. Quantiles returned by the inversion are offset by
  up to one table bin.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_transport.distributions.helpers import (
    as_float_array,
    evaluate_scalar_function,
    restore_shape,
)
from pysatl_transport.errors import DegenerateDensityError, TableInversionWarning

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_transport.types import DensityFunc, Number, NumericArray

MIN_TOTAL_MASS = 1e-12
"""Total bucketed mass at or below which a density is considered degenerate."""


def invert_table(
    values: NumericArray, u: Number | NumericArray, resolution: int
) -> float | NumericArray:
    """
    Invert a non-decreasing table by binary search and linear reconstruction.

    For each query ``u`` the first entry ``values[upper] >= u`` is located
    (``upperIndex``) and ``lower = max(upper - 1, 0)``. If both indices
    coincide the result is ``lower / resolution``; otherwise it is
    ``(lower + fraction) / resolution`` where ``fraction`` is the position of
    ``u`` between ``values[lower]`` and ``values[upper]``.

    Parameters
    ----------
    values : NumericArray
        Non-decreasing 1D table.
    u : Number or NumericArray
        Query value(s). Values below 0 map to 0, values above 1 map to 1,
        NaN propagates.
    resolution : int
        Denominator mapping table positions to ``[0, 1]``.

    Returns
    -------
    float or NumericArray
        Reconstructed position(s) in ``[0, 1]``.

    Warns
    -----
    TableInversionWarning
        If no entry ``>= u`` exists for some ``u < 1``; such queries return 1.0.
    """
    arr = as_float_array(u)
    q = np.atleast_1d(arr)
    size = values.size

    upper = np.searchsorted(values, q, side="left")
    miss = upper >= size
    upper = np.minimum(upper, size - 1)
    lower = np.maximum(upper - 1, 0)

    lower_value = values[lower]
    upper_value = values[upper]
    same = lower == upper
    with np.errstate(divide="ignore", invalid="ignore"):
        fraction = np.where(same, 0.0, (q - lower_value) / (upper_value - lower_value))

    result = (lower + fraction) / float(resolution)
    result = np.where(miss, 1.0, result)
    result = np.where(q < 0.0, 0.0, np.where(q > 1.0, 1.0, result))
    result = np.where(np.isnan(q), np.nan, result)

    unexpected = miss & (q >= 0.0) & (q < 1.0)
    if np.any(unexpected):
        warnings.warn(
            f"No table entry >= u for {int(np.count_nonzero(unexpected))} query value(s) "
            f"(largest table entry {float(values[-1])!r}); returning 1.0.",
            TableInversionWarning,
            stacklevel=2,
        )

    return restore_shape(cast("NumericArray", result.reshape(arr.shape)), arr)


class CDFTable:
    """
    Normalised cumulative table of fixed length.

    Instances are immutable: the backing array is made read-only and every
    :class:`CDFTable` owns its own array.

    Parameters
    ----------
    values : Iterable[float]
        Non-decreasing cumulative values. The last entry must be 1.0.
    mass : float, default 1.0
        Total mass of the density the table was built from, i.e. the factor
        that normalises it. Tables not built from a density keep 1.0.

    Raises
    ------
    ValueError
        If the table has fewer than 2 entries, is not finite, is decreasing
        anywhere, or does not end at 1.0, or if ``mass`` is not a finite
        positive number.
    """

    __slots__ = ("_mass", "_values")

    def __init__(self, values: Iterable[float], *, mass: float = 1.0) -> None:
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1 or arr.size < 2:
            raise ValueError("CDFTable expects a 1D table with at least 2 entries.")
        if not np.all(np.isfinite(arr)):
            raise ValueError("CDFTable entries must be finite.")
        if np.any(np.diff(arr) < 0.0):
            raise ValueError("CDFTable entries must be non-decreasing.")
        if arr[-1] != 1.0:
            raise ValueError(f"CDFTable must end at 1.0, got {float(arr[-1])!r}.")
        mass = float(mass)
        if not np.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"CDFTable mass must be a finite number > 0, got {mass!r}.")
        arr.setflags(write=False)
        self._values = arr
        self._mass = mass

    @classmethod
    def from_density(
        cls, density: DensityFunc, pdf_samples: int, cdf_samples: int
    ) -> CDFTable:
        """
        Build a table from an arbitrary (not necessarily normalised) density.

        Algorithm
        ---------
        1. Evaluate ``density`` at ``pdf_samples`` points
           ``x_k = k / (pdf_samples - 1)`` and add the Riemann term
           ``density(x_k) / pdf_samples`` to bucket
           ``clamp(floor(x_k * cdf_samples), 0, cdf_samples - 1)``.
        2. Normalise the bucket masses to sum to 1.
        3. Prefix-sum the buckets and divide by the last entry.

        The total bucketed mass is kept as :attr:`mass`.

        Parameters
        ----------
        density : DensityFunc
            Scalar density on ``[0, 1]``.
        pdf_samples : int
            Fine sampling resolution.
        cdf_samples : int
            Table length.

        Raises
        ------
        ValueError
            On invalid resolutions or negative / non-finite density samples.
        DegenerateDensityError
            If the total mass is zero or not finite.
        """
        if cdf_samples < 2:
            raise ValueError(f"cdf_samples must be >= 2, got {cdf_samples}.")
        if pdf_samples < cdf_samples:
            raise ValueError(
                f"pdf_samples ({pdf_samples}) must be >= cdf_samples ({cdf_samples})."
            )

        xs = np.arange(pdf_samples, dtype=np.float64) / float(pdf_samples - 1)
        densities = evaluate_scalar_function(density, xs)
        if not np.all(np.isfinite(densities)):
            raise ValueError("Density returned non-finite values on [0, 1].")
        if np.any(densities < 0.0):
            bad = float(xs[np.argmax(densities < 0.0)])
            raise ValueError(f"Density must be non-negative, got a negative value at x={bad}.")

        buckets = np.clip((xs * cdf_samples).astype(np.int64), 0, cdf_samples - 1)
        masses = np.bincount(buckets, weights=densities / pdf_samples, minlength=cdf_samples)

        total = float(masses.sum())
        if not np.isfinite(total) or total <= MIN_TOTAL_MASS:
            raise DegenerateDensityError(total)
        masses /= total

        table = np.cumsum(masses)
        table /= table[-1]
        return cls(table, mass=total)

    @classmethod
    def from_cumulative(cls, values: Iterable[float]) -> CDFTable:
        """
        Build a table from raw cumulative values, normalising the last entry to 1.0.

        Raises
        ------
        DegenerateDensityError
            If the last entry is zero or not finite.
        """
        arr = np.array(values, dtype=np.float64)
        if arr.ndim != 1 or arr.size < 2:
            raise ValueError("CDFTable expects a 1D table with at least 2 entries.")
        last = float(arr[-1])
        if not np.isfinite(last) or last <= MIN_TOTAL_MASS:
            raise DegenerateDensityError(last, context="cumulative table")
        return cls(arr / last)

    @property
    def values(self) -> NumericArray:
        """Read-only view of the cumulative values."""
        return self._values

    @property
    def mass(self) -> float:
        """Riemann estimate of the source density's total mass on ``[0, 1]``."""
        return self._mass

    @property
    def size(self) -> int:
        return int(self._values.size)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, mass={self._mass!r})"

    def masses(self) -> NumericArray:
        """Per-bucket probability masses (forward differences, summing to 1)."""
        return cast("NumericArray", np.diff(self._values, prepend=0.0))

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Continuous CDF reconstruction.

        ``x`` is mapped to the fractional index ``clamp(x * size, 0, size - 1)``
        and the neighbouring entries are blended linearly. ``x < 0`` gives 0,
        ``x > 1`` gives 1 and NaN propagates.
        """
        arr = as_float_array(x)
        n = self.size
        nan = np.isnan(arr)
        index = np.clip(np.where(nan, 0.0, arr) * n, 0.0, float(n - 1))
        index1 = index.astype(np.int64)
        index2 = np.minimum(index1 + 1, n - 1)
        fraction = index - np.floor(index)

        result = self._values[index1] * (1.0 - fraction) + self._values[index2] * fraction
        result = np.where(arr < 0.0, 0.0, np.where(arr > 1.0, 1.0, result))
        result = np.where(nan, np.nan, result)
        return restore_shape(cast("NumericArray", result), arr)

    def ppf(self, u: Number | NumericArray) -> float | NumericArray:
        """
        Quantile lookup by :func:`invert_table`.

        The domain bounds are exact: ``u <= 0`` gives 0 and ``u >= 1`` gives 1.
        """
        arr = as_float_array(u)
        inner = as_float_array(invert_table(self._values, arr, self.size))
        result = np.where(arr <= 0.0, 0.0, np.where(arr >= 1.0, 1.0, inner))
        return restore_shape(cast("NumericArray", result), arr)


__all__ = [
    "CDFTable",
    "MIN_TOTAL_MASS",
    "invert_table",
]
