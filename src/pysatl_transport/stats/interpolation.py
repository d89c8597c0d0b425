"""
Interpolation Between Distributions
===================================

Two interchangeable strategies produce, for an interpolation parameter
``t ∈ [0, 1]``, one normalised discretised PDF between two distributions:

- :class:`DensityBlendStrategy` — blends the densities point-wise. Simple,
  but not transport-optimal: blending two differently shaped PDFs can create
  artificial multimodality.
- :class:`QuantileBlendStrategy` — blends the quantile functions point-wise
  and converts the result back to a PDF. In one dimension this is the
  displacement (Wasserstein-geodesic) interpolation between the inputs.

:class:`DistributionInterpolator` evaluates a strategy on ``num_steps``
equally spaced parameters and collects the results in an
:class:`InterpolationResult`, ready for tabular output.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import isfinite
from typing import TYPE_CHECKING, Protocol, cast

import numpy as np

from pysatl_transport.distributions.helpers import as_float_array, lerp
from pysatl_transport.distributions.table import MIN_TOTAL_MASS, invert_table
from pysatl_transport.errors import DegenerateDensityError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_transport.distributions.distribution import Distribution
    from pysatl_transport.types import NumericArray


def _validate_parameter(t: float) -> float:
    t = float(t)
    if not isfinite(t) or not 0.0 <= t <= 1.0:
        raise ValueError(f"Interpolation parameter t must lie in [0, 1], got {t!r}.")
    return t


def _validate_resolution(name: str, value: int) -> int:
    value = int(value)
    if value < 2:
        raise ValueError(f"{name} must be >= 2, got {value}.")
    return value


def _normalize(values: NumericArray, context: str) -> NumericArray:
    total = float(np.sum(values))
    if not isfinite(total) or total <= MIN_TOTAL_MASS:
        raise DegenerateDensityError(total, context=context)
    return cast("NumericArray", values / total)


@dataclass(frozen=True, slots=True)
class InterpolatedDensity:
    """
    Discretised PDF of one interpolation step.

    Parameters
    ----------
    t : float
        Interpolation parameter (0 gives the first distribution, 1 the second).
    grid : NumericArray
        Positions the ``pdf`` entries refer to.
    pdf : NumericArray
        Probability masses, summing to 1.
    cdf : NumericArray or None
        Reconstructed CDF (quantile-space strategy only), ending at 1.0.
    """

    t: float
    grid: NumericArray
    pdf: NumericArray
    cdf: NumericArray | None = None


class InterpolationStrategy(Protocol):
    """Protocol for interpolation strategies."""

    def interpolate(
        self, first: Distribution, second: Distribution, t: float
    ) -> InterpolatedDensity: ...


class DensityBlendStrategy:
    """
    Density-space blend.

    For ``num_values`` equally spaced ``x`` in ``[0, 1]`` (both ends included)
    computes ``lerp(pdf1(x), pdf2(x), t)`` and normalises the result to sum
    to 1. At ``t = 0`` and ``t = 1`` this reproduces the normalised
    discretisation of the respective source PDF.

    Parameters
    ----------
    num_values : int, default 100
        Number of grid points.
    """

    def __init__(self, num_values: int = 100) -> None:
        self.num_values = _validate_resolution("num_values", num_values)

    @property
    def grid(self) -> NumericArray:
        return np.linspace(0.0, 1.0, self.num_values)

    def interpolate(
        self, first: Distribution, second: Distribution, t: float
    ) -> InterpolatedDensity:
        t = _validate_parameter(t)
        xs = self.grid
        y1 = as_float_array(first.pdf(xs))
        y2 = as_float_array(second.pdf(xs))
        pdf = _normalize(lerp(y1, y2, t), context=f"density blend at t={t:g}")
        return InterpolatedDensity(t=t, grid=xs, pdf=pdf)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(num_values={self.num_values})"


class QuantileBlendStrategy:
    """
    Quantile-space blend.

    Algorithm
    ---------
    1. Evaluate ``ppf1`` and ``ppf2`` at ``u_j = j / num_values_icdf``,
       ``j = 0..num_values_icdf-1``, blend them with ``lerp(., ., t)`` and set
       the last blended entry to 1.0.
    2. Invert the blended quantile table at ``x_i = i / num_values_pdf``,
       ``i = 0..num_values_pdf``, with
       :func:`~pysatl_transport.distributions.table.invert_table`, which gives
       a coarse CDF of ``num_values_pdf + 1`` points.
    3. Divide the CDF by its last entry.
    4. Take forward differences ``pdf[i] = cdf[i + 1] - cdf[i]`` and
       normalise them to sum to 1.

    Parameters
    ----------
    num_values_pdf : int, default 100
        Number of PDF entries (the CDF has one more).
    num_values_icdf : int, default 1000
        Number of points of the blended quantile table.

    Notes
    -----
    The forward difference assigns the mass of ``[x_i, x_{i+1}]`` to the left
    edge ``x_i``, which shifts the reconstructed PDF by up to one bin relative
    to bin centres. The shift is kept as is.
    """

    def __init__(self, num_values_pdf: int = 100, num_values_icdf: int = 1000) -> None:
        self.num_values_pdf = _validate_resolution("num_values_pdf", num_values_pdf)
        self.num_values_icdf = _validate_resolution("num_values_icdf", num_values_icdf)

    @property
    def quantile_grid(self) -> NumericArray:
        return np.arange(self.num_values_icdf, dtype=np.float64) / float(self.num_values_icdf)

    @property
    def cdf_grid(self) -> NumericArray:
        return np.arange(self.num_values_pdf + 1, dtype=np.float64) / float(self.num_values_pdf)

    def blended_quantiles(
        self, first: Distribution, second: Distribution, t: float
    ) -> NumericArray:
        """
        Blended quantile table of step 1.

        Monotonicity is enforced with a running maximum against
        floating-point noise.
        """
        return self._blend_quantiles(first, second, _validate_parameter(t))

    def _blend_quantiles(
        self, first: Distribution, second: Distribution, t: float
    ) -> NumericArray:
        u = self.quantile_grid
        q1 = as_float_array(first.ppf(u))
        q2 = as_float_array(second.ppf(u))
        blended = np.maximum.accumulate(lerp(q1, q2, t))
        blended[-1] = 1.0
        return cast("NumericArray", blended)

    def interpolate(
        self, first: Distribution, second: Distribution, t: float
    ) -> InterpolatedDensity:
        t = _validate_parameter(t)
        quantiles = self._blend_quantiles(first, second, t)
        xs = self.cdf_grid

        cdf = as_float_array(invert_table(quantiles, xs, self.num_values_icdf))
        last = float(cdf[-1])
        if not isfinite(last) or last <= MIN_TOTAL_MASS:
            raise DegenerateDensityError(last, context=f"quantile blend CDF at t={t:g}")
        cdf = cdf / last

        pdf = _normalize(np.diff(cdf), context=f"quantile blend at t={t:g}")
        return InterpolatedDensity(t=t, grid=xs[:-1], pdf=pdf, cdf=cdf)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_values_pdf={self.num_values_pdf}, "
            f"num_values_icdf={self.num_values_icdf})"
        )


@dataclass(frozen=True, slots=True)
class InterpolationResult:
    """
    Family of discretised PDFs indexed by the interpolation parameter.

    Parameters
    ----------
    parameters : NumericArray
        Interpolation parameters, shape ``(num_steps,)``.
    grid : NumericArray
        Positions of the PDF entries, shape ``(num_values,)``.
    pdfs : NumericArray
        One normalised PDF per row, shape ``(num_steps, num_values)``.
    cdfs : NumericArray or None
        One CDF per row when the strategy reconstructs it.
    """

    parameters: NumericArray
    grid: NumericArray
    pdfs: NumericArray
    cdfs: NumericArray | None = None

    @property
    def num_steps(self) -> int:
        return int(self.parameters.size)

    def labels(self) -> list[str]:
        """Column labels as percentages of ``t`` (``"0%"``, ``"25%"``, ...)."""
        return [f"{100.0 * t:g}%" for t in self.parameters]

    def columns(self) -> list[NumericArray]:
        """One PDF per interpolation step."""
        return [cast("NumericArray", row) for row in self.pdfs]

    def rows(self) -> Iterator[NumericArray]:
        """Iterate over grid points; each row has one value per step."""
        yield from self.pdfs.T

    def __getitem__(self, step: int) -> InterpolatedDensity:
        cdf = None if self.cdfs is None else cast("NumericArray", self.cdfs[step])
        return InterpolatedDensity(
            t=float(self.parameters[step]),
            grid=self.grid,
            pdf=cast("NumericArray", self.pdfs[step]),
            cdf=cdf,
        )

    def __len__(self) -> int:
        return self.num_steps


class DistributionInterpolator:
    """
    Evaluate an interpolation strategy on equally spaced parameters.

    Parameters
    ----------
    strategy : InterpolationStrategy, optional
        Defaults to :class:`QuantileBlendStrategy`.
    """

    def __init__(self, strategy: InterpolationStrategy | None = None) -> None:
        self.strategy: InterpolationStrategy = (
            strategy if strategy is not None else QuantileBlendStrategy()
        )

    @staticmethod
    def parameters(num_steps: int) -> NumericArray:
        """``num_steps`` equally spaced parameters in ``[0, 1]`` (``[0.0]`` for one step)."""
        num_steps = int(num_steps)
        if num_steps < 1:
            raise ValueError(f"num_steps must be >= 1, got {num_steps}.")
        return np.linspace(0.0, 1.0, num_steps)

    def interpolate(
        self, first: Distribution, second: Distribution, num_steps: int
    ) -> InterpolationResult:
        """
        Interpolate from ``first`` (``t = 0``) to ``second`` (``t = 1``).

        Returns
        -------
        InterpolationResult
            One normalised PDF per step.
        """
        ts = self.parameters(num_steps)
        steps = [self.strategy.interpolate(first, second, float(t)) for t in ts]

        cdfs: NumericArray | None = None
        if all(step.cdf is not None for step in steps):
            cdfs = np.vstack([cast("NumericArray", step.cdf) for step in steps])

        return InterpolationResult(
            parameters=ts,
            grid=steps[0].grid,
            pdfs=np.vstack([step.pdf for step in steps]),
            cdfs=cdfs,
        )


__all__ = [
    "DensityBlendStrategy",
    "DistributionInterpolator",
    "InterpolatedDensity",
    "InterpolationResult",
    "InterpolationStrategy",
    "QuantileBlendStrategy",
]
