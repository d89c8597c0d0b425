"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Transport.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for float arrays produced by characteristics."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

type DensityFunc = Callable[[float], float]
"""Scalar density supplied by the caller, non-negative and not necessarily normalised."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the characteristics a distribution can expose.

    Notes
    -----
    ``PPF`` (percent point function) is the inverse CDF, also known as the
    quantile function or ICDF.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Closed 1D interval ``[left, right]``.

    Parameters
    ----------
    left : float, default=0.0
        Left endpoint of the interval.
    right : float, default=1.0
        Right endpoint of the interval.
    """

    left: float = 0.0
    right: float = 1.0

    def __post_init__(self) -> None:
        if not self.left < self.right:
            raise ValueError(f"Interval requires left < right, got [{self.left}, {self.right}].")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)
        result = (arr >= self.left) & (arr <= self.right)

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    def clip(self, x: Number | NumericArray) -> NumericArray:
        """Clamp point(s) to the interval endpoints."""
        return cast(NumericArray, np.clip(np.asarray(x, dtype=np.float64), self.left, self.right))


UNIT_INTERVAL = Interval1D(0.0, 1.0)
"""Domain shared by every distribution in this package."""


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "DensityFunc",
    "GenericCharacteristicName",
    "Interval1D",
    "Number",
    "NumericArray",
    "NumPyNumber",
    "UNIT_INTERVAL",
]
