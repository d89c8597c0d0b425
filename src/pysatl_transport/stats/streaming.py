"""
Online statistics computed in O(1) memory.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_transport.types import Number, NumericArray


class RunningMean:
    """
    Incremental arithmetic mean.

    Each new value is blended into the current mean,
    ``mean_i = mean_{i-1} * (1 - 1/(i+1)) + y_i * (1/(i+1))``,
    so no sample needs to be stored.

    Examples
    --------
    >>> acc = RunningMean()
    >>> acc.update(1.0)
    >>> acc.update(3.0)
    >>> acc.mean
    2.0
    """

    __slots__ = ("_count", "_mean")

    def __init__(self) -> None:
        self._count = 0
        self._mean = 0.0

    @property
    def count(self) -> int:
        return self._count

    @property
    def mean(self) -> float:
        return self._mean

    def update(self, value: Number) -> None:
        """Blend a single value into the mean."""
        weight = 1.0 / float(self._count + 1)
        self._mean = self._mean * (1.0 - weight) + float(value) * weight
        self._count += 1

    def update_batch(self, values: NumericArray) -> None:
        """
        Blend a batch of ``k`` values with weight ``k / (n + k)``.

        Equivalent to ``k`` calls of :meth:`update` up to floating-point
        rounding; the batch mean is computed by NumPy.
        """
        arr = np.asarray(values, dtype=np.float64).ravel()
        k = int(arr.size)
        if k == 0:
            return
        weight = k / float(self._count + k)
        self._mean = self._mean * (1.0 - weight) + float(arr.mean()) * weight
        self._count += k

    def reset(self) -> None:
        self._count = 0
        self._mean = 0.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count}, mean={self._mean!r})"


__all__ = [
    "RunningMean",
]
