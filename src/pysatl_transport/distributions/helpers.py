"""
Helper utilities shared by the distribution implementations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_transport.types import Number, NumericArray


def as_float_array(x: Number | NumericArray) -> NumericArray:
    """Convert input to a ``float64`` array (0-d for scalars)."""
    return cast("NumericArray", np.asarray(x, dtype=np.float64))


def restore_shape(result: NumericArray, like: NumericArray) -> float | NumericArray:
    """
    Return a Python ``float`` for 0-d input and a ``float64`` array otherwise.

    Parameters
    ----------
    result : NumericArray
        Computed values.
    like : NumericArray
        The (converted) argument the values were computed from.
    """
    if np.ndim(like) == 0:
        return float(result)
    return cast("NumericArray", np.asarray(result, dtype=np.float64))


def lerp(
    a: Number | NumericArray, b: Number | NumericArray, t: Number | NumericArray
) -> NumericArray:
    """Linear blend ``a * (1 - t) + b * t``."""
    a_arr, b_arr, t_arr = as_float_array(a), as_float_array(b), as_float_array(t)
    return cast("NumericArray", a_arr * (1.0 - t_arr) + b_arr * t_arr)


def evaluate_scalar_function(func: Callable[[float], float], xs: NumericArray) -> NumericArray:
    """
    Evaluate a scalar callable point-wise on a 1D grid.

    Notes
    -----
    User callables are treated as scalar (``float -> float``); no attempt is
    made to call them with arrays.
    """
    return np.fromiter((float(func(float(x))) for x in xs), dtype=np.float64, count=xs.size)


__all__ = [
    "as_float_array",
    "evaluate_scalar_function",
    "lerp",
    "restore_shape",
]
