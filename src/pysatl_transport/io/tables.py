"""
CSV Tables
==========

Writers for the tabular output consumed by external plotting tools.

Format
------
- A header row of quoted labels, one per column.
- One row per grid point, every value quoted.

Notes
-----
- File identity is chosen by the caller; the parent directory must exist.
- I/O errors (``OSError``) propagate to the caller; nothing is retried.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import csv
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from pysatl_transport.stats.interpolation import InterpolationResult
    from pysatl_transport.types import NumericArray


def write_columns_csv(
    path: str | PathLike[str],
    labels: Sequence[str],
    columns: Sequence[NumericArray],
) -> Path:
    """
    Write equally long columns as a fully quoted CSV table.

    Parameters
    ----------
    path : str or PathLike
        Destination file, overwritten if it exists.
    labels : Sequence[str]
        Header labels, one per column.
    columns : Sequence[NumericArray]
        Column values.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ValueError
        If labels and columns disagree in number, or columns differ in length.
    OSError
        If the file cannot be written.
    """
    if len(labels) != len(columns):
        raise ValueError(f"Got {len(labels)} labels for {len(columns)} columns.")
    arrays = [np.asarray(column, dtype=np.float64).ravel() for column in columns]
    lengths = {a.size for a in arrays}
    if len(lengths) > 1:
        raise ValueError(f"Columns must have equal length, got lengths {sorted(lengths)}.")

    target = Path(path)
    n_rows = lengths.pop() if lengths else 0
    with target.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, quoting=csv.QUOTE_ALL)
        writer.writerow(labels)
        for i in range(n_rows):
            writer.writerow([repr(float(a[i])) for a in arrays])
    return target


def write_interpolation_csv(path: str | PathLike[str], result: InterpolationResult) -> Path:
    """
    Write one column per interpolation step, labelled by percentage of ``t``.

    Parameters
    ----------
    path : str or PathLike
        Destination file.
    result : InterpolationResult
        Output of :meth:`DistributionInterpolator.interpolate`.

    Returns
    -------
    Path
        The written file.
    """
    return write_columns_csv(path, result.labels(), result.columns())


__all__ = [
    "write_columns_csv",
    "write_interpolation_csv",
]
