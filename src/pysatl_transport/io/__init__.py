"""
Tabular output of interpolation results.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .tables import write_columns_csv, write_interpolation_csv

__all__ = [
    "write_columns_csv",
    "write_interpolation_csv",
]
