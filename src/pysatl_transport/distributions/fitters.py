"""
Table-backed Conversions
========================

Fitters that derive ``cdf`` and ``ppf`` of a tabulated density from its
:class:`~pysatl_transport.distributions.table.CDFTable`:

- ``fit_table_to_cdf_1C`` — continuous ``cdf`` reconstruction from a table;
- ``fit_table_to_ppf_1C`` — ``ppf`` by table inversion.

Notes
-----
- The table is the single piece of state shared by the fitted ``cdf`` and
  ``ppf`` of one distribution; it is never shared between distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from pysatl_transport.distributions.computation import FittedComputationMethod
from pysatl_transport.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_transport.distributions.table import CDFTable
    from pysatl_transport.types import Number, NumericArray


def fit_table_to_cdf_1C(table: CDFTable) -> FittedComputationMethod[Any, Any]:
    """
    Fit a continuous ``cdf`` from ``table``.

    Returns
    -------
    FittedComputationMethod
        Fitted ``pdf -> cdf`` conversion evaluating :meth:`CDFTable.cdf`.
    """

    def _cdf(x: Number | NumericArray, **_: Any) -> float | NumericArray:
        return table.cdf(x)

    return FittedComputationMethod[Any, Any](
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], func=_cdf
    )


def fit_table_to_ppf_1C(table: CDFTable) -> FittedComputationMethod[Any, Any]:
    """
    Fit ``ppf`` from ``table`` by binary-search inversion.

    Returns
    -------
    FittedComputationMethod
        Fitted ``pdf -> ppf`` conversion evaluating :meth:`CDFTable.ppf`.
    """

    def _ppf(u: Number | NumericArray, **_: Any) -> float | NumericArray:
        return table.ppf(u)

    return FittedComputationMethod[Any, Any](
        target=CharacteristicName.PPF, sources=[CharacteristicName.PDF], func=_ppf
    )


__all__ = [
    "fit_table_to_cdf_1C",
    "fit_table_to_ppf_1C",
]
