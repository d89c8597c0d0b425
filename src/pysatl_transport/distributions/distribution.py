"""
Distribution Interfaces and the Unit-Interval Base Implementation
=================================================================

This module defines the public :class:`Distribution` protocol and the
concrete base class shared by every distribution of this package:

- :class:`Distribution` protocol – interface consumed by the estimators and
  interpolators (only ``pdf`` and ``ppf`` are required by them).
- :class:`UnitIntervalDistribution` – stores a mapping of characteristic
  computations, resolves them by name and clamps every query to ``[0, 1]``.

Notes
-----
- Out-of-domain arguments are clamped, never extrapolated: ``pdf`` is 0,
  ``cdf`` is 0 below and 1 above the domain, ``ppf`` maps ``u <= 0`` to 0 and
  ``u >= 1`` to 1.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, cast, runtime_checkable

import numpy as np

from pysatl_transport.distributions.helpers import as_float_array, restore_shape
from pysatl_transport.types import UNIT_INTERVAL, CharacteristicName

if TYPE_CHECKING:
    from pysatl_transport.distributions.computation import Method
    from pysatl_transport.types import (
        GenericCharacteristicName,
        Interval1D,
        Number,
        NumericArray,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by estimators and interpolators."""

    @property
    def support(self) -> Interval1D: ...

    @property
    def computations(self) -> Mapping[GenericCharacteristicName, Method[Any, Any]]: ...

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Method[Any, Any]:
        computations = self.computations
        if characteristic_name not in computations:
            raise RuntimeError(
                f"Distribution {type(self).__name__} does not provide '{characteristic_name}'."
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def pdf(self, x: Number | NumericArray) -> float | NumericArray: ...

    def cdf(self, x: Number | NumericArray) -> float | NumericArray: ...

    def ppf(self, u: Number | NumericArray) -> float | NumericArray: ...

    def icdf(self, u: Number | NumericArray) -> float | NumericArray: ...


class UnitIntervalDistribution:
    """
    Base class of the distributions supported on ``[0, 1]``.

    Parameters
    ----------
    computations : Iterable[Method] or Mapping[str, Method]
        Characteristic callables keyed by their ``target``. The callables are
        only evaluated on in-domain arguments.

    Notes
    -----
    Subclasses pass raw (unclamped) computations; the public ``pdf``, ``cdf``
    and ``ppf`` methods apply the domain clamp policy.
    """

    def __init__(
        self,
        computations: (
            Iterable[Method[Any, Any]] | Mapping[GenericCharacteristicName, Method[Any, Any]]
        ) = (),
    ) -> None:
        if isinstance(computations, Mapping):
            self._computations = dict(computations)
        else:
            self._computations = {c.target: c for c in computations}

    @property
    def support(self) -> Interval1D:
        return UNIT_INTERVAL

    @property
    def computations(self) -> Mapping[GenericCharacteristicName, Method[Any, Any]]:
        return self._computations

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Method[Any, Any]:
        """
        Return the callable implementing ``characteristic_name``.

        Raises
        ------
        RuntimeError
            If the distribution does not provide the characteristic.
        """
        if characteristic_name not in self._computations:
            raise RuntimeError(
                f"Distribution {type(self).__name__} does not provide '{characteristic_name}'."
            )
        return self._computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Density; zero outside ``[0, 1]``."""
        arr = as_float_array(x)
        inside = self.support.contains(arr)
        raw = as_float_array(self.query_method(CharacteristicName.PDF)(self.support.clip(arr)))
        return restore_shape(cast("NumericArray", np.where(inside, raw, 0.0)), arr)

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        """Cumulative probability; 0 below and 1 above ``[0, 1]``."""
        arr = as_float_array(x)
        raw = as_float_array(self.query_method(CharacteristicName.CDF)(self.support.clip(arr)))
        result = np.where(
            arr < self.support.left, 0.0, np.where(arr > self.support.right, 1.0, raw)
        )
        return restore_shape(cast("NumericArray", result), arr)

    def ppf(self, u: Number | NumericArray) -> float | NumericArray:
        """Quantile function; ``u <= 0`` gives 0 and ``u >= 1`` gives 1."""
        arr = as_float_array(u)
        raw = as_float_array(self.query_method(CharacteristicName.PPF)(np.clip(arr, 0.0, 1.0)))
        result = np.where(
            arr <= 0.0, self.support.left, np.where(arr >= 1.0, self.support.right, raw)
        )
        return restore_shape(cast("NumericArray", result), arr)

    icdf = ppf

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
