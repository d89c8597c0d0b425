"""
Uniform Random Sources
======================

The Monte-Carlo estimator only needs "the next uniform floats in ``[0, 1)``".
This module provides that capability:

- :class:`UniformSource` — protocol with a single ``random(size)`` operation;
- :class:`PCGUniformSource` — NumPy ``Generator`` over the PCG64 bit generator;
- :func:`make_uniform_source` — builds a source in the configured mode.

Notes
-----
- Deterministic mode seeds every new source with the same fixed constant, so
  two sources created the same way produce identical streams.
- Non-deterministic mode seeds from operating-system entropy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_transport.config import transport_config

if TYPE_CHECKING:
    from pysatl_transport.types import NumericArray


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for sources of i.i.d. ``U[0, 1)`` variates."""

    def random(self, size: int) -> NumericArray: ...


class PCGUniformSource:
    """
    Uniform source backed by ``numpy.random.Generator(PCG64(seed))``.

    Parameters
    ----------
    seed : int or None, default None
        Fixed seed for reproducible streams; ``None`` draws fresh entropy.
    """

    __slots__ = ("_generator", "_seed")

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._generator = np.random.Generator(np.random.PCG64(seed))

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def deterministic(self) -> bool:
        return self._seed is not None

    def random(self, size: int) -> NumericArray:
        """Draw ``size`` uniforms in ``[0, 1)`` as ``float64``."""
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}.")
        return self._generator.random(size, dtype=np.float64)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed!r})"


def make_uniform_source(deterministic: bool | None = None) -> PCGUniformSource:
    """
    Create a uniform source in the configured mode.

    Parameters
    ----------
    deterministic : bool or None, default None
        Override of ``transport_config().deterministic``.

    Returns
    -------
    PCGUniformSource
        Seeded with ``transport_config().seed`` in deterministic mode, from
        entropy otherwise.
    """
    config = transport_config()
    if deterministic is None:
        deterministic = config.deterministic
    return PCGUniformSource(config.seed if deterministic else None)


__all__ = [
    "PCGUniformSource",
    "UniformSource",
    "make_uniform_source",
]
