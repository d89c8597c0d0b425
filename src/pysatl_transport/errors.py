"""
Exceptions and warning categories raised by PySATL Transport.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DegenerateDensityError(ValueError):
    """Raised when a density cannot be normalised because its total mass is ~0."""

    def __init__(self, total_mass: float, context: str = "density") -> None:
        self.total_mass = total_mass
        super().__init__(
            f"Cannot normalise {context}: total mass {total_mass!r} is zero or not finite. "
            "Check that the density is non-negative and not identically zero on [0, 1]."
        )


class TableInversionWarning(RuntimeWarning):
    """
    Emitted when a table lookup finds no entry ``>= u`` for ``u < 1``.

    The lookup falls back to the upper domain bound ``1.0``.
    """


__all__ = [
    "DegenerateDensityError",
    "TableInversionWarning",
]
