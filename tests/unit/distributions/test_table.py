from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
import pytest

from pysatl_transport.distributions.table import CDFTable, invert_table
from pysatl_transport.errors import DegenerateDensityError, TableInversionWarning


def _uniform_density(x: float) -> float:
    return 1.0


def _linear_density(x: float) -> float:
    return 2.0 * x


class TestCDFTableConstruction:
    def test_uniform_density_builds_linear_table(self) -> None:
        table = CDFTable.from_density(_uniform_density, pdf_samples=10_000, cdf_samples=100)

        assert table.size == 100
        assert len(table) == 100
        expected = np.arange(1, 101) / 100.0
        np.testing.assert_allclose(table.values, expected, atol=1e-3)

    def test_table_is_normalised_and_non_decreasing(self) -> None:
        table = CDFTable.from_density(_linear_density, pdf_samples=5_000, cdf_samples=50)

        assert table.values[-1] == 1.0
        assert np.all(np.diff(table.values) >= 0.0)
        assert table.masses().sum() == pytest.approx(1.0, abs=1e-12)
        assert np.all(table.masses() >= 0.0)

    def test_unnormalised_density_gives_same_table(self) -> None:
        base = CDFTable.from_density(_linear_density, pdf_samples=2_000, cdf_samples=20)
        scaled = CDFTable.from_density(lambda x: 1000.0 * x, pdf_samples=2_000, cdf_samples=20)

        np.testing.assert_allclose(base.values, scaled.values, rtol=1e-12)
        assert scaled.mass == pytest.approx(500.0 * base.mass, rel=1e-12)

    def test_mass_is_riemann_total(self) -> None:
        table = CDFTable.from_density(_linear_density, pdf_samples=5_000, cdf_samples=50)

        assert table.mass == pytest.approx(1.0, abs=1e-9)

    def test_zero_density_raises_degenerate(self) -> None:
        with pytest.raises(DegenerateDensityError, match="total mass"):
            CDFTable.from_density(lambda x: 0.0, pdf_samples=1_000, cdf_samples=10)

    def test_degenerate_density_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CDFTable.from_density(lambda x: 1e-300, pdf_samples=1_000, cdf_samples=10)

    def test_negative_density_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            CDFTable.from_density(lambda x: x - 0.5, pdf_samples=1_000, cdf_samples=10)

    def test_non_finite_density_raises(self) -> None:
        with pytest.raises(ValueError, match="non-finite"):
            CDFTable.from_density(lambda x: math.nan, pdf_samples=1_000, cdf_samples=10)

    @pytest.mark.parametrize(
        "pdf_samples, cdf_samples",
        [(1_000, 1), (10, 100)],
        ids=["table_too_short", "fine_coarser_than_table"],
    )
    def test_invalid_resolutions_raise(self, pdf_samples: int, cdf_samples: int) -> None:
        with pytest.raises(ValueError):
            CDFTable.from_density(_uniform_density, pdf_samples, cdf_samples)

    def test_from_cumulative_normalises_last_entry(self) -> None:
        table = CDFTable.from_cumulative([0.0, 1.0, 2.0, 4.0])

        np.testing.assert_allclose(table.values, [0.0, 0.25, 0.5, 1.0])
        assert table.mass == 1.0

    @pytest.mark.parametrize("mass", [0.0, -1.0, math.inf], ids=["zero", "negative", "inf"])
    def test_invalid_mass_rejected(self, mass: float) -> None:
        with pytest.raises(ValueError, match="mass"):
            CDFTable([0.5, 1.0], mass=mass)

    def test_from_cumulative_rejects_zero_total(self) -> None:
        with pytest.raises(DegenerateDensityError):
            CDFTable.from_cumulative([0.0, 0.0, 0.0])

    @pytest.mark.parametrize(
        "values",
        [[0.5, 0.4, 1.0], [0.1, 0.5, 0.9], [0.5], [0.2, math.inf, 1.0]],
        ids=["decreasing", "not_ending_at_one", "too_short", "non_finite"],
    )
    def test_constructor_validation(self, values: list[float]) -> None:
        with pytest.raises(ValueError):
            CDFTable(values)

    def test_values_are_read_only(self) -> None:
        table = CDFTable([0.5, 1.0])

        with pytest.raises(ValueError):
            table.values[0] = 0.1

    def test_tables_do_not_share_state(self) -> None:
        first = CDFTable.from_density(_uniform_density, pdf_samples=1_000, cdf_samples=10)
        snapshot = first.values.copy()
        second = CDFTable.from_density(_linear_density, pdf_samples=1_000, cdf_samples=10)

        with pytest.raises(DegenerateDensityError):
            CDFTable.from_density(lambda x: 0.0, pdf_samples=1_000, cdf_samples=10)

        assert first.values is not second.values
        assert not np.allclose(first.values, second.values)
        np.testing.assert_array_equal(first.values, snapshot)


class TestInvertTable:
    values = np.array([0.25, 0.5, 0.75, 1.0])

    @pytest.mark.parametrize(
        "u, expected",
        [(0.1, 0.0), (0.25, 0.0), (0.5, 0.25), (0.6, 0.35), (1.0, 0.75)],
        ids=["below_first", "at_first", "at_entry", "between_entries", "at_last"],
    )
    def test_lower_bound_search_and_linear_reconstruction(self, u: float, expected: float) -> None:
        assert invert_table(self.values, u, 4) == pytest.approx(expected)

    def test_out_of_range_queries_are_clamped(self) -> None:
        assert invert_table(self.values, -0.5, 4) == 0.0
        assert invert_table(self.values, 1.5, 4) == 1.0

    def test_vectorised_shape_is_preserved(self) -> None:
        result = invert_table(self.values, np.array([[0.1, 0.6], [0.5, 1.0]]), 4)

        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 2)
        np.testing.assert_allclose(result, [[0.0, 0.35], [0.25, 0.75]])

    def test_scalar_query_returns_float(self) -> None:
        assert isinstance(invert_table(self.values, 0.6, 4), float)

    def test_table_miss_returns_one_and_warns(self) -> None:
        short = np.array([0.1, 0.2, 0.5])

        with pytest.warns(TableInversionWarning, match="No table entry"):
            result = invert_table(short, 0.7, 3)

        assert result == 1.0

    def test_clamped_query_does_not_warn(self) -> None:
        short = np.array([0.1, 0.2, 0.5])

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert invert_table(short, 1.5, 3) == 1.0


class TestCDFTableLookups:
    table = CDFTable([0.25, 0.5, 0.75, 1.0])

    def test_ppf_domain_bounds(self) -> None:
        assert self.table.ppf(0.0) == 0.0
        assert self.table.ppf(1.0) == 1.0
        assert self.table.ppf(-1.0) == 0.0
        assert self.table.ppf(2.0) == 1.0

    def test_ppf_inner_values(self) -> None:
        np.testing.assert_allclose(self.table.ppf(np.array([0.5, 0.6])), [0.25, 0.35])

    @pytest.mark.parametrize(
        "x, expected",
        [(-1.0, 0.0), (0.0, 0.25), (0.125, 0.375), (0.5, 0.75), (1.0, 1.0), (2.0, 1.0)],
    )
    def test_cdf_linear_reconstruction(self, x: float, expected: float) -> None:
        assert self.table.cdf(x) == pytest.approx(expected)

    def test_ppf_is_non_decreasing(self) -> None:
        table = CDFTable.from_density(_linear_density, pdf_samples=10_000, cdf_samples=100)
        values = table.ppf(np.linspace(0.0, 1.0, 2001))

        assert np.all(np.diff(values) >= 0.0)

    def test_cdf_inverts_ppf_inside_table(self) -> None:
        table = CDFTable.from_density(_linear_density, pdf_samples=10_000, cdf_samples=100)
        u = np.linspace(0.05, 0.95, 181)

        np.testing.assert_allclose(table.cdf(table.ppf(u)), u, atol=1e-9)
