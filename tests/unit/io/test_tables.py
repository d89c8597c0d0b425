from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import csv
from pathlib import Path

import numpy as np
import pytest

from pysatl_transport.distributions import LinearDistribution, UniformDistribution
from pysatl_transport.io import write_columns_csv, write_interpolation_csv
from pysatl_transport.stats import DensityBlendStrategy, DistributionInterpolator


class TestWriteColumnsCsv:
    def test_header_and_values(self, tmp_path: Path) -> None:
        target = write_columns_csv(
            tmp_path / "table.csv", ["a", "b"], [np.array([0.1, 0.2]), np.array([1.0, 2.5])]
        )

        with target.open(newline="", encoding="utf-8") as handle:
            rows = list(csv.reader(handle))

        assert rows[0] == ["a", "b"]
        assert [[float(v) for v in row] for row in rows[1:]] == [[0.1, 1.0], [0.2, 2.5]]

    def test_every_field_is_quoted(self, tmp_path: Path) -> None:
        target = write_columns_csv(tmp_path / "table.csv", ["0%"], [np.array([0.5])])
        lines = target.read_text(encoding="utf-8").splitlines()

        assert lines == ['"0%"', '"0.5"']

    def test_returns_path(self, tmp_path: Path) -> None:
        target = write_columns_csv(str(tmp_path / "table.csv"), ["x"], [np.zeros(3)])

        assert isinstance(target, Path)
        assert target.exists()

    def test_label_count_mismatch(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="labels"):
            write_columns_csv(tmp_path / "table.csv", ["a"], [np.zeros(2), np.zeros(2)])

    def test_column_length_mismatch(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="equal length"):
            write_columns_csv(tmp_path / "table.csv", ["a", "b"], [np.zeros(2), np.zeros(3)])

    def test_missing_directory_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_columns_csv(tmp_path / "missing" / "table.csv", ["a"], [np.zeros(1)])


class TestWriteInterpolationCsv:
    def test_roundtrip_of_result(self, tmp_path: Path) -> None:
        interpolator = DistributionInterpolator(DensityBlendStrategy(num_values=8))
        result = interpolator.interpolate(UniformDistribution(), LinearDistribution(), 3)
        target = write_interpolation_csv(tmp_path / "density.csv", result)

        with target.open(newline="", encoding="utf-8") as handle:
            rows = list(csv.reader(handle))

        assert rows[0] == ["0%", "50%", "100%"]
        assert len(rows) == 9
        values = np.array([[float(v) for v in row] for row in rows[1:]])
        np.testing.assert_array_equal(values, result.pdfs.T)
