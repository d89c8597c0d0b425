from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_transport.config import (
    DEFAULT_SEED,
    DETERMINISTIC_ENV_VAR,
    configure,
    reset_transport_config,
)
from pysatl_transport.stats.random import (
    PCGUniformSource,
    UniformSource,
    make_uniform_source,
)


class TestPCGUniformSource:
    def test_values_in_unit_interval(self) -> None:
        values = PCGUniformSource(seed=1).random(10_000)

        assert values.dtype == np.float64
        assert values.shape == (10_000,)
        assert ((values >= 0.0) & (values < 1.0)).all()
        assert float(values.mean()) == pytest.approx(0.5, abs=0.02)

    def test_same_seed_same_stream(self) -> None:
        first = PCGUniformSource(seed=DEFAULT_SEED).random(1_000)
        second = PCGUniformSource(seed=DEFAULT_SEED).random(1_000)

        np.testing.assert_array_equal(first, second)

    def test_stream_does_not_depend_on_chunking(self) -> None:
        whole = PCGUniformSource(seed=3).random(10)
        source = PCGUniformSource(seed=3)
        parts = np.concatenate([source.random(3), source.random(3), source.random(4)])

        np.testing.assert_array_equal(whole, parts)

    def test_negative_size_raises(self) -> None:
        with pytest.raises(ValueError, match="size must be >= 0"):
            PCGUniformSource(seed=0).random(-1)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(PCGUniformSource(), UniformSource)


class TestMakeUniformSource:
    def test_default_mode_is_deterministic(self) -> None:
        source = make_uniform_source()

        assert source.deterministic
        assert source.seed == DEFAULT_SEED

    def test_explicit_non_deterministic(self) -> None:
        source = make_uniform_source(deterministic=False)

        assert not source.deterministic
        assert source.seed is None

    def test_configured_seed_is_used(self) -> None:
        configure(seed=42)

        assert make_uniform_source().seed == 42

    def test_environment_flag_disables_determinism(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DETERMINISTIC_ENV_VAR, "false")
        reset_transport_config()

        assert not make_uniform_source().deterministic

    def test_deterministic_sources_repeat(self) -> None:
        np.testing.assert_array_equal(
            make_uniform_source().random(100), make_uniform_source().random(100)
        )
