from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_transport.config import DETERMINISTIC_ENV_VAR, reset_transport_config

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, Any, None]:
    monkeypatch.delenv(DETERMINISTIC_ENV_VAR, raising=False)
    reset_transport_config()
    yield
    reset_transport_config()
