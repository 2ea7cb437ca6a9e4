from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_probdist.config import reset_numeric_config

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_numeric_config() -> Generator[None, Any, None]:
    reset_numeric_config()
    yield
    reset_numeric_config()
