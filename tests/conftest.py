from __future__ import annotations

from typing import Iterator

import pytest

from motion_engine.runtime import reset_config


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    reset_config()
    yield
    reset_config()
