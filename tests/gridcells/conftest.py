from __future__ import annotations

from collections.abc import Iterator

import pytest

from gridcells.config import GridcellsConfig, use_config


@pytest.fixture(autouse=True)
def default_config() -> Iterator[GridcellsConfig]:
    with use_config(GridcellsConfig()) as config:
        yield config
