from __future__ import annotations

from collections.abc import Iterator

import pytest

from delve.util import rng


@pytest.fixture(autouse=True)
def seeded_global_rng() -> Iterator[None]:
    """Pin the global RNG streams so tests using default streams repeat."""
    rng.init(0)
    yield
    rng.init(0)
