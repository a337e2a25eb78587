"""Pytest configuration for hydrology domain tests.

Landscapes are plain sequences or Landscape Value Objects built directly in
tests; no I/O is involved.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so random landscapes are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def random_heights(rng: np.random.Generator) -> Callable[..., list[int]]:
    """Factory for random height lists.

    Usage:
        def test_something(random_heights):
            heights = random_heights(1000, high=50)
    """

    def make(size: int, high: int = 32_000) -> list[int]:
        return rng.integers(0, high, size=size, endpoint=True).tolist()

    return make
