"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from config import BokehConfig
from scheduler import AnimationScheduler
from viewport import Viewport


class ManualClock:
    """Shared animation clock that only moves when a test says so."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so failures reproduce."""
    return np.random.default_rng(1234)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport.from_bounds(800, 600)


@pytest.fixture
def make_scheduler(clock, rng, viewport):
    """Factory for schedulers sharing the test clock and generator."""
    def _make(**overrides) -> AnimationScheduler:
        config = BokehConfig(**{"count": 4, "leg_duration": 1000, **overrides})
        return AnimationScheduler(config, viewport, time_source=clock, rng=rng)
    return _make
