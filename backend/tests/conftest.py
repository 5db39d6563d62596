"""Shared test configuration and fixtures."""

import random

import pytest

from config import settings


class PinnedRandom(random.Random):
    """Random source whose jitter is fixed; ``choice`` stays seeded."""

    def __init__(self, jitter: int) -> None:
        super().__init__(0)
        self.jitter = jitter

    def randrange(self, *args, **kwargs) -> int:
        return self.jitter


@pytest.fixture
def pinned_rng():
    return PinnedRandom


@pytest.fixture(autouse=True)
def _no_search_delay(monkeypatch):
    """Skip the courtesy pause between sequential searches."""
    monkeypatch.setattr(settings, "search_delay_seconds", 0.0)
