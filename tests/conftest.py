"""Shared fixtures for Castscore tests."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from castscore.catalog.models import Channel, Episode, MediaType

GOOD_TITLE = "Fermenting Vegetables at Home with Maria Lopez"
GOOD_DESCRIPTION = "Chef Maria Lopez explains fermentation for home cooks. " + (
    "Fermentation preserves food and builds flavor over time. " * 40
)


@pytest.fixture
def channel() -> Channel:
    """A single audio channel."""
    return Channel(
        id="ch-1",
        name="Kitchen Science",
        type=MediaType.AUDIO,
        description="Food science for curious cooks",
    )


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Factory for episodes that pass every quality rule unless overridden."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Episode:
        counter["n"] += 1
        n = counter["n"]
        fields: dict[str, Any] = {
            "id": f"ep-{n}",
            "channel_id": "ch-1",
            "title": GOOD_TITLE,
            "description": GOOD_DESCRIPTION,
            "transcript": "Welcome back. Today we ferment cabbage and carrots.",
            "duration": "00:45:00",
            "episode_number": n,
            "artwork_url": "https://example.com/art.png",
            "published_at": datetime(2025, 1, 1, tzinfo=timezone.utc) + timedelta(days=n),
        }
        fields.update(overrides)
        return Episode(**fields)

    return _make


@pytest.fixture
def good_episode(make_episode: Callable[..., Episode]) -> Episode:
    return make_episode()


@pytest.fixture
def bare_episode() -> Episode:
    """Episode with only a decent title and nothing else."""
    return Episode(id="bare", channel_id="ch-1", title=GOOD_TITLE)
