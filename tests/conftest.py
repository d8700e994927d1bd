"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from sessionspawn import InMemorySessionService, SpawnSettings


@pytest.fixture
def settings():
    """Spawn settings independent of the environment and any .env file."""
    return SpawnSettings(
        _env_file=None,
        character_index_key="character_index",
        default_spawnable_name="PlayerPrefab",
    )


@pytest.fixture
def session():
    """Session member with ordinal 1, not leader."""
    return InMemorySessionService(member=True, ordinal=1)
