"""Tests for environment-driven settings."""

from sessionspawn.config import SessionStartSettings, SpawnSettings
from sessionspawn.core.catalog import SpawnableDescriptor


def test_spawn_settings_defaults():
    settings = SpawnSettings(_env_file=None)

    assert settings.character_index_key == "character_index"
    assert settings.default_spawnable_name == "PlayerPrefab"
    assert settings.catalog == []


def test_spawn_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SPAWN_DEFAULT_SPAWNABLE_NAME", "Avatar")
    monkeypatch.setenv("SPAWN_CATALOG", '["Knight", null, "Mage"]')

    settings = SpawnSettings(_env_file=None)
    catalog = settings.build_catalog()

    assert settings.default_spawnable_name == "Avatar"
    assert len(catalog) == 3
    assert catalog.get(1) is None
    assert catalog.get(2) == SpawnableDescriptor("Mage")


def test_session_start_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SESSION_SESSION_IDENTIFIER", "Arena")
    monkeypatch.setenv("SESSION_IDENTIFIER_PROPERTY_KEY", "map")

    settings = SessionStartSettings(_env_file=None)

    assert settings.session_identifier == "Arena"
    assert settings.identifier_property_key == "map"


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("SESSION_SESSION_IDENTIFIER", "Arena")

    settings = SessionStartSettings(_env_file=None, session_identifier="Lobby")

    assert settings.session_identifier == "Lobby"
