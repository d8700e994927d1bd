"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the spawn
resolver and the session start coordinator.

Usage:
    from sessionspawn.config import SpawnSettings, SessionStartSettings

    # Load from environment variables (SPAWN_*, SESSION_*)
    spawn_settings = SpawnSettings()
    start_settings = SessionStartSettings()

    # Or override with explicit values
    spawn_settings = SpawnSettings(catalog=["Knight", None, "Mage"])
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sessionspawn.core.catalog import SpawnableCatalog


class SpawnSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for PlayerSpawnResolver.

    Attributes:
        character_index_key: Key of the character index, shared by the replicated
            property set and the local preference store.
        default_spawnable_name: Terminal fallback descriptor name. An empty value
            makes resolution fail with a configuration error when nothing else
            resolves.
        catalog: Ordered descriptor names, null for holes.

    Environment Variables:
        SPAWN_CHARACTER_INDEX_KEY
        SPAWN_DEFAULT_SPAWNABLE_NAME
        SPAWN_CATALOG (JSON list, e.g. '["Knight", null, "Mage"]')
    """

    model_config = SettingsConfigDict(
        env_prefix="SPAWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    character_index_key: str = "character_index"
    default_spawnable_name: str = "PlayerPrefab"
    catalog: list[str | None] = Field(default_factory=list)

    def build_catalog(self) -> SpawnableCatalog:
        """Build the immutable catalog from the configured names."""
        return SpawnableCatalog.from_names(self.catalog)


class SessionStartSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for SessionStartCoordinator.

    Attributes:
        session_identifier: Shared context the leader starts.
        identifier_property_key: Room property the identifier is written under.

    Environment Variables:
        SESSION_SESSION_IDENTIFIER
        SESSION_IDENTIFIER_PROPERTY_KEY
    """

    model_config = SettingsConfigDict(
        env_prefix="SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    session_identifier: str = "SessionScene"
    identifier_property_key: str = "scene"
