"""Configuration module using Pydantic Settings.

Usage:
    from sessionspawn.config import SpawnSettings, SessionStartSettings

    settings = SpawnSettings(default_spawnable_name="Avatar")
"""

from sessionspawn.config.settings import SessionStartSettings, SpawnSettings

__all__ = [
    "SpawnSettings",
    "SessionStartSettings",
]
