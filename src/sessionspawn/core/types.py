"""Core type definitions for sessionspawn."""

from typing import Any

UNSET_INDEX = -1
"""Sentinel character index meaning "no selection was made"."""

type Payload = tuple[Any, ...]
"""Opaque instantiation data handed to the spawned entity.

The resolver always sends ``(chosen_index,)`` so the entity can configure itself
without re-reading selection state.
"""
