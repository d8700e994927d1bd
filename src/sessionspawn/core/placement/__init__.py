"""Placement functionality: transforms and ordinal-keyed spawn point selection."""

from sessionspawn.core.placement.models import Quaternion, SpawnPoint, SpawnPointSet, Vector3
from sessionspawn.core.placement.operations import compute_spawn_transform, spawn_point_index

__all__ = [
    "Vector3",
    "Quaternion",
    "SpawnPoint",
    "SpawnPointSet",
    "compute_spawn_transform",
    "spawn_point_index",
]
