"""Deterministic spawn point distribution keyed by participant ordinal.

Participants are assigned round-robin: ordinals 1..N map to points 0..N-1, and
further ordinals wrap around. Ordinals come from the session service and are
unique per participant, so two participants share a point only when there are
fewer points than participants.
"""

from __future__ import annotations

from sessionspawn.core.placement.models import SpawnPoint, SpawnPointSet


def spawn_point_index(ordinal: int, point_count: int) -> int | None:
    """Index into a point set for a 1-based ordinal.

    Args:
        ordinal: Participant ordinal (1-based).
        point_count: Number of available points.

    Returns:
        (ordinal - 1) mod point_count, or None when there are no points.
    """
    if point_count <= 0:
        return None
    return (ordinal - 1) % point_count


def compute_spawn_transform(points: SpawnPointSet, ordinal: int) -> SpawnPoint:
    """Pick the spawn transform for a participant.

    Args:
        points: Available spawn points.
        ordinal: Participant ordinal (1-based).

    Returns:
        The selected point, or the origin/identity transform when points is empty.
    """
    index = spawn_point_index(ordinal, len(points))
    if index is None:
        return SpawnPoint.origin()
    return points[index]
