"""Placement models: positions, orientations, and spawn point sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        return cls()


@dataclass(frozen=True, slots=True)
class Quaternion:
    """Rotation as (x, y, z, w). The default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls()


@dataclass(frozen=True, slots=True)
class SpawnPoint:
    """A position/orientation pair."""

    position: Vector3 = Vector3()
    orientation: Quaternion = Quaternion()

    @classmethod
    def origin(cls) -> SpawnPoint:
        """Origin position with identity orientation."""
        return cls()


@dataclass(frozen=True, slots=True)
class SpawnPointSet:
    """Ordered, possibly empty, read-only sequence of spawn points."""

    points: tuple[SpawnPoint, ...] = ()

    @classmethod
    def of(cls, points: Iterable[SpawnPoint]) -> SpawnPointSet:
        return cls(points=tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> SpawnPoint:
        return self.points[index]
