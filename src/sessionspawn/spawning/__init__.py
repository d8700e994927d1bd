"""Spawn resolution for the local participant.

Architecture Note:
    spawning/ is stateful: the resolver owns the one-shot guard and talks to the
    session service. The decision logic it runs lives in core/.
"""

from sessionspawn.spawning.guard import GuardState, SpawnGuard
from sessionspawn.spawning.resolver import TRIGGER_EVENTS, PlayerSpawnResolver
from sessionspawn.spawning.result import SpawnDecision, SpawnOutcome, SpawnStatus

__all__ = [
    "PlayerSpawnResolver",
    "TRIGGER_EVENTS",
    "SpawnGuard",
    "GuardState",
    "SpawnDecision",
    "SpawnOutcome",
    "SpawnStatus",
]
