"""Session boundary models: lifecycle events and entity handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionEvent(Enum):
    """Lifecycle events delivered by the session service."""

    PROCESS_READY = "process_ready"
    JOINED_SESSION = "joined_session"
    LEADER_CHANGED = "leader_changed"
    PARTICIPANT_JOINED = "participant_joined"
    PARTICIPANT_LEFT = "participant_left"


@dataclass(frozen=True, slots=True)
class EntityHandle:
    """Handle to an entity instantiated by the session service.

    Attributes:
        handle_id: Service-assigned identifier, unique per session.
        descriptor_id: Descriptor the entity was created from.
        owner_ordinal: Ordinal of the participant that owns the entity.
    """

    handle_id: int
    descriptor_id: str
    owner_ordinal: int = 0
