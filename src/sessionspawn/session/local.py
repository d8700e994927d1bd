"""In-memory collaborators for single-process use and testing.

Scripted stand-ins for the session service, the local preference store and the
asset catalog. Every session call is recorded in order so tests can assert on
exactly what was requested.

Usage:
    session = InMemorySessionService(ordinal=3, leader=True)
    session.set_player_property("character_index", 1)
    preferences = InMemoryPreferenceStore({"character_index": 4})
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sessionspawn.core.placement import Quaternion, Vector3
from sessionspawn.core.types import Payload
from sessionspawn.session.models import EntityHandle


@dataclass(frozen=True, slots=True)
class RecordedCall:
    """One call made against InMemorySessionService."""

    method: str
    args: tuple[Any, ...] = ()


class InMemorySessionService:
    """Scripted session service.

    Args:
        member: Whether the local participant starts inside a session.
        ordinal: Local participant ordinal (1-based).
        leader: Whether the local participant starts as leader.
        player_properties: Initial replicated properties of the local participant.
        known_descriptors: Descriptors instantiate() accepts. None accepts all;
            anything else raises LookupError.
    """

    def __init__(
        self,
        member: bool = True,
        ordinal: int = 1,
        leader: bool = False,
        player_properties: Mapping[str, Any] | None = None,
        known_descriptors: Iterable[str] | None = None,
    ):
        self._member = member
        self._ordinal = ordinal
        self._leader = leader
        self.player_properties: dict[str, Any] = dict(player_properties or {})
        self.room_properties: dict[str, Any] = {}
        self._known = None if known_descriptors is None else frozenset(known_descriptors)
        self._next_handle_id = 1

        self.calls: list[RecordedCall] = []
        self.instantiated: list[EntityHandle] = []
        self.loaded_contexts: list[str] = []

        self.instantiate_error: Exception | None = None
        """If set, instantiate() raises this instead of creating an entity."""
        self.instantiate_returns_none = False
        """If True, instantiate() returns None instead of a handle."""
        self.on_instantiate: Callable[[], Any] | None = None
        """Hook run inside instantiate() before it returns, e.g. to deliver an event."""

    # Scripting helpers

    def join(self, ordinal: int | None = None) -> None:
        self._member = True
        if ordinal is not None:
            self._ordinal = ordinal

    def leave(self) -> None:
        self._member = False

    def set_leader(self, leader: bool) -> None:
        self._leader = leader

    def set_player_property(self, key: str, value: Any) -> None:
        self.player_properties[key] = value

    def calls_to(self, method: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.method == method]

    # SessionService

    def is_session_member(self) -> bool:
        return self._member

    def get_local_ordinal(self) -> int:
        return self._ordinal

    def get_replicated_property(self, key: str) -> Any | None:
        return self.player_properties.get(key)

    def set_replicated_properties(self, properties: Mapping[str, Any]) -> None:
        self.calls.append(RecordedCall("set_replicated_properties", (dict(properties),)))
        self.room_properties.update(properties)

    def is_local_participant_leader(self) -> bool:
        return self._leader

    def instantiate(
        self,
        descriptor_id: str,
        position: Vector3,
        orientation: Quaternion,
        payload: Payload,
    ) -> EntityHandle | None:
        self.calls.append(
            RecordedCall("instantiate", (descriptor_id, position, orientation, payload))
        )
        if self.on_instantiate is not None:
            self.on_instantiate()
        if self.instantiate_error is not None:
            raise self.instantiate_error
        if self._known is not None and descriptor_id not in self._known:
            raise LookupError(f"Descriptor '{descriptor_id}' is not instantiable")
        if self.instantiate_returns_none:
            return None

        handle = EntityHandle(
            handle_id=self._next_handle_id,
            descriptor_id=descriptor_id,
            owner_ordinal=self._ordinal,
        )
        self._next_handle_id += 1
        self.instantiated.append(handle)
        return handle

    def load_shared_context(self, identifier: str) -> None:
        self.calls.append(RecordedCall("load_shared_context", (identifier,)))
        self.loaded_contexts.append(identifier)


class InMemoryPreferenceStore:
    """Dict-backed local preference store."""

    def __init__(self, values: Mapping[str, int] | None = None):
        self._values: dict[str, int] = dict(values or {})

    def get_int(self, key: str, default: int) -> int:
        return self._values.get(key, default)

    def has_key(self, key: str) -> bool:
        return key in self._values

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = value

    def delete_key(self, key: str) -> bool:
        return self._values.pop(key, None) is not None


class InMemoryAssetCatalog:
    """Set-backed asset catalog."""

    def __init__(self, names: Iterable[str] = ()):
        self._names = set(names)

    def exists(self, descriptor_id: str) -> bool:
        return descriptor_id in self._names

    def add(self, descriptor_id: str) -> None:
        self._names.add(descriptor_id)
