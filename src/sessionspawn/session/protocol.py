"""Protocols for the external collaborators.

The session service, the local preference store, and the asset catalog are owned
by the host application. Components receive them by injection, so tests and local
runs can supply the in-memory implementations from sessionspawn.session.local.

Usage:
    session = InMemorySessionService(ordinal=2)
    resolver = PlayerSpawnResolver(session=session, catalog=catalog)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sessionspawn.core.placement import Quaternion, Vector3
    from sessionspawn.core.types import Payload
    from sessionspawn.session.models import EntityHandle


@runtime_checkable
class SessionService(Protocol):
    """Real-time session transport as seen by this package.

    Membership, property replication, leader election and remote instantiation
    are all implemented by the service. This package only reads state, proposes
    writes, and requests instantiation.
    """

    def is_session_member(self) -> bool:
        """Check whether the local participant is in an active session."""
        ...

    def get_local_ordinal(self) -> int:
        """Stable, unique, 1-based ordinal of the local participant."""
        ...

    def get_replicated_property(self, key: str) -> Any | None:
        """Read a property from the local participant's replicated property set.

        Returns:
            The value, or None if the key is absent.
        """
        ...

    def set_replicated_properties(self, properties: Mapping[str, Any]) -> None:
        """Propose a write to the room-wide replicated properties.

        Note:
            Best-effort. Global visibility may lag; callers must not wait on it.
        """
        ...

    def is_local_participant_leader(self) -> bool:
        """Check whether the local participant is the current session leader."""
        ...

    def instantiate(
        self,
        descriptor_id: str,
        position: Vector3,
        orientation: Quaternion,
        payload: Payload,
    ) -> EntityHandle | None:
        """Instantiate a networked entity.

        Args:
            descriptor_id: Descriptor to instantiate.
            position: World position.
            orientation: World rotation.
            payload: Opaque data delivered to the spawned entity.

        Returns:
            Handle to the new entity, or None if the service could not create it.

        Raises:
            LookupError: Descriptor is not instantiable (configuration problem).
            Exception: Any other transport failure.
        """
        ...

    def load_shared_context(self, identifier: str) -> None:
        """Instruct every participant to transition into the identified context.

        Fire-and-forget from the caller's perspective.
        """
        ...


@runtime_checkable
class PreferenceStore(Protocol):
    """Local persistent key-value store. Read path only."""

    def get_int(self, key: str, default: int) -> int:
        """Get an integer preference, or default if absent."""
        ...

    def has_key(self, key: str) -> bool:
        """Check whether a preference is stored under key."""
        ...


@runtime_checkable
class AssetCatalog(Protocol):
    """Asset resolution, used for pre-flight diagnostics only."""

    def exists(self, descriptor_id: str) -> bool:
        """Check whether the descriptor can be resolved to an asset."""
        ...
