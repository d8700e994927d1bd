"""sessionspawn: spawn resolution and leader-gated session start for multiplayer sessions.

Usage:
    from sessionspawn import (
        EventDispatcher,
        PlayerSpawnResolver,
        SessionEvent,
        SessionStartCoordinator,
        SpawnableCatalog,
    )

    resolver = PlayerSpawnResolver(session, SpawnableCatalog.from_names(["Knight", "Mage"]))
    coordinator = SessionStartCoordinator(session)

    dispatcher = EventDispatcher()
    resolver.attach(dispatcher)
    coordinator.attach(dispatcher)

    dispatcher.dispatch(SessionEvent.JOINED_SESSION)  # spawns once
    coordinator.request_session_start()                # leader only
"""

__version__ = "0.1.0"

# Configuration
from sessionspawn.config import SessionStartSettings, SpawnSettings

# Coordination
from sessionspawn.coordination import SessionStartCoordinator, StartResult

# Core primitives
from sessionspawn.core import (
    UNSET_INDEX,
    AuthorizationDenied,
    ConfigurationError,
    Diagnostic,
    ErrorKind,
    InstantiationFailure,
    Quaternion,
    ResolvedSelection,
    SelectionSource,
    SessionSpawnError,
    SpawnableCatalog,
    SpawnableDescriptor,
    SpawnPoint,
    SpawnPointSet,
    Vector3,
)

# Session boundary
from sessionspawn.session import (
    AssetCatalog,
    EntityHandle,
    EventDispatcher,
    InMemoryAssetCatalog,
    InMemoryPreferenceStore,
    InMemorySessionService,
    PreferenceStore,
    SessionEvent,
    SessionService,
)

# Spawning
from sessionspawn.spawning import (
    PlayerSpawnResolver,
    SpawnDecision,
    SpawnGuard,
    SpawnOutcome,
    SpawnStatus,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "UNSET_INDEX",
    "ResolvedSelection",
    "SelectionSource",
    "SpawnableCatalog",
    "SpawnableDescriptor",
    "Vector3",
    "Quaternion",
    "SpawnPoint",
    "SpawnPointSet",
    # Errors
    "ErrorKind",
    "Diagnostic",
    "SessionSpawnError",
    "ConfigurationError",
    "AuthorizationDenied",
    "InstantiationFailure",
    # Session
    "SessionService",
    "PreferenceStore",
    "AssetCatalog",
    "SessionEvent",
    "EntityHandle",
    "EventDispatcher",
    "InMemorySessionService",
    "InMemoryPreferenceStore",
    "InMemoryAssetCatalog",
    # Spawning
    "PlayerSpawnResolver",
    "SpawnGuard",
    "SpawnDecision",
    "SpawnOutcome",
    "SpawnStatus",
    # Coordination
    "SessionStartCoordinator",
    "StartResult",
    # Config
    "SpawnSettings",
    "SessionStartSettings",
]
