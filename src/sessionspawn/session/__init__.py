"""Session boundary: collaborator protocols, events, dispatch, in-memory fakes.

Architecture Note:
    Everything the host owns (transport, preference storage, assets) is reached
    through the protocols here. Components never import a concrete service.
"""

from sessionspawn.session.dispatcher import EventDispatcher, EventHandler
from sessionspawn.session.local import (
    InMemoryAssetCatalog,
    InMemoryPreferenceStore,
    InMemorySessionService,
    RecordedCall,
)
from sessionspawn.session.models import EntityHandle, SessionEvent
from sessionspawn.session.protocol import AssetCatalog, PreferenceStore, SessionService

__all__ = [
    "SessionService",
    "PreferenceStore",
    "AssetCatalog",
    "SessionEvent",
    "EntityHandle",
    "EventDispatcher",
    "EventHandler",
    "InMemorySessionService",
    "InMemoryPreferenceStore",
    "InMemoryAssetCatalog",
    "RecordedCall",
]
