"""Core stateless functionality: selection, catalog tiers, placement, errors.

Architecture Note:
    core/ holds pure functions and immutable models. Stateful services that talk
    to the session (spawning/, coordination/) build on top of it.
"""

from sessionspawn.core.catalog import (
    DEFAULT_TIERS,
    DescriptorRequest,
    DescriptorResolution,
    SpawnableCatalog,
    SpawnableDescriptor,
    resolve_descriptor,
)
from sessionspawn.core.errors import (
    AuthorizationDenied,
    ConfigurationError,
    Diagnostic,
    ErrorKind,
    InstantiationFailure,
    SessionSpawnError,
)
from sessionspawn.core.placement import (
    Quaternion,
    SpawnPoint,
    SpawnPointSet,
    Vector3,
    compute_spawn_transform,
    spawn_point_index,
)
from sessionspawn.core.selection import (
    ResolvedSelection,
    SelectionSource,
    coerce_index,
    resolve_selection,
)
from sessionspawn.core.types import UNSET_INDEX, Payload

__all__ = [
    "UNSET_INDEX",
    "Payload",
    # Errors
    "ErrorKind",
    "Diagnostic",
    "SessionSpawnError",
    "ConfigurationError",
    "AuthorizationDenied",
    "InstantiationFailure",
    # Selection
    "ResolvedSelection",
    "SelectionSource",
    "coerce_index",
    "resolve_selection",
    # Catalog
    "SpawnableCatalog",
    "SpawnableDescriptor",
    "DescriptorRequest",
    "DescriptorResolution",
    "DEFAULT_TIERS",
    "resolve_descriptor",
    # Placement
    "Vector3",
    "Quaternion",
    "SpawnPoint",
    "SpawnPointSet",
    "compute_spawn_transform",
    "spawn_point_index",
]
