"""Selection resolution: replicated preference first, local preference second.

Usage:
    selection = resolve_selection(
        replicated=session.get_replicated_property("character_index"),
        local_store=preferences,
        key="character_index",
    )
    if selection.is_set:
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sessionspawn.core.selection.models import ResolvedSelection, SelectionSource
from sessionspawn.core.types import UNSET_INDEX

if TYPE_CHECKING:
    from sessionspawn.session.protocol import PreferenceStore


def coerce_index(value: Any) -> int:
    """Coerce a replicated property value to a character index.

    Ints are taken as-is, as are floats with an integral value. Anything else
    is parsed from its string form; values that do not parse (including bools,
    None, and fractional or non-finite floats) yield UNSET_INDEX.

    Args:
        value: Raw property value.

    Returns:
        Parsed index, or UNSET_INDEX.
    """
    if isinstance(value, bool) or value is None:
        return UNSET_INDEX
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else UNSET_INDEX
    try:
        return int(str(value).strip())
    except ValueError:
        return UNSET_INDEX


def resolve_selection(
    replicated: Any,
    local_store: PreferenceStore | None,
    key: str,
) -> ResolvedSelection:
    """Resolve the chosen character index without blocking.

    A negative or unparseable replicated value counts as absent and falls through
    to the local store. A negative local value counts as unset.

    Args:
        replicated: Value of the replicated property, None if absent.
        local_store: Local preference store, or None when there isn't one.
        key: Logical preference key, shared by both sources.

    Returns:
        ResolvedSelection with index and source.
    """
    index = coerce_index(replicated)
    if index >= 0:
        return ResolvedSelection(index=index, source=SelectionSource.REPLICATED)

    if local_store is not None and local_store.has_key(key):
        local_index = local_store.get_int(key, UNSET_INDEX)
        if local_index >= 0:
            return ResolvedSelection(index=local_index, source=SelectionSource.LOCAL)

    return ResolvedSelection.unset()
