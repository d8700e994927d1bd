"""Selection functionality: character index precedence and coercion."""

from sessionspawn.core.selection.models import ResolvedSelection, SelectionSource
from sessionspawn.core.selection.operations import coerce_index, resolve_selection

__all__ = [
    "ResolvedSelection",
    "SelectionSource",
    "coerce_index",
    "resolve_selection",
]
