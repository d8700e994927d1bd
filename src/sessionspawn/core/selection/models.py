"""Selection models: where a character index came from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from sessionspawn.core.types import UNSET_INDEX


class SelectionSource(Enum):
    """Which preference source produced the chosen index."""

    REPLICATED = auto()  # participant's replicated property set
    LOCAL = auto()  # local key-value store
    NONE = auto()  # neither source had a usable value


@dataclass(frozen=True, slots=True)
class ResolvedSelection:
    """Outcome of selection resolution.

    Attributes:
        index: Chosen character index, or UNSET_INDEX.
        source: Where the index came from.
    """

    index: int = UNSET_INDEX
    source: SelectionSource = SelectionSource.NONE

    @property
    def is_set(self) -> bool:
        return self.index >= 0

    @classmethod
    def unset(cls) -> ResolvedSelection:
        return cls()
