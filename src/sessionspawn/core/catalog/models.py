"""Spawnable catalog models.

Usage:
    catalog = SpawnableCatalog.from_names(["Knight", None, "Mage"])
    catalog.get(2)  # SpawnableDescriptor(name="Mage")
    catalog.get(1)  # None - hole
    len(catalog)    # 3
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpawnableDescriptor:
    """Opaque identifier naming a spawnable entity for the instantiation primitive."""

    name: str

    @property
    def is_empty(self) -> bool:
        return not self.name


type CatalogEntry = SpawnableDescriptor | str | None


def _to_descriptor(entry: CatalogEntry) -> SpawnableDescriptor | None:
    if entry is None or isinstance(entry, SpawnableDescriptor):
        return entry
    return SpawnableDescriptor(name=entry)


@dataclass(frozen=True, slots=True)
class SpawnableCatalog:
    """Immutable index -> descriptor mapping with holes.

    The valid range is [0, len(catalog)). Any index inside it may be a hole (None),
    which callers treat as a recoverable selection problem. An entry that exists but
    has an empty name is a configuration problem instead.
    """

    entries: tuple[SpawnableDescriptor | None, ...] = ()

    @classmethod
    def from_names(cls, names: Iterable[CatalogEntry]) -> SpawnableCatalog:
        """Build from an ordered sequence, None marking holes."""
        return cls(entries=tuple(_to_descriptor(name) for name in names))

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, CatalogEntry]) -> SpawnableCatalog:
        """Build from a sparse mapping. Missing indices below the maximum become holes.

        Raises:
            ValueError: If any index is negative.
        """
        if not mapping:
            return cls()
        if min(mapping) < 0:
            raise ValueError(f"Catalog indices must be non-negative, got {min(mapping)}")
        size = max(mapping) + 1
        return cls(entries=tuple(_to_descriptor(mapping.get(i)) for i in range(size)))

    def __len__(self) -> int:
        return len(self.entries)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.entries)

    def get(self, index: int) -> SpawnableDescriptor | None:
        """Get descriptor at index. None for holes and out-of-range indices."""
        if not self.in_range(index):
            return None
        return self.entries[index]

    def items(self) -> Iterator[tuple[int, SpawnableDescriptor]]:
        """Iterate (index, descriptor) for non-hole entries."""
        for index, descriptor in enumerate(self.entries):
            if descriptor is not None:
                yield index, descriptor
