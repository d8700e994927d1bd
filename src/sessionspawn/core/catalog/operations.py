"""Descriptor resolution as an ordered chain of tiers.

Each tier looks at a DescriptorRequest and either resolves a descriptor or
continues to the next tier. Tiers run in fixed priority order; the first one that
resolves wins.

Usage:
    resolution = resolve_descriptor(
        DescriptorRequest(
            selection=ResolvedSelection(index=7, source=SelectionSource.LOCAL),
            catalog=SpawnableCatalog.from_names(["A", "B"]),
            default_name="PlayerPrefab",
        )
    )
    resolution.descriptor   # SpawnableDescriptor(name="PlayerPrefab")
    resolution.diagnostics  # [Diagnostic(kind=SELECTION_WARNING, ...)]
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from sessionspawn.core.catalog.models import SpawnableCatalog, SpawnableDescriptor
from sessionspawn.core.errors import ConfigurationError, Diagnostic, ErrorKind
from sessionspawn.core.selection import ResolvedSelection


@dataclass(frozen=True, slots=True)
class DescriptorRequest:
    """Inputs shared by all tiers."""

    selection: ResolvedSelection
    catalog: SpawnableCatalog
    inspector_default: SpawnableDescriptor | None = None
    default_name: str = ""


@dataclass(frozen=True, slots=True)
class TierResult:
    """Result of one tier: a descriptor, or None to continue."""

    descriptor: SpawnableDescriptor | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.descriptor is not None


CONTINUE = TierResult()

type DescriptorTier = Callable[[DescriptorRequest], TierResult]


def catalog_tier(request: DescriptorRequest) -> TierResult:
    """Resolve the chosen index against the catalog.

    Raises:
        ConfigurationError: If the entry at a valid index has an empty name.
    """
    selection = request.selection
    if not selection.is_set:
        return CONTINUE

    index = selection.index
    catalog = request.catalog
    if not catalog.in_range(index):
        warning = Diagnostic(
            kind=ErrorKind.SELECTION_WARNING,
            message="chosen index out of catalog range, falling back to defaults",
            context={"chosen_index": index, "catalog_size": len(catalog)},
        )
        return TierResult(diagnostics=(warning,))

    descriptor = catalog.get(index)
    if descriptor is None:
        warning = Diagnostic(
            kind=ErrorKind.SELECTION_WARNING,
            message="catalog entry is absent, falling back to defaults",
            context={"chosen_index": index, "catalog_size": len(catalog)},
        )
        return TierResult(diagnostics=(warning,))

    if descriptor.is_empty:
        raise ConfigurationError("catalog entry has an empty descriptor name", chosen_index=index)

    return TierResult(descriptor=descriptor)


def inspector_default_tier(request: DescriptorRequest) -> TierResult:
    """Use the statically configured default descriptor, if any."""
    if request.inspector_default is None:
        return CONTINUE
    return TierResult(descriptor=request.inspector_default)


def default_name_tier(request: DescriptorRequest) -> TierResult:
    """Terminal tier: the registered default name, possibly empty."""
    return TierResult(descriptor=SpawnableDescriptor(name=request.default_name))


DEFAULT_TIERS: tuple[DescriptorTier, ...] = (
    catalog_tier,
    inspector_default_tier,
    default_name_tier,
)


@dataclass(slots=True)
class DescriptorResolution:
    """Outcome of running the tier chain.

    Attributes:
        descriptor: Winning descriptor, None on configuration failure.
        tier: Name of the winning tier function, None on failure.
        diagnostics: Everything reported along the way, in order.
    """

    descriptor: SpawnableDescriptor | None = None
    tier: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


def resolve_descriptor(
    request: DescriptorRequest,
    tiers: Sequence[DescriptorTier] = DEFAULT_TIERS,
) -> DescriptorResolution:
    """Run tiers in order until one resolves.

    Configuration failures (an empty catalog entry, or an empty final name) are
    returned as a CONFIGURATION diagnostic with no descriptor; nothing is raised.

    Args:
        request: Selection, catalog, and default inputs.
        tiers: Tier functions in priority order.

    Returns:
        DescriptorResolution with descriptor and collected diagnostics.
    """
    resolution = DescriptorResolution()
    for tier in tiers:
        try:
            result = tier(request)
        except ConfigurationError as e:
            resolution.diagnostics.append(e.to_diagnostic())
            return resolution

        resolution.diagnostics.extend(result.diagnostics)
        descriptor = result.descriptor
        if descriptor is None:
            continue

        if descriptor.is_empty:
            error = ConfigurationError(
                "no spawnable descriptor configured and no selection found to spawn",
                chosen_index=request.selection.index,
                tier=tier.__name__,
            )
            resolution.diagnostics.append(error.to_diagnostic())
            return resolution

        resolution.descriptor = descriptor
        resolution.tier = tier.__name__
        return resolution

    error = ConfigurationError(
        "no descriptor tier resolved", chosen_index=request.selection.index
    )
    resolution.diagnostics.append(error.to_diagnostic())
    return resolution
