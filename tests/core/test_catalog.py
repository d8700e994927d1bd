"""Tests for the spawnable catalog and the descriptor tier chain.

Critical Invariants:
- Tiers run in fixed priority order, first resolved wins
- An out-of-range or absent selection emits exactly one SelectionWarning
- An empty final descriptor is a ConfigurationError, never an exception
"""

import pytest

from sessionspawn.core.catalog import (
    CONTINUE,
    DescriptorRequest,
    SpawnableCatalog,
    SpawnableDescriptor,
    TierResult,
    catalog_tier,
    default_name_tier,
    inspector_default_tier,
    resolve_descriptor,
)
from sessionspawn.core.errors import ConfigurationError, ErrorKind
from sessionspawn.core.selection import ResolvedSelection, SelectionSource


def _selected(index: int) -> ResolvedSelection:
    return ResolvedSelection(index=index, source=SelectionSource.LOCAL)


# Catalog model


def test_from_mapping_fills_holes_up_to_highest_index():
    catalog = SpawnableCatalog.from_mapping({0: "A", 3: "D"})

    assert len(catalog) == 4
    assert catalog.get(0) == SpawnableDescriptor("A")
    assert catalog.get(1) is None
    assert catalog.get(2) is None
    assert catalog.get(3) == SpawnableDescriptor("D")


def test_from_mapping_rejects_negative_indices():
    with pytest.raises(ValueError, match="non-negative"):
        SpawnableCatalog.from_mapping({-1: "A"})


def test_get_out_of_range_returns_none():
    catalog = SpawnableCatalog.from_names(["A"])

    assert catalog.get(5) is None
    assert catalog.get(-1) is None
    assert not catalog.in_range(-1)


def test_items_skips_holes():
    catalog = SpawnableCatalog.from_names(["A", None, "C"])

    assert list(catalog.items()) == [(0, SpawnableDescriptor("A")), (2, SpawnableDescriptor("C"))]


# Individual tiers


def test_catalog_tier_continues_without_selection():
    request = DescriptorRequest(selection=ResolvedSelection.unset(), catalog=SpawnableCatalog())

    assert catalog_tier(request) == CONTINUE


def test_catalog_tier_resolves_valid_index():
    request = DescriptorRequest(selection=_selected(1), catalog=SpawnableCatalog.from_names(["A", "B"]))

    assert catalog_tier(request) == TierResult(descriptor=SpawnableDescriptor("B"))


def test_catalog_tier_warns_on_hole():
    request = DescriptorRequest(selection=_selected(1), catalog=SpawnableCatalog.from_names(["A", None]))

    result = catalog_tier(request)

    assert not result.resolved
    assert [d.kind for d in result.diagnostics] == [ErrorKind.SELECTION_WARNING]
    assert result.diagnostics[0].context["chosen_index"] == 1


def test_catalog_tier_raises_on_empty_named_entry():
    request = DescriptorRequest(selection=_selected(0), catalog=SpawnableCatalog.from_names([""]))

    with pytest.raises(ConfigurationError):
        catalog_tier(request)


def test_inspector_tier_uses_configured_reference():
    request = DescriptorRequest(
        selection=ResolvedSelection.unset(),
        catalog=SpawnableCatalog(),
        inspector_default=SpawnableDescriptor("Hero"),
    )

    assert inspector_default_tier(request).descriptor == SpawnableDescriptor("Hero")


def test_default_name_tier_always_resolves():
    request = DescriptorRequest(
        selection=ResolvedSelection.unset(), catalog=SpawnableCatalog(), default_name="PlayerPrefab"
    )

    assert default_name_tier(request).descriptor == SpawnableDescriptor("PlayerPrefab")


# Full chain


def test_out_of_range_falls_through_to_default_with_one_warning():
    """CRITICAL: catalog {0: A, 1: B}, index 7 -> default descriptor, exactly one warning.

    Why: Fallback must be deterministic and report the bad selection once.
    """
    request = DescriptorRequest(
        selection=_selected(7),
        catalog=SpawnableCatalog.from_mapping({0: "A", 1: "B"}),
        default_name="PlayerPrefab",
    )

    resolution = resolve_descriptor(request)

    assert resolution.descriptor == SpawnableDescriptor("PlayerPrefab")
    assert resolution.tier == "default_name_tier"
    warnings = [d for d in resolution.diagnostics if d.kind is ErrorKind.SELECTION_WARNING]
    assert len(warnings) == 1
    assert warnings[0].context == {"chosen_index": 7, "catalog_size": 2}


def test_inspector_default_outranks_default_name():
    request = DescriptorRequest(
        selection=_selected(9),
        catalog=SpawnableCatalog(),
        inspector_default=SpawnableDescriptor("Hero"),
        default_name="PlayerPrefab",
    )

    resolution = resolve_descriptor(request)

    assert resolution.descriptor == SpawnableDescriptor("Hero")
    assert resolution.tier == "inspector_default_tier"


def test_valid_selection_outranks_defaults():
    request = DescriptorRequest(
        selection=_selected(0),
        catalog=SpawnableCatalog.from_names(["A"]),
        inspector_default=SpawnableDescriptor("Hero"),
        default_name="PlayerPrefab",
    )

    resolution = resolve_descriptor(request)

    assert resolution.descriptor == SpawnableDescriptor("A")
    assert resolution.diagnostics == []


def test_empty_everything_is_configuration_error():
    """CRITICAL: no catalog, no inspector reference, empty default -> ConfigurationError.

    Why: Surfacing bad configuration beats spawning nothing silently.
    """
    request = DescriptorRequest(
        selection=ResolvedSelection.unset(), catalog=SpawnableCatalog(), default_name=""
    )

    resolution = resolve_descriptor(request)

    assert resolution.descriptor is None
    assert [d.kind for d in resolution.diagnostics] == [ErrorKind.CONFIGURATION]


def test_empty_catalog_entry_stops_chain_with_configuration_error():
    request = DescriptorRequest(
        selection=_selected(0),
        catalog=SpawnableCatalog.from_names([""]),
        default_name="PlayerPrefab",
    )

    resolution = resolve_descriptor(request)

    assert resolution.descriptor is None
    assert [d.kind for d in resolution.diagnostics] == [ErrorKind.CONFIGURATION]


def test_custom_tier_order_is_respected():
    """Each tier is independently pluggable and order decides precedence."""
    request = DescriptorRequest(
        selection=_selected(0),
        catalog=SpawnableCatalog.from_names(["A"]),
        default_name="PlayerPrefab",
    )

    resolution = resolve_descriptor(request, tiers=(default_name_tier, catalog_tier))

    assert resolution.descriptor == SpawnableDescriptor("PlayerPrefab")


def test_chain_without_terminal_tier_reports_configuration_error():
    request = DescriptorRequest(selection=ResolvedSelection.unset(), catalog=SpawnableCatalog())

    resolution = resolve_descriptor(request, tiers=(catalog_tier,))

    assert resolution.descriptor is None
    assert resolution.diagnostics[-1].kind is ErrorKind.CONFIGURATION
