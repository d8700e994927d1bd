"""Catalog functionality: spawnable descriptors and the fallback tier chain."""

from sessionspawn.core.catalog.models import SpawnableCatalog, SpawnableDescriptor
from sessionspawn.core.catalog.operations import (
    CONTINUE,
    DEFAULT_TIERS,
    DescriptorRequest,
    DescriptorResolution,
    DescriptorTier,
    TierResult,
    catalog_tier,
    default_name_tier,
    inspector_default_tier,
    resolve_descriptor,
)

__all__ = [
    "SpawnableCatalog",
    "SpawnableDescriptor",
    "CONTINUE",
    "DEFAULT_TIERS",
    "DescriptorRequest",
    "DescriptorResolution",
    "DescriptorTier",
    "TierResult",
    "catalog_tier",
    "inspector_default_tier",
    "default_name_tier",
    "resolve_descriptor",
]
