"""
Asset catalog logic.

Contains the domain models, the storage hierarchy aggregator, and the
browsing helpers used to present a catalog.
"""

from .models import (
    Catalog,
    CategoryFolder,
    EntryKind,
    EntryMetadata,
    FlatAsset,
    StorageEntry,
    classify_entry,
    is_directory,
)
from .aggregator import HierarchyAggregator, ListingClient
from .browse import (
    CatalogStats,
    MediaKind,
    PlaybackState,
    PlaybackStatus,
    build_asset_url,
    classify_media,
    filter_catalog,
)
from .processing import PROCESSING_INSTRUCTION, MediaSource, ProcessingInstruction

__all__ = [
    "Catalog",
    "CategoryFolder",
    "EntryKind",
    "EntryMetadata",
    "FlatAsset",
    "StorageEntry",
    "classify_entry",
    "is_directory",
    "HierarchyAggregator",
    "ListingClient",
    "CatalogStats",
    "MediaKind",
    "PlaybackState",
    "PlaybackStatus",
    "build_asset_url",
    "classify_media",
    "filter_catalog",
    "PROCESSING_INSTRUCTION",
    "MediaSource",
    "ProcessingInstruction",
]
