"""
Storage hierarchy aggregation.

Turns flat, per-prefix listings into a catalog of category folders. The
storage API only lists one directory level per call, so the tree is
rebuilt by walking exactly two levels below the root:

    root -> category -> subfolder

The depth cap is structural: there is one method per stage and no
generic recursive walker. Anything nested below a subfolder is ignored.

There is no error handling here. The listing client collapses every
failure into an empty listing, so a broken branch simply contributes
no files and its siblings are unaffected.
"""

import asyncio
import logging
from typing import Protocol

from .models import Catalog, CategoryFolder, FlatAsset, StorageEntry

logger = logging.getLogger(__name__)


ROOT_PREFIX = ""


class ListingClient(Protocol):
    """
    Interface for one-level object listings.

    Implementations must never raise: any failure is reported as an
    empty list.
    """

    async def list(self, prefix: str) -> list[StorageEntry]:
        """List the direct children of prefix."""
        ...


class HierarchyAggregator:
    """
    Builds the category catalog from a ListingClient.

    Stateless apart from the client, so one instance per request is fine.
    """

    def __init__(self, listing_client: ListingClient) -> None:
        self._listing = listing_client

    async def aggregate(self) -> Catalog:
        """
        Build a fresh catalog.

        Only directory markers at the root become categories; loose root
        files are dropped. Categories are walked one after another.
        """
        root_entries = await self._listing.list(ROOT_PREFIX)

        folders = []
        for entry in root_entries:
            if not entry.is_directory:
                continue
            folders.append(await self._collect_category(entry.name))

        logger.info(
            "Aggregated asset catalog",
            extra={
                "categories": len(folders),
                "assets": sum(folder.count for folder in folders),
            }
        )

        return tuple(folders)

    async def _collect_category(self, category: str) -> CategoryFolder:
        """Stage 1: a category's own files, then its subfolders' files."""
        children = await self._listing.list(category)

        items = [FlatAsset.from_entry(child) for child in children if not child.is_directory]
        subfolders = [child.name for child in children if child.is_directory]

        # gather keeps argument order, so discovery order is stable
        nested = await asyncio.gather(
            *(self._collect_subfolder(category, subfolder) for subfolder in subfolders)
        )
        for subfolder_items in nested:
            items.extend(subfolder_items)

        return CategoryFolder(name=category, items=tuple(items))

    async def _collect_subfolder(self, category: str, subfolder: str) -> list[FlatAsset]:
        """Stage 2: files one level down. Deeper directory markers are ignored."""
        entries = await self._listing.list(f"{category}/{subfolder}")

        return [
            FlatAsset.nested(subfolder, entry)
            for entry in entries
            if not entry.is_directory
        ]
