"""
Domain models for the asset catalog.

These models represent what the storage listing API returns and what the
catalog exposes. They have no dependencies on HTTP clients or frameworks.

Folder vs. file is decided purely from the entry name: no "." means a
directory marker. Directories with a dot in their name and extensionless
files are misclassified. This is a known limitation of the listing format
and is kept as-is.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class EntryKind(Enum):
    """What a listing entry represents, according to its name."""
    DIRECTORY = "directory"
    FILE = "file"


def classify_entry(name: str) -> EntryKind:
    """Classify a listing entry name. Anything without a "." is a directory marker."""
    if "." in name:
        return EntryKind.FILE
    return EntryKind.DIRECTORY


def is_directory(name: str) -> bool:
    return classify_entry(name) is EntryKind.DIRECTORY


@dataclass(frozen=True)
class EntryMetadata:
    """
    The subset of provider metadata the catalog cares about.

    Storage providers return a lot more (etag, cache control, timestamps);
    only size and mimetype are carried through.
    """
    size: Optional[int] = None
    mimetype: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> Optional["EntryMetadata"]:
        if not isinstance(data, dict):
            return None
        size = data.get("size")
        mimetype = data.get("mimetype")
        return cls(
            size=size if isinstance(size, int) and not isinstance(size, bool) else None,
            mimetype=mimetype if isinstance(mimetype, str) else None,
        )


@dataclass(frozen=True)
class StorageEntry:
    """
    One row returned by a single listing call.

    name is relative to the queried prefix, never a full path.
    """
    name: str
    id: Optional[str] = None
    metadata: Optional[EntryMetadata] = None

    @property
    def kind(self) -> EntryKind:
        return classify_entry(self.name)

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @classmethod
    def from_api(cls, row: dict[str, Any]) -> "StorageEntry":
        """
        Build an entry from one decoded listing row.

        Raises ValueError if the row has no usable name; callers decide
        whether to skip the row.
        """
        name = row.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Listing row has no name")

        entry_id = row.get("id")
        return cls(
            name=name,
            id=entry_id if isinstance(entry_id, str) else None,
            metadata=EntryMetadata.from_api(row.get("metadata")),
        )


@dataclass(frozen=True)
class FlatAsset:
    """
    A file with its path made relative to the owning category.

    Root-level files keep their own name; files one subfolder down are
    named "<subfolder>/<filename>". Paths never go deeper than that.
    """
    name: str
    id: Optional[str] = None
    metadata: Optional[EntryMetadata] = None

    @classmethod
    def from_entry(cls, entry: StorageEntry) -> "FlatAsset":
        return cls(name=entry.name, id=entry.id, metadata=entry.metadata)

    @classmethod
    def nested(cls, subfolder: str, entry: StorageEntry) -> "FlatAsset":
        if not subfolder:
            raise ValueError("Nested asset requires a subfolder name")
        return cls(name=f"{subfolder}/{entry.name}", id=entry.id, metadata=entry.metadata)


@dataclass(frozen=True)
class CategoryFolder:
    """
    One top-level directory marker and every file found under it.

    items keeps discovery order: the category's own files first, then
    flattened subfolder files.
    """
    name: str
    items: tuple[FlatAsset, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Category name cannot be empty")

    @property
    def count(self) -> int:
        return len(self.items)


Catalog = tuple[CategoryFolder, ...]
