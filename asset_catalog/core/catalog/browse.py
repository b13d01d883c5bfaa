"""
Browsing helpers layered on top of a built catalog.

Everything here is a pure function of the catalog and some user input:
asset URLs, media-kind hints for previews, search/category filtering,
the headline stats, and the single-selection audio playback state.
None of it talks to storage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import Catalog, CategoryFolder


class MediaKind(Enum):
    """Preview hint for an asset. Independent of the folder/file heuristic."""
    IMAGE = "image"
    AUDIO = "audio"
    OTHER = "other"


IMAGE_SUFFIXES = (".png", ".jpg")
AUDIO_SUFFIXES = (".wav", ".mp3", ".ogg")


def classify_media(name: str) -> MediaKind:
    """Suffix match, case-sensitive."""
    if name.endswith(IMAGE_SUFFIXES):
        return MediaKind.IMAGE
    if name.endswith(AUDIO_SUFFIXES):
        return MediaKind.AUDIO
    return MediaKind.OTHER


def build_asset_url(public_base_url: str, category: str, item_name: str) -> str:
    """
    Public read URL for an asset.

    item_name may already contain one "<subfolder>/" segment from
    flattening; it is appended verbatim.
    """
    return f"{public_base_url.rstrip('/')}/{category}/{item_name}"


def filter_catalog(catalog: Catalog, query: str = "", category: str = "") -> Catalog:
    """
    Apply the free-text search and the category selector.

    The query is a case-insensitive substring match on item names; an
    empty query keeps everything. An empty category keeps every folder,
    otherwise only the folder with exactly that name survives.
    """
    needle = query.lower()

    filtered = []
    for folder in catalog:
        if category and folder.name != category:
            continue
        if needle:
            items = tuple(item for item in folder.items if needle in item.name.lower())
        else:
            items = folder.items
        filtered.append(CategoryFolder(name=folder.name, items=items))

    return tuple(filtered)


@dataclass(frozen=True)
class CatalogStats:
    """Headline counters shown above the catalog."""
    sprites_and_ui: int = 0
    sounds: int = 0
    backgrounds: int = 0
    total: int = 0

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CatalogStats":
        by_name = {folder.name: folder.count for folder in catalog}
        return cls(
            sprites_and_ui=sum(
                folder.count for folder in catalog
                if "sprites" in folder.name or "ui" in folder.name
            ),
            sounds=by_name.get("sounds", 0),
            backgrounds=by_name.get("backgrounds", 0),
            total=sum(folder.count for folder in catalog),
        )


# ---------------------------------------------------------------------------
# Audio playback
# ---------------------------------------------------------------------------

class PlaybackStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlaybackState:
    """
    Which audio asset is currently playing, if any.

    Two states: IDLE and PLAYING(url). Transitions return a new state;
    at most one url is ever active.
    """
    url: Optional[str] = None

    @property
    def status(self) -> PlaybackStatus:
        return PlaybackStatus.IDLE if self.url is None else PlaybackStatus.PLAYING

    def is_playing(self, url: str) -> bool:
        return self.url == url

    def select(self, url: str) -> "PlaybackState":
        """Toggle: reselecting the playing url stops it, anything else replaces it."""
        if self.is_playing(url):
            return PlaybackState()
        return PlaybackState(url=url)

    def finish(self, url: str) -> "PlaybackState":
        """The source for url finished. A stale completion leaves a newer selection alone."""
        if self.is_playing(url):
            return PlaybackState()
        return self
