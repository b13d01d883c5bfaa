"""
Object storage listing client.

Talks to the Supabase Storage list endpoint, which returns the direct
children of a prefix (one directory level) as a JSON array. Every call
is bounded to LISTING_LIMIT rows; there is no pagination, so anything
past the bound is silently truncated.

Failures never leave this module. Transport errors, non-success
statuses and malformed bodies all come back as an empty listing, which
keeps the aggregator free of error handling and stops one bad folder
from sinking the whole catalog.

Mock mode serves listings from memory, enabling API testing without
a real bucket.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import httpx

from ...core.catalog.aggregator import ListingClient
from ...core.catalog.models import EntryMetadata, StorageEntry

logger = logging.getLogger(__name__)


LISTING_LIMIT = 1000


@dataclass
class StorageConfig:
    """
    Configuration for the Supabase listing endpoint.

    The same service credential is sent as the apikey header and as the
    bearer token.
    """
    listing_url: str
    api_key: str

    def __post_init__(self) -> None:
        if not self.listing_url:
            raise ValueError("listing_url is required")


class SupabaseListingClient:
    """
    Supabase Storage implementation of ListingClient.

    No retries and no explicit timeout: the httpx transport default
    applies. Callers that need bounded latency must impose their own.
    """

    def __init__(
        self,
        config: StorageConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    @property
    def headers(self) -> dict[str, str]:
        return {
            "apikey": self._config.api_key,
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    async def list(self, prefix: str) -> list[StorageEntry]:
        """List the direct children of prefix. Returns [] on any failure."""
        try:
            response = await self._http.post(
                self._config.listing_url,
                json={"prefix": prefix, "limit": LISTING_LIMIT},
                headers=self.headers,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Storage listing request failed",
                extra={"prefix": prefix, "error": str(e)}
            )
            return []
        except Exception as e:
            logger.error(
                "Unexpected error during storage listing",
                extra={"prefix": prefix, "error": str(e)},
                exc_info=e,
            )
            return []

        if not response.is_success:
            logger.warning(
                "Storage listing returned error status",
                extra={"prefix": prefix, "status": response.status_code}
            )
            return []

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "Storage listing returned invalid JSON",
                extra={"prefix": prefix, "error": str(e)}
            )
            return []

        if not isinstance(data, list):
            logger.warning(
                "Storage listing body is not an array",
                extra={"prefix": prefix, "body_type": type(data).__name__}
            )
            return []

        return _parse_rows(prefix, data)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()


def _parse_rows(prefix: str, rows: list[Any]) -> list[StorageEntry]:
    """Rows that are not objects with a name are skipped."""
    entries = []
    skipped = 0
    for row in rows:
        if not isinstance(row, dict):
            skipped += 1
            continue
        try:
            entries.append(StorageEntry.from_api(row))
        except ValueError:
            skipped += 1

    if skipped:
        logger.warning(
            "Skipped malformed listing rows",
            extra={"prefix": prefix, "skipped": skipped}
        )

    logger.debug(
        "Listed storage prefix",
        extra={"prefix": prefix, "count": len(entries)}
    )

    return entries


# ---------------------------------------------------------------------------
# Mock Storage for Local Development
# ---------------------------------------------------------------------------

class MockListingClient:
    """
    In-memory listings keyed by prefix.

    Prefixes listed in failing_prefixes behave like a storage outage and
    return an empty listing. Every requested prefix is recorded in
    calls, in request order.
    """

    def __init__(
        self,
        listings: Optional[dict[str, list[StorageEntry]]] = None,
        failing_prefixes: Iterable[str] = (),
    ) -> None:
        self._listings: dict[str, list[StorageEntry]] = dict(listings or {})
        self._failing = set(failing_prefixes)
        self.calls: list[str] = []

    @classmethod
    def with_demo_assets(cls) -> "MockListingClient":
        """A small bucket for local development."""
        logger.info("Initialized mock listing client (in-memory demo bucket)")
        return cls(_demo_listings())

    async def list(self, prefix: str) -> list[StorageEntry]:
        self.calls.append(prefix)

        if prefix in self._failing:
            logger.warning(
                "Mock storage listing failed",
                extra={"prefix": prefix}
            )
            return []

        return list(self._listings.get(prefix, []))

    async def aclose(self) -> None:
        pass


def _file(name: str, size: int, mimetype: str) -> StorageEntry:
    return StorageEntry(
        name=name,
        id=f"mock-{name}",
        metadata=EntryMetadata(size=size, mimetype=mimetype),
    )


def _demo_listings() -> dict[str, list[StorageEntry]]:
    return {
        "": [
            StorageEntry(name="backgrounds"),
            StorageEntry(name="sounds"),
            StorageEntry(name="sprites"),
            _file("README.md", 512, "text/markdown"),
        ],
        "backgrounds": [
            _file("forest.png", 204_800, "image/png"),
            _file("night-sky.jpg", 153_600, "image/jpeg"),
        ],
        "sounds": [
            _file("click.wav", 8_192, "audio/wav"),
            StorageEntry(name="sfx"),
            StorageEntry(name="music"),
        ],
        "sounds/sfx": [
            _file("explosion.ogg", 40_960, "audio/ogg"),
            _file("jump.mp3", 12_288, "audio/mpeg"),
        ],
        "sounds/music": [
            _file("theme.mp3", 2_097_152, "audio/mpeg"),
        ],
        "sprites": [
            _file("hero.png", 4_096, "image/png"),
            StorageEntry(name="enemies"),
        ],
        "sprites/enemies": [
            _file("slime.png", 2_048, "image/png"),
        ],
    }


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_listing_client(
    config: Optional[StorageConfig] = None,
    mock_mode: bool = False,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ListingClient:
    """
    Create a listing client based on configuration.

    Args:
        config: Storage configuration (required if not mock_mode)
        mock_mode: If True, return the in-memory demo client
        http_client: Optional shared httpx client for the Supabase client

    Returns:
        ListingClient implementation (Supabase or Mock)
    """
    if mock_mode:
        return MockListingClient.with_demo_assets()

    if config is None:
        raise ValueError("config is required when not in mock mode")

    return SupabaseListingClient(config, http_client=http_client)
