"""
FastAPI dependency injection.

Dependencies provide the listing client, the aggregator and the
configuration to route handlers. Routes never build their own clients,
so tests can swap any of them through app.dependency_overrides.

Everything here is request-scoped: each catalog build gets a fresh
HTTP client that is closed once the response has been produced.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends

from ..config.settings import Settings, get_settings
from ..core.catalog.aggregator import HierarchyAggregator, ListingClient
from ..infrastructure.storage.client import (
    StorageConfig,
    SupabaseListingClient,
    create_listing_client,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Service Dependencies
# ---------------------------------------------------------------------------

async def get_listing_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[ListingClient, None]:
    """
    Provide a listing client for one request.

    This is a generator dependency because the Supabase client owns an
    HTTP connection pool that must be closed after the request.
    """
    if settings.storage_mock_mode:
        client = create_listing_client(mock_mode=True)
        logger.debug("Using mock listing client")
        yield client
        return

    config = StorageConfig(
        listing_url=settings.listing_url,
        api_key=settings.supabase_service_role_key,
    )
    client = create_listing_client(config=config)
    logger.debug("Created Supabase listing client")
    try:
        yield client
    finally:
        if isinstance(client, SupabaseListingClient):
            await client.aclose()


def get_aggregator(
    listing_client: Annotated[ListingClient, Depends(get_listing_client)],
) -> HierarchyAggregator:
    """The aggregator is stateless, so we create a new instance per request."""
    return HierarchyAggregator(listing_client)


# ---------------------------------------------------------------------------
# Convenience Type Aliases
# ---------------------------------------------------------------------------

# These type aliases make route signatures cleaner
SettingsDep = Annotated[Settings, Depends(get_settings)]
ListingClientDep = Annotated[ListingClient, Depends(get_listing_client)]
AggregatorDep = Annotated[HierarchyAggregator, Depends(get_aggregator)]
