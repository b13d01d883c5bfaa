"""
Object storage integration for asset listings.

Supports Supabase Storage via its REST listing endpoint.
Includes mock mode for local development without credentials.
"""

from .client import (
    LISTING_LIMIT,
    MockListingClient,
    StorageConfig,
    SupabaseListingClient,
    create_listing_client,
)

__all__ = [
    "LISTING_LIMIT",
    "MockListingClient",
    "StorageConfig",
    "SupabaseListingClient",
    "create_listing_client",
]
