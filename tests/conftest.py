"""
Shared fixtures.

Storage is always replaced: unit tests use MockListingClient or an
httpx.MockTransport, API tests override the FastAPI dependencies.
No test talks to a real bucket.
"""

import pytest
from fastapi.testclient import TestClient

from asset_catalog.api.dependencies import get_listing_client
from asset_catalog.config.settings import Settings, get_settings
from asset_catalog.core.catalog.models import StorageEntry
from asset_catalog.infrastructure.storage.client import MockListingClient
from asset_catalog.main import app
from tests.factories import file, folder


@pytest.fixture
def game_bucket() -> dict[str, list[StorageEntry]]:
    """
    A bucket with two categories, nested subfolders and a loose root file.

    sounds/sfx/deep exists as a third-level directory marker and must be
    ignored by the aggregator.
    """
    return {
        "": [folder("sounds"), file("readme.txt"), folder("sprites")],
        "sounds": [file("hit.wav"), folder("sfx"), folder("music")],
        "sounds/sfx": [file("explosion.ogg"), file("laser.mp3"), folder("deep")],
        "sounds/sfx/deep": [file("hidden.wav")],
        "sounds/music": [file("theme.mp3")],
        "sprites": [file("hero.png"), file("enemy.png")],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="test-service-key",
        storage_mock_mode=False,
    )


@pytest.fixture
def api_client(settings):
    """
    TestClient with settings overridden.

    Tests install their own listing client or aggregator via
    app.dependency_overrides; everything is reset afterwards.
    """
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_listing(api_client):
    """Install a MockListingClient built from the given listings."""
    def _install(listings, failing_prefixes=()) -> MockListingClient:
        client = MockListingClient(listings, failing_prefixes=failing_prefixes)
        app.dependency_overrides[get_listing_client] = lambda: client
        return client
    return _install
