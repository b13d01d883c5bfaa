#!/usr/bin/env python3
"""
Build the asset catalog once and print it.

Runs the same aggregation as GET /assets without starting the API,
which is handy for checking bucket contents and credentials.

Usage:
    python scripts/dump_catalog.py            # JSON on stdout
    python scripts/dump_catalog.py --summary  # one line per category
    python scripts/dump_catalog.py --mock     # in-memory demo bucket

Requires:
    - .env file with SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY (unless --mock)
"""

import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

# Add the project root to path so we can import our modules
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

# Load environment variables from the project root, wherever we're run from
load_dotenv(PROJECT_ROOT / ".env")

from asset_catalog.config.settings import get_settings
from asset_catalog.core.catalog.aggregator import HierarchyAggregator
from asset_catalog.infrastructure.storage.client import (
    StorageConfig,
    create_listing_client,
)


async def build_catalog(mock: bool) -> list[dict]:
    settings = get_settings()

    if mock or settings.storage_mock_mode:
        client = create_listing_client(mock_mode=True)
    else:
        if not settings.supabase_service_role_key:
            print("WARNING: SUPABASE_SERVICE_ROLE_KEY is not set; listings will likely be empty",
                  file=sys.stderr)
        client = create_listing_client(config=StorageConfig(
            listing_url=settings.listing_url,
            api_key=settings.supabase_service_role_key,
        ))

    try:
        catalog = await HierarchyAggregator(client).aggregate()
    finally:
        await client.aclose()

    return [
        {"name": folder.name, "count": folder.count,
         "items": [asdict(item) for item in folder.items]}
        for folder in catalog
    ]


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Print the asset catalog')
    parser.add_argument('--summary', action='store_true', help='Only print category counts')
    parser.add_argument('--mock', action='store_true', help='Use the in-memory demo bucket')
    args = parser.parse_args()

    folders = asyncio.run(build_catalog(mock=args.mock))

    if args.summary:
        for folder in folders:
            print(f"  {folder['name']}: {folder['count']}")
        print(f"\nTotal: {sum(f['count'] for f in folders)} assets in {len(folders)} categories")
    else:
        print(json.dumps({"folders": folders}, indent=2))

    sys.exit(0)


if __name__ == '__main__':
    main()
