"""
Asset catalog API endpoints.

GET /assets returns the raw catalog: one folder per top-level category
with every file found up to one subfolder deep. GET /assets/view is the
browse screen's data: the same catalog filtered by search text and
category, with preview URLs, media hints and headline stats.

Storage outages never reach these handlers as errors - the listing
client degrades them to empty folders. The 500 branch is only for
unexpected failures inside aggregation itself.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...core.catalog.aggregator import HierarchyAggregator
from ...core.catalog.browse import (
    CatalogStats,
    build_asset_url,
    classify_media,
    filter_catalog,
)
from ...core.catalog.models import Catalog, CategoryFolder, FlatAsset
from ...core.catalog.processing import PROCESSING_INSTRUCTION
from ..dependencies import AggregatorDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter()

# Original path of the catalog endpoint, kept for existing frontends
legacy_router = APIRouter()

AGGREGATION_ERROR = "Failed to list assets"


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------

class AssetMetadata(BaseModel):
    size: Optional[int] = Field(None, description="Size in bytes")
    mimetype: Optional[str] = Field(None, description="Content type reported by storage")


class AssetItem(BaseModel):
    """A file, named relative to its category."""
    name: str = Field(description="File name, or '<subfolder>/<file name>' when nested")
    id: Optional[str] = Field(None, description="Storage provider identifier")
    metadata: Optional[AssetMetadata] = None


class AssetFolder(BaseModel):
    name: str = Field(description="Category (top-level folder) name")
    count: int = Field(description="Number of files in the category")
    items: list[AssetItem]


class CatalogResponse(BaseModel):
    folders: list[AssetFolder]


class CatalogErrorResponse(BaseModel):
    """Returned with a 500 when aggregation fails unexpectedly."""
    error: str
    folders: list[AssetFolder] = Field(default_factory=list)


class ViewAssetItem(AssetItem):
    url: str = Field(description="Public read URL")
    media_kind: str = Field(description="Preview hint: image, audio or other")


class ViewFolder(BaseModel):
    name: str
    count: int = Field(description="Number of files matching the filters")
    items: list[ViewAssetItem]


class CategorySummary(BaseModel):
    name: str
    count: int


class StatsResponse(BaseModel):
    sprites_and_ui: int
    sounds: int
    backgrounds: int
    total: int


class CatalogViewResponse(BaseModel):
    """Filtered catalog plus the unfiltered category list and stats."""
    query: str
    category: str
    folders: list[ViewFolder]
    categories: list[CategorySummary]
    stats: StatsResponse


class MediaSourceResponse(BaseModel):
    name: str
    description: str


class ProcessingResponse(BaseModel):
    message: str
    command: str
    sources: list[MediaSourceResponse]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _asset_item(asset: FlatAsset) -> AssetItem:
    return AssetItem(
        name=asset.name,
        id=asset.id,
        metadata=(
            AssetMetadata(size=asset.metadata.size, mimetype=asset.metadata.mimetype)
            if asset.metadata else None
        ),
    )


def _asset_folder(folder: CategoryFolder) -> AssetFolder:
    return AssetFolder(
        name=folder.name,
        count=folder.count,
        items=[_asset_item(item) for item in folder.items],
    )


def _view_folder(folder: CategoryFolder, public_base_url: str) -> ViewFolder:
    return ViewFolder(
        name=folder.name,
        count=folder.count,
        items=[
            ViewAssetItem(
                **_asset_item(item).model_dump(),
                url=build_asset_url(public_base_url, folder.name, item.name),
                media_kind=classify_media(item.name).value,
            )
            for item in folder.items
        ],
    )


async def _aggregate(aggregator: HierarchyAggregator) -> Optional[Catalog]:
    """Run aggregation; None means it failed and was logged."""
    try:
        return await aggregator.aggregate()
    except Exception as e:
        logger.error(
            "Error listing assets",
            extra={"error": str(e)},
            exc_info=e,
        )
        return None


def _error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=CatalogErrorResponse(error=AGGREGATION_ERROR).model_dump(),
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=CatalogResponse,
    status_code=status.HTTP_200_OK,
    summary="List the asset catalog",
    description="Category folders with every file up to one subfolder deep",
    responses={
        500: {
            "description": "Aggregation failed unexpectedly",
            "model": CatalogErrorResponse,
        }
    },
)
async def list_assets(aggregator: AggregatorDep):
    """
    Build the catalog from storage.

    Built fresh on every request; nothing is cached. A storage outage
    yields a smaller (possibly empty) catalog with a 200, not an error.
    """
    catalog = await _aggregate(aggregator)
    if catalog is None:
        return _error_response()

    return CatalogResponse(folders=[_asset_folder(folder) for folder in catalog])


legacy_router.add_api_route(
    "/list",
    list_assets,
    methods=["GET"],
    response_model=CatalogResponse,
    include_in_schema=False,
)


@router.get(
    "/view",
    response_model=CatalogViewResponse,
    status_code=status.HTTP_200_OK,
    summary="Browse the asset catalog",
    description="Search and category filtering with preview URLs and stats",
    responses={
        500: {
            "description": "Aggregation failed unexpectedly",
            "model": CatalogErrorResponse,
        }
    },
)
async def view_assets(
    aggregator: AggregatorDep,
    settings: SettingsDep,
    q: str = Query("", max_length=200, description="Case-insensitive search on file names"),
    category: str = Query("", description="Only show this category; empty for all"),
):
    """
    Browse view of the catalog.

    Folders with no matching files are left out. The category list and
    stats always describe the unfiltered catalog.
    """
    catalog = await _aggregate(aggregator)
    if catalog is None:
        return _error_response()

    filtered = filter_catalog(catalog, query=q, category=category)
    stats = CatalogStats.from_catalog(catalog)

    logger.debug(
        "Filtered asset catalog",
        extra={
            "query": q,
            "category": category,
            "folders": len(filtered),
        }
    )

    return CatalogViewResponse(
        query=q,
        category=category,
        folders=[
            _view_folder(folder, settings.public_base_url)
            for folder in filtered
            if folder.count > 0
        ],
        categories=[
            CategorySummary(name=folder.name, count=folder.count)
            for folder in catalog
        ],
        stats=StatsResponse(
            sprites_and_ui=stats.sprites_and_ui,
            sounds=stats.sounds,
            backgrounds=stats.backgrounds,
            total=stats.total,
        ),
    )


@router.get(
    "/processing",
    response_model=ProcessingResponse,
    status_code=status.HTTP_200_OK,
    summary="Media processing instructions",
    description="How to run the out-of-band extraction agent",
)
async def processing_instructions() -> ProcessingResponse:
    return ProcessingResponse(
        message=PROCESSING_INSTRUCTION.message,
        command=PROCESSING_INSTRUCTION.command,
        sources=[
            MediaSourceResponse(name=source.name, description=source.description)
            for source in PROCESSING_INSTRUCTION.sources
        ],
    )
