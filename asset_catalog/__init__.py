"""
Asset Catalog - a browsable catalog of media files held in object storage.

This package contains the complete application:
- core: Framework-agnostic catalog logic (classification, aggregation, browsing)
- infrastructure: Object storage listing integration
- api: FastAPI routes and dependencies
- config: Application configuration
"""

__version__ = "0.1.0"
