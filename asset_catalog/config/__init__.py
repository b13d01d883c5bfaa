"""
Application configuration using Pydantic settings.

Configuration comes from environment variables with sensible defaults.
Supports a mock storage mode for local development.
"""

from .settings import BUCKET_NAME, Settings, get_settings

__all__ = ["BUCKET_NAME", "Settings", "get_settings"]
