"""Configuration schemas."""

from .app_schema import CatalogConfig
from .logging_schema import LoggingConfig

__all__ = ["CatalogConfig", "LoggingConfig"]
