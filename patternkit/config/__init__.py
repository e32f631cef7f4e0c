"""Configuration package - schemas and manager."""

from .manager import ConfigurationManager
from .schemas import CatalogConfig, LoggingConfig

__all__ = ["CatalogConfig", "ConfigurationManager", "LoggingConfig"]
