"""Pattern catalog registry."""

from .bootstrap import create_catalog
from .catalog_registry import PatternCatalog, PatternCategory, PatternRegistration
from .defaults import register_default_patterns

__all__ = [
    "PatternCatalog",
    "PatternCategory",
    "PatternRegistration",
    "create_catalog",
    "register_default_patterns",
]
