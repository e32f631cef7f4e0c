"""Catalog bootstrap."""
from typing import Optional
import threading

from patternkit.config.schemas import CatalogConfig
from patternkit.domain.core.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger, setup_logging
from patternkit.infrastructure.registry.catalog_registry import PatternCatalog
from patternkit.infrastructure.registry.defaults import register_default_patterns

logger = get_logger(__name__)

_bootstrap_lock = threading.Lock()


def create_catalog(config: Optional[CatalogConfig] = None) -> PatternCatalog:
    """
    Get the pattern catalog configured by ``config``.

    The first call applies the configuration: logging is set up from
    ``config.logging``, ``allow_overrides`` is copied onto the catalog and the
    built-in patterns are registered when ``config.register_defaults`` is set.
    Later calls return the same catalog. Passing None, or a configuration equal
    to the applied one, is accepted; any other configuration is rejected.

    Raises:
        ConfigurationError: If the catalog is already configured differently
    """
    catalog = PatternCatalog()

    with _bootstrap_lock:
        if catalog.config is not None:
            if config is None or config == catalog.config:
                return catalog
            raise ConfigurationError(
                "Pattern catalog is already configured with different settings",
                {"applied": catalog.config.model_dump(), "requested": config.model_dump()},
            )

        config = config or CatalogConfig()
        setup_logging(config.logging)
        catalog.allow_overrides = config.allow_overrides
        if config.register_defaults:
            register_default_patterns(catalog)
        catalog.config = config

    logger.info(f"Pattern catalog ready with {len(catalog.list_patterns())} patterns")
    return catalog
