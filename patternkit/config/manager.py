"""Configuration management for the catalog."""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from patternkit.config.schemas import CatalogConfig, LoggingConfig
from patternkit.domain.core.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager serving as the single source of truth.

    Configuration is held in memory only. The raw dictionary is validated
    lazily on first access; typed sections are cached.
    """

    _SECTIONS: Dict[str, str] = {
        'LoggingConfig': 'logging',
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._raw_config: Dict[str, Any] = dict(config or {})
        self._lock = threading.RLock()
        self._app_config: Optional[CatalogConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def app_config(self) -> CatalogConfig:
        """Lazy load catalog configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> CatalogConfig:
        try:
            config = CatalogConfig.from_dict(self._raw_config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid catalog configuration: {e}", e.errors()) from e
        logger.debug("Loaded catalog configuration version %s", config.version)
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        if config_type is CatalogConfig:
            return self.app_config  # type: ignore[return-value]
        attr_name = self._SECTIONS.get(config_type.__name__)
        if attr_name is None:
            raise ConfigurationError(f"Unknown configuration section: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.get_typed(LoggingConfig)
