"""Main catalog configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig


class CatalogConfig(BaseModel):
    """Catalog configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    register_defaults: bool = Field(
        True, description="Register the built-in patterns when the catalog is created"
    )
    allow_overrides: bool = Field(
        False, description="Allow re-registering a pattern name with a new entry point"
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Create configuration from dictionary."""
        return cls.model_validate(data)
