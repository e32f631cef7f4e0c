"""Logging configuration schema."""
import logging

from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Log format string")
    destination: str = Field("stdout", description="Log destination (stdout or none)")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["stdout", "none"]
        if v not in valid_destinations:
            raise ValueError(f"Destination must be one of {valid_destinations}")
        return v
