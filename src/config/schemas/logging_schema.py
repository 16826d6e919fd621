"""Logging configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level for the compute_core logger tree")
    json_format: bool = Field(False, description="Render records as JSON instead of key/value text")
    console_enabled: bool = Field(True, description="Write log records to stderr")
    file_path: Optional[str] = Field(None, description="Also append log records to this file")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Validate the level against the standard level names."""
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LEVELS)}, got {value}")
        return level
