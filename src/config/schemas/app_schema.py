"""Application configuration schema."""

from pydantic import BaseModel, ConfigDict, Field

from config.schemas.logging_schema import LoggingConfig
from config.schemas.timeouts_schema import TimeoutsConfig


class AppConfig(BaseModel):
    """Top-level compute core configuration."""

    model_config = ConfigDict(extra="forbid")

    timeouts: TimeoutsConfig = Field(
        default_factory=TimeoutsConfig, description="Convergence timeouts and polling"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging setup")
