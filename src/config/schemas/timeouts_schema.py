"""Timeout and polling configuration schema."""

from pydantic import BaseModel, Field, model_validator


class TimeoutsConfig(BaseModel):
    """How long to wait for resources to converge, and how often to poll them.

    All values are in seconds.
    """

    node_running: float = Field(1200.0, gt=0, description="Wait for a node to reach RUNNING")
    node_terminated: float = Field(30.0, gt=0, description="Wait for a node to be terminated")
    node_suspended: float = Field(120.0, gt=0, description="Wait for a node to be suspended")
    image_available: float = Field(3600.0, gt=0, description="Wait for an image to be available")
    image_deleted: float = Field(30.0, gt=0, description="Wait for an image to be deleted")
    port_open: float = Field(600.0, gt=0, description="Wait for a TCP port to accept connections")
    poll_period: float = Field(0.05, gt=0, description="Initial delay between two polls")
    max_poll_period: float = Field(1.0, gt=0, description="Upper bound of the delay between polls")
    backoff_factor: float = Field(
        1.5, ge=1.0, description="Growth factor of the delay after each unsuccessful poll"
    )

    @model_validator(mode="after")
    def validate_poll_periods(self) -> "TimeoutsConfig":
        """Validate that the initial poll period does not exceed its upper bound."""
        if self.poll_period > self.max_poll_period:
            raise ValueError(
                f"poll_period ({self.poll_period}) cannot exceed max_poll_period "
                f"({self.max_poll_period})"
            )
        return self

    def polling(self) -> dict[str, float]:
        """Keyword arguments for a retry poller built from this configuration."""
        return {
            "period": self.poll_period,
            "max_period": self.max_poll_period,
            "backoff_factor": self.backoff_factor,
        }
