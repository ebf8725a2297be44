"""Retry configuration model."""

from typing import Optional

from pydantic import BaseModel, Field


class RetryConfig(BaseModel):
    """Configuration for retrying external tool invocations.

    Attributes:
        max_attempts: Total number of attempts, including the first one
        initial_delay: Delay in seconds before the first retry
        backoff_multiplier: Factor applied to the delay after every retry
        max_delay: Upper bound for a single delay (None = no cap)
    """

    max_attempts: int = Field(3, gt=0, le=10)
    initial_delay: float = Field(2.0, ge=0.0)  # Allow 0 for tests
    backoff_multiplier: float = Field(2.0, ge=1.0, le=10.0)
    max_delay: Optional[float] = Field(None, gt=0.0)
