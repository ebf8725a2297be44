"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from basinas.domain.config.retry import RetryConfig
from basinas.domain.config.site import SiteConfig
from basinas.domain.config.tools import ToolsConfig


class AppConfig(BaseModel):
    """Main application configuration.

    This is the root configuration model that aggregates all configuration sections.
    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        retry: Retry policy for external tool invocations
        tools: External generators and installers
        site: Metadata written to the generated .env file
    """

    retry: RetryConfig = Field(default_factory=RetryConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)

    model_config = ConfigDict(
        validate_assignment=True,  # Validate on attribute assignment
        extra="forbid",  # Reject unknown fields
        json_schema_extra={
            "example": {
                "retry": {
                    "max_attempts": 3,
                    "initial_delay": 2.0,
                    "backoff_multiplier": 2.0,
                    "max_delay": None,
                },
                "tools": {
                    "npx": "npx",
                    "npm": "npm",
                    "base_color": "neutral",
                    "install_docs": True,
                },
                "site": {
                    "author": "Jane Doe",
                    "url": "https://example.com",
                },
            }
        },
    )
