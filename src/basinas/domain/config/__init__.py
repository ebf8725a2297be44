"""Configuration models with Pydantic validation."""

from basinas.domain.config.app import AppConfig
from basinas.domain.config.retry import RetryConfig
from basinas.domain.config.site import SiteConfig
from basinas.domain.config.tools import ToolsConfig

__all__ = [
    "AppConfig",
    "RetryConfig",
    "SiteConfig",
    "ToolsConfig",
]
