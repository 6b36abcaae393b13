"""Configuration package for Folio."""

from folio.config.loader import load_config
from folio.config.settings import (
    ContentConfig,
    ErrorTolerance,
    FolioConfig,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
    SiteConfig,
)

__all__ = [
    "ContentConfig",
    "ErrorTolerance",
    "FolioConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "RenderConfig",
    "SiteConfig",
    "load_config",
]
