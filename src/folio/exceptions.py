"""Custom exceptions for the publishing pipeline."""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class FolioError(Exception):
    """Base exception for all Folio-specific errors."""

    stage: Optional[str] = None

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        stage: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            source: Source file or identifier the error relates to
            stage: Pipeline stage where the error occurred
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.source = str(source) if source is not None else None
        if stage is not None:
            self.stage = stage
        self.details = details or {}

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message


class NotFoundError(FolioError):
    """A declared source or navigation target does not exist."""

    stage = "load"


class ParseError(FolioError):
    """Front-matter is missing, malformed or inconsistent."""

    stage = "load"


class RenderError(FolioError):
    """The templating collaborator rejected the render input."""

    stage = "render"


class ConfigurationError(FolioError):
    """Error in configuration."""

    stage = "config"
