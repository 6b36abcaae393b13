"""Configuration models for Folio."""

import codecs
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ErrorTolerance(str, Enum):
    """Error tolerance levels."""

    STRICT = "strict"
    LENIENT = "lenient"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="console")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Upper-case and check the level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("format")
    @classmethod
    def check_format(cls, v: str) -> str:
        if v not in {"console", "json"}:
            raise ValueError(f"Unknown log format: {v}")
        return v


class SiteConfig(BaseModel):
    """Site-wide settings passed to every template."""

    title: str = Field(default="Folio")
    output_suffix: str = Field(default=".html")
    index_name: str = Field(default="index")

    @field_validator("output_suffix")
    @classmethod
    def leading_dot(cls, v: str) -> str:
        return v if v.startswith(".") else f".{v}"


class ContentConfig(BaseModel):
    """Source content settings."""

    extensions: List[str] = Field(default=[".md", ".markdown"])
    encoding: str = Field(default="utf-8")

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        """Reject codecs Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class RenderConfig(BaseModel):
    """Renderer settings."""

    template_dir: Optional[Path] = Field(
        default=None, description="User templates; bundled templates are the fallback"
    )
    default_template: str = Field(default="page.html")
    index_template: str = Field(default="index.html")
    markdown_extensions: List[str] = Field(
        default=["extra", "toc", "fenced_code", "sane_lists"]
    )

    @field_validator("template_dir")
    @classmethod
    def expand_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand user in the template path."""
        return v.expanduser() if v is not None else None


class ProcessingConfig(BaseModel):
    """Processing configuration."""

    error_tolerance: ErrorTolerance = Field(default=ErrorTolerance.STRICT)
    write_manifest: bool = Field(default=False)
    concurrent_reads: bool = Field(default=False)


class FolioConfig(BaseModel):
    """Configuration for the Folio site builder."""

    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
