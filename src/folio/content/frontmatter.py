"""YAML front-matter extraction."""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from folio.exceptions import ParseError

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL | re.MULTILINE
)


def extract_frontmatter(
    content: str, source: Optional[Union[str, Path]] = None
) -> Tuple[Dict[str, Any], str]:
    """Split YAML front-matter from markdown content.

    Args:
        content: Raw file content
        source: Source path used in error messages

    Returns:
        Tuple of (front-matter mapping, remaining body)

    Raises:
        ParseError: If the block is absent, not valid YAML or not a mapping
    """
    if content.startswith("\ufeff"):
        content = content[1:]

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        raise ParseError("Missing front-matter block", source=source)

    frontmatter_str, body = match.groups()
    try:
        frontmatter = yaml.safe_load(frontmatter_str)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML in front-matter: {e}", source=source) from e

    if frontmatter is None:
        frontmatter = {}
    elif not isinstance(frontmatter, dict):
        raise ParseError(
            "Front-matter must be a mapping",
            source=source,
            details={"type": type(frontmatter).__name__},
        )

    return frontmatter, body.lstrip("\r\n")
