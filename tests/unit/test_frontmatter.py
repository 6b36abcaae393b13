"""Tests for front-matter extraction."""

import pytest

from folio.content.frontmatter import extract_frontmatter
from folio.exceptions import ParseError


def test_extracts_mapping_and_body() -> None:
    """Test that front-matter and body are split apart."""
    frontmatter, body = extract_frontmatter("---\ntitle: Introduction\norder: 1\n---\n# Hi\n")

    assert frontmatter == {"title": "Introduction", "order": 1}
    assert body == "# Hi\n"


def test_body_keeps_inner_rules() -> None:
    """Test that a horizontal rule in the body is not treated as a delimiter."""
    content = "---\ntitle: A\n---\nfirst\n\n---\n\nsecond\n"

    _, body = extract_frontmatter(content)

    assert body == "first\n\n---\n\nsecond\n"


def test_handles_crlf_and_bom() -> None:
    """Test Windows line endings and a byte order mark."""
    frontmatter, body = extract_frontmatter("\ufeff---\r\ntitle: A\r\n---\r\nbody")

    assert frontmatter["title"] == "A"
    assert body == "body"


def test_front_matter_without_body() -> None:
    frontmatter, body = extract_frontmatter("---\ntitle: Empty\n---")

    assert frontmatter == {"title": "Empty"}
    assert body == ""


def test_empty_block_is_empty_mapping() -> None:
    frontmatter, body = extract_frontmatter("---\n---\ntext\n")

    assert frontmatter == {}
    assert body == "text\n"


def test_missing_block_raises() -> None:
    """Test that content without front-matter is rejected."""
    with pytest.raises(ParseError, match="Missing front-matter"):
        extract_frontmatter("# Just a heading\n", source="intro.md")


def test_invalid_yaml_raises() -> None:
    with pytest.raises(ParseError, match="Invalid YAML"):
        extract_frontmatter("---\ntitle: [unclosed\n---\nbody\n")


def test_non_mapping_raises() -> None:
    with pytest.raises(ParseError) as exc_info:
        extract_frontmatter("---\n- a\n- b\n---\nbody\n", source="list.md")

    assert exc_info.value.source == "list.md"
    assert exc_info.value.details == {"type": "list"}
