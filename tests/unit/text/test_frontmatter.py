"""Tests for YAML frontmatter parsing and best-effort extraction."""
from __future__ import annotations

import logging

import pytest

from loaddir.core.exceptions import FrontmatterError
from loaddir.core.utils.text.frontmatter import (
    extract_frontmatter,
    parse_frontmatter,
    wrap_frontmatter,
)


def _warnings(caplog: pytest.LogCaptureFixture) -> list:
    return [r for r in caplog.records if r.levelno == logging.WARNING]


class TestParseFrontmatter:
    def test_parses_mapping_and_remaining_content(self) -> None:
        doc = parse_frontmatter('---\ntitle: "Hello"\ntags: [a, b]\n---\n\n# Body\n')

        assert doc.frontmatter == {"title": "Hello", "tags": ["a", "b"]}
        assert doc.content.strip() == "# Body"
        assert "title" in doc.raw_frontmatter

    def test_without_delimiters_returns_empty_frontmatter(self) -> None:
        doc = parse_frontmatter("# Just a heading\n")

        assert doc.frontmatter == {}
        assert doc.content == "# Just a heading\n"

    def test_empty_block_is_empty_mapping(self) -> None:
        assert parse_frontmatter("---\n\n---\nbody").frontmatter == {}

    def test_invalid_yaml_raises_frontmatter_error(self) -> None:
        with pytest.raises(FrontmatterError):
            parse_frontmatter("---\ntitle: [unclosed\n---\n")

    def test_non_mapping_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            parse_frontmatter("---\n- one\n- two\n---\n")


def test_wrap_frontmatter_fences_bare_content() -> None:
    assert wrap_frontmatter("a: 1") == "---\na: 1\n---"


def test_wrap_frontmatter_keeps_existing_block() -> None:
    content = "---\na: 1\n---\nbody"
    assert wrap_frontmatter(content) == content


class TestExtractFrontmatter:
    def test_header_block(self) -> None:
        assert extract_frontmatter('---\ntitle: "Hello"\n---\n# Hello\n') == {"title": "Hello"}

    def test_key_value_body_is_wrapped_before_parsing(self) -> None:
        assert extract_frontmatter("title: Bare\nauthor: someone\n") == {
            "title": "Bare",
            "author": "someone",
        }

    def test_byte_order_mark_is_ignored(self) -> None:
        assert extract_frontmatter("\ufeff---\ntitle: Bom\n---\n") == {"title": "Bom"}

    def test_empty_block_yields_none(self, caplog: pytest.LogCaptureFixture) -> None:
        assert extract_frontmatter("---\n\n---\n") is None
        assert _warnings(caplog) == []

    def test_invalid_yaml_logs_one_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        result = extract_frontmatter("---\ntitle: [unclosed\n---\n", source="posts/bad.md")

        assert result is None
        warnings = _warnings(caplog)
        assert len(warnings) == 1
        assert "posts/bad.md" in warnings[0].getMessage()

    def test_prose_body_is_unusable_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        assert extract_frontmatter("# Heading\n\nSome prose.\n") is None
        assert len(_warnings(caplog)) == 1
