"""Text processing utilities.

- frontmatter: YAML frontmatter parsing and defensive extraction
- markdown: Markdown file classification
"""
from __future__ import annotations

from .frontmatter import (
    FRONTMATTER_DELIMITER,
    FRONTMATTER_PATTERN,
    ParsedDocument,
    extract_frontmatter,
    parse_frontmatter,
    wrap_frontmatter,
)
from .markdown import DEFAULT_MARKDOWN_EXTENSIONS, is_markdown_file_ext

__all__ = [
    # Frontmatter
    "FRONTMATTER_DELIMITER",
    "FRONTMATTER_PATTERN",
    "ParsedDocument",
    "extract_frontmatter",
    "parse_frontmatter",
    "wrap_frontmatter",
    # Markdown
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "is_markdown_file_ext",
]
