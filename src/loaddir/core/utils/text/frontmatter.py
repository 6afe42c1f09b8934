"""YAML frontmatter parsing utilities.

This module parses the YAML frontmatter of Markdown documents listed by the
``{% loaddir %}`` tag. The frontmatter is delimited by '---' markers at the
start of the file.

Example:
    ```yaml
    ---
    title: "Hello"
    tags: [intro, news]
    ---

    # Hello
    ```
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from loaddir.core.exceptions import FrontmatterError

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

# Regex pattern to match YAML frontmatter at the start of a file
# Matches content between the first pair of '---' markers
FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*\n?",
    re.DOTALL | re.MULTILINE,
)


@dataclass
class ParsedDocument:
    """Result of parsing a document with YAML frontmatter.

    Attributes:
        frontmatter: Parsed YAML frontmatter as a dictionary
        content: The markdown content after the frontmatter
        raw_frontmatter: The raw YAML string (for debugging)
    """
    frontmatter: Dict[str, Any]
    content: str
    raw_frontmatter: str


def parse_frontmatter(content: str) -> ParsedDocument:
    """Parse YAML frontmatter from markdown content.

    Extracts the YAML frontmatter from between the first pair of '---'
    delimiters at the start of the file. The frontmatter is parsed
    as YAML and returned along with the remaining content.

    Args:
        content: Full markdown content including frontmatter

    Returns:
        ParsedDocument with frontmatter dict, content, and raw YAML

    Raises:
        FrontmatterError: If the YAML is invalid or is not a mapping

    Example:
        >>> doc = parse_frontmatter('''---
        ... title: Hello
        ... ---
        ...
        ... # Hello
        ... ''')
        >>> doc.frontmatter['title']
        'Hello'
    """
    match = FRONTMATTER_PATTERN.match(content)

    if not match:
        # No frontmatter found - return empty frontmatter and full content
        return ParsedDocument(
            frontmatter={},
            content=content,
            raw_frontmatter="",
        )

    raw_yaml = match.group(1)
    remaining_content = content[match.end():]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML in frontmatter: {e}") from e
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise FrontmatterError(
            f"Frontmatter must be a YAML mapping, got {type(parsed).__name__}",
            context={"type": type(parsed).__name__},
        )

    return ParsedDocument(
        frontmatter=parsed,
        content=remaining_content,
        raw_frontmatter=raw_yaml,
    )


def wrap_frontmatter(content: str) -> str:
    """Fence ``content`` as a frontmatter block unless it already starts with one.

    A document whose whole body is ``key: value`` lines then parses as if it
    were a header.

    Example:
        >>> wrap_frontmatter("title: Hello")
        '---\\ntitle: Hello\\n---'
        >>> wrap_frontmatter("---\\ntitle: Hello\\n---\\n")
        '---\\ntitle: Hello\\n---\\n'
    """
    if content.startswith(FRONTMATTER_DELIMITER):
        return content
    return f"{FRONTMATTER_DELIMITER}\n{content}\n{FRONTMATTER_DELIMITER}"


def extract_frontmatter(content: str, *, source: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Best-effort frontmatter extraction for directory listings.

    The content is normalized with :func:`wrap_frontmatter` and parsed with
    :func:`parse_frontmatter`. Parse failures never propagate: a warning is
    logged and ``None`` is returned.

    Args:
        content: Full document text
        source: Optional file path used in the warning message

    Returns:
        The frontmatter mapping, or None when the document yields no keys
        or cannot be parsed.
    """
    text = content.lstrip("\ufeff")
    try:
        frontmatter = parse_frontmatter(wrap_frontmatter(text)).frontmatter
    except Exception as e:
        where = f" from {source}" if source else ""
        logger.warning("Failed to parse frontmatter%s: %s", where, e)
        return None
    return frontmatter or None


__all__ = [
    "FRONTMATTER_DELIMITER",
    "FRONTMATTER_PATTERN",
    "ParsedDocument",
    "parse_frontmatter",
    "wrap_frontmatter",
    "extract_frontmatter",
]
