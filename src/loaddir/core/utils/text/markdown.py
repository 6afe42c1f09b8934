"""Markdown file classification."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

DEFAULT_MARKDOWN_EXTENSIONS: Tuple[str, ...] = (".md", ".markdown")


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def is_markdown_file_ext(ext: str, extensions: Optional[Iterable[str]] = None) -> bool:
    """Return True when ``ext`` names a Markdown document.

    Comparison is case-insensitive and tolerates a missing leading dot, so
    ``".MD"``, ``"md"`` and ``".md"`` are all Markdown.

    Example:
        >>> is_markdown_file_ext(".md")
        True
        >>> is_markdown_file_ext(".txt")
        False
        >>> is_markdown_file_ext(".txt", extensions=[".txt"])
        True
    """
    normalized = _normalize_ext(ext)
    if not normalized:
        return False
    known = DEFAULT_MARKDOWN_EXTENSIONS if extensions is None else extensions
    return normalized in {_normalize_ext(e) for e in known}


__all__ = ["DEFAULT_MARKDOWN_EXTENSIONS", "is_markdown_file_ext"]
