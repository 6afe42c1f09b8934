"""Domain-specific configuration for folder listings.

Provides cached access to the ``listing`` section: the root that
``{% loaddir %}`` arguments resolve against, the context variable name, and
the strings rendered on failure.
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Tuple

from loaddir.core.utils.text.markdown import DEFAULT_MARKDOWN_EXTENSIONS

from ..base import BaseDomainConfig

DEFAULT_CONTEXT_VARIABLE = "folder"
DEFAULT_NOT_FOUND_PLACEHOLDER = "21:30"
DEFAULT_ERROR_MARKUP = "<h1>Error!</h1>"


class ListingConfig(BaseDomainConfig):
    """Folder listing configuration accessor."""

    def _config_section(self) -> str:
        return "listing"

    @cached_property
    def root(self) -> Path:
        return self._resolve_path(str(self.section.get("root") or "."))

    @cached_property
    def context_variable(self) -> str:
        return str(self.section.get("contextVariable") or DEFAULT_CONTEXT_VARIABLE)

    @cached_property
    def markdown_extensions(self) -> Tuple[str, ...]:
        exts = self.section.get("markdownExtensions")
        if not exts:
            return DEFAULT_MARKDOWN_EXTENSIONS
        return tuple(str(e) for e in exts)

    @cached_property
    def encoding(self) -> str:
        return str(self.section.get("encoding") or "utf-8")

    @cached_property
    def not_found_placeholder(self) -> str:
        value = self.section.get("notFoundPlaceholder")
        return DEFAULT_NOT_FOUND_PLACEHOLDER if value is None else str(value)

    @cached_property
    def error_markup(self) -> str:
        value = self.section.get("errorMarkup")
        return DEFAULT_ERROR_MARKUP if value is None else str(value)


__all__ = [
    "ListingConfig",
    "DEFAULT_CONTEXT_VARIABLE",
    "DEFAULT_NOT_FOUND_PLACEHOLDER",
    "DEFAULT_ERROR_MARKUP",
]
