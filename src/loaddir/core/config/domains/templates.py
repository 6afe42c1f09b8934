"""Domain-specific configuration for the Jinja2 environment."""
from __future__ import annotations

from functools import cached_property
from pathlib import Path

from ..base import BaseDomainConfig


class TemplatesConfig(BaseDomainConfig):
    """Template loading and whitespace configuration accessor."""

    def _config_section(self) -> str:
        return "templates"

    @cached_property
    def directory(self) -> Path:
        return self._resolve_path(str(self.section.get("directory") or "templates"))

    @cached_property
    def autoescape(self) -> bool:
        return bool(self.section.get("autoescape", False))

    @cached_property
    def trim_blocks(self) -> bool:
        return bool(self.section.get("trimBlocks", True))

    @cached_property
    def lstrip_blocks(self) -> bool:
        return bool(self.section.get("lstripBlocks", True))


__all__ = ["TemplatesConfig"]
