"""Folder listings for Jinja2 templates.

- models: FileInfo entries and the per-render FolderResultSet
- scanner: folder resolution, enumeration, and frontmatter extraction
- extension: the ``{% loaddir %}`` Jinja2 tag
- rendering: environment factory and renderer seeding the accumulator
"""
from __future__ import annotations

from .extension import FolderExtension, publish_listing
from .models import FileInfo, FolderResultSet
from .rendering import FolderTemplateRenderer, create_environment
from .scanner import FolderScanner

__all__ = [
    "FileInfo",
    "FolderResultSet",
    "FolderScanner",
    "FolderExtension",
    "publish_listing",
    "FolderTemplateRenderer",
    "create_environment",
]
