"""Folder listing data model.

``FileInfo`` is the immutable description of one folder entry. Templates see
it through :meth:`FileInfo.to_dict`, whose keys (``path``, ``isMarkdown``,
``title``, ``frontmatter``) are what template authors write against.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class FileInfo:
    """One file-system item inside a listed folder."""

    path: str
    is_markdown: bool
    title: Optional[Any] = None
    frontmatter: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Template-facing shape; optional keys are omitted when absent."""
        data: Dict[str, Any] = {"path": self.path, "isMarkdown": self.is_markdown}
        if self.title is not None:
            data["title"] = self.title
        if self.frontmatter is not None:
            data["frontmatter"] = dict(self.frontmatter)
        return data


class FolderResultSet(Dict[str, List[Dict[str, Any]]]):
    """Per-render mapping of requested folder name -> entry dicts.

    Each {% loaddir %} call overwrites its own key and leaves the others alone.
    """


__all__ = ["FileInfo", "FolderResultSet"]
