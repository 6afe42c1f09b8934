"""Resolve and enumerate folders for the ``{% loaddir %}`` tag.

The scanner owns every file-system access of a listing. Folder-level failures
are raised as :mod:`loaddir.core.exceptions` errors for the caller to report;
per-file failures are logged and degrade to an entry without metadata.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from loaddir.core.exceptions import FolderArgumentError, FolderEnumerationError, FolderNotFoundError
from loaddir.core.utils.text.frontmatter import extract_frontmatter
from loaddir.core.utils.text.markdown import DEFAULT_MARKDOWN_EXTENSIONS, is_markdown_file_ext

from .models import FileInfo

if TYPE_CHECKING:
    from loaddir.core.config.domains import ListingConfig

logger = logging.getLogger(__name__)


class FolderScanner:
    """List the immediate entries of folders below ``root``.

    The scanner is read-only after construction and can be shared across
    concurrent renders.
    """

    def __init__(
        self,
        root: Union[str, Path],
        *,
        markdown_extensions: Optional[Iterable[str]] = None,
        encoding: str = "utf-8",
    ) -> None:
        self.root = Path(root)
        self.markdown_extensions = tuple(markdown_extensions or DEFAULT_MARKDOWN_EXTENSIONS)
        self.encoding = encoding

    @classmethod
    def from_config(cls, config: "ListingConfig") -> "FolderScanner":
        return cls(
            config.root,
            markdown_extensions=config.markdown_extensions,
            encoding=config.encoding,
        )

    def resolve(self, folder: str) -> Path:
        """Join ``folder`` onto the root.

        ``..`` segments are honoured as given. Leading separators are dropped
        so ``"/posts"`` resolves to ``<root>/posts`` rather than ``/posts``.
        """
        return Path(os.path.join(self.root, folder.lstrip("/\\")))

    def scan(self, folder: str) -> List[FileInfo]:
        """Build the entry list for ``folder``.

        Raises:
            FolderArgumentError: ``folder`` is not a string.
            FolderNotFoundError: the resolved path does not exist.
            FolderEnumerationError: the path exists but cannot be listed.
        """
        if not isinstance(folder, str):
            raise FolderArgumentError(
                f"Folder argument must be a string, got {type(folder).__name__}",
                context={"type": type(folder).__name__},
            )

        final_path = self.resolve(folder)
        if not final_path.exists():
            raise FolderNotFoundError(
                f"Folder '{folder}' not found at {final_path}",
                folder=folder,
                path=str(final_path),
            )

        try:
            names = os.listdir(final_path)
        except OSError as e:
            raise FolderEnumerationError(
                f"Cannot list folder '{folder}' at {final_path}: {e}",
                folder=folder,
                path=str(final_path),
            ) from e

        return [self._describe(folder, final_path, name) for name in names]

    def _describe(self, folder: str, folder_path: Path, name: str) -> FileInfo:
        relative_path = f"{folder}/{name}"
        is_markdown = is_markdown_file_ext(os.path.splitext(name)[1], self.markdown_extensions)
        if not is_markdown:
            return FileInfo(path=relative_path, is_markdown=False)

        file_path = folder_path / name
        try:
            content = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read frontmatter from %s: %s", file_path, e)
            return FileInfo(path=relative_path, is_markdown=True)

        frontmatter = extract_frontmatter(content, source=str(file_path))
        if not frontmatter:
            return FileInfo(path=relative_path, is_markdown=True)

        title = frontmatter.get("title") or None
        return FileInfo(
            path=relative_path,
            is_markdown=True,
            title=title,
            frontmatter=frontmatter,
        )


__all__ = ["FolderScanner"]
