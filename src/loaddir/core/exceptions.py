from __future__ import annotations

from typing import Any, Dict, Mapping


class LoaddirError(Exception):
    """Base exception for loaddir."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class FolderNotFoundError(LoaddirError, FileNotFoundError):
    """Raised when a requested folder does not exist under the listing root."""

    def __init__(
        self,
        message: str = "",
        *,
        folder: str | None = None,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if folder is not None:
            ctx.setdefault("folder", folder)
        if path is not None:
            ctx.setdefault("path", path)
        LoaddirError.__init__(self, message, context=ctx)
        FileNotFoundError.__init__(self, message)
        self.folder = folder
        self.path = path


class FolderEnumerationError(LoaddirError, RuntimeError):
    """Raised when an existing folder cannot be listed."""

    def __init__(
        self,
        message: str = "",
        *,
        folder: str | None = None,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if folder is not None:
            ctx.setdefault("folder", folder)
        if path is not None:
            ctx.setdefault("path", path)
        LoaddirError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)
        self.folder = folder
        self.path = path


class FolderArgumentError(LoaddirError, ValueError):
    """Raised when the ``{% loaddir %}`` argument is not a folder name."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LoaddirError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class FrontmatterError(LoaddirError, ValueError):
    """Raised when a YAML frontmatter block cannot be parsed into a mapping."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LoaddirError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(LoaddirError):
    """Raised when configuration cannot be loaded or fails validation."""


__all__ = [
    "LoaddirError",
    "FolderNotFoundError",
    "FolderEnumerationError",
    "FolderArgumentError",
    "FrontmatterError",
    "ConfigError",
]
