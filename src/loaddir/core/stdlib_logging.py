from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_LOADDIR_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Install the loaddir handler on the root logger.

    Logs go to ``log_path`` when given, otherwise to stderr (stdout stays free
    for rendered output and JSON). Idempotent per-process: calling again with
    the same target only updates the level.
    """
    global _CONFIGURED_TARGET, _LOADDIR_HANDLER

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _LOADDIR_HANDLER is not None:
        _LOADDIR_HANDLER.setLevel(_level_from_name(level))
        return

    # Replace the loaddir-installed handler when switching targets.
    if _LOADDIR_HANDLER is not None:
        root.removeHandler(_LOADDIR_HANDLER)
        _LOADDIR_HANDLER.close()
        _LOADDIR_HANDLER = None

    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _LOADDIR_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the loaddir handler."""
    global _CONFIGURED_TARGET, _LOADDIR_HANDLER
    if _LOADDIR_HANDLER is not None:
        logging.getLogger().removeHandler(_LOADDIR_HANDLER)
        _LOADDIR_HANDLER.close()
    _CONFIGURED_TARGET = None
    _LOADDIR_HANDLER = None


__all__ = ["LOG_FORMAT", "configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
