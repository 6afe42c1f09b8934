"""Common argument registration helpers for CLI commands."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for project root override."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root path (where .loaddir/config lives)",
    )


def add_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --root flag overriding ``listing.root``."""
    parser.add_argument(
        "--root",
        type=str,
        help="Folder that {%% loaddir %%} arguments resolve against (default: listing.root)",
    )


def get_repo_root(args: argparse.Namespace) -> Optional[Path]:
    """Return the explicit --repo-root, or None for auto-detection."""
    raw = getattr(args, "repo_root", None)
    return Path(raw).expanduser().resolve() if raw else None


__all__ = ["add_json_flag", "add_repo_root_flag", "add_root_flag", "get_repo_root"]
