"""
loaddir list command.

SUMMARY: List a folder the way {% loaddir %} publishes it
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loaddir.cli import OutputFormatter, add_json_flag, add_repo_root_flag, add_root_flag, get_repo_root
from loaddir.core.config.domains import ListingConfig
from loaddir.core.exceptions import LoaddirError
from loaddir.core.listing import FolderScanner

SUMMARY = "List a folder the way {% loaddir %} publishes it"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "folder",
        help="Folder name, relative to the listing root (e.g., 'posts')",
    )
    add_root_flag(parser)
    add_json_flag(parser)
    add_repo_root_flag(parser)


def _format_entry(entry: dict) -> str:
    marker = "md" if entry["isMarkdown"] else "--"
    title = entry.get("title")
    return f"  [{marker}] {entry['path']}" + (f"  ({title})" if title else "")


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        listing = ListingConfig(get_repo_root(args))
        if args.root:
            scanner = FolderScanner(
                Path(args.root).expanduser(),
                markdown_extensions=listing.markdown_extensions,
                encoding=listing.encoding,
            )
        else:
            scanner = FolderScanner.from_config(listing)
        entries = [info.to_dict() for info in scanner.scan(args.folder)]
    except LoaddirError as e:
        formatter.error(e, error_code=e.to_json_error()["code"])
        return 1

    if formatter.json_mode:
        formatter.json_output({"folder": args.folder, "root": str(scanner.root), "entries": entries})
        return 0

    formatter.text(f"{args.folder} ({len(entries)} entries)")
    for entry in entries:
        formatter.text(_format_entry(entry))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
