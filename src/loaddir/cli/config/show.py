"""
loaddir config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, project overrides,
and environment variables. Supports filtering by key.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from loaddir.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from loaddir.core.config import ConfigManager
from loaddir.core.exceptions import ConfigError

SUMMARY = "Show current configuration"

_MISSING = object()


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'listing.root')",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        manager = ConfigManager(get_repo_root(args))
        config = manager.load_config()
    except ConfigError as e:
        formatter.error(e, error_code="config_error")
        return 1

    value = config
    if args.key:
        value = manager.get(args.key, _MISSING)
        if value is _MISSING:
            formatter.error(f"Configuration key not found: {args.key}", error_code="key_not_found")
            return 1

    if formatter.json_mode:
        formatter.json_output(value)
    elif isinstance(value, (dict, list)):
        formatter.text(yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip())
    else:
        formatter.text("" if value is None else str(value))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
