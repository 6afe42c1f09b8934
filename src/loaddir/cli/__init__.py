"""
loaddir CLI package.

Provides the command-line interface with auto-discovery of commands from
``commands/`` (top-level) and domain subfolders (``config/``).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
"""
from ._output import OutputFormatter, format_json
from ._args import add_json_flag, add_repo_root_flag, add_root_flag, get_repo_root

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_root_flag",
    "get_repo_root",
]
