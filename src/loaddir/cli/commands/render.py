"""
loaddir render command.

SUMMARY: Render a template with the {% loaddir %} tag enabled
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jinja2 import TemplateError

from loaddir.cli import OutputFormatter, add_repo_root_flag, add_root_flag, get_repo_root
from loaddir.core.exceptions import LoaddirError
from loaddir.core.listing import FolderTemplateRenderer

SUMMARY = "Render a template with the {% loaddir %} tag enabled"


def _parse_var(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    return key.strip(), value


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "template",
        help="Template file; a name inside --templates-dir or a path to a file",
    )
    parser.add_argument(
        "--templates-dir",
        type=str,
        help="Template search directory (default: templates.directory)",
    )
    parser.add_argument(
        "--var",
        dest="variables",
        action="append",
        type=_parse_var,
        default=[],
        metavar="KEY=VALUE",
        help="Extra template variable (repeatable)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the rendered output to this file instead of stdout",
    )
    add_root_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=False)

    template_name = args.template
    templates_dir = args.templates_dir
    template_path = Path(template_name)
    if templates_dir is None and template_path.is_file():
        # A direct file path: search its own directory.
        templates_dir = str(template_path.parent)
        template_name = template_path.name

    try:
        renderer = FolderTemplateRenderer.from_config(
            get_repo_root(args),
            root=Path(args.root).expanduser() if args.root else None,
            templates_dir=templates_dir,
        )
        output = renderer.render(template_name, dict(args.variables))
    except LoaddirError as e:
        formatter.error(e, error_code=e.to_json_error()["code"])
        return 1
    except TemplateError as e:
        formatter.error(e, error_code="template_error")
        return 1

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
        if output and not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
