"""Render templates that use ``{% loaddir %}``.

:class:`FolderTemplateRenderer` owns one configured Jinja2 environment and
seeds every render with a fresh :class:`FolderResultSet`, so the render pass
owns the accumulator and the extension only mutates it.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from loaddir.core.config import ConfigManager
from loaddir.core.config.domains import ListingConfig, TemplatesConfig
from loaddir.core.config.domains.listing import (
    DEFAULT_CONTEXT_VARIABLE,
    DEFAULT_ERROR_MARKUP,
    DEFAULT_NOT_FOUND_PLACEHOLDER,
)
from loaddir.core.utils.text.markdown import DEFAULT_MARKDOWN_EXTENSIONS

from .extension import FolderExtension
from .models import FolderResultSet


def create_environment(
    root: Union[str, Path],
    *,
    templates_dir: Optional[Union[str, Path]] = None,
    context_variable: str = DEFAULT_CONTEXT_VARIABLE,
    markdown_extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    encoding: str = "utf-8",
    not_found_placeholder: str = DEFAULT_NOT_FOUND_PLACEHOLDER,
    error_markup: str = DEFAULT_ERROR_MARKUP,
    autoescape: bool = False,
    trim_blocks: bool = True,
    lstrip_blocks: bool = True,
) -> Environment:
    """Build a Jinja2 environment with :class:`FolderExtension` configured."""
    loader = FileSystemLoader(str(templates_dir)) if templates_dir is not None else None
    env = Environment(
        loader=loader,
        extensions=[FolderExtension],
        autoescape=select_autoescape(default=True, default_for_string=True) if autoescape else False,
        # Tag-only lines such as {% loaddir %} would otherwise leave blank lines.
        trim_blocks=trim_blocks,
        lstrip_blocks=lstrip_blocks,
    )
    env.loaddir_root = str(root)
    env.loaddir_context_variable = context_variable
    env.loaddir_markdown_extensions = tuple(markdown_extensions)
    env.loaddir_encoding = encoding
    env.loaddir_not_found_placeholder = not_found_placeholder
    env.loaddir_error_markup = error_markup
    return env


class FolderTemplateRenderer:
    """Render templates with a per-render folder accumulator."""

    def __init__(self, environment: Environment) -> None:
        self.environment = environment

    @classmethod
    def from_config(
        cls,
        repo_root: Optional[Path] = None,
        *,
        root: Optional[Union[str, Path]] = None,
        templates_dir: Optional[Union[str, Path]] = None,
    ) -> "FolderTemplateRenderer":
        """Build a renderer from the layered loaddir configuration.

        ``root`` and ``templates_dir`` override the configured values.
        """
        config = ConfigManager(repo_root).load_config()
        listing = ListingConfig(repo_root, config=config)
        templates = TemplatesConfig(repo_root, config=config)
        env = create_environment(
            root if root is not None else listing.root,
            templates_dir=templates_dir if templates_dir is not None else templates.directory,
            context_variable=listing.context_variable,
            markdown_extensions=listing.markdown_extensions,
            encoding=listing.encoding,
            not_found_placeholder=listing.not_found_placeholder,
            error_markup=listing.error_markup,
            autoescape=templates.autoescape,
            trim_blocks=templates.trim_blocks,
            lstrip_blocks=templates.lstrip_blocks,
        )
        return cls(env)

    @property
    def context_variable(self) -> str:
        return self.environment.loaddir_context_variable

    def new_context(self, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Return render variables with a fresh accumulator unless one is supplied."""
        ctx = dict(context or {})
        ctx.setdefault(self.context_variable, FolderResultSet())
        return ctx

    def render(self, template_name: str, context: Optional[Dict[str, Any]] = None) -> str:
        template = self.environment.get_template(template_name)
        return template.render(self.new_context(context))

    def render_string(self, source: str, context: Optional[Dict[str, Any]] = None) -> str:
        template = self.environment.from_string(source)
        return template.render(self.new_context(context))


__all__ = ["create_environment", "FolderTemplateRenderer"]
