"""Jinja2 extension providing the ``{% loaddir %}`` tag.

Usage::

    env = Environment(extensions=[FolderExtension])
    env.loaddir_root = "/path/to/content"

    {% loaddir "posts" %}
    {% for entry in folder["posts"] if entry.isMarkdown %}
      <a href="{{ entry.path }}">{{ entry.title or entry.path }}</a>
    {% endfor %}

The tag renders nothing on success; the listing is published into the render
context under ``environment.loaddir_context_variable`` (``folder`` by
default) as a mapping of requested folder name -> entries.

The tag also assigns that variable in the enclosing template scope, like
``{% set %}`` would, so later expressions in the same template see it. The
variable name is read when the template is compiled. Inside a ``{% for %}``
body that assignment stays loop-scoped; seed the render with a mutable
accumulator (see :class:`loaddir.core.listing.rendering.FolderTemplateRenderer`)
when tags inside loops must be visible after the loop.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional, Union

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.runtime import Context
from markupsafe import Markup

from loaddir.core.config.domains.listing import (
    DEFAULT_CONTEXT_VARIABLE,
    DEFAULT_ERROR_MARKUP,
    DEFAULT_NOT_FOUND_PLACEHOLDER,
)
from loaddir.core.exceptions import FolderNotFoundError, LoaddirError
from loaddir.core.utils.text.markdown import DEFAULT_MARKDOWN_EXTENSIONS

from .models import FileInfo, FolderResultSet
from .scanner import FolderScanner

logger = logging.getLogger(__name__)


class FolderExtension(Extension):
    """Register ``{% loaddir <folder> %}``."""

    tags = {"loaddir"}

    def __init__(self, environment: Any) -> None:
        super().__init__(environment)
        environment.extend(
            loaddir_root=".",
            loaddir_context_variable=DEFAULT_CONTEXT_VARIABLE,
            loaddir_markdown_extensions=DEFAULT_MARKDOWN_EXTENSIONS,
            loaddir_encoding="utf-8",
            loaddir_not_found_placeholder=DEFAULT_NOT_FOUND_PLACEHOLDER,
            loaddir_error_markup=DEFAULT_ERROR_MARKUP,
        )

    def parse(self, parser: Any) -> List[nodes.Node]:
        lineno = next(parser.stream).lineno
        folder = parser.parse_expression()
        call = self.call_method(
            "_run",
            [nodes.ContextReference(), folder, nodes.Const(lineno)],
            lineno=lineno,
        )
        rebind = nodes.Assign(
            nodes.Name(self.environment.loaddir_context_variable, "store", lineno=lineno),
            self.call_method("_accumulator", [nodes.ContextReference()], lineno=lineno),
            lineno=lineno,
        )
        return [nodes.Output([call], lineno=lineno), rebind]

    def _accumulator(self, context: Context) -> Any:
        """Return the published listing, or an undefined if nothing was published."""
        name = self.environment.loaddir_context_variable
        if name in context:
            return context[name]
        return self.environment.undefined(name=name)

    def _scanner(self) -> FolderScanner:
        env = self.environment
        return FolderScanner(
            env.loaddir_root,
            markdown_extensions=env.loaddir_markdown_extensions,
            encoding=env.loaddir_encoding,
        )

    def _run(self, context: Context, folder: Any, lineno: Optional[int] = None) -> Union[str, Markup]:
        env = self.environment
        where = f"line {lineno} of {context.name or '<string>'}"
        try:
            entries = self._scanner().scan(folder)
        except FolderNotFoundError as e:
            logger.error("Invalid {%% loaddir %%} tag at %s: %s", where, e)
            return env.loaddir_not_found_placeholder
        except LoaddirError as e:
            logger.error("{%% loaddir %%} failed at %s: %s", where, e)
            return Markup(env.loaddir_error_markup)
        except Exception:
            logger.exception("{%% loaddir %%} failed at %s", where)
            return Markup(env.loaddir_error_markup)

        publish_listing(context, env.loaddir_context_variable, folder, entries)
        return Markup("")


def publish_listing(context: Context, name: str, folder: str, entries: List[FileInfo]) -> MutableMapping:
    """Store ``entries`` for ``folder`` in the accumulator held by ``context``.

    A mutable accumulator already in the context is updated in place, so every
    reference to it (including ones Jinja2 resolved earlier) sees the listing.
    """
    existing = context.get(name)
    if isinstance(existing, MutableMapping):
        folders = existing
    elif isinstance(existing, Mapping):
        folders = FolderResultSet(existing)
    else:
        folders = FolderResultSet()
    folders[folder] = [entry.to_dict() for entry in entries]
    context.vars[name] = folders
    context.exported_vars.add(name)
    return folders


__all__ = ["FolderExtension", "publish_listing"]
