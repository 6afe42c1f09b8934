"""
loaddir - folder listings for Jinja2 templates

Provides the ``{% loaddir %}`` tag, which publishes the entries of a folder
(with YAML frontmatter metadata for Markdown documents) into the render
context.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
