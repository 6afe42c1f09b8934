"""Domain-specific configuration accessors."""
from __future__ import annotations

from .listing import ListingConfig
from .logging import LoggingConfig
from .templates import TemplatesConfig

__all__ = ["ListingConfig", "LoggingConfig", "TemplatesConfig"]
