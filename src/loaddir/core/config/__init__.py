"""loaddir configuration system.

Usage:
    from loaddir.core.config import ConfigManager
    from loaddir.core.config.domains import ListingConfig

    # Direct config manager usage
    manager = ConfigManager(repo_root=Path("/path/to/project"))
    config = manager.load_config()

    # Domain-specific accessors (recommended)
    listing = ListingConfig(repo_root=Path("/path/to/project"))
    root = listing.root
"""
from __future__ import annotations

from .manager import ConfigManager
from .base import BaseDomainConfig
from .domains import ListingConfig, LoggingConfig, TemplatesConfig

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "ListingConfig",
    "LoggingConfig",
    "TemplatesConfig",
]
