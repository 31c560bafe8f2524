"""Directory adapter - accounts and languages from configuration.

Contents:
    * :class:`.store.ConfigDirectory` - Account and language lookup
    * :func:`.config.load_directory_from_dict` - Build a directory from config sections
"""

from __future__ import annotations

from .config import FALLBACK_LANGUAGE, DirectoryConfigModel, load_directory_from_dict
from .store import ConfigDirectory

__all__ = [
    "FALLBACK_LANGUAGE",
    "ConfigDirectory",
    "DirectoryConfigModel",
    "load_directory_from_dict",
]
