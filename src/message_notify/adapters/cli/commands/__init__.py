"""CLI command implementations registered on the root group.

Contents:
    * :mod:`.info` - Package metadata
    * :mod:`.config` - Merged configuration display
    * :mod:`.view_modes` - Declared view modes
    * :mod:`.notify` - Notification delivery (subpackage)
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .notify import cli_deliver
from .view_modes import cli_view_modes

__all__ = [
    "cli_config",
    "cli_deliver",
    "cli_info",
    "cli_view_modes",
]
