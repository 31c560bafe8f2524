"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the notifier to external
systems and frameworks (CLI, configuration, directory, email, logging).

Contents:
    * :mod:`.config` - Configuration loading, display, overrides, notifier options
    * :mod:`.directory` - Accounts and languages from configuration
    * :mod:`.email` - Mail facility via SMTP
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
