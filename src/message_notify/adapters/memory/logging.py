"""Logging stand-in for CLI and notifier tests.

``init_logging_in_memory`` leaves the ``lib_log_rich`` runtime untouched,
so tests can invoke commands repeatedly without initialising or shutting
down global logging state.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Accept the merged configuration and ignore its ``[lib_log_rich]`` section."""


__all__ = ["init_logging_in_memory"]
