"""Notification delivery command."""

from __future__ import annotations

from .deliver import cli_deliver

__all__ = ["cli_deliver"]
