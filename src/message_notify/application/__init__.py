"""Application layer - use cases and port definitions.

Contains the email notifier use case and the port protocols that define
the interfaces for adapter implementations.

Contents:
    * :mod:`.notifier` - EmailNotifier use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .notifier import EmailNotifier
from .ports import (
    Directory,
    DispatchMail,
    DisplayConfig,
    GetConfig,
    GetDefaultLanguage,
    InitLogging,
    ListLanguages,
    LoadAccount,
    LoadDirectoryFromDict,
    LoadEmailConfigFromDict,
    LoadNotifierOptionsFromDict,
    SendMail,
)

__all__ = [
    "Directory",
    "DispatchMail",
    "DisplayConfig",
    "EmailNotifier",
    "GetConfig",
    "GetDefaultLanguage",
    "InitLogging",
    "ListLanguages",
    "LoadAccount",
    "LoadDirectoryFromDict",
    "LoadEmailConfigFromDict",
    "LoadNotifierOptionsFromDict",
    "SendMail",
]
