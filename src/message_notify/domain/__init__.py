"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects and resolution rules that form the core of
the email notifier.

Contents:
    * :mod:`.behaviors` - View modes, recipient/language resolution, markup stripping
    * :mod:`.models` - Message, Account, Language, NotifierOptions, DeliveryResult
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    MAIL_CHANNEL,
    VIEW_MODE_BODY,
    VIEW_MODE_SUBJECT,
    resolve_language,
    resolve_recipient,
    sanitize_output,
    strip_markup,
    view_modes,
)
from .enums import OutputFormat
from .errors import (
    AccountNotFoundError,
    ConfigurationError,
    DeliveryError,
    IncompleteOutputError,
    InvalidRecipientError,
    MissingRecipientError,
    UnknownLanguageError,
)
from .models import LANGUAGE_NONE, Account, DeliveryResult, Language, Message, NotifierOptions, OutputBundle

__all__ = [
    # Behaviors
    "MAIL_CHANNEL",
    "VIEW_MODE_BODY",
    "VIEW_MODE_SUBJECT",
    "resolve_language",
    "resolve_recipient",
    "sanitize_output",
    "strip_markup",
    "view_modes",
    # Models
    "LANGUAGE_NONE",
    "Account",
    "DeliveryResult",
    "Language",
    "Message",
    "NotifierOptions",
    "OutputBundle",
    # Enums
    "OutputFormat",
    # Errors
    "AccountNotFoundError",
    "ConfigurationError",
    "DeliveryError",
    "IncompleteOutputError",
    "InvalidRecipientError",
    "MissingRecipientError",
    "UnknownLanguageError",
]
