"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when required configuration values are absent, malformed, or
    logically inconsistent. Typically caught at CLI boundaries to provide
    user-friendly error messages.

    Example:
        >>> from message_notify.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No SMTP hosts configured")
        >>> str(err)
        'No SMTP hosts configured'
    """


class DeliveryError(Exception):
    """Email delivery failed at SMTP level.

    Raised when all configured SMTP hosts fail to accept the message.

    Example:
        >>> from message_notify.domain.errors import DeliveryError
        >>> err = DeliveryError("Connection refused by smtp.example.com:587")
        >>> str(err)
        'Connection refused by smtp.example.com:587'
    """


class InvalidRecipientError(ValueError):
    """Email address validation failure.

    Raised when a recipient address fails RFC 5321/5322 validation.

    Example:
        >>> from message_notify.domain.errors import InvalidRecipientError
        >>> err = InvalidRecipientError("Invalid email: not-an-email")
        >>> isinstance(err, ValueError)
        True
    """


class MissingRecipientError(ValueError):
    """Neither the notifier options nor the account supply an address.

    Example:
        >>> from message_notify.domain.errors import MissingRecipientError
        >>> str(MissingRecipientError("No recipient for account 7"))
        'No recipient for account 7'
    """


class UnknownLanguageError(LookupError):
    """A language code is not part of the available language set.

    Carries the offending code so callers can report it without parsing
    the message.

    Example:
        >>> from message_notify.domain.errors import UnknownLanguageError
        >>> err = UnknownLanguageError("xx")
        >>> err.code
        'xx'
        >>> str(err)
        "Unknown language: 'xx'"
    """

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown language: {code!r}")
        self.code = code


class AccountNotFoundError(LookupError):
    """No account is registered under the requested uid.

    Example:
        >>> from message_notify.domain.errors import AccountNotFoundError
        >>> err = AccountNotFoundError(42)
        >>> err.uid
        42
        >>> str(err)
        'No account with uid 42'
    """

    def __init__(self, uid: int) -> None:
        super().__init__(f"No account with uid {uid}")
        self.uid = uid


class IncompleteOutputError(ValueError):
    """The rendered output lacks one of the declared view modes."""


__all__ = [
    "AccountNotFoundError",
    "ConfigurationError",
    "DeliveryError",
    "IncompleteOutputError",
    "InvalidRecipientError",
    "MissingRecipientError",
    "UnknownLanguageError",
]
