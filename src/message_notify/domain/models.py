"""Value objects read and produced by the email notifier.

Messages, accounts, and languages are owned by upstream systems; the
notifier only reads them. ``DeliveryResult`` is what the mail facility
hands back after an attempt.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

#: Language code meaning "no specific language".
LANGUAGE_NONE = "und"


@dataclass(frozen=True, slots=True)
class Language:
    """A language the mail facility can localise into.

    Example:
        >>> Language(code="fr", name="French", native="Français").code
        'fr'
    """

    code: str
    name: str
    native: str = ""


@dataclass(frozen=True, slots=True)
class Account:
    """Owner of a message, carrying the default address and language."""

    uid: int
    mail: str = ""
    language: str = ""


@dataclass(frozen=True, slots=True)
class Message:
    """A message created by the upstream messaging subsystem.

    Attributes:
        type: Category tag, forwarded as the mail category.
        uid: Owning account reference.
        language: Locale code, or :data:`LANGUAGE_NONE`.
    """

    type: str
    uid: int
    language: str = LANGUAGE_NONE


@dataclass(frozen=True, slots=True)
class NotifierOptions:
    """Per-notifier options.

    Attributes:
        mail: Address overriding the account's default; ``None`` when unset.
        language_override: Use the message language instead of the account's.

    Example:
        >>> NotifierOptions().language_override
        False
    """

    mail: str | None = None
    language_override: bool = False


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Outcome of handing one notification to the mail facility.

    Attributes:
        channel: Mail channel that sent the message (``message_notify``).
        category: Message category the mail was sent under.
        recipient: Address the mail was addressed to.
        language: Code of the language the mail was composed in.
        subject: Composed subject line.
        body: Composed plain-text body.
        result: True when the transport accepted the message.
    """

    channel: str
    category: str
    recipient: str
    language: str
    subject: str
    body: str
    result: bool


OutputBundle = Mapping[str, str]
"""Rendered output keyed by view-mode identifier."""


__all__ = [
    "LANGUAGE_NONE",
    "Account",
    "DeliveryResult",
    "Language",
    "Message",
    "NotifierOptions",
    "OutputBundle",
]
