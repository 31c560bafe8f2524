"""Email notifier use case.

Resolves the recipient and language for one rendered message, strips
markup from the body view mode, and forwards everything to the mail
facility. Collaborators are injected at construction; message, options
and output are passed per call so no state survives between deliveries.

Contents:
    * :class:`EmailNotifier` - view-mode declaration and delivery.
"""

from __future__ import annotations

import logging

from ..domain.behaviors import (
    MAIL_CHANNEL,
    resolve_language,
    resolve_recipient,
    sanitize_output,
    view_modes,
)
from ..domain.models import DeliveryResult, Message, NotifierOptions, OutputBundle
from .ports import DispatchMail, GetDefaultLanguage, ListLanguages, LoadAccount

logger = logging.getLogger(__name__)


class EmailNotifier:
    """Deliver rendered message notifications by email.

    Args:
        load_account: Resolves the message owner from its uid.
        list_languages: Returns the available languages keyed by code.
        default_language: Returns the site default language.
        dispatch_mail: Mail facility receiving the composed notification.

    Example:
        >>> from message_notify.adapters.directory import ConfigDirectory
        >>> from message_notify.adapters.memory import MailSpy
        >>> from message_notify.domain.models import Account, Language
        >>> en = Language(code="en", name="English")
        >>> directory = ConfigDirectory(
        ...     accounts={1: Account(uid=1, mail="a@x.com", language="en")},
        ...     languages={"en": en},
        ...     default_code="en",
        ... )
        >>> spy = MailSpy()
        >>> notifier = EmailNotifier(
        ...     load_account=directory.load_account,
        ...     list_languages=directory.list_languages,
        ...     default_language=directory.default_language,
        ...     dispatch_mail=spy.dispatch_mail,
        ... )
        >>> result = notifier.deliver(
        ...     Message(type="welcome", uid=1),
        ...     NotifierOptions(),
        ...     {"message_notify_email_subject": "Hi", "message_notify_email_body": "<p>Hello</p>"},
        ... )
        >>> result.recipient, result.body
        ('a@x.com', 'Hello')
    """

    def __init__(
        self,
        *,
        load_account: LoadAccount,
        list_languages: ListLanguages,
        default_language: GetDefaultLanguage,
        dispatch_mail: DispatchMail,
    ) -> None:
        self._load_account = load_account
        self._list_languages = list_languages
        self._default_language = default_language
        self._dispatch_mail = dispatch_mail

    @staticmethod
    def view_modes() -> dict[str, dict[str, str]]:
        """Return the subject and body view modes this notifier renders."""
        return view_modes()

    def deliver(self, message: Message, options: NotifierOptions, output: OutputBundle) -> DeliveryResult:
        """Send ``output`` for ``message`` and return the mail facility's result.

        Args:
            message: The message being notified.
            options: Address override and language policy.
            output: Rendered view modes; must contain subject and body.

        Returns:
            The mail facility's result, unchanged.

        Raises:
            MissingRecipientError: No address from options or account.
            UnknownLanguageError: The resolved language code is not available.
            IncompleteOutputError: ``output`` lacks a declared view mode.
            Exception: Anything raised by the account, language, or mail
                collaborators propagates unchanged.
        """
        account = self._load_account(message.uid)
        recipient = resolve_recipient(options, account)
        language = resolve_language(
            message=message,
            account=account,
            options=options,
            languages=self._list_languages(),
            default=self._default_language(),
        )
        sanitized = sanitize_output(output)

        logger.info(
            "Delivering message notification",
            extra={
                "category": message.type,
                "uid": message.uid,
                "recipient": recipient,
                "language": language.code,
                "language_override": options.language_override,
            },
        )
        return self._dispatch_mail(
            channel=MAIL_CHANNEL,
            category=message.type,
            recipient=recipient,
            language=language,
            output=sanitized,
        )


__all__ = ["EmailNotifier"]
