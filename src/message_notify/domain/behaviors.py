"""Pure resolution rules for email notifications.

Contents:
    * :func:`view_modes` - the two output view modes the email notifier renders.
    * :func:`resolve_recipient` - pick the delivery address.
    * :func:`resolve_language` - pick the delivery language.
    * :func:`strip_markup` / :func:`sanitize_output` - plain-text body preparation.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from bs4 import BeautifulSoup

from .errors import IncompleteOutputError, MissingRecipientError, UnknownLanguageError
from .models import LANGUAGE_NONE, Account, Language, Message, NotifierOptions, OutputBundle

#: Mail channel every notification is dispatched under.
MAIL_CHANNEL = "message_notify"

VIEW_MODE_SUBJECT = "message_notify_email_subject"
VIEW_MODE_BODY = "message_notify_email_body"

#: Anything a mail client could render as a tag: ``<`` followed by a non-space.
_TAG_PATTERN = re.compile(r"<[^\s>][^>]*>")

_VIEW_MODE_LABELS: dict[str, str] = {
    VIEW_MODE_SUBJECT: "Notify - Email subject",
    VIEW_MODE_BODY: "Notify - Email body",
}


def view_modes() -> dict[str, dict[str, str]]:
    """Return the view modes rendered for an email notification.

    Returns:
        Mapping of view-mode identifier to ``{"label": ...}``. A fresh dict
        on every call.

    Example:
        >>> sorted(view_modes())
        ['message_notify_email_body', 'message_notify_email_subject']
        >>> view_modes()["message_notify_email_subject"]["label"]
        'Notify - Email subject'
    """
    return {key: {"label": label} for key, label in _VIEW_MODE_LABELS.items()}


def resolve_recipient(options: NotifierOptions, account: Account) -> str:
    """Return the options address when set, else the account address.

    Raises:
        MissingRecipientError: When both are empty.

    Example:
        >>> resolve_recipient(NotifierOptions(mail="b@y.com"), Account(uid=1, mail="a@x.com"))
        'b@y.com'
        >>> resolve_recipient(NotifierOptions(), Account(uid=1, mail="a@x.com"))
        'a@x.com'
    """
    if options.mail:
        return options.mail
    if account.mail:
        return account.mail
    raise MissingRecipientError(f"No recipient address for account {account.uid}")


def _lookup_language(languages: Mapping[str, Language], code: str) -> Language:
    try:
        return languages[code]
    except KeyError:
        raise UnknownLanguageError(code) from None


def resolve_language(
    *,
    message: Message,
    account: Account,
    options: NotifierOptions,
    languages: Mapping[str, Language],
    default: Language,
) -> Language:
    """Choose the language the notification is composed in.

    Without ``language_override`` the account language wins when it is set
    and not :data:`LANGUAGE_NONE`; otherwise ``default`` is used. With the
    override the message's own language is looked up.

    Raises:
        UnknownLanguageError: When the chosen code is not in ``languages``.

    Example:
        >>> en = Language(code="en", name="English")
        >>> fr = Language(code="fr", name="French")
        >>> resolve_language(
        ...     message=Message(type="t", uid=1, language="en"),
        ...     account=Account(uid=1, language="fr"),
        ...     options=NotifierOptions(),
        ...     languages={"en": en, "fr": fr},
        ...     default=en,
        ... ).name
        'French'
    """
    if options.language_override:
        return _lookup_language(languages, message.language)
    if account.language and account.language != LANGUAGE_NONE:
        return _lookup_language(languages, account.language)
    return default


def _text_content(text: str) -> str:
    soup = BeautifulSoup(text, "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    return _TAG_PATTERN.sub("", soup.get_text())


def strip_markup(text: str) -> str:
    """Remove all tags from ``text``, dropping script and style content.

    Entities are decoded, so the text is stripped again until nothing
    tag-shaped is left; ``&lt;b&gt;`` never comes back as a live ``<b>``.

    Example:
        >>> strip_markup("<b>Hi</b>")
        'Hi'
        >>> strip_markup("&lt;b&gt;Hi&lt;/b&gt; &amp; bye")
        'Hi & bye'
        >>> strip_markup("1 < 2")
        '1 < 2'
    """
    previous = None
    while text != previous:
        previous = text
        text = _text_content(text)
    return text


def sanitize_output(output: OutputBundle) -> dict[str, str]:
    """Return a copy of ``output`` with markup stripped from the body.

    The caller's mapping is left untouched; the subject passes through.

    Raises:
        IncompleteOutputError: When either declared view mode is missing.

    Example:
        >>> sanitize_output({VIEW_MODE_SUBJECT: "<i>S</i>", VIEW_MODE_BODY: "<b>Hi</b>"})[VIEW_MODE_BODY]
        'Hi'
    """
    missing = [key for key in _VIEW_MODE_LABELS if key not in output]
    if missing:
        raise IncompleteOutputError(f"Output is missing view modes: {', '.join(missing)}")
    sanitized = dict(output)
    sanitized[VIEW_MODE_BODY] = strip_markup(output[VIEW_MODE_BODY])
    return sanitized


__all__ = [
    "MAIL_CHANNEL",
    "VIEW_MODE_BODY",
    "VIEW_MODE_SUBJECT",
    "resolve_language",
    "resolve_recipient",
    "sanitize_output",
    "strip_markup",
    "view_modes",
]
