"""SMTP mail facility for message notifications.

Composes the subject and body from the rendered view modes and sends the
result through btx_lib_mail.
"""

from __future__ import annotations

import logging

from btx_lib_mail.lib_mail import send as btx_send

from message_notify.domain.behaviors import VIEW_MODE_BODY, VIEW_MODE_SUBJECT
from message_notify.domain.errors import ConfigurationError, DeliveryError
from message_notify.domain.models import DeliveryResult, Language, OutputBundle

from .config import EmailConfig
from .validation import validate_recipient

logger = logging.getLogger(__name__)

# Keywords that may indicate sensitive data in exception messages
_SENSITIVE_KEYWORDS = frozenset(
    {
        "password",
        "credential",
        "auth",
        "secret",
        "token",
        "key",
        "login",
    }
)


def _sanitize_exception_message(exc: Exception) -> str:
    """Sanitize exception message to prevent credential exposure.

    Example:
        >>> class FakeExc(Exception): pass
        >>> _sanitize_exception_message(FakeExc("Connection failed"))
        'Connection failed'
        >>> _sanitize_exception_message(FakeExc("Auth password rejected"))
        'Email delivery failed. Check SMTP configuration.'
    """
    message = str(exc).lower()
    if any(keyword in message for keyword in _SENSITIVE_KEYWORDS):
        return "Email delivery failed. Check SMTP configuration."
    return str(exc)


def _build_credentials(config: EmailConfig) -> tuple[str, str] | None:
    """Return (username, password) tuple when both are set, else None."""
    if config.smtp_username is not None and config.smtp_password is not None:
        return (config.smtp_username, config.smtp_password)
    return None


def _require_transport(config: EmailConfig) -> str:
    """Return the sender address after checking SMTP hosts are configured.

    Raises:
        ConfigurationError: When smtp_hosts is empty or from_address is unset.
    """
    if not config.smtp_hosts:
        raise ConfigurationError("No SMTP hosts configured (email.smtp_hosts is empty)")
    if config.from_address is None:
        raise ConfigurationError("No sender configured (email.from_address is empty)")
    return config.from_address


def dispatch_mail(
    *,
    config: EmailConfig,
    channel: str,
    category: str,
    recipient: str,
    language: Language,
    output: OutputBundle,
) -> DeliveryResult:
    """Send one rendered notification over SMTP.

    Args:
        config: SMTP settings and sender address.
        channel: Mail channel, recorded on the result.
        category: Message category, recorded on the result.
        recipient: Destination address.
        language: Language the notification was rendered for.
        output: Rendered view modes; subject and body are read from it.

    Returns:
        DeliveryResult describing the composed mail. ``result`` is False
        when the transport reports failure without raising.

    Raises:
        ConfigurationError: No SMTP hosts or no sender configured.
        InvalidRecipientError: ``recipient`` is not a valid address.
        DeliveryError: All SMTP hosts failed.

    Side Effects:
        Sends email via SMTP. Logs attempts at INFO and failures at WARNING.
    """
    sender = _require_transport(config)
    validate_recipient(recipient)
    subject = output.get(VIEW_MODE_SUBJECT, "")
    body = output.get(VIEW_MODE_BODY, "")

    logger.info(
        "Sending notification email",
        extra={
            "channel": channel,
            "category": category,
            "sender": sender,
            "recipient": recipient,
            "language": language.code,
        },
    )

    try:
        sent = btx_send(
            mail_from=sender,
            mail_recipients=[recipient],
            mail_subject=subject,
            mail_body=body,
            smtphosts=config.smtp_hosts,
            credentials=_build_credentials(config),
            use_starttls=config.use_starttls,
            timeout=config.timeout,
            raise_on_invalid_recipient=config.raise_on_invalid_recipient,
        )
    except RuntimeError as exc:
        logger.debug("SMTP delivery failed", exc_info=True)
        raise DeliveryError(_sanitize_exception_message(exc)) from exc

    if sent:
        logger.info("Notification email sent", extra={"category": category, "recipient": recipient})
    else:
        logger.warning("Notification email send returned failure", extra={"category": category, "recipient": recipient})

    return DeliveryResult(
        channel=channel,
        category=category,
        recipient=recipient,
        language=language.code,
        subject=subject,
        body=body,
        result=bool(sent),
    )


__all__ = [
    "dispatch_mail",
]
