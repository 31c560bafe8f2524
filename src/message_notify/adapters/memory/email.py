"""In-memory mail facility for testing.

Provides a spy that satisfies the same Protocols as the SMTP facility but
records every notification instead of sending it.

Contents:
    * :class:`MailSpy` - Captures mail dispatches for test assertions.
    * :func:`load_email_config_from_dict_in_memory` - In-memory config loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from message_notify.domain.behaviors import VIEW_MODE_BODY, VIEW_MODE_SUBJECT
from message_notify.domain.models import DeliveryResult, Language, OutputBundle

from ..email.config import EmailConfig
from ..email.validation import validate_recipient


def _empty_mail_list() -> list[dict[str, Any]]:
    """Create an empty typed list for mail records."""
    return []


@dataclass
class MailSpy:
    """Captures mail dispatches for test assertions.

    Each test should create its own MailSpy to avoid cross-test pollution.

    Attributes:
        sent: One record per dispatch, in call order.
        should_fail: When True, results report ``result=False``.
        raise_exception: When set, dispatches raise this exception after recording.

    Example:
        >>> spy = MailSpy()
        >>> result = spy.dispatch_mail(
        ...     channel="message_notify",
        ...     category="welcome",
        ...     recipient="a@x.com",
        ...     language=Language(code="en", name="English"),
        ...     output={"message_notify_email_subject": "Hi", "message_notify_email_body": "Hello"},
        ... )
        >>> result.result, len(spy.sent)
        (True, 1)
    """

    sent: list[dict[str, Any]] = field(default_factory=_empty_mail_list)
    should_fail: bool = False
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.sent.clear()
        self.raise_exception = None

    def dispatch_mail(
        self,
        *,
        channel: str,
        category: str,
        recipient: str,
        language: Language,
        output: OutputBundle,
    ) -> DeliveryResult:
        """Record the dispatch and return a result based on spy state.

        Raises:
            InvalidRecipientError: When ``recipient`` is not a valid address.
            Exception: If raise_exception is set, raises that exception.
        """
        return self._record(
            config=None,
            channel=channel,
            category=category,
            recipient=recipient,
            language=language,
            output=output,
        )

    def send_mail(
        self,
        *,
        config: EmailConfig,
        channel: str,
        category: str,
        recipient: str,
        language: Language,
        output: OutputBundle,
    ) -> DeliveryResult:
        """Config-taking variant matching the SendMail protocol."""
        return self._record(
            config=config,
            channel=channel,
            category=category,
            recipient=recipient,
            language=language,
            output=output,
        )

    def _record(
        self,
        *,
        config: EmailConfig | None,
        channel: str,
        category: str,
        recipient: str,
        language: Language,
        output: OutputBundle,
    ) -> DeliveryResult:
        validate_recipient(recipient)
        self.sent.append(
            {
                "config": config,
                "channel": channel,
                "category": category,
                "recipient": recipient,
                "language": language,
                "output": dict(output),
            }
        )
        if self.raise_exception is not None:
            raise self.raise_exception
        return DeliveryResult(
            channel=channel,
            category=category,
            recipient=recipient,
            language=language.code,
            subject=output.get(VIEW_MODE_SUBJECT, ""),
            body=output.get(VIEW_MODE_BODY, ""),
            result=not self.should_fail,
        )


def load_email_config_from_dict_in_memory(
    config_dict: Mapping[str, Any],
) -> EmailConfig:
    """Parse email config from dict using the real Pydantic model."""
    email_raw = config_dict.get("email", {})
    return EmailConfig.model_validate(email_raw if email_raw else {})


__all__ = [
    "MailSpy",
    "load_email_config_from_dict_in_memory",
]
