"""The ``[email]`` section: SMTP transport settings for notification mail.

Values arrive from TOML files, ``.env`` files, and environment variables,
so blank strings mean "unset" and a single host may come in as a string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from btx_lib_mail import validate_email_address, validate_smtp_host
from pydantic import BaseModel, ConfigDict, Field, field_validator

_REDACTED_FIELDS = frozenset({"smtp_password"})


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class EmailConfig(BaseModel):
    """SMTP transport and sender for notification mail.

    Example:
        >>> config = EmailConfig(smtp_hosts="smtp.example.com:587", from_address="noreply@example.com")
        >>> config.smtp_hosts
        ['smtp.example.com:587']
        >>> config.use_starttls
        True
    """

    model_config = ConfigDict(frozen=True)

    smtp_hosts: list[str] = Field(default_factory=list)
    from_address: str | None = None
    smtp_username: str | None = None
    smtp_password: str | None = None
    use_starttls: bool = True
    timeout: float = 30.0
    raise_on_invalid_recipient: bool = True

    @field_validator("smtp_hosts", mode="before")
    @classmethod
    def _hosts_as_list(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value] if value.strip() else []
        if isinstance(value, (list, tuple)):
            return [str(host) for host in cast(list[Any], value)]
        return []

    @field_validator("smtp_hosts")
    @classmethod
    def _hosts_reachable_form(cls, hosts: list[str]) -> list[str]:
        for host in hosts:
            validate_smtp_host(host)
        return hosts

    @field_validator("from_address", "smtp_username", "smtp_password", mode="before")
    @classmethod
    def _unset_when_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("from_address")
    @classmethod
    def _sender_is_address(cls, value: str | None) -> str | None:
        if value is not None:
            validate_email_address(value)
        return value

    @field_validator("timeout")
    @classmethod
    def _timeout_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"timeout must be positive, got {value}")
        return value

    def __repr__(self) -> str:
        """Show every field except the SMTP password.

        Example:
            >>> "secret123" in repr(EmailConfig(smtp_password="secret123"))
            False
        """
        shown = ", ".join(
            f"{name}='[REDACTED]'" if name in _REDACTED_FIELDS and value is not None else f"{name}={value!r}"
            for name, value in self
        )
        return f"EmailConfig({shown})"


def load_email_config_from_dict(config_dict: Mapping[str, Any]) -> EmailConfig:
    """Build :class:`EmailConfig` from the merged configuration's ``[email]`` section.

    A missing or empty section yields the defaults, which have no transport.

    Example:
        >>> load_email_config_from_dict({"email": {"from_address": "n@example.com"}}).from_address
        'n@example.com'
        >>> load_email_config_from_dict({}).smtp_hosts
        []
    """
    section: Any = config_dict.get("email") or {}
    return EmailConfig.model_validate(section)


__all__ = [
    "EmailConfig",
    "load_email_config_from_dict",
]
