"""Notifier options model and loader.

Parses the ``[notifier]`` section into the domain's
:class:`~message_notify.domain.models.NotifierOptions`. Unknown keys are
rejected so a misspelt option fails at load time instead of being ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from message_notify.domain.models import NotifierOptions


class NotifierOptionsModel(BaseModel):
    """Validated ``[notifier]`` section.

    Example:
        >>> NotifierOptionsModel.model_validate({"mail": "  ", "language override": True}).to_options()
        NotifierOptions(mail=None, language_override=True)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mail: str | None = None
    language_override: bool = Field(
        default=False,
        validation_alias=AliasChoices("language_override", "language override"),
    )

    @field_validator("mail", mode="before")
    @classmethod
    def _coerce_empty_mail_to_none(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only address as "not set"."""
        if isinstance(v, str):
            stripped = v.strip()
            return stripped or None
        return v

    def to_options(self) -> NotifierOptions:
        """Convert to the domain value object."""
        return NotifierOptions(mail=self.mail, language_override=self.language_override)


def load_notifier_options_from_dict(config_dict: Mapping[str, Any]) -> NotifierOptions:
    """Load NotifierOptions from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        NotifierOptions with defaults for missing values.

    Raises:
        pydantic.ValidationError: When the section has unknown keys or bad types.

    Example:
        >>> load_notifier_options_from_dict({})
        NotifierOptions(mail=None, language_override=False)
        >>> load_notifier_options_from_dict({"notifier": {"mail": "ops@example.com"}}).mail
        'ops@example.com'
    """
    section: Any = config_dict.get("notifier", {})
    return NotifierOptionsModel.model_validate(section if section else {}).to_options()


__all__ = [
    "NotifierOptionsModel",
    "load_notifier_options_from_dict",
]
