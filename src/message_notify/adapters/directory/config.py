"""Directory configuration models and loader.

Parses the ``[languages]`` and ``[accounts]`` sections produced by
lib_layered_config into a :class:`~.store.ConfigDirectory`.

Expected layout::

    [languages]
    default = "en"

    [languages.available.en]
    name = "English"
    native = "English"

    [accounts.1]
    mail = "admin@example.com"
    language = "en"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from message_notify.domain.models import Account, Language

from .store import ConfigDirectory

#: Language used when the configuration lists none.
FALLBACK_LANGUAGE = Language(code="en", name="English", native="English")


class LanguageModel(BaseModel):
    """One ``[languages.available.<code>]`` table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    native: str = ""


class LanguagesModel(BaseModel):
    """The ``[languages]`` section.

    Example:
        >>> LanguagesModel().default
        'en'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default: str = FALLBACK_LANGUAGE.code
    available: dict[str, LanguageModel] = Field(default_factory=dict)


class AccountModel(BaseModel):
    """One ``[accounts.<uid>]`` table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mail: str = ""
    language: str = ""


class DirectoryConfigModel(BaseModel):
    """Both directory sections, validated in a single parse.

    TOML table keys are strings; uids are coerced to ``int`` here.

    Example:
        >>> model = DirectoryConfigModel.model_validate({"accounts": {"3": {"mail": "c@z.com"}}})
        >>> list(model.accounts)
        [3]
    """

    model_config = ConfigDict(frozen=True)

    languages: LanguagesModel = Field(default_factory=LanguagesModel)
    accounts: dict[int, AccountModel] = Field(default_factory=dict)

    def to_directory(self) -> ConfigDirectory:
        """Convert the validated sections into a ConfigDirectory.

        Raises:
            ConfigurationError: When the default language is not available.
        """
        if self.languages.available:
            languages = {
                code: Language(code=code, name=entry.name, native=entry.native)
                for code, entry in self.languages.available.items()
            }
        else:
            languages = {FALLBACK_LANGUAGE.code: FALLBACK_LANGUAGE}
        accounts = {
            uid: Account(uid=uid, mail=entry.mail.strip(), language=entry.language.strip())
            for uid, entry in self.accounts.items()
        }
        return ConfigDirectory(accounts=accounts, languages=languages, default_code=self.languages.default)


def load_directory_from_dict(config_dict: Mapping[str, Any]) -> ConfigDirectory:
    """Build the account/language directory from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.

    Returns:
        ConfigDirectory ready to back the notifier ports.

    Raises:
        pydantic.ValidationError: When a section contains unknown keys or
            values of the wrong type.
        ConfigurationError: When the default language is not available.

    Example:
        >>> directory = load_directory_from_dict({
        ...     "languages": {
        ...         "default": "fr",
        ...         "available": {"fr": {"name": "French", "native": "Français"}},
        ...     },
        ...     "accounts": {"1": {"mail": "a@x.com", "language": "fr"}},
        ... })
        >>> directory.load_account(1).mail
        'a@x.com'
        >>> directory.default_language().code
        'fr'
    """
    raw = {key: config_dict[key] for key in ("languages", "accounts") if config_dict.get(key)}
    return DirectoryConfigModel.model_validate(raw).to_directory()


__all__ = [
    "FALLBACK_LANGUAGE",
    "AccountModel",
    "DirectoryConfigModel",
    "LanguageModel",
    "LanguagesModel",
    "load_directory_from_dict",
]
