"""Account and language directory backed by plain mappings.

A :class:`ConfigDirectory` is what the notifier's account and language
ports are bound to. Production builds it from the ``[accounts]`` and
``[languages]`` configuration sections; tests build it directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from message_notify.domain.errors import AccountNotFoundError, ConfigurationError
from message_notify.domain.models import Account, Language


@dataclass(frozen=True, slots=True)
class ConfigDirectory:
    """Immutable lookup of accounts and languages.

    Attributes:
        accounts: Accounts keyed by uid.
        languages: Available languages keyed by code.
        default_code: Code of the site default language.

    Raises:
        ConfigurationError: When ``default_code`` is not among ``languages``.

    Example:
        >>> en = Language(code="en", name="English")
        >>> directory = ConfigDirectory(accounts={}, languages={"en": en}, default_code="en")
        >>> directory.default_language().name
        'English'
        >>> directory.load_account(9)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        AccountNotFoundError: No account with uid 9
    """

    accounts: Mapping[int, Account]
    languages: Mapping[str, Language]
    default_code: str

    def __post_init__(self) -> None:
        if self.default_code not in self.languages:
            known = ", ".join(sorted(self.languages)) or "none"
            raise ConfigurationError(
                f"Default language {self.default_code!r} is not an available language (available: {known})"
            )

    def load_account(self, uid: int) -> Account:
        """Return the account registered under ``uid``."""
        try:
            return self.accounts[uid]
        except KeyError:
            raise AccountNotFoundError(uid) from None

    def list_languages(self) -> Mapping[str, Language]:
        """Return a read-only view of the available languages."""
        return MappingProxyType(dict(self.languages))

    def default_language(self) -> Language:
        """Return the site default language."""
        return self.languages[self.default_code]


__all__ = ["ConfigDirectory"]
