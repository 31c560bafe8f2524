"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
and bound methods satisfy these protocols automatically via structural
subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``EmailConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import Account, DeliveryResult, Language, NotifierOptions, OutputBundle

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.email.config import EmailConfig


# ======================== Notifier collaborators ========================


class LoadAccount(Protocol):
    """Resolve an account from its uid.

    Implementations raise ``AccountNotFoundError`` for unknown uids.
    """

    def __call__(self, uid: int) -> Account: ...


class ListLanguages(Protocol):
    """Return every available language keyed by code."""

    def __call__(self) -> Mapping[str, Language]: ...


class GetDefaultLanguage(Protocol):
    """Return the site default language."""

    def __call__(self) -> Language: ...


class DispatchMail(Protocol):
    """Hand one rendered notification to the mail facility."""

    def __call__(
        self,
        *,
        channel: str,
        category: str,
        recipient: str,
        language: Language,
        output: OutputBundle,
    ) -> DeliveryResult: ...


class Directory(Protocol):
    """Account and language source backing the notifier collaborators."""

    def load_account(self, uid: int) -> Account: ...

    def list_languages(self) -> Mapping[str, Language]: ...

    def default_language(self) -> Language: ...


# ======================== Application services ========================


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class SendMail(Protocol):
    """Send a rendered notification using configured SMTP settings."""

    def __call__(
        self,
        *,
        config: EmailConfig,
        channel: str,
        category: str,
        recipient: str,
        language: Language,
        output: OutputBundle,
    ) -> DeliveryResult: ...


class LoadEmailConfigFromDict(Protocol):
    """Load EmailConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> EmailConfig: ...


class LoadNotifierOptionsFromDict(Protocol):
    """Load NotifierOptions from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> NotifierOptions: ...


class LoadDirectoryFromDict(Protocol):
    """Build the account/language directory from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> Directory: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "Directory",
    "DisplayConfig",
    "DispatchMail",
    "GetConfig",
    "GetDefaultLanguage",
    "InitLogging",
    "ListLanguages",
    "LoadAccount",
    "LoadDirectoryFromDict",
    "LoadEmailConfigFromDict",
    "LoadNotifierOptionsFromDict",
    "SendMail",
]
