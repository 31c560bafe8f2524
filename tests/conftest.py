"""Shared pytest fixtures for notifier, adapter and CLI tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English so tests state what they need.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from message_notify.adapters.directory import ConfigDirectory
from message_notify.domain.models import Account, Language

if TYPE_CHECKING:
    from message_notify.adapters.memory.email import MailSpy
    from message_notify.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

ENGLISH = Language(code="en", name="English", native="English")
FRENCH = Language(code="fr", name="French", native="Français")
GERMAN = Language(code="de", name="German", native="Deutsch")

#: Configuration sections describing a small site with three accounts.
SITE_CONFIG: dict[str, Any] = {
    "email": {
        "smtp_hosts": ["smtp.test.com:587"],
        "from_address": "noreply@test.com",
    },
    "languages": {
        "default": "en",
        "available": {
            "en": {"name": "English", "native": "English"},
            "fr": {"name": "French", "native": "Français"},
            "de": {"name": "German", "native": "Deutsch"},
        },
    },
    "accounts": {
        "1": {"mail": "a@x.com", "language": "fr"},
        "2": {"mail": "c@z.com", "language": "und"},
        "3": {"mail": "", "language": "en"},
    },
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when parsing output so log lines on stderr do not
    contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from message_notify.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a monkeypatched get_config loses cache_clear.
    """
    from message_notify.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def site_directory() -> ConfigDirectory:
    """A directory with English, French and German and three accounts.

    * uid 1: ``a@x.com``, French
    * uid 2: ``c@z.com``, no language (``und``)
    * uid 3: no address, English
    """
    return ConfigDirectory(
        accounts={
            1: Account(uid=1, mail="a@x.com", language="fr"),
            2: Account(uid=2, mail="c@z.com", language="und"),
            3: Account(uid=3, mail="", language="en"),
        },
        languages={"en": ENGLISH, "fr": FRENCH, "de": GERMAN},
        default_code="en",
    )


@pytest.fixture
def mail_spy() -> MailSpy:
    """A fresh MailSpy per test."""
    from message_notify.adapters.memory import MailSpy

    return MailSpy()


@dataclass
class NotifyCliContext:
    """Services factory and mail spy for CLI delivery tests.

    Attributes:
        factory: Callable returning wired AppServices, passed as ``obj``.
        spy: MailSpy capturing every delivered notification.
    """

    factory: Callable[[], Any]
    spy: MailSpy


@pytest.fixture
def notify_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], NotifyCliContext]:
    """Create a CLI context with injected configuration and a MailSpy.

    The returned function takes the full configuration mapping (use
    ``SITE_CONFIG`` as a base) and wires in-memory mail and logging while
    keeping the real section loaders.

    Example:
        def test_deliver(cli_runner, notify_cli_context) -> None:
            ctx = notify_cli_context(SITE_CONFIG)
            result = cli_runner.invoke(cli, ["deliver", "--uid", "1", ...], obj=ctx.factory)
            assert ctx.spy.sent[0]["recipient"] == "a@x.com"
    """
    from message_notify.adapters.memory import MailSpy, init_logging_in_memory
    from message_notify.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> NotifyCliContext:
        spy = MailSpy()
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            send_mail=spy.send_mail,
            load_email_config_from_dict=prod.load_email_config_from_dict,
            load_notifier_options_from_dict=prod.load_notifier_options_from_dict,
            load_directory_from_dict=prod.load_directory_from_dict,
            init_logging=init_logging_in_memory,
        )
        return NotifyCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory."""
    from message_notify.adapters.memory import init_logging_in_memory
    from message_notify.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            send_mail=prod.send_mail,
            load_email_config_from_dict=prod.load_email_config_from_dict,
            load_notifier_options_from_dict=prod.load_notifier_options_from_dict,
            load_directory_from_dict=prod.load_directory_from_dict,
            init_logging=init_logging_in_memory,
        )
        return lambda: test_services

    return _create
