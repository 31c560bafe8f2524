"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config
from ..adapters.config.notifier import load_notifier_options_from_dict

# Directory services
from ..adapters.directory.config import load_directory_from_dict

# Email services
from ..adapters.email.config import load_email_config_from_dict
from ..adapters.email.transport import dispatch_mail

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright checks each adapter structurally
# satisfies its Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.email import MailSpy
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadDirectoryFromDict,
        LoadEmailConfigFromDict,
        LoadNotifierOptionsFromDict,
        SendMail,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_send_mail: SendMail = dispatch_mail
    _assert_load_email_config_from_dict: LoadEmailConfigFromDict = load_email_config_from_dict
    _assert_load_notifier_options_from_dict: LoadNotifierOptionsFromDict = load_notifier_options_from_dict
    _assert_load_directory_from_dict: LoadDirectoryFromDict = load_directory_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    send_mail: SendMail
    load_email_config_from_dict: LoadEmailConfigFromDict
    load_notifier_options_from_dict: LoadNotifierOptionsFromDict
    load_directory_from_dict: LoadDirectoryFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        send_mail=dispatch_mail,
        load_email_config_from_dict=load_email_config_from_dict,
        load_notifier_options_from_dict=load_notifier_options_from_dict,
        load_directory_from_dict=load_directory_from_dict,
        init_logging=init_logging,
    )


def build_testing(*, spy: MailSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Directory and notifier option loaders stay real: they only parse the
    configuration mapping they are handed.

    Args:
        spy: Optional MailSpy for capturing deliveries. When None, a fresh
            MailSpy is created. Pass your own spy to assert on captured mail.
    """
    from ..adapters.memory import (
        MailSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_email_config_from_dict_in_memory,
    )

    mail_spy = spy if spy is not None else MailSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        send_mail=mail_spy.send_mail,
        load_email_config_from_dict=load_email_config_from_dict_in_memory,
        load_notifier_options_from_dict=load_notifier_options_from_dict,
        load_directory_from_dict=load_directory_from_dict,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    "load_notifier_options_from_dict",
    # Directory
    "load_directory_from_dict",
    # Email
    "dispatch_mail",
    "load_email_config_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
