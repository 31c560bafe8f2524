"""Shared helpers for the deliver command.

Builds the notifier collaborators from configuration and maps domain
exceptions onto POSIX exit codes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any, NoReturn

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from message_notify import __init__conf__
from message_notify.adapters.config.notifier import NotifierOptionsModel
from message_notify.adapters.email.config import EmailConfig
from message_notify.application.ports import (
    Directory,
    LoadDirectoryFromDict,
    LoadEmailConfigFromDict,
    LoadNotifierOptionsFromDict,
)
from message_notify.domain.errors import (
    AccountNotFoundError,
    ConfigurationError,
    DeliveryError,
    UnknownLanguageError,
)
from message_notify.domain.models import DeliveryResult, NotifierOptions

from ...exit_codes import ExitCode

logger = logging.getLogger(__name__)


def load_and_validate_email_config(config: Config, loader: LoadEmailConfigFromDict) -> EmailConfig:
    """Extract the ``[email]`` section and insist on at least one SMTP host.

    Raises:
        SystemExit: CONFIG_ERROR (78) when the section is invalid or has no hosts.
    """
    try:
        email_config = loader(config.as_dict())
    except ValidationError as exc:
        fail("Invalid email configuration", "Invalid email configuration", exc, exit_code=ExitCode.CONFIG_ERROR)

    if not email_config.smtp_hosts:
        logger.error("No SMTP hosts configured")
        click.echo(
            "\nError: No SMTP hosts configured. Please configure email.smtp_hosts in your config file.", err=True
        )
        click.echo(f"See: {__init__conf__.shell_command} config --section email", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR)

    return email_config


def load_directory(config: Config, loader: LoadDirectoryFromDict) -> Directory:
    """Build the account/language directory, exiting 78 on bad configuration."""
    try:
        return loader(config.as_dict())
    except (ValidationError, ConfigurationError) as exc:
        fail(
            "Invalid directory configuration",
            "Invalid accounts/languages configuration",
            exc,
            exit_code=ExitCode.CONFIG_ERROR,
        )


def load_notifier_options(
    config: Config,
    loader: LoadNotifierOptionsFromDict,
    **overrides: Any,
) -> NotifierOptions:
    """Load ``[notifier]`` and layer CLI overrides on top.

    ``None`` overrides mean "not given on the command line". Overrides go
    through :class:`NotifierOptionsModel` so an empty ``--mail`` is treated
    like an empty configured address.

    Raises:
        SystemExit: CONFIG_ERROR (78) when the section is invalid.
    """
    try:
        options = loader(config.as_dict())
    except ValidationError as exc:
        fail("Invalid notifier configuration", "Invalid notifier configuration", exc, exit_code=ExitCode.CONFIG_ERROR)

    given = {key: value for key, value in overrides.items() if value is not None}
    if not given:
        return options
    merged = {"mail": options.mail, "language_override": options.language_override, **given}
    return NotifierOptionsModel.model_validate(merged).to_options()


def execute_with_delivery_error_handling(operation: Callable[[], DeliveryResult]) -> DeliveryResult:
    """Run ``operation`` and translate failures into exit codes.

    Exceptions are matched most specific first:

    1. ConfigurationError -> CONFIG_ERROR (78)
    2. AccountNotFoundError -> NO_USER (67)
    3. UnknownLanguageError, ValueError -> INVALID_ARGUMENT (22)
    4. DeliveryError, RuntimeError -> SMTP_FAILURE (69)
    5. anything else -> GENERAL_ERROR (1)

    A result with ``result=False`` also exits with SMTP_FAILURE.

    Set ``DEVELOPMENT_MODE`` to re-raise unexpected exceptions with their
    full traceback.
    """
    try:
        result = operation()
    except ConfigurationError as exc:
        fail("Notification configuration error", "Configuration error", exc, exit_code=ExitCode.CONFIG_ERROR)
    except AccountNotFoundError as exc:
        fail("Message owner not found", "Unknown account", exc, exit_code=ExitCode.NO_USER)
    except UnknownLanguageError as exc:
        fail("Notification language unavailable", "Unknown language", exc, exit_code=ExitCode.INVALID_ARGUMENT)
    except ValueError as exc:
        fail("Invalid notification parameters", "Invalid notification parameters", exc, exit_code=ExitCode.INVALID_ARGUMENT)
    except (DeliveryError, RuntimeError) as exc:
        fail("SMTP delivery failed", "Failed to send notification", exc, exit_code=ExitCode.SMTP_FAILURE)
    except Exception as exc:
        if os.environ.get("DEVELOPMENT_MODE"):
            raise
        fail(
            "Unexpected error delivering notification",
            "Unexpected error",
            exc,
            exit_code=ExitCode.GENERAL_ERROR,
            log_traceback=True,
        )

    if not result.result:
        logger.error("Mail facility rejected notification", extra={"recipient": result.recipient})
        click.echo("\nNotification sending failed.", err=True)
        raise SystemExit(ExitCode.SMTP_FAILURE)
    return result


def fail(
    log_message: str,
    user_message: str,
    exc: Exception,
    *,
    exit_code: ExitCode = ExitCode.GENERAL_ERROR,
    log_traceback: bool = False,
) -> NoReturn:
    """Log ``exc``, print a one-line error and exit with ``exit_code``."""
    logger.error(
        log_message,
        extra={"error": str(exc), "error_type": type(exc).__name__},
        exc_info=log_traceback,
    )
    click.echo(f"\nError: {user_message} - {exc}", err=True)
    raise SystemExit(exit_code)


__all__ = [
    "execute_with_delivery_error_handling",
    "fail",
    "load_and_validate_email_config",
    "load_directory",
    "load_notifier_options",
]
