"""Deliver one message notification by email."""

from __future__ import annotations

import functools
import logging

import lib_log_rich.runtime
import rich_click as click

from message_notify.application.notifier import EmailNotifier
from message_notify.domain.behaviors import VIEW_MODE_BODY, VIEW_MODE_SUBJECT
from message_notify.domain.models import LANGUAGE_NONE, Message

from ...constants import CLICK_CONTEXT_SETTINGS
from ...context import get_cli_context
from ._common import (
    execute_with_delivery_error_handling,
    load_and_validate_email_config,
    load_directory,
    load_notifier_options,
)

logger = logging.getLogger(__name__)


@click.command("deliver", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--uid", type=int, required=True, help="Account id owning the message")
@click.option("--type", "message_type", required=True, help="Message type; used as the mail category")
@click.option("--subject", required=True, help="Rendered subject view mode")
@click.option("--body", required=True, help="Rendered body view mode (markup is stripped)")
@click.option(
    "--language",
    default=LANGUAGE_NONE,
    show_default=True,
    help="Message language code, used with --language-override",
)
@click.option("--mail", default=None, help="Recipient override (default: [notifier] mail, else account address)")
@click.option(
    "--language-override/--no-language-override",
    default=None,
    help="Compose in the message language instead of the account language",
)
@click.pass_context
def cli_deliver(
    ctx: click.Context,
    uid: int,
    message_type: str,
    subject: str,
    body: str,
    language: str,
    mail: str | None,
    language_override: bool | None,
) -> None:
    """Send a rendered message to its owner by email.

    Recipient and language follow the ``[notifier]`` section unless
    ``--mail`` or ``--language-override`` are given.
    """
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    extra = {"command": "deliver", "uid": uid, "category": message_type}

    with lib_log_rich.runtime.bind(job_id="cli-deliver", extra=extra):
        email_config = load_and_validate_email_config(cli_ctx.config, services.load_email_config_from_dict)
        directory = load_directory(cli_ctx.config, services.load_directory_from_dict)
        options = load_notifier_options(
            cli_ctx.config,
            services.load_notifier_options_from_dict,
            mail=mail,
            language_override=language_override,
        )
        notifier = EmailNotifier(
            load_account=directory.load_account,
            list_languages=directory.list_languages,
            default_language=directory.default_language,
            dispatch_mail=functools.partial(services.send_mail, config=email_config),
        )
        message = Message(type=message_type, uid=uid, language=language)
        output = {VIEW_MODE_SUBJECT: subject, VIEW_MODE_BODY: body}

        result = execute_with_delivery_error_handling(functools.partial(notifier.deliver, message, options, output))
        logger.info("Notification delivered via CLI", extra={"recipient": result.recipient, "language": result.language})
        click.echo(f"\nNotification sent to {result.recipient} ({result.language}).")


__all__ = ["cli_deliver"]
