"""Static package metadata surfaced to CLI commands and documentation.

Kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*`` identifiers
determine the platform-specific configuration directories used by
lib_layered_config.
"""

from __future__ import annotations

name = "message_notify"
title = "Deliver rendered message notifications by email"
version = "1.0.0"
homepage = "https://github.com/message-notify/message-notify"
author = "message-notify maintainers"
author_email = "maintainers@message-notify.invalid"
shell_command = "message-notify"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "message-notify"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "Message Notify"
#: Configuration slug for lib_layered_config Linux paths and env prefix.
LAYEREDCONF_SLUG: str = "message-notify"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for message_notify:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
