"""Email adapter - SMTP mail facility.

Provides the mail facility that sends rendered notifications via btx_lib_mail.

Contents:
    * :class:`.config.EmailConfig` - SMTP configuration container
    * :func:`.config.load_email_config_from_dict` - Config dict loader
    * :func:`.transport.dispatch_mail` - Send one rendered notification
    * :func:`.validation.validate_recipient` - Recipient address check
"""

from __future__ import annotations

from .config import EmailConfig, load_email_config_from_dict
from .transport import dispatch_mail
from .validation import validate_recipient

__all__ = [
    "EmailConfig",
    "dispatch_mail",
    "load_email_config_from_dict",
    "validate_recipient",
]
