"""Deliver rendered message notifications by email.

Public surface:

* :class:`EmailNotifier` - the delivery use case.
* :func:`view_modes` - the subject/body view modes a renderer must produce.
* Domain value objects (:class:`Message`, :class:`NotifierOptions`, ...).
* :func:`get_config` - layered configuration with bundled defaults.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .application.notifier import EmailNotifier
from .composition import get_config
from .domain.behaviors import view_modes
from .domain.models import Account, DeliveryResult, Language, Message, NotifierOptions

__all__ = [
    "Account",
    "DeliveryResult",
    "EmailNotifier",
    "Language",
    "Message",
    "NotifierOptions",
    "get_config",
    "print_info",
    "view_modes",
]
