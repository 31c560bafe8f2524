"""Notifier options model tests: the ``[notifier]`` section."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from message_notify.adapters.config import NotifierOptionsModel, load_notifier_options_from_dict
from message_notify.domain.models import NotifierOptions


@pytest.mark.os_agnostic
def test_missing_section_yields_defaults() -> None:
    assert load_notifier_options_from_dict({}) == NotifierOptions(mail=None, language_override=False)


@pytest.mark.os_agnostic
def test_configured_values_are_read() -> None:
    options = load_notifier_options_from_dict({"notifier": {"mail": "ops@example.com", "language_override": True}})

    assert options == NotifierOptions(mail="ops@example.com", language_override=True)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_mail_means_not_set(blank: str) -> None:
    assert load_notifier_options_from_dict({"notifier": {"mail": blank}}).mail is None


@pytest.mark.os_agnostic
def test_mail_is_trimmed() -> None:
    assert load_notifier_options_from_dict({"notifier": {"mail": " ops@example.com "}}).mail == "ops@example.com"


@pytest.mark.os_agnostic
def test_legacy_spelling_with_space_is_accepted() -> None:
    options = load_notifier_options_from_dict({"notifier": {"language override": True}})

    assert options.language_override is True


@pytest.mark.os_agnostic
def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_notifier_options_from_dict({"notifier": {"mial": "typo@example.com"}})


@pytest.mark.os_agnostic
def test_model_is_frozen() -> None:
    model = NotifierOptionsModel()

    with pytest.raises(ValidationError):
        model.mail = "x@y.com"  # type: ignore[misc]
