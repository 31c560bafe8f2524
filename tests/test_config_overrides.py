"""``--set`` override parsing and merging tests."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from message_notify.adapters.config.overrides import ConfigOverride, apply_overrides, coerce_value, parse_override

# ======================== parse_override ========================


@pytest.mark.os_agnostic
def test_parse_override_splits_section_and_key() -> None:
    assert parse_override("notifier.mail=ops@example.com") == ConfigOverride(
        section="notifier", key_path=("mail",), value="ops@example.com"
    )


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_signs_in_value() -> None:
    assert parse_override("email.smtp_password=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_override_supports_nested_keys() -> None:
    assert parse_override("accounts.7.language=de").key_path == ("7", "language")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("notifier.mail", "must contain '='"),
        ("mail=x", "at least one dot"),
        (".mail=x", "section name is empty"),
        ("accounts..mail=x", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


# ======================== coerce_value ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("false", False),
        ("12", 12),
        ("2.5", 2.5),
        ('["a:25", "b:25"]', ["a:25", "b:25"]),
        ("ops@example.com", "ops@example.com"),
        ("", ""),
    ],
)
def test_coerce_value_parses_json_or_keeps_string(raw: str, expected: object) -> None:
    assert coerce_value(raw) == expected


# ======================== apply_overrides ========================


@pytest.mark.os_agnostic
def test_apply_overrides_merges_into_existing_section() -> None:
    config = Config({"notifier": {"mail": "", "language_override": False}}, {})

    merged = apply_overrides(config, ("notifier.language_override=true",))

    assert dict(merged["notifier"]) == {"mail": "", "language_override": True}


@pytest.mark.os_agnostic
def test_apply_overrides_creates_missing_sections() -> None:
    merged = apply_overrides(Config({}, {}), ("accounts.7.mail=g@h.com",))

    assert merged["accounts"]["7"]["mail"] == "g@h.com"


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_config() -> None:
    config = Config({"notifier": {}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_leaves_original_untouched() -> None:
    config = Config({"notifier": {"mail": ""}}, {})

    apply_overrides(config, ("notifier.mail=ops@example.com",))

    assert config["notifier"]["mail"] == ""
