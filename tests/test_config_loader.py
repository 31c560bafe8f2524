"""Bundled defaults and profile validation for the layered loader."""

from __future__ import annotations

import pytest
import rtoml

from message_notify.adapters.config.loader import get_config, get_default_config_path, validate_profile
from message_notify.adapters.config.notifier import load_notifier_options_from_dict


@pytest.mark.os_agnostic
def test_default_config_file_ships_with_package() -> None:
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_default_config_declares_every_section() -> None:
    defaults = rtoml.load(get_default_config_path())

    assert {"notifier", "email", "languages", "lib_log_rich"} <= set(defaults)
    assert defaults["languages"]["default"] in defaults["languages"]["available"]


@pytest.mark.os_agnostic
def test_default_notifier_options_are_neutral() -> None:
    options = load_notifier_options_from_dict(rtoml.load(get_default_config_path()))

    assert options.mail is None
    assert options.language_override is False


@pytest.mark.os_agnostic
def test_get_config_is_cached_per_profile(clear_config_cache: None) -> None:
    assert get_config() is get_config()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "a/b"])
def test_validate_profile_rejects_path_like_names(profile: str) -> None:
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_get_config_validates_profile_before_loading(clear_config_cache: None) -> None:
    with pytest.raises(ValueError):
        get_config(profile="../escape")
