"""``--set SECTION.KEY=VALUE`` overrides layered on top of the loaded Config.

Typical uses are pointing a one-off delivery at another relay
(``email.smtp_hosts=["relay:25"]``) or patching a single account
(``accounts.7.mail=g@h.com``) without editing any file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Whatever a JSON literal or a bare string on the command line can become."""

OverrideTree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` option after parsing."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    def merge_into(self, tree: OverrideTree) -> None:
        """Write this value into ``tree``, creating the intermediate tables.

        Raises:
            TypeError: When a path component already holds a scalar.

        Example:
            >>> tree: OverrideTree = {}
            >>> ConfigOverride("accounts", ("7", "mail"), "g@h.com").merge_into(tree)
            >>> tree
            {'accounts': {'7': {'mail': 'g@h.com'}}}
        """
        *parents, leaf = self.key_path
        table: dict[str, object] = tree.setdefault(self.section, {})
        for name in parents:
            child = table.setdefault(name, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {name!r}, got {type(child).__name__}")
            table = cast("dict[str, object]", child)
        table[leaf] = self.value


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal, keeping it as text when it is not one.

    Examples:
        >>> coerce_value("true"), coerce_value("30.5")
        (True, 30.5)
        >>> coerce_value('["smtp.example.com:587"]')
        ['smtp.example.com:587']
        >>> coerce_value("ops@example.com")
        'ops@example.com'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Only the first ``=`` splits path from value, so values may contain ``=``.

    Raises:
        ValueError: Missing ``=``, no dot in the path, or an empty component.

    Examples:
        >>> parse_override("notifier.language_override=true")
        ConfigOverride(section='notifier', key_path=('language_override',), value=True)
        >>> parse_override("languages.available.de.name=German").key_path
        ('available', 'de', 'name')
    """
    path, separator, text = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(rest.split("."))
    if "" in key_path:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section, key_path, coerce_value(text))


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` value deep-merged on top.

    All strings are parsed before anything is merged, so one malformed
    override leaves the configuration untouched.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"notifier": {"mail": ""}}, {})
        >>> apply_overrides(cfg, ("notifier.mail=ops@example.com",))["notifier"]["mail"]
        'ops@example.com'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    tree: OverrideTree = {}
    for override in [parse_override(raw) for raw in raw_overrides]:
        override.merge_into(tree)
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
