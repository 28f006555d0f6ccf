"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the dotted path; the first dot in the path ends the
    section name.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or any path
            component is empty.

    Examples:
        >>> override = parse_override("greeter.default_greeting=goodbye")
        >>> override.section, override.key_path, override.value
        ('greeter', ('default_greeting',), 'goodbye')

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *rest = path_part.split(".")
    key_parts = tuple(rest)

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_parts, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("null")
        (True, 42, None)
        >>> coerce_value("goodbye")
        'goodbye'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write *override* into *target*, creating intermediate tables.

    Raises:
        TypeError: If a non-table value already sits on the key path.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> d
        {'s': {'x': {'y': 3}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            msg = f"Expected dict at key {part!r}, got {type(existing).__name__}"
            raise TypeError(msg)
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` string deep-merged on top.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"greeter": {"default_greeting": "hello"}}, {})
        >>> apply_overrides(cfg, ("greeter.default_greeting=goodbye",))["greeter"]["default_greeting"]
        'goodbye'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "parse_override",
    "coerce_value",
    "apply_overrides",
]
