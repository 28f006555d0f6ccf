"""Configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or escape the config tree.

    Args:
        profile: The profile name to validate.
        max_length: Optional maximum length. Defaults to DEFAULT_MAX_PROFILE_LENGTH (64).

    Raises:
        ValueError: If lib_layered_config refuses the profile name.

    Examples:
        >>> validate_profile("weekend")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path of the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One entry per (profile, start_dir); a CLI process is short-lived.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Read all configuration layers. The caller validates *profile*."""
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the greeter configuration merged across all layers.

    Layers are applied in precedence order
    ``defaults -> app -> host -> user -> dotenv -> env``; the bundled
    ``defaultconfig.toml`` provides the ``[greeter]`` and ``[lib_log_rich]``
    defaults. A profile inserts ``profile/<name>/`` into every searched path.

    Args:
        profile: Optional profile name (alphanumeric, hyphens, underscores).
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: If *profile* is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("greeter.default_greeting")
        'hello'
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached configuration so the next call re-reads every layer."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once the wrapper is
# cast to the Protocol, so it is attached by hand.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "validate_profile",
    "get_config",
    "get_default_config_path",
]
