"""Static package metadata surfaced to CLI commands and documentation.

The values are kept in sync with ``pyproject.toml`` at release time so the
CLI can report them without reading installed distribution metadata.

Contents:
    * Module-level metadata constants (name, version, shell command, ...).
    * ``LAYEREDCONF_*`` identifiers used by :mod:`lib_layered_config`.
    * :func:`print_info` - render the metadata for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greeter"
title: Final[str] = "Print a HELLO or GOODBYE salutation for a person"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/greeter/greeter"
author: Final[str] = "greeter contributors"
author_email: Final[str] = "greeter@users.noreply.github.com"
shell_command: Final[str] = "greeter"

#: Vendor, application and slug identifiers that determine the platform
#: specific configuration directories searched by lib_layered_config.
LAYEREDCONF_VENDOR: Final[str] = "greeter"
LAYEREDCONF_APP: Final[str] = "greeter"
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
