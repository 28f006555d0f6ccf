"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Greeting commands from :mod:`.greet_cmd`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet_cmd import cli_goodbye, cli_greet, cli_hello
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_goodbye",
    "cli_greet",
    "cli_hello",
    "cli_info",
]
