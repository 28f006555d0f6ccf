"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no stdout, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.greeting` - In-memory greeting adapter (GreetingSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .greeting import GreetingSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from greeter.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        Greet,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_greet: Greet = GreetingSpy().greet
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "GreetingSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
