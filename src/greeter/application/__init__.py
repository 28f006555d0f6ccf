"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.greeting` - The greet use case (stdout side effect)
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .greeting import greet
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    Greet,
    InitLogging,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greet",
    "InitLogging",
    "greet",
]
