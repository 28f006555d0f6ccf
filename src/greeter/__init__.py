"""Public package surface exposing the greeting operation and its types.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Greeting, Person, salutation formatting
- Application exports: the greet use case
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeting import greet

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import format_salutation
from .domain.enums import Greeting
from .domain.models import Person

__all__ = [
    "Greeting",
    "Person",
    "format_salutation",
    "get_config",
    "greet",
    "print_info",
]
