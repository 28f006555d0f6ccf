"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects and domain services that form the core of the
greeting utility.

Contents:
    * :mod:`.behaviors` - Salutation formatting
    * :mod:`.enums` - Domain enumerations (Greeting, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.models` - Domain records (Person)
"""

from __future__ import annotations

from .behaviors import format_salutation
from .enums import Greeting, OutputFormat
from .errors import ConfigurationError
from .models import Person

__all__ = [
    # Behaviors
    "format_salutation",
    # Enums
    "Greeting",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    # Models
    "Person",
]
