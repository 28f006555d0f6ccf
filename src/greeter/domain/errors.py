"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration value is malformed, such as an unknown
    ``greeter.default_greeting``. Caught at the CLI boundary to provide a
    user-friendly error message.

    Example:
        >>> from greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unknown default greeting: 'howdy'")
        >>> str(err)
        "Unknown default greeting: 'howdy'"
    """


__all__ = [
    "ConfigurationError",
]
