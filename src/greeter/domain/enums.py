"""Type-safe domain enums for greeting kinds and output formats."""

from __future__ import annotations

from enum import Enum


class Greeting(str, Enum):
    """Closed set of salutations a person can be greeted with.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HELLO: Greet someone arriving.
        GOODBYE: Greet someone leaving.

    Example:
        >>> Greeting.HELLO.value
        'hello'
        >>> Greeting.GOODBYE.salutation
        'Goodbye'
        >>> Greeting("goodbye") is Greeting.GOODBYE
        True
    """

    HELLO = "hello"
    GOODBYE = "goodbye"

    @property
    def salutation(self) -> str:
        """Literal text that opens the greeting line."""
        return _SALUTATIONS[self]


_SALUTATIONS: dict[Greeting, str] = {
    Greeting.HELLO: "Hello",
    Greeting.GOODBYE: "Goodbye",
}


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Greeting",
    "OutputFormat",
]
