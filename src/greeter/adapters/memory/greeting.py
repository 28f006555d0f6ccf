"""In-memory greeting adapter for testing.

Contents:
    * :class:`GreetingSpy` - Records greet calls instead of printing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.behaviors import format_salutation
from ...domain.enums import Greeting
from ...domain.models import Person


def _empty_call_list() -> list[tuple[Greeting, Person | None]]:
    """Create an empty typed list for greet calls."""
    return []


def _empty_line_list() -> list[str]:
    """Create an empty typed list for salutation lines."""
    return []


@dataclass
class GreetingSpy:
    """Captures greet operations for test assertions.

    Each test should create its own GreetingSpy to avoid cross-test pollution.
    :meth:`greet` matches the ``Greet`` port, so the spy drops into
    ``AppServices`` in place of the stdout writer.

    Attributes:
        calls: Every ``(greeting, person)`` pair received, absent persons included.
        lines: Salutation lines that would have been printed.

    Example:
        >>> spy = GreetingSpy()
        >>> spy.greet(Greeting.HELLO, Person("Ada"))
        >>> spy.greet(Greeting.GOODBYE, None)
        >>> spy.lines
        ['Hello, Ada!']
        >>> len(spy.calls)
        2
    """

    calls: list[tuple[Greeting, Person | None]] = field(default_factory=_empty_call_list)
    lines: list[str] = field(default_factory=_empty_line_list)

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.calls.clear()
        self.lines.clear()

    def greet(self, greeting: Greeting, person: Person | None) -> None:
        """Record the call and the line it would have written."""
        self.calls.append((greeting, person))
        line = format_salutation(greeting, person)
        if line is not None:
            self.lines.append(line)


__all__ = ["GreetingSpy"]
