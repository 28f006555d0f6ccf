"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from .enums import Greeting
from .models import Person


def format_salutation(greeting: Greeting, person: Person | None) -> str | None:
    r"""Return the salutation line for *person*, or ``None`` when absent.

    The name is inserted verbatim; no trimming or escaping happens here.

    Args:
        greeting: Which salutation to use.
        person: Who to greet. ``None`` means nobody is there to greet.

    Returns:
        ``"<Salutation>, <name>!"`` without a trailing newline, or ``None``
        when *person* is ``None``.

    Example:
        >>> format_salutation(Greeting.HELLO, Person("Ada"))
        'Hello, Ada!'
        >>> format_salutation(Greeting.GOODBYE, Person(""))
        'Goodbye, !'
        >>> format_salutation(Greeting.HELLO, None) is None
        True
    """
    if person is None:
        return None
    return f"{greeting.salutation}, {person.name}!"


__all__ = [
    "format_salutation",
]
