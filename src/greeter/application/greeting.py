"""Greeting use case - format a salutation and write it to standard output.

Contents:
    * :func:`greet` - Print the salutation line for a person, if any.

System Role:
    Sits on top of :func:`greeter.domain.behaviors.format_salutation` and
    owns the single side effect of the project: writing to ``sys.stdout``.
"""

from __future__ import annotations

import logging
import sys

from ..domain.behaviors import format_salutation
from ..domain.enums import Greeting
from ..domain.models import Person

logger = logging.getLogger(__name__)


def greet(greeting: Greeting, person: Person | None) -> None:
    """Write ``"<Salutation>, <name>!"`` plus a newline to standard output.

    An absent person is a defined no-op: nothing is written and no error
    is raised. Calls share no state, so identical inputs always produce
    identical lines.

    Args:
        greeting: Which salutation to use.
        person: Who to greet, or ``None``. Only read, never retained.

    Example:
        >>> greet(Greeting.HELLO, Person("Ada"))
        Hello, Ada!
        >>> greet(Greeting.GOODBYE, None)
    """
    line = format_salutation(greeting, person)
    if line is None:
        logger.debug("No person to greet, skipping %s", greeting.value)
        return
    sys.stdout.write(f"{line}\n")


__all__ = ["greet"]
