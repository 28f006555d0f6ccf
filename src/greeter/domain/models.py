"""Domain records passed into the greeting operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Person:
    """Someone to greet, identified only by a display name.

    The caller owns the record; greeting functions read ``name`` and keep
    no reference once they return.

    Attributes:
        name: Display name, used verbatim (an empty string is allowed).

    Example:
        >>> Person("Ada").name
        'Ada'
    """

    name: str


__all__ = ["Person"]
