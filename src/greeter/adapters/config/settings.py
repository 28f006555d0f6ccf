"""Typed access to the ``[greeter]`` configuration section.

Contents:
    * :class:`GreeterConfigModel` - Pydantic model for the section.
    * :func:`load_greeter_settings` - Parse the section out of a Config.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from greeter.domain.enums import Greeting
from greeter.domain.errors import ConfigurationError


class GreeterConfigModel(BaseModel):
    """Pydantic model for [greeter] config section validation.

    Example:
        >>> GreeterConfigModel().default_greeting
        <Greeting.HELLO: 'hello'>
        >>> GreeterConfigModel(default_greeting="GOODBYE").default_greeting
        <Greeting.GOODBYE: 'goodbye'>
    """

    default_greeting: Greeting = Greeting.HELLO

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("default_greeting", mode="before")
    @classmethod
    def _normalise_case(cls, value: object) -> object:
        # Environment variables and --set values arrive in any case.
        if isinstance(value, str):
            return value.strip().lower()
        return value


def load_greeter_settings(config: Config) -> GreeterConfigModel:
    """Parse the ``[greeter]`` section of *config*.

    Args:
        config: Loaded layered configuration.

    Returns:
        Validated settings; a missing section yields the defaults.

    Raises:
        ConfigurationError: If the section holds an invalid value.

    Example:
        >>> cfg = Config({"greeter": {"default_greeting": "goodbye"}}, {})
        >>> load_greeter_settings(cfg).default_greeting.value
        'goodbye'
        >>> load_greeter_settings(Config({}, {})).default_greeting.value
        'hello'
    """
    raw: object = config.get("greeter", default={})
    try:
        return GreeterConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        choices = ", ".join(g.value for g in Greeting)
        msg = f"Invalid [greeter] configuration: default_greeting must be one of {choices}"
        raise ConfigurationError(msg) from exc


__all__ = [
    "GreeterConfigModel",
    "load_greeter_settings",
]
