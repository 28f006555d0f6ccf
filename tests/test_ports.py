"""Port behavioral contract tests for the in-memory adapter implementations.

Production adapters are exercised through the CLI tests; static conformance
is enforced by pyright via the assertions in ``composition``.
"""

from __future__ import annotations

from dataclasses import fields

import pytest
from lib_layered_config import Config

from greeter.adapters.memory import (
    GreetingSpy,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
)
from greeter.domain.enums import Greeting, OutputFormat
from greeter.domain.models import Person


@pytest.mark.os_agnostic
def test_get_config_in_memory_returns_empty_config() -> None:
    """The in-memory loader yields an empty Config for any profile."""
    config = get_config_in_memory(profile="weekend")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_get_default_config_path_in_memory_names_the_default_file() -> None:
    """The synthetic path keeps the real file name."""
    assert get_default_config_path_in_memory().name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_display_and_logging_in_memory_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """In-memory display and logging produce no output."""
    config = Config({"greeter": {"default_greeting": "hello"}}, {})

    display_config_in_memory(config, output_format=OutputFormat.JSON)
    init_logging_in_memory(config)

    assert capsys.readouterr() == ("", "")


@pytest.mark.os_agnostic
def test_greeting_spy_records_calls_without_printing(capsys: pytest.CaptureFixture[str]) -> None:
    """GreetingSpy keeps every call and only the lines that would be printed."""
    spy = GreetingSpy()

    spy.greet(Greeting.HELLO, Person("Ada"))
    spy.greet(Greeting.GOODBYE, None)
    spy.greet(Greeting.GOODBYE, Person("Grace"))

    assert spy.calls == [
        (Greeting.HELLO, Person("Ada")),
        (Greeting.GOODBYE, None),
        (Greeting.GOODBYE, Person("Grace")),
    ]
    assert spy.lines == ["Hello, Ada!", "Goodbye, Grace!"]
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_greeting_spy_clear_resets_state() -> None:
    """clear() empties both capture lists."""
    spy = GreetingSpy()
    spy.greet(Greeting.HELLO, Person("Ada"))

    spy.clear()

    assert spy.calls == []
    assert spy.lines == []


@pytest.mark.os_agnostic
def test_build_testing_returns_fully_populated_app_services() -> None:
    """build_testing() wires an in-memory implementation for every port."""
    from greeter.composition import AppServices, build_testing

    services = build_testing()

    assert isinstance(services, AppServices)
    for service_field in fields(AppServices):
        assert callable(getattr(services, service_field.name))


@pytest.mark.os_agnostic
def test_build_testing_routes_greet_to_the_given_spy(capsys: pytest.CaptureFixture[str]) -> None:
    """A spy passed to build_testing receives the greet calls."""
    from greeter.composition import build_testing

    spy = GreetingSpy()
    services = build_testing(spy=spy)

    services.greet(Greeting.GOODBYE, Person("Grace"))

    assert spy.lines == ["Goodbye, Grace!"]
    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_build_production_greet_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Production wiring uses the stdout greet use case."""
    from greeter.composition import build_production

    build_production().greet(Greeting.HELLO, Person("Ada"))

    assert capsys.readouterr().out == "Hello, Ada!\n"
