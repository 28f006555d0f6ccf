"""Shared pytest fixtures for CLI, greeting, and module-entry tests.

All shared fixtures live here; tests receive them through pytest's conftest
discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.adapters.memory.greeting import GreetingSpy
    from greeter.composition import AppServices

_COVERAGE_BASENAME = ".coverage.greeter"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for the salutation itself; log records may land
    on stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a test may monkeypatch ``get_config`` away.
    """
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a production services factory.

    Only ``get_config`` is replaced; every other service is the production one.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeter": {"default_greeting": "hello"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "default_greeting" in result.stdout
    """
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            greet=prod.greet,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from greeter.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            greet=prod.greet,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class GreetCliContext:
    """Services factory and greeting spy for CLI greeting tests.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: GreetingSpy instance recording every greet call.
    """

    factory: Callable[[], Any]
    spy: GreetingSpy


@pytest.fixture
def greet_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], GreetCliContext]:
    """Return a function building a CLI context whose greet service is a spy.

    Configuration comes from the given dict; logging stays the production
    adapter so command logging runs for real.

    Example:
        def test_hello(cli_runner, greet_cli_context) -> None:
            ctx = greet_cli_context({})
            cli_runner.invoke(cli, ["hello", "Ada"], obj=ctx.factory)
            assert ctx.spy.lines == ["Hello, Ada!"]
    """
    from greeter.adapters.memory.greeting import GreetingSpy as GreetingSpyImpl
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> GreetCliContext:
        spy = GreetingSpyImpl()
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            greet=spy.greet,
            init_logging=prod.init_logging,
        )
        return GreetCliContext(factory=lambda: test_services, spy=spy)

    return _create
