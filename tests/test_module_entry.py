"""Module entry stories ensuring `python -m greeter` mirrors the console script."""

from __future__ import annotations

import runpy
import subprocess
import sys

import pytest

from greeter import __init__conf__, entry
from greeter.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["greeter"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("greeter.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_greets(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m greeter hello Ada prints the salutation."""
    monkeypatch.setattr(sys, "argv", ["greeter", "hello", "Ada"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("greeter.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "Hello, Ada!\n" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    expected_commands = {"cli_config", "cli_goodbye", "cli_greet", "cli_hello", "cli_info"}
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_greets() -> None:
    """`python -m greeter goodbye Grace` prints the salutation."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "greeter", "goodbye", "Grace"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Goodbye, Grace!\n" in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_without_name_prints_nothing() -> None:
    """`python -m greeter greet` without NAME succeeds silently on stdout."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "greeter", "greet"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Hello" not in result.stdout
    assert "Goodbye" not in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m greeter --version` outputs version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "greeter", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["greeter", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out
