"""Module entry stories ensuring `python -m` and the console script mirror the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys

import pytest

from message_notify import __init__conf__, entry
from message_notify.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["message-notify"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("message_notify.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_lists_view_modes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["message-notify", "view-modes"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("message_notify.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "Notify - Email subject" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_cli_facade_exports_all_registered_commands() -> None:
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert exported == {"cli_config", "cli_deliver", "cli_info", "cli_view_modes"}


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m message_notify --help` works as end users run it."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "message_notify", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click emits Unicode that cp1252 consoles cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert "deliver" in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "message_notify", "--version"],
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
    monkeypatch.setattr(sys, "argv", ["message-notify", "--help"])

    exit_code = entry.main()

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_entry_main_returns_usage_error_for_unknown_option(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(sys, "argv", ["message-notify", "--no-such-flag"])

    assert entry.main() == 2
