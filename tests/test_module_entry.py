"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from lib_printer import __init__conf__, entry
from lib_printer.adapters import cli as cli_mod
from lib_printer.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["lib_printer"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("lib_printer.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_prints_values(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m lib_printer print writes to standard output."""
    monkeypatch.setattr(sys, "argv", ["lib_printer", "print", "--end", "", "x", "y"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("lib_printer.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert capsys.readouterr().out.endswith("x y")


@pytest.mark.os_agnostic
def test_module_entry_formats_exceptions_via_exit_helpers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Unexpected exceptions are rendered by lib_cli_exit_tools."""
    from lib_printer.adapters.cli.commands import print_cmd

    def _explode(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("printer exploded")

    monkeypatch.setattr(sys, "argv", ["lib_printer", "print", "a"], raising=False)
    monkeypatch.setattr(print_cmd, "cli_printer", _explode)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("lib_printer.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "printer exploded" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback and restores the flags."""
    from lib_printer.adapters.cli.commands import print_cmd

    def _explode(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("printer exploded")

    monkeypatch.setattr(sys, "argv", ["lib_printer", "--traceback", "print", "a"])
    monkeypatch.setattr(print_cmd, "cli_printer", _explode)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("lib_printer.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: printer exploded" in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """The CLI facade exports every registered command."""
    expected_commands = {"cli_config", "cli_info", "cli_print", "cli_print_lines", "cli_print_map"}
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert expected_commands.issubset(exported)
    assert {"config", "info", "print", "print-lines", "print-map"} <= set(cli_mod.cli.commands)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m lib_printer --help` works in a fresh interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "lib_printer", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click emits Unicode that cp1252 consoles cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_print_lines_reads_stdin() -> None:
    """Piped input is printed as one separated line."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "lib_printer", "print-lines", "--sep", ",", "--end", r"\n"],
        input="a\nb\nc\n",
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert result.stdout.splitlines()[-1] == "a,b,c"


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The console script entry point wires production services."""
    monkeypatch.setattr(sys, "argv", ["lib_printer", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_invalid_argument_for_unknown_section(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Command failures surface as their exit codes."""
    monkeypatch.setattr(sys, "argv", ["lib_printer", "config", "--section", "does_not_exist"])

    exit_code = entry.main()

    assert exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in capsys.readouterr().err
