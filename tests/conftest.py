"""Shared pytest fixtures for printer, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import io
import os
import re
import tempfile
import threading
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from lib_printer.composition import AppServices

_COVERAGE_BASENAME = ".coverage.lib_printer"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value is picked up however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


# ======================== Printer fixtures ========================


class GatedWriter(io.StringIO):
    """Text sink whose writes can be held open by the test.

    ``entered`` is set as soon as a write starts; the write then waits on
    ``release`` before storing its text. Lets a test freeze a print call in
    the middle of its fragment sequence while the destination lock is held.
    """

    def __init__(self) -> None:
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def write(self, text: str, /) -> int:
        self.entered.set()
        self.release.wait(timeout=10)
        return super().write(text)


class FailingWriter(io.StringIO):
    """Text sink that raises ``OSError`` from the n-th write on (1-based)."""

    def __init__(self, fail_on: int, error: OSError | None = None) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.error = error if error is not None else BrokenPipeError(32, "Broken pipe")
        self.calls = 0

    def write(self, text: str, /) -> int:
        self.calls += 1
        if self.calls >= self.fail_on:
            raise self.error
        return super().write(text)


@pytest.fixture
def text_sink() -> io.StringIO:
    """Provide a fresh in-memory text sink."""
    return io.StringIO()


@pytest.fixture
def byte_sink() -> io.BytesIO:
    """Provide a fresh in-memory byte sink."""
    return io.BytesIO()


@pytest.fixture
def gated_writer() -> Iterator[GatedWriter]:
    """Provide a GatedWriter that is always released at teardown."""
    writer = GatedWriter()
    try:
        yield writer
    finally:
        writer.release.set()


@pytest.fixture
def failing_writer_factory() -> Callable[..., FailingWriter]:
    """Return a factory for text sinks that fail after some writes.

    Example:
        def test_failure(failing_writer_factory) -> None:
            writer = failing_writer_factory(fail_on=2)
    """
    return FailingWriter


# ======================== CLI fixtures ========================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for printed output so log records written to
    stderr cannot contaminate assertions.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from lib_printer.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory for tests."""
    from lib_printer.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

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
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, to avoid errors when the function has
    been monkeypatched during the test (losing cache_clear method).
    """
    from lib_printer.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_printer_section(config_factory) -> None:
            config = config_factory({"printer": {"separator": ","}})
            assert config.get("printer.separator") == ","
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; settings parsing,
    display and logging stay real.

    Example:
        def test_print(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"printer": {"separator": ","}}))
            result = cli_runner.invoke(cli, ["print", "a", "b"], obj=factory)
            assert result.stdout.startswith("a,b")
    """
    from lib_printer.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_printer_settings=prod.load_printer_settings,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def printer_cli_context(
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a ``[printer]`` section dict into a services factory.

    Example:
        def test_sep(cli_runner, printer_cli_context) -> None:
            factory = printer_cli_context({"separator": ",", "terminator": "\\n"})
    """

    def _create(printer_section: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(config_factory({"printer": printer_section}))

    return _create
