"""Shared pytest fixtures for CLI, configuration and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English so test signatures document their
setup.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from algebra.composition import AppServices

_COVERAGE_BASENAME = ".coverage.algebra"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete a leftover coverage database and its SQLite sidecar files."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite locking does not work on network mounts, so the data file is
    moved out of the (possibly shared) project directory unless the caller
    already chose a location via ``COVERAGE_FILE``.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project ``.env`` file when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on command results so log records
    written to stderr never leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the ``build_production`` services factory.

    Example:
        def test_cubes(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["cubes"], obj=production_factory)
            assert result.exit_code == 0
    """
    from algebra.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
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
    """Clear the ``get_config`` cache before the test.

    Only clears before, not after: a test may have monkeypatched the loader
    and removed ``cache_clear`` in the process.
    """
    from algebra.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory producing production services with a fixed Config.

    Only the I/O boundary (``get_config``) is replaced; display, logging and
    the arithmetic settings loader stay real.

    Example:
        def test_inputs(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"algebra": {"inputs": [2]}}))
            result = cli_runner.invoke(cli, ["cubes"], obj=factory)
            assert result.stdout == "The cube of 2 is 8\\n"
    """
    from algebra.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_arithmetic_config_from_dict=prod.load_arithmetic_config_from_dict,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def config_cli_context(
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Shortcut combining ``config_factory`` and ``inject_config``.

    Example:
        def test_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"algebra": {"bits": 8}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "bits" in result.output
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(config_factory(config_data))

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose ``get_config`` records every requested profile.

    Example:
        def test_profile(cli_runner, config_factory, inject_config_with_profile_capture) -> None:
            captured: list[str | None] = []
            factory = inject_config_with_profile_capture(config_factory({}), captured)
            cli_runner.invoke(cli, ["--profile", "wrap32", "cubes"], obj=factory)
            assert captured == ["wrap32"]
    """
    from algebra.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_arithmetic_config_from_dict=prod.load_arithmetic_config_from_dict,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def exploding_cubes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the ``cubes`` driver raise an unexpected RuntimeError.

    Exercises the lib_cli_exit_tools boundary without a dedicated failing command.
    """
    from algebra.adapters.cli.commands import arithmetic as arithmetic_cmd

    def _explode(*_args: Any, **_kwargs: Any) -> list[str]:
        raise RuntimeError("cube engine exploded")

    monkeypatch.setattr(arithmetic_cmd, "describe_cubes", _explode)
