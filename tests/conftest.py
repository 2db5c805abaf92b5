"""Shared pytest fixtures for CLI, configuration, and module-entry tests.

Fixtures use descriptive names that read as plain English; tests receive
them implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _load_dotenv() -> None:
    """Load a repository-level .env when present."""
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
    """Reapply a snapshot taken by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when log records on stderr must not leak into the
    assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations without injection."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide ``build_testing``: in-memory config, no logging runtime."""
    from greeter.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that removes ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards.

    Use whenever a test reads or mutates ``lib_cli_exit_tools.config``.
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
    """Clear the get_config cache before the test.

    Only clears before: a test may monkeypatch ``get_config`` and lose
    ``cache_clear``.
    """
    from greeter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a helper turning a config dict into a services factory.

    Only ``get_config`` is replaced; display, settings validation, and
    logging stay production adapters.

    Example:
        def test_width(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"greeter": {"max_width": 12}})
            result = cli_runner.invoke(cli, ["hello", "Alexander the Great"], obj=factory)
    """
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_greeter_settings=prod.load_greeter_settings,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def profile_capturing_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]]:
    """Return a helper whose services record every ``profile`` passed to get_config."""
    from greeter.composition import AppServices, build_production

    def _create(config_data: dict[str, Any], captured: list[str | None]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            load_greeter_settings=prod.load_greeter_settings,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create
