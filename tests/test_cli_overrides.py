"""CLI ``--set`` override integration stories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from greeter.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_set_override_changes_greeting_width(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"greeter": {"max_width": 10}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greeter.max_width=12", "hello", "John Williams Smith, Jr."],
        obj=factory,
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "Hello, John Will...!"


@pytest.mark.os_agnostic
def test_set_override_is_visible_in_config_output(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"lib_log_rich": {"console_level": "INFO"}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "lib_log_rich.console_level=DEBUG", "config", "--section", "lib_log_rich"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert "DEBUG" in result.output


@pytest.mark.os_agnostic
def test_invalid_width_override_exits_with_config_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"greeter": {"max_width": 10}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greeter.max_width=2", "hello", "John"],
        obj=factory,
    )

    assert result.exit_code == 78
    assert "greeter.max_width" in result.stderr


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["no_dot=1", "greeter.max_width", ".max_width=1"])
def test_malformed_override_is_a_usage_error(
    raw: str,
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", raw, "hello"], obj=production_factory)

    assert result.exit_code == 2
    assert "Invalid override" in result.output
