"""Config display wrapper: delegation to lib_layered_config's Rich display."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from greeter.adapters.config.display import display_config
from greeter.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("fmt", list(OutputFormat))
def test_unknown_section_raises_value_error(
    fmt: OutputFormat,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    config = config_factory({"greeter": {"max_width": 10}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=fmt, section="nonexistent")


@pytest.mark.os_agnostic
def test_human_output_renders_greeter_section(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"greeter": {"max_width": 10}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[greeter]" in output
    assert "max_width = 10" in output


@pytest.mark.os_agnostic
def test_json_output_renders_greeter_section(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"greeter": {"max_width": 12}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="greeter")

    output = capsys.readouterr().out
    assert '"max_width": 12' in output
