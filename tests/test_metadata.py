"""Package metadata, bundled resources, and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import rtoml

from greeter import __init__conf__
from greeter.adapters.config.loader import get_default_config_path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    return _load_pyproject().get("tool", {}).get("hatch", {}).get("build", {}).get("targets", {}).get("wheel", {})


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from greeter import print_info

    print_info()

    captured = capsys.readouterr().out
    assert captured.startswith("Info for greeter:")
    assert f"version       = {__init__conf__.version}" in captured


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    project = _load_pyproject()["project"]

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.title == project["description"]


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    scripts = _load_pyproject()["project"]["scripts"]

    assert scripts == {__init__conf__.shell_command: "greeter.entry:main"}


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """The slug picks the Linux config directory (~/.config/<slug>/)."""
    assert _load_pyproject()["project"]["name"].replace("_", "-") == __init__conf__.LAYEREDCONF_SLUG


@pytest.mark.os_agnostic
def test_layeredconf_vendor_and_app_are_set() -> None:
    assert __init__conf__.LAYEREDCONF_VENDOR.strip()
    assert __init__conf__.LAYEREDCONF_APP.strip()


@pytest.mark.os_agnostic
def test_py_typed_marker_exists_and_ships_in_wheel() -> None:
    assert (PROJECT_ROOT / "src" / "greeter" / "py.typed").is_file()
    assert any("py.typed" in entry for entry in _wheel_table().get("include", []))


@pytest.mark.os_agnostic
def test_default_config_exists_and_ships_in_wheel() -> None:
    path = get_default_config_path()

    assert path.is_file()
    assert rtoml.load(path)["greeter"]["max_width"] == 10
    assert any(entry.endswith("defaultconfig.toml") for entry in _wheel_table().get("include", []))
