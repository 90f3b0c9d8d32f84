"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from brevo_relay import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from brevo_relay import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for brevo_relay:" in captured
    assert __init__conf__.version in captured


@pytest.mark.os_agnostic
def test_metadata_constants_match_pyproject() -> None:
    project = cast(dict[str, Any], _load_pyproject()["project"])

    assert project["name"].replace("-", "_") == __init__conf__.name
    assert project["version"] == __init__conf__.version
    assert project["description"] == __init__conf__.title
    assert __init__conf__.shell_command in project["scripts"]


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts[__init__conf__.shell_command] == "brevo_relay.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    packages = cast(list[str], _wheel_table().get("packages", []))
    package_dir = PROJECT_ROOT / packages[0]

    assert (package_dir / "py.typed").is_file()


@pytest.mark.os_agnostic
def test_wheel_includes_py_typed_and_default_config() -> None:
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)
