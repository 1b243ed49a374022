"""Tests for repository toolchain baseline configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_wheel_ships_the_src_layout_package() -> None:
    pyproject = _pyproject()

    assert pyproject["tool"]["hatch"]["build"]["targets"]["wheel"]["packages"] == [
        "src/openapi_spec_dsl"
    ]
    assert pyproject["tool"]["pytest"]["ini_options"]["pythonpath"] == ["src"]
    assert (_project_root() / "src" / "openapi_spec_dsl" / "spec_model" / "__init__.py").exists()


def test_dev_group_type_checks_the_yaml_dependency() -> None:
    pyproject = _pyproject()
    dev_dependencies = [entry.split(">=")[0] for entry in pyproject["dependency-groups"]["dev"]]

    assert {"pytest", "ruff", "mypy", "types-PyYAML"} <= set(dev_dependencies)
    assert pyproject["tool"]["mypy"]["mypy_path"] == "src"
    test_extra = pyproject["project"]["optional-dependencies"]["test"]
    assert [entry.split(">=")[0] for entry in test_extra] == ["pytest"]


def test_runtime_dependencies_are_limited_to_yaml_emitter() -> None:
    dependencies = _pyproject()["project"]["dependencies"]

    assert [dependency.split(">=")[0] for dependency in dependencies] == ["pyyaml"]
