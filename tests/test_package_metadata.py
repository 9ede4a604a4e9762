"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

import hexgrids


def _load_pyproject() -> dict:
    with Path("pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    project = pyproject["project"]

    assert project["name"] == "hexgrids"
    assert project["version"] == hexgrids.__version__

    declared = {re.split(r"[<>=!~ \[]", requirement, maxsplit=1)[0] for requirement in project["dependencies"]}
    for dependency in ("numpy", "pydantic"):
        assert dependency in declared, f"missing dependency declaration for {dependency}"
    assert any(requirement.startswith("pytest") for requirement in project["optional-dependencies"]["test"])
