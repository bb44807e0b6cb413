"""
tests/test_packaging.py

pyproject.toml only carries dependencies: the app and the CLI run from the
source tree, so nothing is installed under a top-level import name.
"""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def pyproject():
    with open(PYPROJECT, "rb") as f:
        return tomllib.load(f)


def test_no_top_level_modules_installed(pyproject):
    setuptools_cfg = pyproject["tool"]["setuptools"]
    assert setuptools_cfg["packages"] == []
    assert setuptools_cfg["py-modules"] == []


@pytest.mark.parametrize("distribution", [
    "streamlit", "streamlit-aggrid", "pandas", "plotly", "openpyxl",
])
def test_runtime_dependency_declared(pyproject, distribution):
    names = [dep.split(">")[0].split("=")[0].strip() for dep in pyproject["project"]["dependencies"]]
    assert distribution in names


def test_pytest_runs_from_source_tree(pyproject):
    assert pyproject["tool"]["pytest"]["ini_options"]["pythonpath"] == [".", "impact_dashboard"]
