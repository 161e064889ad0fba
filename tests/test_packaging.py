from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parents[1]


def _pyproject():
    with (ROOT / "pyproject.toml").open("rb") as f:
        return tomllib.load(f)


def test_console_scripts_point_at_installed_packages():
    data = _pyproject()
    include = data["tool"]["setuptools"]["packages"]["find"]["include"]
    roots = {pattern.rstrip("*") for pattern in include}
    for name, target in data["project"].get("scripts", {}).items():
        module = target.split(":")[0]
        top = module.split(".")[0]
        assert top in roots, f"{name} -> {module} is not in an installed package"
        assert (ROOT / top / "__init__.py").exists(), f"{top} has no __init__.py"


def test_word_lists_ship_as_package_data():
    data = _pyproject()
    assert "data/*.txt" in data["tool"]["setuptools"]["package-data"]["dailyword.datasets"]
    assert (ROOT / "dailyword" / "__init__.py").exists()
