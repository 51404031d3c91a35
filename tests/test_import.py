"""Package metadata and public API."""

import tomllib
from pathlib import Path

import pytest

import safebuilder

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


def test_version_matches_pyproject(project: dict) -> None:
    assert safebuilder.__version__ == project["version"]


def test_markupsafe_is_the_only_runtime_dependency(project: dict) -> None:
    names = [dep.split(">")[0].split("=")[0].lower() for dep in project["dependencies"]]
    assert names == ["markupsafe"]


@pytest.mark.parametrize("name", safebuilder.__all__)
def test_public_name_exported(name: str) -> None:
    assert hasattr(safebuilder, name)


def test_errors_share_a_base() -> None:
    assert issubclass(safebuilder.InvalidArgumentsError, safebuilder.SafeBuilderError)
    assert issubclass(
        safebuilder.UnsupportedContentTypeError, safebuilder.SafeBuilderError
    )
