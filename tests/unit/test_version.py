"""Unit coverage for the project version helper."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import pytest

from msgbundle.version import _version_from_pyproject, get_project_version, version_banner


def read_pyproject_version() -> str:
    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    in_project = False
    for raw_line in pyproject_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("[") and line.endswith("]"):
            in_project = line == "[project]"
            continue
        if in_project and line.startswith("version"):
            return line.partition("=")[2].strip().strip('"')
    raise RuntimeError("Version not found in pyproject.toml")


def test_get_project_version_matches_installed_metadata(monkeypatch) -> None:
    get_project_version.cache_clear()  # type: ignore[attr-defined]
    monkeypatch.setattr(metadata, "version", lambda package: "9.9.9")

    assert get_project_version() == "9.9.9"
    get_project_version.cache_clear()  # type: ignore[attr-defined]


def test_get_project_version_falls_back_to_pyproject(monkeypatch) -> None:
    get_project_version.cache_clear()  # type: ignore[attr-defined]

    def raise_package_not_found(_: str) -> str:
        raise metadata.PackageNotFoundError

    monkeypatch.setattr(metadata, "version", raise_package_not_found)

    assert get_project_version() == read_pyproject_version()
    get_project_version.cache_clear()  # type: ignore[attr-defined]


def test_pyproject_version_ignores_other_tables(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[tool.other]\nversion = "0.0.1"\n\n[project]\nname = "demo"\nversion = "1.2.3"\n',
        encoding="utf-8",
    )

    assert _version_from_pyproject(pyproject) == "1.2.3"


def test_pyproject_without_project_version_raises(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "demo"\n\n[tool.x]\nversion = "9"\n', encoding="utf-8")

    with pytest.raises(RuntimeError, match="No \\[project\\] version"):
        _version_from_pyproject(pyproject)


def test_version_banner_names_the_distribution(monkeypatch) -> None:
    get_project_version.cache_clear()  # type: ignore[attr-defined]
    monkeypatch.setattr(metadata, "version", lambda package: "2.0.0")

    assert version_banner() == "msgbundle 2.0.0"
    get_project_version.cache_clear()  # type: ignore[attr-defined]
