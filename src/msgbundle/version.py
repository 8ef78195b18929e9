"""Version reporting for the ``/health`` endpoint and ``msgbundle-scan --version``."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "msgbundle"
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"

# ``version = "x.y.z"`` inside the ``[project]`` table, before the next table.
_PROJECT_VERSION = re.compile(
    r'^\[project\]\s*$(?:(?!^\[).)*?^version\s*=\s*"([^"]+)"',
    re.MULTILINE | re.DOTALL,
)


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version.

    Source checkouts without an install (tests, ``scripts/``) read the
    version from ``pyproject.toml`` instead.
    """

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return _version_from_pyproject(PYPROJECT)


def _version_from_pyproject(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise RuntimeError(f"Unable to read project metadata at {path}") from error

    match = _PROJECT_VERSION.search(text)
    if match is None:
        raise RuntimeError(f"No [project] version declared in {path}")
    return match.group(1)


def version_banner() -> str:
    """Return the ``--version`` text of the command-line tools."""

    return f"{DISTRIBUTION} {get_project_version()}"


__all__ = ["get_project_version", "version_banner"]
