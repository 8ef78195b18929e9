"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from msgbundle.app import create_app  # noqa: E402
from msgbundle.config import Settings  # noqa: E402
from msgbundle.localization import DirectoryCatalogStore  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host ``MSGBUNDLE_*`` variables and config files out of tests."""

    for name in ("MSGBUNDLE_CATALOG_DIR", "MSGBUNDLE_LOG_LEVEL", "MSGBUNDLE_SCAN_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture()
def catalog_store() -> DirectoryCatalogStore:
    """Directory store over ``tests/data/catalogs`` (no base catalogue)."""

    return DirectoryCatalogStore(DATA_DIR / "catalogs")


@pytest.fixture()
def app(catalog_store: DirectoryCatalogStore) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(settings=Settings(), store=catalog_store)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
