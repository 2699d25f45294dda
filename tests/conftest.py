"""Shared test fixtures for the documentation server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docs_server.app import app as flask_app

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    path = tmp_path / "pages"
    path.mkdir()
    return path


@pytest.fixture
def app(pages_dir: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    monkeypatch.setitem(flask_app.config, "PAGES_DIR", str(pages_dir))
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
