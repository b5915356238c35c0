from __future__ import annotations

import os

import pytest

_ENV_VARS = (
    "HTMLSYNC_HEAD_TOKEN",
    "HTMLSYNC_FOOT_TOKEN",
    "HTMLSYNC_EXTENSION",
    "HTMLSYNC_ENCODING",
    "FORCE_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env():
    """Czyści zmienne htmlsync; load_dotenv pisze wprost do os.environ, więc przywracamy całość."""
    saved = dict(os.environ)
    for name in _ENV_VARS:
        os.environ.pop(name, None)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def site(tmp_path, monkeypatch):
    """Pusty katalog roboczy dla testów CLI."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
