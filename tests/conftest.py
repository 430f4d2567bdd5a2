import json
import os
from pathlib import Path

import pytest

from catalog_sync.settings import Settings


class RecordingReporter:
    def __init__(self):
        self.notices: list[str] = []
        self.errors: list[str] = []

    def notice(self, message: str):
        self.notices.append(message)

    def error(self, message: str):
        self.errors.append(message)


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep a developer's .env or CATALOG_SYNC_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("CATALOG_SYNC_"):
            monkeypatch.delenv(name)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def i18n_dir(tmp_path) -> Path:
    path = tmp_path / "src" / "i18n"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def source_catalog(i18n_dir) -> Path:
    return write_json(i18n_dir / "messages.json", {"locale": "en", "translations": {"a": "A", "b": "B"}})


@pytest.fixture
def make_settings(i18n_dir):
    def _make(**kwargs) -> Settings:
        kwargs.setdefault("SOURCE", str(i18n_dir))
        return Settings(**kwargs)

    return _make
