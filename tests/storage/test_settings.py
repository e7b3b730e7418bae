from __future__ import annotations

import pytest
from pydantic import ValidationError

from fitpet.core.settings import Settings
from fitpet.storage import MemStorage, SqlStorage, create_storage


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FITPET_STORAGE_BACKEND", raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "memory"
    assert settings.database_url == "sqlite://"
    assert settings.default_username == "user"


def test_backend_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FITPET_STORAGE_BACKEND", " SQL ")
    assert Settings(_env_file=None).storage_backend == "sql"


def test_unknown_backend_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FITPET_STORAGE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_create_storage_picks_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FITPET_STORAGE_BACKEND", raising=False)
    settings = Settings(_env_file=None)
    assert isinstance(create_storage(settings), MemStorage)

    sql = create_storage(settings.model_copy(update={"storage_backend": "sql"}))
    try:
        assert isinstance(sql, SqlStorage)
    finally:
        sql.dispose()
