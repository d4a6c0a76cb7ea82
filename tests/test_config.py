import pytest
from pydantic import ValidationError

from vehicle_registry.core.config import Settings


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults_and_env_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/registry")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT", "production")

    cfg = Settings(_env_file=None)

    assert cfg.PORT == 8080
    assert cfg.is_production
    assert cfg.asyncpg_url == "postgresql://u:p@db:5432/registry"
    assert cfg.sqlalchemy_url == "postgresql+psycopg2://u:p@db:5432/registry"
    assert cfg.DB_CONNECT_TIMEOUT == 5
