# =============================================================================
# Unit Tests — Settings & Engine Construction
# =============================================================================

from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.db.engine import build_engine


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.api_key == "kyoubou"
        assert settings.cors_max_age == 86400
        assert settings.database_url.startswith("sqlite+aiosqlite://")

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("API_KEY", "s3cret")
        monkeypatch.setenv("CORS_MAX_AGE", "600")
        settings = Settings(_env_file=None)
        assert settings.api_key == "s3cret"
        assert settings.cors_max_age == 600

    def test_max_age_reaches_headers(self, settings):
        from fastapi.testclient import TestClient

        from app.main import create_app

        app = create_app(settings.model_copy(update={"cors_max_age": 60}))
        with TestClient(app) as client:
            response = client.options("/users")
        assert response.headers["access-control-max-age"] == "60"


class TestBuildEngine:
    """Tests for engine options chosen from the URL."""

    def test_memory_sqlite_uses_static_pool(self):
        engine = build_engine("sqlite+aiosqlite://")
        assert isinstance(engine.sync_engine.pool, StaticPool)

    def test_file_sqlite_uses_default_pool(self, tmp_path):
        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path}/users.db")
        assert not isinstance(engine.sync_engine.pool, StaticPool)
