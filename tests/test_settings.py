"""Tests for DealerSiteSettings."""

from pathlib import Path

from dealersite.settings import DealerSiteSettings


class TestDealerSiteSettings:
    """Tests for settings defaults and environment loading."""

    def test_defaults(self, temp_db_path):
        settings = DealerSiteSettings(db_path=temp_db_path)
        assert settings.namespace == "dealerSite:config:"
        assert settings.default_slug == "demo"
        assert settings.scope_marker == "data-theme-container"

    def test_string_path_coerced(self, temp_db_path):
        settings = DealerSiteSettings(db_path=str(temp_db_path))
        assert isinstance(settings.db_path, Path)

    def test_creates_parent_directory(self, temp_db_path):
        nested = temp_db_path.parent / "a" / "b" / "site.db"
        DealerSiteSettings(db_path=nested)
        assert nested.parent.is_dir()

    def test_from_env(self, monkeypatch, temp_db_path):
        monkeypatch.setenv("DEALERSITE_DB_PATH", str(temp_db_path))
        monkeypatch.setenv("DEALERSITE_ROOT_DOMAIN", "cars.test")
        monkeypatch.setenv("DEALERSITE_LOG_LEVEL", "debug")
        settings = DealerSiteSettings.from_env()
        assert settings.db_path == temp_db_path
        assert settings.root_domain == "cars.test"
        assert settings.log_level == "DEBUG"

    def test_from_env_overrides(self, monkeypatch, temp_db_path):
        monkeypatch.setenv("DEALERSITE_ROOT_DOMAIN", "cars.test")
        settings = DealerSiteSettings.from_env(db_path=temp_db_path, root_domain="autos.test")
        assert settings.root_domain == "autos.test"
