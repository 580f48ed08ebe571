"""
LinkVault Backend — Configuration Tests
=========================================

What:  Tests for Settings: defaults, YAML loading, environment precedence,
       database path resolution and startup validation.
How:   Each test builds its own Settings instance; the module-level
       singleton used by the app is left alone.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from linkvault.config import Settings


def _settings_from_yaml(yaml_path: Path, **kwargs) -> Settings:
    """Settings reading a specific YAML file instead of LINKVAULT_CONFIG."""

    class YamlSettings(Settings):
        model_config = SettingsConfigDict(yaml_file=yaml_path)

    return YamlSettings(**kwargs)


class TestDefaults:

    def test_section_defaults(self, monkeypatch):
        for name in (
            "LINKVAULT_DATABASE__PATH",
            "LINKVAULT_AUTH__PASSWORD",
            "LINKVAULT_SITE__TITLE",
            "LINKVAULT_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 8080
        assert settings.database.path == "data/linkvault.db"
        assert settings.auth.password == ""
        assert settings.site.title == "LinkVault"
        assert settings.log_level == "INFO"


class TestSources:

    def test_yaml_file_is_loaded(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LINKVAULT_AUTH__PASSWORD", raising=False)
        monkeypatch.delenv("LINKVAULT_SITE__TITLE", raising=False)
        config = tmp_path / "config.yaml"
        config.write_text(
            "server:\n  port: 9090\nauth:\n  password: from-yaml\nsite:\n  title: Mine\n",
            encoding="utf-8",
        )

        settings = _settings_from_yaml(config)

        assert settings.server.port == 9090
        assert settings.server.host == "0.0.0.0"
        assert settings.auth.password == "from-yaml"
        assert settings.site.title == "Mine"

    def test_environment_beats_yaml(self, tmp_path, monkeypatch):
        config = tmp_path / "config.yaml"
        config.write_text("auth:\n  password: from-yaml\n", encoding="utf-8")
        monkeypatch.setenv("LINKVAULT_AUTH__PASSWORD", "from-env")

        settings = _settings_from_yaml(config)

        assert settings.auth.password == "from-env"

    def test_missing_yaml_file_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LINKVAULT_SITE__TITLE", raising=False)

        settings = _settings_from_yaml(tmp_path / "absent.yaml")

        assert settings.site.title == "LinkVault"


class TestValidation:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range_is_rejected(self, port):
        with pytest.raises(ValidationError):
            Settings(server={"port": port})

    def test_empty_password_fails_startup_validation(self):
        settings = Settings(auth={"password": ""})

        with pytest.raises(ValueError, match="auth.password is empty"):
            settings.validate_for_startup()

    def test_configured_password_passes_startup_validation(self):
        Settings(auth={"password": "secret"}).validate_for_startup()


class TestDatabasePath:

    def test_absolute_path_is_kept(self, tmp_path):
        target = tmp_path / "links.db"

        settings = Settings(database={"path": str(target)})

        assert settings.database_path == target
        assert settings.database_url == f"sqlite+aiosqlite:///{target}"

    def test_relative_path_resolves_against_config_directory(self):
        settings = Settings(database={"path": "data/links.db"})

        assert settings.database_path == settings.base_dir / "data" / "links.db"
        assert settings.database_path.is_absolute()
