"""
LinkVault Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe loading of the server, database, auth and site sections with
       validation on startup.
How:   Pydantic Settings merges (highest priority first) constructor kwargs,
       LINKVAULT_* environment variables, a .env file and a YAML config file,
       then exposes a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated again in the lifespan.

Config file:
    The YAML file is named by the LINKVAULT_CONFIG environment variable and
    defaults to ./config.yaml. Its layout mirrors the nested sections:

        server:
          host: 0.0.0.0
          port: 8080
        database:
          path: data/linkvault.db
        auth:
          password: change-me
        site:
          title: My Links

    Nested values can be overridden from the environment with a double
    underscore, e.g. LINKVAULT_AUTH__PASSWORD=secret.
"""

import os
from pathlib import Path
from typing import Tuple, Type

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# What: Location of the YAML config file
# Relative database paths are resolved against this file's directory
CONFIG_PATH = Path(os.environ.get("LINKVAULT_CONFIG", "config.yaml")).expanduser()


class ServerSettings(BaseModel):
    """Bind address for the HTTP listener."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)


class DatabaseSettings(BaseModel):
    """SQLite database location (absolute, or relative to the config file)."""

    path: str = Field(default="data/linkvault.db")


class AuthSettings(BaseModel):
    """The single shared password that unlocks write operations."""

    password: str = Field(default="")


class SiteSettings(BaseModel):
    """Values substituted into the index page."""

    title: str = Field(default="LinkVault")


class Settings(BaseSettings):
    """
    Application settings grouped by section.

    The auth password is loaded once at startup and never changes while the
    process runs; request handling only ever reads it.
    """

    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="LINKVAULT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file=CONFIG_PATH,
        yaml_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Environment beats the YAML file; the YAML file beats defaults."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def base_dir(self) -> Path:
        """Directory that relative paths in the config are resolved against."""
        return CONFIG_PATH.resolve().parent

    @property
    def database_path(self) -> Path:
        """Absolute path of the SQLite database file."""
        path = Path(self.database.path).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the aiosqlite driver."""
        return f"sqlite+aiosqlite:///{self.database_path}"

    def validate_for_startup(self) -> None:
        """
        What:  Checks the settings that the service cannot work without.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises a single ValueError.
        """
        errors = []
        if not self.auth.password:
            errors.append(
                "auth.password is empty; every write request will be rejected. "
                "Set it in the config file or LINKVAULT_AUTH__PASSWORD."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
