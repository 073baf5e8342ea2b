"""Configuration management for the application."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from sqlalchemy.engine import URL

# Nested config.json layout: {"server": {...}, "database": {...}, "logging": {...}}
NESTED_CONFIG_KEYS = {
    ("server", "host"): "server_host",
    ("server", "port"): "server_port",
    ("database", "host"): "db_host",
    ("database", "port"): "db_port",
    ("database", "user"): "db_user",
    ("database", "password"): "db_password",
    ("database", "dbname"): "db_name",
    ("database", "sslmode"): "db_sslmode",
    ("logging", "file_path"): "log_file",
    ("logging", "level"): "log_level",
}


class ConfigFileSettingsSource(JsonConfigSettingsSource):
    """config.json source accepting flat keys or the nested server/database/logging layout.

    Flat keys win when both spellings are present.
    """

    def _read_file(self, file_path: Path) -> dict[str, Any]:
        data = super()._read_file(file_path)
        flat = {key: value for key, value in data.items() if not isinstance(value, dict)}
        for section, values in data.items():
            if not isinstance(values, dict):
                continue
            for key, value in values.items():
                field_name = NESTED_CONFIG_KEYS.get((section, key))
                if field_name is not None:
                    flat.setdefault(field_name, value)
        return flat


class Settings(BaseSettings):
    """Application settings loaded from environment variables, .env and config.json."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        json_file="config.json",
        json_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    server_host: str = Field(default="0.0.0.0")  # noqa: S104
    server_port: int = Field(default=8080)
    shutdown_grace_seconds: int = Field(default=5)

    # Database
    database_url: str | None = Field(default=None)
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="users")
    db_sslmode: str = Field(default="disable")
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_statement_timeout_ms: int = Field(default=5000)  # 0 disables
    run_migrations: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")
    log_file: str | None = Field(default=None)

    # API
    environment: str = Field(default="development")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Environment wins over .env, which wins over config.json."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            ConfigFileSettingsSource(settings_cls),
            file_secret_settings,
        )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production" and "localhost" in self.sqlalchemy_url:
            raise ValueError("Database should not use localhost in production")
        if self.log_format not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Full database URL, built from the db_* parts unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode},
        )
        return url.render_as_string(hide_password=False)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
