"""Application configuration loaded from config.yaml + environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"


class Settings(BaseSettings):
    """Process-wide settings, built once at startup and handed to ``create_app``.

    Precedence: explicit kwargs > environment > .env > config.yaml > defaults.
    """

    project_name: str = "LiftCare API"
    database_url: str = "sqlite+aiosqlite:///data/liftcare.db"
    db_echo: bool = False

    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 8

    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file=_CONFIG_PATH,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def get_settings() -> Settings:
    """Build Settings by merging YAML defaults with env overrides."""
    return Settings()
