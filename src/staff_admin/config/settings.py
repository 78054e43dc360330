"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from staff_admin.core.clock import DEFAULT_TIMEZONE
from staff_admin.core.security import DEFAULT_PASSWORD


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Staff Account Administration"
    app_version: str = "0.1.0"

    database_url: str = "sqlite:///./staff_admin.db"

    log_level: str = "INFO"

    # Accounts
    default_password: str = DEFAULT_PASSWORD
    timezone: str = DEFAULT_TIMEZONE
    default_page_size: int = 10

    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by scripts and tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
