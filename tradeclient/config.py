"""
Client Configuration
Uses Pydantic Settings with .env loading.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(extra="ignore")
    
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="text", alias="LOG_FORMAT")
    
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize level name."""
        return str(v).upper()


class ClientSettings(BaseSettings):
    """Trading client settings."""
    model_config = SettingsConfigDict(
        env_prefix="TRADECLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    app_name: str = "tradeclient"
    readonly_mode: bool = False  # Block post/cancel locally
    sandbox_mode: bool = False
    
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache()
def get_settings() -> ClientSettings:
    """Get cached settings instance."""
    return ClientSettings()


def reload_settings() -> ClientSettings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
