"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables with MOCK_HTTP_ prefix.
Every field has a default, so the server runs with no environment at all.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MOCK_HTTP_",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Configuration
    server_name: str = "mock-http-server"
    host: str = "0.0.0.0"
    port: int = 4444

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_dir: Path | None = None

    # Default delays (milliseconds) when ?delay= is missing or unusable
    contact_delay_ms: int = 2000
    contacts_delay_ms: int = 1000
    echo_delay_ms: int = 0

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("contact_delay_ms", "contacts_delay_ms", "echo_delay_ms")
    @classmethod
    def validate_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Default delay cannot be negative")
        return v

    @property
    def display_host(self) -> str:
        """Host to show in URLs; wildcard addresses are shown as localhost."""
        if self.host in ("0.0.0.0", "::", ""):
            return "localhost"
        return self.host


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
