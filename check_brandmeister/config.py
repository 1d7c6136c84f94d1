"""Configuration loaded from environment variables / .env file.

Usage:
    from check_brandmeister.config import Settings
    settings = Settings()
    print(settings.brandmeister_api_url)

Command-line flags take precedence over the thresholds configured here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- BrandMeister API ---
    brandmeister_api_url: str = "http://api.brandmeister.network/v1.0"

    # --- Thresholds (minutes since last seen) ---
    warn_minutes: int = 10
    critical_minutes: int = 15

    # --- General ---
    log_level: str = "WARNING"  # stdout belongs to the plugin line, keep stderr quiet
    log_format: str = "auto"  # "json", "console" or "auto"
