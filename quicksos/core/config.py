"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "quicksos"
    debug: bool = False
    database_url: str = "sqlite:///./quicksos.db"
    api_prefix: str = "/api"

    # Location
    location_timeout_ms: int = 10_000  # 10 seconds

    # Message
    maps_base_url: str = "https://maps.google.com/?q="
    message_time_format: str = "%m/%d/%Y, %I:%M:%S %p"  # e.g. "10/19/2026, 03:04:05 PM"


settings = Settings()
