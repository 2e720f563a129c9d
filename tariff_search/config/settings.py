"""Configuration management for Tariff Search."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEARCHABLE_FIELDS = [
    "FileName",
    "Text",
    "Title",
    "Author",
    "Creator",
    "Subject",
    "Producer",
]


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets mounted from files or copied from consoles may carry a BOM that
    breaks URI parsing.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB settings
    mongo_connection_string: str = "mongodb://localhost:27017"
    mongo_database_name: str = "TariffSearch"
    mongo_collection_name: str = "Documents"
    mongo_query_timeout_seconds: float | None = None

    # Fields matched by the global keyword search (JSON list in the environment)
    searchable_fields: list[str] = DEFAULT_SEARCHABLE_FIELDS

    @field_validator("mongo_connection_string", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    @field_validator("searchable_fields", mode="after")
    @classmethod
    def drop_blank_fields(cls, value: list[str]) -> list[str]:
        """Strip field names and discard empty entries."""
        return [field.strip() for field in value if field and field.strip()]

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


# Global settings instance
settings = Settings()
