"""Application configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # File Upload
    max_upload_size_mb: int = 50

    # Content Extraction
    extraction_timeout_seconds: float = 10.0
    extraction_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )
    extraction_max_content_size_mb: int = 50
    min_content_length: int = 100  # Minimum characters for a valid article body
    content_scoring_strategy: Literal["readability", "trafilatura"] = "readability"

    # Metadata
    reading_words_per_minute: int = 225

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
