from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Slack Thread Viewer"
    debug: bool = False

    # Slack
    slack_bot_token: str = ""
    slack_api_base_url: str = "https://slack.com/api/"
    slack_timeout: int = 30  # Seconds
    replies_page_limit: int = 100  # 0 leaves the page size to Slack

    # Presentation
    user_name_cache_enabled: bool = True
    unknown_user_name: str = "Unknown"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    # CORS
    cors_allowed_origins: List[str] = ["*"]

    model_config = ConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
