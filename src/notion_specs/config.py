from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_API_VERSION = "2022-06-28"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    # Notion API settings
    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = DEFAULT_API_VERSION

    # Logging
    log_level: str = "WARNING"

    # NOTION_SPECS_* environment variables, optionally from a .env file
    model_config = {"env_prefix": "NOTION_SPECS_", "env_file": ".env", "extra": "ignore"}

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
