from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Site
    site_url: str = "http://localhost:3000"
    site_name: str = "My Website"
    site_description: str = "A modern web application"
    locale: str = "en-US"

    # Social
    twitter_handle: str = ""  # with @ prefix, e.g. "@example"
    facebook_app_id: str = ""

    # Environment
    app_env: str = "development"  # development | staging | production
    deploy_env: str = ""  # hosting platform tag, e.g. "preview" or "production"
    enable_indexing: str = ""  # explicit override: "true"/"1" enables, anything else disables

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs

    # Sentry
    sentry_dsn: str = ""  # leave empty to disable

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
