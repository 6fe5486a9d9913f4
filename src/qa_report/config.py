"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Confluence credentials
    confluence_email: str = ""
    confluence_api_token: str = ""

    # Confluence targets
    confluence_base_url: str = "https://overdare.atlassian.net/wiki"
    template_page_id: str = "42008650"
    parent_page_id: str = "29698636"  # QA Report page
    space_key: str = "NFTMetaverse"
    placeholder_token: str = Field(default="ovdr-6116", min_length=1)

    # Outbound timeouts (seconds)
    fetch_timeout_seconds: float = 10.0
    create_timeout_seconds: float = 15.0

    # App
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        """True when both the account email and API token are configured."""
        return bool(self.confluence_email and self.confluence_api_token)

    @property
    def api_base_url(self) -> str:
        """REST API root derived from the wiki base URL."""
        return self.confluence_base_url.rstrip("/") + "/rest/api"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
