"""Application configuration via Pydantic Settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Pepper site
    PEPPER_BASE_URL: str = "https://www.pepper.pl"
    # Hides expired deals from listing and search pages
    PEPPER_COOKIE: str = "hide_expired=%221%22"

    @model_validator(mode="after")
    def strip_base_url(self) -> "Settings":
        """Store the base URL without a trailing slash so paths can be appended."""
        self.PEPPER_BASE_URL = self.PEPPER_BASE_URL.rstrip("/")
        return self

    # HTTP
    HTTP_TIMEOUT: float = 30.0
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
    )

    # App
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
