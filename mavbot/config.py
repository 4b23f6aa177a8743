# mavbot/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
Values may also come from a local .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Slack Integration
    slack_auth_token: str = ""  # Bot token (xoxb-*)
    slack_app_token: str = ""  # App-level token for Socket Mode (xapp-*)
    slack_debug: bool = False
    slack_api_timeout: int = 30  # Seconds per Web API call

    # Event router
    poll_interval: float = 1.0  # Seconds between stop checks while idle

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Observability
    logfire_token: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @property
    def has_slack_credentials(self) -> bool:
        """Check whether both Slack tokens are configured.

        Returns:
            True if the auth token and the app-level token are set.
        """
        return bool(self.slack_auth_token and self.slack_app_token)


# Singleton instance - import this in your code
settings = Settings()
