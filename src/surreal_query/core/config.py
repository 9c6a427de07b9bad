"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", description="Minimum level emitted by setup_logging()")
    log_colors: bool = Field(default=True, description="Colorize console log output")
    send_to_logfire: bool = Field(default=False, description="Ship structured logs to Logfire")

    model_config = SettingsConfigDict(
        env_prefix="SURREAL_QUERY_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )


settings = Settings()
