from pydantic import Field
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuration settings model using Pydantic for validation.
    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",  # Environment variables prefix
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",  # Ignore extra attributes
        env_file=".env",  # Specify the .env file to load
        env_file_encoding="utf-8",
    )

    # Basic settings
    name: str = Field(default="Exercise Tracker", description="Name of the application")
    debug_mode: bool = Field(default=False, description="Enable debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=5000, description="Server port")
    rate_limit: str = Field(default="200/minute", description="Default rate limit per client address")
    client_build_dir: Optional[str] = Field(
        default="client/build", description="Directory of the built web client, served at the root"
    )

    # Logging settings
    log_dir: str = Field(default="logs", description="Directory for log files")
    file_log_level: str = Field(default="INFO", description="Logging level")
    screen_log_level: str = Field(default="INFO", description="Logging level")
