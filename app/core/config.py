"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (OpenAPI docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix shared by every router.
        database_url: SQLAlchemy URL of the catalog database.
        database_echo: Log every SQL statement.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_enabled: Turn rate limiting off entirely (tests, trusted networks).
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "BookStore API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    database_url: str = "sqlite:///./bookstore.db"
    database_echo: bool = False
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True
    max_request_size_bytes: int = 1_048_576  # 1 MB


settings = Settings()
