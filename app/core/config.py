"""Application settings loaded from the environment.

Values can be overridden with environment variables or a `.env` file, e.g.
`LOG_LEVEL=DEBUG` or `LOG_JSON=true`.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the notes service.

    Attributes:
        app_name: Title reported by the API and health endpoint.
        environment: Deployment environment name.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_json: Render logs as JSON instead of console output.
        log_cache: Cache bound loggers after first use; disable to capture logs in tests.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Notes Service"
    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False
    log_cache: bool = True


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()
