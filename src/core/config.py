from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings read from ``STARTER_*`` environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="STARTER_", env_file=".env", case_sensitive=False
    )

    app_title: str = "Starter API"
    app_version: str = "0.1.0"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"


settings = Settings()

APP_TITLE = settings.app_title
APP_VERSION = settings.app_version
API_HOST = settings.api_host
API_PORT = settings.api_port
LOG_LEVEL = settings.log_level.upper()
