from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SAFE_ERRORS_", env_file=".env", extra="ignore"
    )

    log_level: str = "INFO"
    log_stream: str = "stderr"

    error_writer: str = "log"
    default_context: str = "General context"
