"""Package configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POINT_STRUCT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "warning"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    log_datefmt: str = "%Y-%m-%d %H:%M:%S"


settings = Settings()
