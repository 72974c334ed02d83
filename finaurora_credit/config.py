"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINAURORA_",
        extra="ignore",
    )

    # Service
    service_name: str = "finaurora-credit"
    log_level: str = "INFO"


settings = Settings()
