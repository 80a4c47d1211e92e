"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "payplan-gateway"
    log_level: str = "INFO"

    # Calculation
    gst_rate: Decimal = Decimal("0.10")
    due_soon_threshold_days: int = 4


settings = Settings()
