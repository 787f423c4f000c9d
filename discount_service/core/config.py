"""Discount Service Configuration"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Discount Service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "INFO"

    # Pricing
    currency_symbol: str = "₹"

    # Rule store
    seed_sample_rules: bool = True

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
