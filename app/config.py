"""
Configuration management for FRA Atlas DSS
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "FRA Atlas Decision Support System"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: str = "./logs"
    log_retention_days: int = 30
    error_log_retention_days: int = 90

    # API
    api_host: str = "0.0.0.0"
    port: int = 5000  # Read from PORT

    # Claims dataset
    data_path: str = "./data/fra-data.json"
    data_reload_minutes: int = 0  # 0 = never reload on a schedule

    # Action acknowledgement
    action_delay_min_seconds: float = 0.5
    action_delay_max_seconds: float = 2.5
    action_timeout_seconds: float = 10.0

    # Simulated trend jitter (None = unseeded)
    trend_jitter_seed: Optional[int] = None

    # Dashboard poller
    insights_poll_seconds: float = 60.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
