"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "calc-hub"
    log_level: str = "INFO"
    log_json: bool = True  # False -> plain text lines for interactive use

    # Metrics: write a Prometheus textfile after each CLI run when set
    metrics_textfile: Optional[str] = None

    # D-Day live countdown
    dday_refresh_seconds: float = Field(default=1.0, gt=0)

    # World clock comparisons are expressed relative to this city
    reference_city: str = "Asia/Seoul"


settings = Settings()
