from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HEALTH_DEMO_",
        "extra": "ignore",
    }

    # Name shown in the report header
    service_name: str = "SwiftRemit"

    # Report loop
    iterations: int = Field(default=5, ge=1)
    max_delay_ms: float = Field(default=50.0, ge=0)  # simulated network latency upper bound
    slow_threshold_ms: int = Field(default=100, gt=0)  # PASS below, SLOW at or above

    # Logging (stderr only, stdout carries the report)
    log_level: str = "WARNING"


settings = Settings()
