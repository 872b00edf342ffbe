"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    raindrop_log_level: str = "info"

    # Region sampling
    region_count: int = 5
    target_area_fraction: float = 0.25
    max_placement_attempts: int = 5000

    # Fixed seed for reproducible sessions; unset means fresh entropy
    random_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
