"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sigilforge_env: str = "development"
    sigilforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Caller-side intention contract
    intention_min_length: int = 3
    intention_max_length: int = 200

    # What to do with points outside the unit square
    unit_square_policy: Literal["allow", "clamp", "reject"] = "allow"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
