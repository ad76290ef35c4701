"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Conversion defaults for the CLI and HTTP API
    circle_algorithm: str = "TwoArcs"
    circle_segments: int = 8
    attribute_cleanup: str = "legacy"

    model_config = {"env_prefix": "SHAPE2PATH_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
