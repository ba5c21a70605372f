"""Library configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    """Logging configuration for the za_identity logger tree."""

    model_config = {"env_prefix": "ZA_ID_LOG_"}

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ZA_ID_"}

    environment: Literal["dev", "test", "prod"] = "dev"

    logging: LoggingConfig = LoggingConfig()
