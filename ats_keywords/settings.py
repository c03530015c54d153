"""
Runtime settings and logging setup.

Settings only affect how the package reports what it does; they never change
engine output.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_settings(env_file: Optional[str] = None, log_level: Optional[str] = None) -> Settings:
    """
    Read settings from the environment, after loading a .env file if present.

    An explicit log_level takes precedence over ATS_LOG_LEVEL. Raises
    pydantic.ValidationError for an unknown level from either source.
    """
    load_dotenv(env_file)
    return Settings(
        log_level=log_level or os.getenv("ATS_LOG_LEVEL", "INFO"),
        log_format=os.getenv("ATS_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger. Only entry points should call this."""
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        force=True,
    )
