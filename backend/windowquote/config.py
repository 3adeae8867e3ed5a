"""Runtime configuration loaded from the environment and ``.env`` files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_SETTINGS_PATH = Path.home() / ".windowquote" / "standard_pricing.json"


class Settings(BaseModel):
    """Library settings for applications embedding windowquote."""

    standard_pricing_path: Path = DEFAULT_SETTINGS_PATH
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level '{v}'"
            raise ValueError(msg)
        return level


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from ``WINDOWQUOTE_*`` environment variables.

    A ``.env`` file (``env_file`` or one found from the working directory)
    is loaded first; variables already set in the environment win.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    values: dict[str, str] = {}
    path = os.environ.get("WINDOWQUOTE_SETTINGS_PATH")
    if path:
        values["standard_pricing_path"] = os.path.expanduser(path)
    level = os.environ.get("WINDOWQUOTE_LOG_LEVEL")
    if level:
        values["log_level"] = level
    return Settings.model_validate(values)


def configure_logging(settings: Settings) -> None:
    """Apply the configured log level for an application entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
