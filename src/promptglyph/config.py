"""Configuration loading from environment variables with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROMPTGLYPH_",
        case_sensitive=False,
    )

    # Colors
    disable_color: bool = False
    color_system: Literal["standard", "256", "truecolor"] = "256"

    # Icons: plain symbols work everywhere, fancy ones need a capable terminal
    fancy_icons: bool = False

    # Logging
    log_level: str = "WARNING"


def get_settings(env_file: Path | None = None) -> Settings:
    """Load settings from environment and an optional .env file (cwd by default)."""
    load_dotenv(env_file or Path.cwd() / ".env")
    return Settings()
