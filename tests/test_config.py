"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from promptglyph.config import Settings, get_settings

ENV_VARS = (
    "PROMPTGLYPH_DISABLE_COLOR",
    "PROMPTGLYPH_COLOR_SYSTEM",
    "PROMPTGLYPH_FANCY_ICONS",
    "PROMPTGLYPH_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear settings variables and remove anything a .env file adds."""
    for name in ENV_VARS:
        # setenv first so the removal is recorded and undone after the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    settings = Settings()
    assert settings.disable_color is False
    assert settings.fancy_icons is False
    assert settings.color_system == "256"
    assert settings.log_level == "WARNING"


def test_environment_overrides(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("PROMPTGLYPH_FANCY_ICONS", "true")
    clean_env.setenv("PROMPTGLYPH_DISABLE_COLOR", "1")
    clean_env.setenv("promptglyph_color_system", "truecolor")

    settings = Settings()
    assert settings.fancy_icons is True
    assert settings.disable_color is True
    assert settings.color_system == "truecolor"


def test_invalid_color_system(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("PROMPTGLYPH_COLOR_SYSTEM", "16")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_reads_env_file(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("PROMPTGLYPH_FANCY_ICONS=true\nPROMPTGLYPH_LOG_LEVEL=DEBUG\n")

    settings = get_settings(env_file)
    assert settings.fancy_icons is True
    assert settings.log_level == "DEBUG"


def test_get_settings_without_env_file(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.chdir(tmp_path)
    settings = get_settings()
    assert settings.fancy_icons is False
