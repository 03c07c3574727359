"""Shared test fixtures."""

from __future__ import annotations

import pytest

from promptglyph.config import Settings
from promptglyph.render.cache import TemplateCache
from promptglyph.render.colors import ColorFormatter
from promptglyph.render.helpers import HelperRegistry, build_registry
from promptglyph.render.icons import IconSet


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the test environment."""
    return Settings(
        disable_color=False,
        color_system="256",
        fancy_icons=False,
        log_level="WARNING",
    )


@pytest.fixture
def upper_registry() -> HelperRegistry:
    """A registry with a single ``upper`` helper."""
    return HelperRegistry({"upper": lambda s: s.upper()})


@pytest.fixture
def cache(upper_registry: HelperRegistry) -> TemplateCache:
    return TemplateCache(upper_registry)


@pytest.fixture
def prompt_cache() -> TemplateCache:
    """A cache bound to the standard icon/color registry with colors off."""
    return TemplateCache(build_registry(IconSet.default(), ColorFormatter(enabled=False)))
