"""Tests for color spec translation."""

from __future__ import annotations

import pytest

from promptglyph.render.colors import RESET, ColorFormatter, spec_to_style


@pytest.fixture
def color() -> ColorFormatter:
    return ColorFormatter(enabled=True, color_system="256")


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("green", "\x1b[32m"),
        ("cyan", "\x1b[36m"),
        ("green+hb", "\x1b[1;92m"),
        ("default+hb", "\x1b[1;39m"),
        ("red:white", "\x1b[31;47m"),
        ("+u", "\x1b[4m"),
        ("208", "\x1b[38;5;208m"),
    ],
)
def test_known_specs(color: ColorFormatter, spec: str, expected: str) -> None:
    assert color(spec) == expected


def test_reset(color: ColorFormatter) -> None:
    assert color("reset") == RESET == "\x1b[0m"


def test_truecolor_hex() -> None:
    color = ColorFormatter(color_system="truecolor")
    assert color("#ff0000") == "\x1b[38;2;255;0;0m"


@pytest.mark.parametrize("spec", ["notacolor", "green+z", "blue:mauve-ish", ""])
def test_unknown_specs_fall_back_to_empty(color: ColorFormatter, spec: str) -> None:
    """Test that unrecognized specs never raise and yield an empty code."""
    assert color(spec) == ""


def test_disabled_formatter_returns_empty() -> None:
    color = ColorFormatter(enabled=False)
    assert not color.enabled
    assert color("green+hb") == ""
    assert color("reset") == ""


def test_invalid_color_system() -> None:
    with pytest.raises(ValueError):
        ColorFormatter(color_system="16")


def test_spec_to_style_attributes() -> None:
    style = spec_to_style("blue+bui:black+B")
    assert style.bold and style.underline and style.reverse and style.blink
    assert style.color is not None and style.color.name == "blue"
    assert style.bgcolor is not None and style.bgcolor.name == "black"
