"""Color spec -> terminal escape code translation, backed by rich styles.

A spec has the form ``fg+attrs:bg+attrs``; every part is optional::

    "green"       green foreground
    "green+hb"    bright green, bold
    "red:white"   red on white
    "+u"          underline only
    "208"         256-palette color 208
    "reset"       reset all attributes

Attribute letters: b bold, B blink, d dim, i inverse, s strike, u underline,
h high intensity.
"""

from __future__ import annotations

import logging

from rich.color import ColorParseError, ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

RESET = "\x1b[0m"

_ATTRIBUTES = {
    "b": "bold",
    "B": "blink",
    "d": "dim",
    "i": "reverse",
    "s": "strike",
    "u": "underline",
}

_BASIC_COLORS = {"black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"}

COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}

# Rendered through rich and stripped off again to leave the opening code.
_PROBE = "\x00"


def _color_word(name: str, bright: bool) -> str:
    if name.isdigit():
        return f"color({name})"
    if bright and name in _BASIC_COLORS:
        return f"bright_{name}"
    return name


def _split_part(part: str) -> tuple[str | None, set[str]]:
    """Split ``name+attrs`` into a rich color name and attribute names."""
    name, _, letters = part.partition("+")
    attributes = set()
    for letter in letters:
        if letter == "h":
            continue
        if letter not in _ATTRIBUTES:
            raise StyleSyntaxError(f"unknown attribute {letter!r}")
        attributes.add(_ATTRIBUTES[letter])
    color = _color_word(name, "h" in letters) if name else None
    return color, attributes


def spec_to_style(spec: str) -> Style:
    """Build a fresh rich :class:`Style` from a color spec.

    Raises :class:`rich.errors.StyleSyntaxError` or
    :class:`rich.color.ColorParseError` for anything it does not recognize.
    """
    fg_part, _, bg_part = spec.strip().partition(":")
    fg, attributes = _split_part(fg_part)
    bg, bg_attributes = _split_part(bg_part)
    # A terminal has no separate background attributes; merge them.
    attributes |= bg_attributes
    return Style(color=fg, bgcolor=bg, **{name: True for name in attributes})


class ColorFormatter:
    """Callable turning a color spec into the escape code that starts it.

    Unknown specs produce an empty string: a bad color must never stop a
    prompt from being displayed.
    """

    def __init__(self, *, enabled: bool = True, color_system: str = "256") -> None:
        if color_system not in COLOR_SYSTEMS:
            raise ValueError(
                f"color_system must be one of {sorted(COLOR_SYSTEMS)}, got {color_system!r}"
            )
        self._enabled = enabled
        self._system = COLOR_SYSTEMS[color_system]

    @property
    def enabled(self) -> bool:
        return self._enabled

    def __call__(self, spec: str) -> str:
        if not self._enabled:
            return ""
        if spec.strip() == "reset":
            return RESET
        try:
            style = spec_to_style(spec)
        except (StyleSyntaxError, ColorParseError) as exc:
            logger.debug("Ignoring unknown color spec %r: %s", spec, exc)
            return ""
        rendered = style.render(_PROBE, color_system=self._system)
        return rendered.partition(_PROBE)[0]
