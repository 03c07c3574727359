"""Read-only table of helper functions exposed to prompt templates."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from promptglyph.render.colors import ColorFormatter
from promptglyph.render.icons import Icon, IconSet

Helper = Callable[..., str]


class HelperRegistry(Mapping[str, Helper]):
    """Immutable mapping from helper name to callable.

    Built once and shared by every template compiled against it. Names must
    be valid identifiers so templates can call them directly.
    """

    def __init__(self, helpers: Mapping[str, Helper] | None = None) -> None:
        table: dict[str, Helper] = {}
        for name, func in (helpers or {}).items():
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"Helper name must be an identifier, got {name!r}")
            if not callable(func):
                raise TypeError(f"Helper {name!r} is not callable")
            table[name] = func
        self._helpers = table

    def __getitem__(self, name: str) -> Helper:
        return self._helpers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._helpers)

    def __len__(self) -> int:
        return len(self._helpers)

    def __repr__(self) -> str:
        return f"HelperRegistry({sorted(self._helpers)})"


def _icon_helper(icon: Icon) -> Helper:
    def helper() -> str:
        return icon.symbol

    return helper


def build_registry(
    icons: IconSet | None = None,
    colors: ColorFormatter | None = None,
    extra: Mapping[str, Helper] | None = None,
) -> HelperRegistry:
    """Build the standard registry: ``color`` plus one helper per icon.

    ``extra`` helpers are added last and may replace the standard ones.
    """
    icons = icons or IconSet.default()
    helpers: dict[str, Helper] = {"color": colors or ColorFormatter()}
    for name, icon in icons.helper_names().items():
        helpers[name] = _icon_helper(icon)
    if extra:
        helpers.update(extra)
    return HelperRegistry(helpers)
