"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the prompt screen; ``mono`` disables color.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    title: str
    selected: str
    item: str
    hint: str
    status: str
    error: str
    done: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    selected="\033[1;38;5;229m",
    item="\033[38;5;252m",
    hint="\033[2;38;5;250m",
    status="\033[38;5;109m",
    error="\033[1;38;5;203m",
    done="\033[1;38;5;42m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    selected="\033[1;38;5;117m",
    item="\033[38;5;252m",
    hint="\033[2;38;5;110m",
    status="\033[38;5;73m",
    error="\033[1;38;5;210m",
    done="\033[1;38;5;86m",
)

MONO_THEME = UITheme(
    name="mono",
    reset="",
    title="",
    selected="",
    item="",
    hint="",
    status="",
    error="",
    done="",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, MONO_THEME)}


def available_theme_names() -> list[str]:
    return sorted(_THEMES)


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the theme for ``name``; unknown names fall back to default."""
    if no_color:
        return MONO_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
