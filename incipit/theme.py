"""Color theme selection."""

from enum import Enum


class Theme(str, Enum):
    """Rendering themes.

    Values double as the theme names accepted by the renderers, so a plain
    string such as ``"light"`` compares equal to ``Theme.LIGHT``.
    """

    DARK = "dark"
    LIGHT = "light"
    NOTTY = "notty"


def choose_theme(dark: bool, light: bool, no_color: bool, env_no_color: bool = False) -> Theme:
    """Resolve the theme from CLI flags and environment.

    Args:
        dark: ``--dark`` was given
        light: ``--light`` was given
        no_color: ``--no-color`` was given
        env_no_color: ``NO_COLOR`` is set to a non-empty value

    Returns:
        NOTTY when color is disabled, otherwise LIGHT when requested, else DARK
    """
    if no_color or env_no_color:
        return Theme.NOTTY
    if dark:
        return Theme.DARK
    if light:
        return Theme.LIGHT
    return Theme.DARK


def uses_color(theme: str) -> bool:
    """Whether a theme emits ANSI color codes."""
    return theme != Theme.NOTTY


def is_light(theme: str) -> bool:
    """Whether a theme selects the light palette (anything else is dark)."""
    return theme == Theme.LIGHT
