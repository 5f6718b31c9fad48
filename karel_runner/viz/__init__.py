"""Visualization layer: console playback, themes and matplotlib renderers."""

from karel_runner.viz.console import ConsoleDisplay, render_ascii, show_banner
from karel_runner.viz.theme import DARK_THEME, DEFAULT_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "ConsoleDisplay",
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_ascii",
    "show_banner",
]
