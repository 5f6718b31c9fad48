"""Colour themes for matplotlib renderings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Cell and overlay colours for one rendering style."""

    name: str
    empty_cell_color: str
    wall_color: str
    beeper_color: str
    robot_color: str
    path_color: str
    grid_line_color: str


DEFAULT_THEME = Theme(
    name="default",
    empty_cell_color="#f4f1ea",
    wall_color="#3b3b3b",
    beeper_color="#e0a526",
    robot_color="#1f6fb4",
    path_color="#8fb8de",
    grid_line_color="#c9c3b6",
)

DARK_THEME = Theme(
    name="dark",
    empty_cell_color="#1e1e1e",
    wall_color="#8a8a8a",
    beeper_color="#f2c14e",
    robot_color="#5fb3f9",
    path_color="#2f5f8a",
    grid_line_color="#333333",
)

REGISTERED_THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    DARK_THEME.name: DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Return the registered theme called *name*."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"theme must be one of {valid}") from None
