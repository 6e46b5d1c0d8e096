"""Colour themes for the timer display (Catppuccin flavours)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Named colours used by the timer display."""

    name: str
    bg: str
    border: str
    text: str
    title: str
    accent: str
    bar_bg: str
    input: str
    alert: str
    muted: str = "bright_black"


THEMES: dict[str, Theme] = {
    "mocha": Theme(
        name="mocha",
        bg="#181825",
        border="#302d41",
        text="#cdd6f4",
        title="#b4befe",
        accent="#b4befe",
        bar_bg="#313244",
        input="#89b4fa",
        alert="#f38ba8",
    ),
    "macchiato": Theme(
        name="macchiato",
        bg="#1e2030",
        border="#363a4f",
        text="#cad3f5",
        title="#b7bdf8",
        accent="#b7bdf8",
        bar_bg="#363a4f",
        input="#8aadf4",
        alert="#ed8796",
    ),
    "frappe": Theme(
        name="frappe",
        bg="#292c3c",
        border="#414559",
        text="#c6d0f5",
        title="#babbf1",
        accent="#babbf1",
        bar_bg="#414559",
        input="#8caaee",
        alert="#e78284",
    ),
    "latte": Theme(
        name="latte",
        bg="#e6e9ef",
        border="#ccd0da",
        text="#4c4f69",
        title="#7287fd",
        accent="#7287fd",
        bar_bg="#ccd0da",
        input="#1e66f5",
        alert="#d20f39",
        muted="grey50",
    ),
}

DEFAULT_THEME = "mocha"


def get_theme(name: str) -> Theme:
    """Look up a theme by case-insensitive name.

    Raises:
        KeyError: If no theme has that name
    """
    key = name.strip().lower()
    if key not in THEMES:
        raise KeyError(name)
    return THEMES[key]


def theme_names() -> list[str]:
    return sorted(THEMES)
