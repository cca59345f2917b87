"""Colour palettes for the task list UI, keyed by prompt_toolkit style class."""

from typing import Dict

from prompt_toolkit.styles import Style

# Every class the renderer, footer and shell emit; "" is the window default.
STYLE_CLASSES = (
    "",
    "text",
    "text.dim",
    "cursor",
    "checked",
    "tag",
    "header",
    "border",
    "input",
    "input.cursor",
    "status.ok",
    "status.fail",
)

THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "cursor": "bg:#3b3b3b #d7dfe6 bold",
        "checked": "#9ad974 bold",
        "tag": "#e5c07b",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "input": "#d7dfe6",
        "input.cursor": "#ffb347",
        "status.ok": "#9ad974 bold",
        "status.fail": "#e06c75 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "cursor": "bg:#3d4047 #e8eaec bold",
        "checked": "#b8f171 bold",
        "tag": "#f0c674",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "input": "#e8eaec",
        "input.cursor": "#f9ac60",
        "status.ok": "#b8f171 bold",
        "status.fail": "#ff6b6b bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Return a copy of the named palette; unknown names get the default one."""
    return dict(THEMES.get(theme) or THEMES[DEFAULT_THEME])


def build_style(theme: str) -> Style:
    palette = get_theme_palette(theme)
    return Style([(name, palette[name]) for name in STYLE_CLASSES if name in palette])


__all__ = ["THEMES", "DEFAULT_THEME", "STYLE_CLASSES", "get_theme_palette", "build_style"]
