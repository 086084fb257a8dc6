"""
Colour themes for the search window.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    background: str
    surface: str
    foreground: str


DARK = Theme(background="#1E1E1E", surface="#2E2E2E", foreground="#FFFFFF")
LIGHT = Theme(background="#FFFFFF", surface="#F5F5F5", foreground="#000000")


def theme_for(dark_theme: bool) -> Theme:
    return DARK if dark_theme else LIGHT


def window_qss(theme: Theme) -> str:
    """Style sheet for the window frame, search box, results list and pin toggle."""
    return f"""
#MainBorder {{
    background-color: {theme.background};
    border-radius: 10px;
}}
QLineEdit {{
    background-color: {theme.surface};
    color: {theme.foreground};
    border: none;
    border-radius: 6px;
    padding: 6px 8px;
    selection-background-color: #3A6EA5;
}}
QListWidget {{
    background-color: {theme.surface};
    color: {theme.foreground};
    border: none;
    border-radius: 6px;
}}
QListWidget::item {{
    color: {theme.foreground};
    background: transparent;
    padding: 3px 6px;
}}
QListWidget::item:selected {{
    background-color: rgba(128, 128, 128, 90);
}}
QCheckBox {{
    color: {theme.foreground};
}}
"""
