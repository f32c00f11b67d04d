"""Light/dark theme mode and its color palette."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

THEME_COOKIE = "theme"


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "ThemeMode":
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


@dataclass(frozen=True)
class ThemePalette:
    bg: str
    card_bg: str
    border: str
    text: str
    text_secondary: str
    stats_bg: str
    filter_bg: str
    input_bg: str
    error_bg: str
    success_bg: str


PALETTES = {
    ThemeMode.LIGHT: ThemePalette(
        bg="#efefef",
        card_bg="#efefef",
        border="#ccc",
        text="#000000",
        text_secondary="#666",
        stats_bg="#f8f9fa",
        filter_bg="#f8f9fa",
        input_bg="#efefef",
        error_bg="#f8d7da",
        success_bg="#d4edda",
    ),
    ThemeMode.DARK: ThemePalette(
        bg="#1a1a1a",
        card_bg="#2d2d2d",
        border="#444",
        text="#efefef",
        text_secondary="#aaa",
        stats_bg="#2d2d2d",
        filter_bg="#2d2d2d",
        input_bg="#2d2d2d",
        error_bg="#3d1a1a",
        success_bg="#1a3d2e",
    ),
}


@dataclass(frozen=True)
class ThemeState:
    """Theme for one request; read-only to everything but the toggle route."""
    mode: ThemeMode = ThemeMode.LIGHT

    @property
    def palette(self) -> ThemePalette:
        return PALETTES[self.mode]

    @property
    def is_dark(self) -> bool:
        return self.mode is ThemeMode.DARK

    @classmethod
    def from_cookie(cls, value: Optional[str]) -> "ThemeState":
        try:
            return cls(ThemeMode(value))
        except ValueError:
            return cls()
