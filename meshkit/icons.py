"""Icon font code points and the editor's UI style palette."""

from __future__ import annotations

from enum import IntEnum

WINDOW_ROUNDING = 5.0
POPUP_ROUNDING = 3.0
FRAME_ROUNDING = 3.0

ICON_FONT_SIZE = 22.0
TEXT_FONT_SIZE = 24.0


class Icon(IntEnum):
    """Code points of the glyphs used from the icon font."""

    MOVE = 0xE9BC
    ROTATE = 0xE9D3
    SCALE = 0xE9AB
    MONITOR = 0xE9B7
    BAR_GRAPH = 0xE918

    NEW = 0xE96D
    SAVE = 0xE9D6
    LOAD = 0xE950

    MENU = 0xE9AD
    SLIDER = 0xE9C4
    PLUS = 0xE9C8

    @property
    def char(self) -> str:
        """The glyph as a one-character string."""
        return chr(self.value)


def icon_ranges() -> tuple[tuple[int, int], ...]:
    """Half-open glyph ranges to load from the icon font, one per icon."""
    return tuple((icon.value, icon.value + 1) for icon in Icon)


def style_colors() -> dict[str, tuple[float, float, float, float]]:
    """RGBA colours of the editor's UI style, keyed by style slot."""
    return {
        "WindowBg": (0.0, 0.0, 0.0, 0.9),
        "TitleBg": (0.02, 0.02, 0.02, 1.0),
        "TitleBgActive": (0.02, 0.02, 0.02, 1.0),
        "Separator": (0.3, 0.3, 0.3, 1.0),
        "PopupBg": (0.0, 0.0, 0.0, 0.9),
        "FrameBg": (0.2, 0.205, 0.21, 1.0),
        "FrameBgHovered": (0.3, 0.305, 0.31, 1.0),
        "FrameBgActive": (0.15, 0.1505, 0.151, 1.0),
        "Button": (0.0, 0.0, 0.0, 1.0),
        "ButtonActive": (0.105, 0.105, 0.105, 1.0),
        "ButtonHovered": (0.0, 0.0, 0.85, 1.0),
        "Header": (0.203, 0.203, 0.203, 0.6),
        "HeaderActive": (0.105, 0.105, 0.105, 0.6),
        "HeaderHovered": (0.0, 0.0, 0.85, 0.85),
        "Text": (1.0, 1.0, 1.0, 0.9),
        "Tab": (0.15, 0.1505, 0.151, 1.0),
        "TabHovered": (0.38, 0.3805, 0.381, 1.0),
        "TabActive": (0.28, 0.2805, 0.281, 1.0),
        "TabUnfocused": (0.15, 0.1505, 0.151, 1.0),
        "TabUnfocusedActive": (0.2, 0.205, 0.21, 1.0),
    }