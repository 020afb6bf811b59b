"""Screen-space windows and draggable splitters that divide them."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from meshkit.geometry import Point, Rect

_T = TypeVar("_T", int, float, str)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_WORD_PREFIX = re.compile(r"\s*(\S+)")


def _format_float(value: float) -> str:
    return f"{value:.6f}"


class Window:
    """A rectangular screen region that tracks hover and press state."""

    def __init__(self, rect: Rect | None = None) -> None:
        self.rect = rect if rect is not None else Rect()
        self._hovered = False
        self._pressed = False

    def initialize(self, rect: Rect) -> None:
        """Place the window at the given rectangle."""
        self.rect = rect

    def on_resize(self, width: float, height: float) -> None:
        """Take on a new size, keeping the top-left corner."""
        self.rect.width = float(width)
        self.rect.height = float(height)

    def is_hover(self, coord: Point) -> bool:
        """Whether the point lies inside the window; left and top edges are inside."""
        r = self.rect
        self._hovered = (
            r.left_top_x <= coord.x < r.left_top_x + r.width
            and r.left_top_y <= coord.y < r.left_top_y + r.height
        )
        return self._hovered

    @property
    def hovered(self) -> bool:
        """Result of the last hover test."""
        return self._hovered

    def on_pressed(self, coord: Point) -> bool:
        """Handle a press; a plain window does not take it."""
        return False

    def on_released(self) -> bool:
        """Handle a release; a plain window does not take it."""
        return False

    def is_pressing(self) -> bool:
        """Whether the window is held down."""
        return self._pressed


class Splitter(Window, ABC):
    """A bar between two windows that resizes them when dragged."""

    def __init__(self, rect: Rect | None = None) -> None:
        super().__init__(rect)
        self.side_lt: Window | None = None
        self.side_rb: Window | None = None
        self._drag_origin: Point | None = None

    def initialize(self, rect: Rect) -> None:
        """Place the bar and create the two side windows if missing."""
        super().initialize(rect)
        if self.side_lt is None:
            self.side_lt = Window()
        if self.side_rb is None:
            self.side_rb = Window()

    def on_drag_start(self, mouse_pos: Point) -> None:
        """Begin a drag at the given mouse position."""
        self._drag_origin = mouse_pos

    @property
    def drag_origin(self) -> Point | None:
        """Mouse position where the current drag began, or None."""
        return self._drag_origin

    @property
    def dragging(self) -> bool:
        """Whether a drag is in progress."""
        return self._drag_origin is not None

    @abstractmethod
    def on_drag(self, delta: Point) -> None:
        """Move the bar by the drag delta and refit the sides."""

    def on_drag_end(self) -> None:
        """Finish the current drag."""
        self._drag_origin = None

    def on_resize(self, width: float, height: float) -> None:
        """A bare splitter ignores resizing."""

    def on_pressed(self, coord: Point) -> bool:
        """Start pressing if the point is on the bar."""
        if not self.is_hover(coord):
            return False
        self._pressed = True
        return True

    def on_released(self) -> bool:
        """Stop pressing."""
        self._pressed = False
        return False

    def load_config(
        self, config: Mapping[str, str], screen_width: float, screen_height: float
    ) -> None:
        """A bare splitter reads nothing from the configuration."""

    def save_config(self, config: MutableMapping[str, str]) -> None:
        """A bare splitter writes nothing to the configuration."""

    @abstractmethod
    def update_child_rects(self) -> None:
        """Refit the side windows around the bar."""

    def value_from_config(self, config: Mapping[str, str], key: str, default: _T) -> _T:
        """Parse the leading value of config[key] as the type of default, else default."""
        text = config.get(key)
        if text is None:
            return default
        if isinstance(default, str):
            match = _WORD_PREFIX.match(text)
            return match.group(1) if match else default
        if isinstance(default, bool):
            raise TypeError("boolean defaults are not supported")
        if isinstance(default, int):
            match = _INT_PREFIX.match(text)
            return int(match.group(1)) if match else default
        if isinstance(default, float):
            match = _FLOAT_PREFIX.match(text)
            return float(match.group(1)) if match else default
        raise TypeError(f"unsupported default type: {type(default).__name__}")


class SplitterH(Splitter):
    """A vertical bar splitting space into left and right windows."""

    def initialize(self, rect: Rect) -> None:
        super().initialize(rect)
        if self.side_lt is not None:
            self.side_lt.initialize(Rect(0.0, 0.0, rect.left_top_x, rect.height))
        if self.side_rb is not None:
            self.side_rb.initialize(
                Rect(rect.left_top_x + rect.width, 0.0, rect.left_top_x, rect.height)
            )

    def on_resize(self, width: float, height: float) -> None:
        """Scale horizontally by width and take height as the new height."""
        self.rect.height = float(height)
        self.rect.left_top_x *= width
        if self.side_lt is not None:
            self.side_lt.rect.height = float(height)
        if self.side_rb is not None:
            self.side_rb.rect.left_top_x *= width
            self.side_rb.rect.width *= width
            if self.side_lt is not None:
                self.side_lt.rect.height = float(height)
        self.update_child_rects()

    def load_config(
        self, config: Mapping[str, str], screen_width: float, screen_height: float
    ) -> None:
        self.rect.left_top_x = float(
            self.value_from_config(config, "SplitterH.X", screen_width * 0.5)
        )
        self.rect.left_top_y = float(self.value_from_config(config, "SplitterH.Y", 0.0))
        self.rect.width = float(self.value_from_config(config, "SplitterH.Width", 20.0))
        self.rect.height = float(self.value_from_config(config, "SplitterH.Height", 10.0))
        self.rect.left_top_x *= screen_width / self.value_from_config(
            config, "SplitterV.Width", 1000.0
        )

    def save_config(self, config: MutableMapping[str, str]) -> None:
        config["SplitterH.X"] = _format_float(self.rect.left_top_x)
        config["SplitterH.Y"] = _format_float(self.rect.left_top_y)
        config["SplitterH.Width"] = _format_float(self.rect.width)
        config["SplitterH.Height"] = _format_float(self.rect.height)

    def on_drag(self, delta: Point) -> None:
        self.rect.left_top_x += delta.x
        self.update_child_rects()

    def update_child_rects(self) -> None:
        if self.side_lt is not None:
            self.side_lt.rect.width = self.rect.left_top_x - self.side_lt.rect.left_top_x
        if self.side_rb is not None:
            rb = self.side_rb.rect
            previous_x = rb.left_top_x
            rb.left_top_x = self.rect.left_top_x + self.rect.width
            rb.width = rb.width + previous_x - rb.left_top_x


class SplitterV(Splitter):
    """A horizontal bar splitting space into top and bottom windows."""

    def initialize(self, rect: Rect) -> None:
        super().initialize(rect)
        if self.side_lt is not None:
            self.side_lt.initialize(Rect(0.0, 0.0, rect.width, rect.left_top_y))
        if self.side_rb is not None:
            self.side_rb.initialize(
                Rect(0.0, rect.left_top_y + rect.height, rect.width, rect.left_top_y)
            )

    def on_resize(self, width: float, height: float) -> None:
        """Take width as the new width and scale vertically by height."""
        self.rect.width = float(width)
        self.rect.left_top_y *= height
        if self.side_lt is not None:
            self.side_lt.rect.width = float(width)
        if self.side_rb is not None:
            self.side_rb.rect.left_top_y *= height
            self.side_rb.rect.height *= height
            self.side_rb.rect.width = float(width)
        self.update_child_rects()

    def load_config(
        self, config: Mapping[str, str], screen_width: float, screen_height: float
    ) -> None:
        self.rect.left_top_x = float(self.value_from_config(config, "SplitterV.X", 0.0))
        self.rect.left_top_y = float(
            self.value_from_config(config, "SplitterV.Y", screen_height * 0.5)
        )
        self.rect.width = float(self.value_from_config(config, "SplitterV.Width", 10))
        self.rect.height = float(self.value_from_config(config, "SplitterV.Height", 20))
        self.rect.left_top_y *= screen_height / self.value_from_config(
            config, "SplitterH.Height", 1000.0
        )

    def save_config(self, config: MutableMapping[str, str]) -> None:
        config["SplitterV.X"] = _format_float(self.rect.left_top_x)
        config["SplitterV.Y"] = _format_float(self.rect.left_top_y)
        config["SplitterV.Width"] = _format_float(self.rect.width)
        config["SplitterV.Height"] = _format_float(self.rect.height)

    def on_drag(self, delta: Point) -> None:
        self.rect.left_top_y += delta.y
        self.update_child_rects()

    def update_child_rects(self) -> None:
        if self.side_lt is not None:
            self.side_lt.rect.height = self.rect.left_top_y - self.side_lt.rect.left_top_y
        if self.side_rb is not None:
            rb = self.side_rb.rect
            previous_y = rb.left_top_y
            rb.left_top_y = self.rect.left_top_y + self.rect.height
            rb.height = rb.height + previous_y - rb.left_top_y