"""Render-device state: rasterizer choice, screen size and UUID picking."""

from __future__ import annotations

from enum import IntEnum

from meshkit.enginetypes import ViewModeIndex

_U32_MASK = 0xFFFFFFFF

CLEAR_COLOR = (0.025, 0.025, 0.025, 1.0)
BUFFER_COUNT = 2


class FillMode(IntEnum):
    """How the rasterizer fills triangles."""

    WIREFRAME = 2
    SOLID = 3


class DeviceError(RuntimeError):
    """Raised when the device cannot carry out a request."""


def rasterizer_for_view_mode(view_mode: ViewModeIndex | int) -> FillMode:
    """Fill mode used to draw the given view mode."""
    mode = ViewModeIndex(view_mode)
    if mode is ViewModeIndex.WIREFRAME:
        return FillMode.WIREFRAME
    return FillMode.SOLID


def decode_uuid_color(r: float, g: float, b: float, a: float) -> int:
    """Pack RGBA channel values (0-255) into a 32-bit id, red in the low byte."""
    w = (int(a) << 24) & _U32_MASK
    z = (int(b) << 16) & _U32_MASK
    y = (int(g) << 8) & _U32_MASK
    x = int(r) & _U32_MASK
    return w | z | y | x


class GraphicsDevice:
    """Screen-size and rasterizer state of the render device."""

    def __init__(self, screen_width: int = 0, screen_height: int = 0) -> None:
        if screen_width < 0 or screen_height < 0:
            raise DeviceError("screen size cannot be negative")
        self.screen_width = int(screen_width)
        self.screen_height = int(screen_height)
        self.clear_color = CLEAR_COLOR
        self.buffer_count = BUFFER_COUNT
        self._rasterizer = FillMode.SOLID

    @property
    def rasterizer(self) -> FillMode:
        """The fill mode currently in use."""
        return self._rasterizer

    def change_rasterizer(self, view_mode: ViewModeIndex | int) -> FillMode:
        """Switch to the fill mode for the view mode and return it."""
        self._rasterizer = rasterizer_for_view_mode(view_mode)
        return self._rasterizer

    def on_resize(self, width: int, height: int) -> None:
        """Resize the back buffers; the device must already have a valid size."""
        if self.screen_width == 0 or self.screen_height == 0:
            raise DeviceError("Invalid width or height for ResizeBuffers!")
        if width < 0 or height < 0:
            raise DeviceError("ResizeBuffers failed")
        self.screen_width = int(width)
        self.screen_height = int(height)

    def clamp_point(self, x: int, y: int) -> tuple[int, int]:
        """Clamp a screen coordinate into [0, width] x [0, height]."""
        return (
            min(max(x, 0), self.screen_width),
            min(max(y, 0), self.screen_height),
        )

    def default_pick_uuid(self) -> int:
        """Id reported when no pixel could be read back."""
        return decode_uuid_color(1, 1, 1, 1)