"""Enumerations shared across the engine."""

from enum import IntEnum


class ViewModeIndex(IntEnum):
    """How the viewport shades geometry."""

    LIT = 0
    UNLIT = 1
    WIREFRAME = 2


class LevelViewportType(IntEnum):
    """Projection of a level viewport."""

    PERSPECTIVE = 0
    ORTHO_XY = 1  # top
    ORTHO_NEGATIVE_XY = 2  # bottom
    ORTHO_YZ = 3  # left
    ORTHO_NEGATIVE_YZ = 4  # right
    ORTHO_XZ = 5  # front
    ORTHO_NEGATIVE_XZ = 6  # back
    MAX = 7
    NONE = 255