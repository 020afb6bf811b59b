"""Geometry, widget layout, timing, serialization and device state for a static-mesh editor."""

__version__ = "0.1.0"
__all__ = ["device", "enginetypes", "geometry", "icons", "serializer", "timing", "widgets"]