"""Geometric primitives and mesh data records."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

_PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__


@dataclass
class Rect:
    """An axis-aligned screen rectangle given by its top-left corner and size."""

    left_top_x: float = 0.0
    left_top_y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self.left_top_x = float(self.left_top_x)
        self.left_top_y = float(self.left_top_y)
        self.width = float(self.width)
        self.height = float(self.height)


@dataclass
class Point:
    """A screen position."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)


@dataclass
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)

    def intersect(self, origin: Vector3, direction: Vector3) -> float | None:
        """Distance along the ray to the box, 0 if the origin is inside, None on a miss."""
        t_near = -math.inf
        t_far = math.inf
        for o, d, lo, hi in zip(origin, direction, self.min, self.max):
            if abs(d) < _PARALLEL_EPSILON:
                if o < lo or o > hi:
                    return None
                continue
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return None
        if t_far < 0.0:
            return None
        return t_near if t_near >= 0.0 else 0.0

    def box_intersect(self, other_min: Vector3, other_max: Vector3) -> bool:
        """Whether the boxes overlap; touching faces do not count."""
        return all(
            lo < other_hi and hi > other_lo
            for lo, hi, other_lo, other_hi in zip(self.min, self.max, other_min, other_max)
        )

    def box_contain(self, other_min: Vector3, other_max: Vector3) -> bool:
        """Whether the other box lies strictly inside this one."""
        return all(
            lo < other_lo and hi > other_hi
            for lo, hi, other_lo, other_hi in zip(self.min, self.max, other_min, other_max)
        )


@dataclass
class VertexSimple:
    """A mesh vertex with position, colour, normal, texture coordinates and material."""

    x: float
    y: float
    z: float
    r: float
    g: float
    b: float
    a: float
    nx: float
    ny: float
    nz: float
    u: float = 0.0
    v: float = 0.0
    material_index: int = 0

    @property
    def position(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @property
    def normal(self) -> Vector3:
        return Vector3(self.nx, self.ny, self.nz)

    @property
    def color(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


@dataclass
class MaterialSubset:
    """A run of the index buffer drawn with one material."""

    index_start: int
    index_count: int
    material_index: int
    material_name: str = ""

    @property
    def index_range(self) -> range:
        """Positions in the index buffer covered by this subset."""
        return range(self.index_start, self.index_start + self.index_count)


@dataclass
class ObjMaterialInfo:
    """Material properties read from an MTL description."""

    mtl_name: str = ""
    has_texture: bool = False
    transparent: bool = False

    diffuse: Vector3 = field(default_factory=Vector3)
    specular: Vector3 = field(default_factory=Vector3)
    ambient: Vector3 = field(default_factory=Vector3)
    emissive: Vector3 = field(default_factory=Vector3)

    specular_scalar: float = 0.0
    density_scalar: float = 0.0
    transparency_scalar: float = 0.0

    illuminance_model: int = 0

    diffuse_texture_name: str = ""
    diffuse_texture_path: str = ""
    ambient_texture_name: str = ""
    ambient_texture_path: str = ""
    specular_texture_name: str = ""
    specular_texture_path: str = ""
    bump_texture_name: str = ""
    bump_texture_path: str = ""
    alpha_texture_name: str = ""
    alpha_texture_path: str = ""