import pytest

from meshkit.geometry import (
    BoundingBox,
    MaterialSubset,
    ObjMaterialInfo,
    Point,
    Rect,
    Vector3,
    VertexSimple,
)


@pytest.fixture
def unit_box():
    return BoundingBox(Vector3(-1, -1, -1), Vector3(1, 1, 1))


def test_vector_arithmetic_round_trip():
    a = Vector3(1.5, -2.0, 3.0)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert 2 * a == a + a
    assert list(a) == [1.5, -2.0, 3.0]


def test_ray_hits_box_front_face(unit_box):
    origin = Vector3(-5, 0, 0)
    direction = Vector3(1, 0, 0)
    distance = unit_box.intersect(origin, direction)
    assert distance == pytest.approx(4.0)
    assert (origin + direction * distance).x == pytest.approx(unit_box.min.x)


def test_ray_hit_point_lies_on_surface(unit_box):
    origin = Vector3(3, 4, -6)
    target = Vector3(0.2, 0.1, 0.0)
    direction = target - origin
    distance = unit_box.intersect(origin, direction)
    hit = origin + direction * distance
    assert all(lo - 1e-9 <= c <= hi + 1e-9 for c, lo, hi in zip(hit, unit_box.min, unit_box.max))
    assert any(abs(abs(c) - 1.0) < 1e-9 for c in hit)


def test_origin_inside_gives_zero(unit_box):
    assert unit_box.intersect(Vector3(0, 0, 0), Vector3(0, 1, 0)) == 0.0


def test_ray_pointing_away_misses(unit_box):
    assert unit_box.intersect(Vector3(-5, 0, 0), Vector3(-1, 0, 0)) is None


def test_ray_passing_beside_misses(unit_box):
    assert unit_box.intersect(Vector3(-5, 3, 0), Vector3(1, 0.1, 0)) is None


def test_parallel_ray_outside_slab_misses(unit_box):
    assert unit_box.intersect(Vector3(-5, 2, 0), Vector3(1, 0, 0)) is None


def test_box_intersect(unit_box):
    assert unit_box.box_intersect(Vector3(0, 0, 0), Vector3(2, 2, 2)) is True
    assert unit_box.box_intersect(Vector3(1, 1, 1), Vector3(2, 2, 2)) is False
    assert unit_box.box_intersect(Vector3(3, 3, 3), Vector3(4, 4, 4)) is False


def test_box_contain(unit_box):
    assert unit_box.box_contain(Vector3(-0.5, -0.5, -0.5), Vector3(0.5, 0.5, 0.5)) is True
    assert unit_box.box_contain(Vector3(-1, -0.5, -0.5), Vector3(0.5, 0.5, 0.5)) is False
    assert unit_box.box_contain(Vector3(-2, -2, -2), Vector3(2, 2, 2)) is False


def test_rect_and_point_store_floats():
    rect = Rect(1, 2, 3, 4)
    point = Point(5, 6)
    assert (rect.left_top_x, rect.height) == (1.0, 4.0)
    assert isinstance(point.x, float) and point.y == 6.0
    assert Rect() == Rect(0, 0, 0, 0)


def test_vertex_properties():
    vertex = VertexSimple(1, 2, 3, 0.1, 0.2, 0.3, 1.0, 0, 1, 0)
    assert vertex.position == Vector3(1, 2, 3)
    assert vertex.normal == Vector3(0, 1, 0)
    assert vertex.color == (0.1, 0.2, 0.3, 1.0)
    assert (vertex.u, vertex.v) == (0.0, 0.0)


def test_material_subset_index_range():
    subset = MaterialSubset(index_start=6, index_count=3, material_index=1, material_name="Body")
    assert list(subset.index_range) == [6, 7, 8]
    assert len(subset.index_range) == subset.index_count


def test_material_info_defaults():
    info = ObjMaterialInfo(mtl_name="Steel")
    assert info.mtl_name == "Steel"
    assert info.has_texture is False
    assert info.diffuse == Vector3(0, 0, 0)