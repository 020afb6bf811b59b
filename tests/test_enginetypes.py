from meshkit.enginetypes import LevelViewportType, ViewModeIndex


def test_view_modes_in_order():
    assert [m.value for m in ViewModeIndex] == [0, 1, 2]
    assert ViewModeIndex(2) is ViewModeIndex.WIREFRAME


def test_viewport_type_values():
    assert LevelViewportType(0) is LevelViewportType.PERSPECTIVE
    assert LevelViewportType(1) is LevelViewportType.ORTHO_XY
    assert LevelViewportType(255) is LevelViewportType.NONE


def test_viewport_types_before_max_are_consecutive():
    members = [t for t in LevelViewportType if t.value < LevelViewportType.MAX]
    expected = [LevelViewportType(v) for v in range(LevelViewportType.MAX)]
    assert members == expected