# meshkit

The building blocks of a small static-mesh editor, written in pure Python
with no third-party dependencies.

## What is inside

- `meshkit.geometry`: `Vector3` (frozen, iterable, with `+`, `-` and scalar
  `*`), `Point`, `Rect`, and `BoundingBox`. `BoundingBox.intersect(origin,
  direction)` runs a slab test and returns the distance along the ray to the
  box, `0.0` when the origin is inside, or `None` on a miss.
  `box_intersect` tests for overlap (touching faces do not count) and
  `box_contain` tests whether another box lies strictly inside. The module
  also holds the mesh records `VertexSimple`, `MaterialSubset` (with an
  `index_range` property) and `ObjMaterialInfo`.
- `meshkit.widgets`: `Window`, a rectangle that reports hover and press
  state, and the abstract `Splitter` with its two kinds, `SplitterH` (a bar
  between left and right windows) and `SplitterV` (a bar between top and
  bottom windows). Splitters can be dragged (`on_drag_start`, `on_drag`,
  `on_drag_end`) and resized, and they write their layout to a string-keyed
  mapping with `save_config` and read it back with
  `load_config(config, screen_width, screen_height)`.
- `meshkit.timing`: `PlatformTime`, a nanosecond cycle counter with
  conversion to milliseconds, and `ScopeCycleCounter`, a context manager
  that records the cycles spent in a block (`cycles`, `milliseconds`).
- `meshkit.serializer`: length-prefixed binary strings, narrow (UTF-8) and
  wide (UTF-16LE): `write_string`, `read_string`, `write_wide_string`,
  `read_wide_string`. Short or truncated input raises `SerializationError`.
- `meshkit.device`: `rasterizer_for_view_mode` picks a `FillMode` for each
  view mode, `decode_uuid_color` packs RGBA picking colours into a 32-bit
  object id, and `GraphicsDevice` keeps the screen size and current
  rasterizer, with `change_rasterizer`, `on_resize` and `clamp_point`.
  Invalid resizes raise `DeviceError`.
- `meshkit.enginetypes`: the `ViewModeIndex` and `LevelViewportType`
  enumerations.
- `meshkit.icons`: the icon-font code points (`Icon`), their glyph ranges
  (`icon_ranges`) and the editor colour theme (`style_colors`).

## Installation

```
pip install .
```

## Example

```python
from meshkit.geometry import BoundingBox, Vector3

box = BoundingBox(Vector3(-1, -1, -1), Vector3(1, 1, 1))
hit = box.intersect(Vector3(-5, 0, 0), Vector3(1, 0, 0))
print(hit)  # 4.0; None on a miss
```

```python
import io
from meshkit.serializer import write_string, read_string

buf = io.BytesIO()
write_string(buf, "Cube")
buf.seek(0)
assert read_string(buf) == "Cube"
```

```python
from meshkit.geometry import Rect, Point
from meshkit.widgets import SplitterH

splitter = SplitterH()
splitter.initialize(Rect(500, 0, 10, 1000))
splitter.on_drag(Point(20, 0))
config = {}
splitter.save_config(config)
print(config["SplitterH.X"])  # "520.000000"
```

## What it does not do

meshkit has no window, no GPU rendering, no mesh-file loader and no
command-line program. `GraphicsDevice` holds device state only; it does not
draw anything or read pixels back from a screen.

## Running the tests

```
pip install .[test]
pytest
```