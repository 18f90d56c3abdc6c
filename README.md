# plotartist

Building blocks for drawing charts. An artist turns data into paths in data
coordinates and reports its bounds. It draws itself through a renderer object
that you supply. Points go from data space to canvas space through a
`ToCanvas` transform, which is an affine map together with the canvas frame.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `plotartist.paths`: the geometry types and shape builders.
  - `Point` is a named `(x, y)` tuple.
  - `PathCode` is one command: move, line, quadratic or cubic Bezier, or close
    polygon.
  - `Path` is an immutable sequence of path codes. Its builder methods
    (`move_to`, `line_to`, `bezier2_to`, `bezier3_to`, `close_poly`) return new
    paths. It also has `map`, `scale`, `rotate`, `rotate_deg` and
    `get_bounds`.
  - `Bounds` is an axis-aligned rectangle. A bounds made of NaN values,
    `Bounds.none()`, means "no bounds", and `union` skips it.
  - `Affine2d` is a 2D affine transform. `translate`, `scale` and `rotate`
    apply after the existing transform.
  - `Angle` is built with `from_radians`, `from_degrees` or `from_unit`, where
    a unit value is a fraction of a full turn.
  - The shape builders are `square`, `unit_pos`, `unit_polygon`,
    `unit_polygon_alt`, `unit_star`, `unit_asterisk`, `wedge`, `circle`,
    `bounds_path`, `line`, `rect` and `arrow`.
- `plotartist.norm`: `Norm` maps values through a scale function and then
  linearly onto `[0, 1]`. `Norms` names the built-in scales: `LINEAR`, `LOG10`,
  `LOG2` and `LN`. A norm can have fixed `vmin` and `vmax` values.
- `plotartist.artist`: the shared pieces used by every artist.
  - `PathStyle` is a layered style. Values it does not set are looked up in
    the parent given to `push`.
  - `Renderer` is the protocol of drawing methods that artists call.
  - `ToCanvas` maps data coordinates to canvas coordinates.
  - `ArtistDraw` is the abstract base class, with `bounds`, `draw` and
    `get_legend`.
  - `ArtistContainer` is a thread-safe list of artists with a style cycle.
    `add` returns an `ArtistView`.
  - `Container` is an artist that groups other artists.
  - `Stale` is a version counter.
- `plotartist.markers`: `Markers` holds the marker shapes. `Markers.parse`
  reads the one-character symbols such as `"o"`, `"s"`, `"^"` and `"x"`, and
  `"#0"` to `"#11"` for ticks and carets. `MarkerStyle` is a marker outline
  with a size (10 by default) and a style. `into_marker` accepts a style, a
  `Markers` member, a symbol or a unit `Path`.
- `plotartist.lines`:
  - `Lines2d` is a polyline with optional markers and a legend label. It has
    `from_xy` and `from_y`.
  - `DrawStyle` sets how points are joined: `DEFAULT`, `STEPS_PRE`,
    `STEPS_MID` or `STEPS_POST`.
  - `build_path` builds the path from `(N, 2)` points.
  - `PathCollection` draws one canvas path at every data point.
- `plotartist.patch`:
  - `Patch` is a filled path. `Patch.rect` builds a rectangle patch.
  - `Arrow` is built by `arrow(xy, dxdy)` and has chainable `width`,
    `head_width`, `head_length` and `tail_width`. The last three take
    fractions within `[0, 1]`.
  - `Line` is a line segment between two points.
  - `Wedge` is a pie wedge.
- `plotartist.bar`:
  - `Bar` draws bars. `set_x`, `set_width` and `set_bottom` are optional.
    Width and bottom accept a single value for all bars.
  - `Histogram` bins the data with `numpy.histogram`, 10 bins by default.
- `plotartist.quiver`:
  - `Quiver` is a grid of arrows, where `u[j, i], v[j, i]` is the vector at
    `(x[i], y[j])`. It scales them so that the longest arrow spans one grid
    step.
  - `arrow_path` builds a single arrow.
  - `HorizontalLine` is a line at a data height. It spans a fraction of the
    frame width.
- `plotartist.stem`: `Stem` draws a vertical segment from `y = 0` to each
  point, with a circle marker at the point and a red baseline.
  `build_stem_paths` builds the segments.
- `plotartist.text`:
  - `Text` draws a string at a position. `TextCoords` sets whether that
    position is in data coordinates (`DATA`) or a fraction of the frame
    (`FRAME_FRACTION`).
  - `TextCanvas` is an optional label centred at the bottom of a canvas
    rectangle.
- `plotartist.grid_color`:
  - `GridColor` draws a grid where cell `(j, i)` covers
    `[i, i+1] x [j, j+1]`. Cells are coloured by `FLAT` or `GOURAUD`
    `Shading`. The default colour map blends from blue to orange. Any
    callable from a value in `[0, 1]` to a colour can replace it.
  - `Colorbar` is a vertical colour scale outlined in a rectangle. Call
    `resize(pos)` before `draw`, or `draw` raises `ValueError`.

## Example

```python
from plotartist.paths import Path, rect
from plotartist.lines import Lines2d, DrawStyle

square = rect((0.0, 0.0), (1.0, 1.0))
print(square.get_bounds().width())          # 1.0

triangle = Path.move_to(0.0, 0.0).line_to(1.0, 0.0).close_poly(1.0, 1.0)
print(triangle.rotate_deg(90.0).get_bounds())

lines = Lines2d.from_xy([1.0, 2.0, 4.0, 8.0], [10.0, 20.0, 40.0, 80.0])
lines.set_draw_style(DrawStyle.STEPS_MID)
lines.set_label("growth")
print(lines.bounds())
```

## Drawing

To draw an artist, call `artist.draw(renderer, to_canvas, style)`. The three
arguments are:

- a renderer with the methods described by `plotartist.artist.Renderer`:
  `draw_path`, `draw_markers`, `draw_text`, `draw_mesh2d_color` and `to_px`.
  A `Text` with a font family set also calls `renderer.font(family)`.
- a `ToCanvas`, for example `ToCanvas.from_bounds(data_bounds, canvas_bounds)`.
- a parent `PathStyle`, or `None`.

## What this package does not do

The package has no renderer. It does not rasterise anything, open a window or
write image files. It also has no figure, chart or axis layout: no ticks, axis
labels, legend boxes or subplot arrangement. Those are left to the code that
calls the artists. Colour names are passed through to the renderer
unchanged, and the package has no named palettes beyond the default blue to
orange map in `grid_color`.