# svgpaths

A small, dependency-free SVG parser that turns an SVG document into a list of
shapes. Each shape is made of paths expressed as cubic Bezier curves. It suits
icon rendering, plotting and cutting tools: anything that wants plain geometry
out of an SVG file.

Supported input covers `path`, `rect`, `circle`, `ellipse`, `line`,
`polyline` and `polygon` elements, `g` groups with inherited style and
transforms, `style` attributes, dash arrays, `display="none"`, and linear and
radial gradients (including stops inherited through `xlink:href`). The whole
picture is scaled to the `viewBox`, honouring `preserveAspectRatio`, and
converted to the units you ask for (`px`, `pt`, `pc`, `mm`, `cm` or `in`) at a
given DPI.

## Installation

```
pip install svgpaths
```

## Usage

```python
from svgpaths.parser import parse, parse_file

svg = '<svg width="100" height="100"><rect x="10" y="10" width="50" height="20"/></svg>'
image = parse(svg, "px", 96)
print(image.width, image.height)

for shape in image.shapes:
    print(shape.id, shape.fill.type, shape.bounds)
    for path in shape.paths:
        # path.points is a list of (x, y) tuples: the start point followed by
        # three points (control 1, control 2, end) for each cubic segment.
        print(path.closed, path.points)

image = parse_file("drawing.svg", "mm", 96)
```

`parse(text, units="px", dpi=96.0)` parses a string; `parse_file(path,
units="px", dpi=96.0)` reads a file as UTF-8 and parses it. Both return an
`Image` (from `svgpaths.model`) with `width`, `height` and `shapes`.

A `Shape` carries `fill` and `stroke` (each a `Paint` with a `PaintType`, a
`color` and, for gradients, a `Gradient`), `opacity`, `stroke_width`,
`stroke_dash_array`, `stroke_dash_offset`, `stroke_line_join`,
`stroke_line_cap`, `miter_limit`, `fill_rule`, `visible`, `bounds` and
`paths`. Bounds are `(min x, min y, max x, max y)`. A gradient's `xform` is
the inverse transform, mapping image coordinates into gradient space.

Paint colours are packed as `0xAABBGGRR`: red in the lowest byte, alpha from
the fill or stroke opacity in the highest. `svgpaths.colors.parse_color` and
`svgpaths.colors.rgb` use the same byte order without the alpha byte.
Affine transforms are six-tuples `(a, b, c, d, e, f)` handled by
`svgpaths.xform`; `svgpaths.transform.parse_transform` reads a `transform`
attribute into one.

For lower-level use, `svgpaths.parser.SvgParser` accepts tags one at a time
through `start_element(name, attrs)` and `end_element(name)`, and
`finish(units)` returns the image. `svgpaths.xml.iter_tags` yields the
`StartTag` and `EndTag` items of a document, and
`svgpaths.pathdata.parse_path_data` turns a `d` attribute into paths on a
`PathBuilder`.

## What it does not do

- It does not rasterise or draw anything; it only produces geometry.
- Text, images, `use` references, `<style>` stylesheets, clipping and masks
  are ignored.
- Only ten colour keywords are known (red, green, blue, yellow, cyan,
  magenta, black, grey, gray, white); other names become gray.
- Parsing is forgiving: malformed input is skipped rather than reported, so
  the only errors raised are those from reading a file.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```