# wireframe

Building blocks for a height-map wireframe viewer: a parser for height-map
files, a camera model driven by key codes, the text of a key-help panel, and
a few supporting utilities (an XPM reader, named colours, printf-style
formatting and buffered line reading). Only the Python standard library is
needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Map format

- Each line is one row of the grid.
- Fields are separated by spaces. Every row must have the same number of fields.
- A field is a whole number, the height, in base 10. It may carry a colour after a
  comma, written in hexadecimal with a `0x` or `0X` prefix, from `0x0` to `0xFFFFFF`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

`wireframe.parse.load_map` reads a file of this kind and returns a `HeightMap`
with `width`, `height`, `depths`, `colors` (None where a cell gave no colour),
`depth_min` and `depth_max`. Only lines ended by a newline are read; a final line
without one is ignored. Any problem raises `MapError`, a subclass of
`ValueError`, with a short message such as `"Invalid width in map."`.

```python
from wireframe.parse import load_map, parse_cell, parse_map

grid = load_map("map.fdf")
parse_cell("12,0xFF0000")          # (12, 0xFF0000)
parse_map(["0 1\n", "2 3\n"]).depth_max   # 3
```

## Camera

`wireframe.camera.Camera` holds zoom, screen offset, the three rotation angles,
the projection (`Projection.ISOMETRIC` or `Projection.PARALLEL`) and the depth
scale. `Camera.initial(width, height, depth_max)` gives the starting view for a
map, and `handle_key(key, width, height, depth_max)` applies a key press, using
the key codes in `wireframe.settings.Key`:

| Action                        | Keys                          |
|-------------------------------|-------------------------------|
| Zoom in / out                 | `+` (`=`) / `-`               |
| Move up / down / left / right | `K` `J` `H` `L` or arrow keys |
| Rotate about x axis           | `S` / `W`                     |
| Rotate about y axis           | `D` / `E`                     |
| Rotate about z axis           | `F` / `R`                     |
| Adjust depth                  | `<` / `>` (`,` / `.`)         |
| Starting view                 | `I`                           |
| Reset axes, isometric         | `U`                           |
| Reset axes, parallel          | `P`                           |

```python
from wireframe.camera import Camera
from wireframe.settings import Key

camera = Camera.initial(grid.width, grid.height, grid.depth_max)
camera.handle_key(Key.PLUS, grid.width, grid.height, grid.depth_max)
```

`wireframe.menu.menu_entries()` returns the lines of the key-help panel as
`MenuEntry` objects with position, colour and text.

## Utilities

- `wireframe.xpm`: `load_xpm(path)` and `parse_xpm(lines)` decode XPM pixmaps into
  an `XpmImage` whose `pixels` are rows of 0xRRGGBB values; `strip_comments`,
  `find_unquoted` and `split_words` are the helpers it uses.
- `wireframe.colornames`: `lookup_color("red")` gives `0xFF0000`; `#rrggbb` is read
  as hexadecimal, unknown names give 0 and `none` gives -1. `good_color` converts a
  colour to a pixel value for a visual of a given depth.
- `wireframe.printf`: `sprintf`, `fprintf` and `printf` for the conversions
  `c s d i u x X p %`, e.g. `sprintf("%05d", 42) == "00042"`.
- `wireframe.linereader`: `LineReader` reads a stream line by line in fixed-size
  chunks; `read_lines` returns all lines of a stream.
- `wireframe.numeric`: `parse_int` parses a whole string as a 32-bit int (base 16
  needs a `0x` prefix); `abs_diff` gives a 32-bit distance or -1 on overflow.
- `wireframe.textutil`: small string helpers (`split_fields`, `trim`, `substring`
  and others).

## What this package does not do

It does not open a window, draw the wireframe or listen to the keyboard, and it
installs no command. The camera and map are data you can feed to a renderer of
your own; there is no renderer or viewer program in the package.