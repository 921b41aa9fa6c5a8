# solong

Pure-Python building blocks for a small 2D tile game. The package uses only
the standard library.

It contains these modules:

- **Route checking** (`solong.route`) decides whether every coin on a map can
  be collected and whether the exit can be reached from the player's start.
- **Colour conversion** (`solong.colors`) packs `0xRRGGBB` colours into pixel
  values for a visual with given channel masks.
- **In-memory images** (`solong.image`) are pixel buffers with rows padded to
  32 bits and a chosen byte order.
- **X11 colour names** (`solong.rgb_names`) looks up names such as
  `"navy blue"` or `"gray50"`.
- **XPM reading** (`solong.xpm`) turns XPM text, from a file or from a list of
  strings, into an `Image`.
- **Word splitting** (`solong.wordtab`) holds the small text helpers used by
  the XPM reader.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Maps and routes

A map is a sequence of rows. Each row is a string, or any sequence of
single characters.

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `P`       | player start |
| `C`       | coin         |
| `E`       | exit         |

```python
from solong.route import check_route, InvalidMapError

grid = [
    "11111",
    "1P0C1",
    "100E1",
    "11111",
]

try:
    ok = check_route(grid)   # True: the exit can be reached
except InvalidMapError:
    print("a coin cannot be reached")
```

The module has three functions:

- `mark_reachable(grid)` returns a new list of row strings. In it, every
  floor cell reachable from a `P` becomes `O` and every reachable coin becomes
  `K`. Walls and exits block the way. The input is not changed.
- `exit_reachable(grid)` returns true if an `E` sits next to a `P`, `O` or
  `K` cell. Only up, down, left and right count as next to.
- `check_route(grid)` marks the grid first. It raises `InvalidMapError` (a
  `ValueError`) if a `C` is left unmarked. Otherwise it returns
  `exit_reachable` of the marked grid.

`solong.route.TILE_SIZE` is 32, the size of one tile in pixels.

## Colours

```python
from solong.rgb_names import lookup_color, color_names
from solong.colors import channel_shifts, good_color

lookup_color("Navy Blue")        # 0x000080; case is ignored
lookup_color("none")             # -1, meaning transparent
len(color_names())               # each distinct name, in table order

shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
good_color(0xFF8040, 16, shifts) # colour packed for a 16-bit visual
good_color(0xFF8040, 24, shifts) # depths of 24 and above: returned unchanged
```

For an unknown name, `lookup_color` raises `KeyError`. For a mask that is not
positive, `channel_shifts` raises `ValueError`. The result is a frozen
`ChannelShifts` dataclass that holds the shift and bit width of each channel.

## Images

```python
from solong.image import Image, color_map

img = Image(42, 42)              # 32 bits per pixel, little-endian by default
for y in range(42):
    for x in range(42):
        img.set_pixel(x, y, color_map(42, 42, x, y, 1))
img.get_pixel(0, 0)
img.row(0)                       # raw bytes of one row, size_line bytes long
```

An `Image` has these settings and properties:

- `bits_per_pixel` may be 8, 16, 24 or 32.
- `byte_order` is 0 for little-endian or 1 for big-endian.
- `size_line` is the row stride.
- `bytes_per_pixel` is the size of one pixel in bytes.
- `endian` returns the byte order.

The class raises these errors:

- A size or setting that is not valid raises `ValueError`.
- An `(x, y)` outside the image raises `IndexError`.

`color_map(width, height, x, y, variant)` returns the colour of a gradient
test pattern at one point. Variant 2 draws blue from the row instead of the
column.

## XPM

```python
from solong.xpm import read_xpm_file, xpm_from_data, XpmError

image = read_xpm_file("sprite.xpm")
image = xpm_from_data([
    "2 1 2 1",
    "a c #FF0000",
    "b c None",
    "ab",
])
image.get_pixel(0, 0)            # 0xFF0000
image.get_pixel(1, 0)            # 0xFF000000, the transparent pixel
```

Colours are read in one of two ways:

- Hexadecimal: `#RRGGBB`.
- By name, from the X11 table. A name made of two words, such as
  `c navy blue`, is joined before the lookup. Unknown names give 0.

Pixels that are `None` are stored as `TRANSPARENT_PIXEL` (`0xFF000000`).
Every image read this way has 32 bits per pixel. Both readers take an
optional `byte_order`.

The helper functions can also be used on their own:

- `strip_comments(text)` replaces C comments outside double quotes with spaces.
- `quoted_lines(text)` yields the contents of each double-quoted string.
- `text_rgb(name, end)` returns the value of one colour specification.
- `color_key(chars)` packs the characters of a pixel code into an integer.
- `parse_xpm(lines, byte_order)` builds an image from header, colour and row
  strings.

`XpmError` (a `ValueError`) is raised in these cases:

- A header is missing or has bad values.
- A colour line has no `c` key.
- The data runs out early.
- A file cannot be read.

## Word splitting

`solong.wordtab` provides three functions:

- `split_words(text)` splits on runs of spaces and tabs.
- `str_str(text, find, length)` returns the index of `find`. It returns -1 if
  `find` is not found or is longer than `length`.
- `str_str_quoted(text, find, length)` works the same way but skips matches
  inside double quotes.

An empty `find` raises `ValueError`.

## What this package does not do

These are only the pieces described above. The package has no game:

- It opens no window and draws nothing on screen.
- It reads no keyboard.
- It has no game loop and counts no moves.
- It does not load or check map files. You pass grids in yourself.
- It provides no command to run.