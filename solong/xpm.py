"""Reading of XPM pixmaps, from files or from in-memory string arrays."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from solong.image import Image
from solong.rgb_names import lookup_color
from solong.wordtab import split_words, str_str_quoted

TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?(?:0[xX])?[0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _hex_prefix(text: str) -> int:
    match = _LEADING_HEX.match(text)
    return int(match.group(1), 16) if match else 0


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double-quoted strings.

    Block comments go first, then line comments together with their newline.
    Every removed character is replaced by a space.
    """
    while (begin := str_str_quoted(text, "/*", len(text))) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := str_str_quoted(text, "//", len(text))) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def text_rgb(name: str, end: str | None = None) -> int:
    """Return the colour value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with ``end``
    when given) is looked up in the colour table. Unknown names give 0 and
    "None" gives -1.
    """
    if name.startswith("#"):
        return _hex_prefix(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _parse_header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header values: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return text_rgb(words[index], end)


def parse_xpm(lines: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from the XPM strings in ``lines``.

    The first string is the header, then one string per colour, then one per
    pixel row. Transparent pixels are stored as 0xFF000000.
    """
    it = iter(lines)
    width, height, ncolors, cpp = _parse_header(next(it, None))

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = next(it, None)
        if line is None:
            raise XpmError("XPM data ends inside the colour table")
        color = _parse_color_line(line, cpp)
        key = color_key(line[:cpp])
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height, 32, byte_order)
    for y in range(height):
        line = next(it, None)
        if line is None:
            raise XpmError(f"XPM data ends before row {y}")
        for x in range(width):
            color = palette.get(color_key(line[cpp * x:cpp * (x + 1)]), 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.set_pixel(x, y, color)
    return image


def xpm_from_data(data: Iterable[str], byte_order: int = 0) -> Image:
    """Build an image from an XPM held as a sequence of strings."""
    return parse_xpm(data, byte_order)


def read_xpm_file(path: str | PathLike[str], byte_order: int = 0) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)), byte_order)