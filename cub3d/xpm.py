"""Reading of XPM images into :class:`~cub3d.image.Image` buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colornames import color_by_name
from .image import Image

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")

_NAME_LIMIT = 63
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be read or decoded."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, needle: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments found outside double quotes.

    Comments are replaced by spaces so the text keeps its length.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each successive pair of double quotes."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, qualifier: str | None) -> int:
    """Convert an XPM colour specification to 0xRRGGBB.

    ``#RRGGBB`` values are read as hexadecimal; other names are looked up in
    the colour-name table, joined with ``qualifier`` when one follows.  Unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if qualifier is not None:
        name = f"{name} {qualifier}"[:_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _read_header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed XPM header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header values: {line!r}")
    return width, height, ncolors, cpp


def _read_color(line: str | None, cpp: int) -> tuple[str, int]:
    if line is None:
        raise XpmError("missing XPM colour definition")
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"no colour key in {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"no colour value in {line!r}")
    qualifier = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], qualifier)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Decode XPM lines (header, colours, then pixel rows) into an Image."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(next(source, None))

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(next(source, None), cpp)
        # Short pixel keys keep the last definition, longer ones the first.
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        row = next(source, None)
        if row is None:
            raise XpmError(f"missing pixel row {y}")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))