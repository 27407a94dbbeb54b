"""Terminal poster: fills the screen, draws an image as characters and banner text."""

from __future__ import annotations

import re
import shutil
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from schmackle.asciiart import image_to_ascii, load_image, resize_image
from schmackle.bitmaps import banner_lines

IMAGE_WIDTH = 63
IMAGE_HEIGHT = 38
OUTPUT_FILE = "output.txt"
DEFAULT_IMAGE = "images/greenit.png"

_TEXT_LIMIT = 63
_INTEGER = re.compile(r"\s*([+-]?\d+)")

_USAGE = (
    "ix\t| int | Image x Coordinate\n"
    "iy\t| int | Image y Coordinate\n"
    "tx\t| int | Text x Coordinate\n"
    "ty\t| int | Text y Coordinate\n"
    "t\t| str | \"Text\"\n"
    "bk\t| str | Background Colour\n"
    "fg\t| str | Text Colour\n"
    "bg\t| str | Text Background Colour\n"
    "img\t| str | Image Path\n"
)


class Color(IntEnum):
    """ANSI colour offsets; add 30 for foreground and 40 for background."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHTBLACK = 60
    BRIGHTRED = 61
    BRIGHTGREEN = 62
    BRIGHTYELLOW = 63
    BRIGHTBLUE = 64
    BRIGHTMAGENTA = 65
    BRIGHTCYAN = 66
    BRIGHTWHITE = 67


_COLORS_BY_NAME = {color.name.lower(): color for color in Color}


@dataclass
class Options:
    """Settings collected from the command line."""

    image_x: int
    image_y: int
    text_x: int = 20
    text_y: int = 10
    text: str = ""
    background: Color = Color.BLACK
    foreground: Color = Color.WHITE
    text_background: Color = Color.BLACK
    image_path: str = DEFAULT_IMAGE


def color_from_name(name: str) -> Color:
    """Map a lower-case colour name to a colour; unknown names give bright magenta."""
    return _COLORS_BY_NAME.get(name, Color.BRIGHTMAGENTA)


def _to_int(value: str) -> int:
    match = _INTEGER.match(value)
    return int(match.group(1)) if match else 0


def parse_args(argv: list[str], width: int, height: int) -> Options:
    """Read key/value pairs; the image is centred in a width x height area by default."""
    if len(argv) < 2:
        raise ValueError("No commands passed")
    options = Options(
        image_x=width // 2 - IMAGE_WIDTH // 2,
        image_y=height // 2 - IMAGE_HEIGHT // 2,
    )
    keys = argv[0::2]
    values = argv[1::2]
    if len(keys) > len(values):
        raise ValueError(f"{keys[-1]} has no value")
    for key, value in zip(keys, values):
        if key == "ix":
            options.image_x = _to_int(value)
        elif key == "iy":
            options.image_y = _to_int(value)
        elif key == "tx":
            options.text_x = _to_int(value)
        elif key == "ty":
            options.text_y = _to_int(value)
        elif key == "t":
            options.text = value[:_TEXT_LIMIT]
        elif key == "bk":
            options.background = color_from_name(value)
        elif key == "fg":
            options.foreground = color_from_name(value)
        elif key == "bg":
            options.text_background = color_from_name(value)
        elif key == "img":
            options.image_path = value
    return options


def clear() -> str:
    """Escape sequence that homes the cursor and clears the screen."""
    return "\x1b[1;1H\x1b[2J"


def set_color(fg: int, bg: int) -> str:
    """Escape sequence selecting foreground and background colours."""
    return f"\x1b[{fg + 30};{bg + 40}m"


def set_cursor(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column x, row y."""
    return f"\x1b[{y};{x}H"


def save_cursor() -> str:
    """Escape sequence saving the cursor position."""
    return "\x1b[s"


def restore_cursor() -> str:
    """Escape sequence restoring the saved cursor position."""
    return "\x1b[u"


def fill_background(color: int, width: int, height: int) -> str:
    """Escape sequences that paint every cell of the area in one colour."""
    cells = "".join(
        set_cursor(x, y) + " " for x in range(width) for y in range(height)
    )
    return save_cursor() + clear() + set_color(color, color) + cells + restore_cursor()


def render_text(text: str, x: int, y: int) -> str:
    """Escape sequences drawing text as banner glyphs with its top-left at (x, y)."""
    return "".join(
        set_cursor(x, y + row) + line for row, line in enumerate(banner_lines(text))
    )


def main(argv: list[str] | None = None) -> int:
    """Draw the poster on the terminal and wait for a key press."""
    args = sys.argv[1:] if argv is None else list(argv)
    size = shutil.get_terminal_size()
    width, height = size.columns + 1, size.lines + 1

    try:
        options = parse_args(args, width, height)
    except ValueError as exc:
        print(f"Error: {exc}")
        if len(args) < 2:
            print(_USAGE, end="")
        return -1

    out = sys.stdout
    out.write(fill_background(options.background, width, height))
    out.write(set_color(options.foreground, options.text_background))

    try:
        image = load_image(options.image_path)
    except OSError:
        print(f"Failed to load image: {options.image_path}", file=sys.stderr)
        return 1

    image = resize_image(image, IMAGE_WIDTH, IMAGE_HEIGHT)
    ascii_art = image_to_ascii(image, image.width, image.height)

    try:
        Path(OUTPUT_FILE).write_text(ascii_art)
    except OSError:
        print(f"Failed to open output file: {OUTPUT_FILE}", file=sys.stderr)
        return 1

    for row, line in enumerate(ascii_art.splitlines(keepends=True)):
        out.write(set_cursor(options.image_x, options.image_y + row) + line)

    out.write(render_text(options.text, options.text_x, options.text_y))
    out.write(set_cursor(width, height) + " ")
    out.flush()

    sys.stdin.read(1)
    return 0