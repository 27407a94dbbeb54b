"""Loading raster images and turning them into character art."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

from PIL import Image as _PILImage

# Characters ordered from darkest to lightest.
ASCII_CHARS = " .:-=+*#%@"

_NATIVE_MODES = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


@dataclass(frozen=True)
class Image:
    """Raw pixel data stored row by row with interleaved channels."""

    data: bytes
    width: int
    height: int
    channels: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.channels <= 0:
            raise ValueError("image dimensions and channel count must be positive")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"pixel data holds {len(self.data)} bytes, expected {expected}"
            )


def _native(picture: _PILImage.Image) -> _PILImage.Image:
    mode = picture.mode
    if mode in _NATIVE_MODES:
        return picture
    if mode == "PA" or (mode == "P" and "transparency" in picture.info):
        return picture.convert("RGBA")
    if mode == "P":
        return picture.convert("RGB")
    if mode in ("1", "F") or mode.startswith("I"):
        return picture.convert("L")
    if mode in ("RGBa", "La"):
        return picture.convert("RGBA")
    return picture.convert("RGB")


def load_image(path: Union[str, PathLike]) -> Image:
    """Read an image file, keeping its grey, grey+alpha, RGB or RGBA layout.

    Raises OSError when the file is missing or cannot be decoded.
    """
    with _PILImage.open(path) as picture:
        picture.load()
        converted = _native(picture)
        return Image(
            data=converted.tobytes(),
            width=converted.width,
            height=converted.height,
            channels=_NATIVE_MODES[converted.mode],
        )


def resize_image(image: Image, new_width: int, new_height: int) -> Image:
    """Resize with nearest-neighbour sampling."""
    if new_width <= 0 or new_height <= 0:
        raise ValueError("new width and height must be positive")
    channels = image.channels
    x_ratio = image.width / new_width
    y_ratio = image.height / new_height
    columns = [int(x * x_ratio) for x in range(new_width)]
    row_length = image.width * channels

    out = bytearray()
    for y in range(new_height):
        start = int(y * y_ratio) * row_length
        row = image.data[start:start + row_length]
        for px in columns:
            out += row[px * channels:(px + 1) * channels]
    return Image(bytes(out), new_width, new_height, channels)


def rgb_to_grayscale(r: int, g: int, b: int) -> int:
    """Return the luma of an RGB triple, truncated to an integer."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
    return int(0.299 * r + 0.587 * g + 0.114 * b)


def _char_for(pixel: bytes) -> str:
    if len(pixel) < 3:
        value = pixel[0]
    else:
        value = rgb_to_grayscale(pixel[0], pixel[1], pixel[2])
    index = min(value * len(ASCII_CHARS) // 256, len(ASCII_CHARS) - 1)
    return ASCII_CHARS[index]


def image_to_ascii(image: Image, target_width: int, target_height: int = 0) -> str:
    """Render an image as lines of characters, each line ending in a newline.

    A non-positive target height is derived from the aspect ratio, halved
    because character cells are about twice as tall as they are wide.
    """
    if target_width <= 0:
        raise ValueError("target width must be positive")
    if target_height <= 0:
        aspect_ratio = image.height / image.width
        target_height = max(int(target_width * aspect_ratio * 0.5), 1)

    resized = resize_image(image, target_width, target_height)
    channels = resized.channels
    row_length = resized.width * channels
    lines = []
    for start in range(0, len(resized.data), row_length):
        row = resized.data[start:start + row_length]
        lines.append(
            "".join(_char_for(row[i:i + channels]) for i in range(0, row_length, channels))
        )
    return "".join(line + "\n" for line in lines)