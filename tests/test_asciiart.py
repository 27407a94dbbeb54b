import pytest
from PIL import Image as PILImage

from schmackle.asciiart import (
    ASCII_CHARS,
    Image,
    image_to_ascii,
    load_image,
    resize_image,
    rgb_to_grayscale,
)


def _gray(width, height, values):
    return Image(bytes(values), width, height, 1)


def test_image_rejects_wrong_data_length():
    with pytest.raises(ValueError):
        Image(b"\x00\x00\x00", 2, 2, 1)


def test_grayscale_of_black_is_zero():
    assert rgb_to_grayscale(0, 0, 0) == 0


def test_grayscale_of_grey_stays_close():
    for value in (10, 100, 200):
        result = rgb_to_grayscale(value, value, value)
        assert value - 1 <= result <= value


def test_grayscale_weights_green_most():
    assert rgb_to_grayscale(0, 200, 0) > rgb_to_grayscale(200, 0, 0) > rgb_to_grayscale(0, 0, 200)


def test_grayscale_rejects_out_of_range():
    with pytest.raises(ValueError):
        rgb_to_grayscale(256, 0, 0)


def test_resize_same_size_keeps_data():
    image = _gray(3, 2, [1, 2, 3, 4, 5, 6])
    resized = resize_image(image, 3, 2)
    assert resized == image


def test_resize_upscale_duplicates_pixels():
    image = _gray(2, 2, [1, 2, 3, 4])
    resized = resize_image(image, 4, 4)
    assert resized.data == bytes([1, 1, 2, 2, 1, 1, 2, 2, 3, 3, 4, 4, 3, 3, 4, 4])
    assert (resized.width, resized.height, resized.channels) == (4, 4, 1)


def test_resize_downscale_samples_nearest():
    image = Image(bytes([1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]), 4, 1, 3)
    resized = resize_image(image, 2, 1)
    assert resized.data == bytes([1, 1, 1, 3, 3, 3])


@pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 3)])
def test_resize_rejects_non_positive(size):
    with pytest.raises(ValueError):
        resize_image(_gray(1, 1, [0]), *size)


def test_black_image_renders_spaces():
    assert image_to_ascii(_gray(2, 2, [0] * 4), 2, 2) == "  \n  \n"


def test_white_image_renders_densest_char():
    image = Image(bytes([255] * 12), 2, 2, 3)
    assert image_to_ascii(image, 2, 2) == "@@\n@@\n"


def test_gradient_is_monotonic():
    image = _gray(256, 1, list(range(256)))
    line = image_to_ascii(image, 256, 1).rstrip("\n")
    indices = [ASCII_CHARS.index(c) for c in line]
    assert indices == sorted(indices)
    assert line[0] == ASCII_CHARS[0] and line[-1] == ASCII_CHARS[-1]


def test_height_derived_from_aspect_ratio():
    image = _gray(10, 10, [0] * 100)
    art = image_to_ascii(image, 10, 0)
    lines = art.splitlines()
    assert len(lines) * 2 == 10
    assert all(len(line) == 10 for line in lines)


def test_derived_height_is_at_least_one():
    image = _gray(100, 1, [0] * 100)
    assert image_to_ascii(image, 4, 0).count("\n") == 1


def test_non_positive_width_rejected():
    with pytest.raises(ValueError):
        image_to_ascii(_gray(1, 1, [0]), 0, 1)


def test_load_rgb_png(tmp_path):
    path = tmp_path / "rgb.png"
    picture = PILImage.new("RGB", (2, 1))
    picture.putdata([(10, 20, 30), (40, 50, 60)])
    picture.save(path)
    image = load_image(path)
    assert (image.width, image.height, image.channels) == (2, 1, 3)
    assert image.data == bytes([10, 20, 30, 40, 50, 60])


@pytest.mark.parametrize("mode, channels", [("L", 1), ("LA", 2), ("RGBA", 4)])
def test_load_keeps_channel_layout(tmp_path, mode, channels):
    path = tmp_path / "image.png"
    PILImage.new(mode, (3, 2)).save(path)
    image = load_image(path)
    assert image.channels == channels
    assert len(image.data) == 3 * 2 * channels


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "missing.png")