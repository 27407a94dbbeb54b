# schmackle

Paints the whole terminal in one background colour, draws an image as ASCII
art, and writes a message in large block letters on top of it.

## Installation

```
pip install .
```

## Usage

Arguments come in key/value pairs. At least one pair is required:

```
schmackle t "Hello, world!" fg green bg black bk black img picture.png
```

| key   | type | meaning                     |
|-------|------|-----------------------------|
| `ix`  | int  | image x coordinate          |
| `iy`  | int  | image y coordinate          |
| `tx`  | int  | text x coordinate           |
| `ty`  | int  | text y coordinate           |
| `t`   | str  | text to draw (first 63 characters are used) |
| `bk`  | str  | background colour           |
| `fg`  | str  | text colour                 |
| `bg`  | str  | text background colour      |
| `img` | str  | path of the image           |

Unknown keys are ignored. A number that cannot be read counts as 0. A key
with no value after it is an error. If fewer than two arguments are given,
the program prints a list of the keys and exits with status -1.

By default the program looks for the image `images/greenit.png` relative to
the current directory and centres it in the terminal. The text starts at
column 20, row 10. The image is scaled to 63×38 characters, and the same
characters are also written to `output.txt` in the current directory. If the
image cannot be loaded, the program reports this on standard error and exits
with status 1.

The colour names are `black`, `red`, `green`, `yellow`, `blue`, `magenta`,
`cyan`, `white`, and the same names with a `bright` prefix (for example
`brightcyan`). Any other name gives bright magenta.

The banner font has upper- and lower-case letters, space and the marks `"`,
`!`, `,`, `.` and `-`. Other characters draw nothing. A literal `\n` (a
backslash followed by `n`) in the text starts a new block of banner rows
below the previous one. When everything is drawn, the program waits for
input before it exits.

## Library use

```python
from schmackle.asciiart import load_image, image_to_ascii
from schmackle.bitmaps import banner_lines

image = load_image("picture.png")
print(image_to_ascii(image, 80, 0), end="")  # height 0 keeps the aspect ratio

for line in banner_lines("Hi"):
    print(line)
```

`schmackle.asciiart` has these names:

- `Image` holds raw pixel data: `data`, `width`, `height` and `channels`.
- `load_image` reads an image file.
- `resize_image` does nearest-neighbour scaling.
- `rgb_to_grayscale` turns an RGB triple into a grey value.
- `image_to_ascii` maps brightness onto the characters ` .:-=+*#%@`, from
  dark to light.

`schmackle.bitmaps` has `lookup_char`, `glyph` and `banner_lines`.

`schmackle.cli` returns the terminal escape sequences as strings, through
`set_color`, `set_cursor`, `clear`, `fill_background` and `render_text`.
It also has `parse_args` and `color_from_name`, which read the command line.

## Limitations

No image is bundled with the package. Pass one with `img`, or place a file
at `images/greenit.png`. Output uses ANSI escape sequences only, and the
terminal is not restored to its previous colours afterwards.