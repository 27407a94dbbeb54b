"""Large banner glyphs drawn with ASCII characters, and text rendering with them."""

from __future__ import annotations

GLYPH_HEIGHT = 10

# Characters in table order; the position of a character is its glyph index.
_CHARACTERS = "# aAbBcCdDeEfFgGhHiIjJkKlLmMnNoOpPqQrRsStTuUvVwWxXyYzZ\"!,.-"

# Characters whose index is fixed rather than searched for.
_FIXED_INDEX = {"!": 54, ",": 55, ".": 56}

_LINE_BREAK = "\\n"

_GLYPHS: tuple[tuple[str, ...], ...] = (
    ("",) * GLYPH_HEIGHT,
    ("           ",) * GLYPH_HEIGHT,
    (
        "           ",
        "           ",
        "  ______   ",
        " |      \\  ",
        " \\$$$$$$\\  ",
        " /      $$ ",
        "|  $$$$$$$ ",
        " \\$$    $$ ",
        "  \\$$$$$$$ ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$__| $$ ",
        "| $$    $$ ",
        "| $$$$$$$$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " __        ",
        "|  \\       ",
        "| $$____   ",
        "| $$    \\  ",
        "| $$$$$$$\\ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        " \\$$$$$$$  ",
        "           ",
    ),
    (
        " _______   ",
        "|       \\  ",
        "| $$$$$$$\\ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        "| $$$$$$$\\ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        " \\$$$$$$$  ",
        "           ",
    ),
    (
        "           ",
        "           ",
        "  _______  ",
        " /       \\ ",
        "|  $$$$$$$ ",
        "| $$       ",
        "| $$_____  ",
        " \\$$     \\ ",
        "  \\$$$$$$$ ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$   \\$$ ",
        "| $$       ",
        "| $$   __  ",
        "| $$__/  \\ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        "       __  ",
        "      |  \\ ",
        "  ____| $$ ",
        " /      $$ ",
        "|  $$$$$$$ ",
        "| $$  | $$ ",
        "| $$__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$$ ",
        "           ",
    ),
    (
        " _______   ",
        "|       \\  ",
        "| $$$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        " \\$$$$$$$  ",
        "           ",
    ),
    (
        "           ",
        "           ",
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$    $$ ",
        "| $$$$$$$$ ",
        " \\$$     \\ ",
        "  \\$$$$$$$ ",
        "           ",
    ),
    (
        " ________  ",
        "|        \\ ",
        "| $$$$$$$$ ",
        "| $$__     ",
        "| $$  \\    ",
        "| $$$$$    ",
        "| $$_____  ",
        "| $$     \\ ",
        " \\$$$$$$$$ ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$_  \\$$ ",
        "| $$ \\     ",
        "| $$$$     ",
        "| $$       ",
        "| $$       ",
        " \\$$       ",
        "           ",
    ),
    (
        " ________  ",
        "|        \\ ",
        "| $$$$$$$$ ",
        "| $$__     ",
        "| $$  \\    ",
        "| $$$$$    ",
        "| $$       ",
        "| $$       ",
        " \\$$       ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$__| $$ ",
        " \\$$    $$ ",
        " _\\$$$$$$$ ",
        "|  \\__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$ __\\$$ ",
        "| $$|    \\ ",
        "| $$ \\$$$$ ",
        "| $$__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        " __        ",
        "|  \\       ",
        "| $$____   ",
        "| $$    \\  ",
        "| $$$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$  | $$ ",
        "| $$__| $$ ",
        "| $$    $$ ",
        "| $$$$$$$$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " __  ",
        "|  \\ ",
        " \\$$ ",
        "|  \\ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        " \\$$ ",
        "     ",
    ),
    (
        " ______  ",
        "|      \\ ",
        " \\$$$$$$ ",
        "  | $$   ",
        "  | $$   ",
        "  | $$   ",
        " *| $$*  ",
        "|   $$ \\ ",
        " \\$$$$$$ ",
        "         ",
    ),
    (
        "       __  ",
        "      |  \\ ",
        "       \\$$ ",
        "      |  \\ ",
        "      | $$ ",
        "      | $$ ",
        " __   | $$ ",
        "|  \\__/ $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
    ),
    (
        "    _____  ",
        "   |     \\ ",
        "    \\$$$$$ ",
        "      | $$ ",
        " __   | $$ ",
        "|  \\  | $$ ",
        "| $$__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        " __        ",
        "|  \\       ",
        "| $$   __  ",
        "| $$  /  \\ ",
        "| $$_/  $$ ",
        "| $$   $$  ",
        "| $$$$$$\\  ",
        "| $$  \\$$\\ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  /  \\ ",
        "| $$ /  $$ ",
        "| $$/  $$  ",
        "| $$  $$   ",
        "| $$$$$\\   ",
        "| $$ \\$$\\  ",
        "| $$  \\$$\\ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " __  ",
        "|  \\ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        " \\$$ ",
        "     ",
    ),
    (
        " __        ",
        "|  \\       ",
        "| $$       ",
        "| $$       ",
        "| $$       ",
        "| $$       ",
        "| $$_____  ",
        "| $$     \\ ",
        " \\$$$$$$$$ ",
        "           ",
    ),
    (
        "               ",
        "               ",
        " ______ ____   ",
        "|      \\    \\  ",
        "| $$$$$$\\$$$$\\ ",
        "| $$ | $$ | $$ ",
        "| $$ | $$ | $$ ",
        "| $$ | $$ | $$ ",
        " \\$$  \\$$  \\$$ ",
        "               ",
    ),
    (
        " **       **  ",
        "|  \\     /  \\ ",
        "| $$\\   /  $$ ",
        "| $$$\\ /  $$$ ",
        "| $$$$\\  $$$$ ",
        "| $$\\$$ $$ $$ ",
        "| $$ \\$$$| $$ ",
        "| $$  \\$ | $$ ",
        " \\$$      \\$$ ",
        "              ",
    ),
    (
        "           ",
        "           ",
        " _______   ",
        "|       \\  ",
        "| $$$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$\\ | $$ ",
        "| $$$\\| $$ ",
        "| $$$$\\ $$ ",
        "| $$\\$$ $$ ",
        "| $$ \\$$$$ ",
        "| $$  \\$$$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        "           ",
        "           ",
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        "           ",
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        "| $$$$$$$  ",
        "| $$       ",
        "| $$       ",
    ),
    (
        " _______   ",
        "|       \\  ",
        "| $$$$$$$\\ ",
        "| $$__/ $$ ",
        "| $$    $$ ",
        "| $$$$$$$  ",
        "| $$       ",
        "| $$       ",
        " \\$$       ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$$ ",
        "      | $$ ",
        "      | $$ ",
        "       \\$$ ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$ _| $$ ",
        "| $$/ \\ $$ ",
        "  \\$$$$$$\\ ",
        "      \\$$$ ",
        "           ",
    ),
    (
        "           ",
        "           ",
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$   \\$$ ",
        "| $$       ",
        "| $$       ",
        " \\$$       ",
        "           ",
    ),
    (
        " _______   ",
        "|       \\  ",
        "| $$$$$$$\\ ",
        "| $$__| $$ ",
        "| $$    $$ ",
        "| $$$$$$$\\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        "           ",
        "           ",
        "  _______  ",
        " /       \\ ",
        "|  $$$$$$$ ",
        " \\$$    \\  ",
        " _\\$$$$$$\\ ",
        "|       $$ ",
        " \\$$$$$$$  ",
        "           ",
    ),
    (
        "  ______   ",
        " /      \\  ",
        "|  $$$$$$\\ ",
        "| $$___\\$$ ",
        " \\$$    \\  ",
        " _\\$$$$$$\\ ",
        "|  \\__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        "   __      ",
        "  |  \\     ",
        " *| $$*    ",
        "|   $$ \\   ",
        " \\$$$$$$   ",
        "  | $$ __  ",
        "  | $$|  \\ ",
        "   \\$$  $$ ",
        "    \\$$$$  ",
        "           ",
    ),
    (
        " ________  ",
        "|        \\ ",
        " \\$$$$$$$$ ",
        "   | $$    ",
        "   | $$    ",
        "   | $$    ",
        "   | $$    ",
        "   | $$    ",
        "    \\$$    ",
        "           ",
    ),
    (
        "           ",
        "           ",
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
        "           ",
    ),
    (
        "            ",
        "            ",
        " **     **  ",
        "|  \\   /  \\ ",
        " \\$$\\ /  $$ ",
        "  \\$$\\  $$  ",
        "   \\$$ $$   ",
        "    \\$$$    ",
        "     \\$     ",
        "            ",
    ),
    (
        " **     **  ",
        "|  \\   |  \\ ",
        "| $$   | $$ ",
        "| $$   | $$ ",
        " \\$$\\ /  $$ ",
        "  \\$$\\  $$  ",
        "   \\$$ $$   ",
        "    \\$$$    ",
        "     \\$     ",
        "            ",
    ),
    (
        "               ",
        "               ",
        " __   __   __  ",
        "|  \\ |  \\ |  \\ ",
        "| $$ | $$ | $$ ",
        "| $$ | $$ | $$ ",
        "| $$_/ $$_/ $$ ",
        " \\$$   $$   $$ ",
        "  \\$$$$$\\$$$$  ",
        "               ",
    ),
    (
        " __       __   ",
        "|  \\  _  |  \\ ",
        "| $$ / \\ | $$ ",
        "| $$/  $\\| $$ ",
        "| $$  $$$\\ $$ ",
        "| $$ $$\\$$\\$$ ",
        "| $$$$  \\$$$$ ",
        "| $$$    \\$$$ ",
        " \\$$      \\$$ \t\t\t   ",
        "",
    ),
    (
        "           ",
        "           ",
        " **    **  ",
        "|  \\  /  \\ ",
        " \\$$\\/  $$ ",
        "  >$$  $$  ",
        " /  $$$$\\  ",
        "|  $$ \\$$\\ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$  | $$ ",
        " \\$$\\/  $$ ",
        "  >$$  $$  ",
        " /  $$$$\\  ",
        "|  $$ \\$$\\ ",
        "| $$  | $$ ",
        " \\$$   \\$$ ",
        "           ",
    ),
    (
        " **    **  ",
        "|  \\  |  \\ ",
        "| $$  | $$ ",
        "| $$  | $$ ",
        "| $$__/ $$ ",
        " \\$$    $$ ",
        " _\\$$$$$$$ ",
        "|  \\__| $$ ",
        " \\$$    $$ ",
        "  \\$$$$$$  ",
    ),
    (
        " **      **  ",
        "|  \\    /  \\ ",
        " \\$$\\  /  $$ ",
        "  \\$$\\/  $$  ",
        "   \\$$  $$   ",
        "    \\$$$$    ",
        "    | $$     ",
        "    | $$     ",
        "     \\$$     ",
        "             ",
    ),
    (
        "           ",
        "           ",
        " ________  ",
        "|        \\ ",
        " \\$$$$$$$$ ",
        "  /    $$  ",
        " /  $$$$_  ",
        "|  $$    \\ ",
        " \\$$$$$$$$ ",
        "           ",
    ),
    (
        " ________  ",
        "|        \\ ",
        " \\$$$$$$$$ ",
        "    /  $$  ",
        "   /  $$   ",
        "  /  $$    ",
        " /  $$___  ",
        "|  $$    \\ ",
        " \\$$$$$$$$ ",
        "           ",
    ),
    (
        " **  **    ",
        "|  \\|  \\   ",
        "| $$| $$   ",
        "| $$| $$   ",
        " \\$$ \\$$   ",
        "           ",
        "           ",
        "           ",
        "           ",
        "           ",
    ),
    (
        " __  ",
        "|  \\ ",
        "| $$ ",
        "| $$ ",
        "| $$ ",
        " \\$$ ",
        " __  ",
        "|  \\ ",
        " \\$$ ",
        "     ",
    ),
    (
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
        " __  ",
        "|  \\ ",
        "| $$ ",
        " \\$  ",
        "     ",
    ),
    (
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
        " __  ",
        "|  \\ ",
        " \\$$ ",
        "     ",
    ),
    (
        "         ",
        "         ",
        "         ",
        "         ",
        " ______  ",
        "|      \\ ",
        " \\$$$$$$ ",
        "         ",
        "         ",
        "         ",
    ),
)


def lookup_char(c: str) -> int:
    """Return the glyph index of a single character; unknown characters give 0."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c in _FIXED_INDEX:
        return _FIXED_INDEX[c]
    index = _CHARACTERS.find(c)
    return index if index >= 0 else 0


def glyph(c: str) -> tuple[str, ...]:
    """Return the rows of the banner glyph drawn for a character."""
    return _GLYPHS[lookup_char(c)]


def banner_lines(text: str) -> list[str]:
    """Render text as banner rows.

    A literal backslash followed by ``n`` starts a new block of rows below
    the previous one. Each block is ``GLYPH_HEIGHT`` rows high.
    """
    rows: list[str] = []
    for block in text.split(_LINE_BREAK):
        glyphs = [glyph(c) for c in block]
        rows.extend("".join(g[row] for g in glyphs) for row in range(GLYPH_HEIGHT))
    return rows