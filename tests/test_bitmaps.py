import pytest

from schmackle.bitmaps import GLYPH_HEIGHT, banner_lines, glyph, lookup_char

LETTERS = "abcdefghijklmnopqrstuvwxyz"


def test_fixed_indices_for_punctuation():
    assert lookup_char("!") == 54
    assert lookup_char(",") == 55
    assert lookup_char(".") == 56


def test_hash_and_unknown_share_index_zero():
    assert lookup_char("#") == 0
    assert lookup_char("?") == lookup_char("#")
    assert lookup_char("7") == lookup_char("#")


def test_lowercase_precedes_uppercase():
    for letter in LETTERS:
        assert lookup_char(letter) + 1 == lookup_char(letter.upper())


def test_letters_are_in_alphabetical_order():
    indices = [lookup_char(letter) for letter in LETTERS]
    assert indices == sorted(indices)
    assert len(set(indices)) == len(LETTERS)


def test_quote_and_dash_follow_letters():
    assert lookup_char('"') > lookup_char("Z")
    assert lookup_char("-") > lookup_char('"')


@pytest.mark.parametrize("bad", ["", "ab"])
def test_lookup_char_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        lookup_char(bad)


@pytest.mark.parametrize("c", list(LETTERS + LETTERS.upper() + " #\"!,.-?"))
def test_every_glyph_has_full_height(c):
    assert len(glyph(c)) == GLYPH_HEIGHT


def test_unknown_glyph_is_empty():
    assert all(row == "" for row in glyph("?"))


def test_space_glyph_is_blank():
    assert all(row.strip() == "" and row for row in glyph(" "))


def test_pinned_rows_from_table():
    assert glyph("a")[2] == "  ______   "
    assert glyph("-")[5] == "|      \\ "


def test_exclamation_uses_quote_glyph():
    assert glyph("!") == glyph('"')


def test_lowercase_a_rows_have_equal_width():
    widths = {len(row) for row in glyph("a")}
    assert len(widths) == 1


def test_banner_single_block_height():
    assert len(banner_lines("Hi")) == GLYPH_HEIGHT


def test_banner_rows_start_with_first_glyph():
    rows = banner_lines("ab")
    for row, first in zip(rows, glyph("a")):
        assert row.startswith(first)
        assert len(row) == len(first) + len(glyph("b")[0])


def test_banner_line_break_stacks_blocks():
    rows = banner_lines("a\\nb")
    assert len(rows) == 2 * GLYPH_HEIGHT
    assert rows[:GLYPH_HEIGHT] == banner_lines("a")
    assert rows[GLYPH_HEIGHT:] == banner_lines("b")


def test_banner_empty_text_gives_empty_rows():
    assert banner_lines("") == [""] * GLYPH_HEIGHT


def test_banner_unknown_characters_add_nothing():
    assert banner_lines("a?") == banner_lines("a")