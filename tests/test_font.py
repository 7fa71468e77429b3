import pytest

from ohmmeter.font import FONT, glyph


def test_font_covers_printable_ascii():
    table = b"".join(glyph(chr(code)) for code in range(ord(" "), ord("~") + 1))
    assert len(table) == (ord("~") - ord(" ") + 1) * 8
    assert bytes(table) == bytes(FONT)


def test_glyph_letter_a_matches_table():
    assert glyph("A") == bytes([0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00])


def test_glyph_last_character():
    assert glyph("~") == bytes([0x02, 0x03, 0x01, 0x03, 0x02, 0x03, 0x01, 0x00])


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


@pytest.mark.parametrize("char", ["\n", "\x7f", "é", "\x00"])
def test_unprintable_maps_to_space(char):
    assert glyph(char) == glyph(" ")


@pytest.mark.parametrize("char", [chr(c) for c in range(32, 127)])
def test_every_printable_glyph_has_eight_columns(char):
    assert len(glyph(char)) == 8


def test_distinct_glyphs_for_letters():
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert len({glyph(c) for c in letters}) == len(letters)


@pytest.mark.parametrize("text", ["", "ab"])
def test_rejects_non_single_characters(text):
    with pytest.raises(ValueError):
        glyph(text)