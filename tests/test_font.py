import pytest

from ohmimetro.font import FONT, glyph


def test_font_covers_printable_ascii():
    printable = [chr(code) for code in range(ord(" "), ord("~") + 1)]
    assert len(FONT) == len(printable) * 8
    assert b"".join(bytes(glyph(char)) for char in printable) == bytes(FONT)


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


def test_letter_a_matches_table():
    assert glyph("A") == bytes([0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00])


def test_tilde_is_last_glyph():
    assert glyph("~") == FONT[-8:]


@pytest.mark.parametrize("char", ["\n", "\x00", "\x7f", "é"])
def test_unprintable_falls_back_to_space(char):
    assert glyph(char) == glyph(" ")


@pytest.mark.parametrize("char", ["0", "k", "Z", "|"])
def test_every_glyph_is_eight_bytes(char):
    assert len(glyph(char)) == 8


def test_distinct_glyphs_differ():
    assert glyph("O") != glyph("0")
    assert glyph("O") == glyph("O")


@pytest.mark.parametrize("bad", ["", "ab", 65])
def test_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        glyph(bad)