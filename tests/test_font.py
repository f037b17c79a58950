import pytest

from semaforo.font import glyph


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


def test_letter_a_columns():
    assert glyph("A") == bytes((0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00))


def test_tilde_is_last_glyph():
    assert glyph("~") == bytes((0x02, 0x03, 0x01, 0x03, 0x02, 0x03, 0x01, 0x00))


@pytest.mark.parametrize("char", [chr(c) for c in range(32, 127)])
def test_every_printable_glyph_has_eight_columns(char):
    assert len(glyph(char)) == 8


@pytest.mark.parametrize("char", ["\n", "\t", "\x7f", "é"])
def test_unknown_characters_draw_as_space(char):
    assert glyph(char) == glyph(" ")


def test_distinct_digits():
    digits = {glyph(d) for d in "0123456789"}
    assert len(digits) == 10


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        glyph(bad)