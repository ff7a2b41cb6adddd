import pytest

from feistelcore.bit_codec.bits import (
    ascii_to_bits,
    bits_to_ascii,
    chop_string,
    dec_to_bin,
    ensure_n_bits,
)
from feistelcore.errors import CodecAlignmentError, CodecError, InputError


def test_ascii_to_bits_is_msb_first_per_character():
    assert ascii_to_bits("A") == "01000001"
    assert ascii_to_bits("AB") == "0100000101000010"


def test_ascii_to_bits_empty():
    assert ascii_to_bits("") == ""


def test_ascii_to_bits_accepts_high_8bit_characters():
    assert ascii_to_bits("\xe9") == "11101001"


def test_ascii_to_bits_rejects_wide_characters():
    with pytest.raises(InputError):
        ascii_to_bits("€")


def test_bits_to_ascii():
    assert bits_to_ascii("0100000101000010") == "AB"
    assert bits_to_ascii("") == ""
    assert bits_to_ascii("11111111") == "\xff"


def test_bits_to_ascii_requires_whole_characters():
    with pytest.raises(CodecAlignmentError):
        bits_to_ascii("0100")


def test_bits_to_ascii_rejects_non_binary_digits():
    with pytest.raises(CodecError):
        bits_to_ascii("0100000201000010")


def test_chop_string_keeps_short_tail():
    assert chop_string("abcdefg", 3) == ["abc", "def", "g"]
    assert chop_string("", 3) == []
    assert chop_string([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]


def test_chop_string_rejects_zero_width():
    with pytest.raises(ValueError):
        chop_string("abc", 0)


def test_dec_to_bin():
    assert dec_to_bin(0) == "0"
    assert dec_to_bin(5) == "101"
    with pytest.raises(CodecError):
        dec_to_bin(-1)


def test_ensure_n_bits_left_pads():
    assert ensure_n_bits("101", 5) == "00101"
    assert ensure_n_bits("101", 3) == "101"


def test_ensure_n_bits_refuses_to_truncate():
    with pytest.raises(CodecError):
        ensure_n_bits("101101", 4)
