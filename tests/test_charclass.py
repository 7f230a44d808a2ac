import string

import pytest

from minitalk.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters(ch):
    assert isalpha(ch) is True
    assert isalnum(ch) is True
    assert isdigit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert isdigit(ch) is True
    assert isalnum(ch) is True
    assert isalpha(ch) is False


@pytest.mark.parametrize("ch", ["é", "ß", "٣", "_", " "])
def test_non_ascii_alnum_rejected(ch):
    assert isalnum(ch) is False


def test_int_and_str_agree():
    for code in range(256):
        ch = chr(code)
        assert isalpha(code) == isalpha(ch)
        assert isprint(code) == isprint(ch)
        assert isascii(code) == isascii(ch)


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_matches_printable_range():
    printable = {code for code in range(256) if isprint(code)}
    assert printable == set(range(ord(" "), ord("~") + 1))


def test_case_mapping_ascii():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert tolower(upper) == lower
        assert toupper(ord(lower)) == ord(upper)
        assert tolower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", "É", "é"])
def test_case_mapping_leaves_others(ch):
    assert tolower(ch) == ch
    assert toupper(ch) == ch


def test_case_mapping_round_trip():
    for code in range(256):
        assert tolower(toupper(tolower(code))) == tolower(code)


def test_multichar_string_rejected():
    with pytest.raises(TypeError):
        isalpha("ab")