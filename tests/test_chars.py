import string

import pytest

from wireframe.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_letters_are_alpha(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", string.digits)
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


@pytest.mark.parametrize("ch", string.punctuation + " \t\n")
def test_non_alnum(ch):
    assert is_alnum(ch) is False
    assert is_alpha(ch) is False


def test_alnum_matches_union_over_ascii():
    for code in range(128):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_agrees_with_printable_ascii():
    for code in range(256):
        expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
        assert is_print(code) == expected


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_non_ascii_letters_unchanged():
    assert to_upper("é") == "é"
    assert to_lower(200) == 200


def test_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)