import string

import pytest

from solong.chars import (
    is_sign,
    is_space,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("c", ASCII)
def test_isalpha_matches_ascii_letters(c):
    assert isalpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ASCII)
def test_isdigit_matches_ascii_digits(c):
    assert isdigit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ASCII)
def test_isalnum_is_letter_or_digit(c):
    assert isalnum(c) == (isalpha(c) or isdigit(c))


@pytest.mark.parametrize("c", ASCII)
def test_isprint_matches_printable(c):
    assert isprint(c) == c.isprintable()


@pytest.mark.parametrize("c", ASCII)
def test_is_space_matches_whitespace(c):
    assert is_space(c) == (c in string.whitespace)


@pytest.mark.parametrize("c", ASCII)
def test_is_sign_only_plus_and_minus(c):
    assert is_sign(c) == (c in "+-")


@pytest.mark.parametrize("c", ASCII)
def test_case_conversion_matches_str_methods(c):
    assert tolower(c) == c.lower()
    assert toupper(c) == c.upper()


@pytest.mark.parametrize("c", string.ascii_letters)
def test_case_round_trip(c):
    assert toupper(tolower(c)) == c.upper()
    assert tolower(toupper(c)) == c.lower()


def test_isascii_range_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)
    assert all(isascii(c) for c in ASCII)


def test_non_ascii_characters_are_not_classified():
    assert not isalpha("é")
    assert not isdigit("٣")
    assert not isprint("é")
    assert not isascii("é")


def test_non_ascii_case_is_unchanged():
    assert tolower("É") == "É"
    assert toupper("é") == "é"


def test_integer_codes_are_accepted_and_returned():
    assert isdigit(ord("5"))
    assert isalpha(ord("A"))
    assert tolower(ord("Q")) == ord("q")
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("1")) == ord("1")


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")


def test_wrong_types_are_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)
    with pytest.raises(TypeError):
        is_space(True)
    with pytest.raises(TypeError):
        toupper(None)