import pytest

from solong.printf import printf, sprintf


def test_plain_text_is_unchanged():
    assert sprintf("Toodaloo!\n") == "Toodaloo!\n"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


@pytest.mark.parametrize("pointer", [None, 0])
def test_null_pointer(pointer):
    assert sprintf("%p", pointer) == "(nil)"


@pytest.mark.parametrize("address", [1, 4096, 0xDEADBEEF, 2**64 - 1])
def test_pointer_is_lowercase_hex(address):
    out = sprintf("%p", address)
    assert out.startswith("0x")
    assert out[2:] == out[2:].lower()
    assert int(out, 16) == address


def test_percent_sign():
    assert sprintf("100%%") == "100%"


def test_string_conversion():
    assert sprintf("Steps: %s!", "many") == "Steps: many!"


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_decimal_wraps_to_int():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 10, 255, 65535, 2**32 - 1])
def test_hex_round_trip(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()


def test_character_from_string_and_code():
    assert sprintf("%c", "P") == "P"
    assert sprintf("%c", ord("E")) == sprintf("%c", "E")


def test_unknown_conversion_prints_nothing():
    assert sprintf("a%qb", 1) == "ab"


def test_trailing_percent_prints_nothing():
    assert sprintf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "seven")


def test_none_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_printf_writes_and_returns_length(capsys):
    count = printf("Collectables left: %i\n", 3)
    out = capsys.readouterr().out
    assert out == sprintf("Collectables left: %i\n", 3)
    assert count == len(out)