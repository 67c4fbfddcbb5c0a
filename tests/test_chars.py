import pytest

from solong.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

SOURCE_NUMBERS = [123, -456, 0, 2147483647, -2147483648]


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_semantics(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == ch.isprintable()
    assert is_ascii(code) is True


@pytest.mark.parametrize("code", [-1, 128, 200, 255, 1000])
def test_non_ascii_codes_are_not_classified(code):
    assert is_ascii(code) is False
    assert is_alpha(code) is False
    assert is_digit(code) is False
    assert is_alnum(code) is False
    assert is_print(code) is False


def test_accepts_single_character_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("_") is False
    assert is_print("\n") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_rejects_non_character_types():
    with pytest.raises(TypeError):
        is_digit(3.5)


@pytest.mark.parametrize("code", range(128))
def test_case_conversion_agrees_with_str_methods(code):
    ch = chr(code)
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()
    assert to_upper(code) == ord(ch.upper())
    assert to_lower(code) == ord(ch.lower())


@pytest.mark.parametrize("code", [200, 255, -5])
def test_case_conversion_leaves_other_codes(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


def test_case_round_trip():
    for letter in "abcxyz":
        assert to_lower(to_upper(letter)) == letter


@pytest.mark.parametrize("n", SOURCE_NUMBERS)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


@pytest.mark.parametrize("n", SOURCE_NUMBERS)
def test_atoi_skips_whitespace_and_stops_at_non_digit(n):
    assert atoi(" \t\n\v\f\r" + str(n) + "xyz 99") == n


def test_atoi_accepts_explicit_plus():
    assert atoi("+123") == 123


def test_atoi_allows_only_one_sign():
    assert atoi("+-123") == 0
    assert atoi("--456") == 0


def test_atoi_without_digits():
    assert atoi("") == 0
    assert atoi("   abc") == 0


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("123")