import string

import pytest

from libft.checks import (
    array_len,
    count_char,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
)

ASCII_RANGE = [chr(code) for code in range(128)]


def test_array_len_counts_until_none():
    items = ["a", "b"]
    assert array_len(items + [None, "c"]) == len(items)


def test_array_len_without_none_counts_everything():
    items = ["x", "y", "z", "w"]
    assert array_len(items) == len(items)


def test_array_len_empty():
    assert array_len([]) == 0


def test_count_char_matches_occurrences():
    text = "hello world"
    for ch in set(text):
        assert count_char(text, ch) == text.count(ch)


def test_count_char_absent_character():
    assert count_char("abc", "z") == 0


def test_count_char_rejects_multichar():
    with pytest.raises(ValueError):
        count_char("abc", "ab")


@pytest.mark.parametrize("ch", ASCII_RANGE)
def test_is_alpha_agrees_with_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII_RANGE)
def test_is_digit_agrees_with_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII_RANGE)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII_RANGE)
def test_is_print_agrees_with_printable_range(ch):
    assert is_print(ch) == (" " <= ch <= "~")


def test_checks_accept_integer_codes():
    for ch in ASCII_RANGE:
        assert is_alnum(ord(ch)) == is_alnum(ch)
        assert is_space(ord(ch)) == is_space(ch)


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert all(is_ascii(ch) for ch in ASCII_RANGE)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\v"])
def test_is_space_accepts_source_whitespace(ch):
    assert is_space(ch) is True


def test_is_space_excludes_form_feed_and_letters():
    assert is_space("\f") is False
    assert not any(is_space(ch) for ch in string.ascii_letters + string.digits)


def test_multichar_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)