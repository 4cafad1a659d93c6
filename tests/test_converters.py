import pytest

from libft.converters import atoi, atoi_base, itoa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n\v\f\r+7", 7),
        ("", 0),
        ("abc", 0),
        ("-0", 0),
    ],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_overflow_of_accumulator():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2147483647


def test_atoi_round_trip_with_itoa():
    for n in (0, 1, -1, 123456, -987654, 2147483647, -2147483648):
        assert atoi(itoa(n)) == n


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(None)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 65535, 123456789])
def test_atoi_base_hex_round_trip(n):
    assert atoi_base(format(n, "x"), 16) == n
    assert atoi_base(format(n, "X"), 16) == n
    assert atoi_base("-" + format(n, "x"), 16) == -n


@pytest.mark.parametrize("base", [2, 3, 5, 7, 10])
def test_atoi_base_small_bases_round_trip(base):
    for n in (0, 1, 9, 100, 1000):
        digits = ""
        value = n
        while value:
            digits = str(value % base) + digits
            value //= base
        assert atoi_base(digits or "0", base) == n


def test_atoi_base_stops_at_invalid_digit():
    assert atoi_base("12z34", 10) == atoi_base("12", 10)
    assert atoi_base("1g", 16) == atoi_base("1", 16)
    assert atoi_base("", 16) == 0


def test_atoi_base_inclusive_limit():
    assert atoi_base("8", 8) == 8


def test_atoi_base_errors():
    with pytest.raises(TypeError):
        atoi_base(None, 10)
    with pytest.raises(ValueError):
        atoi_base("1", 1)


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")