import pytest

from pushswap.textutils import atoi, check_args, split


@pytest.mark.parametrize("text", ["42", "0", "-17", "+8", "2147483647"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n-7") == -7


def test_atoi_stops_at_non_digit():
    assert atoi("  -7abc") == -7


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_large_positive_kept():
    assert atoi("99999999999") == 99999999999


def test_atoi_negative_overflow_clamps_far_below_int_range():
    result = atoi("-99999999999")
    assert result < -(2**31)
    assert result == atoi("-2147483649")


def test_atoi_int_min_is_exact():
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["1 2 3", "-5", "+5", "  12  ", "", "10-3"])
def test_check_args_accepts(text):
    assert check_args(text) is True


@pytest.mark.parametrize("text", ["1a", "-", "5-", "- 5", "+-5", "--5", "1\t2", "1.5"])
def test_check_args_rejects(text):
    assert check_args(text) is False


def test_split_drops_empty_pieces():
    assert split("  a  b ", " ") == ["a", "b"]


def test_split_empty_and_blank():
    assert split("", " ") == []
    assert split("     ", " ") == []


def test_split_round_trip():
    words = ["3", "-1", "20"]
    assert split(" ".join(words), " ") == words


def test_split_other_separator():
    assert split(",x,,y,", ",") == ["x", "y"]