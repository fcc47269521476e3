import io

from utils.inputs import clamp_k, finite_or, finite_values, is_sorted, parse_array, parse_number, read_uploaded_text


def test_parse_array():
    assert parse_array("1, 3, x, 5") == [1, 3, 5]
    assert parse_array("1.5, inf, nan, , -2") == [1.5, -2]
    assert parse_array("") == []


def test_parse_number():
    assert parse_number("7") == 7
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number("abc") == 0
    assert parse_number("-inf") == 0


def test_coercion_helpers():
    assert finite_or(float("nan")) == 0
    assert finite_or(True) == 0
    assert finite_values([1, float("inf"), 2.0, None]) == [1, 2.0]
    assert clamp_k(2.9) == 2
    assert clamp_k(-1) == 0
    assert clamp_k(float("inf")) == 0
    assert is_sorted([1, 1, 2]) and is_sorted([]) and not is_sorted([2, 1])


def test_read_uploaded_text():
    assert read_uploaded_text(io.BytesIO("find the longest subarray".encode())) == "find the longest subarray"
    assert read_uploaded_text(None) == ""


def test_huge_ints_are_finite():
    big = 10 ** 400
    assert finite_or(big) == big
    assert finite_values([1, big, float("nan")]) == [1, big]
    assert clamp_k(big) == big
    assert parse_array("1, " + "9" * 400 + ", 3") == [1, int("9" * 400), 3]
