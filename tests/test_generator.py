import random

from sequence import random_array, parse_array_text


def test_random_array_bounds_and_length():
    values = random_array(200, rng=random.Random(7))
    assert len(values) == 200
    assert all(isinstance(v, int) and 20 <= v < 500 for v in values)


def test_random_array_zero_length():
    assert random_array(0) == []


def test_parse_array_text_keeps_finite_numbers():
    assert parse_array_text("5, 3, 8.5, 1") == [5, 3, 8.5, 1]
    assert parse_array_text(" -2,0 , 1e2") == [-2, 0, 100]


def test_parse_array_text_drops_garbage():
    assert parse_array_text("4, abc, , inf, nan, -inf, 2") == [4, 2]
    assert parse_array_text("") == []
    assert parse_array_text("x, y") == []


def test_parse_array_text_integral_values_are_ints():
    values = parse_array_text("3.0, 4")
    assert values == [3, 4]
    assert all(isinstance(v, int) for v in values)
