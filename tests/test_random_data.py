import random

import pytest

from embebidos.random_data import random_floats, random_ints, random_matrix


def test_random_floats_length_and_bounds():
    values = random_floats(100, 10.0, 40.0, random.Random(1))
    assert len(values) == 100
    assert all(10.0 <= v <= 40.0 for v in values)


def test_random_floats_have_two_decimals():
    values = random_floats(50, -5.0, 5.0, random.Random(2))
    assert all(abs(v * 100 - round(v * 100)) < 1e-6 for v in values)


def test_random_floats_reproducible_with_seed():
    first = random_floats(10, 0.0, 1.0, random.Random(3))
    second = random_floats(10, 0.0, 1.0, random.Random(3))
    assert len(first) == 10
    assert all(0.0 <= v <= 1.0 for v in first)
    assert first == second


def test_random_floats_empty_range_raises():
    with pytest.raises(ValueError):
        random_floats(5, 3.0, 3.0)


def test_random_floats_zero_count():
    assert random_floats(0, 0.0, 1.0) == []


def test_random_ints_inclusive_bounds():
    values = random_ints(1, 3, 300, random.Random(4))
    assert len(values) == 300
    assert set(values) == {1, 2, 3}


def test_random_ints_single_value_range():
    assert random_ints(7, 7, 4) == [7, 7, 7, 7]


def test_random_ints_inverted_range_raises():
    with pytest.raises(ValueError):
        random_ints(5, 1, 3)


def test_random_matrix_shape_and_bounds():
    matrix = random_matrix(-2, 2, 4, 3, random.Random(5))
    assert len(matrix) == 3
    assert all(len(row) == 4 for row in matrix)
    assert all(-2 <= v <= 2 for row in matrix for v in row)


def test_random_matrix_inverted_range_raises():
    with pytest.raises(ValueError):
        random_matrix(5, 1, 2, 2)