import pytest

from dslab.rotation import left_rotate


def test_sample():
    assert left_rotate([1, 2, 3, 4, 5], 4) == [5, 1, 2, 3, 4]


def test_zero_steps_unchanged():
    assert left_rotate([1, 2, 3], 0) == [1, 2, 3]


def test_negative_steps_unchanged():
    assert left_rotate([1, 2, 3], -2) == [1, 2, 3]


def test_empty():
    assert left_rotate([], 3) == []


@pytest.mark.parametrize("steps", range(0, 12))
def test_full_cycle_and_wraparound(steps):
    data = [1, 2, 3, 4, 5]
    assert left_rotate(data, steps) == left_rotate(data, steps % len(data))
    assert left_rotate(data, len(data)) == data


def test_composition():
    data = list("abcdefg")
    assert left_rotate(left_rotate(data, 2), 3) == left_rotate(data, 5)


def test_input_not_modified():
    data = [1, 2, 3]
    left_rotate(data, 1)
    assert data == [1, 2, 3]


def test_preserves_elements():
    data = [4, 1, 1, 9]
    assert sorted(left_rotate(data, 3)) == sorted(data)