import pytest

from dslab.sorting import (
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

SAMPLES = [
    [10, 9, 8, 7, 6, 5, 1, 2, 3, 4],
    [],
    [1],
    [2, 1],
    [3, 3, 1, 2, 2, 1],
    [5, -1, 0, -7, 12, 3, 3],
    list(range(20)),
    list(range(20, 0, -1)),
    ["pear", "apple", "fig", "banana"],
]


def test_source_array():
    data = [10, 9, 8, 7, 6, 5, 1, 2, 3, 4]
    expected = list(range(1, 11))
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert shell_sort(data) == expected
    assert heap_sort(data) == expected


@pytest.mark.parametrize("sample", SAMPLES)
def test_matches_builtin_sorted(sample):
    expected = sorted(sample)
    assert insertion_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert shell_sort(sample) == expected
    assert heap_sort(sample) == expected


def test_input_not_modified():
    data = [4, 2, 3, 1]
    assert insertion_sort(data) == [1, 2, 3, 4]
    assert selection_sort(data) == [1, 2, 3, 4]
    assert merge_sort(data) == [1, 2, 3, 4]
    assert quick_sort(data) == [1, 2, 3, 4]
    assert shell_sort(data) == [1, 2, 3, 4]
    assert heap_sort(data) == [1, 2, 3, 4]
    assert data == [4, 2, 3, 1]


def test_accepts_any_iterable():
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert selection_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert shell_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert heap_sort(x for x in (3, 1, 2)) == [1, 2, 3]


def test_merge_sort_is_stable():
    records = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, record):
            self.record = record

        def __le__(self, other):
            return self.record[0] <= other.record[0]

        def __lt__(self, other):
            return self.record[0] < other.record[0]

        def __gt__(self, other):
            return self.record[0] > other.record[0]

    result = [k.record for k in merge_sort(Key(r) for r in records)]
    assert result == sorted(records, key=lambda r: r[0])