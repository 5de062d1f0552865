from dslab.search import linear_search


def test_source_example():
    assert linear_search([2, 3, 4, 10, 40], 10) == 3


def test_missing_returns_minus_one():
    assert linear_search([2, 3, 4, 10, 40], 7) == -1


def test_empty():
    assert linear_search([], 1) == -1


def test_first_occurrence_wins():
    assert linear_search([1, 2, 1], 1) == 0


def test_found_index_points_at_target():
    data = ["a", "b", "c", "d"]
    for target in data:
        assert data[linear_search(data, target)] == target


def test_accepts_generator():
    assert linear_search((x * x for x in range(5)), 9) == 3