import random

import pytest

from dslab.bst import BinarySearchTree

SAMPLE = [20, 5, 1, 15, 9, 7, 12, 30, 25, 40, 45, 42]


def test_inorder_is_sorted():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree) == sorted(SAMPLE)
    assert len(tree) == len(SAMPLE)


def test_sample_deletions():
    tree = BinarySearchTree(SAMPLE)
    remaining = set(SAMPLE)
    for value in (1, 40, 45, 9):
        assert tree.delete(value)
        remaining.discard(value)
        assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)


def test_delete_root_with_two_children():
    tree = BinarySearchTree(SAMPLE)
    assert tree.delete(20)
    assert 20 not in tree
    assert list(tree) == sorted(v for v in SAMPLE if v != 20)


def test_delete_absent_value():
    tree = BinarySearchTree(SAMPLE)
    assert not tree.delete(1000)
    assert list(tree) == sorted(SAMPLE)
    assert len(tree) == len(SAMPLE)


def test_contains():
    tree = BinarySearchTree(SAMPLE)
    assert all(value in tree for value in SAMPLE)
    assert 13 not in tree


def test_minimum_tracks_deletions():
    tree = BinarySearchTree(SAMPLE)
    assert tree.minimum() == min(SAMPLE)
    tree.delete(1)
    assert tree.minimum() == min(v for v in SAMPLE if v != 1)


def test_minimum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_duplicates_kept_and_removed_one_at_a_time():
    tree = BinarySearchTree([5, 5, 3])
    assert list(tree) == [3, 5, 5]
    assert tree.delete(5)
    assert list(tree) == [3, 5]


def test_random_inserts_and_deletes():
    rng = random.Random(7)
    values = rng.sample(range(1000), 200)
    tree = BinarySearchTree(values)
    removed = values[::3]
    for value in removed:
        assert tree.delete(value)
    assert list(tree) == sorted(set(values) - set(removed))