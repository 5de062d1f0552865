import pytest

from dslab.hash_table import CollisionError, HashTable, is_prime, next_prime


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-3, 0, 1, 4, 9, 15, 100])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", range(0, 40))
def test_next_prime_is_prime_and_not_smaller(n):
    p = next_prime(n)
    assert is_prime(p)
    assert p >= n


def test_next_prime_keeps_odd_prime():
    assert next_prime(13) == 13


def test_default_capacity_is_prime_after_ten():
    assert HashTable().capacity == 11


def test_insert_counts_repeats():
    table = HashTable()
    assert table.insert(3) == 1
    assert table.insert(3) == 2
    assert len(table) == 1
    assert 3 in table


def test_slot_contents():
    table = HashTable()
    table.insert(3)
    table.insert(3)
    slots = table.slots()
    assert len(slots) == table.capacity
    assert slots[3] == (3, 2)
    assert sum(slot is not None for slot in slots) == 1


def test_collision_raises():
    table = HashTable()
    table.insert(3)
    with pytest.raises(CollisionError):
        table.insert(3 + table.capacity)
    assert len(table) == 1
    assert 3 + table.capacity not in table


def test_remove():
    table = HashTable()
    table.insert(5)
    table.insert(6)
    table.remove(5)
    assert 5 not in table
    assert 6 in table
    assert len(table) == 1


def test_remove_missing_raises():
    table = HashTable()
    with pytest.raises(KeyError):
        table.remove(4)
    table.insert(4)
    with pytest.raises(KeyError):
        table.remove(4 + table.capacity)


def test_slot_reusable_after_remove():
    table = HashTable()
    table.insert(2)
    table.remove(2)
    assert table.insert(2 + table.capacity) == 1
    assert 2 + table.capacity in table


def test_non_int_not_contained():
    assert "a" not in HashTable()