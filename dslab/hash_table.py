"""A direct-addressed hash table that counts key insertions."""

from __future__ import annotations

from typing import Optional

__all__ = ["CollisionError", "is_prime", "next_prime", "HashTable"]


class CollisionError(Exception):
    """Raised when a key hashes to a slot held by a different key."""


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, n))


def next_prime(n: int) -> int:
    """Return the first prime found stepping through odd numbers from n.

    An even n is first bumped to n + 1.
    """
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


class HashTable:
    """Fixed-size table with one slot per hash value and no probing.

    Each slot holds a key together with the number of times it was inserted.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = next_prime(capacity)
        self._slots: list[Optional[tuple[int, int]]] = [None] * self.capacity
        self._size = 0

    def _index(self, key: int) -> int:
        return key % self.capacity

    def insert(self, key: int) -> int:
        """Insert key, or bump its count if present; return the new count."""
        index = self._index(key)
        slot = self._slots[index]
        if slot is None:
            self._slots[index] = (key, 1)
            self._size += 1
            return 1
        stored, count = slot
        if stored != key:
            raise CollisionError(f"key {key} collides with key {stored}")
        self._slots[index] = (key, count + 1)
        return count + 1

    def remove(self, key: int) -> None:
        """Remove key from the table; raise KeyError if it is absent."""
        index = self._index(key)
        slot = self._slots[index]
        if slot is None or slot[0] != key:
            raise KeyError(key)
        self._slots[index] = None
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        slot = self._slots[self._index(key)]
        return slot is not None and slot[0] == key

    def slots(self) -> list[Optional[tuple[int, int]]]:
        """Return every slot in order: None or a (key, count) pair."""
        return list(self._slots)

    def __repr__(self) -> str:
        occupied = {k: c for k, c in filter(None, self._slots)}
        return f"HashTable({occupied!r}, capacity={self.capacity})"