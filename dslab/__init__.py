"""Classic data structures and algorithms: sorts, stacks, queues, lists, hashing and trees."""

__version__ = "0.1.0"