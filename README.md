# dslab

A small collection of classic data structures and algorithms, written in
plain Python with no runtime dependencies.

## Contents

| Module | What it offers |
| --- | --- |
| `dslab.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `shell_sort`, `heap_sort`; each takes any iterable and returns a new sorted list |
| `dslab.linear` | fixed-capacity `ArrayStack` and `ArrayQueue` (default capacity `SIZE`, 5), raising `StackOverflow`, `StackUnderflow`, `QueueFull`, `QueueEmpty` |
| `dslab.linked_list` | `SinglyLinkedList`, `DoublyLinkedList` (the latter also supports `reversed()`) |
| `dslab.search` | `linear_search`, returning the first matching index or `-1` |
| `dslab.text` | `count_letters` (non-space characters), `precedence`, `infix_to_postfix` |
| `dslab.rotation` | `left_rotate` |
| `dslab.hash_table` | `HashTable` with prime capacity and per-key insertion counts, `is_prime`, `next_prime`, `CollisionError` |
| `dslab.binary_tree` | `Node` with `insert_left` / `insert_right`, and `inorder`, `preorder`, `postorder` generators |
| `dslab.threaded_tree` | `ThreadedNode`, `make_threaded`, `leftmost`, and a stackless `inorder` |
| `dslab.bst` | `BinarySearchTree` (duplicates allowed, placed to the left) |
| `dslab.btree` | `BTree` with at most `MAX_KEYS` (3) keys per node, raising `DuplicateKeyError` |
| `dslab.avl` | `AVLTree` with `preorder()` and `height()` |
| `dslab.splay` | `SplayTree` with `search()` and `root_value()` |

## Installation

```
pip install .
```

## Examples

```python
from dslab.sorting import heap_sort
from dslab.text import infix_to_postfix
from dslab.search import linear_search
from dslab.rotation import left_rotate

heap_sort([10, 9, 8, 7, 6, 5, 1, 2, 3, 4])    # [1, 2, ..., 10]
infix_to_postfix("A+(B*C-(D/E^F)*G)*H")       # "ABC*DEF^/G*-H*+"
linear_search([2, 3, 4, 10, 40], 10)          # 3
left_rotate([1, 2, 3, 4, 5], 4)               # [5, 1, 2, 3, 4]
```

`infix_to_postfix` accepts single capital letters as operands and the
operators `+ - * / ^`; it raises `ValueError` on any other symbol or on
unbalanced parentheses.

Trees:

```python
from dslab.bst import BinarySearchTree
from dslab.avl import AVLTree
from dslab.splay import SplayTree

tree = BinarySearchTree([20, 5, 1, 15, 9, 7, 12, 30, 25, 40, 45, 42])
tree.delete(1)        # True
list(tree)            # values in ascending order
9 in tree             # True
tree.minimum()        # 5

avl = AVLTree([2, 1, 7, 4, 5, 3, 8])
list(avl.preorder())  # keys in pre-order
avl.height()          # number of levels
avl.insert(4)         # False: already present

splay = SplayTree([10, 20, 30])
splay.search(10)      # True, and 10 is now at the root
splay.root_value()    # 10
splay.delete(20)      # raises KeyError if absent
```

Bounded containers and the hash table raise instead of returning status codes:

```python
from dslab.linear import ArrayStack, StackUnderflow
from dslab.hash_table import HashTable, CollisionError

stack = ArrayStack()
stack.push(1)
stack.pop()           # 1
try:
    stack.pop()
except StackUnderflow:
    ...

table = HashTable()   # capacity 11, the first prime from 10
table.insert(3)       # 1
table.insert(3)       # 2: the key's insertion count
try:
    table.insert(14)  # same slot as 3
except CollisionError:
    ...
```

Note that `ArrayQueue` does not reuse slots freed by `dequeue`: once
`capacity` elements have been enqueued, it reports `QueueFull`.

## What this package does not do

It is a library only. It has no command-line program and no interactive
menus; the structures are driven from your own Python code.

## Running the tests

```
pip install .[test]
pytest
```