# pimplstack

Two small sequence containers with the same core interface:

- `pimplstack.vector.Vector` is a growable array. It tracks its capacity
  explicitly, and that capacity grows by a multiplicative coefficient.
- `pimplstack.linked_list.LinkedList` is a singly linked list.

## Installation

```
pip install pimplstack
```

## Shared interface

Both containers provide the following:

- `push_back(value)` and `push_front(value)`
- `insert(value, pos)`, which inserts one value before position `pos`
- `insert_values(values, pos)`, which inserts a sequence of values before `pos` and keeps their order
- `pop_back()` and `pop_front()`, which do nothing when the container is empty
- `erase(pos, count=1)`, which removes up to `count` values starting at `pos`
- `erase_between(begin_pos, end_pos)`, which removes the values in `[begin_pos, end_pos)`
- `clear()`
- `find(value)`, which returns the index of the first equal value, or `-1`
- `len()`, iteration, item reading and item assignment
- `copy()`, which returns an independent copy

```python
from pimplstack.vector import Vector
from pimplstack.linked_list import LinkedList

v = Vector([1.0, 2.0, 3.0, 4.0])
v.erase_between(1, 3)          # v holds 1.0, 4.0
v.insert_values([7.0, 8.0], 1) # v holds 1.0, 7.0, 8.0, 4.0
v.find(8.0)                    # 2
v.find(9.0)                    # -1

lst = LinkedList([5.0, 6.0])
lst.push_front(4.0)
list(lst)                      # [4.0, 5.0, 6.0]
```

### Indexing

Indices wrap around modulo the length, so `v[len(v)]` is `v[0]` and `v[-1]`
is the last value. Reading or assigning an item of an empty container raises
`IndexError`.

### Errors and ignored calls

These calls raise `ValueError`:

- `insert` or `insert_values` at a position greater than the length, or at a negative position
- `insert_values` with `None` or an empty sequence (a `LinkedList` may take
  another `LinkedList`, including an empty one)
- `erase_between` when `begin_pos` is negative or not less than `end_pos`

`erase` ignores a negative `count`, and also a position that is negative or
past the end. A `count` that reaches past the end removes values up to the end.

## Vector capacity

`Vector(values=None, coef=2.0)` starts with a capacity equal to the number of
initial values. When an insert needs more room, the capacity grows as follows:

1. An empty capacity starts from `int(coef)`.
2. The capacity is multiplied by `coef`, or increased by one when
   multiplying would not grow it.
3. Step 2 repeats until the values fit.

The following methods deal with capacity:

- `capacity()` returns the current capacity.
- `load_factor()` returns the growth coefficient.
- `reserve(n)` raises the capacity to `n` when `n` is larger.
- `shrink_to_fit()` lowers the capacity to the current length.

`clear()` keeps the capacity. `copy()` returns a vector whose capacity equals
its length.

## What this package does not include

The package provides only the two containers. It has no stack type and no
interface for choosing between the containers. You can get stack behaviour
from either container with `push_back`, `pop_back` and `c[len(c) - 1]`.