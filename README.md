# linkedlists

This package provides linked list nodes written in plain Python, along with the
classic algorithms that work on them. It has no dependencies.

Each operation takes the head node of a list and returns the new head. It
returns `None` when the list becomes empty. A few operations are exceptions:
they work on a node in place and return `None`.

## Modules

### `linkedlists.singly`

The `Node` dataclass has the fields `data` and `next`. Iterating a node yields
the values from that node to the end of the list.

- `from_iterable(values)` builds a list and returns its head. It raises
  `ValueError` if there are no values.
- `to_list(head)`, `length(head)` and `format_list(head)` return the values,
  the node count, and the values joined by spaces.
- `remove_head(head)`, `remove_tail(head)`, `delete_kth(head, k)` and
  `remove_value(head, value)` remove a node. Positions are 1-based. A `k` that
  is out of range leaves the list unchanged.
- `insert_head(head, value)`, `insert_tail(head, value)`,
  `insert_at_position(head, value, k)` and
  `insert_before_value(head, value, target)` add a node.

### `linkedlists.doubly`

The `DNode` dataclass has the fields `data`, `next` and `back`. Iterating a
node yields the values forward.

- `from_iterable(values)` and `to_list(head)` work as they do for singly
  linked lists.
- `delete_head(head)` and `delete_tail(head)` remove the first or last node.
  Both return `None` for a one-node list.
- `remove_kth(head, k)` removes the node at position `k`. It raises
  `IndexError` when the list has no such position.
- `delete_node(node)` unlinks a node that is not the head. It raises
  `ValueError` when given the head.
- `insert_before_head(head, value)`, `insert_before_tail(head, value)` and
  `insert_before_kth(head, value, k)` add a node. `insert_before_kth` raises
  `IndexError` for a missing position.
- `insert_before_node(node, value)` inserts a node before a node that is not
  the head. It raises `ValueError` when given the head.
- `reverse(head)` reverses the list by swapping links and returns the new head.
- `reverse_values(head)` reverses the values and leaves the links as they are.

### `linkedlists.add_numbers`

`add_two_numbers(l1, l2)` adds two non-negative numbers whose digits are stored
least significant first. It returns a new list of the digits of the sum. It
returns `None` when both inputs are empty.

### `linkedlists.odd_even`

These functions place the nodes at odd positions first and the nodes at even
positions after them.

- `odd_even(head)` relinks the nodes.
- `odd_even_by_values(head)` rewrites the values and leaves the links as they
  are.

### `linkedlists.sort012`

These functions sort a list that holds 0s, 1s and 2s.

- `sort_by_relinking(head)` relinks the nodes into runs and returns the new
  head. Nodes that hold any other value are dropped from the result.
- `sort_by_counting(head)` rewrites the values in place.

### `linkedlists.remove_nth`

These functions remove the n-th node counted from the end. Both raise
`IndexError` unless `1 <= n <= length`.

- `remove_nth_from_end(head, n)` uses two pointers.
- `remove_nth_from_end_by_count(head, n)` counts the nodes first.

### `linkedlists.reverse`

These functions reverse a singly linked list.

- `reverse(head)` relinks the nodes iteratively.
- `reverse_recursive(head)` relinks the nodes recursively.
- `reverse_by_values(head)` rewrites the values in place.

## Example

```python
from linkedlists import singly, doubly
from linkedlists.add_numbers import add_two_numbers
from linkedlists.odd_even import odd_even

head = singly.from_iterable([21, 4, 6, 8, 10])
head = singly.insert_before_value(head, 69, 6)
print(singly.format_list(head))      # 21 4 69 6 8 10

dhead = doubly.from_iterable([21, 4, 6, 8, 10])
print(doubly.to_list(doubly.reverse(dhead)))   # [10, 8, 6, 4, 21]

total = add_two_numbers(singly.from_iterable([2, 4, 3]),
                        singly.from_iterable([5, 6, 4]))
print(list(total))                    # [7, 0, 8]

print(list(odd_even(singly.from_iterable([1, 2, 3, 4, 5]))))  # [1, 3, 5, 2, 4]
```

## What it does not do

This package is a library only. It has no command-line program. It does not
provide a list container class: you work with head nodes and the functions
above.

## Tests

```
pip install -e .[test]
pytest
```