"""Singly linked list nodes and the operations that build and reshape them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: int
    next: Optional[Node] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[Node] = self
        while node is not None:
            yield node.data
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> Node:
    """Build a list holding ``values`` in order and return its head."""
    items = list(values)
    if not items:
        raise ValueError("cannot build a linked list from no values")
    head = Node(items[0])
    current = head
    for value in items[1:]:
        current.next = Node(value)
        current = current.next
    return head


def to_list(head: Optional[Node]) -> list[int]:
    """Return the values of the list as a Python list."""
    return [] if head is None else list(head)


def length(head: Optional[Node]) -> int:
    """Count the nodes of the list."""
    return sum(1 for _ in _nodes(head))


def format_list(head: Optional[Node]) -> str:
    """Render the values separated by single spaces."""
    return " ".join(str(value) for value in to_list(head))


def remove_head(head: Optional[Node]) -> Optional[Node]:
    """Drop the first node and return the new head."""
    return None if head is None else head.next


def remove_tail(head: Optional[Node]) -> Optional[Node]:
    """Drop the last node and return the head."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def delete_kth(head: Optional[Node], k: int) -> Optional[Node]:
    """Remove the node at 1-based position ``k``; out-of-range ``k`` changes nothing."""
    if head is None:
        return None
    if k == 1:
        return head.next
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            if node.next is not None:
                node.next = node.next.next
            break
    return head


def remove_value(head: Optional[Node], value: int) -> Optional[Node]:
    """Remove the first node holding ``value``."""
    if head is None:
        return None
    if head.data == value:
        return head.next
    for node in _nodes(head):
        if node.next is not None and node.next.data == value:
            node.next = node.next.next
            break
    return head


def insert_head(head: Optional[Node], value: int) -> Node:
    """Put ``value`` in front of the list and return the new head."""
    return Node(value, head)


def insert_tail(head: Optional[Node], value: int) -> Node:
    """Append ``value`` at the end of the list."""
    if head is None:
        return Node(value)
    *_, tail = _nodes(head)
    tail.next = Node(value)
    return head


def insert_at_position(head: Optional[Node], value: int, k: int) -> Optional[Node]:
    """Insert ``value`` so that it becomes the node at 1-based position ``k``.

    A position beyond one past the end leaves the list unchanged.
    """
    if head is None or k == 1:
        return Node(value, head)
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            node.next = Node(value, node.next)
            break
    return head


def insert_before_value(head: Optional[Node], value: int, target: int) -> Optional[Node]:
    """Insert ``value`` before the first node holding ``target``."""
    if head is None:
        return None
    if head.data == target:
        return Node(value, head)
    for node in _nodes(head):
        if node.next is not None and node.next.data == target:
            node.next = Node(value, node.next)
            break
    return head