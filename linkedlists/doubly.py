"""Doubly linked list nodes: building, deleting, inserting and reversing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: int
    next: Optional[DNode] = field(default=None, repr=False)
    back: Optional[DNode] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[DNode] = self
        while node is not None:
            yield node.data
            node = node.next


def _nodes(head: Optional[DNode]) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: Optional[DNode], k: int) -> DNode:
    for position, node in enumerate(_nodes(head), start=1):
        if position == k:
            return node
    raise IndexError(f"position {k} is outside the list")


def from_iterable(values: Iterable[int]) -> DNode:
    """Build a doubly linked list holding ``values`` and return its head."""
    items = list(values)
    if not items:
        raise ValueError("cannot build a linked list from no values")
    head = DNode(items[0])
    prev = head
    for value in items[1:]:
        node = DNode(value, None, prev)
        prev.next = node
        prev = node
    return head


def to_list(head: Optional[DNode]) -> list[int]:
    """Return the values of the list as a Python list."""
    return [] if head is None else list(head)


def delete_head(head: Optional[DNode]) -> Optional[DNode]:
    """Drop the first node and return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.back = None
    head.next = None
    return new_head


def delete_tail(head: Optional[DNode]) -> Optional[DNode]:
    """Drop the last node and return the head."""
    if head is None or head.next is None:
        return None
    *_, tail = _nodes(head)
    tail.back.next = None
    tail.back = None
    return head


def remove_kth(head: Optional[DNode], k: int) -> Optional[DNode]:
    """Remove the node at 1-based position ``k``.

    Raises IndexError when the list has no such position.
    """
    if head is None:
        return None
    node = _node_at(head, k)
    prev, front = node.back, node.next
    if prev is None and front is None:
        return None
    if prev is None:
        return delete_head(head)
    if front is None:
        return delete_tail(head)
    prev.next = front
    front.back = prev
    node.next = node.back = None
    return head


def delete_node(node: DNode) -> None:
    """Unlink ``node`` from its list; it must not be the head."""
    prev, front = node.back, node.next
    if prev is None:
        raise ValueError("cannot delete the head node in place")
    prev.next = front
    if front is not None:
        front.back = prev
    node.next = node.back = None


def insert_before_head(head: Optional[DNode], value: int) -> DNode:
    """Put ``value`` in front of the list and return the new head."""
    node = DNode(value, head, None)
    if head is not None:
        head.back = node
    return node


def insert_before_tail(head: Optional[DNode], value: int) -> DNode:
    """Insert ``value`` just before the last node."""
    if head is None or head.next is None:
        return insert_before_head(head, value)
    *_, tail = _nodes(head)
    prev = tail.back
    node = DNode(value, tail, prev)
    prev.next = node
    tail.back = node
    return head


def insert_before_kth(head: Optional[DNode], value: int, k: int) -> DNode:
    """Insert ``value`` before the node at 1-based position ``k``.

    Raises IndexError when the list has no such position.
    """
    if k == 1:
        return insert_before_head(head, value)
    insert_before_node(_node_at(head, k), value)
    return head


def insert_before_node(node: DNode, value: int) -> None:
    """Insert ``value`` before ``node``, which must not be the head."""
    prev = node.back
    if prev is None:
        raise ValueError("cannot insert before the head node in place")
    new_node = DNode(value, node, prev)
    prev.next = new_node
    node.back = new_node


def reverse(head: Optional[DNode]) -> Optional[DNode]:
    """Reverse the list by swapping each node's links; return the new head."""
    new_head = head
    node = head
    while node is not None:
        node.next, node.back = node.back, node.next
        new_head = node
        node = node.back
    return new_head


def reverse_values(head: Optional[DNode]) -> Optional[DNode]:
    """Reverse the order of the values, leaving the links as they are."""
    nodes = list(_nodes(head))
    for node, value in zip(nodes, reversed([n.data for n in nodes])):
        node.data = value
    return head