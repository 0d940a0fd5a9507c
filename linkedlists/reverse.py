"""Reversing a singly linked list three ways."""

from __future__ import annotations

from typing import Iterator, Optional

from linkedlists.singly import Node


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def reverse_by_values(head: Optional[Node]) -> Optional[Node]:
    """Reverse the order of the values, leaving the links as they are."""
    stack = [node.data for node in _nodes(head)]
    for node in _nodes(head):
        node.data = stack.pop()
    return head


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the links iteratively and return the new head."""
    prev: Optional[Node] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the links recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head