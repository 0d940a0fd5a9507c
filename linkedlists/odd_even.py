"""Grouping the nodes at odd positions before those at even positions."""

from __future__ import annotations

from typing import Iterator, Optional

from linkedlists.singly import Node


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def odd_even_by_values(head: Optional[Node]) -> Optional[Node]:
    """Rewrite the values so odd positions come first, keeping the links."""
    if head is None or head.next is None:
        return head
    values = list(head)
    reordered = values[0::2] + values[1::2]
    for node, value in zip(_nodes(head), reordered):
        node.data = value
    return head


def odd_even(head: Optional[Node]) -> Optional[Node]:
    """Relink the nodes so odd positions come first, then even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head