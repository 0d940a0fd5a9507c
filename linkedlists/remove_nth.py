"""Removing the n-th node counted from the end of a list."""

from __future__ import annotations

from typing import Iterator, Optional

from linkedlists.singly import Node


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _check(n: int, size: int) -> None:
    if not 1 <= n <= size:
        raise IndexError(f"cannot remove node {n} from the end of a list of {size}")


def remove_nth_from_end_by_count(head: Optional[Node], n: int) -> Optional[Node]:
    """Count the nodes, then unlink the n-th one from the end.

    Raises IndexError unless 1 <= n <= the length of the list.
    """
    if head is None:
        return None
    nodes = list(_nodes(head))
    _check(n, len(nodes))
    if n == len(nodes):
        return head.next
    before = nodes[len(nodes) - n - 1]
    before.next = before.next.next
    return head


def remove_nth_from_end(head: Optional[Node], n: int) -> Optional[Node]:
    """Unlink the n-th node from the end in one pass with two pointers.

    Raises IndexError unless 1 <= n <= the length of the list.
    """
    if head is None:
        return None
    if n < 1:
        raise IndexError(f"cannot remove node {n} from the end")
    fast: Optional[Node] = head
    for _ in range(n):
        if fast is None:
            raise IndexError(f"cannot remove node {n} from the end of a shorter list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head