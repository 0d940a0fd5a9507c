"""Sorting a list whose values are 0, 1 and 2."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Optional

from linkedlists.singly import Node


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def sort_by_counting(head: Optional[Node]) -> Optional[Node]:
    """Count the 0s, 1s and 2s and rewrite the values in order.

    Only as many leading nodes are rewritten as there are 0s, 1s and 2s;
    any nodes left over keep their values.
    """
    counts = Counter(node.data for node in _nodes(head) if node.data in (0, 1, 2))
    fill = iter([0] * counts[0] + [1] * counts[1] + [2] * counts[2])
    for node, value in zip(_nodes(head), fill):
        node.data = value
    return head


def sort_by_relinking(head: Optional[Node]) -> Optional[Node]:
    """Relink the nodes into runs of 0s, 1s and 2s and return the new head.

    Nodes holding any other value are dropped from the result.
    """
    if head is None or head.next is None:
        return head
    dummies = {value: Node(-1) for value in (0, 1, 2)}
    tails = dict(dummies)
    for node in list(_nodes(head)):
        if node.data in tails:
            tails[node.data].next = node
            tails[node.data] = node
    zero_head, one_head, two_head = (dummies[v].next for v in (0, 1, 2))
    tails[0].next = one_head if one_head is not None else two_head
    tails[1].next = two_head
    tails[2].next = None
    return dummies[0].next