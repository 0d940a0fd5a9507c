"""Adding two non-negative numbers stored as reversed digit lists."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from linkedlists.singly import Node


def add_two_numbers(l1: Optional[Node], l2: Optional[Node]) -> Optional[Node]:
    """Add two numbers whose digits are stored least significant first.

    Returns the head of a new list holding the digits of the sum, least
    significant first, or None when both inputs are empty.
    """
    dummy = Node(-1)
    tail = dummy
    carry = 0
    digits_a = iter(l1) if l1 is not None else iter(())
    digits_b = iter(l2) if l2 is not None else iter(())
    for a, b in zip_longest(digits_a, digits_b, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        tail.next = Node(digit)
        tail = tail.next
    if carry:
        tail.next = Node(carry)
    return dummy.next