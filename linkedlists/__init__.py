"""Singly and doubly linked list nodes and classic linked list algorithms."""

__version__ = "0.1.0"
__all__ = [
    "singly",
    "doubly",
    "add_numbers",
    "odd_even",
    "sort012",
    "remove_nth",
    "reverse",
]