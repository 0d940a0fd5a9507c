import pytest

from linkedlists.singly import from_iterable, length, to_list
from linkedlists.sort012 import sort_by_counting, sort_by_relinking


@pytest.mark.parametrize("func", [sort_by_counting, sort_by_relinking])
def test_worked_example(func):
    head = from_iterable([0, 1, 0, 1, 2, 1, 2])
    assert to_list(func(head)) == [0, 0, 1, 1, 1, 2, 2]


@pytest.mark.parametrize("func", [sort_by_counting, sort_by_relinking])
@pytest.mark.parametrize(
    "values",
    [[2, 1, 0], [2, 2, 2], [1, 0], [2, 0, 2, 0], [1, 2, 1, 2, 1], [0]],
)
def test_result_is_sorted(func, values):
    result = to_list(func(from_iterable(values)))
    assert result == sorted(values)


@pytest.mark.parametrize("func", [sort_by_counting, sort_by_relinking])
def test_empty_list(func):
    assert func(None) is None


def test_counting_keeps_the_head_node():
    head = from_iterable([2, 0, 1])
    assert sort_by_counting(head) is head


def test_relinking_preserves_length():
    head = from_iterable([2, 1, 0, 2, 1, 0])
    assert length(sort_by_relinking(head)) == 6


def test_counting_leaves_other_values_at_the_end():
    head = from_iterable([2, 5, 0])
    assert to_list(sort_by_counting(head)) == [0, 2, 0]


def test_relinking_drops_other_values():
    head = from_iterable([2, 5, 0, 1])
    assert to_list(sort_by_relinking(head)) == [0, 1, 2]