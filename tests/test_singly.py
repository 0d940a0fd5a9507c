import pytest

from linkedlists import singly

VALUES = [21, 4, 6, 8, 10]


@pytest.fixture
def head():
    return singly.from_iterable(VALUES)


def test_round_trip(head):
    assert singly.to_list(head) == VALUES


def test_iteration_yields_values(head):
    assert list(head) == VALUES
    assert head.data == VALUES[0]


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        singly.from_iterable([])


def test_length(head):
    assert singly.length(head) == len(VALUES)
    assert singly.length(None) == 0


def test_to_list_of_none():
    assert singly.to_list(None) == []


def test_format_list(head):
    assert singly.format_list(head) == " ".join(str(v) for v in VALUES)


def test_remove_head(head):
    assert singly.to_list(singly.remove_head(head)) == VALUES[1:]
    assert singly.remove_head(None) is None


def test_remove_tail(head):
    assert singly.to_list(singly.remove_tail(head)) == VALUES[:-1]


def test_remove_tail_of_single_node():
    assert singly.remove_tail(singly.from_iterable([7])) is None
    assert singly.remove_tail(None) is None


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_delete_kth(k):
    result = singly.delete_kth(singly.from_iterable(VALUES), k)
    assert singly.to_list(result) == VALUES[: k - 1] + VALUES[k:]


@pytest.mark.parametrize("k", [0, -1, len(VALUES) + 1, len(VALUES) + 5])
def test_delete_kth_out_of_range_keeps_list(k):
    result = singly.delete_kth(singly.from_iterable(VALUES), k)
    assert singly.to_list(result) == VALUES


def test_delete_kth_of_none():
    assert singly.delete_kth(None, 1) is None


@pytest.mark.parametrize("values,target", [([3, 5, 3], 3), ([5, 3, 7, 3], 3), (VALUES, 6)])
def test_remove_value_removes_first_occurrence(values, target):
    expected = list(values)
    expected.remove(target)
    result = singly.remove_value(singly.from_iterable(values), target)
    assert singly.to_list(result) == expected


def test_remove_missing_value_keeps_list(head):
    assert singly.to_list(singly.remove_value(head, 999)) == VALUES
    assert singly.remove_value(None, 1) is None


def test_insert_head(head):
    assert singly.to_list(singly.insert_head(head, 69)) == [69] + VALUES
    assert singly.to_list(singly.insert_head(None, 69)) == [69]


def test_insert_tail(head):
    assert singly.to_list(singly.insert_tail(head, 69)) == VALUES + [69]
    assert singly.to_list(singly.insert_tail(None, 69)) == [69]


@pytest.mark.parametrize("k", range(1, len(VALUES) + 2))
def test_insert_at_position(k):
    result = singly.insert_at_position(singly.from_iterable(VALUES), 69, k)
    assert singly.to_list(result) == VALUES[: k - 1] + [69] + VALUES[k - 1 :]


def test_insert_at_position_beyond_end_keeps_list(head):
    result = singly.insert_at_position(head, 69, len(VALUES) + 2)
    assert singly.to_list(result) == VALUES


def test_insert_at_position_into_empty():
    assert singly.to_list(singly.insert_at_position(None, 69, 3)) == [69]


def test_insert_before_value(head):
    result = singly.insert_before_value(head, 69, 6)
    index = VALUES.index(6)
    assert singly.to_list(result) == VALUES[:index] + [69] + VALUES[index:]


def test_insert_before_head_value(head):
    result = singly.insert_before_value(head, 69, VALUES[0])
    assert singly.to_list(result) == [69] + VALUES


def test_insert_before_missing_value_keeps_list(head):
    assert singly.to_list(singly.insert_before_value(head, 69, 999)) == VALUES
    assert singly.insert_before_value(None, 69, 6) is None