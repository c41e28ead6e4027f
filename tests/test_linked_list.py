import pytest

from algosolve.linked_list import (
    ListNode,
    add_two_numbers,
    build_list,
    delete_middle,
    delete_node,
    detect_cycle,
    get_intersection_node,
    list_values,
    merge_two_lists,
    middle_node,
    odd_even_list,
    remove_nth_from_end,
    reverse_list,
)


def _nodes(head):
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


def _digits_to_int(head):
    return int("".join(str(d) for d in reversed(list_values(head))) or "0")


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [5, 5, 0, -1]])
def test_build_and_list_values_round_trip(values):
    assert list_values(build_list(values)) == values


def test_iter_yields_values():
    head = build_list([4, 8, 15])
    assert list(head) == [4, 8, 15]


def test_detect_cycle_finds_start():
    head = build_list([3, 2, 0, -4])
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert detect_cycle(head) is nodes[1]


def test_detect_cycle_whole_list():
    head = build_list([1, 2])
    nodes = _nodes(head)
    nodes[-1].next = head
    assert detect_cycle(head) is head


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_detect_cycle_none(values):
    assert detect_cycle(build_list(values)) is None


def test_intersection_found():
    shared = build_list([8, 4, 5])
    a = ListNode(4, ListNode(1, shared))
    b = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert get_intersection_node(a, b) is shared


def test_intersection_absent():
    a = build_list([2, 6, 4])
    b = build_list([1, 5])
    assert get_intersection_node(a, b) is None
    assert get_intersection_node(None, b) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    index = len(values) - n
    expected = values[:index] + values[index + 1:]
    assert list_values(remove_nth_from_end(build_list(values), n)) == expected


def test_remove_only_node():
    assert remove_nth_from_end(build_list([1]), 1) is None


def test_remove_nth_empty():
    assert remove_nth_from_end(None, 1) is None


@pytest.mark.parametrize("n", [0, 6])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3, 4, 5]), n)


@pytest.mark.parametrize(
    "a,b", [([2, 4, 3], [5, 6, 4]), ([0], [0]), ([9] * 7, [9] * 4), ([1], [])]
)
def test_add_two_numbers_sums(a, b):
    l1, l2 = build_list(a), build_list(b)
    total = _digits_to_int(l1) + _digits_to_int(l2)
    result = add_two_numbers(l1, l2)
    assert _digits_to_int(result) == total
    assert all(0 <= d <= 9 for d in list_values(result))


def test_add_two_numbers_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert list_values(result) == [7, 0, 8]


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize(
    "a,b", [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5], [1, 2, 3])]
)
def test_merge_two_lists_sorted(a, b):
    assert list_values(merge_two_lists(build_list(a), build_list(b))) == sorted(a + b)


def test_merge_ties_take_second_list_first():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


@pytest.mark.parametrize("values", [[1, 3, 4, 7, 1, 2, 6], [1, 2, 3, 4], [2, 1]])
def test_delete_middle(values):
    mid = len(values) // 2
    expected = values[:mid] + values[mid + 1:]
    assert list_values(delete_middle(build_list(values))) == expected


@pytest.mark.parametrize("values", [[], [1]])
def test_delete_middle_short(values):
    assert delete_middle(build_list(values)) is None


def test_delete_node():
    head = build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert list_values(head) == [4, 1, 9]


def test_delete_node_tail_raises():
    head = build_list([4, 5])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [2, 1, 3, 5, 6, 4, 7]])
def test_odd_even_list(values):
    expected = values[0::2] + values[1::2]
    assert list_values(odd_even_list(build_list(values))) == expected


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node(values):
    head = build_list(values)
    assert middle_node(head) is _nodes(head)[len(values) // 2]


def test_middle_node_empty():
    assert middle_node(None) is None