import pytest

from puzzlekit.linked_list import ListNode, from_values, remove_elements, to_values


@pytest.mark.parametrize(
    "values, val, expected",
    [
        ([1, 2, 6, 3, 4, 5, 6], 6, [1, 2, 3, 4, 5]),
        ([7, 7, 7, 7], 7, []),
        ([1, 2, 2, 1], 2, [1, 1]),
    ],
)
def test_remove_elements(values, val, expected):
    result = remove_elements(from_values(values), val)
    assert result == from_values(expected)
    assert to_values(result) == expected


def test_remove_elements_all_gone_is_none():
    assert remove_elements(from_values([7, 7]), 7) is None
    assert to_values(remove_elements(None, 1)) == []


def test_remove_elements_nothing_matches():
    assert to_values(remove_elements(from_values([1, 2, 3]), 9)) == [1, 2, 3]


@pytest.mark.parametrize("values", [[], [1], [5, 4, 3, 2, 1], [0, 0, 0]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_links_nodes():
    head = from_values([1, 2])
    assert head == ListNode(1, ListNode(2))
    assert list(head) == [1, 2]


def test_from_values_empty():
    assert from_values([]) is None
    assert to_values(None) == []