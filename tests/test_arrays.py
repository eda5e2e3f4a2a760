import pytest

from puzzlekit.arrays import (
    build_array,
    can_be_increasing,
    change,
    is_covered,
    max_area,
    max_points,
    merge_triplets,
    min_pair_sum,
    peak_index_in_mountain_array,
    rob,
)


def test_max_area_two_walls_scores_zero():
    assert max_area([5, 7]) == 0


def test_max_area_three_equal_walls():
    assert max_area([3, 3, 3]) == 3


def test_max_area_empty_raises():
    with pytest.raises(ValueError):
        max_area([])


def test_max_points_diagonal():
    assert max_points([[1, 1], [2, 2], [3, 3]]) == 3


def test_max_points_mixed():
    assert max_points([[1, 1], [3, 2], [5, 3], [4, 1], [2, 3], [1, 4]]) == 4


def test_max_points_two_points():
    assert max_points([[0, 0], [5, 9]]) == 2


def test_max_points_single_point():
    assert max_points([[4, 4]]) == 1


def test_max_points_vertical_and_opposite_directions():
    assert max_points([[0, 0], [0, 5], [0, -3], [1, 1]]) == 3


def test_max_points_duplicate_raises():
    with pytest.raises(ValueError):
        max_points([[1, 1], [1, 1], [2, 2]])


@pytest.mark.parametrize("nums, expected", [([1, 2, 3, 1], 4), ([2, 7, 9, 3, 1], 12), ([], 0)])
def test_rob(nums, expected):
    assert rob(nums) == expected


def test_change():
    assert change(5, [1, 2, 5]) == 4


def test_change_zero_amount():
    assert change(0, [3]) == 1


def test_change_impossible():
    assert change(3, [2]) == 0


def test_change_negative_amount_raises():
    with pytest.raises(ValueError):
        change(-1, [1])


def test_min_pair_sum():
    assert min_pair_sum([3, 5, 4, 2, 4, 6]) == 8


def test_min_pair_sum_empty():
    assert min_pair_sum([]) == 0


@pytest.mark.parametrize(
    "ranges, left, right, expected",
    [
        ([[1, 2], [3, 4], [5, 6]], 2, 5, True),
        ([[1, 10], [10, 20]], 21, 21, False),
        (
            [[36, 50], [14, 28], [4, 31], [24, 37], [13, 36], [27, 33], [23, 32], [23, 27], [1, 35]],
            35,
            40,
            True,
        ),
    ],
)
def test_is_covered(ranges, left, right, expected):
    assert is_covered(ranges, left, right) is expected


def test_merge_triplets_false():
    assert merge_triplets([[3, 4, 5], [4, 5, 6]], [3, 2, 5]) is False


def test_merge_triplets_true():
    assert merge_triplets([[2, 5, 3], [1, 8, 4], [1, 7, 5]], [2, 7, 5]) is True


def test_build_array():
    assert build_array([0, 2, 1, 5, 3, 4]) == [0, 1, 2, 4, 5, 3]


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([2, 3, 1, 2], False),
        ([1, 1, 1], False),
        ([1, 2, 3], True),
        ([1, 2, 10, 5, 7], True),
        ([100, 21, 100], True),
        ([100, 21, 3], False),
        ([541, 783, 433, 744], False),
        ([105, 924, 32, 968], True),
    ],
)
def test_can_be_increasing(nums, expected):
    assert can_be_increasing(nums) is expected


def test_can_be_increasing_empty_raises():
    with pytest.raises(ValueError):
        can_be_increasing([])


@pytest.mark.parametrize(
    "arr, expected",
    [
        ([0, 1, 0], 1),
        ([1, 3, 2], 1),
        ([3, 4, 5, 1], 2),
        ([0, 10, 5, 2], 1),
        ([0, 2, 1, 0], 1),
        (
            [1, 57, 58, 74, 88, 93, 98, 97, 96, 91, 90, 78, 77, 74, 71, 68, 61, 50, 42, 38, 35, 34,
             26, 20, 15, 14, 5, 4, 2],
            6,
        ),
        ([18, 29, 38, 59, 98, 100, 99, 98, 90], 5),
        ([24, 69, 100, 99, 79, 78, 67, 36, 26, 19], 2),
    ],
)
def test_peak_index_in_mountain_array(arr, expected):
    assert peak_index_in_mountain_array(arr) == expected