"""Puzzles solved with running sums: pair sums, subarray sums and candy days."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

__all__ = [
    "two_sum",
    "num_submatrix_sum_target",
    "subarray_sum",
    "check_subarray_sum",
    "find_max_length",
    "can_eat",
    "count_pairs",
]

_MOD = 1_000_000_007


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair of values that add up to ``target``.

    The first index is the latest earlier occurrence of the partner value.
    """
    seen: dict[int, int] = {}
    for idx, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return [partner, idx]
        seen[num] = idx
    raise ValueError("no two values add up to the target")


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose values sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = 0
    found = 0
    for value in nums:
        total += value
        found += prefix_counts[total - k]
        prefix_counts[total] += 1
    return found


def num_submatrix_sum_target(matrix: Sequence[Sequence[int]], target: int) -> int:
    """Number of non-empty submatrices whose cells sum to ``target``."""
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("matrix must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    found = 0
    for top in range(len(rows)):
        column_sums = [0] * width
        for row in rows[top:]:
            column_sums = [total + cell for total, cell in zip(column_sums, row)]
            found += subarray_sum(column_sums, target)
    return found


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder that takes the sign of ``value``, as in truncating division."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """True if a subarray of at least two values sums to a multiple of ``k``."""
    if len(nums) < 2:
        return False
    first_seen: dict[int, int] = {0: -1}
    remainder = 0
    for idx, value in enumerate(nums):
        remainder = _truncated_remainder(remainder + value, k)
        previous = first_seen.get(remainder)
        if previous is None:
            first_seen[remainder] = idx
        elif idx - previous >= 2:
            return True
    return False


def find_max_length(nums: Sequence[int]) -> int:
    """Length of the longest subarray holding equally many zeros and ones."""
    if any(value not in (0, 1) for value in nums):
        raise ValueError("nums may only hold zeros and ones")
    if len(nums) < 2:
        return 0
    if len(nums) == 2:
        return 2 if nums[0] + nums[1] == 1 else 0
    first_seen: dict[int, int] = {0: -1}
    balance = 0
    best = 0
    for idx, value in enumerate(nums):
        balance += 1 if value else -1
        start = first_seen.setdefault(balance, idx)
        best = max(best, idx - start)
    return best


def can_eat(candies_count: Sequence[int], queries: Sequence[Sequence[int]]) -> list[bool]:
    """For each ``[type, day, daily_cap]`` query, whether that candy can be eaten that day."""
    prefix = list(accumulate(candies_count, initial=1))
    answers = []
    for favorite_type, favorite_day, daily_cap in queries:
        days = favorite_day + 1
        most_eaten = days * daily_cap
        least_eaten = days
        answers.append(
            most_eaten > prefix[favorite_type] and least_eaten < prefix[favorite_type + 1]
        )
    return answers


def count_pairs(deliciousness: Sequence[int]) -> int:
    """Number of pairs whose sum is a power of two, modulo 1e9+7."""
    if not deliciousness:
        raise ValueError("deliciousness must not be empty")
    if any(value < 0 for value in deliciousness):
        raise ValueError("deliciousness values must not be negative")
    max_sum = max(deliciousness) * 2
    powers = list(takewhile_powers(max_sum))
    seen: Counter[int] = Counter()
    found = 0
    for value in deliciousness:
        for power in powers:
            if power >= value:
                found += seen[power - value]
                if found > _MOD:
                    found %= _MOD
        seen[value] += 1
    return found


def takewhile_powers(limit: int):
    """Yield the powers of two from 1 up to and including ``limit``."""
    power = 1
    while power <= limit:
        yield power
        power <<= 1