"""Array puzzles: two-pointer scans, dynamic programming and range checks."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

__all__ = [
    "max_area",
    "max_points",
    "rob",
    "change",
    "min_pair_sum",
    "is_covered",
    "merge_triplets",
    "build_array",
    "can_be_increasing",
    "peak_index_in_mountain_array",
]


def max_area(height: Sequence[int]) -> int:
    """Two-pointer container area scan.

    Each step moves the shorter wall inward and then scores that wall's height
    against the distance between the walls after the move.
    """
    if not height:
        raise ValueError("height must not be empty")
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        if height[left] < height[right]:
            wall = height[left]
            left += 1
        else:
            wall = height[right]
            right -= 1
        best = max(best, wall * (right - left))
    return best


def _direction(dx: int, dy: int) -> tuple[int, int]:
    """Reduced direction vector, identical for opposite directions."""
    g = math.gcd(dx, dy)
    if g == 0:
        raise ValueError("points must be distinct")
    dx, dy = dx // g, dy // g
    if dx < 0 or (dx == 0 and dy < 0):
        dx, dy = -dx, -dy
    return dx, dy


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Largest number of the given distinct points that lie on one line."""
    if len(points) == 2:
        return 2
    best = 1
    for i, (x1, y1) in enumerate(points):
        slopes = Counter(_direction(x1 - x2, y1 - y2) for x2, y2 in points[i + 1 :])
        best = max(best, max(slopes.values(), default=0) + 1)
    return best


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values taken with no two adjacent."""
    last, now = 0, 0
    for value in nums:
        last, now = now, max(now, last + value)
    return now


def change(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations that make up ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin < 0:
            raise ValueError("coin values must not be negative")
        for j in range(coin, amount + 1):
            ways[j] += ways[j - coin]
    return ways[amount]


def min_pair_sum(nums: Sequence[int]) -> int:
    """Minimised largest pair sum when the values are paired up."""
    ordered = sorted(nums)
    half = len(ordered) // 2
    return max(
        (low + high for low, high in zip(ordered[:half], reversed(ordered))),
        default=0,
    )


def is_covered(ranges: Sequence[Sequence[int]], left: int, right: int) -> bool:
    """True if the ranges, taken in order, close the gap ``[left, right]``."""
    for start, end in ranges:
        if start <= left <= end:
            left = end + 1
        if start <= right <= end:
            right = start - 1
        if left > right:
            return True
    return False


def merge_triplets(triplets: Sequence[Sequence[int]], target: Sequence[int]) -> bool:
    """True if element-wise maxima of some triplets can reach ``target``."""
    goal = list(target)
    merged = [0, 0, 0]
    for triplet in triplets:
        if all(t <= g for t, g in zip(triplet, goal)):
            merged = [max(t, m) for t, m in zip(triplet, merged)]
        if merged == goal:
            return True
    return False


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ``[nums[n] for n in nums]``."""
    return [nums[n] for n in nums]


def can_be_increasing(nums: Sequence[int]) -> bool:
    """True if removing at most one element leaves a strictly increasing sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    kept = [nums[0]]
    rest = iter(nums[1:])
    for value in rest:
        if kept[0] < value:
            kept.append(value)
            break
        kept[0] = value
    for value in rest:
        if kept[-2] < value:
            if kept[-1] < value:
                kept.append(value)
            else:
                kept[-1] = value
    return len(nums) - len(kept) < 2


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain array, found by a shrinking-step search."""
    idx = len(arr) // 2
    prev = len(arr)
    while 0 < idx < len(arr) - 1:
        if arr[idx - 1] < arr[idx] > arr[idx + 1]:
            break
        step = abs(prev - idx) // 2 or 1
        prev = idx
        if arr[idx - 1] < arr[idx] < arr[idx + 1]:
            idx += step
        else:
            if step > idx:
                raise ValueError("not a mountain array")
            idx -= step
    return idx