"""Array puzzles: searching, counting, partitioning and interval work."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Iterable, MutableSequence, Sequence


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in ``nums``, whose n+1 values lie in 1..n."""
    if len(nums) < 2:
        raise ValueError("at least two values are needed")
    tortoise = hare = nums[0]
    while True:
        tortoise = nums[tortoise]
        hare = nums[nums[hare]]
        if tortoise == hare:
            break
    tortoise = nums[0]
    while tortoise != hare:
        tortoise = nums[tortoise]
        hare = nums[hare]
    return hare


def h_index(citations: Sequence[int]) -> int:
    """Return the h-index of citation counts sorted in ascending order."""
    count = len(citations)
    low, high = 0, count
    while low < high:
        mid = (low + high) // 2
        if citations[mid] >= count - mid:
            high = mid
        else:
            low = mid + 1
    return count - low


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would go."""
    return bisect_left(nums, target)


def single_number(nums: Iterable[int]) -> int:
    """Return the 32-bit value that appears once when every other appears three times."""
    values = list(nums)
    result = 0
    for bit in range(32):
        if sum((value >> bit) & 1 for value in values) % 3:
            result |= 1 << bit
    return result - (1 << 32) if result & (1 << 31) else result


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1


def reconstruct_queue(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue from (height, taller-or-equal-in-front) pairs."""
    ordered = sorted(([p[0], p[1]] for p in people), key=lambda p: (-p[0], p[1]))
    queue: list[list[int]] = []
    for person in ordered:
        queue.insert(person[1], person)
    return queue


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a sequence of characters in place."""
    chars.reverse()


def two_city_sched_cost(costs: Sequence[Sequence[int]]) -> int:
    """Return the least cost of sending half the people to each of two cities."""
    half = len(costs) // 2
    order = [
        index
        for _, index in sorted(
            ((cost[0] - cost[1], index) for index, cost in enumerate(costs)),
            reverse=True,
        )
    ]
    to_second = sum(costs[i][1] for i in order[:half])
    to_first = sum(costs[i][0] for i in order[half:2 * half])
    return to_second + to_first


def find_max_length(nums: Iterable[int]) -> int:
    """Return the length of the longest run holding as many 0s as 1s."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(nums):
        balance += -1 if value == 0 else 1
        if balance in first_seen:
            best = max(best, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return best


def majority_element(nums: Iterable[int]) -> int:
    """Return the value that fills more than half of ``nums``."""
    count = 0
    candidate = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def _kadane(values: Sequence[int]) -> int:
    best = values[0]
    current = 0
    for value in values:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def max_subarray_sum_circular(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray of a circular array."""
    if not nums:
        raise ValueError("nums must not be empty")
    straight = _kadane(nums)
    if all(value < 0 for value in nums):
        return straight
    wrapped = sum(nums) + _kadane([-value for value in nums])
    return max(straight, wrapped)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the single value in a sorted array where all others come in pairs."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        mid -= mid % 2
        if nums[mid] == nums[mid + 1]:
            low = mid + 2
        else:
            high = mid
    return nums[low]


def interval_intersection(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the intersections of two sorted lists of disjoint closed intervals."""
    result: list[list[int]] = []
    i = j = 0
    while i < len(a) and j < len(b):
        low = max(a[i][0], b[j][0])
        high = min(a[i][1], b[j][1])
        if low <= high:
            result.append([low, high])
        if a[i][1] < b[j][1]:
            i += 1
        else:
            j += 1
    return result


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin, nearest first."""
    if not 0 <= k <= len(points):
        raise ValueError("k must be between 0 and the number of points")
    ranked = sorted(
        range(len(points)),
        key=lambda i: (points[i][0] ** 2 + points[i][1] ** 2, i),
    )
    return [[points[i][0], points[i][1]] for i in ranked[:k]]


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Return the first bad version among 1..n, or -1 if none is bad."""
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        if is_bad_version(mid):
            if mid == 1 or not is_bad_version(mid - 1):
                return mid
            high = mid - 1
        else:
            low = mid + 1
    return -1