"""Dynamic-programming counts over grids, sequences and integers."""

from __future__ import annotations

from math import isqrt
from typing import Callable, Iterable, Iterator, Sequence


def _square_sides(
    matrix: Iterable[Sequence[object]], filled: Callable[[object], bool]
) -> Iterator[list[int]]:
    """Yield, row by row, the side of the largest filled square ending at each cell."""
    previous: list[int] | None = None
    for row in matrix:
        current: list[int] = []
        for j, cell in enumerate(row):
            if not filled(cell):
                side = 0
            elif previous is None or j == 0:
                side = 1
            else:
                side = 1 + min(previous[j - 1], previous[j], current[j - 1])
            current.append(side)
        yield current
        previous = current


def maximal_square(matrix: Iterable[Sequence[str]]) -> int:
    """Return the area of the largest square made only of ``"1"`` cells."""
    side = max(
        (max(row, default=0) for row in _square_sides(matrix, lambda c: c == "1")),
        default=0,
    )
    return side * side


def count_squares(matrix: Iterable[Sequence[int]]) -> int:
    """Count the square submatrices made only of ones."""
    return sum(sum(row) for row in _square_sides(matrix, lambda c: c == 1))


def change(amount: int, coins: Iterable[int]) -> int:
    """Count the coin combinations that add up to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 4:
        return n
    best = list(range(n + 1))
    for total in range(4, n + 1):
        best[total] = 1 + min(
            best[total - root * root] for root in range(1, isqrt(total) + 1)
        )
    return best[n]


def num_trees(n: int) -> int:
    """Count the structurally distinct binary search trees on ``n`` keys."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1]
    for size in range(1, n + 1):
        counts.append(
            sum(counts[left] * counts[size - 1 - left] for left in range(size))
        )
    return counts[n]


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset where every pair divides one way, largest first."""
    if len(nums) < 2:
        return list(nums)
    values = sorted(nums)
    lengths = [1] * len(values)
    for i, value in enumerate(values):
        for j in range(i):
            if value % values[j] == 0:
                lengths[i] = max(lengths[i], lengths[j] + 1)
    target = max(lengths)
    result: list[int] = []
    for value, length in zip(reversed(values), reversed(lengths)):
        if length == target and (not result or result[-1] % value == 0):
            result.append(value)
            target -= 1
    return result


def max_uncrossed_lines(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the most equal-value pairs joinable without lines crossing."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b):
            if x == y:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance between two words."""
    previous = list(range(len(word2) + 1))
    for i, c1 in enumerate(word1, start=1):
        current = [i]
        for j, c2 in enumerate(word2, start=1):
            if c1 == c2:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def count_bits(num: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``num``."""
    if num < 0:
        raise ValueError("num must not be negative")
    counts = [0]
    for i in range(1, num + 1):
        counts.append(counts[i >> 1] + (i & 1))
    return counts