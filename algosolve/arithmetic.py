"""Integer and geometry checks."""

from __future__ import annotations

from math import isqrt
from typing import Iterable, Sequence


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` below its highest set bit; 0 gives 1."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return 1
    return ((1 << num.bit_length()) - 1) ^ num


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of an integer."""
    return num >= 0 and isqrt(num) ** 2 == num


def check_straight_line(coordinates: Iterable[Sequence[int]]) -> bool:
    """Tell whether all points lie on one straight line."""
    points = [(point[0], point[1]) for point in coordinates]
    if len(points) < 2:
        raise ValueError("at least two points are needed")
    (x0, y0), (x1, y1) = points[0], points[1]
    dx, dy = x1 - x0, y1 - y0
    return all(dx * (y - y0) == dy * (x - x0) for x, y in points[2:])