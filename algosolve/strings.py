"""String puzzles: permutations, anagrams, address checks and digit removal."""

from __future__ import annotations

import re
from collections import Counter
from itertools import pairwise
from math import factorial
from typing import Iterator

_IPV4_PART = r"([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])"
_IPV4 = re.compile(rf"({_IPV4_PART}\.){{3}}{_IPV4_PART}")
_IPV6 = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}")


def get_permutation(n: int, k: int) -> str:
    """Return the k-th (1-based) permutation of 1..n in lexicographic order."""
    if n == 0:
        return " "
    if n < 0:
        raise ValueError("n must not be negative")
    if not 1 <= k <= factorial(n):
        raise ValueError(f"k must be between 1 and {n}!")
    remaining = list(range(1, n + 1))
    rank = k - 1
    parts = []
    for size in range(n, 0, -1):
        index, rank = divmod(rank, factorial(size - 1))
        parts.append(str(remaining.pop(index)))
    return "".join(parts)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def valid_ip_address(ip: str) -> str:
    """Classify ``ip`` as ``"IPv4"``, ``"IPv6"`` or ``"Neither"``."""
    if _IPV4.fullmatch(ip):
        return "IPv4"
    if _IPV6.fullmatch(ip):
        return "IPv6"
    return "Neither"


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose kind appears among the jewels."""
    kinds = set(jewels)
    return sum(stone in kinds for stone in stones)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be cut out of the magazine's letters."""
    return not Counter(ransom_note) - Counter(magazine)


def _anagram_starts(s: str, p: str) -> Iterator[int]:
    width = len(p)
    if width > len(s):
        return
    target = Counter(p)
    window = Counter(s[:width])
    for start in range(len(s) - width + 1):
        if start:
            window[s[start - 1]] -= 1
            window[s[start + width - 1]] += 1
        if window == target:
            yield start


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``."""
    return any(True for _ in _anagram_starts(s2, s1))


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices in ``s`` of every anagram of ``p``."""
    return list(_anagram_starts(s, p))


def first_uniq_char(s: str) -> int:
    """Return the index of the first non-repeating character, or -1."""
    counts = Counter(s)
    return next((i for i, char in enumerate(s) if counts[char] == 1), -1)


def frequency_sort(s: str) -> str:
    """Order characters by decreasing frequency, larger characters first on ties."""
    ordered = sorted(
        Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True
    )
    return "".join(char * count for char, count in ordered)


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    if not 0 <= k <= len(num):
        raise ValueError("k must be between 0 and the number of digits")
    if len(num) == k:
        return "0"
    for _ in range(k):
        peak = next(
            (i for i, (a, b) in enumerate(pairwise(num)) if a > b), len(num) - 1
        )
        num = num[:peak] + num[peak + 1:]
        num = num.lstrip("0") or "0"
    return num