"""Small containers: a randomized set, a weighted picker, a trie and a stock spanner."""

from __future__ import annotations

import random
from bisect import bisect_right
from itertools import accumulate
from typing import Iterable, Optional


class RandomizedSet:
    """A set with constant-time insert, remove and uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._positions: dict[int, int] = {}
        self._values: list[int] = []

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def insert(self, val: int) -> bool:
        """Add ``val``; return True if it was not already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return True if it was present."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen element."""
        if not self._values:
            raise IndexError("cannot choose from an empty set")
        return self._rng.choice(self._values)


class WeightedPicker:
    """Pick indices at random with probability proportional to their weight."""

    def __init__(
        self, weights: Iterable[int], rng: Optional[random.Random] = None
    ) -> None:
        self._prefix = list(accumulate(weights))
        if not self._prefix or self._prefix[-1] <= 0:
            raise ValueError("weights must be non-empty with a positive total")
        self._rng = rng if rng is not None else random.Random()

    def pick_index(self) -> int:
        """Return an index chosen according to the weights."""
        point = self._rng.randrange(self._prefix[-1])
        return bisect_right(self._prefix, point)


class _TrieNode:
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.is_end = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


class StockSpanner:
    """Report, for each price, how many consecutive days up to it were no higher."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record ``price`` and return its span."""
        span = 1
        while self._stack and price >= self._stack[-1][0]:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span