"""Grid and graph puzzles: region capture, scheduling, judges, fills and bipartition."""

from __future__ import annotations

from collections import deque
from typing import Iterable, MutableSequence, Sequence


def _neighbours(i: int, j: int, rows: int, cols: int):
    for di, dj in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        ni, nj = i + di, j + dj
        if 0 <= ni < rows and 0 <= nj < cols:
            yield ni, nj


def capture_regions(board: MutableSequence[MutableSequence[str]]) -> None:
    """Turn every ``"O"`` region not touching the border into ``"X"``, in place."""
    if not board:
        return
    rows, cols = len(board), len(board[0])
    border = [(i, j) for i in range(rows) for j in (0, cols - 1)]
    border += [(i, j) for j in range(cols) for i in (0, rows - 1)]
    stack = [(i, j) for i, j in border if board[i][j] == "O"]
    while stack:
        i, j = stack.pop()
        if board[i][j] != "O":
            continue
        board[i][j] = "P"
        stack.extend(
            (ni, nj)
            for ni, nj in _neighbours(i, j, rows, cols)
            if board[ni][nj] == "O"
        )
    for row in board:
        for j, cell in enumerate(row):
            if cell == "O":
                row[j] = "X"
            elif cell == "P":
                row[j] = "O"


def _check_range(value: int, low: int, high: int, what: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{what} {value} is outside {low}..{high}")


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken given (course, prerequisite) pairs."""
    dependants: list[list[int]] = [[] for _ in range(num_courses)]
    waiting = [0] * num_courses
    for course, required in prerequisites:
        _check_range(course, 0, num_courses - 1, "course")
        _check_range(required, 0, num_courses - 1, "course")
        dependants[required].append(course)
        waiting[course] += 1
    ready = deque(c for c in range(num_courses) if waiting[c] == 0)
    taken = 0
    while ready:
        course = ready.popleft()
        taken += 1
        for follower in dependants[course]:
            waiting[follower] -= 1
            if waiting[follower] == 0:
                ready.append(follower)
    return taken == num_courses


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """Return the person trusted by everyone else who trusts nobody, or -1."""
    incoming = [0] * (n + 1)
    outgoing = [0] * (n + 1)
    for truster, trusted in trust:
        _check_range(truster, 1, n, "person")
        _check_range(trusted, 1, n, "person")
        outgoing[truster] += 1
        incoming[trusted] += 1
    return next(
        (p for p in range(1, n + 1) if outgoing[p] == 0 and incoming[p] == n - 1),
        -1,
    )


def flood_fill(
    image: MutableSequence[MutableSequence[int]], sr: int, sc: int, new_color: int
) -> MutableSequence[MutableSequence[int]]:
    """Recolour the region around (sr, sc) in place and return the image."""
    rows = len(image)
    cols = len(image[0]) if rows else 0
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError("start pixel is outside the image")
    start = image[sr][sc]
    if start == new_color:
        return image
    stack = [(sr, sc)]
    while stack:
        i, j = stack.pop()
        if image[i][j] != start:
            continue
        image[i][j] = new_color
        stack.extend(
            (ni, nj)
            for ni, nj in _neighbours(i, j, rows, cols)
            if image[ni][nj] == start
        )
    return image


def possible_bipartition(n: int, dislikes: Iterable[Sequence[int]]) -> bool:
    """Tell whether people 1..n split into two groups with no dislike inside one."""
    adjacent: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in dislikes:
        _check_range(a, 1, n, "person")
        _check_range(b, 1, n, "person")
        adjacent[a].append(b)
        adjacent[b].append(a)
    color = [0] * (n + 1)
    for start in range(1, n + 1):
        if color[start]:
            continue
        color[start] = 1
        queue = deque([start])
        while queue:
            person = queue.popleft()
            for other in adjacent[person]:
                if color[other] == color[person]:
                    return False
                if color[other] == 0:
                    color[other] = -color[person]
                    queue.append(other)
    return True