import pytest

from algosolve.graphs import (
    can_finish,
    capture_regions,
    find_judge,
    flood_fill,
    possible_bipartition,
)


def _board(rows):
    return [list(row) for row in rows]


def test_capture_regions_example():
    board = _board(["XXXX", "XOOX", "XXOX", "XOXX"])
    capture_regions(board)
    assert board == _board(["XXXX", "XXXX", "XXXX", "XOXX"])


def test_capture_regions_enclosed_single():
    board = _board(["XXX", "XOX", "XXX"])
    capture_regions(board)
    assert board == _board(["XXX", "XXX", "XXX"])


def test_capture_regions_border_connected_kept():
    rows = ["OOO", "OXO", "OOO"]
    board = _board(rows)
    capture_regions(board)
    assert board == _board(rows)


def test_capture_regions_empty():
    board = []
    capture_regions(board)
    assert board == []


@pytest.mark.parametrize(
    "num_courses, prerequisites, expected",
    [
        (2, [[1, 0]], True),
        (2, [[1, 0], [0, 1]], False),
        (1, [[0, 0]], False),
        (3, [], True),
        (4, [[1, 0], [2, 1], [3, 2], [1, 3]], False),
        (4, [[1, 0], [2, 0], [3, 1], [3, 2]], True),
    ],
)
def test_can_finish(num_courses, prerequisites, expected):
    assert can_finish(num_courses, prerequisites) is expected


def test_can_finish_rejects_unknown_course():
    with pytest.raises(ValueError):
        can_finish(2, [[2, 0]])


@pytest.mark.parametrize(
    "n, trust, expected",
    [
        (2, [[1, 2]], 2),
        (3, [[1, 3], [2, 3]], 3),
        (3, [[1, 3], [2, 3], [3, 1]], -1),
        (3, [[1, 2], [2, 3]], -1),
        (1, [], 1),
    ],
)
def test_find_judge(n, trust, expected):
    assert find_judge(n, trust) == expected


def test_find_judge_rejects_unknown_person():
    with pytest.raises(ValueError):
        find_judge(2, [[1, 3]])


def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    result = flood_fill(image, 1, 1, 2)
    assert result is image
    assert result == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_same_color_leaves_image():
    image = [[0, 0, 0], [0, 1, 1]]
    assert flood_fill(image, 1, 1, 1) == [[0, 0, 0], [0, 1, 1]]


def test_flood_fill_out_of_range():
    with pytest.raises(IndexError):
        flood_fill([[1]], 1, 0, 2)


@pytest.mark.parametrize(
    "n, dislikes, expected",
    [
        (4, [[1, 2], [1, 3], [2, 4]], True),
        (3, [[1, 2], [1, 3], [2, 3]], False),
        (5, [[1, 2], [2, 3], [3, 4], [4, 5], [1, 5]], False),
        (4, [[1, 2], [2, 3], [3, 4], [4, 1]], True),
        (3, [], True),
    ],
)
def test_possible_bipartition(n, dislikes, expected):
    assert possible_bipartition(n, dislikes) is expected


def test_possible_bipartition_rejects_unknown_person():
    with pytest.raises(ValueError):
        possible_bipartition(2, [[0, 1]])