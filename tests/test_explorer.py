from __future__ import annotations

import json

import pytest

from trapped_knight import PreconditionError, build_board, explore_trapped, walk
from trapped_knight.explorer import walk_report


def test_report_for_five_by_five():
    report = explore_trapped(4)
    assert report == {
        "size": 4,
        "start": [2, 2],
        "start_value": 1,
        "steps": 9,
        "trapped_at": [3, 2],
        "final_value": 8,
        "max_value_visited": 10,
        "max_value_at": [3, 4],
        "populated_cells": 10,
        "coverage": 1.0,
        "edge_contact": True,
    }


def test_report_when_trapped_at_start():
    report = explore_trapped(2)
    assert report["steps"] == 0
    assert report["trapped_at"] == [1, 1]
    assert report["final_value"] == 1
    assert report["max_value_visited"] == 1


def test_large_board_report_is_not_limited_by_edge():
    report = explore_trapped(100)
    assert report["final_value"] == 2084
    assert report["edge_contact"] is False
    assert 0 < report["coverage"] < 1
    json.dumps(report)


def test_report_rejects_bad_start():
    with pytest.raises(PreconditionError):
        explore_trapped(4, (9, 9))


@pytest.mark.parametrize("start", [(2,), (1, 2, 3), "22", 7, ("a", 1)])
def test_report_rejects_malformed_start(start):
    with pytest.raises(PreconditionError):
        explore_trapped(4, start)


def test_report_accepts_list_start():
    report = explore_trapped(4, [1, 1])
    assert report["start"] == [1, 1]
    assert report["start_value"] == 5


def test_walk_report_locates_highest_square():
    board = build_board(100)
    path = walk(board)
    report = walk_report(board, board.center, path)
    assert report["final_value"] == 2084
    r, c = report["max_value_at"]
    assert board.value_at((r, c)) == report["max_value_visited"]
    assert report == explore_trapped(100)


def test_walk_report_trapped_on_unnumbered_start():
    board = build_board(4)
    report = walk_report(board, (0, 0), walk(board, (0, 0)))
    assert report["start_value"] == 0
