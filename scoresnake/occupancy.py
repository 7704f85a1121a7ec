"""Occupancy grid: which cells hold a snake, and whose."""
from __future__ import annotations
from typing import List

from .models import Snapshot

EMPTY = ""
MY_BODY = "myBody"
MY_HEAD = "myHead"
BODY = "body"
HEAD = "head"

SNAKE_PARTS = frozenset({MY_BODY, MY_HEAD, BODY, HEAD})

# indexed [x][y]
OccupancyMap = List[List[str]]


def empty_grid(width: int, height: int, fill):
    return [[fill] * height for _ in range(width)]


def build_occupancy(snapshot: Snapshot) -> OccupancyMap:
    """Mark our own segments first, then every other snake in board order.

    When segments of different snakes share a cell the later write wins.
    """
    board = snapshot.board
    grid = empty_grid(board.width, board.height, EMPTY)

    you = snapshot.you
    for x, y in you.body:
        grid[x][y] = MY_BODY
    grid[you.head[0]][you.head[1]] = MY_HEAD

    for snake in snapshot.others():
        for x, y in snake.body:
            grid[x][y] = BODY
        grid[snake.head[0]][snake.head[1]] = HEAD
    return grid


def is_snake(grid: OccupancyMap, x: int, y: int) -> bool:
    return grid[x][y] in SNAKE_PARTS
