"""Coordinate helpers shared by every stage of the move decision."""
from __future__ import annotations
from typing import Dict, Tuple

Coord = Tuple[int, int]

DIRS: Dict[str, Coord] = {
    "up": (0, 1),
    "down": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
}


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def add(a: Coord, b: Coord) -> Coord:
    return (a[0] + b[0], a[1] + b[1])
