from __future__ import annotations
from typing import List, Tuple

from .geometry import Coord, DIRS, add, in_bounds
from .occupancy import OccupancyMap, is_snake

# Candidate order decides ties in the selector.
MOVE_ORDER: Tuple[str, ...] = ("right", "left", "up", "down")


def legal_moves(head: Coord, width: int, height: int, occupancy: OccupancyMap) -> List[str]:
    """Moves from ``head`` onto an in-bounds cell no snake occupies.

    An enclosed head gives an empty list.
    """
    moves = []
    for name in MOVE_ORDER:
        x, y = add(head, DIRS[name])
        if in_bounds(x, y, width, height) and not is_snake(occupancy, x, y):
            moves.append(name)
    return moves
