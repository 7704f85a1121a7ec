"""
Per-cell desirability scores.

Food radiates a score that halves with every step of Manhattan distance.
Snake bodies and the cells around enemy heads are wiped to zero, and every
cell loses half its score for each side that is a wall or a snake, so
pockets and corridors look worse than open ground.
"""
from __future__ import annotations
from typing import List, Tuple
import logging

from .geometry import Coord, in_bounds, manhattan
from .models import Snapshot
from .occupancy import OccupancyMap, empty_grid, is_snake

logger = logging.getLogger(__name__)

FOOD_RADIUS = 5
FOOD_POINTS = 2 ** (FOOD_RADIUS * 2)

# left, up, right, down; halving floors at each step so the order matters
ADJACENT: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# indexed [x][y]
ScoreMap = List[List[int]]


def food_value(distance: int) -> int:
    if distance == 0:
        return FOOD_POINTS
    return FOOD_POINTS // (2 ** distance)


def add_food(scores: ScoreMap, food: List[Coord], width: int, height: int) -> None:
    # Overlapping food keeps the strongest pull instead of whichever came last.
    for f in food:
        for i in range(f[0] - FOOD_RADIUS, f[0] + FOOD_RADIUS + 1):
            for j in range(f[1] - FOOD_RADIUS, f[1] + FOOD_RADIUS + 1):
                if in_bounds(i, j, width, height):
                    value = food_value(manhattan(f, (i, j)))
                    if value > scores[i][j]:
                        scores[i][j] = value


def clear_snakes(scores: ScoreMap, snapshot: Snapshot) -> None:
    width, height = snapshot.board.width, snapshot.board.height
    for x, y in snapshot.you.body:
        scores[x][y] = 0
    for snake in snapshot.others():
        for x, y in snake.body:
            scores[x][y] = 0

        # an enemy head can step into any of these next turn
        hx, hy = snake.head
        for i in range(hx - 1, hx + 2):
            for j in range(hy - 1, hy + 2):
                if in_bounds(i, j, width, height):
                    scores[i][j] = 0


def decay_blocked(scores: ScoreMap, occupancy: OccupancyMap, width: int, height: int) -> None:
    for i in range(width):
        for j in range(height):
            blocked = 0
            for dx, dy in ADJACENT:
                x, y = i + dx, j + dy
                if not in_bounds(x, y, width, height) or is_snake(occupancy, x, y):
                    scores[i][j] //= 2
                    blocked += 1
            if blocked == len(ADJACENT):
                scores[i][j] = 0


def score_board(snapshot: Snapshot, occupancy: OccupancyMap) -> ScoreMap:
    width, height = snapshot.board.width, snapshot.board.height
    scores: ScoreMap = empty_grid(width, height, 0)

    add_food(scores, snapshot.board.food, width, height)
    clear_snakes(scores, snapshot)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("After snake head avoidance\n%s", format_grid(scores))

    decay_blocked(scores, occupancy, width, height)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("After out of bound/snake decrease\n%s", format_grid(scores))
    return scores


def format_grid(grid: List[List]) -> str:
    """Render an [x][y] grid with the top row first, tab-separated."""
    width = len(grid)
    height = len(grid[0]) if width else 0
    rows = []
    for j in range(height - 1, -1, -1):
        rows.append("\t".join(str(grid[i][j]) for i in range(width)))
    return "\n".join(rows)
