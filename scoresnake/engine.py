"""
Single-ply move decision.

decide_move() is a pure function of the snapshot: each call allocates its
own occupancy and score grids, so concurrent requests share nothing.
"""
from __future__ import annotations
from typing import Dict, List
import logging

from .geometry import Coord, DIRS, add
from .models import Snapshot, parse_snapshot
from .moves import legal_moves
from .occupancy import build_occupancy
from .scoring import ScoreMap, score_board

logger = logging.getLogger(__name__)

FALLBACK_MOVE = "up"


def select_move(scores: ScoreMap, moves: List[str], head: Coord) -> str:
    # Boxed in; any move loses.
    if not moves:
        return FALLBACK_MOVE

    best_score = -1
    best_move = moves[0]
    for move in moves:
        x, y = add(head, DIRS[move])
        score = scores[x][y]
        logger.debug("Current direction: %s  Current score: %d  Test direction: %s  Test score: %d",
                     best_move, best_score, move, score)
        if score > best_score:
            best_score = score
            best_move = move
    return best_move


def decide_move(snapshot: Snapshot) -> str:
    """Pick a move for ``snapshot.you``. Raises InvalidSnapshotError."""
    snapshot.validate()
    board = snapshot.board
    head = snapshot.you.head

    occupancy = build_occupancy(snapshot)
    moves = legal_moves(head, board.width, board.height, occupancy)
    logger.debug("Possible moves: %s", moves)

    scores = score_board(snapshot, occupancy)
    return select_move(scores, moves, head)


def decide_move_payload(payload: Dict) -> str:
    """Parse a decoded ``/move`` body and decide. Raises InvalidSnapshotError."""
    return decide_move(parse_snapshot(payload))
