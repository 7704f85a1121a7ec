from .engine import decide_move, decide_move_payload
from .models import Board, InvalidSnapshotError, Snake, Snapshot, parse_snapshot

__all__ = [
    "Board",
    "InvalidSnapshotError",
    "Snake",
    "Snapshot",
    "decide_move",
    "decide_move_payload",
    "parse_snapshot",
]
