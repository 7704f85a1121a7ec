"""
Snapshot data models and parsing of Battlesnake API v1 payloads.

A snapshot is rebuilt from every request; nothing here is cached between
turns. Parsing validates the payload up front so the engine never has to
second-guess coordinates it indexes grids with.
"""
from __future__ import annotations
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from .geometry import Coord, in_bounds


class InvalidSnapshotError(ValueError):
    """The payload does not describe a playable board."""


# ---------------------------------
# Data models
# ---------------------------------
@dataclass(frozen=True)
class Snake:
    id: str
    body: List[Coord]  # head first
    head: Coord
    health: int = 100
    length: int = 0
    name: str = ""
    shout: str = ""


@dataclass(frozen=True)
class Board:
    width: int
    height: int
    food: List[Coord] = field(default_factory=list)
    snakes: List[Snake] = field(default_factory=list)


@dataclass(frozen=True)
class Snapshot:
    board: Board
    you: Snake
    game_id: str = ""
    turn: int = 0

    def others(self) -> List[Snake]:
        """Every snake on the board except ours, in board order."""
        return [s for s in self.board.snakes if s.id != self.you.id]

    def validate(self) -> None:
        w, h = self.board.width, self.board.height
        if w <= 0 or h <= 0:
            raise InvalidSnapshotError(f"board dimensions must be positive, got {w}x{h}")

        for f in self.board.food:
            if not in_bounds(f[0], f[1], w, h):
                raise InvalidSnapshotError(f"food {f} is outside the {w}x{h} board")

        for snake in [self.you] + self.board.snakes:
            if not snake.body:
                raise InvalidSnapshotError(f"snake {snake.id!r} has an empty body")
            if snake.head != snake.body[0]:
                raise InvalidSnapshotError(
                    f"snake {snake.id!r} head {snake.head} does not match first body segment {snake.body[0]}"
                )
            for c in snake.body:
                if not in_bounds(c[0], c[1], w, h):
                    raise InvalidSnapshotError(f"snake {snake.id!r} segment {c} is outside the {w}x{h} board")


# ---------------------------------
# Parsing
# ---------------------------------

def is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_int(value, name: str) -> int:
    if not is_int(value):
        raise InvalidSnapshotError(f"{name} must be an integer, got {value!r}")
    return value


def parse_coord(raw: Dict) -> Coord:
    x, y = raw["x"], raw["y"]
    if not is_int(x) or not is_int(y):
        raise InvalidSnapshotError(f"coordinate must be a pair of integers, got {raw!r}")
    return (x, y)


def parse_snake(raw: Dict) -> Snake:
    body = [parse_coord(p) for p in raw["body"]]
    head_raw: Optional[Dict] = raw.get("head")
    if head_raw is None:
        if not body:
            raise InvalidSnapshotError(f"snake {raw.get('id')!r} has neither head nor body")
        head = body[0]
    else:
        head = parse_coord(head_raw)
    return Snake(
        id=str(raw["id"]),
        body=body,
        head=head,
        health=parse_int(raw.get("health", 100), "health"),
        length=parse_int(raw.get("length", len(body)), "length"),
        name=raw.get("name", "") or "",
        shout=raw.get("shout", "") or "",
    )


def parse_snapshot(payload: Dict) -> Snapshot:
    """Build and validate a Snapshot from a decoded ``/move`` request body.

    Raises InvalidSnapshotError for missing keys, wrong types or a board the
    engine cannot index safely.
    """
    if not isinstance(payload, dict):
        raise InvalidSnapshotError("request body must be a JSON object")
    try:
        b = payload["board"]
        board = Board(
            width=parse_int(b["width"], "width"),
            height=parse_int(b["height"], "height"),
            food=[parse_coord(f) for f in b.get("food") or []],
            snakes=[parse_snake(s) for s in b.get("snakes") or []],
        )
        you = parse_snake(payload["you"])
        game = payload.get("game") or {}
        snapshot = Snapshot(
            board=board,
            you=you,
            game_id=str(game.get("id", "")),
            turn=parse_int(payload.get("turn", 0), "turn"),
        )
    except InvalidSnapshotError:
        raise
    except KeyError as e:
        raise InvalidSnapshotError(f"missing field {e.args[0]!r}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidSnapshotError(f"malformed snapshot: {e}") from e

    snapshot.validate()
    return snapshot
