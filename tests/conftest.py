import pytest

from scoresnake.config import Settings
from scoresnake.models import parse_snapshot
from scoresnake.server import create_app


def _coords(points):
    return [{"x": x, "y": y} for x, y in points]


def _snake(snake_id, body, health=90):
    return {
        "id": snake_id,
        "name": snake_id,
        "health": health,
        "body": _coords(body),
        "head": {"x": body[0][0], "y": body[0][1]},
        "length": len(body),
        "shout": "",
    }


@pytest.fixture
def make_payload():
    """Build a Battlesnake /move body. ``you`` is also listed on the board, as the real API does."""

    def build(width=11, height=11, you=((5, 5),), food=(), enemies=None, turn=3):
        me = _snake("you", list(you))
        snakes = [me] + [_snake(sid, list(body)) for sid, body in (enemies or {}).items()]
        return {
            "game": {"id": "game-1", "timeout": 500},
            "turn": turn,
            "board": {
                "width": width,
                "height": height,
                "food": _coords(food),
                "snakes": snakes,
            },
            "you": me,
        }

    return build


@pytest.fixture
def make_snapshot(make_payload):
    def build(**kwargs):
        return parse_snapshot(make_payload(**kwargs))

    return build


@pytest.fixture
def client():
    app = create_app(Settings())
    app.config["TESTING"] = True
    return app.test_client()
