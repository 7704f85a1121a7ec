"""
Battlesnake HTTP endpoints around the score-board engine.

Run locally:
  pip install -e .
  PORT=8080 python -m scoresnake.server
"""
from __future__ import annotations
from typing import Optional
import logging

from flask import Flask, request, jsonify

from .config import Settings
from .engine import decide_move
from .models import InvalidSnapshotError, parse_snapshot

logger = logging.getLogger(__name__)


def _game_id() -> str:
    data = request.get_json(silent=True)
    game = data.get("game") if isinstance(data, dict) else None
    return str(game.get("id", "")) if isinstance(game, dict) else ""


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    app = Flask(__name__)

    @app.errorhandler(InvalidSnapshotError)
    def invalid_snapshot(error: InvalidSnapshotError):
        logger.warning("Rejected snapshot: %s", error)
        return jsonify({"error": str(error)}), 400

    @app.get("/")
    def index():
        return jsonify({
            "apiversion": "1",
            "author": settings.author,
            "color": settings.color,
            "head": settings.head,
            "tail": settings.tail,
            "version": settings.version,
        })

    @app.post("/start")
    def start():
        logger.info("START game=%s", _game_id())
        return ("", 200)

    @app.post("/move")
    def move():
        data = request.get_json(silent=True)
        if data is None:
            raise InvalidSnapshotError("request body must be JSON")
        snapshot = parse_snapshot(data)
        move_dir = decide_move(snapshot)
        logger.info("MOVE game=%s turn=%d: %s", snapshot.game_id, snapshot.turn, move_dir)

        response = {"move": move_dir}
        if settings.shout:
            response["shout"] = settings.shout
        return jsonify(response)

    @app.post("/end")
    def end():
        logger.info("END game=%s", _game_id())
        return ("", 200)

    return app


app = create_app()


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Battlesnake Server at http://%s:%d...", settings.host, settings.port)
    create_app(settings).run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
