"""Server settings read from the environment."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in LOG_LEVELS else "INFO"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    author: str = ""
    color: str = "#FFA500"
    head: str = "safe"
    tail: str = "round-bum"
    shout: str = ""
    version: str = "score-board-1.0"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            host=env.get("HOST", cls.host),
            port=int(env.get("PORT") or cls.port),
            log_level=_log_level(env.get("LOG_LEVEL", cls.log_level)),
            author=env.get("SNAKE_AUTHOR", cls.author),
            color=env.get("SNAKE_COLOR", cls.color),
            head=env.get("SNAKE_HEAD", cls.head),
            tail=env.get("SNAKE_TAIL", cls.tail),
            shout=env.get("SNAKE_SHOUT", cls.shout),
        )
