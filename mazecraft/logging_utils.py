"""Event log for maze generation, the HTTP API and the CLI.

Every record is one line holding ``level``, ``ts``, ``logger`` and whatever
keyword fields the caller passes, e.g.::

    get_logger("mazecraft.maze").info(event="maze_generated", width=8, seed=42)

prints ``level=info ts=... event=maze_generated width=8 seed=42 logger=mazecraft.maze``.

MAZE_LOG_LEVEL picks the threshold (debug, info, warn, error). MAZE_LOG_JSON=1
switches to one compact JSON object per line. Errors go to stderr, the rest
to stdout. Fields whose value is None are dropped; cell positions given as
``(x, y)`` tuples print as ``x,y``.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").strip().lower(), LEVELS["info"])
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0").strip().lower() in ("1", "true", "yes", "on")


def _text_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, tuple):
        return ",".join(_text_value(v) for v in value)
    # keep one field per whitespace-separated token
    return "_".join(str(value).split())


def _format(level: str, **fields) -> str:
    stamp = int(time.time())
    kept: Dict[str, Any] = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        return json.dumps({"level": level, "ts": stamp, **kept}, separators=(",", ":"), default=str)
    head = f"level={level} ts={stamp}"
    body = " ".join(f"{k}={_text_value(v)}" for k, v in kept.items())
    return f"{head} {body}" if body else head


class EventLogger:
    """Named emitter; thresholds are read per call so they can be changed at runtime."""

    __slots__ = ("name",)

    def __init__(self, name: str = "mazecraft"):
        self.name = name

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= CURRENT_LEVEL

    def emit(self, level: str, **fields) -> None:
        if not self.enabled(level):
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if level == "error" else sys.stdout
        print(_format(level, **fields), file=stream)

    def debug(self, **fields) -> None:
        self.emit("debug", **fields)

    def info(self, **fields) -> None:
        self.emit("info", **fields)

    def warn(self, **fields) -> None:
        self.emit("warn", **fields)

    def error(self, **fields) -> None:
        self.emit("error", **fields)


_loggers: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    return _loggers.setdefault(name, EventLogger(name))


log = get_logger("mazecraft")
