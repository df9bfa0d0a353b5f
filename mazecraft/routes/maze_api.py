"""
project: MazeCraft
module: maze_api.py
License: MIT

Maze generation, query and rendering API routes.

The active maze for a browser session is identified by (seed, width, height)
stored in the Flask session. Query parameters override the session values for
a single request; ``POST /api/maze/regenerate`` replaces them.
"""

import hashlib
import os
import random
import threading

from flask import Blueprint, Response, current_app, jsonify, request, session

from mazecraft.logging_utils import get_logger
from mazecraft.maze import CellLookupError, InvalidDimensionError, Maze

log = get_logger("mazecraft.api")

SEED_MAX_INT = 9223372036854775807

# Simple in-process cache (seed,width,height)->Maze instance guarded by a lock.
_maze_cache = {}
_maze_cache_lock = threading.Lock()


def _cache_max() -> int:
    try:
        return int(current_app.config.get("MAZE_CACHE_MAX", 8))
    except RuntimeError:
        return 8


def get_cached_maze(seed: int, width: int, height: int) -> Maze:
    if os.environ.get("MAZE_DISABLE_CACHE") == "1":
        return Maze(seed=seed, width=width, height=height)
    key = (seed, width, height)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = Maze(seed=seed, width=width, height=height)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        if len(_maze_cache) > _cache_max():
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return maze


def _coerce_seed(payload_seed):
    """Convert provided seed (int or str) into bounded 64-bit signed int."""
    if payload_seed is None or isinstance(payload_seed, bool):
        return random.randint(1, 1_000_000)
    if isinstance(payload_seed, int):
        return payload_seed % SEED_MAX_INT
    if isinstance(payload_seed, str):
        s = payload_seed.strip()
        if not s:
            return random.randint(1, 1_000_000)
        if s.isdigit():
            return int(s) % SEED_MAX_INT
        h = hashlib.sha256(s.encode("utf-8")).digest()
        return int.from_bytes(h[:8], "big") % SEED_MAX_INT
    return random.randint(1, 1_000_000)


def _parse_dimension(name: str, raw, fallback: int) -> int:
    if raw is None or raw == "":
        return fallback
    if isinstance(raw, bool):
        raise InvalidDimensionError(name, raw, f"{name} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidDimensionError(name, raw, f"{name} must be an integer") from None


def _session_state():
    cfg = current_app.config
    seed = session.get("maze_seed")
    if seed is None:
        seed = _coerce_seed(None)
        session["maze_seed"] = seed
    width = session.get("maze_width", cfg.get("MAZE_DEFAULT_WIDTH", 10))
    height = session.get("maze_height", cfg.get("MAZE_DEFAULT_HEIGHT", 10))
    return seed, width, height


def _resolve_maze() -> Maze:
    seed, width, height = _session_state()
    args = request.args
    if "seed" in args:
        seed = _coerce_seed(args.get("seed"))
    width = _parse_dimension("width", args.get("width"), width)
    height = _parse_dimension("height", args.get("height"), height)
    return get_cached_maze(seed, width, height)


bp_maze = Blueprint("maze", __name__)


@bp_maze.errorhandler(InvalidDimensionError)
def _invalid_dimension(err: InvalidDimensionError):
    log.warn(event="invalid_dimension", field=err.field, value=err.value)
    return jsonify({"error": err.message, "field": err.field}), 400


@bp_maze.errorhandler(CellLookupError)
def _cell_out_of_range(err: CellLookupError):
    return jsonify({"error": str(err)}), 404


@bp_maze.route("/api/maze")
def maze_summary():
    """
    Return the active maze.
    Response: { 'seed', 'width', 'height', 'rows': [<str>, ...], 'metrics': {...} }
    """
    maze = _resolve_maze()
    return jsonify(
        {
            "seed": maze.seed,
            "width": maze.width,
            "height": maze.height,
            "rows": maze.rows(),
            "metrics": maze.metrics,
        }
    )


@bp_maze.route("/api/maze/text")
def maze_text():
    maze = _resolve_maze()
    return Response(maze.render() + "\n", mimetype="text/plain")


@bp_maze.route("/api/maze/cell/<int:x>/<int:y>")
def maze_cell(x: int, y: int):
    maze = _resolve_maze()
    cell = maze.cell_at(x, y)
    return jsonify(cell.to_dict(corrected_wall_config=current_app.config.get("MAZE_CORRECTED_WALL_CONFIG", False)))


@bp_maze.route("/api/maze/regenerate", methods=["POST"])
def regenerate():
    """Replace the session's maze.

    Body JSON (all optional):
      { "seed": <int|str|null>, "width": <int>, "height": <int> }
    - Omitted width/height keep the current values.
    - Omitted seed picks a fresh random seed; int or string seeds are deterministic.

    Response: same shape as GET /api/maze.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        log.warn(event="maze_regenerate_rejected", reason="body_not_object")
        return jsonify({"error": "Invalid JSON object"}), 400
    _, width, height = _session_state()
    width = _parse_dimension("width", data.get("width"), width)
    height = _parse_dimension("height", data.get("height"), height)
    seed = _coerce_seed(data.get("seed"))
    maze = get_cached_maze(seed, width, height)
    # Only persist once generation succeeded
    session["maze_seed"] = maze.seed
    session["maze_width"] = maze.width
    session["maze_height"] = maze.height
    log.info(event="maze_regenerated", seed=maze.seed, width=maze.width, height=maze.height)
    return jsonify(
        {
            "seed": maze.seed,
            "width": maze.width,
            "height": maze.height,
            "rows": maze.rows(),
            "metrics": maze.metrics,
        }
    )
