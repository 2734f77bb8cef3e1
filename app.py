from __future__ import annotations

import logging
import os
import threading
import uuid
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    Board,
    DoubleMove,
    GameConfig,
    GameSession,
    MoveOrder,
    Occupied,
    Tile,
    resolve,
    sources,
    tile_from_value,
)
from slide_core.config import env_flag

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Sessions live in memory; each has its own lock because the dev server is threaded.
# Least recently used sessions are evicted past SLIDE_MAX_SESSIONS.
_sessions: OrderedDict[str, Tuple[GameSession, threading.Lock]] = OrderedDict()
_sessions_lock = threading.Lock()


# ---------- JSON helpers ----------

def tile_to_json(t: Tile) -> int:
    return int(t.value) if isinstance(t, Occupied) else 0


def tile_from_json(v: Any) -> Tile:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"tile value must be an integer, got {v!r}")
    if v < 0:
        raise ValueError(f"tile value must not be negative, got {v}")
    return tile_from_value(v)


def board_to_json(b: Board) -> Dict[str, Any]:
    return {
        "dimension": int(b.dimension),
        "grid": [[tile_to_json(t) for t in row] for row in b.snapshot()],
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    rows = obj["grid"]
    return Board.from_rows([[tile_from_json(v) for v in row] for row in rows])


def order_to_json(o: MoveOrder) -> Dict[str, Any]:
    if isinstance(o, DoubleMove):
        return {
            "type": "double",
            "sources": [o.source, o.second],
            "destination": o.destination,
            "value": o.value,
        }
    return {
        "type": "single",
        "source": o.source,
        "destination": o.destination,
        "value": o.value,
        "merge": bool(o.was_merge),
    }


def _config_for(size: Optional[Any]) -> GameConfig:
    base = GameConfig.from_env()
    if size is None:
        return base
    return GameConfig(
        dimension=int(size),
        threshold=base.threshold,
        max_commands=base.max_commands,
        queue_delay=base.queue_delay,
    )


def _max_sessions() -> int:
    return max(1, int(os.getenv("SLIDE_MAX_SESSIONS", "1000")))


def _lookup(body: Dict[str, Any]) -> Optional[Tuple[GameSession, threading.Lock]]:
    game_id = str(body.get("id", ""))
    with _sessions_lock:
        found = _sessions.get(game_id)
        if found is not None:
            _sessions.move_to_end(game_id)
        return found


def _register(session: GameSession) -> str:
    game_id = uuid.uuid4().hex
    limit = _max_sessions()
    with _sessions_lock:
        _sessions[game_id] = (session, threading.Lock())
        while len(_sessions) > limit:
            evicted, _ = _sessions.popitem(last=False)
            logger.info("game %s evicted", evicted)
    return game_id


def _not_found() -> Any:
    return jsonify({"ok": False, "error": "unknown game id"}), 404


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        config = _config_for(body.get("size"))
        seed = body.get("seed", None)
        session = GameSession(config, seed=int(seed) if seed is not None else None)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    session.start()
    game_id = _register(session)
    logger.info("game %s started (%dx%d)", game_id, config.dimension, config.dimension)
    return jsonify({"ok": True, "id": game_id, "state": session.to_json(), **session.drain()})


@app.post("/api/new_from")
def api_new_from() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    b = body.get("board")
    if not isinstance(b, dict):
        return jsonify({"ok": False, "error": "board required"}), 400
    try:
        board = board_from_json(b)
        config = _config_for(board.dimension)
        session = GameSession(config)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad board: {e}"}), 400
    session.load(board)
    game_id = _register(session)
    return jsonify({"ok": True, "id": game_id, "state": session.to_json(), **session.drain()})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    found = _lookup(body)
    if found is None:
        return _not_found()
    session, lock = found
    with lock:
        try:
            accepted = session.move(str(body.get("direction", "")))
        except ValueError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        return jsonify({"ok": True, "accepted": accepted, "state": session.to_json(), **session.drain()})


@app.post("/api/state")
def api_state() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    found = _lookup(body)
    if found is None:
        return _not_found()
    session, lock = found
    with lock:
        session.poll()
        return jsonify({"ok": True, "state": session.to_json(), **session.drain()})


@app.post("/api/reset")
def api_reset() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    found = _lookup(body)
    if found is None:
        return _not_found()
    session, lock = found
    with lock:
        session.start()
        return jsonify({"ok": True, "state": session.to_json(), **session.drain()})


@app.post("/api/resolve")
def api_resolve() -> Any:
    """Move orders for a single line, without touching any game."""
    body = request.get_json(force=True, silent=True) or {}
    line_in = body.get("line")
    if not isinstance(line_in, list):
        return jsonify({"ok": False, "error": "line required"}), 400
    try:
        line = [tile_from_json(v) for v in line_in]
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad line: {e}"}), 400
    orders = resolve(line)
    result: List[int] = [tile_to_json(t) for t in line]
    for o in orders:
        for s in sources(o):
            result[s] = 0
        result[o.destination] = o.value
    return jsonify({"ok": True, "orders": [order_to_json(o) for o in orders], "line": result})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    logging.basicConfig(level=logging.DEBUG if (debug or env_flag("SLIDE_DEBUG")) else logging.INFO)
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
