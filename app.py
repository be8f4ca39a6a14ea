from __future__ import annotations

import os
import random
import sys
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        SPEEDS,
        Direction,
        GameState,
        Position,
        Result,
        change_direction,
        is_known_speed,
        restart,
        set_speed,
        tick,
        tick_interval_ms,
        toggle_pause,
    )
    from .snake_core.config import configure_logging, load_settings  # type: ignore
except ImportError:
    from game import (  # type: ignore
        SPEEDS,
        Direction,
        GameState,
        Position,
        Result,
        change_direction,
        is_known_speed,
        restart,
        set_speed,
        tick,
        tick_interval_ms,
        toggle_pause,
    )
    from snake_core.config import configure_logging, load_settings  # type: ignore

SETTINGS = load_settings()
GRID_SIZE = SETTINGS.grid_size

# Serve the browser client from ./static (explicit absolute path)
STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)

_rng = random.Random()


def _read_body():
    """Returns (body, None) or (None, error response); the body must be a JSON object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return None, (jsonify({"ok": False, "error": "JSON object required"}), 400)
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
        return None, (jsonify({"ok": False, "error": "seed must be an integer or string"}), 400)
    return body, None


def _random_source(body: Dict[str, Any]):
    seed = body.get("seed", None)
    if seed is None:
        return _rng.random
    return random.Random(seed).random


# ---------- JSON <-> state ----------

def position_to_json(p: Optional[Position]) -> Optional[list]:
    if p is None:
        return None
    return [int(p.x), int(p.y)]


def position_from_json(obj: Any) -> Optional[Position]:
    if obj is None:
        return None
    x, y = obj
    return Position(int(x), int(y))


def state_to_json(s: GameState, grid_size: int = GRID_SIZE) -> Dict[str, Any]:
    return {
        "snake": [position_to_json(p) for p in s.snake],
        "direction": s.direction.value,
        "food": position_to_json(s.food),
        "score": int(s.score),
        "running": bool(s.running),
        "gameOver": bool(s.game_over),
        "result": s.result.value,
        "speedId": s.speed_id,
        "gridSize": int(grid_size),
    }


def _json_bool(obj: Dict[str, Any], key: str, default: bool) -> bool:
    value = obj.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean")
    return value


def json_to_state(obj: Dict[str, Any]) -> GameState:
    snake = tuple(Position(int(x), int(y)) for x, y in obj["snake"])
    if not snake:
        raise ValueError("snake must have at least one segment")
    speed_id = str(obj.get("speedId", SETTINGS.speed_id))
    if not is_known_speed(speed_id):
        raise ValueError(f"unknown speed: {speed_id!r}")
    game_over = _json_bool(obj, "gameOver", False)
    result = Result(str(obj.get("result", Result.PLAYING.value)))
    if game_over != (result != Result.PLAYING):
        raise ValueError("gameOver and result disagree")
    return GameState(
        snake=snake,
        direction=Direction.parse(obj["direction"]),
        food=position_from_json(obj.get("food")),
        score=int(obj.get("score", 0)),
        running=_json_bool(obj, "running", True) and not game_over,
        game_over=game_over,
        result=result,
        speed_id=speed_id,
    )


def _read_state(body: Dict[str, Any]):
    """Returns (state, None) or (None, error response)."""
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, (jsonify({"ok": False, "error": "state required"}), 400)
    try:
        return json_to_state(s_in), None
    except (KeyError, TypeError, ValueError) as e:
        app.logger.debug("rejected state payload: %s", e)
        return None, (jsonify({"ok": False, "error": f"bad state: {e}"}), 400)


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.get("/api/config")
def api_config() -> Any:
    return jsonify({
        "ok": True,
        "gridSize": GRID_SIZE,
        "defaultSpeed": SETTINGS.speed_id,
        "speeds": [{"id": s.id, "label": s.label, "ms": s.ms} for s in SPEEDS],
    })


@app.post("/api/new")
def api_new() -> Any:
    body, err = _read_body()
    if err:
        return err
    state = restart(GRID_SIZE, _random_source(body))
    if SETTINGS.speed_id != state.speed_id:
        state = set_speed(state, SETTINGS.speed_id)
    return jsonify({"ok": True, "state": state_to_json(state), "intervalMs": tick_interval_ms(state.speed_id)})


@app.post("/api/tick")
def api_tick() -> Any:
    body, err = _read_body()
    if err:
        return err
    state, err = _read_state(body)
    if err:
        return err
    next_state = tick(state, GRID_SIZE, _random_source(body))
    did_eat = next_state.score > state.score
    if next_state.game_over and not state.game_over:
        app.logger.info("game finished: %s, score %d", next_state.result.value, next_state.score)
    return jsonify({"ok": True, "state": state_to_json(next_state), "didEat": did_eat})


@app.post("/api/direction")
def api_direction() -> Any:
    body, err = _read_body()
    if err:
        return err
    state, err = _read_state(body)
    if err:
        return err
    try:
        direction = Direction.parse(body.get("direction"))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "state": state_to_json(change_direction(state, direction))})


@app.post("/api/pause")
def api_pause() -> Any:
    body, err = _read_body()
    if err:
        return err
    state, err = _read_state(body)
    if err:
        return err
    return jsonify({"ok": True, "state": state_to_json(toggle_pause(state))})


@app.post("/api/speed")
def api_speed() -> Any:
    body, err = _read_body()
    if err:
        return err
    state, err = _read_state(body)
    if err:
        return err
    speed_id = str(body.get("speedId", ""))
    try:
        next_state = set_speed(state, speed_id)
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({
        "ok": True,
        "state": state_to_json(next_state),
        "intervalMs": tick_interval_ms(next_state.speed_id),
    })


if __name__ == "__main__":
    configure_logging(SETTINGS.debug)
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=SETTINGS.debug)
