from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from game import (
    COLS,
    ROWS,
    Board,
    GameState,
    Piece,
    drop_piece as g_drop_piece,
    env_flag,
    game_state as g_game_state,
    legal_columns as g_legal_columns,
    longest_runs as g_longest_runs,
    play_sequence as g_play_sequence,
)

DEBUG_TRACE = env_flag("PIEZAS_DEBUG")

app = Flask(__name__)
if DEBUG_TRACE:
    app.logger.setLevel(logging.DEBUG)


class ApiError(ValueError):
    """Raised while parsing a request body; answered with HTTP 400."""


# ---------- JSON <-> state ----------

def state_to_json(s: GameState) -> Dict[str, Any]:
    grid = [[s.piece_at(r, c).value for c in range(s.cols)] for r in range(s.rows)]
    return {"rows": int(s.rows), "cols": int(s.cols), "grid": grid, "turn": s.turn.value}


def json_to_state(obj: Any) -> GameState:
    if not isinstance(obj, dict):
        raise ApiError("state required")
    try:
        rows = _int_value(obj["rows"], "rows")
        cols = _int_value(obj["cols"], "cols")
        if (rows, cols) != (ROWS, COLS):
            raise ApiError(f"board must be {ROWS}x{COLS}, got {rows}x{cols}")
        grid_in = obj["grid"]
        if not isinstance(grid_in, list) or len(grid_in) != rows:
            raise ApiError(f"grid must list {rows} rows")
        cells: List[Piece] = []
        for row in grid_in:
            if not isinstance(row, list) or len(row) != cols:
                raise ApiError(f"each grid row must hold {cols} cells")
            cells.extend(Piece.parse(x) for x in row)
        turn = Piece.parse(obj["turn"])
        state = GameState(rows=rows, cols=cols, grid=tuple(cells), turn=turn)
        state.validate()
    except KeyError as e:
        raise ApiError(f"bad state: missing {e.args[0]}")
    except ValueError as e:
        if isinstance(e, ApiError):
            raise
        raise ApiError(f"bad state: {e}")
    return state


def board_to_json(b: Board) -> Dict[str, Any]:
    return state_to_json(GameState.from_board(b))


def _int_value(v: Any, name: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise ApiError(f"{name} must be an integer")
    return v


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ApiError("request body must be a JSON object")
    return body


def _field(body: Dict[str, Any], name: str) -> Any:
    if name not in body:
        raise ApiError(f"{name} required")
    return body[name]


def _snapshot(board: Board) -> Dict[str, Any]:
    return {
        "state": board_to_json(board),
        "legalColumns": g_legal_columns(board),
        "gameState": g_game_state(board).value,
    }


@app.errorhandler(ApiError)
def _bad_request(e: ApiError) -> Any:
    app.logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- API routes ----------

@app.get("/api/health")
def api_health() -> Any:
    b = Board()
    return jsonify({"ok": True, "rows": b.rows, "cols": b.cols})


@app.post("/api/new")
def api_new() -> Any:
    board = Board()
    return jsonify({"ok": True, **_snapshot(board)})


@app.post("/api/drop")
def api_drop() -> Any:
    body = _body()
    board = json_to_state(_field(body, "state")).to_board()
    col = _int_value(_field(body, "column"), "column")
    player = board.turn
    result = g_drop_piece(board, col)
    if DEBUG_TRACE:
        app.logger.debug("%s -> column %d: %r", player.value, col, result.value)
    return jsonify({"ok": True, "result": result.value, **_snapshot(board)})


@app.post("/api/piece")
def api_piece() -> Any:
    body = _body()
    state = json_to_state(_field(body, "state"))
    row = _int_value(_field(body, "row"), "row")
    col = _int_value(_field(body, "column"), "column")
    return jsonify({"ok": True, "piece": state.piece_at(row, col).value})


@app.post("/api/state")
def api_state() -> Any:
    body = _body()
    board = json_to_state(_field(body, "state")).to_board()
    runs = g_longest_runs(board)
    return jsonify({
        "ok": True,
        "gameState": g_game_state(board).value,
        "runs": {p.value: n for p, n in runs.items()},
    })


@app.post("/api/replay")
def api_replay() -> Any:
    body = _body()
    moves_in = _field(body, "moves")
    if not isinstance(moves_in, list):
        raise ApiError("moves must be a list of integers")
    moves = [_int_value(m, "move") for m in moves_in]
    board = Board()
    results = g_play_sequence(board, moves)
    return jsonify({"ok": True, "results": [r.value for r in results], **_snapshot(board)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = env_flag("FLASK_DEBUG", os.getenv("DEBUG", "0"))
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
