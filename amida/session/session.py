"""Puzzle session for external front-end integration."""

from __future__ import annotations

import threading
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional, Sequence

from amida.core.board import AmidaBoard
from amida.core.path import PathPoint
from amida.parsing.puzzle_parser import parse_puzzle

PROTOCOL_VERSION = 1


@dataclass(frozen=True)
class RungState:
    id: int
    height: int
    left: int
    right: int
    enabled: bool


@dataclass(frozen=True)
class BoardSnapshot:
    lane_count: int
    height: int
    query_index: int
    rung_count: int
    active_rungs: list[RungState]
    landing_columns: list[int]


def _path_to_json(path: Sequence[PathPoint]) -> list[list[int]]:
    return [[point.row, point.column] for point in path]


class PuzzleSession:
    """Synchronous session bound to a single board.

    Every operation holds the session lock, so a threaded server can share
    one board between clients.
    """

    def __init__(self, board: AmidaBoard, lock: threading.RLock | None = None):
        self.board = board
        self._lock = lock or threading.RLock()

    def load_text(self, text: str) -> None:
        """Replace the board contents with a parsed puzzle.

        The text is parsed before the board is touched, so a ParseError
        leaves the current board as it was.
        """
        puzzle = parse_puzzle(text)
        with self._lock:
            self.board.initialize(puzzle.lane_count, puzzle.height, puzzle.rungs)

    def reset(self) -> None:
        with self._lock:
            self.board.reset()

    def step_forward(self) -> bool:
        with self._lock:
            return self.board.step_forward()

    def step_backward(self) -> bool:
        with self._lock:
            return self.board.step_backward()

    def seek(self, index: int) -> bool:
        with self._lock:
            return self.board.seek(index)

    def toggle_rung(self, rung_id: int) -> Optional[bool]:
        with self._lock:
            return self.board.toggle_rung(rung_id)

    def snapshot(self) -> BoardSnapshot:
        with self._lock:
            board = self.board
            return BoardSnapshot(
                lane_count=board.lane_count,
                height=board.height,
                query_index=board.query_index,
                rung_count=board.rung_count,
                active_rungs=[
                    RungState(
                        id=rung.id,
                        height=rung.height,
                        left=rung.left,
                        right=rung.right,
                        enabled=board.is_enabled(rung.id),
                    )
                    for rung in board.active_rungs
                ],
                landing_columns=board.landing_columns(),
            )

    def handle_request(self, request: dict[str, Any]) -> dict[str, Any]:
        req_id = request.get("id")
        cmd = request.get("cmd")

        handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "hello": self._cmd_hello,
            "load": self._cmd_load,
            "reset": self._cmd_reset,
            "step": self._cmd_step,
            "back": self._cmd_back,
            "seek": self._cmd_seek,
            "toggle": self._cmd_toggle,
            "state": self._cmd_state,
            "path": self._cmd_path,
            "paths": self._cmd_paths,
        }

        try:
            if not isinstance(cmd, str):
                raise ValueError("Command must be a string")
            handler = handlers.get(cmd)
            if handler is None:
                raise ValueError(f"Unknown command '{cmd}'")
            result = handler(request)
            return {"id": req_id, "ok": True, "result": result}
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return {"id": req_id, "ok": False, "error": str(exc)}

    def _cmd_hello(self, _request: dict[str, Any]) -> dict[str, Any]:
        return {"version": PROTOCOL_VERSION, "mode": self.board.mode.value}

    def _cmd_load(self, request: dict[str, Any]) -> dict[str, Any]:
        text = request["text"]
        if not isinstance(text, str):
            raise ValueError("'text' must be a string")
        self.load_text(text)
        return {"status": "ok"}

    def _cmd_reset(self, _request: dict[str, Any]) -> dict[str, Any]:
        self.reset()
        return {"status": "ok"}

    def _cmd_step(self, _request: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            moved = self.step_forward()
            return {"moved": moved, "query_index": self.board.query_index}

    def _cmd_back(self, _request: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            moved = self.step_backward()
            return {"moved": moved, "query_index": self.board.query_index}

    def _cmd_seek(self, request: dict[str, Any]) -> dict[str, Any]:
        index = int(request["index"])
        with self._lock:
            moved = self.seek(index)
            return {"moved": moved, "query_index": self.board.query_index}

    def _cmd_toggle(self, request: dict[str, Any]) -> dict[str, Any]:
        rung_id = int(request["rung_id"])
        enabled = self.toggle_rung(rung_id)
        if enabled is None:
            raise ValueError(f"Unknown rung id {rung_id}")
        return {"rung_id": rung_id, "enabled": enabled}

    def _cmd_state(self, _request: dict[str, Any]) -> dict[str, Any]:
        return asdict(self.snapshot())

    def _cmd_path(self, request: dict[str, Any]) -> dict[str, Any]:
        lane = int(request["lane"])
        with self._lock:
            path = self.board.resolve_path(lane)
        return {"lane": lane, "points": _path_to_json(path)}

    def _cmd_paths(self, _request: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            paths = self.board.resolve_all_paths()
        return {"paths": [_path_to_json(path) for path in paths]}
