"""JSON-lines TCP server exposing a puzzle session to external front-ends."""

from __future__ import annotations

import argparse
import json
import logging
import socketserver
import threading
from typing import Optional, Sequence

import amida.puzzles  # noqa: F401  (registers bundled puzzles)
from amida.core.builders import create_board_from_puzzle
from amida.core.registry import (
    create_board,
    list_available_puzzles,
    verify_puzzles_registered,
)
from amida.parsing.puzzle_parser import parse_puzzle_file
from amida.session.session import PuzzleSession
from amida.utils.config_loader import configure_logging, load_config

logger = logging.getLogger(__name__)


class _PuzzleHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        session: PuzzleSession = self.server.session  # type: ignore[attr-defined]
        logger.info("Client connected from %s:%d", *self.client_address[:2])
        while True:
            line = self.rfile.readline()
            if not line:
                break
            try:
                request = json.loads(line.decode("utf-8"))
            except json.JSONDecodeError as exc:
                response = {"ok": False, "error": f"Invalid JSON: {exc}"}
            else:
                if isinstance(request, dict):
                    response = session.handle_request(request)
                else:
                    response = {"ok": False, "error": "Request must be an object"}

            self.wfile.write((json.dumps(response) + "\n").encode("utf-8"))
        logger.info("Client disconnected")


class PuzzleServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, host: str, port: int, session: PuzzleSession):
        super().__init__((host, port), _PuzzleHandler)
        self.session = session


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ghost-leg lottery puzzle server")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", default="kattis-sample", help="Registered puzzle name"
    )
    source.add_argument("--file", help="Puzzle text file to load instead")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--host", help="Bind host (default: from config)")
    parser.add_argument("--port", type=int, help="Bind port (default: from config)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    verify_puzzles_registered()

    args = _parse_args(argv)
    config = load_config(args.config)
    configure_logging(config.logging)

    if args.file:
        board = create_board_from_puzzle(parse_puzzle_file(args.file), config.board)
    else:
        if args.puzzle not in list_available_puzzles():
            raise SystemExit(
                f"Unknown puzzle '{args.puzzle}'. Available: {list_available_puzzles()}"
            )
        board = create_board(args.puzzle, config=config.board)

    host = args.host if args.host is not None else config.server.host
    port = args.port if args.port is not None else config.server.port
    session = PuzzleSession(board, lock=threading.RLock())
    server = PuzzleServer(host, port, session)
    logger.info("Puzzle server listening on %s:%d", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
