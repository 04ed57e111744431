"""Ghost-leg lottery (Amida-kuji) board simulator.

This package traces paths down a ghost-leg board: vertical lanes joined by
horizontal rungs, revealed one at a time through a query index, with
coinciding rungs cancelling out and individual rungs switchable on and off.

Getting started:
    from amida import create_board

    board = create_board("kattis-sample")
    board.seek(board.rung_count)
    board.landing_columns()  # [4, 2, 3, 1]
"""

# Core abstractions
from amida.interfaces.board import Board
from amida.core.board import AmidaBoard, EvaluationMode
from amida.core.builders import create_board_from_puzzle, create_board_from_text
from amida.core.exceptions import (
    AmidaError,
    ConfigurationError,
    InvariantViolation,
    LaneOutOfRangeError,
    ParseError,
)
from amida.core.path import PathPoint
from amida.core.registry import (
    create_board,
    list_available_puzzles,
    verify_puzzles_registered,
)
from amida.core.rung import Rung
from amida.core.simulation_engine import SimulationEngine
from amida.parsing.puzzle_parser import Puzzle, parse_puzzle, parse_puzzle_file

# Bundled puzzles (auto-register when imported)
from amida import puzzles  # noqa: F401

__all__ = [
    # Core
    "Board",
    "AmidaBoard",
    "EvaluationMode",
    "PathPoint",
    "Rung",
    "SimulationEngine",
    # Parsing
    "Puzzle",
    "parse_puzzle",
    "parse_puzzle_file",
    # Errors
    "AmidaError",
    "ConfigurationError",
    "InvariantViolation",
    "LaneOutOfRangeError",
    "ParseError",
    # Board creation
    "create_board",
    "create_board_from_puzzle",
    "create_board_from_text",
    "list_available_puzzles",
    "verify_puzzles_registered",
]
