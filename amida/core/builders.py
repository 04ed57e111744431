"""Utilities for building configured boards.

This module provides factories to reduce boilerplate when creating boards
from puzzle text. It encodes the common pattern (parse, pick evaluation
mode, initialize) in reusable functions.
"""

from typing import Optional

from amida.core.board import AmidaBoard, EvaluationMode
from amida.parsing.puzzle_parser import Puzzle, parse_puzzle
from amida.utils.config_loader import BoardConfig


def create_board_from_puzzle(
    puzzle: Puzzle, config: Optional[BoardConfig] = None
) -> AmidaBoard:
    """Create a board for an already parsed puzzle.

    Args:
        puzzle: Lane count, height and rungs
        config: Evaluation settings; defaults to BoardConfig()

    Returns:
        Board at query index 0 with every rung enabled
    """
    config = config or BoardConfig()
    return AmidaBoard(
        puzzle.lane_count,
        puzzle.height,
        puzzle.rungs,
        mode=EvaluationMode(config.evaluation),
        check_invariants=config.check_invariants,
    )


def create_board_from_text(
    text: str, config: Optional[BoardConfig] = None
) -> AmidaBoard:
    """Parse puzzle text and build a board from it.

    Raises:
        ParseError: if the text is malformed
    """
    return create_board_from_puzzle(parse_puzzle(text), config)
