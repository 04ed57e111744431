"""Puzzle text parsing."""

from amida.parsing.puzzle_parser import Puzzle, parse_puzzle, parse_puzzle_file

__all__ = ["Puzzle", "parse_puzzle", "parse_puzzle_file"]
