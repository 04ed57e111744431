"""Simulation engine for stepping boards through their rung list."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from amida.core.board import AmidaBoard


class SimulationEngine:
    """Minimal simulation engine.

    This delegates to the board's step/seek/reset methods and stops early at
    either end of the rung list.
    """

    def run(self, board: "AmidaBoard", steps: int = 1) -> int:
        """Reveal up to ``steps`` rungs. Returns how many were revealed."""
        taken = 0
        while taken < steps and board.step_forward():
            taken += 1
        return taken

    def rewind(self, board: "AmidaBoard", steps: int = 1) -> int:
        """Hide up to ``steps`` rungs. Returns how many were hidden."""
        taken = 0
        while taken < steps and board.step_backward():
            taken += 1
        return taken

    def seek(self, board: "AmidaBoard", index: int) -> None:
        """Jump to a query index."""
        board.seek(index)

    def reset(self, board: "AmidaBoard") -> None:
        """Reset the board."""
        board.reset()
