"""Puzzle registry and factory.

Provides discovery of named puzzles that are registered globally during
module initialization, and builds boards from them.

Puzzle collections must call register_puzzle() in their module's
__init__.py for auto-discovery. This happens automatically when the
module is imported.
"""

from __future__ import annotations

from typing import Any

from amida.core.board import AmidaBoard
from amida.core.builders import create_board_from_text


class PuzzleRegistry:
    """Registry of available puzzle texts.

    THREAD SAFETY: Not thread-safe. All puzzle registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._puzzles: dict[str, str] = {}

    def register(self, name: str, text: str) -> None:
        """Register a puzzle text under a name."""
        if name in self._puzzles:
            raise ValueError(f"Puzzle '{name}' already registered")
        self._puzzles[name] = text

    def get(self, name: str) -> str:
        """Get a puzzle text by name."""
        if name not in self._puzzles:
            raise ValueError(
                f"Unknown puzzle '{name}'. Available: {list(self._puzzles.keys())}"
            )
        return self._puzzles[name]

    def list_puzzles(self) -> list[str]:
        """List all registered puzzle names."""
        return list(self._puzzles.keys())

    def create(self, name: str, **kwargs: Any) -> AmidaBoard:
        """Build a board from a registered puzzle."""
        return create_board_from_text(self.get(name), **kwargs)


# Global registry
_REGISTRY = PuzzleRegistry()


def register_puzzle(name: str, text: str) -> None:
    """Register a puzzle globally."""
    _REGISTRY.register(name, text)


def get_puzzle(name: str) -> str:
    """Get a puzzle text by name."""
    return _REGISTRY.get(name)


def create_board(name: str, **kwargs: Any) -> AmidaBoard:
    """Create a board for a registered puzzle."""
    return _REGISTRY.create(name, **kwargs)


def list_available_puzzles() -> list[str]:
    """List all registered puzzles."""
    return _REGISTRY.list_puzzles()


def verify_puzzles_registered() -> None:
    """Verify that at least one puzzle is registered.

    Raises:
        RuntimeError: If no puzzles are registered
    """
    if not list_available_puzzles():
        raise RuntimeError(
            "No puzzles registered! Ensure puzzle modules are imported. "
            "Example: import amida.puzzles"
        )
