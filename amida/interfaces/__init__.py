"""Interface abstractions for amida.

Defines behavioral contracts that all implementations must satisfy:
- Board: lottery board interface (abstract base class)
"""

from amida.interfaces.board import Board, RungInput

__all__ = [
    "Board",
    "RungInput",
]
