"""Request/response access to a board for external front-ends."""

from amida.session.session import BoardSnapshot, PuzzleSession, RungState

__all__ = ["BoardSnapshot", "PuzzleSession", "RungState"]
