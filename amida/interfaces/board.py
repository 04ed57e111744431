"""Board abstraction - behavioral contract.

A Board is a ghost-leg lottery: lanes, an ordered rung list, a query index
selecting how many rungs are revealed, and per-rung enabled flags. Renderers
and front-ends talk to boards only through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from amida.core.path import PathPoint
from amida.core.rung import Rung

RungInput = Union[Rung, tuple[int, int, int]]


class Board(ABC):
    """Base class for lottery boards.

    Every concrete board must inherit from this class and implement all
    abstract members. Mutating operations are atomic from the caller's point
    of view: derived state is recomputed before it becomes visible.
    """

    @property
    @abstractmethod
    def lane_count(self) -> int:
        """Number of vertical lanes."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Row of the lane tops; the bottoms are row 0."""
        ...

    @property
    @abstractmethod
    def rungs(self) -> Sequence[Rung]:
        """Every rung in the order it was supplied."""
        ...

    @property
    @abstractmethod
    def query_index(self) -> int:
        """How many leading rungs are in play."""
        ...

    @property
    @abstractmethod
    def active_rungs(self) -> Sequence[Rung]:
        """Deduplicated rungs implied by the query index."""
        ...

    @abstractmethod
    def initialize(
        self, lane_count: int, height: int, rungs: Sequence[RungInput]
    ) -> None:
        """Replace all board state and rewind to query index 0."""
        ...

    @abstractmethod
    def step_forward(self) -> bool:
        """Reveal one more rung. Returns False at the end of the list."""
        ...

    @abstractmethod
    def step_backward(self) -> bool:
        """Hide the last revealed rung. Returns False at index 0."""
        ...

    @abstractmethod
    def toggle_rung(self, rung_id: int) -> Optional[bool]:
        """Flip a rung's enabled flag; None if the id is unknown."""
        ...

    @abstractmethod
    def resolve_path(self, lane: int) -> list[PathPoint]:
        """Top-to-bottom path for a 0-based lane."""
        ...

    @abstractmethod
    def resolve_all_paths(self) -> list[list[PathPoint]]:
        """Paths for every lane, in lane order."""
        ...
