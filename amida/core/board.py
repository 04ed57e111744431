"""Ghost-leg lottery board simulator.

AmidaBoard owns the rung list, the query index and the per-rung enabled
flags. Everything else (active rungs, resolved paths) is derived state and is
rebuilt by pure functions after every mutation, so no caller ever sees a
stale view.
"""

from __future__ import annotations

import logging
from collections import Counter
from enum import Enum
from typing import Optional, Sequence

from overrides import override  # type: ignore

from amida.core.exceptions import InvariantViolation, LaneOutOfRangeError
from amida.core.path import PathPoint, landing_column, resolve_path
from amida.core.rung import Rung, active_prefix, effective_rungs
from amida.interfaces.board import Board, RungInput

logger = logging.getLogger(__name__)


class EvaluationMode(Enum):
    """When paths are resolved.

    EAGER resolves every lane after each mutation. LAZY resolves a lane the
    first time it is asked for and keeps it until the next mutation.
    """

    EAGER = "eager"
    LAZY = "lazy"


def _coerce_rungs(rungs: Sequence[RungInput]) -> list[Rung]:
    # Triples are numbered after the largest explicit id, so a triple-only
    # list gets ids 1..n.
    next_id = max((item.id for item in rungs if isinstance(item, Rung)), default=0)
    coerced: list[Rung] = []
    for item in rungs:
        if isinstance(item, Rung):
            coerced.append(item)
        else:
            next_id += 1
            height, x0, x1 = item
            coerced.append(Rung.from_endpoints(next_id, height, x0, x1))
    return coerced


def _duplicate_ids(rungs: Sequence[Rung]) -> list[int]:
    counts = Counter(rung.id for rung in rungs)
    return sorted(rung_id for rung_id, count in counts.items() if count > 1)


class AmidaBoard(Board):
    """Board simulator with query-index stepping and rung toggling.

    Example:
        board = AmidaBoard(4, 6, [(1, 1, 2), (2, 3, 4)])
        board.step_forward()
        board.resolve_path(0)[-1]  # PathPoint(row=0, column=2)
    """

    def __init__(
        self,
        lane_count: int = 1,
        height: int = 1,
        rungs: Sequence[RungInput] = (),
        mode: EvaluationMode = EvaluationMode.EAGER,
        check_invariants: bool = True,
    ):
        self._mode = mode
        self._check_invariants = check_invariants
        self._lane_count = lane_count
        self._height = height
        self._rungs: list[Rung] = []
        self._query_index = 0
        self._active: list[Rung] = []
        self._enabled: dict[int, bool] = {}
        self._paths: dict[int, list[PathPoint]] = {}
        self.initialize(lane_count, height, rungs)

    # Board state -----------------------------------------------------------

    @property
    @override
    def lane_count(self) -> int:
        return self._lane_count

    @property
    @override
    def height(self) -> int:
        return self._height

    @property
    @override
    def rungs(self) -> tuple[Rung, ...]:
        return tuple(self._rungs)

    @property
    def rung_count(self) -> int:
        return len(self._rungs)

    @property
    @override
    def query_index(self) -> int:
        return self._query_index

    @property
    @override
    def active_rungs(self) -> tuple[Rung, ...]:
        return tuple(self._active)

    @property
    def effective_rungs(self) -> tuple[Rung, ...]:
        """Active rungs that are currently switched on."""
        return tuple(effective_rungs(self._active, self._enabled))

    @property
    def mode(self) -> EvaluationMode:
        return self._mode

    def is_enabled(self, rung_id: int) -> bool:
        """Enabled flag for a rung. Unknown ids report True, as in the walk."""
        return self._enabled.get(rung_id, True)

    # Mutations -------------------------------------------------------------

    @override
    def initialize(
        self, lane_count: int, height: int, rungs: Sequence[RungInput]
    ) -> None:
        """Replace all board state.

        The query index goes back to 0 and every rung is enabled. Values are
        not validated; garbage in gives degenerate geometry, not an error.

        Raises:
            InvariantViolation: Two rungs share an id while invariant checks
                are on
        """
        new_rungs = _coerce_rungs(rungs)
        if self._check_invariants:
            duplicates = _duplicate_ids(new_rungs)
            if duplicates:
                raise InvariantViolation(
                    f"Duplicate rung ids: {duplicates}",
                    details={"rung_ids": duplicates},
                )
        new_enabled = {rung.id: True for rung in new_rungs}

        self._lane_count = lane_count
        self._height = height
        self._rungs = new_rungs
        self._enabled = new_enabled
        self._query_index = 0
        self._active = []
        self._refresh_paths()
        logger.debug(
            f"Initialized board: {lane_count} lanes, height {height}, "
            f"{len(new_rungs)} rungs"
        )

    def reset(self) -> None:
        """Rewind to query index 0 and re-enable every rung."""
        self.initialize(self._lane_count, self._height, self._rungs)

    @override
    def step_forward(self) -> bool:
        return self.seek(self._query_index + 1)

    @override
    def step_backward(self) -> bool:
        return self.seek(self._query_index - 1)

    def seek(self, index: int) -> bool:
        """Move the query index, clamped to ``[0, rung_count]``.

        Returns:
            True if the index changed
        """
        target = max(0, min(index, len(self._rungs)))
        if target == self._query_index:
            return False

        active = active_prefix(self._rungs, target)
        self._query_index = target
        self._active = active
        self._refresh_paths()
        logger.debug(
            f"Query index {target}/{len(self._rungs)}: {len(active)} active rungs"
        )
        return True

    @override
    def toggle_rung(self, rung_id: int) -> Optional[bool]:
        """Flip a rung's enabled flag without touching the query index.

        Returns:
            The new flag, or None when no rung has this id
        """
        if rung_id not in self._enabled:
            logger.warning(f"Ignoring toggle of unknown rung id {rung_id}")
            return None

        self._enabled[rung_id] = not self._enabled[rung_id]
        self._refresh_paths()
        return self._enabled[rung_id]

    # Path queries ----------------------------------------------------------

    @override
    def resolve_path(self, lane: int) -> list[PathPoint]:
        if self._check_invariants and not 0 <= lane < self._lane_count:
            raise LaneOutOfRangeError(lane, self._lane_count)

        path = self._paths.get(lane)
        if path is None:
            path = resolve_path(lane, self._height, self._active, self._enabled)
            self._paths[lane] = path
        return list(path)

    @override
    def resolve_all_paths(self) -> list[list[PathPoint]]:
        return [self.resolve_path(lane) for lane in range(self._lane_count)]

    def landing_columns(self) -> list[int]:
        """Landing column (1-based) for each lane, in lane order."""
        return [landing_column(path) for path in self.resolve_all_paths()]

    def origin_lanes(self) -> list[Optional[int]]:
        """For each bottom column, the 1-based lane whose path ends there.

        Entries stay None only for degenerate boards whose rungs reach
        outside the lanes.
        """
        origins: list[Optional[int]] = [None] * self._lane_count
        for lane, column in enumerate(self.landing_columns(), start=1):
            if 1 <= column <= self._lane_count:
                origins[column - 1] = lane
        return origins

    def fixed_lanes(self) -> list[int]:
        """1-based lanes that land where they started."""
        return [
            lane
            for lane, column in enumerate(self.landing_columns(), start=1)
            if lane == column
        ]

    # Private helpers -------------------------------------------------------

    def _refresh_paths(self) -> None:
        self._paths = {}
        if self._mode is EvaluationMode.EAGER:
            for lane in range(self._lane_count):
                self._paths[lane] = resolve_path(
                    lane, self._height, self._active, self._enabled
                )
