"""Path resolution: walking one lane from the top of the board to the bottom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from amida.core.rung import Rung, walk_order


@dataclass(frozen=True)
class PathPoint:
    """A polyline vertex. ``row`` counts up from the bottom, ``column`` is a 1-based lane."""

    row: int
    column: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)


def resolve_path(
    lane: int,
    height: int,
    rungs: Iterable[Rung],
    enabled: Mapping[int, bool],
) -> list[PathPoint]:
    """Trace ``lane`` (0-based) down through ``rungs``.

    Args:
        lane: Starting lane, 0-based
        height: Board height; the walk starts at this row
        rungs: Active rungs in any order; they are walked in ``walk_order``
        enabled: Per-id enabled flags. Disabled rungs never deflect the path.

    Returns:
        Points from ``(height, lane + 1)`` to ``(0, landing column)``. Every
        crossed rung contributes its entry and exit point.
    """
    column = lane + 1
    row = height
    points = [PathPoint(row, column)]

    for rung in walk_order(rungs):
        if not enabled.get(rung.id, True):
            continue
        if rung.height > row or not rung.touches(column):
            continue

        target = rung.other_end(column)
        points.append(PathPoint(rung.height, column))
        points.append(PathPoint(rung.height, target))
        column = target
        row = rung.height

    points.append(PathPoint(0, column))
    return points


def landing_column(path: list[PathPoint]) -> int:
    """Column where a resolved path reaches the bottom."""
    return path[-1].column
