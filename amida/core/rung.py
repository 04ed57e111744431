"""Rung entity and the rules that derive the active rung set.

Rungs live in a stable, ordered sequence and are never physically removed.
Everything the board shows at a given query index is recomputed from that
sequence by the pure functions in this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

RungKey = tuple[int, int, int]


@dataclass(frozen=True)
class Rung:
    """A horizontal connector between two lanes at a fixed height.

    Lanes are 1-based and ``left < right``. The ``id`` is the toggle key and
    stays the same regardless of where the rung sits in any derived list.
    """

    id: int
    height: int
    left: int
    right: int

    @classmethod
    def from_endpoints(cls, rung_id: int, height: int, x0: int, x1: int) -> Rung:
        """Build a rung from unordered endpoints."""
        return cls(id=rung_id, height=height, left=min(x0, x1), right=max(x0, x1))

    @property
    def key(self) -> RungKey:
        """The (height, left, right) triple two coinciding rungs share."""
        return (self.height, self.left, self.right)

    def touches(self, column: int) -> bool:
        return column in (self.left, self.right)

    def other_end(self, column: int) -> int:
        """Return the lane on the far side of the rung from ``column``."""
        return self.right if column == self.left else self.left


def deduplicate_rungs(rungs: Iterable[Rung]) -> list[Rung]:
    """Apply the cancellation rule to an ordered run of rungs.

    A rung whose (height, left, right) triple already appears in the working
    list removes the first such entry instead of being added. The survivor
    need not be the rung with the lowest id.
    """
    working: list[Rung] = []
    for rung in rungs:
        for index, existing in enumerate(working):
            if existing.key == rung.key:
                del working[index]
                break
        else:
            working.append(rung)
    return working


def active_prefix(rungs: list[Rung], query_index: int) -> list[Rung]:
    """Deduplicated image of ``rungs[:query_index]``."""
    return deduplicate_rungs(rungs[:query_index])


def walk_order(rungs: Iterable[Rung]) -> list[Rung]:
    """Sort rungs top-down; rungs sharing a height go left to right."""
    return sorted(rungs, key=lambda rung: (-rung.height, rung.left))


def effective_rungs(rungs: Iterable[Rung], enabled: Mapping[int, bool]) -> list[Rung]:
    """Filter out rungs that are switched off. Unknown ids count as enabled."""
    return [rung for rung in rungs if enabled.get(rung.id, True)]
