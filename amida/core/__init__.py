"""Core modules for amida.

Core infrastructure shared by every board:
- rung: Rung entity, deduplication and walk ordering
- path: PathPoint and the pure path-resolution walk
- exceptions: error taxonomy

The board simulator itself lives in amida.core.board, which depends on the
interfaces package and is therefore not re-exported here.
"""

from amida.core.exceptions import (
    AmidaError,
    ConfigurationError,
    InvariantViolation,
    LaneOutOfRangeError,
    ParseError,
)
from amida.core.path import PathPoint, landing_column, resolve_path
from amida.core.rung import (
    Rung,
    active_prefix,
    deduplicate_rungs,
    effective_rungs,
    walk_order,
)

__all__ = [
    # Errors
    "AmidaError",
    "ConfigurationError",
    "InvariantViolation",
    "LaneOutOfRangeError",
    "ParseError",
    # Rungs
    "Rung",
    "active_prefix",
    "deduplicate_rungs",
    "effective_rungs",
    "walk_order",
    # Paths
    "PathPoint",
    "landing_column",
    "resolve_path",
]
