"""Parser for ghost-leg puzzle text.

Grammar (line oriented, single-space separated):

    <lane_count> <height> <unused>
    <height> <x0> <x1>
    ...

The third header field is required but not interpreted. A rung's id is its
1-based line position after the header. One trailing empty line is accepted
so newline-terminated input parses.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from amida.core.exceptions import ParseError
from amida.core.rung import Rung

FIELDS_PER_LINE = 3


@dataclass(frozen=True)
class Puzzle:
    lane_count: int
    height: int
    rungs: tuple[Rung, ...]


def _parse_int(token: str, line_number: int, line: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ParseError(
            f"could not parse {token!r} as an integer", line_number, line
        ) from exc


def _split_fields(line: str, line_number: int, what: str) -> list[str]:
    fields = line.split(" ")
    if len(fields) != FIELDS_PER_LINE:
        raise ParseError(
            f"expected {FIELDS_PER_LINE} values {what}, got {len(fields)}",
            line_number,
            line,
        )
    return fields


def parse_puzzle(text: str) -> Puzzle:
    """Parse puzzle text into a Puzzle.

    Raises:
        ParseError: on empty input, a wrong field count or a non-integer token
    """
    if text == "":
        raise ParseError("expected a non-empty string")

    lines = text.split("\n")
    header = lines[0]
    fields = _split_fields(header, 1, "on the first line")
    lane_count = _parse_int(fields[0], 1, header)
    height = _parse_int(fields[1], 1, header)

    rungs: list[Rung] = []
    for index in range(1, len(lines)):
        line = lines[index]
        if index == len(lines) - 1 and line == "":
            break

        line_number = index + 1
        rung_height, x0, x1 = (
            _parse_int(token, line_number, line)
            for token in _split_fields(line, line_number, "per rung line")
        )
        rungs.append(Rung.from_endpoints(index, rung_height, x0, x1))

    return Puzzle(lane_count=lane_count, height=height, rungs=tuple(rungs))


def parse_puzzle_file(path: Union[str, Path]) -> Puzzle:
    """Read a UTF-8 puzzle file and parse it."""
    return parse_puzzle(Path(path).read_text(encoding="utf-8"))
