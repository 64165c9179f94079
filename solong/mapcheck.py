"""Validation of ``.ber`` map files."""

from __future__ import annotations

import os
from typing import Iterable, List, Sequence, Union

from solong.lines import read_lines

PathLike = Union[str, "os.PathLike[str]"]

VALID_VALUES = frozenset("10PECS")


class MapError(Exception):
    """A map file that cannot be played."""

    def __init__(self, path: PathLike, message: str) -> None:
        self.path = os.fspath(path)
        self.message = message
        super().__init__(f'Map "{self.path}" {message}')


def load_map(path: PathLike) -> List[str]:
    """Read the map at ``path`` as a list of rows without newlines."""
    try:
        lines = read_lines(path)
    except OSError:
        raise MapError(path, "can't be loaded.") from None
    if not lines:
        raise MapError(path, "is empty.")
    return [line.split("\n", 1)[0] for line in lines]


def check_rectangle(grid: Sequence[str]) -> bool:
    """True when every row is as long as the first."""
    if not grid:
        return True
    width = len(grid[0])
    return all(len(row) == width for row in grid[1:])


def check_values(grid: Iterable[str]) -> bool:
    """True when the map holds only wall, floor, player, exit, coin, enemy."""
    return all(char in VALID_VALUES for row in grid for char in row)


def check_walls(grid: Sequence[str]) -> bool:
    """True when the border of the map is made of walls."""
    if not grid:
        return False
    width = len(grid[0])
    if any(char != "1" for char in grid[0]):
        return False
    if any(char != "1" for char in grid[-1]):
        return False
    return all(row[:1] == "1" and row[width - 1 : width] == "1" for row in grid)


def count_value(grid: Iterable[str], char: str) -> int:
    """Number of cells holding ``char``."""
    return sum(row.count(char) for row in grid)


def _flood(grid: Sequence[str], blocked: str) -> List[str]:
    """Mark with ``2`` every cell reachable from a player, on a copy."""
    cells = [list(row) for row in grid]
    stack = [
        (x, y)
        for y, row in enumerate(cells)
        for x, char in enumerate(row)
        if char == "P"
    ]
    while stack:
        x, y = stack.pop()
        cells[y][x] = "2"
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            if 0 <= ny < len(cells) and 0 <= nx < len(cells[ny]):
                if cells[ny][nx] not in blocked:
                    stack.append((nx, ny))
    return ["".join(row) for row in cells]


def check_paths(grid: Sequence[str]) -> bool:
    """True when every coin is reachable without walking over the exit."""
    return count_value(_flood(grid, "12E"), "C") == 0


def check_old_paths(grid: Sequence[str]) -> bool:
    """True when every coin and the exit are reachable from the player."""
    filled = _flood(grid, "12")
    return count_value(filled, "E") == 0 and count_value(filled, "C") == 0


def check_ber(path: PathLike) -> bool:
    """True for a visible file name with the ``.ber`` extension."""
    text = os.fspath(path)
    if len(text) <= 4:
        return False
    if text[-5] == "/":
        return False
    return text.endswith(".ber")


def check_map(path: PathLike) -> List[str]:
    """Validate the map at ``path`` and return its rows.

    Raises :class:`MapError` describing the first problem found.
    """
    grid = load_map(path)
    if not check_rectangle(grid):
        raise MapError(path, "isn't rectangular.")
    if not check_values(grid):
        raise MapError(path, "contains invalid value.")
    if not check_walls(grid):
        raise MapError(path, "isn't surrounded by walls.")
    if count_value(grid, "P") != 1:
        raise MapError(path, "doesn't have one player.")
    if count_value(grid, "E") != 1:
        raise MapError(path, "doesn't have one exit.")
    if count_value(grid, "C") < 1:
        raise MapError(path, "doesn't have any items.")
    if not check_paths(grid):
        raise MapError(path, "doesn't have solution.")
    if not check_ber(path):
        raise MapError(path, "wrong ext,hidden")
    if not check_old_paths(grid):
        raise MapError(path, "doesn't have a solution.")
    return grid