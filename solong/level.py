"""Levels built from map files: tiles, player, exit, coins and enemies."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from solong.lines import read_lines

IMG_SIZE = 32
PLAYER_VALUES = frozenset("Ptblr")
ENEMY_VALUES = frozenset("STBLR")


@dataclass(frozen=True)
class Position:
    """Column ``x`` and row ``y`` of a tile."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width and height of a level, in tiles."""

    w: int
    h: int


@dataclass(eq=False)
class Tile:
    """One cell of a level; ``changed`` marks it for redrawing."""

    position: Position
    value: str
    sprite: int = 0
    changed: bool = True

    def is_player(self) -> bool:
        """True when the tile holds the player, facing any way."""
        return self.value in PLAYER_VALUES

    def is_enemy(self) -> bool:
        """True when the tile holds an enemy, facing any way."""
        return self.value in ENEMY_VALUES


@dataclass(eq=False)
class Level:
    """The state of one level being played."""

    size: Size
    tiles: List[List[Tile]]
    player: Optional[Tile]
    exit: Optional[Tile]
    coins: List[Tile] = field(default_factory=list)
    enemies: List[Tile] = field(default_factory=list)
    coins_found: int = 0
    move_count: int = 0
    moved: int = 1
    finished: bool = False

    @property
    def coins_count(self) -> int:
        """Number of coins the level started with."""
        return len(self.coins)

    def tile_at(self, x: int, y: int) -> Tile:
        """The tile in column ``x`` of row ``y``."""
        if not (0 <= y < self.size.h and 0 <= x < self.size.w):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.tiles[y][x]

    def changed_tiles(self) -> Iterator[Tile]:
        """Tiles marked for redrawing, row by row."""
        for row in self.tiles:
            yield from (tile for tile in row if tile.changed)


def parse_level(lines: Iterable[str]) -> Level:
    """Build a level from map lines, with or without their newlines."""
    rows = [line.split("\n", 1)[0] for line in lines]
    if not rows:
        raise ValueError("a level needs at least one row")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("a level must be rectangular")
    tiles = [
        [Tile(Position(x, y), value) for x, value in enumerate(row)]
        for y, row in enumerate(rows)
    ]
    player = None
    exit_tile = None
    coins = []
    enemies = []
    for row in tiles:
        for tile in row:
            if tile.is_player():
                player = tile
            elif tile.value == "E":
                exit_tile = tile
            if tile.value == "C":
                coins.append(tile)
            elif tile.value == "S":
                enemies.append(tile)
    return Level(
        size=Size(width, len(rows)),
        tiles=tiles,
        player=player,
        exit=exit_tile,
        coins=coins,
        enemies=enemies,
    )


def load_level(path: Union[str, "os.PathLike[str]"]) -> Level:
    """Build a level from the map file at ``path``."""
    return parse_level(read_lines(path))