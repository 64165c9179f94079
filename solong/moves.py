"""Player and enemy movement, and the frame clock that drives the enemies."""

from __future__ import annotations

import os
from enum import Enum
from random import Random
from typing import Optional, Union

from solong.level import Level, Tile

COIN_FRAME = 3000
ENEMY_FRAME = 5000
FRAME_PERIOD = 100000
ENEMY_ROLL_MAX = 8

PLAYER_DEFEAT = "\033[31mDEFEAT - You died !\n\033[37m"
ENEMY_DEFEAT = "DEFEAT - You died !\n"


class Direction(Enum):
    """A step on the grid, with the tile values that face that way."""

    UP = (0, -1, "t", "T")
    DOWN = (0, 1, "b", "B")
    LEFT = (-1, 0, "l", "L")
    RIGHT = (1, 0, "r", "R")

    def __init__(self, dx: int, dy: int, player_value: str, enemy_value: str) -> None:
        self.dx = dx
        self.dy = dy
        self.player_value = player_value
        self.enemy_value = enemy_value


_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_ENEMY_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Defeat(Exception):
    """The player and an enemy met."""

    def __init__(self, message: str = ENEMY_DEFEAT) -> None:
        self.message = message
        super().__init__(message.strip())


def key_to_direction(key: Union[int, str]) -> Optional[Direction]:
    """Map the w, a, s, d keys (as characters or key codes) to a direction."""
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    return _KEYS.get(key)


def random_int(maximum: int, rng: Optional[Random] = None) -> int:
    """A random byte reduced to the range 0 to ``maximum`` inclusive."""
    byte = os.urandom(1)[0] if rng is None else rng.randrange(256)
    return byte % (maximum + 1)


def _neighbour(level: Level, tile: Tile, direction: Direction) -> Tile:
    return level.tile_at(tile.position.x + direction.dx, tile.position.y + direction.dy)


def _step_onto(level: Level, origin: Tile, dest: Tile, new_value: str) -> None:
    level.player = dest
    if dest.value == "C":
        level.coins_found += 1
        if level.coins_found == level.coins_count and level.exit is not None:
            level.exit.value = "e"
            level.exit.changed = True
    level.move_count += 1
    level.moved += 1
    dest.value = new_value
    dest.changed = True
    origin.value = "0"


def move_player(level: Level, direction: Direction) -> bool:
    """Move the player one step; return True if the player changed tile.

    Walking into an open exit with every coin collected finishes the level.
    Walking into an enemy raises :class:`Defeat`. Walls, the closed exit and
    enemies block the move, but the player still turns to face that way.
    """
    if level.player is None:
        raise ValueError("the level has no player")
    origin = level.player
    dest = _neighbour(level, origin, direction)
    origin.changed = True
    if dest.value == "e":
        if level.coins_found == level.coins_count:
            level.finished = True
        return False
    if dest.is_enemy():
        raise Defeat(PLAYER_DEFEAT)
    if dest.value not in ("1", "E", "S"):
        _step_onto(level, origin, dest, direction.player_value)
        return True
    origin.value = direction.player_value
    return False


def move_enemy(level: Level, index: int, direction: Direction) -> bool:
    """Move enemy number ``index`` one step; return True if it changed tile.

    Enemies only walk onto empty floor. Reaching the player raises
    :class:`Defeat`.
    """
    enemy = level.enemies[index]
    enemy.changed = True
    dest = _neighbour(level, enemy, direction)
    if dest.is_player():
        raise Defeat(ENEMY_DEFEAT)
    if dest.value == "0":
        dest.value = direction.enemy_value
        dest.changed = True
        enemy.value = "0"
        level.enemies[index] = dest
        return True
    enemy.value = direction.enemy_value
    return False


def move_enemies(level: Level, rng: Optional[Random] = None) -> None:
    """Give every enemy a chance to take one random step."""
    for index in range(len(level.enemies)):
        roll = random_int(ENEMY_ROLL_MAX, rng)
        if roll < len(_ENEMY_DIRECTIONS):
            move_enemy(level, index, _ENEMY_DIRECTIONS[roll])


class FrameClock:
    """Counts frames and schedules coin animation and enemy moves."""

    def __init__(self) -> None:
        self.frame = 0

    def tick(self, level: Level, rng: Optional[Random] = None) -> None:
        """Advance one frame, acting on ``level`` when the frame calls for it."""
        if self.frame % COIN_FRAME == 0:
            for coin in level.coins:
                coin.changed = True
        elif self.frame % ENEMY_FRAME == 0:
            move_enemies(level, rng)
        self.frame += 1
        if self.frame == FRAME_PERIOD:
            self.frame = 0