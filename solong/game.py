"""The game: a sequence of levels, its main loop and its window."""

from __future__ import annotations

import os
import sys
from random import Random
from typing import Dict, List, Optional, Sequence, Tuple, Union

from solong.level import IMG_SIZE, Level, Position, Tile, parse_level
from solong.mapcheck import MapError, check_map
from solong.moves import Defeat, FrameClock, key_to_direction, move_player
from solong.output import printf, unsigned_itoa

ESCAPE_KEYS = frozenset({65307, 27})
COIN_SPRITES = 8
_COIN_WRAP = 7

_FIXED_ASSETS = {
    "1": "wall",
    "0": "empty",
    "E": "trapdoor_closed",
    "e": "trapdoor_opened",
}
_PLAYER_ASSETS = {
    "t": "knight_top",
    "b": "knight_bottom",
    "l": "knight_left",
    "r": "knight_right",
    "P": "knight_right",
}
_ENEMY_ASSETS = {
    "T": "skeleton_top",
    "B": "skeleton_bottom",
    "L": "skeleton_left",
    "R": "skeleton_right",
    "S": "skeleton_right",
}

ASSET_NAMES = (
    "wall",
    "empty",
    "trapdoor_opened",
    "trapdoor_closed",
    "knight_top",
    "knight_bottom",
    "knight_left",
    "knight_right",
    "skeleton_top",
    "skeleton_bottom",
    "skeleton_left",
    "skeleton_right",
) + tuple(f"coin_{index}" for index in range(COIN_SPRITES))

Draw = Tuple[Position, str]


def asset_name(tile: Tile) -> Optional[str]:
    """Name of the image that shows ``tile``, or ``None`` for no image."""
    value = tile.value
    if value == "C":
        return f"coin_{tile.sprite}"
    for table in (_FIXED_ASSETS, _PLAYER_ASSETS, _ENEMY_ASSETS):
        if value in table:
            return table[value]
    return None


def load_assets(directory: Union[str, "os.PathLike[str]"] = "./assets") -> Dict[str, object]:
    """Load every image the game draws from ``directory``."""
    paths = {name: os.path.join(directory, f"{name}.xpm") for name in ASSET_NAMES}
    for path in paths.values():
        if not os.path.isfile(path):
            raise FileNotFoundError(path)
    import pygame

    return {name: pygame.image.load(path) for name, path in paths.items()}


class Game:
    """The levels being played and the state that spans them."""

    def __init__(self, levels: Sequence[Level], rng: Optional[Random] = None) -> None:
        if not levels:
            raise ValueError("a game needs at least one level")
        self.levels: List[Level] = list(levels)
        self.current_level = 0
        self.total_move_count = 0
        self.clock = FrameClock()
        self.rng = rng
        self.running = True
        self.won = False

    def current(self) -> Level:
        """The level being played."""
        return self.levels[self.current_level]

    def next_level(self) -> bool:
        """Move on to the next level; False when the last one was won."""
        self.total_move_count += self.current().move_count
        if self.current_level >= len(self.levels) - 1:
            self.won = True
            self.running = False
            return False
        self.current_level += 1
        return True

    def handle_key(self, key: Union[int, str]) -> bool:
        """React to a key press; return False once the player asked to quit.

        Raises :class:`Defeat` when the player walks into an enemy.
        """
        if key in ESCAPE_KEYS:
            self.running = False
            return False
        direction = key_to_direction(key)
        if direction is not None:
            move_player(self.current(), direction)
        return True

    def step(self) -> List[Draw]:
        """Run one frame and return the images to draw, with their positions.

        Raises :class:`Defeat` when an enemy reaches the player.
        """
        level = self.current()
        self.clock.tick(level, self.rng)
        draws: List[Draw] = []
        for tile in list(level.changed_tiles()):
            name = asset_name(tile)
            if name is not None:
                draws.append((tile.position, name))
            if tile.value == "C":
                tile.sprite += 1
                if tile.sprite == _COIN_WRAP:
                    tile.sprite = 0
            tile.changed = False
        if level.finished and not self.next_level():
            return draws
        level = self.current()
        if level.moved:
            level.tiles[0][0].changed = True
        return draws


def _open_window(pygame, game: Game):
    level = game.current()
    screen = pygame.display.set_mode((level.size.w * IMG_SIZE, level.size.h * IMG_SIZE))
    pygame.display.set_caption(f"Level {game.current_level + 1}")
    pygame.key.set_repeat()
    return screen


def run(game: Game, asset_dir: Union[str, "os.PathLike[str]"] = "./assets") -> int:
    """Open the window and play ``game`` until it is won, lost or quit."""
    assets = load_assets(asset_dir)
    import pygame

    pygame.init()
    try:
        screen = _open_window(pygame, game)
        font = pygame.font.Font(None, 20)
        shown = game.current_level
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(event.key)
            if not game.running:
                break
            for position, name in game.step():
                screen.blit(assets[name], (position.x * IMG_SIZE, position.y * IMG_SIZE))
            if game.won:
                break
            if game.current_level != shown:
                shown = game.current_level
                screen = _open_window(pygame, game)
                continue
            level = game.current()
            if level.moved:
                text = font.render(unsigned_itoa(level.move_count), True, (255, 255, 255))
                screen.blit(text, (13, 19 - font.get_ascent()))
            pygame.display.flip()
    except Defeat as defeat:
        printf("%s", defeat.message)
    finally:
        pygame.quit()
    if game.won:
        printf("VICTORY - You conquered the dungeon!\n")
        printf("You made %d moves\n", game.total_move_count)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the map given on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Error\n No maps passed as arguments")
        return 0
    if not args[0]:
        return 0
    try:
        grids = [check_map(path) for path in args]
    except MapError as error:
        printf('Error\nMap "%s" %s\n', error.path, error.message)
        return 0
    game = Game([parse_level(grid) for grid in grids])
    return run(game)