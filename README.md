# solong

A small top-down dungeon game. You play a knight on a grid map: pick up
every coin, dodge the wandering skeletons, then walk onto the trapdoor to
finish the level. Clear the last level and the game prints how many moves
you made in total.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong maps/level1.ber
```

The command takes exactly one map file. With any other number of
arguments it prints an error and stops. The map is checked first (see
below); a bad map is reported as `Error` followed by
`Map "<path>" <problem>`.

Controls:

- `w` / `a` / `s` / `d`: move up, left, down, right
- `Esc` or closing the window: quit

The move count of the level is drawn in the top-left corner. Walking into
a skeleton, or a skeleton walking into you, ends the game with
`DEFEAT - You died !`. Collecting every coin opens the trapdoor; stepping
onto it finishes the level. Winning prints
`VICTORY - You conquered the dungeon!` and the total number of moves.

### Images

The package ships no images. The command loads them from an `assets`
directory in the current working directory, one `.xpm` file per image:

```
wall.xpm  empty.xpm  trapdoor_opened.xpm  trapdoor_closed.xpm
knight_top.xpm  knight_bottom.xpm  knight_left.xpm  knight_right.xpm
skeleton_top.xpm  skeleton_bottom.xpm  skeleton_left.xpm  skeleton_right.xpm
coin_0.xpm ... coin_7.xpm
```

If any of them is missing, `FileNotFoundError` is raised naming the file.
Each tile is drawn 32 by 32 pixels.

## Map files

A map is a text file whose name ends in `.ber`. Each line is one row of
tiles, and every row must be the same length:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | empty floor                |
| `P`  | the player (exactly one)   |
| `E`  | the exit (exactly one)     |
| `C`  | a coin (at least one)      |
| `S`  | a skeleton                 |

`solong.mapcheck.check_map` rejects a map, raising `MapError`, when it is
unreadable or empty, not rectangular, holds any other character, is not
closed by walls on every edge, has not exactly one player or exit, has no
coin, when the player cannot reach every coin without crossing the exit,
when the file name is not a visible `something.ber` name, or when the
player cannot reach every coin and the exit.

Example:

```
1111111111
1P0C00S0E1
1000110001
1C00000C01
1111111111
```

## Using it as a library

The map checks and the game rules work without opening a window:

```python
from solong.mapcheck import check_map, MapError
from solong.level import parse_level
from solong.moves import Direction, Defeat, move_player

try:
    rows = check_map("maps/level1.ber")
except MapError as error:
    print(error)
else:
    level = parse_level(rows)
    try:
        move_player(level, Direction.RIGHT)
    except Defeat:
        print("caught by a skeleton")
    print(level.move_count, level.coins_found, level.finished)
```

- `solong.level` — `Level`, `Tile`, `Position`, `Size`; `parse_level`
  builds a level from rows and `load_level` from a file (neither checks
  the map; use `check_map` for that).
- `solong.moves` — `move_player`, `move_enemy`, `move_enemies`,
  `key_to_direction`, `FrameClock` (coin animation every 3000 frames,
  random enemy steps every 5000) and the `Defeat` exception.
- `solong.game` — `Game` ties the levels together: `Game.handle_key`
  reacts to one key press, `Game.step` runs one frame and returns the
  images to draw as `(Position, name)` pairs, `Game.next_level` moves on.
  `run` plays a `Game` in a pygame window; `main` is the command.

The package also holds small helpers the game is built on:
`solong.strings` and `solong.textops` (C-style string functions),
`solong.memory` (byte buffer functions on `bytearray`),
`solong.linkedlist` (`LinkedList`), `solong.output` (a `printf` with the
`c s p d i u x X %` conversions) and `solong.lines` (`LineReader`,
`read_lines`).

## Running the tests

```
pip install .[test]
pytest
```