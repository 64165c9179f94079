import random

import pytest

from solong.level import parse_level
from solong.moves import (
    Defeat,
    Direction,
    FrameClock,
    key_to_direction,
    move_enemies,
    move_enemy,
    move_player,
    random_int,
)

MAP = [
    "1111111",
    "1P0C0E1",
    "1000S01",
    "1111111",
]


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


@pytest.fixture
def level():
    return parse_level(MAP)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("w", Direction.UP),
        ("s", Direction.DOWN),
        ("a", Direction.LEFT),
        ("d", Direction.RIGHT),
        (ord("d"), Direction.RIGHT),
        ("x", None),
        (65307, None),
    ],
)
def test_key_to_direction(key, expected):
    assert key_to_direction(key) is expected


def test_random_int_stays_in_range():
    rng = random.Random(1)
    values = {random_int(8, rng) for _ in range(500)}
    assert values <= set(range(9))
    assert len(values) > 1


def test_random_int_without_rng_in_range():
    assert all(0 <= random_int(3) <= 3 for _ in range(50))


def test_random_int_reduces_byte():
    assert random_int(8, _FixedRng(9)) == 0


def test_player_walks_onto_floor(level):
    origin = level.player
    assert move_player(level, Direction.RIGHT) is True
    assert level.player is level.tile_at(2, 1)
    assert level.player.value == "r"
    assert origin.value == "0"
    assert level.move_count == 1


def test_player_blocked_by_wall_turns(level):
    assert move_player(level, Direction.UP) is False
    assert level.player is level.tile_at(1, 1)
    assert level.player.value == "t"
    assert level.move_count == 0


def test_collecting_last_coin_opens_exit(level):
    move_player(level, Direction.RIGHT)
    move_player(level, Direction.RIGHT)
    assert level.coins_found == level.coins_count
    assert level.exit.value == "e"
    assert level.exit.changed is True


def test_closed_exit_blocks(level):
    level.player.value = "0"
    start = level.tile_at(4, 1)
    start.value = "P"
    level.player = start
    assert move_player(level, Direction.RIGHT) is False
    assert level.player is start
    assert level.finished is False


def test_open_exit_finishes_level(level):
    for _ in range(4):
        move_player(level, Direction.RIGHT)
    assert level.finished is True
    assert level.player is level.tile_at(4, 1)


def test_player_walking_into_enemy_is_defeated(level):
    move_player(level, Direction.RIGHT)
    move_player(level, Direction.RIGHT)
    move_player(level, Direction.RIGHT)
    with pytest.raises(Defeat):
        move_player(level, Direction.DOWN)


def test_enemy_moves_onto_floor(level):
    enemy = level.enemies[0]
    assert move_enemy(level, 0, Direction.LEFT) is True
    assert enemy.value == "0"
    assert level.enemies[0] is level.tile_at(3, 2)
    assert level.enemies[0].value == "L"


def test_enemy_blocked_turns(level):
    enemy = level.enemies[0]
    level.tile_at(5, 2).value = "1"
    assert move_enemy(level, 0, Direction.RIGHT) is False
    assert level.enemies[0] is enemy
    assert enemy.value == "R"


def test_enemy_does_not_walk_onto_coin(level):
    move_enemy(level, 0, Direction.UP)
    assert move_enemy(level, 0, Direction.LEFT) is False
    assert level.tile_at(3, 1).value == "C"


def test_enemy_reaching_player_defeats():
    level = parse_level(["11111", "1PS01", "11111"])
    with pytest.raises(Defeat) as info:
        move_enemy(level, 0, Direction.LEFT)
    assert "DEFEAT" in info.value.message


def test_move_enemies_uses_roll(level):
    move_enemies(level, _FixedRng(0))
    assert level.enemies[0] is level.tile_at(4, 1)
    assert level.enemies[0].value == "T"


def test_move_enemies_high_roll_stays(level):
    enemy = level.enemies[0]
    move_enemies(level, _FixedRng(8))
    assert level.enemies[0] is enemy
    assert enemy.value == "S"


def test_clock_marks_coins_on_first_frame(level):
    for tile in level.coins:
        tile.changed = False
    clock = FrameClock()
    clock.tick(level)
    assert all(tile.changed for tile in level.coins)
    assert clock.frame == 1


def test_clock_moves_enemies_on_enemy_frame(level):
    clock = FrameClock()
    rng = _FixedRng(3)
    for _ in range(5000):
        clock.tick(level, rng)
    assert level.enemies[0] is level.tile_at(4, 2)
    clock.tick(level, rng)
    assert level.enemies[0] is level.tile_at(5, 2)
    assert level.enemies[0].value == "R"


def test_clock_wraps_around(level):
    clock = FrameClock()
    rng = _FixedRng(8)
    for _ in range(100000):
        clock.tick(level, rng)
    assert clock.frame == 0