import pytest

from solong.level import Level, Position, Size, Tile, load_level, parse_level

LINES = ["11111\n", "1PCS1\n", "1CE01\n", "11111\n"]


@pytest.fixture
def level():
    return parse_level(LINES)


def test_size(level):
    assert level.size == Size(len(LINES[0]) - 1, len(LINES))


def test_tiles_match_lines(level):
    rows = ["".join(tile.value for tile in row) for row in level.tiles]
    assert rows == [line.rstrip("\n") for line in LINES]


def test_tile_positions(level):
    for y, row in enumerate(level.tiles):
        for x, tile in enumerate(row):
            assert tile.position == Position(x, y)


def test_player_and_exit(level):
    assert level.player is level.tile_at(1, 1)
    assert level.player.value == "P"
    assert level.exit is level.tile_at(2, 2)
    assert level.exit.value == "E"


def test_coins_and_enemies_in_row_order(level):
    assert [tile.position for tile in level.coins] == [Position(2, 1), Position(1, 2)]
    assert level.coins_count == 2
    assert [tile.position for tile in level.enemies] == [Position(3, 1)]


def test_initial_counters(level):
    assert level.coins_found == 0
    assert level.move_count == 0
    assert level.moved == 1
    assert level.finished is False


def test_changed_tiles(level):
    total = level.size.w * level.size.h
    assert len(list(level.changed_tiles())) == total
    level.tile_at(0, 0).changed = False
    level.tile_at(4, 3).changed = False
    changed = list(level.changed_tiles())
    assert len(changed) == total - 2
    assert level.tile_at(0, 0) not in changed


def test_tile_at_out_of_range(level):
    with pytest.raises(IndexError):
        level.tile_at(level.size.w, 0)


@pytest.mark.parametrize("value", list("Ptblr"))
def test_is_player(value):
    tile = Tile(Position(0, 0), value)
    assert tile.is_player()
    assert not tile.is_enemy()


@pytest.mark.parametrize("value", list("STBLR"))
def test_is_enemy(value):
    tile = Tile(Position(0, 0), value)
    assert tile.is_enemy()
    assert not tile.is_player()


@pytest.mark.parametrize("value", list("10ECe"))
def test_neither_player_nor_enemy(value):
    tile = Tile(Position(0, 0), value)
    assert not tile.is_player()
    assert not tile.is_enemy()


def test_new_tile_defaults():
    tile = Tile(Position(3, 4), "0")
    assert tile.sprite == 0
    assert tile.changed is True


def test_load_level_matches_parse(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("".join(LINES))
    loaded = load_level(path)
    parsed = parse_level(LINES)
    assert isinstance(loaded, Level)
    assert loaded.size == parsed.size
    assert loaded.player.position == parsed.player.position
    assert [t.position for t in loaded.coins] == [t.position for t in parsed.coins]


def test_parse_level_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_level(["111\n", "11\n"])


def test_parse_level_rejects_empty():
    with pytest.raises(ValueError):
        parse_level([])