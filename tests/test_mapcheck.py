import pytest

from solong.mapcheck import (
    MapError,
    check_ber,
    check_map,
    check_old_paths,
    check_paths,
    check_rectangle,
    check_values,
    check_walls,
    count_value,
    load_map,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_map_strips_newlines(tmp_path):
    path = write(tmp_path, VALID)
    assert load_map(path) == VALID.splitlines()


def test_load_map_empty(tmp_path):
    path = write(tmp_path, "")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert info.value.message == "is empty."


def test_check_map_valid_returns_grid(tmp_path):
    path = write(tmp_path, VALID)
    assert check_map(path) == load_map(path)


def test_error_text_names_the_map(tmp_path):
    path = tmp_path / "nothing.ber"
    with pytest.raises(MapError) as info:
        check_map(path)
    assert info.value.message == "can't be loaded."
    assert str(info.value) == f'Map "{path}" can\'t be loaded.'


@pytest.mark.parametrize(
    "text, message",
    [
        ("1111\n1P1\n", "isn't rectangular."),
        ("11111\n1PXC1\n1E001\n11111\n", "contains invalid value."),
        ("11111\n1PEC0\n11111\n", "isn't surrounded by walls."),
        ("111111\n1PPCE1\n111111\n", "doesn't have one player."),
        ("11111\n1PC01\n11111\n", "doesn't have one exit."),
        ("11111\n1PE01\n11111\n", "doesn't have any items."),
        ("111111\n1P1C01\n1E1111\n111111\n", "doesn't have solution."),
        ("111111\n1PC1E1\n111111\n", "doesn't have a solution."),
    ],
)
def test_check_map_errors(tmp_path, text, message):
    path = write(tmp_path, text)
    with pytest.raises(MapError) as info:
        check_map(path)
    assert info.value.message == message


@pytest.mark.parametrize("name", ["map.txt", ".ber"])
def test_check_map_wrong_extension(tmp_path, name):
    path = write(tmp_path, VALID, name)
    with pytest.raises(MapError) as info:
        check_map(path)
    assert info.value.message == "wrong ext,hidden"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/a.ber", True),
        ("x.ber", True),
        ("a.txt", False),
        (".ber", False),
        ("maps/.ber", False),
        ("maps/a.be", False),
    ],
)
def test_check_ber(path, expected):
    assert check_ber(path) is expected


def test_check_rectangle():
    assert check_rectangle(["111", "101", "111"])
    assert not check_rectangle(["111", "10", "111"])


def test_check_values():
    assert check_values(["10PECS"])
    assert not check_values(["10PECSx"])


def test_check_walls():
    assert check_walls(["111", "101", "111"])
    assert not check_walls(["111", "100", "111"])
    assert not check_walls(["111", "101", "110"])
    assert not check_walls(["", "1", "1"])


def test_count_value():
    grid = ["1C1", "CPC"]
    assert count_value(grid, "C") == 3
    assert count_value(grid, "E") == 0


def test_check_paths_leaves_grid_untouched():
    grid = VALID.splitlines()
    copy = list(grid)
    assert check_paths(grid)
    assert grid == copy


def test_exit_blocks_coins_only_for_check_paths():
    grid = ["111111", "1PEC01", "111111"]
    assert not check_paths(grid)
    assert check_old_paths(grid)


def test_enemies_do_not_block_paths():
    grid = ["111111", "1PSCE1", "111111"]
    assert check_paths(grid)
    assert check_old_paths(grid)