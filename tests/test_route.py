import pytest

from solong.route import InvalidMapError, check_route, exit_reachable, mark_reachable

VALID = [
    "1111111",
    "1P0C001",
    "10110E1",
    "1C00001",
    "1111111",
]

COIN_WALLED_OFF = [
    "111111",
    "1P0111",
    "111C01",
    "1E0001",
    "111111",
]

EXIT_WALLED_OFF = [
    "11111",
    "1P0C1",
    "11111",
    "1E001",
    "11111",
]


def _count(grid, tile):
    return "".join(grid).count(tile)


def test_all_coins_marked_in_valid_map():
    marked = mark_reachable(VALID)
    assert _count(marked, "C") == 0
    assert _count(marked, "K") == _count(VALID, "C")


def test_all_floor_marked_in_valid_map():
    marked = mark_reachable(VALID)
    assert _count(marked, "0") == 0
    assert _count(marked, "O") == _count(VALID, "0")


def test_marking_keeps_walls_player_and_exit():
    marked = mark_reachable(VALID)
    for original, result in zip(VALID, marked):
        for before, after in zip(original, result):
            if before in "1PE":
                assert after == before


def test_marking_is_idempotent():
    once = mark_reachable(VALID)
    assert mark_reachable(once) == once


def test_marking_does_not_change_input():
    grid = list(VALID)
    mark_reachable(grid)
    assert grid == VALID


def test_unreachable_coin_stays():
    marked = mark_reachable(COIN_WALLED_OFF)
    assert _count(marked, "C") == _count(COIN_WALLED_OFF, "C")


def test_check_route_valid_map():
    assert check_route(VALID) is True


def test_check_route_unreachable_coin_raises():
    with pytest.raises(InvalidMapError):
        check_route(COIN_WALLED_OFF)


def test_check_route_unreachable_exit():
    assert check_route(EXIT_WALLED_OFF) is False


def test_exit_needs_marked_neighbour():
    assert exit_reachable(VALID) is False
    assert exit_reachable(mark_reachable(VALID)) is True


def test_exit_next_to_player():
    grid = ["1111", "1PE1", "1111"]
    assert exit_reachable(grid) is True
    assert check_route(grid) is True


def test_invalid_map_error_is_value_error():
    with pytest.raises(ValueError):
        check_route(COIN_WALLED_OFF)