import pytest

from solong.map_loader import GameMap
from solong.validation import (
    MapErrorCode,
    MapValidationError,
    check_elements,
    check_path,
    check_rectangle,
    check_walls,
    count_elements,
    error_message,
    is_valid_char,
    validate_count,
    validate_map,
)


def make_map(*rows):
    return GameMap(grid=[list(row) for row in rows], width=len(rows[0]))


VALID = ("1111111", "1P0C0E1", "1111111")


def test_valid_map_passes_and_is_returned():
    game_map = make_map(*VALID)
    assert validate_map(game_map) is game_map
    assert game_map.lines == list(VALID)


@pytest.mark.parametrize("c", list("01PEC"))
def test_valid_chars(c):
    assert is_valid_char(c) is True


@pytest.mark.parametrize("c", ["X", " ", "p", "\n"])
def test_invalid_chars(c):
    assert is_valid_char(c) is False


def test_count_elements():
    game_map = make_map("111111", "1PCCE1", "111111")
    assert count_elements(game_map) == (1, 1, 2)
    assert count_elements(game_map).collectibles == 2


@pytest.mark.parametrize(
    "counts, code",
    [
        ((0, 1, 1), MapErrorCode.NO_PLAYER),
        ((2, 1, 1), MapErrorCode.MULTI_PLAYER),
        ((1, 0, 1), MapErrorCode.NO_EXIT),
        ((1, 2, 1), MapErrorCode.MULTI_EXIT),
        ((1, 1, 0), MapErrorCode.NO_COLLECT),
        ((0, 0, 0), MapErrorCode.NO_PLAYER),
    ],
)
def test_validate_count_errors(counts, code):
    with pytest.raises(MapValidationError) as info:
        validate_count(*counts)
    assert info.value.code == code


def test_error_messages_from_source():
    assert error_message(MapErrorCode.NO_PATH) == "Map has no valid path"
    assert error_message(MapErrorCode.MAP_TOO_SMALL) == error_message(
        MapErrorCode.NOT_RECTANGLE
    )
    assert error_message(MapErrorCode.OK) == ""


def test_exception_text_is_message():
    err = MapValidationError(MapErrorCode.NO_WALLS)
    assert str(err) == error_message(MapErrorCode.NO_WALLS)


def test_too_small():
    with pytest.raises(MapValidationError) as info:
        check_rectangle(make_map("1111", "1111"))
    assert info.value.code == MapErrorCode.MAP_TOO_SMALL


def test_not_rectangle():
    game_map = make_map("11111", "1PCE1", "1111")
    with pytest.raises(MapValidationError) as info:
        validate_map(game_map)
    assert info.value.code == MapErrorCode.NOT_RECTANGLE


def test_missing_walls():
    with pytest.raises(MapValidationError) as info:
        check_walls(make_map("1111111", "0P0C0E1", "1111111"))
    assert info.value.code == MapErrorCode.NO_WALLS


def test_invalid_character():
    with pytest.raises(MapValidationError) as info:
        check_elements(make_map("1111111", "1PXC0E1", "1111111"))
    assert info.value.code == MapErrorCode.INVALID_CHAR


def test_multiple_players_through_validate_map():
    with pytest.raises(MapValidationError) as info:
        validate_map(make_map("1111111", "1PPC0E1", "1111111"))
    assert info.value.code == MapErrorCode.MULTI_PLAYER


def test_walled_off_collectible_has_no_path():
    with pytest.raises(MapValidationError) as info:
        check_path(make_map("1111111", "1P01C01", "1E01111", "1111111"))
    assert info.value.code == MapErrorCode.NO_PATH


def test_exit_blocks_path():
    with pytest.raises(MapValidationError) as info:
        validate_map(make_map("111111", "1P0EC1", "111111"))
    assert info.value.code == MapErrorCode.NO_PATH


def test_check_path_without_player():
    with pytest.raises(MapValidationError) as info:
        check_path(make_map("11111", "10CE1", "11111"))
    assert info.value.code == MapErrorCode.NO_PLAYER


def test_check_path_leaves_map_unchanged():
    game_map = make_map(*VALID)
    check_path(game_map)
    assert game_map.lines == list(VALID)


def test_rectangle_checked_before_walls():
    game_map = make_map("0000", "0PCE", "000")
    with pytest.raises(MapValidationError) as info:
        validate_map(game_map)
    assert info.value.code == MapErrorCode.NOT_RECTANGLE