import pytest

from sc2kit.game_data import Race
from sc2kit.game_info import GameInfo, PlayerInfo, map_center, map_name_from_path
from sc2kit.geometry import Point2, Rect


def test_map_center_of_area():
    assert map_center(Rect(0, 0, 10, 20)).as_tuple() == (5.0, 10.0)


def test_map_center_of_degenerate_area_is_its_corner():
    assert map_center(Rect(24, 17, 24, 17)).as_tuple() == (24.0, 17.0)


def test_map_center_lies_inside_area():
    area = Rect(3, 7, 151, 130)
    c = map_center(area)
    assert area.x0 <= c.x <= area.x1
    assert area.y0 <= c.y <= area.y1
    assert c.x == int(c.x) and c.y == int(c.y)


def test_map_name_from_path_strips_extension():
    assert map_name_from_path("/maps/Acropolis LE.SC2Map") == "Acropolis LE"


def test_map_name_from_path_keeps_inner_dots():
    assert map_name_from_path("maps/a.b.SC2Map") == "a.b"


def test_map_name_from_empty_path_raises():
    with pytest.raises(ValueError):
        map_name_from_path("")


def test_game_info_derives_fields():
    info = GameInfo(local_map_path="/maps/Ladder/Simple64.SC2Map", playable_area=Rect(0, 0, 10, 20))
    assert info.map_name_path == "Simple64"
    assert info.map_center.as_tuple() == map_center(Rect(0, 0, 10, 20)).as_tuple()


def test_game_info_keeps_given_values():
    info = GameInfo(
        local_map_path="/maps/Simple64.SC2Map",
        map_name_path="Custom",
        map_center=Point2(1.5, 2.5),
    )
    assert info.map_name_path == "Custom"
    assert info.map_center.as_tuple() == (1.5, 2.5)


def test_default_game_info_is_empty():
    info = GameInfo()
    assert info.map_name_path == ""
    assert info.players == {}
    assert info.map_center.as_tuple() == (0.0, 0.0)


def test_player_info_defaults():
    player = PlayerInfo(id=2, player_type="Computer", race_requested=Race.RANDOM)
    info = GameInfo(players={player.id: player})
    assert info.players[2].race_actual is None
    assert info.players[2].race_requested is Race.RANDOM
    assert info.players[2].player_name is None