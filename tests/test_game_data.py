import pytest

from sc2kit.game_data import (
    AbilityTarget,
    Attribute,
    Cost,
    GameData,
    Race,
    TargetType,
    UnitTypeData,
    UpgradeData,
    effect_friendly_fire,
    effect_target,
    game_data_from_mapping,
)


def _sample():
    return {
        "abilities": [
            {
                "ability_id": 16,
                "link_name": "move",
                "link_index": 2,
                "hotkey": "M",
                "available": True,
                "target": "PointOrUnit",
                "cast_range": 5.5,
            },
            {"link_name": "no id"},
        ],
        "units": [
            {
                "unit_id": 48,
                "name": "Marine",
                "available": True,
                "mineral_cost": 50,
                "food_required": 1.0,
                "build_time": 18.0,
                "race": "Terran",
                "attributes": ["Light", "Biological"],
                "armor": 0.0,
                "tech_alias": [1, 2],
                "weapons": [
                    {
                        "type": "Any",
                        "damage": 6.0,
                        "damage_bonus": [{"attribute": "Armored", "bonus": 4.0}],
                        "attacks": 1,
                        "range": 5.0,
                        "speed": 0.61,
                    }
                ],
            }
        ],
        "upgrades": [
            {
                "upgrade_id": 15,
                "ability_id": 730,
                "name": "Stimpack",
                "mineral_cost": 100,
                "vespene_cost": 100,
                "research_time": 100.0,
            },
            {"upgrade_id": 16, "name": "missing ability"},
        ],
        "buffs": [{"buff_id": 27, "name": "Stimpack"}],
        "effects": [
            {"effect_id": 1, "name": "PsiStormPersistent", "friendly_name": "Psi Storm", "radius": 1.5},
            {"effect_id": 2, "name": "GuardianShieldPersistent", "radius": 4.5},
        ],
    }


def test_abilities_parsed_and_invalid_skipped():
    data = game_data_from_mapping(_sample())
    assert list(data.abilities) == [16]
    ability = data.abilities[16]
    assert ability.link_name == "move"
    assert ability.hotkey == "M"
    assert ability.target is AbilityTarget.POINT_OR_UNIT
    assert ability.cast_range == 5.5
    assert ability.footprint_radius is None
    assert ability.button_name is None


def test_unit_parsed_with_weapon():
    unit = game_data_from_mapping(_sample()).units[48]
    assert unit.name == "Marine"
    assert unit.race is Race.TERRAN
    assert unit.attributes == [Attribute.LIGHT, Attribute.BIOLOGICAL]
    assert unit.tech_alias == [1, 2]
    assert unit.ability is None
    weapon = unit.weapons[0]
    assert weapon.target is TargetType.ANY
    assert weapon.damage == 6
    assert weapon.damage_bonus == [(Attribute.ARMORED, 4)]
    assert weapon.speed == 0.61


def test_unit_cost_round_trip():
    unit = game_data_from_mapping(_sample()).units[48]
    assert unit.cost() == Cost(minerals=50, vespene=0, supply=1.0, time=18.0)


def test_upgrade_requires_ability():
    data = game_data_from_mapping(_sample())
    assert list(data.upgrades) == [15]
    assert data.upgrades[15].cost() == Cost(minerals=100, vespene=100, supply=0.0, time=100.0)


def test_upgrade_cost_has_no_supply():
    upgrade = UpgradeData(id=1, ability=2, mineral_cost=3, vespene_cost=4, research_time=5.0)
    assert upgrade.cost().supply == 0.0
    assert upgrade.cost().time == upgrade.research_time


def test_buffs_and_effects():
    data = game_data_from_mapping(_sample())
    assert data.buffs[27].name == "Stimpack"
    storm = data.effects[1]
    assert storm.target is TargetType.ANY
    assert storm.friendly_fire is True
    assert storm.friendly_name == "Psi Storm"
    shield = data.effects[2]
    assert shield.target is TargetType.GROUND
    assert shield.friendly_fire is False


@pytest.mark.parametrize(
    "name, target, friendly",
    [
        ("Null", TargetType.ANY, False),
        ("PsiStormPersistent", TargetType.ANY, True),
        ("ScannerSweep", TargetType.ANY, False),
        ("NukePersistent", TargetType.ANY, True),
        ("RavagerCorrosiveBileCP", TargetType.ANY, True),
        ("BlindingCloudCP", TargetType.GROUND, False),
    ],
)
def test_effect_rules(name, target, friendly):
    assert effect_target(name) is target
    assert effect_friendly_fire(name) is friendly


def test_unknown_attribute_raises():
    with pytest.raises(ValueError):
        game_data_from_mapping({"units": [{"unit_id": 1, "attributes": ["Shiny"]}]})


def test_empty_mapping_gives_empty_data():
    assert game_data_from_mapping({}) == GameData()


def test_unit_defaults():
    unit = game_data_from_mapping({"units": [{"unit_id": 7}]}).units[7]
    assert unit == UnitTypeData(id=7)
    assert unit.race is Race.NO_RACE