"""Static game data: abilities, unit types, upgrades, buffs and effects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound=Enum)


class Race(Enum):
    """Playable race."""

    NO_RACE = "NoRace"
    TERRAN = "Terran"
    ZERG = "Zerg"
    PROTOSS = "Protoss"
    RANDOM = "Random"


class AbilityTarget(Enum):
    """Possible target of an ability, needed when giving commands to units."""

    NONE = "None"
    POINT = "Point"
    UNIT = "Unit"
    POINT_OR_UNIT = "PointOrUnit"
    POINT_OR_NONE = "PointOrNone"


class Attribute(Enum):
    """Attributes of units."""

    LIGHT = "Light"
    ARMORED = "Armored"
    BIOLOGICAL = "Biological"
    MECHANICAL = "Mechanical"
    ROBOTIC = "Robotic"
    PSIONIC = "Psionic"
    MASSIVE = "Massive"
    STRUCTURE = "Structure"
    HOVER = "Hover"
    HEROIC = "Heroic"
    SUMMONED = "Summoned"


class TargetType(Enum):
    """Possible target of a weapon or effect."""

    GROUND = "Ground"
    AIR = "Air"
    ANY = "Any"


@dataclass
class Cost:
    """Cost of a unit or upgrade in resources, supply and time."""

    minerals: int = 0
    vespene: int = 0
    supply: float = 0.0
    time: float = 0.0


@dataclass
class Weapon:
    """Characteristics of a unit's weapon."""

    target: TargetType
    damage: int
    damage_bonus: List[Tuple[Attribute, int]]
    attacks: int
    range: float
    speed: float


@dataclass
class AbilityData:
    """Information about a specific ability."""

    id: int
    link_name: str = ""
    link_index: int = 0
    button_name: Optional[str] = None
    friendly_name: Optional[str] = None
    hotkey: Optional[str] = None
    remaps_to_ability_id: Optional[int] = None
    available: bool = False
    target: AbilityTarget = AbilityTarget.NONE
    allow_minimap: bool = False
    allow_autocast: bool = False
    is_building: bool = False
    footprint_radius: Optional[float] = None
    is_instant_placement: bool = False
    cast_range: Optional[float] = None


@dataclass
class UnitTypeData:
    """Information about a specific unit type."""

    id: int
    name: str = ""
    available: bool = False
    cargo_size: int = 0
    mineral_cost: int = 0
    vespene_cost: int = 0
    food_required: float = 0.0
    food_provided: float = 0.0
    ability: Optional[int] = None
    race: Race = Race.NO_RACE
    build_time: float = 0.0
    has_vespene: bool = False
    has_minerals: bool = False
    sight_range: float = 0.0
    tech_alias: List[int] = field(default_factory=list)
    unit_alias: Optional[int] = None
    tech_requirement: Optional[int] = None
    require_attached: bool = False
    attributes: List[Attribute] = field(default_factory=list)
    movement_speed: float = 0.0
    armor: int = 0
    weapons: List[Weapon] = field(default_factory=list)

    def cost(self) -> Cost:
        """Resources, supply and build time needed for this unit."""
        return Cost(
            minerals=self.mineral_cost,
            vespene=self.vespene_cost,
            supply=self.food_required,
            time=self.build_time,
        )


@dataclass
class UpgradeData:
    """Information about a specific upgrade."""

    id: int
    ability: int
    name: str = ""
    mineral_cost: int = 0
    vespene_cost: int = 0
    research_time: float = 0.0

    def cost(self) -> Cost:
        """Resources and research time needed for this upgrade."""
        return Cost(
            minerals=self.mineral_cost,
            vespene=self.vespene_cost,
            supply=0.0,
            time=self.research_time,
        )


@dataclass
class BuffData:
    """Information about a specific buff."""

    id: int
    name: str = ""


@dataclass
class EffectData:
    """Information about a specific effect."""

    id: int
    name: str = ""
    friendly_name: str = ""
    radius: float = 0.0
    target: TargetType = TargetType.GROUND
    friendly_fire: bool = False


@dataclass
class GameData:
    """All static data of the game, keyed by ids."""

    abilities: Dict[int, AbilityData] = field(default_factory=dict)
    units: Dict[int, UnitTypeData] = field(default_factory=dict)
    upgrades: Dict[int, UpgradeData] = field(default_factory=dict)
    buffs: Dict[int, BuffData] = field(default_factory=dict)
    effects: Dict[int, EffectData] = field(default_factory=dict)


_ANY_TARGET_EFFECTS = frozenset(
    {
        "Null",
        "PsiStormPersistent",
        "ScannerSweep",
        "NukePersistent",
        "RavagerCorrosiveBileCP",
    }
)
_FRIENDLY_FIRE_EFFECTS = frozenset(
    {"PsiStormPersistent", "NukePersistent", "RavagerCorrosiveBileCP"}
)


def effect_target(effect: str) -> TargetType:
    """Targets affected by the effect with the given name."""
    return TargetType.ANY if effect in _ANY_TARGET_EFFECTS else TargetType.GROUND


def effect_friendly_fire(effect: str) -> bool:
    """Whether the effect with the given name also harms allied units."""
    return effect in _FRIENDLY_FIRE_EFFECTS


def _enum(cls: Type[E], value: Any) -> E:
    if isinstance(value, cls):
        return value
    return cls(value)


def _id(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _weapon(w: Mapping[str, Any]) -> Weapon:
    return Weapon(
        target=_enum(TargetType, w.get("type", TargetType.GROUND)),
        damage=int(w.get("damage", 0)),
        damage_bonus=[
            (_enum(Attribute, b["attribute"]), int(b.get("bonus", 0)))
            for b in w.get("damage_bonus", ())
        ],
        attacks=int(w.get("attacks", 0)),
        range=float(w.get("range", 0.0)),
        speed=float(w.get("speed", 0.0)),
    )


def _ability(a: Mapping[str, Any]) -> Optional[AbilityData]:
    ability_id = _id(a.get("ability_id"))
    if ability_id is None:
        return None
    return AbilityData(
        id=ability_id,
        link_name=a.get("link_name", ""),
        link_index=int(a.get("link_index", 0)),
        button_name=a.get("button_name"),
        friendly_name=a.get("friendly_name"),
        hotkey=a.get("hotkey"),
        remaps_to_ability_id=_id(a.get("remaps_to_ability_id")),
        available=bool(a.get("available", False)),
        target=_enum(AbilityTarget, a.get("target", AbilityTarget.NONE)),
        allow_minimap=bool(a.get("allow_minimap", False)),
        allow_autocast=bool(a.get("allow_autocast", False)),
        is_building=bool(a.get("is_building", False)),
        footprint_radius=a.get("footprint_radius"),
        is_instant_placement=bool(a.get("is_instant_placement", False)),
        cast_range=a.get("cast_range"),
    )


def _unit(u: Mapping[str, Any]) -> Optional[UnitTypeData]:
    unit_id = _id(u.get("unit_id"))
    if unit_id is None:
        return None
    return UnitTypeData(
        id=unit_id,
        name=u.get("name", ""),
        available=bool(u.get("available", False)),
        cargo_size=int(u.get("cargo_size", 0)),
        mineral_cost=int(u.get("mineral_cost", 0)),
        vespene_cost=int(u.get("vespene_cost", 0)),
        food_required=float(u.get("food_required", 0.0)),
        food_provided=float(u.get("food_provided", 0.0)),
        ability=_id(u.get("ability_id")),
        race=_enum(Race, u.get("race", Race.NO_RACE)),
        build_time=float(u.get("build_time", 0.0)),
        has_vespene=bool(u.get("has_vespene", False)),
        has_minerals=bool(u.get("has_minerals", False)),
        sight_range=float(u.get("sight_range", 0.0)),
        tech_alias=[a for a in map(_id, u.get("tech_alias", ())) if a is not None],
        unit_alias=_id(u.get("unit_alias")),
        tech_requirement=_id(u.get("tech_requirement")),
        require_attached=bool(u.get("require_attached", False)),
        attributes=[_enum(Attribute, a) for a in u.get("attributes", ())],
        movement_speed=float(u.get("movement_speed", 0.0)),
        armor=int(u.get("armor", 0)),
        weapons=[_weapon(w) for w in u.get("weapons", ())],
    )


def _upgrade(u: Mapping[str, Any]) -> Optional[UpgradeData]:
    upgrade_id = _id(u.get("upgrade_id"))
    ability_id = _id(u.get("ability_id"))
    if upgrade_id is None or ability_id is None:
        return None
    return UpgradeData(
        id=upgrade_id,
        ability=ability_id,
        name=u.get("name", ""),
        mineral_cost=int(u.get("mineral_cost", 0)),
        vespene_cost=int(u.get("vespene_cost", 0)),
        research_time=float(u.get("research_time", 0.0)),
    )


def _buff(b: Mapping[str, Any]) -> Optional[BuffData]:
    buff_id = _id(b.get("buff_id"))
    if buff_id is None:
        return None
    return BuffData(id=buff_id, name=b.get("name", ""))


def _effect(e: Mapping[str, Any]) -> Optional[EffectData]:
    effect_id = _id(e.get("effect_id"))
    if effect_id is None:
        return None
    name = e.get("name", "")
    return EffectData(
        id=effect_id,
        name=name,
        friendly_name=e.get("friendly_name", ""),
        radius=float(e.get("radius", 0.0)),
        target=effect_target(name),
        friendly_fire=effect_friendly_fire(name),
    )


def game_data_from_mapping(data: Mapping[str, Any]) -> GameData:
    """Build ``GameData`` from a decoded data response.

    Entries without a usable id are skipped; unknown enum names raise ``ValueError``.
    """

    def collect(key, parse):
        parsed = (parse(entry) for entry in data.get(key, ()))
        return {item.id: item for item in parsed if item is not None}

    return GameData(
        abilities=collect("abilities", _ability),
        units=collect("units", _unit),
        upgrades=collect("upgrades", _upgrade),
        buffs=collect("buffs", _buff),
        effects=collect("effects", _effect),
    )