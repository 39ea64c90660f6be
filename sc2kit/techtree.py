"""Race values, unit aliases, tech requirements and producers.

Unit types are named by their game identifiers, e.g. ``"CommandCenter"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from sc2kit.game_data import Race

GAME_SPEED = 1.4
"""Default in-game speed modifier (on the Faster game speed)."""

FRAMES_PER_SECOND = 22.4
"""Game loops per real second: 16 frames per second times the game speed."""

ANTI_ARMOR_BUFF = "RavenShredderMissileArmorReductionUISubtruct"
"""Buff of units hit by an anti-armor missile (armor and shield armor reduced by 3)."""

ANTI_ARMOR_TARGET = "RavenShredderMissileTint"
"""Buff of the unit targeted by an anti-armor missile."""

INTERFERENCE_MATRIX_BUFF = "RavenScramblerMissile"
"""Buff of units disabled by an interference matrix."""

INHIBITOR_IDS: Tuple[str, ...] = (
    "InhibitorZoneSmall",
    "InhibitorZoneMedium",
    "InhibitorZoneLarge",
    "InhibitorZoneFlyingSmall",
    "InhibitorZoneFlyingMedium",
    "InhibitorZoneFlyingLarge",
)

NOT_A_UNIT = "NotAUnit"


@dataclass(frozen=True)
class RaceValues:
    """Structures and units specific to one race."""

    start_townhall: str = NOT_A_UNIT
    townhalls: Tuple[str, ...] = ()
    gas: str = NOT_A_UNIT
    rich_gas: str = NOT_A_UNIT
    supply: str = NOT_A_UNIT
    worker: str = NOT_A_UNIT


_RACE_VALUES: Mapping[Race, RaceValues] = MappingProxyType(
    {
        Race.TERRAN: RaceValues(
            start_townhall="CommandCenter",
            townhalls=(
                "CommandCenter",
                "OrbitalCommand",
                "PlanetaryFortress",
                "CommandCenterFlying",
                "OrbitalCommandFlying",
            ),
            gas="Refinery",
            rich_gas="RefineryRich",
            supply="SupplyDepot",
            worker="SCV",
        ),
        Race.ZERG: RaceValues(
            start_townhall="Hatchery",
            townhalls=("Hatchery", "Lair", "Hive"),
            gas="Extractor",
            rich_gas="ExtractorRich",
            supply="Overlord",
            worker="Drone",
        ),
        Race.PROTOSS: RaceValues(
            start_townhall="Nexus",
            townhalls=("Nexus",),
            gas="Assimilator",
            rich_gas="AssimilatorRich",
            supply="Pylon",
            worker="Probe",
        ),
    }
)

_BURROWED_IDS: Mapping[str, str] = MappingProxyType(
    {
        "LurkerMP": "LurkerMPBurrowed",
        "Baneling": "BanelingBurrowed",
        "Drone": "DroneBurrowed",
        "Hydralisk": "HydraliskBurrowed",
        "Roach": "RoachBurrowed",
        "Zergling": "ZerglingBurrowed",
        "Queen": "QueenBurrowed",
        "Infestor": "InfestorBurrowed",
        "Ultralisk": "UltraliskBurrowed",
        "SwarmHostMP": "SwarmHostBurrowedMP",
        "Ravager": "RavagerBurrowed",
    }
)

_TECH_ALIAS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "Assimilator": ("AssimilatorRich",),
        "AssimilatorRich": ("Assimilator",),
        "Barracks": ("BarracksFlying",),
        "BarracksFlying": ("Barracks",),
        "CommandCenter": (
            "CommandCenterFlying",
            "OrbitalCommand",
            "OrbitalCommandFlying",
            "PlanetaryFortress",
        ),
        "CommandCenterFlying": (
            "CommandCenter",
            "OrbitalCommand",
            "OrbitalCommandFlying",
            "PlanetaryFortress",
        ),
        "OrbitalCommand": (
            "CommandCenter",
            "CommandCenterFlying",
            "OrbitalCommandFlying",
            "PlanetaryFortress",
        ),
        "OrbitalCommandFlying": (
            "CommandCenter",
            "CommandCenterFlying",
            "OrbitalCommand",
            "PlanetaryFortress",
        ),
        "PlanetaryFortress": (
            "CommandCenter",
            "CommandCenterFlying",
            "OrbitalCommand",
            "OrbitalCommandFlying",
        ),
        "CreepTumorBurrowed": ("CreepTumor", "CreepTumorQueen"),
        "CreepTumorQueen": ("CreepTumor", "CreepTumorBurrowed"),
        "Hatchery": ("Lair", "Hive"),
        "Lair": ("Hatchery", "Hive"),
        "Hive": ("Hatchery", "Lair"),
        "LiberatorAG": ("Liberator",),
        "Liberator": ("LiberatorAG",),
        "Extractor": ("ExtractorRich",),
        "ExtractorRich": ("Extractor",),
        "Spire": ("GreaterSpire",),
        "GreaterSpire": ("Spire",),
        "OverlordTransport": ("Overlord",),
        "Overlord": ("OverlordTransport",),
        "Overseer": ("OverseerSiegeMode",),
        "OverseerSiegeMode": ("Overseer",),
        "FactoryFlying": ("Factory",),
        "StarportFlying": ("Starport",),
        "Reactor": ("BarracksReactor", "FactoryReactor", "StarportReactor"),
        "TechLab": ("BarracksTechLab", "FactoryTechLab", "StarportTechLab"),
        "BarracksReactor": ("Reactor",),
        "BarracksTechLab": ("TechLab",),
        "FactoryReactor": ("Reactor",),
        "FactoryTechLab": ("TechLab",),
        "StarportReactor": ("Reactor",),
        "StarportTechLab": ("TechLab",),
        "PylonOvercharged": ("Pylon",),
        "Pylon": ("PylonOvercharged",),
        "QueenBurrowed": ("Queen",),
        "Queen": ("QueenBurrowed",),
        "Refinery": ("RefineryRich",),
        "RefineryRich": ("Refinery",),
        "SiegeTank": ("SiegeTankSieged",),
        "SiegeTankSieged": ("SiegeTank",),
        "SupplyDepot": ("SupplyDepotLowered",),
        "SupplyDepotLowered": ("SupplyDepot",),
        "Thor": ("ThorAP",),
        "ThorAP": ("Thor",),
        "Viking": ("VikingFighter", "VikingAssault"),
        "VikingFighter": ("Viking", "VikingAssault"),
        "VikingAssault": ("Viking", "VikingFighter"),
        "Gateway": ("WarpGate",),
        "WarpGate": ("Gateway",),
        "WarpPrism": ("WarpPrismPhasing",),
        "WarpPrismPhasing": ("WarpPrism",),
        "WidowMine": ("WidowMineBurrowed",),
        "WidowMineBurrowed": ("WidowMine",),
    }
)

# Where a unit has several alternate forms only the last listed one is kept.
_UNIT_ALIAS: Mapping[str, str] = MappingProxyType(
    {
        "Adept": "AdeptPhaseShift",
        "AdeptPhaseShift": "Adept",
        "Assimilator": "AssimilatorRich",
        "AssimilatorRich": "Assimilator",
        "Baneling": "BanelingBurrowed",
        "BanelingBurrowed": "Baneling",
        "Barracks": "BarracksFlying",
        "BarracksFlying": "Barracks",
        "Changeling": "ChangelingZerglingWings",
        "ChangelingMarine": "Changeling",
        "ChangelingMarineShield": "Changeling",
        "ChangelingZealot": "Changeling",
        "ChangelingZergling": "Changeling",
        "ChangelingZerglingWings": "Changeling",
        "CommandCenter": "CommandCenterFlying",
        "CommandCenterFlying": "CommandCenter",
        "CreepTumor": "CreepTumorQueen",
        "CreepTumorBurrowed": "CreepTumor",
        "CreepTumorQueen": "CreepTumor",
        "Drone": "DroneBurrowed",
        "DroneBurrowed": "Drone",
        "Extractor": "ExtractorRich",
        "ExtractorRich": "Extractor",
        "Factory": "FactoryFlying",
        "FactoryFlying": "Factory",
        "Hydralisk": "HydraliskBurrowed",
        "HydraliskBurrowed": "Hydralisk",
        "Infestor": "InfestorBurrowed",
        "InfestorBurrowed": "Infestor",
        "InfestorTerran": "InfestorTerranBurrowed",
        "InfestorTerranBurrowed": "InfestorTerran",
        "Liberator": "LiberatorAG",
        "LiberatorAG": "Liberator",
        "LocustMP": "LocustMPFlying",
        "LocustMPFlying": "LocustMP",
        "LurkerMP": "LurkerMPBurrowed",
        "LurkerMPBurrowed": "LurkerMP",
        "Observer": "ObserverSiegeMode",
        "ObserverSiegeMode": "Observer",
        "OrbitalCommand": "OrbitalCommandFlying",
        "OrbitalCommandFlying": "OrbitalCommand",
        "Overseer": "OverseerSiegeMode",
        "OverseerSiegeMode": "Overseer",
        "Pylon": "PylonOvercharged",
        "PylonOvercharged": "Pylon",
        "Queen": "QueenBurrowed",
        "QueenBurrowed": "Queen",
        "Ravager": "RavagerBurrowed",
        "RavagerBurrowed": "Ravager",
        "Refinery": "RefineryRich",
        "RefineryRich": "Refinery",
        "Roach": "RoachBurrowed",
        "RoachBurrowed": "Roach",
        "SiegeTank": "SiegeTankSieged",
        "SiegeTankSieged": "SiegeTank",
        "SpineCrawler": "SpineCrawlerUprooted",
        "SpineCrawlerUprooted": "SpineCrawler",
        "SporeCrawler": "SporeCrawlerUprooted",
        "SporeCrawlerUprooted": "SporeCrawler",
        "Starport": "StarportFlying",
        "StarportFlying": "Starport",
        "SupplyDepot": "SupplyDepotLowered",
        "SupplyDepotLowered": "SupplyDepot",
        "SwarmHostMP": "SwarmHostBurrowedMP",
        "SwarmHostBurrowedMP": "SwarmHostMP",
        "Thor": "ThorAP",
        "ThorAP": "Thor",
        "Ultralisk": "UltraliskBurrowed",
        "UltraliskBurrowed": "Ultralisk",
        "VikingFighter": "VikingAssault",
        "VikingAssault": "VikingFighter",
        "WarpPrismPhasing": "WarpPrism",
        "WarpPrism": "WarpPrismPhasing",
        "WidowMine": "WidowMineBurrowed",
        "WidowMineBurrowed": "WidowMine",
        "Zergling": "ZerglingBurrowed",
        "ZerglingBurrowed": "Zergling",
    }
)

_TECH_REQUIREMENTS: Mapping[str, str] = MappingProxyType(
    {
        # Terran
        "MissileTurret": "EngineeringBay",
        "SensorTower": "EngineeringBay",
        "PlanetaryFortress": "EngineeringBay",
        "Barracks": "SupplyDepot",
        "OrbitalCommand": "Barracks",
        "Bunker": "Barracks",
        "Ghost": "GhostAcademy",
        "GhostAcademy": "Barracks",
        "Factory": "Barracks",
        "Armory": "Factory",
        "HellionTank": "Armory",
        "Thor": "Armory",
        "Starport": "Factory",
        "FusionCore": "Starport",
        "Battlecruiser": "FusionCore",
        # Protoss
        "PhotonCannon": "Forge",
        "CyberneticsCore": "Gateway",
        "Sentry": "CyberneticsCore",
        "Stalker": "CyberneticsCore",
        "Adept": "CyberneticsCore",
        "TwilightCouncil": "CyberneticsCore",
        "ShieldBattery": "CyberneticsCore",
        "TemplarArchive": "TwilightCouncil",
        "DarkShrine": "TwilightCouncil",
        "HighTemplar": "TemplarArchive",
        "DarkTemplar": "DarkShrine",
        "Stargate": "CyberneticsCore",
        "Tempest": "FleetBeacon",
        "Carrier": "FleetBeacon",
        "Mothership": "FleetBeacon",
        "RoboticsFacility": "CyberneticsCore",
        "RoboticsBay": "RoboticsFacility",
        "Colossus": "RoboticsBay",
        "Disruptor": "RoboticsBay",
        # Zerg
        "Zergling": "SpawningPool",
        "Queen": "SpawningPool",
        "RoachWarren": "SpawningPool",
        "BanelingNest": "SpawningPool",
        "SpineCrawler": "SpawningPool",
        "SporeCrawler": "SpawningPool",
        "Roach": "RoachWarren",
        "Baneling": "BanelingNest",
        "Lair": "SpawningPool",
        "Overseer": "Lair",
        "OverlordTransport": "Lair",
        "InfestationPit": "Lair",
        "Infestor": "InfestationPit",
        "SwarmHostMP": "InfestationPit",
        "HydraliskDen": "Lair",
        "Hydralisk": "HydraliskDen",
        "LurkerDenMP": "HydraliskDen",
        "LurkerMP": "LurkerDenMP",
        "Spire": "Lair",
        "Mutalisk": "Spire",
        "Corruptor": "Spire",
        "NydusNetwork": "Lair",
        "Hive": "InfestationPit",
        "Viper": "Hive",
        "UltraliskCavern": "Hive",
        "GreaterSpire": "Hive",
        "BroodLord": "GreaterSpire",
    }
)

_PRODUCERS: Mapping[str, str] = MappingProxyType(
    {
        "Adept": "Gateway",
        "Armory": "SCV",
        "Assimilator": "Probe",
        "AutoTurret": "Raven",
        "Baneling": "Zergling",
        "BanelingNest": "Drone",
        "Banshee": "Starport",
        "Barracks": "SCV",
        "Battlecruiser": "Starport",
        "BroodLord": "Corruptor",
        "Bunker": "SCV",
        "Carrier": "Stargate",
        "Changeling": "Overseer",
        "Colossus": "RoboticsFacility",
        "CommandCenter": "SCV",
        "Corruptor": "Larva",
        "CreepTumor": "Queen",
        "CreepTumorQueen": "Queen",
        "CyberneticsCore": "Probe",
        "Cyclone": "Factory",
        "DarkShrine": "Probe",
        "DarkTemplar": "Gateway",
        "Disruptor": "RoboticsFacility",
        "Drone": "Larva",
        "EngineeringBay": "SCV",
        "EvolutionChamber": "Drone",
        "Extractor": "Drone",
        "Factory": "SCV",
        "FleetBeacon": "Probe",
        "Forge": "Probe",
        "FusionCore": "SCV",
        "Gateway": "Probe",
        "Ghost": "Barracks",
        "GhostAcademy": "SCV",
        "GreaterSpire": "Spire",
        "Hatchery": "Drone",
        "Hellion": "Factory",
        "HellionTank": "Factory",
        "HighTemplar": "Gateway",
        "Hive": "Lair",
        "Hydralisk": "Larva",
        "HydraliskDen": "Drone",
        "Immortal": "RoboticsFacility",
        "InfestationPit": "Drone",
        "Infestor": "Larva",
        "Lair": "Hatchery",
        "Liberator": "Starport",
        "LocustMPFlying": "SwarmHostMP",
        "LurkerDenMP": "Drone",
        "LurkerMP": "Hydralisk",
        "Marauder": "Barracks",
        "Marine": "Barracks",
        "Medivac": "Starport",
        "MissileTurret": "SCV",
        "Mothership": "Nexus",
        "Mutalisk": "Larva",
        "Nexus": "Probe",
        "NydusCanal": "NydusNetwork",
        "NydusNetwork": "Drone",
        "Observer": "RoboticsFacility",
        "Oracle": "Stargate",
        "OracleStasisTrap": "Oracle",
        "OrbitalCommand": "CommandCenter",
        "Overlord": "Larva",
        "OverlordTransport": "Overlord",
        "Overseer": "Overlord",
        "Phoenix": "Stargate",
        "PhotonCannon": "Probe",
        "PlanetaryFortress": "CommandCenter",
        "Probe": "Nexus",
        "Pylon": "Probe",
        "Queen": "Hatchery",
        "Ravager": "Roach",
        "Raven": "Starport",
        "Reaper": "Barracks",
        "Refinery": "SCV",
        "Roach": "Larva",
        "RoachWarren": "Drone",
        "RoboticsBay": "Probe",
        "RoboticsFacility": "Probe",
        "SCV": "CommandCenter",
        "SensorTower": "SCV",
        "Sentry": "Gateway",
        "ShieldBattery": "Probe",
        "SiegeTank": "Factory",
        "SpawningPool": "Drone",
        "SpineCrawler": "Drone",
        "Spire": "Drone",
        "SporeCrawler": "Drone",
        "Stalker": "Gateway",
        "Stargate": "Probe",
        "Starport": "SCV",
        "SupplyDepot": "SCV",
        "SwarmHostMP": "Larva",
        "Tempest": "Stargate",
        "TemplarArchive": "Probe",
        "Thor": "Factory",
        "TwilightCouncil": "Probe",
        "Ultralisk": "Larva",
        "UltraliskCavern": "Drone",
        "VikingFighter": "Starport",
        "Viper": "Larva",
        "VoidRay": "Stargate",
        "WarpPrism": "RoboticsFacility",
        "WidowMine": "Factory",
        "Zealot": "Gateway",
        "Zergling": "Larva",
    }
)


def race_values(race: Race) -> RaceValues:
    """Values of the given race; races without their own get an empty ``RaceValues``."""
    return _RACE_VALUES.get(race, RaceValues())


def burrowed_form(unit: str) -> Optional[str]:
    """Burrowed form of a zerg unit, or ``None`` if it has none."""
    return _BURROWED_IDS.get(unit)


def tech_aliases(unit: str) -> Tuple[str, ...]:
    """Unit types that count as ``unit`` for tech purposes."""
    return _TECH_ALIAS.get(unit, ())


def unit_alias(unit: str) -> Optional[str]:
    """Alternate form of ``unit`` (flying, burrowed, sieged...), or ``None``."""
    return _UNIT_ALIAS.get(unit)


def tech_requirement(unit: str) -> Optional[str]:
    """Structure required before ``unit`` can be made, or ``None``."""
    return _TECH_REQUIREMENTS.get(unit)


def producer(unit: str) -> Optional[str]:
    """Unit type that produces ``unit``, or ``None``."""
    return _PRODUCERS.get(unit)