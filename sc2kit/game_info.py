"""Constant information about the map and the players."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from sc2kit.game_data import Race
from sc2kit.geometry import Point2, Rect, Size


def _half_toward_zero(value: int) -> int:
    return abs(value) // 2 * (1 if value >= 0 else -1)


def map_center(area: Rect) -> Point2:
    """Centre of the playable area, computed in whole grid units."""
    return Point2(
        float(area.x0 + _half_toward_zero(area.x1 - area.x0)),
        float(area.y0 + _half_toward_zero(area.y1 - area.y0)),
    )


def map_name_from_path(path: str) -> str:
    """Map name taken from the file name of the map, without its extension."""
    stem = Path(path).stem
    if not stem:
        raise ValueError(f"no map file name in path {path!r}")
    return stem


@dataclass
class PlayerInfo:
    """Information about one player."""

    id: int
    player_type: str
    race_requested: Race
    race_actual: Optional[Race] = None
    difficulty: Optional[str] = None
    ai_build: Optional[str] = None
    player_name: Optional[str] = None


@dataclass
class GameInfo:
    """Map information, fixed for the whole game.

    ``map_center`` defaults to the centre of ``playable_area`` and
    ``map_name_path`` to the file name of ``local_map_path``.
    """

    map_name: str = ""
    map_name_path: str = ""
    mod_names: List[str] = field(default_factory=list)
    local_map_path: str = ""
    players: Dict[int, PlayerInfo] = field(default_factory=dict)
    map_size: Size = field(default_factory=Size)
    pathing_grid: Any = None
    terrain_height: Any = None
    placement_grid: Any = None
    playable_area: Rect = field(default_factory=Rect)
    start_locations: List[Point2] = field(default_factory=list)
    map_center: Optional[Point2] = None

    def __post_init__(self) -> None:
        if self.map_center is None:
            self.map_center = map_center(self.playable_area)
        if not self.map_name_path and self.local_map_path:
            self.map_name_path = map_name_from_path(self.local_map_path)