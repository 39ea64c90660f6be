"""Geometry, distance queries, game data records, map information and tech-tree tables for real-time strategy bots."""

__version__ = "0.1.0"

__all__ = [
    "distance",
    "game_data",
    "game_info",
    "geometry",
    "techtree",
]