"""Hive engine - affinity scoring, group clustering, hex layout and recommendations."""
from .records import (
    HiveUser, HiveEvent, HiveGroup, HiveCell, HiveConnection, HiveData,
    CellPosition, Recommendation,
)
from .affinity import user_affinity, event_affinity
from .clustering import create_groups
from .hex_layout import generate_hex_positions
from .hive_builder import build_hive_data
from .recommendations import get_recommended_connections

__all__ = [
    "HiveUser",
    "HiveEvent",
    "HiveGroup",
    "HiveCell",
    "HiveConnection",
    "HiveData",
    "CellPosition",
    "Recommendation",
    "user_affinity",
    "event_affinity",
    "create_groups",
    "generate_hex_positions",
    "build_hive_data",
    "get_recommended_connections",
]
