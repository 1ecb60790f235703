"""
Dungeon Rush Snapshots.

Serializable read views of a running game for rendering collaborators.
"""

from dungeon_rush.snapshots.builder import event_view, snapshot_game, tile_view
from dungeon_rush.snapshots.models import EventView, GameSnapshot, TileView, UnitView

__all__ = [
    "EventView",
    "GameSnapshot",
    "TileView",
    "UnitView",
    "event_view",
    "snapshot_game",
    "tile_view",
]
