"""
Dungeon Rush - Snapshot Builder

Turns a live DungeonRushEngine into a GameSnapshot.
"""

from dungeon_rush.engine.events import EventEntry
from dungeon_rush.engine.game import DungeonRushEngine
from dungeon_rush.engine.tiles import Tile
from dungeon_rush.snapshots.models import EventView, GameSnapshot, TileView, UnitView


def tile_view(tile: Tile, show_hidden: bool = False) -> TileView:
    """
    Build a TileView, masking the kind of face-down tiles.

    Args:
        tile: Board tile
        show_hidden: Expose face-down kinds (Defense view, debugging)
    """
    view = TileView.model_validate(tile)
    if not tile.revealed and not show_hidden:
        view = view.model_copy(update={"kind": None})
    return view


def event_view(entry: EventEntry) -> EventView:
    return EventView(
        sequence=entry.sequence,
        turn=entry.turn,
        phase=entry.phase,
        event=entry.event.name,
        category=entry.category,
        message=entry.message,
        data=dict(entry.data),
    )


def snapshot_game(
    engine: DungeonRushEngine,
    *,
    show_hidden: bool = False,
    event_count: int = 10,
) -> GameSnapshot:
    """
    Capture the current state of a game.

    Args:
        engine: Game to capture
        show_hidden: Include the kinds of face-down tiles
        event_count: Number of most recent log entries to include

    Returns:
        GameSnapshot (a copy; later engine changes do not affect it)
    """
    width, height = engine.board_dimensions()
    return GameSnapshot(
        turn=engine.turn,
        phase=engine.phase,
        gold=engine.gold,
        game_over=engine.is_game_over(),
        winner=engine.winner,
        width=width,
        height=height,
        tiles=[tile_view(tile, show_hidden) for tile in engine.board],
        units=[UnitView.model_validate(unit) for unit in engine.units.values()],
        current_draw=list(engine.current_draw),
        supply_remaining=engine.supply.total_remaining,
        recent_events=[event_view(entry) for entry in engine.recent_events(event_count)],
    )
