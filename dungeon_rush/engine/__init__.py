"""
Dungeon Rush Game Engine.

Pure Python rules engine with zero UI/persistence dependencies.
Handles the tile supply, board growth, unit movement, tile effects,
chained explosions, the gold economy, and win/loss detection.
"""

from dungeon_rush.engine.base import (
    ActionResult,
    ErrorCode,
    EventCategory,
    GameConfig,
    GamePhase,
    Offset,
    Position,
    Side,
    TileEffect,
    TileKind,
    UnitCosts,
    UnitKind,
    create_game_config,
    validate_game_config,
)
from dungeon_rush.engine.board import Board
from dungeon_rush.engine.events import EventEntry, EventLog, GameEvent
from dungeon_rush.engine.game import DungeonRushEngine
from dungeon_rush.engine.players import DefensePlayer, OffensePlayer
from dungeon_rush.engine.rng import SeededRandom
from dungeon_rush.engine.supply import TileSupply
from dungeon_rush.engine.tiles import Tile, resolve_effect
from dungeon_rush.engine.units import Unit, movement_options

__all__ = [
    # Data Classes
    "ActionResult",
    "EventEntry",
    "GameConfig",
    "Offset",
    "Position",
    "TileEffect",
    "UnitCosts",
    # Enums
    "ErrorCode",
    "EventCategory",
    "GameEvent",
    "GamePhase",
    "Side",
    "TileKind",
    "UnitKind",
    # Components
    "Board",
    "EventLog",
    "SeededRandom",
    "Tile",
    "TileSupply",
    "Unit",
    # Engine
    "DungeonRushEngine",
    "DefensePlayer",
    "OffensePlayer",
    # Functions
    "create_game_config",
    "movement_options",
    "resolve_effect",
    "validate_game_config",
]
