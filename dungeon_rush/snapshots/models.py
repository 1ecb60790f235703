"""
Dungeon Rush - Snapshot Models

Pydantic models that mirror the engine's tiles, units and event log as
plain, serializable read views for renderers.
"""

from typing import Any

from pydantic import BaseModel, Field

from dungeon_rush.engine.base import EventCategory, GamePhase, Side, TileKind, UnitKind


class TileView(BaseModel):
    """Mirrors a board Tile. ``kind`` is None for face-down tiles unless requested."""

    x: int
    y: int
    kind: TileKind | None = None
    revealed: bool = False
    occupied: bool = False
    treasure_collected: bool = False

    model_config = {"from_attributes": True}


class UnitView(BaseModel):
    """Mirrors an Offense Unit."""

    kind: UnitKind
    x: int
    y: int
    alive: bool
    spawned: bool
    trapped: bool
    can_respawn: bool

    model_config = {"from_attributes": True}


class EventView(BaseModel):
    """Mirrors an EventEntry."""

    sequence: int
    turn: int
    phase: GamePhase
    event: str
    category: EventCategory
    message: str
    data: dict[str, Any] = Field(default_factory=dict)


class GameSnapshot(BaseModel):
    """Everything a renderer needs to draw one frame."""

    turn: int
    phase: GamePhase
    gold: int
    game_over: bool = False
    winner: Side | None = None
    width: int
    height: int
    tiles: list[TileView] = Field(default_factory=list)
    units: list[UnitView] = Field(default_factory=list)
    current_draw: list[TileKind] = Field(default_factory=list)
    supply_remaining: int = 0
    recent_events: list[EventView] = Field(default_factory=list)
