"""
Dungeon Rush - Event Log

Event types and the append-only log the game writes as it runs. Renderers
read recent entries to narrate what happened; the entries carry structured
data so nothing has to be parsed back out of the message text.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator

from dungeon_rush.engine.base import EventCategory, GamePhase


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    TILES_DRAWN = auto()
    TILES_PLACED = auto()
    DEFENSE_TURN_ENDED = auto()
    OFFENSE_PHASE_STARTED = auto()
    GOLD_GRANTED = auto()
    UNIT_SPAWNED = auto()
    UNIT_MOVED = auto()
    MOVE_BLOCKED = auto()
    UNIT_KILLED = auto()
    UNIT_TRAPPED = auto()
    UNIT_FREED = auto()
    UNIT_PUSHED = auto()
    PUSH_CANCELLED = auto()
    TREASURE_COLLECTED = auto()
    BOMB_EXPLODED = auto()
    TILE_REVEALED = auto()
    TURN_STARTED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class EventEntry:
    """
    One line of the game's event log.

    Attributes:
        sequence: Position in the log, starting at 0
        turn: Turn number when the event happened
        phase: Phase when the event happened
        event: What happened
        category: Grouping used for presentation
        message: Human-readable description
        data: Structured details (unit kinds, coordinates, amounts)
    """
    sequence: int
    turn: int
    phase: GamePhase
    event: GameEvent
    category: EventCategory
    message: str
    data: dict[str, Any] = field(default_factory=dict)


class EventLog:
    """Ordered, append-only list of EventEntry."""

    def __init__(self) -> None:
        self._entries: list[EventEntry] = []

    def append(
        self,
        turn: int,
        phase: GamePhase,
        event: GameEvent,
        message: str,
        category: EventCategory = EventCategory.EVENT,
        **data: Any,
    ) -> EventEntry:
        entry = EventEntry(
            sequence=len(self._entries),
            turn=turn,
            phase=phase,
            event=event,
            category=category,
            message=message,
            data=data,
        )
        self._entries.append(entry)
        return entry

    def recent(self, count: int = 10) -> list[EventEntry]:
        if count <= 0:
            return []
        return self._entries[-count:]

    def of_type(self, event: GameEvent) -> list[EventEntry]:
        return [entry for entry in self._entries if entry.event is event]

    def clear(self) -> None:
        self._entries = []

    def __iter__(self) -> Iterator[EventEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
