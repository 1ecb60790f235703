"""
Dungeon Rush - Tiles

A tile is one board cell. It knows its kind, where it sits, whether it is
face-up, whether a unit stands on it, and (for treasure) whether it has been
collected. Effect resolution is a pure function of the kind and the
direction the unit arrived from; consequences are applied by the game.
"""

from typing import TYPE_CHECKING

from dungeon_rush.engine.base import Offset, Position, TileEffect, TileKind

if TYPE_CHECKING:
    from dungeon_rush.engine.units import Unit


def resolve_effect(kind: TileKind, direction: Offset) -> TileEffect:
    """
    Resolve what entering a face-down tile of ``kind`` does.

    Args:
        kind: Kind of the tile being entered
        direction: Single-step direction the unit was travelling

    Returns:
        TileEffect describing the consequences

    Raises:
        ValueError: For a kind this function does not know how to resolve
    """
    if kind is TileKind.BLANK:
        return TileEffect()
    elif kind is TileKind.SPIKE_TRAP:
        return TileEffect(killed=True)
    elif kind is TileKind.CAGE_TRAP:
        return TileEffect(trapped=True)
    elif kind is TileKind.OIL_SLICK_TRAP:
        # Keeps sliding the way it came
        return TileEffect(pushed=Offset(direction.dx, direction.dy))
    elif kind is TileKind.PUSHBACK_TRAP:
        return TileEffect(pushed=direction.reversed())
    elif kind is TileKind.BOMB_TRAP:
        return TileEffect(killed=True, bomb=True)
    elif kind is TileKind.WALL:
        return TileEffect(blocked=True)
    elif kind is TileKind.TREASURE:
        return TileEffect(treasure=True)
    raise ValueError(f"Unhandled tile kind {kind!r}.")


class Tile:
    """A single board cell owned by its Board column."""

    def __init__(self, kind: TileKind, x: int, y: int) -> None:
        self.kind = kind
        self.x = x
        self.y = y
        self.revealed = False
        self.occupied = False
        self.treasure_collected = False

    def __repr__(self) -> str:
        state = "up" if self.revealed else "down"
        return f"Tile({self.kind.value}, x={self.x}, y={self.y}, {state})"

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def is_collected_treasure(self) -> bool:
        return self.kind is TileKind.TREASURE and self.treasure_collected

    @property
    def is_uncollected_treasure(self) -> bool:
        return self.kind is TileKind.TREASURE and not self.treasure_collected

    def reveal(self) -> None:
        self.revealed = True

    def hide(self) -> None:
        """Flip face-down unless a unit stands here or it is collected treasure."""
        if not self.occupied and not self.is_collected_treasure:
            self.revealed = False

    def collect_treasure(self) -> None:
        self.treasure_collected = True
        self.revealed = True

    def apply_effect(self, unit: "Unit", direction: Offset = Offset(0, 0)) -> TileEffect:
        """
        Resolve this tile's effect against a unit that just entered it.

        Only the kind and direction matter; ``unit`` is not inspected.
        """
        return resolve_effect(self.kind, direction)
