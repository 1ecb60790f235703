"""
Dungeon Rush - Units

The Offense owns exactly one unit of each kind. A unit waits in the spawn
zone (x == -1) until it enters the board, and returns there when killed.

Movement by kind:
    - Basic / Scout / Bomber: one orthogonal step
    - Sprinter: one or two orthogonal steps in a straight line
    - Jumper: exactly two tiles, orthogonally or diagonally
    - From the spawn zone every kind enters column 0 on any row, except
      the Sprinter (column 0 or 1) and the Jumper (column 1 only)

No offset ever leads back into the spawn zone.
"""

from dataclasses import dataclass

from dungeon_rush.engine.base import GameConfig, Offset, Position, UnitKind

SPAWN_X = -1

_SINGLE_STEPS = (Offset(1, 0), Offset(0, 1), Offset(0, -1), Offset(-1, 0))
_DOUBLE_STEPS = (Offset(2, 0), Offset(0, 2), Offset(0, -2), Offset(-2, 0))
_JUMPS = (
    Offset(2, 0),
    Offset(0, 2),
    Offset(0, -2),
    Offset(2, 2),
    Offset(2, -2),
    Offset(-2, 0),
    Offset(-2, 2),
    Offset(-2, -2),
)

# Columns reachable on entry from the spawn zone
_ENTRY_COLUMNS: dict[UnitKind, tuple[int, ...]] = {
    UnitKind.BASIC: (0,),
    UnitKind.SCOUT: (0,),
    UnitKind.BOMBER: (0,),
    UnitKind.SPRINTER: (0, 1),
    UnitKind.JUMPER: (1,),
}


def movement_options(kind: UnitKind, x: int, y: int, total_paths: int) -> tuple[Offset, ...]:
    """
    Legal (dx, dy) offsets for a unit of ``kind`` standing at (x, y).

    Offsets are not checked against the board's extent or occupancy; the
    game does that when a move is requested.

    Args:
        kind: Unit kind
        x: Current column (-1 for the spawn zone)
        y: Current row
        total_paths: Board height, used for entry moves from the spawn zone

    Returns:
        Tuple of distinct offsets
    """
    if x == SPAWN_X:
        return tuple(
            Offset(column - x, row - y)
            for column in _ENTRY_COLUMNS[kind]
            for row in range(total_paths)
        )

    if kind in (UnitKind.BASIC, UnitKind.SCOUT, UnitKind.BOMBER):
        candidates = _SINGLE_STEPS
    elif kind is UnitKind.SPRINTER:
        candidates = _SINGLE_STEPS + _DOUBLE_STEPS
    elif kind is UnitKind.JUMPER:
        candidates = _JUMPS
    else:
        raise ValueError(f"Unhandled unit kind {kind!r}.")

    return tuple(offset for offset in candidates if x + offset.dx >= 0)


@dataclass
class Unit:
    """
    Mutable record for one Offense unit.

    Attributes:
        kind: Unit kind
        x: Column, -1 while in the spawn zone
        y: Row, -1 while dead
        alive: On the board or waiting in the spawn zone
        spawned: Has been spawned since it last died
        trapped: Caged and unable to move
        can_respawn: Allowed to spawn this Offense phase
    """
    kind: UnitKind
    x: int = SPAWN_X
    y: int = -1
    alive: bool = False
    spawned: bool = False
    trapped: bool = False
    can_respawn: bool = True

    @property
    def id(self) -> str:
        return f"{self.kind.value}-1"

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def in_spawn_zone(self) -> bool:
        return self.x == SPAWN_X

    @property
    def on_board(self) -> bool:
        return self.alive and self.x > SPAWN_X

    def spawn(self, y: int = 0) -> None:
        """Bring the unit to life in the spawn zone."""
        self.x = SPAWN_X
        self.y = y
        self.alive = True
        self.spawned = True
        self.trapped = False
        self.can_respawn = False

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def kill(self) -> None:
        """Remove the unit from play; it may respawn from the next Offense phase."""
        self.alive = False
        self.spawned = False
        self.trapped = False
        self.x = SPAWN_X
        self.y = -1

    def enable_respawn(self) -> None:
        if not self.alive:
            self.can_respawn = True

    def set_trapped(self, trapped: bool) -> None:
        self.trapped = trapped

    def movement_options(self, total_paths: int) -> tuple[Offset, ...]:
        return movement_options(self.kind, self.x, self.y, total_paths)

    def has_jump_ability(self) -> bool:
        return self.kind is UnitKind.JUMPER

    def has_reveal_ability(self) -> bool:
        return self.kind is UnitKind.SCOUT

    def has_bomb_ability(self) -> bool:
        return self.kind is UnitKind.BOMBER

    def is_jump_move(self, dx: int, dy: int) -> bool:
        """True for a two-tile leap by a Jumper, including its entry leap."""
        if not self.has_jump_ability():
            return False
        return abs(dx) == 2 or abs(dy) == 2

    def spawn_cost(self, config: GameConfig) -> int:
        return config.costs_for(self.kind).summon

    def move_cost(self, config: GameConfig) -> int:
        return config.costs_for(self.kind).move


def create_all_units() -> dict[UnitKind, Unit]:
    """One fresh unit per kind, all waiting to be spawned."""
    return {kind: Unit(kind) for kind in UnitKind}
