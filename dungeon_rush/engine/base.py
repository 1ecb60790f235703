"""
Dungeon Rush - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the rules engine. Value objects (offsets, positions, effects, results, config)
are frozen dataclasses so they can be shared freely between the orchestrator
and its callers.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Mapping


class TileKind(Enum):
    """Kinds of tiles the Defense can place."""
    BLANK = "blank"
    SPIKE_TRAP = "spike_trap"
    CAGE_TRAP = "cage_trap"
    OIL_SLICK_TRAP = "oil_slick_trap"
    PUSHBACK_TRAP = "pushback_trap"
    BOMB_TRAP = "bomb_trap"
    WALL = "wall"
    TREASURE = "treasure"

    @property
    def display_name(self) -> str:
        return _TILE_NAMES[self]


class UnitKind(Enum):
    """Kinds of units the Offense can spawn (one instance each)."""
    BASIC = "basic"
    SPRINTER = "sprinter"
    JUMPER = "jumper"
    SCOUT = "scout"
    BOMBER = "bomber"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class GamePhase(Enum):
    """Phases of a turn cycle."""
    DEFENSE = "defense"
    OFFENSE = "offense"


class Side(Enum):
    """The two sides; used to report the winner."""
    DEFENSE = "defense"
    OFFENSE = "offense"


class ErrorCode(Enum):
    """Machine-checkable categories for rejected operations."""
    WRONG_PHASE = "wrong-phase"
    INVALID_TILE_COUNT = "invalid-tile-count"
    INVALID_UNIT = "invalid-unit"
    UNIT_ALREADY_ALIVE = "unit-already-alive"
    UNIT_NOT_ALIVE = "unit-not-alive"
    UNIT_TRAPPED = "unit-trapped"
    CANNOT_RESPAWN_YET = "cannot-respawn-yet"
    INSUFFICIENT_GOLD = "insufficient-gold"
    INVALID_MOVE = "invalid-move"
    INVALID_TARGET_POSITION = "invalid-target-position"
    TARGET_OCCUPIED = "target-occupied"
    SPAWN_AREA_OCCUPIED = "spawn-area-occupied"
    BLOCKED_BY_WALL = "blocked-by-wall"
    SUPPLY_EXHAUSTED = "supply-exhausted"
    TILES_NOT_DRAWN = "tiles-not-drawn"
    GAME_OVER = "game-over"


class EventCategory(Enum):
    """Coarse grouping of log entries, used by renderers for styling."""
    DEFENSE = auto()
    OFFENSE = auto()
    EVENT = auto()
    DANGER = auto()


_TILE_NAMES = {
    TileKind.BLANK: "Blank",
    TileKind.SPIKE_TRAP: "Spike Trap",
    TileKind.CAGE_TRAP: "Cage Trap",
    TileKind.OIL_SLICK_TRAP: "Oil Slick Trap",
    TileKind.PUSHBACK_TRAP: "Pushback Trap",
    TileKind.BOMB_TRAP: "Bomb Trap",
    TileKind.WALL: "Wall",
    TileKind.TREASURE: "Treasure",
}


@dataclass(frozen=True)
class Offset:
    """A relative movement (dx, dy) on the board."""
    dx: int
    dy: int

    def reversed(self) -> "Offset":
        return Offset(-self.dx, -self.dy)

    def unit_step(self) -> "Offset":
        """Collapse to a single-tile step along the same direction."""
        return Offset(_sign(self.dx), _sign(self.dy))


@dataclass(frozen=True)
class Position:
    """An absolute board coordinate. x == -1 is the spawn zone."""
    x: int
    y: int

    def shifted(self, offset: Offset) -> "Position":
        return Position(self.x + offset.dx, self.y + offset.dy)

    def neighbors(self) -> tuple["Position", ...]:
        """The four orthogonal neighbours (right, down, left, up)."""
        return tuple(self.shifted(o) for o in ORTHOGONAL_STEPS)


ORTHOGONAL_STEPS: tuple[Offset, ...] = (
    Offset(1, 0),
    Offset(0, 1),
    Offset(-1, 0),
    Offset(0, -1),
)


@dataclass(frozen=True)
class TileEffect:
    """
    Outcome of resolving a tile against a unit that entered it.

    Attributes:
        killed: The unit dies
        trapped: The unit is caged in place
        blocked: The tile cannot be entered (walls)
        pushed: Offset the unit is shoved along, or None
        treasure: The unit picked up treasure
        bomb: A blast centred on the tile must be resolved
    """
    killed: bool = False
    trapped: bool = False
    blocked: bool = False
    pushed: Offset | None = None
    treasure: bool = False
    bomb: bool = False

    @classmethod
    def none(cls) -> "TileEffect":
        return cls()


@dataclass(frozen=True)
class UnitCosts:
    """Spawn and per-move gold costs for one unit kind."""
    summon: int
    move: int


@dataclass(frozen=True)
class ActionResult:
    """
    Result of a public game operation.

    Rule violations are reported here instead of raised. Only the fields
    relevant to the operation are filled in.

    Attributes:
        success: Whether the operation was applied
        error: Category of the rejection, None on success
        message: Human-readable description
        tiles: Tile kinds drawn (start of a Defense turn)
        effect: Tile effect resolved by a move, if any
        gold_lost: Gold was spent even though the operation failed
        winner: Side that won, if the operation ended the game
        killed: Units killed as a consequence of the operation
        position: Final position of the acting unit
        data: Extra operation-specific details
    """
    success: bool
    error: ErrorCode | None = None
    message: str = ""
    tiles: tuple[TileKind, ...] = ()
    effect: TileEffect | None = None
    gold_lost: bool = False
    winner: Side | None = None
    killed: tuple[UnitKind, ...] = ()
    position: Position | None = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str = "", **kwargs: Any) -> "ActionResult":
        return cls(success=True, message=message, **kwargs)

    @classmethod
    def fail(cls, error: ErrorCode, message: str, **kwargs: Any) -> "ActionResult":
        return cls(success=False, error=error, message=message, **kwargs)

    @property
    def win(self) -> bool:
        return self.winner is not None


DEFAULT_TILE_COUNTS: dict[TileKind, int] = {
    TileKind.BLANK: 12,
    TileKind.SPIKE_TRAP: 6,
    TileKind.CAGE_TRAP: 4,
    TileKind.OIL_SLICK_TRAP: 3,
    TileKind.PUSHBACK_TRAP: 3,
    TileKind.BOMB_TRAP: 2,
    TileKind.WALL: 4,
    TileKind.TREASURE: 2,
}

DEFAULT_UNIT_COSTS: dict[UnitKind, UnitCosts] = {
    UnitKind.BASIC: UnitCosts(summon=2, move=1),
    UnitKind.SPRINTER: UnitCosts(summon=3, move=1),
    UnitKind.JUMPER: UnitCosts(summon=3, move=1),
    UnitKind.SCOUT: UnitCosts(summon=4, move=2),
    UnitKind.BOMBER: UnitCosts(summon=4, move=1),
}


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game.

    Attributes:
        total_paths: Board height (rows per column)
        starting_gold: Offense gold at game start
        gold_per_turn: Base gold granted at each switch to Offense
        treasure_gold: Gold granted for collecting a treasure
        tile_counts: Number of tiles of each kind in the supply
        unit_costs: Spawn/move costs per unit kind
        seed: Supply shuffle seed
    """
    total_paths: int = 4
    starting_gold: int = 4
    gold_per_turn: int = 4
    treasure_gold: int = 3
    tile_counts: Mapping[TileKind, int] = field(
        default_factory=lambda: dict(DEFAULT_TILE_COUNTS)
    )
    unit_costs: Mapping[UnitKind, UnitCosts] = field(
        default_factory=lambda: dict(DEFAULT_UNIT_COSTS)
    )
    seed: int = 1

    def __post_init__(self) -> None:
        """Validate configuration and normalize kind keys to enums."""
        from dungeon_rush.engine.validators import (
            validate_seed,
            validate_tile_counts,
            validate_unit_costs,
        )

        # Unknown kinds or negative counts raise here
        validate_seed(self.seed)
        object.__setattr__(self, "tile_counts", validate_tile_counts(self.tile_counts))
        object.__setattr__(self, "unit_costs", validate_unit_costs(self.unit_costs))

        errors = validate_game_config(self)
        if errors:
            raise ValueError("Invalid game configuration: " + "; ".join(errors) + ".")

    @property
    def total_tiles(self) -> int:
        return sum(self.tile_counts.values())

    def costs_for(self, kind: UnitKind) -> UnitCosts:
        return self.unit_costs[kind]

    @classmethod
    def from_settings(cls, settings: Any) -> "GameConfig":
        """Build a config from environment settings (see dungeon_rush.config)."""
        return create_game_config(
            {
                "total_paths": settings.total_paths,
                "starting_gold": settings.starting_gold,
                "gold_per_turn": settings.gold_per_turn,
                "treasure_gold": settings.treasure_gold,
            },
            seed=settings.seed,
        )


def create_game_config(
    overrides: Mapping[str, Any] | None = None,
    seed: int | None = None,
) -> GameConfig:
    """
    Create a game config with optional overrides merged over the defaults.

    Partial ``tile_counts`` and ``unit_costs`` mappings are merged key by key,
    so overriding one tile kind keeps the default counts for the others.

    Args:
        overrides: Field values to replace
        seed: Supply seed; derived from the current time when omitted

    Returns:
        Validated GameConfig
    """
    from dungeon_rush.engine.validators import parse_tile_kind, parse_unit_kind

    values = dict(overrides or {})

    tile_counts = dict(DEFAULT_TILE_COUNTS)
    for kind, count in dict(values.pop("tile_counts", {}) or {}).items():
        tile_counts[parse_tile_kind(kind)] = count

    unit_costs = dict(DEFAULT_UNIT_COSTS)
    for kind, costs in dict(values.pop("unit_costs", {}) or {}).items():
        if isinstance(costs, Mapping):
            costs = UnitCosts(**costs)
        unit_costs[parse_unit_kind(kind)] = costs

    if seed is None:
        seed = values.pop("seed", None)
    else:
        values.pop("seed", None)
    if seed is None:
        seed = int(time.time() * 1000)

    return GameConfig(
        tile_counts=tile_counts,
        unit_costs=unit_costs,
        seed=seed,
        **values,
    )


def validate_game_config(config: Any) -> list[str]:
    """
    Check a config for problems without raising.

    Works on anything exposing GameConfig's attributes, so callers can check
    a candidate before constructing the real (self-validating) GameConfig.

    Returns:
        List of error messages (empty when valid)
    """
    errors = []
    if not isinstance(config.total_paths, int) or config.total_paths < 1:
        errors.append("total_paths must be at least 1")
    for name in ("starting_gold", "gold_per_turn", "treasure_gold"):
        value = getattr(config, name)
        if not isinstance(value, int) or isinstance(value, bool):
            errors.append(f"{name} must be an integer")
        elif value < 0:
            errors.append(f"{name} cannot be negative")
    total_tiles = sum(config.tile_counts.values())
    if isinstance(config.total_paths, int) and total_tiles < config.total_paths:
        errors.append(
            f"tile supply must contain at least {config.total_paths} tiles for one turn"
        )
    missing = [kind.value for kind in UnitKind if kind not in config.unit_costs]
    if missing:
        errors.append(f"unit costs missing for: {', '.join(missing)}")
    return errors


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)
