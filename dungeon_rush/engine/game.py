"""
Dungeon Rush - Game Engine

The orchestrator that owns the board, the tile supply and the Offense units,
and applies every rule of the game.

Turn structure:
    - Defense: draw one tile per path, place them as a new column, end turn.
      On the very first cycle the Defense takes two such turns in a row.
    - Offense: receives base gold plus one gold per unit standing free on
      the board, then spends gold to spawn and move units.
    - End of Offense: every face-up tile without a unit on it (other than
      collected treasure) flips back face-down, and a new turn begins.

Win conditions:
    - Offense wins when a unit steps past the last column.
    - Defense wins when the supply cannot furnish a full column.

Every public operation returns an ActionResult. Rule violations are reported
through its error code and never raised. The only failed operation that
still changes state is walking into a wall: the move fee is kept.
"""

import dataclasses
import logging
from collections import Counter
from typing import Sequence

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
    UnitKind,
)
from dungeon_rush.engine.board import Board
from dungeon_rush.engine.events import EventEntry, EventLog, GameEvent
from dungeon_rush.engine.supply import TileSupply
from dungeon_rush.engine.tiles import Tile
from dungeon_rush.engine.units import Unit, create_all_units
from dungeon_rush.engine.validators import parse_tile_kind

logger = logging.getLogger(__name__)

# Defense turns taken back to back before the first Offense phase
FIRST_CYCLE_DEFENSE_TURNS = 2


class DungeonRushEngine:
    """
    Stateful rules engine for one game.

    The engine is synchronous and single-threaded: each call runs to
    completion (including chained explosions and pushes) before returning.
    Given the same config (and seed) and the same sequence of calls, the
    outcome is identical.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.total_paths)
        self.supply = TileSupply(self.config.tile_counts, self.config.seed)
        self.units: dict[UnitKind, Unit] = create_all_units()
        self.events = EventLog()
        self._start_new_game()

    def _start_new_game(self) -> None:
        self.turn = 1
        self.phase = GamePhase.DEFENSE
        self.defense_turn_count = 0
        self.first_cycle = True
        self.gold = self.config.starting_gold
        self._current_draw: list[TileKind] = []
        self.game_over = False
        self.winner: Side | None = None
        self._scout_reveal_ready = False
        self._log(GameEvent.GAME_STARTED, "Game started", seed=self.config.seed)
        logger.info("New game started with seed %s", self.config.seed)

    def reset(self, seed: int | None = None) -> None:
        """
        Start a new game.

        Args:
            seed: Restart with this supply seed instead of the current one
        """
        if seed is not None and seed != self.config.seed:
            self.config = dataclasses.replace(self.config, seed=seed)
            self.supply = TileSupply(self.config.tile_counts, self.config.seed)
        else:
            self.supply.reset()
        self.board.clear()
        self.units = create_all_units()
        self.events.clear()
        self._start_new_game()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def total_paths(self) -> int:
        return self.config.total_paths

    @property
    def current_draw(self) -> tuple[TileKind, ...]:
        return tuple(self._current_draw)

    @property
    def scout_reveal_ready(self) -> bool:
        return self._scout_reveal_ready

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Side | None:
        return self.winner

    def alive_units(self) -> list[Unit]:
        return [unit for unit in self.units.values() if unit.alive]

    def get_unit(self, kind: UnitKind | str) -> Unit | None:
        try:
            return self.units.get(UnitKind(kind))
        except ValueError:
            return None

    def unit_at(self, x: int, y: int, exclude: Unit | None = None) -> Unit | None:
        """The living unit standing on (x, y), if any."""
        for unit in self.units.values():
            if unit is not exclude and unit.alive and unit.x == x and unit.y == y:
                return unit
        return None

    def get_tile(self, x: int, y: int) -> Tile | None:
        return self.board.get_tile(x, y)

    def board_dimensions(self) -> tuple[int, int]:
        return self.board.dimensions()

    def recent_events(self, count: int = 10) -> list[EventEntry]:
        return self.events.recent(count)

    def can_afford_spawn(self, kind: UnitKind) -> bool:
        return self.gold >= self.config.costs_for(kind).summon

    def can_afford_move(self, kind: UnitKind) -> bool:
        return self.gold >= self.config.costs_for(kind).move

    # ------------------------------------------------------------------
    # Defense
    # ------------------------------------------------------------------

    def start_defense_phase(self) -> ActionResult:
        """
        Draw one tile per path for the Defense to place.

        If the supply cannot furnish a full column the Defense wins
        immediately; the result then carries ``winner`` and the
        supply-exhausted code.
        """
        rejected = self._check_phase(GamePhase.DEFENSE)
        if rejected:
            return rejected

        if not self.supply.can_draw(self.total_paths):
            self._end_game(Side.DEFENSE, "Defense wins! No more tiles to draw.")
            return ActionResult.fail(
                ErrorCode.SUPPLY_EXHAUSTED,
                "No more tiles available - Defense wins!",
                winner=Side.DEFENSE,
            )

        self._current_draw = self.supply.draw_many(self.total_paths)
        self._log(
            GameEvent.TILES_DRAWN,
            f"Defense drew {len(self._current_draw)} tiles",
            EventCategory.DEFENSE,
            tiles=[kind.value for kind in self._current_draw],
        )
        return ActionResult.ok("Tiles drawn", tiles=tuple(self._current_draw))

    def place_defense_tiles(self, kinds: Sequence[TileKind | str]) -> ActionResult:
        """
        Append a column to the board.

        The column must be an ordering of the tiles drawn by the last
        start_defense_phase call; placing it uses up the draw.

        Args:
            kinds: Tile kinds ordered by row, exactly one per path
        """
        rejected = self._check_phase(GamePhase.DEFENSE)
        if rejected:
            return rejected

        if len(kinds) != self.total_paths:
            return ActionResult.fail(
                ErrorCode.INVALID_TILE_COUNT,
                f"Expected {self.total_paths} tiles, got {len(kinds)}",
            )

        parsed = [parse_tile_kind(kind) for kind in kinds]
        if not self._current_draw:
            return ActionResult.fail(
                ErrorCode.TILES_NOT_DRAWN, "Draw tiles before placing a column"
            )
        if Counter(parsed) != Counter(self._current_draw):
            return ActionResult.fail(
                ErrorCode.TILES_NOT_DRAWN, "Placed tiles do not match the current draw"
            )

        if not self.board.add_column(parsed):
            # Length was checked above, so this is a broken invariant
            raise ValueError("Board rejected a column of the correct height.")
        self._current_draw = []

        column = self.board.max_column
        self._log(
            GameEvent.TILES_PLACED,
            f"Defense placed column {column}",
            EventCategory.DEFENSE,
            column=column,
        )
        logger.debug("Column %d placed: %s", column, [kind.value for kind in parsed])
        return ActionResult.ok(f"Placed column {column}", data={"column": column})

    def end_defense_phase(self) -> ActionResult:
        """
        Finish a Defense turn.

        On the first cycle the first call keeps the Defense in play for a
        second placement; otherwise control passes to the Offense, which
        receives its gold and may respawn any dead units.
        """
        rejected = self._check_phase(GamePhase.DEFENSE)
        if rejected:
            return rejected

        self.defense_turn_count += 1
        self._current_draw = []

        if self.first_cycle and self.defense_turn_count < FIRST_CYCLE_DEFENSE_TURNS:
            self._log(
                GameEvent.DEFENSE_TURN_ENDED,
                f"Defense turn {self.defense_turn_count} complete - taking second turn",
                EventCategory.DEFENSE,
            )
            return ActionResult.ok("Defense takes another turn", data={"phase": self.phase})

        self.phase = GamePhase.OFFENSE
        self.defense_turn_count = 0
        self.first_cycle = False
        self._scout_reveal_ready = False

        base_gold = self.config.gold_per_turn
        bonus_gold = sum(
            1 for unit in self.units.values() if unit.on_board and not unit.trapped
        )
        granted = base_gold + bonus_gold
        self.gold += granted

        self._log(GameEvent.OFFENSE_PHASE_STARTED, "Offense phase begins", EventCategory.OFFENSE)
        if bonus_gold:
            message = (
                f"Offense gained {base_gold} base + {bonus_gold} unit bonus = "
                f"{granted} gold (Total: {self.gold})"
            )
        else:
            message = f"Offense gained {base_gold} gold (Total: {self.gold})"
        self._log(
            GameEvent.GOLD_GRANTED,
            message,
            EventCategory.OFFENSE,
            base=base_gold,
            bonus=bonus_gold,
            total=self.gold,
        )

        for unit in self.units.values():
            unit.enable_respawn()

        logger.info("Turn %d: Offense phase with %d gold", self.turn, self.gold)
        return ActionResult.ok(
            "Offense phase begins",
            data={"phase": self.phase, "gold_granted": granted},
        )

    # ------------------------------------------------------------------
    # Offense
    # ------------------------------------------------------------------

    def spawn_unit(self, kind: UnitKind | str) -> ActionResult:
        """Bring a unit into the spawn zone, paying its summon cost."""
        rejected = self._check_phase(GamePhase.OFFENSE)
        if rejected:
            return rejected

        unit = self.get_unit(kind)
        if unit is None:
            return ActionResult.fail(ErrorCode.INVALID_UNIT, f"Invalid unit type {kind!r}")

        cost = unit.spawn_cost(self.config)
        if self.gold < cost:
            return ActionResult.fail(ErrorCode.INSUFFICIENT_GOLD, "Not enough gold")
        if unit.alive:
            return ActionResult.fail(ErrorCode.UNIT_ALREADY_ALIVE, "Unit already alive")
        if not unit.can_respawn:
            return ActionResult.fail(
                ErrorCode.CANNOT_RESPAWN_YET, "Unit cannot respawn this turn"
            )
        if any(other.alive and other.in_spawn_zone for other in self.units.values()):
            return ActionResult.fail(ErrorCode.SPAWN_AREA_OCCUPIED, "Spawn area occupied")

        self.gold -= cost
        unit.spawn(0)
        self._log(
            GameEvent.UNIT_SPAWNED,
            f"Spawned {unit.kind.value} (-{cost} gold)",
            EventCategory.OFFENSE,
            unit=unit.kind.value,
            cost=cost,
        )
        return ActionResult.ok(f"Spawned {unit.kind.value}", position=unit.position)

    def move_unit(self, kind: UnitKind | str, target_x: int, target_y: int) -> ActionResult:
        """
        Move a unit to (target_x, target_y), paying its move cost.

        Entering a face-down tile reveals it and resolves its effect, except
        for a Jumper's leap which lands without revealing. A wall is found
        by paying and trying: the unit stays put and the fee is lost.
        Stepping past the last column wins the game for the Offense.
        """
        rejected = self._check_phase(GamePhase.OFFENSE)
        if rejected:
            return rejected

        unit = self.get_unit(kind)
        if unit is None:
            return ActionResult.fail(ErrorCode.INVALID_UNIT, f"Invalid unit type {kind!r}")
        if not unit.alive:
            return ActionResult.fail(ErrorCode.UNIT_NOT_ALIVE, "Unit is not alive")
        if unit.trapped:
            return ActionResult.fail(ErrorCode.UNIT_TRAPPED, "Unit is trapped")

        cost = unit.move_cost(self.config)
        if self.gold < cost:
            return ActionResult.fail(ErrorCode.INSUFFICIENT_GOLD, "Not enough gold")

        requested = Offset(target_x - unit.x, target_y - unit.y)
        if requested not in unit.movement_options(self.total_paths):
            return ActionResult.fail(ErrorCode.INVALID_MOVE, "Invalid move")

        reaches_goal = (
            self.board.is_defense_goal(target_x) and 0 <= target_y < self.total_paths
        )
        if not self.board.is_valid_position(target_x, target_y) and not reaches_goal:
            return ActionResult.fail(
                ErrorCode.INVALID_TARGET_POSITION, "Invalid target position"
            )
        if self.unit_at(target_x, target_y, exclude=unit) is not None:
            return ActionResult.fail(
                ErrorCode.TARGET_OCCUPIED, "Target position occupied by another unit"
            )

        origin = unit.position
        self.gold -= cost
        self._scout_reveal_ready = False

        if reaches_goal:
            unit.move_to(target_x, target_y)
            self._sync_occupancy(origin)
            self._end_game(
                Side.OFFENSE,
                f"{unit.kind.value} reached the defense endzone! Offense wins!",
            )
            return ActionResult.ok(
                "Offense wins", winner=Side.OFFENSE, position=unit.position
            )

        tile = self.board.get_tile(target_x, target_y)
        if tile.kind is TileKind.WALL:
            tile.reveal()
            self._log(
                GameEvent.MOVE_BLOCKED,
                f"{unit.kind.value} discovered a wall at ({target_x}, {target_y})! "
                f"Movement blocked (lost {cost} gold)",
                EventCategory.EVENT,
                unit=unit.kind.value,
                x=target_x,
                y=target_y,
                cost=cost,
            )
            return ActionResult.fail(
                ErrorCode.BLOCKED_BY_WALL,
                "Movement blocked by wall",
                gold_lost=True,
                position=origin,
                data={"cost": cost},
            )

        unit.move_to(target_x, target_y)
        self._sync_occupancy(origin)
        tile.occupied = True

        was_revealed = tile.revealed
        if unit.is_jump_move(requested.dx, requested.dy):
            effect = TileEffect.none()
        else:
            tile.reveal()
            direction = Offset(1, 0) if origin.x == -1 else requested.unit_step()
            effect = self._entry_effect(unit, tile, was_revealed, direction)

        self._log(
            GameEvent.UNIT_MOVED,
            f"{unit.kind.value} moved to ({target_x}, {target_y})",
            EventCategory.OFFENSE,
            unit=unit.kind.value,
            x=target_x,
            y=target_y,
            cost=cost,
        )
        logger.debug("%s moved %s -> (%d, %d)", unit.kind.value, origin, target_x, target_y)

        killed = self._apply_effect(unit, tile, effect)

        if unit.has_reveal_ability() and unit.alive and not unit.trapped:
            self._scout_reveal_ready = True

        return ActionResult.ok(
            f"{unit.kind.value} moved",
            effect=effect,
            killed=tuple(killed),
            position=unit.position if unit.alive else None,
        )

    def reveal_adjacent_tile(self, kind: UnitKind | str, target_x: int, target_y: int) -> ActionResult:
        """
        Scout follow-up: flip one face-down tile next to the scout.

        Allowed once after each completed scout move. The tile is exposed
        without triggering it, and treasure still has to be walked onto.
        """
        rejected = self._check_phase(GamePhase.OFFENSE)
        if rejected:
            return rejected

        unit = self.get_unit(kind)
        if unit is None or not unit.has_reveal_ability():
            return ActionResult.fail(ErrorCode.INVALID_UNIT, "Only the scout can reveal tiles")
        if not unit.alive:
            return ActionResult.fail(ErrorCode.UNIT_NOT_ALIVE, "Unit is not alive")
        if unit.trapped:
            return ActionResult.fail(ErrorCode.UNIT_TRAPPED, "Unit is trapped")
        if not self._scout_reveal_ready:
            return ActionResult.fail(ErrorCode.INVALID_MOVE, "Scout must move before revealing")

        target = Position(target_x, target_y)
        if target not in unit.position.neighbors():
            return ActionResult.fail(ErrorCode.INVALID_MOVE, "Tile is not adjacent to the scout")

        tile = self.board.get_tile(target_x, target_y)
        if tile is None or tile.revealed:
            return ActionResult.fail(
                ErrorCode.INVALID_TARGET_POSITION, "No face-down tile at that position"
            )

        tile.reveal()
        self._scout_reveal_ready = False
        self._log(
            GameEvent.TILE_REVEALED,
            f"Scout revealed {tile.kind.display_name} at ({target_x}, {target_y})",
            EventCategory.OFFENSE,
            x=target_x,
            y=target_y,
            tile=tile.kind.value,
        )
        return ActionResult.ok("Tile revealed", tiles=(tile.kind,), position=target)

    def end_offense_phase(self) -> ActionResult:
        """Flip unoccupied tiles face-down and start the next turn."""
        rejected = self._check_phase(GamePhase.OFFENSE)
        if rejected:
            return rejected

        self.board.hide_revealed_tiles()
        for unit in self.units.values():
            if unit.alive and self.board.is_valid_position(unit.x, unit.y):
                self.board.set_occupied(unit.x, unit.y, True)

        self._scout_reveal_ready = False
        self.turn += 1
        self.phase = GamePhase.DEFENSE
        self._log(GameEvent.TURN_STARTED, f"=== Turn {self.turn} ===", number=self.turn)
        logger.info("Turn %d: Defense phase", self.turn)
        return ActionResult.ok(f"Turn {self.turn} begins", data={"turn": self.turn})

    # ------------------------------------------------------------------
    # Effect resolution
    # ------------------------------------------------------------------

    def _apply_effect(
        self,
        unit: Unit,
        tile: Tile,
        effect: TileEffect,
        allow_push: bool = True,
    ) -> list[UnitKind]:
        """
        Carry out a tile effect on the unit standing on ``tile``.

        Returns:
            Kinds of every unit killed as a result, in order of death
        """
        killed: list[UnitKind] = []

        if effect.treasure:
            tile.collect_treasure()
            self.gold += self.config.treasure_gold
            self._log(
                GameEvent.TREASURE_COLLECTED,
                f"{unit.kind.value} found treasure! (+{self.config.treasure_gold} gold)",
                EventCategory.OFFENSE,
                unit=unit.kind.value,
                x=tile.x,
                y=tile.y,
                amount=self.config.treasure_gold,
            )

        if effect.trapped:
            self._cage(unit, tile)

        if effect.killed:
            # A bomb trap explodes once, centred here, below
            killed.extend(self._kill(unit, tile.kind.display_name, detonate=not effect.bomb))

        if effect.bomb:
            killed.extend(self._trigger_bomb(tile.x, tile.y))

        if effect.pushed is not None and allow_push and unit.alive:
            killed.extend(self._resolve_push(unit, tile, effect.pushed))

        return killed

    def _cage(self, unit: Unit, tile: Tile) -> None:
        for other in self.units.values():
            if other is unit or not other.alive or not other.trapped:
                continue
            if other.position != tile.position:
                continue
            other.set_trapped(False)
            open_cells = [
                (cell.x, cell.y)
                for cell in tile.position.neighbors()
                if self.board.is_valid_position(cell.x, cell.y)
                and self.unit_at(cell.x, cell.y) is None
            ]
            self._log(
                GameEvent.UNIT_FREED,
                f"{other.kind.value} was freed from the cage and must move",
                EventCategory.EVENT,
                unit=other.kind.value,
                x=tile.x,
                y=tile.y,
                open_cells=open_cells,
            )

        unit.set_trapped(True)
        self._log(
            GameEvent.UNIT_TRAPPED,
            f"{unit.kind.value} is trapped!",
            EventCategory.EVENT,
            unit=unit.kind.value,
            x=tile.x,
            y=tile.y,
        )

    def _kill(self, unit: Unit, cause: str, detonate: bool = True) -> list[UnitKind]:
        """
        Kill a unit. A dying bomber explodes where it stood unless
        ``detonate`` is False (it is already the centre of a blast).
        """
        if not unit.alive:
            return []

        position = unit.position
        unit.kill()
        self._sync_occupancy(position)
        self._log(
            GameEvent.UNIT_KILLED,
            f"{unit.kind.value} was killed by {cause}!",
            EventCategory.DANGER,
            unit=unit.kind.value,
            x=position.x,
            y=position.y,
            cause=cause,
        )

        killed = [unit.kind]
        if detonate and unit.has_bomb_ability():
            killed.extend(self._trigger_bomb(position.x, position.y))
        return killed

    def _trigger_bomb(self, x: int, y: int) -> list[UnitKind]:
        """
        Explode at (x, y): kill every living unit on the centre or its four
        orthogonal neighbours and flip the neighbours face-up. Bombers caught
        off-centre explode in turn. Each unit can die only once, so chains
        always terminate.
        """
        center = Position(x, y)
        blast_area = (center,) + center.neighbors()

        for cell in center.neighbors():
            self.board.reveal_tile(cell.x, cell.y)
        self._log(
            GameEvent.BOMB_EXPLODED,
            f"Bomb exploded at ({x}, {y})!",
            EventCategory.DANGER,
            x=x,
            y=y,
        )

        victims = [
            unit
            for unit in self.units.values()
            if unit.on_board and unit.position in blast_area
        ]

        killed: list[UnitKind] = []
        for victim in victims:
            if not victim.alive:
                continue  # already claimed by a nested blast
            position = victim.position
            killed.extend(self._kill(victim, "an explosion", detonate=False))
            if victim.has_bomb_ability() and position != center:
                killed.extend(self._trigger_bomb(position.x, position.y))
        return killed

    def _resolve_push(self, unit: Unit, tile: Tile, push: Offset) -> list[UnitKind]:
        """
        Slide a unit off an oil slick or pushback trap.

        An oil slick pushed into a wall bounces the unit the other way; a
        pushback into a wall does nothing. The landing tile is revealed and
        resolved once, but its own push (if any) is ignored.
        """
        origin = tile.position
        landing = origin.shifted(push)
        landing_tile = self.board.get_tile(landing.x, landing.y)

        if landing_tile is not None and landing_tile.kind is TileKind.WALL:
            landing_tile.reveal()
            if tile.kind is TileKind.OIL_SLICK_TRAP:
                push = push.reversed()
                landing = origin.shifted(push)
                landing_tile = self.board.get_tile(landing.x, landing.y)
            else:
                return self._cancel_push(unit, origin, "a wall")

        if landing_tile is None:
            return self._cancel_push(unit, origin, "the edge of the board")
        if landing_tile.kind is TileKind.WALL:
            landing_tile.reveal()
            return self._cancel_push(unit, origin, "a wall")
        if self.unit_at(landing.x, landing.y, exclude=unit) is not None:
            return self._cancel_push(unit, origin, "another unit")

        unit.move_to(landing.x, landing.y)
        self._sync_occupancy(origin)
        landing_tile.occupied = True
        was_revealed = landing_tile.revealed
        landing_tile.reveal()
        self._log(
            GameEvent.UNIT_PUSHED,
            f"{unit.kind.value} slid to ({landing.x}, {landing.y})",
            EventCategory.EVENT,
            unit=unit.kind.value,
            x=landing.x,
            y=landing.y,
        )

        effect = self._entry_effect(unit, landing_tile, was_revealed, push)
        return self._apply_effect(unit, landing_tile, effect, allow_push=False)

    def _entry_effect(
        self, unit: Unit, tile: Tile, was_revealed: bool, direction: Offset
    ) -> TileEffect:
        """Face-up traps are spent; treasure pays out until it is collected."""
        if was_revealed and not tile.is_uncollected_treasure:
            return TileEffect.none()
        return tile.apply_effect(unit, direction)

    def _cancel_push(self, unit: Unit, origin: Position, obstacle: str) -> list[UnitKind]:
        self._log(
            GameEvent.PUSH_CANCELLED,
            f"{unit.kind.value} was stopped by {obstacle}",
            EventCategory.EVENT,
            unit=unit.kind.value,
            x=origin.x,
            y=origin.y,
        )
        return []

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_phase(self, phase: GamePhase) -> ActionResult | None:
        if self.game_over:
            return ActionResult.fail(ErrorCode.GAME_OVER, "The game is over")
        if self.phase is not phase:
            return ActionResult.fail(
                ErrorCode.WRONG_PHASE, f"Not in {phase.value} phase"
            )
        return None

    def _sync_occupancy(self, position: Position) -> None:
        """Recompute the occupied flag of one tile from unit positions."""
        if self.board.is_valid_position(position.x, position.y):
            occupied = self.unit_at(position.x, position.y) is not None
            self.board.set_occupied(position.x, position.y, occupied)

    def _end_game(self, winner: Side, message: str) -> None:
        self.game_over = True
        self.winner = winner
        self.board.reveal_all()
        self._log(
            GameEvent.GAME_OVER,
            message,
            EventCategory.DEFENSE if winner is Side.DEFENSE else EventCategory.OFFENSE,
            winner=winner.value,
        )
        logger.info("Game over on turn %d: %s wins", self.turn, winner.value)

    def _log(
        self,
        event: GameEvent,
        message: str,
        category: EventCategory = EventCategory.EVENT,
        **data,
    ) -> EventEntry:
        return self.events.append(self.turn, self.phase, event, message, category, **data)
