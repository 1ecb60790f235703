"""
Dungeon Rush - Player Helpers

Thin, rule-free conveniences for the two sides. DefensePlayer builds up a
row-by-row assignment of the current draw before placing it; OffensePlayer
tracks a selected unit and answers "where can it go / what can I afford".
Every actual state change goes through DungeonRushEngine.
"""

from dungeon_rush.engine.base import ActionResult, ErrorCode, Position, TileKind, UnitKind
from dungeon_rush.engine.game import DungeonRushEngine
from dungeon_rush.engine.units import Unit


class DefensePlayer:
    """Assigns drawn tiles to rows and places them as a column."""

    def __init__(self, engine: DungeonRushEngine) -> None:
        self.engine = engine
        self._assignments: dict[int, TileKind] = {}

    def start_turn(self) -> ActionResult:
        result = self.engine.start_defense_phase()
        if result.success:
            self._assignments.clear()
        return result

    def available_tiles(self) -> list[TileKind]:
        """Tiles from the current draw not yet assigned to a row."""
        remaining = list(self.engine.current_draw)
        for kind in self._assignments.values():
            if kind in remaining:
                remaining.remove(kind)
        return remaining

    def assign_tile_to_row(self, row: int, kind: TileKind) -> tuple[bool, TileKind | None]:
        """
        Put a drawn tile on a row, replacing whatever was there.

        Returns:
            (success, replaced tile kind or None)
        """
        if not 0 <= row < self.engine.total_paths:
            return False, None

        replaced = self._assignments.pop(row, None)
        if kind not in self.available_tiles():
            if replaced is not None:
                self._assignments[row] = replaced
            return False, None

        self._assignments[row] = kind
        return True, replaced

    def assignments(self) -> dict[int, TileKind]:
        return dict(self._assignments)

    def is_placement_complete(self) -> bool:
        return len(self._assignments) == self.engine.total_paths

    def clear_assignment(self, row: int) -> None:
        self._assignments.pop(row, None)

    def clear_all_assignments(self) -> None:
        self._assignments.clear()

    def place_tiles(self) -> ActionResult:
        if not self.is_placement_complete():
            return ActionResult.fail(
                ErrorCode.INVALID_TILE_COUNT, "Not all tiles have been assigned"
            )
        ordered = [self._assignments[row] for row in range(self.engine.total_paths)]
        result = self.engine.place_defense_tiles(ordered)
        if result.success:
            self._assignments.clear()
        return result

    def end_turn(self) -> ActionResult:
        result = self.engine.end_defense_phase()
        self._assignments.clear()
        return result


class OffensePlayer:
    """Unit selection and move planning for the Offense."""

    def __init__(self, engine: DungeonRushEngine) -> None:
        self.engine = engine
        self.selected: UnitKind | None = None

    def select_unit(self, kind: UnitKind) -> bool:
        unit = self.engine.get_unit(kind)
        if unit is None or not unit.alive or unit.trapped:
            return False
        self.selected = unit.kind
        return True

    def deselect_unit(self) -> None:
        self.selected = None

    def selected_unit(self) -> Unit | None:
        if self.selected is None:
            return None
        return self.engine.get_unit(self.selected)

    def valid_targets(self, kind: UnitKind | None = None) -> list[Position]:
        """
        Cells the unit could be ordered to, ignoring gold.

        Includes goal cells past the last column and face-down walls.
        """
        unit = self.engine.get_unit(kind) if kind is not None else self.selected_unit()
        if unit is None or not unit.alive:
            return []

        board = self.engine.board
        targets = []
        for offset in unit.movement_options(self.engine.total_paths):
            target = unit.position.shifted(offset)
            if not 0 <= target.y < self.engine.total_paths:
                continue
            if board.is_defense_goal(target.x):
                targets.append(target)
            elif board.is_valid_position(target.x, target.y):
                if self.engine.unit_at(target.x, target.y, exclude=unit) is None:
                    targets.append(target)
        return targets

    def move_selected_unit(self, target_x: int, target_y: int) -> ActionResult:
        if self.selected is None:
            return ActionResult.fail(ErrorCode.INVALID_UNIT, "No unit selected")
        result = self.engine.move_unit(self.selected, target_x, target_y)
        if result.success:
            self.deselect_unit()
        return result

    def move_sprinter_twice(self, first: Position, second: Position) -> ActionResult:
        """
        Walk the sprinter one tile at a time, paying for each step.

        Stops after the first step if it fails, or leaves the sprinter
        dead or trapped.
        """
        sprinter = self.engine.get_unit(UnitKind.SPRINTER)
        first_step = self.engine.move_unit(UnitKind.SPRINTER, first.x, first.y)
        if not first_step.success:
            return first_step
        if not sprinter.alive or sprinter.trapped or self.engine.is_game_over():
            return ActionResult.ok(
                "Movement stopped after first tile",
                effect=first_step.effect,
                killed=first_step.killed,
                winner=first_step.winner,
                position=first_step.position,
                data={"partial": True},
            )
        return self.engine.move_unit(UnitKind.SPRINTER, second.x, second.y)

    def can_afford(self, action: str, kind: UnitKind) -> bool:
        """``action`` is "spawn" or "move"."""
        if action == "spawn":
            return self.engine.can_afford_spawn(kind)
        return self.engine.can_afford_move(kind)

    def spawnable_units(self) -> list[Unit]:
        return [
            unit
            for unit in self.engine.units.values()
            if not unit.alive and unit.can_respawn and self.can_afford("spawn", unit.kind)
        ]

    def movable_units(self) -> list[Unit]:
        return [
            unit
            for unit in self.engine.units.values()
            if unit.alive and not unit.trapped and self.can_afford("move", unit.kind)
        ]

    def end_turn(self) -> ActionResult:
        self.deselect_unit()
        return self.engine.end_offense_phase()
