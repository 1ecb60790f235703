"""
Dungeon Rush - Player Helper Tests
"""

import pytest

from dungeon_rush.engine.base import (
    ErrorCode,
    GameConfig,
    GamePhase,
    Position,
    TileKind,
    UnitKind,
)
from dungeon_rush.engine.game import DungeonRushEngine
from dungeon_rush.engine.players import DefensePlayer, OffensePlayer

B = TileKind.BLANK
SPIKE = TileKind.SPIKE_TRAP
CAGE = TileKind.CAGE_TRAP


@pytest.fixture
def defense() -> DefensePlayer:
    config = GameConfig(
        total_paths=3,
        tile_counts={TileKind.BLANK: 2, TileKind.WALL: 4},
        seed=5,
    )
    player = DefensePlayer(DungeonRushEngine(config))
    assert player.start_turn().success
    return player


class TestDefensePlayer:
    """Tests for the Defense's assignment workflow."""

    def test_available_tiles_starts_with_draw(self, defense):
        assert sorted(k.value for k in defense.available_tiles()) == sorted(
            k.value for k in defense.engine.current_draw
        )

    def test_assign_and_place(self, defense):
        draw = defense.engine.current_draw
        for row, kind in enumerate(draw):
            ok, replaced = defense.assign_tile_to_row(row, kind)
            assert ok
            assert replaced is None
        assert defense.is_placement_complete()
        assert defense.available_tiles() == []

        result = defense.place_tiles()

        assert result.success
        assert defense.assignments() == {}
        placed = [tile.kind for tile in defense.engine.board.get_column(0)]
        assert placed == list(draw)
        assert defense.engine.current_draw == ()

    def test_assign_out_of_range_row(self, defense):
        kind = defense.engine.current_draw[0]
        assert defense.assign_tile_to_row(3, kind) == (False, None)

    def test_assign_tile_not_in_draw(self):
        engine = DungeonRushEngine(
            GameConfig(total_paths=2, tile_counts={TileKind.BLANK: 4}, seed=1)
        )
        player = DefensePlayer(engine)
        player.start_turn()
        assert player.assign_tile_to_row(0, TileKind.WALL) == (False, None)

    def test_reassign_row_returns_replaced(self):
        engine = DungeonRushEngine(
            GameConfig(total_paths=2, tile_counts={TileKind.BLANK: 4}, seed=1)
        )
        player = DefensePlayer(engine)
        player.start_turn()
        player.assign_tile_to_row(0, TileKind.BLANK)
        assert player.assign_tile_to_row(0, TileKind.BLANK) == (True, TileKind.BLANK)
        assert len(player.available_tiles()) == 1

    def test_failed_reassign_keeps_previous(self):
        engine = DungeonRushEngine(
            GameConfig(total_paths=2, tile_counts={TileKind.BLANK: 4}, seed=1)
        )
        player = DefensePlayer(engine)
        player.start_turn()
        player.assign_tile_to_row(0, TileKind.BLANK)
        assert player.assign_tile_to_row(0, TileKind.SPIKE_TRAP) == (False, None)
        assert player.assignments() == {0: TileKind.BLANK}

    def test_place_incomplete(self, defense):
        defense.assign_tile_to_row(0, defense.engine.current_draw[0])
        result = defense.place_tiles()
        assert result.error is ErrorCode.INVALID_TILE_COUNT
        assert defense.engine.board.max_column == -1

    def test_clear_assignments(self, defense):
        draw = defense.engine.current_draw
        defense.assign_tile_to_row(0, draw[0])
        defense.assign_tile_to_row(1, draw[1])
        defense.clear_assignment(0)
        assert list(defense.assignments()) == [1]
        defense.clear_all_assignments()
        assert defense.assignments() == {}

    def test_end_turn(self, defense):
        defense.end_turn()
        assert defense.engine.phase is GamePhase.DEFENSE
        assert defense.engine.defense_turn_count == 1


class TestOffensePlayer:
    """Tests for unit selection and move planning."""

    def test_select_requires_living_unit(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        assert not player.select_unit(UnitKind.BASIC)
        player.engine.spawn_unit(UnitKind.BASIC)
        assert player.select_unit(UnitKind.BASIC)
        assert player.selected_unit().kind is UnitKind.BASIC

    def test_cannot_select_trapped_unit(self, offense_game):
        player = OffensePlayer(offense_game([[CAGE, B, B, B], [B, B, B, B]], gold=10))
        player.engine.spawn_unit(UnitKind.BASIC)
        player.engine.move_unit(UnitKind.BASIC, 0, 0)
        assert not player.select_unit(UnitKind.BASIC)

    def test_move_selected(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        player.engine.spawn_unit(UnitKind.BASIC)
        player.select_unit(UnitKind.BASIC)
        result = player.move_selected_unit(0, 1)
        assert result.success
        assert player.selected is None

    def test_move_without_selection(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        assert player.move_selected_unit(0, 0).error is ErrorCode.INVALID_UNIT

    def test_valid_targets_from_spawn(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        player.engine.spawn_unit(UnitKind.SPRINTER)
        targets = player.valid_targets(UnitKind.SPRINTER)
        assert len(targets) == 8
        assert Position(1, 3) in targets

    def test_valid_targets_include_goal_and_skip_units(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=20))
        engine = player.engine
        engine.spawn_unit(UnitKind.BASIC)
        engine.move_unit(UnitKind.BASIC, 0, 0)
        engine.move_unit(UnitKind.BASIC, 1, 0)
        engine.spawn_unit(UnitKind.SPRINTER)
        engine.move_unit(UnitKind.SPRINTER, 1, 1)

        targets = player.valid_targets(UnitKind.BASIC)

        assert Position(2, 0) in targets
        assert Position(1, 1) not in targets
        assert Position(1, -1) not in targets
        assert Position(0, 0) in targets

    def test_valid_targets_for_dead_unit(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board))
        assert player.valid_targets(UnitKind.SCOUT) == []

    def test_sprinter_two_steps(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        engine = player.engine
        engine.spawn_unit(UnitKind.SPRINTER)
        engine.move_unit(UnitKind.SPRINTER, 0, 0)

        result = player.move_sprinter_twice(Position(0, 1), Position(0, 2))

        assert result.success
        assert engine.units[UnitKind.SPRINTER].position == Position(0, 2)
        assert engine.gold == 10 - 3 - 1 - 2
        assert engine.get_tile(0, 1).revealed

    def test_sprinter_stops_on_first_step_death(self, offense_game):
        player = OffensePlayer(offense_game([[B, SPIKE, B, B], [B, B, B, B]], gold=10))
        engine = player.engine
        engine.spawn_unit(UnitKind.SPRINTER)
        engine.move_unit(UnitKind.SPRINTER, 0, 0)

        result = player.move_sprinter_twice(Position(0, 1), Position(0, 2))

        assert result.success
        assert result.data["partial"] is True
        assert result.killed == (UnitKind.SPRINTER,)
        assert engine.gold == 10 - 3 - 1 - 1

    def test_sprinter_first_step_rejected(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        result = player.move_sprinter_twice(Position(0, 0), Position(0, 1))
        assert result.error is ErrorCode.UNIT_NOT_ALIVE

    def test_spawnable_and_movable(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=3))
        spawnable = {unit.kind for unit in player.spawnable_units()}
        assert spawnable == {UnitKind.BASIC, UnitKind.SPRINTER, UnitKind.JUMPER}

        player.engine.spawn_unit(UnitKind.BASIC)
        assert [u.kind for u in player.movable_units()] == [UnitKind.BASIC]
        assert player.can_afford("move", UnitKind.BASIC)
        assert not player.can_afford("spawn", UnitKind.SCOUT)

    def test_end_turn(self, offense_game, open_board):
        player = OffensePlayer(offense_game(open_board, gold=10))
        player.engine.spawn_unit(UnitKind.BASIC)
        player.select_unit(UnitKind.BASIC)
        assert player.end_turn().success
        assert player.selected is None
        assert player.engine.phase is GamePhase.DEFENSE
