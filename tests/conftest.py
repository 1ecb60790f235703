"""
Dungeon Rush - Test Configuration and Fixtures

Common fixtures and board layouts for all test modules.
"""

from typing import Callable, Sequence

import pytest

from dungeon_rush.engine.base import GameConfig, GamePhase, TileKind
from dungeon_rush.engine.game import DungeonRushEngine

B = TileKind.BLANK


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def config() -> GameConfig:
    """Default rules with a fixed seed."""
    return GameConfig(seed=12345)


@pytest.fixture
def engine(config: GameConfig) -> DungeonRushEngine:
    """Fresh game at the start of the first Defense turn."""
    return DungeonRushEngine(config)


# =============================================================================
# SCRIPTED BOARDS
# =============================================================================

def build_offense_game(
    columns: Sequence[Sequence[TileKind]],
    gold: int | None = None,
    **config_overrides,
) -> DungeonRushEngine:
    """
    Play through the opening Defense turns with a scripted board.

    Columns are given left to right, each listing its tiles by row. They
    are laid straight onto the board, since placements made through the
    game must match its random draws. The two opening Defense turns still
    draw from the supply, so the game is left at the start of the first
    Offense phase.

    Args:
        columns: Tile kinds per column
        gold: Overwrite the Offense's gold after the phase switch
        **config_overrides: Extra GameConfig fields
    """
    total_paths = len(columns[0])
    config = GameConfig(total_paths=total_paths, seed=99, **config_overrides)
    game = DungeonRushEngine(config)

    for column in columns:
        assert game.board.add_column(list(column))

    for _ in range(2):
        assert game.start_defense_phase().success
        game.end_defense_phase()

    assert game.phase is GamePhase.OFFENSE
    if gold is not None:
        game.gold = gold
    return game


@pytest.fixture
def offense_game() -> Callable[..., DungeonRushEngine]:
    """Factory fixture wrapping build_offense_game."""
    return build_offense_game


@pytest.fixture
def open_board() -> list[list[TileKind]]:
    """Two columns of blank tiles, four paths high."""
    return [[B, B, B, B], [B, B, B, B]]
