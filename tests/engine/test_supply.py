"""
Dungeon Rush - Tile Supply Tests
"""

import pytest

from dungeon_rush.engine.base import DEFAULT_TILE_COUNTS, TileKind
from dungeon_rush.engine.supply import TileSupply


@pytest.fixture
def supply() -> TileSupply:
    return TileSupply(DEFAULT_TILE_COUNTS, seed=12345)


class TestTileSupply:
    """Tests for building and drawing from the supply."""

    def test_initial_size(self, supply):
        assert supply.total_remaining == 36
        assert supply.total_drawn == 0
        assert supply.remaining_counts() == DEFAULT_TILE_COUNTS

    def test_draw_one(self, supply):
        tile = supply.draw()
        assert isinstance(tile, TileKind)
        assert supply.total_remaining == 35
        assert supply.draw_order() == [tile]

    def test_draw_many(self, supply):
        tiles = supply.draw_many(4)
        assert len(tiles) == 4
        assert supply.draw_order() == tiles

    def test_draw_many_short(self):
        supply = TileSupply({TileKind.BLANK: 3}, seed=1)
        assert supply.draw_many(4) == [TileKind.BLANK] * 3
        assert supply.draw() is None
        assert supply.draw_many(2) == []

    def test_conservation(self, supply):
        supply.draw_many(17)
        remaining = supply.remaining_counts()
        drawn = supply.drawn_counts()
        for kind, count in DEFAULT_TILE_COUNTS.items():
            assert remaining.get(kind, 0) + drawn.get(kind, 0) == count

    def test_can_draw(self):
        supply = TileSupply({TileKind.WALL: 5}, seed=1)
        assert supply.can_draw(4)
        supply.draw_many(2)
        assert not supply.can_draw(4)

    def test_same_seed_same_order(self):
        first = TileSupply(DEFAULT_TILE_COUNTS, seed=77).draw_many(36)
        second = TileSupply(DEFAULT_TILE_COUNTS, seed=77).draw_many(36)
        assert first == second

    def test_different_seed_different_order(self):
        first = TileSupply(DEFAULT_TILE_COUNTS, seed=77).draw_many(36)
        second = TileSupply(DEFAULT_TILE_COUNTS, seed=78).draw_many(36)
        assert first != second

    def test_reset_replays(self, supply):
        first = supply.draw_many(8)
        supply.reset()
        assert supply.total_remaining == 36
        assert supply.total_drawn == 0
        assert supply.draw_many(8) == first

    def test_zero_count_kinds_omitted(self):
        supply = TileSupply({TileKind.BLANK: 4, TileKind.WALL: 0}, seed=1)
        assert supply.remaining_counts() == {TileKind.BLANK: 4}

    def test_invalid_counts(self):
        with pytest.raises(ValueError):
            TileSupply({TileKind.BLANK: -2}, seed=1)

    def test_invalid_seed(self):
        with pytest.raises(ValueError):
            TileSupply(DEFAULT_TILE_COUNTS, seed=1.5)
