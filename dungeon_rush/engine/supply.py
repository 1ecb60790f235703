"""
Dungeon Rush - Tile Supply

The bag of trap tiles the Defense draws from. Built once from per-kind counts
and shuffled with a SeededRandom, then served out from the end of the
shuffled sequence. Running out is not an error here; the orchestrator turns a
short supply into the Defense win condition.
"""

import logging
from collections import Counter
from typing import Mapping

from dungeon_rush.engine.base import TileKind
from dungeon_rush.engine.rng import SeededRandom
from dungeon_rush.engine.validators import validate_seed, validate_tile_counts

logger = logging.getLogger(__name__)


class TileSupply:
    """
    Ordered, seeded draw pile of tile kinds.

    Invariant: for every kind, remaining + drawn == original count.
    """

    def __init__(self, tile_counts: Mapping[TileKind, int], seed: int) -> None:
        self.seed = validate_seed(seed)
        self.original_counts: dict[TileKind, int] = validate_tile_counts(tile_counts)
        self._rng = SeededRandom(seed)
        self._remaining: list[TileKind] = self._build()
        self._drawn: list[TileKind] = []

    def _build(self) -> list[TileKind]:
        tiles = [
            kind
            for kind, count in self.original_counts.items()
            for _ in range(count)
        ]
        return self._rng.shuffle(tiles)

    def draw(self) -> TileKind | None:
        """
        Draw a single tile.

        Returns:
            The drawn kind, or None when the supply is empty
        """
        if not self._remaining:
            return None
        tile = self._remaining.pop()
        self._drawn.append(tile)
        return tile

    def draw_many(self, count: int) -> list[TileKind]:
        """
        Draw up to ``count`` tiles, stopping early if the supply runs out.

        A result shorter than ``count`` is a valid outcome.
        """
        tiles = []
        for _ in range(count):
            tile = self.draw()
            if tile is None:
                break
            tiles.append(tile)
        logger.debug("Drew %d of %d requested tiles (%d left)", len(tiles), count, len(self._remaining))
        return tiles

    def can_draw(self, count: int) -> bool:
        return len(self._remaining) >= count

    @property
    def total_remaining(self) -> int:
        return len(self._remaining)

    @property
    def total_drawn(self) -> int:
        return len(self._drawn)

    def remaining_counts(self) -> dict[TileKind, int]:
        """Count of each kind still in the supply (kinds with zero omitted)."""
        return dict(Counter(self._remaining))

    def drawn_counts(self) -> dict[TileKind, int]:
        return dict(Counter(self._drawn))

    def draw_order(self) -> list[TileKind]:
        """Every tile drawn so far, in draw order (for replay and debugging)."""
        return list(self._drawn)

    def reset(self) -> None:
        """Rebuild and reshuffle from the original seed, forgetting all draws."""
        self._rng.reset(self.seed)
        self._remaining = self._build()
        self._drawn = []
