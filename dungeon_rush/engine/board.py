"""
Dungeon Rush - Board

An append-only sequence of fixed-height columns of tiles. The Defense grows
it one column per placement; nothing ever removes a column except a full
clear when a new game starts.

Coordinates: x is the column (0 is nearest the Offense spawn zone), y is the
row/path. Two virtual columns are never materialized as tiles: the spawn
zone at x == -1 and the Defense goal at any x past the last column.
"""

import logging
from typing import Iterator, Sequence

from dungeon_rush.engine.base import TileKind
from dungeon_rush.engine.tiles import Tile
from dungeon_rush.engine.validators import parse_tile_kind

logger = logging.getLogger(__name__)


class Board:
    """Grid of tiles indexed by (column, row)."""

    def __init__(self, total_paths: int) -> None:
        if total_paths < 1:
            raise ValueError(f"Board needs at least one path, got {total_paths}.")
        self.total_paths = total_paths
        self.columns: list[list[Tile]] = []

    @property
    def max_column(self) -> int:
        """Index of the last placed column (-1 on an empty board)."""
        return len(self.columns) - 1

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def height(self) -> int:
        return self.total_paths

    def dimensions(self) -> tuple[int, int]:
        """(width, height) of the placed area."""
        return self.width, self.height

    def add_column(self, kinds: Sequence[TileKind | str]) -> bool:
        """
        Append a column of tiles, one kind per row.

        Args:
            kinds: Tile kinds ordered by row

        Returns:
            True if the column was added, False if the length was wrong
            (in which case the board is unchanged)
        """
        if len(kinds) != self.total_paths:
            logger.warning("Expected %d tiles for a column, got %d", self.total_paths, len(kinds))
            return False

        parsed = [parse_tile_kind(kind) for kind in kinds]
        column_index = self.max_column + 1
        self.columns.append([Tile(kind, column_index, row) for row, kind in enumerate(parsed)])
        return True

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x <= self.max_column and 0 <= y < self.total_paths

    def is_offense_spawn_zone(self, x: int) -> bool:
        return x == -1

    def is_defense_goal(self, x: int) -> bool:
        return x > self.max_column

    def get_tile(self, x: int, y: int) -> Tile | None:
        if not self.is_valid_position(x, y):
            return None
        return self.columns[x][y]

    def reveal_tile(self, x: int, y: int) -> bool:
        """Flip a tile face-up. Returns False if there is no tile there."""
        tile = self.get_tile(x, y)
        if tile is None:
            return False
        tile.reveal()
        return True

    def set_occupied(self, x: int, y: int, occupied: bool) -> None:
        tile = self.get_tile(x, y)
        if tile is not None:
            tile.occupied = occupied

    def hide_revealed_tiles(self) -> None:
        """Flip every tile face-down except occupied tiles and collected treasure."""
        for tile in self:
            tile.hide()

    def reveal_all(self) -> None:
        for tile in self:
            tile.reveal()

    def get_column(self, x: int) -> list[Tile]:
        if not 0 <= x <= self.max_column:
            return []
        return list(self.columns[x])

    def get_row(self, y: int) -> list[Tile]:
        if not 0 <= y < self.total_paths:
            return []
        return [column[y] for column in self.columns]

    def all_tiles(self) -> list[Tile]:
        return list(self)

    def clear(self) -> None:
        self.columns = []

    def __iter__(self) -> Iterator[Tile]:
        for column in self.columns:
            yield from column

    def __len__(self) -> int:
        return len(self.columns) * self.total_paths
