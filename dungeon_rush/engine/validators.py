"""
Dungeon Rush - Input Validation Utilities

Provides validation functions for engine inputs that come from configuration
or collaborators. All validators either return normalized data or raise
descriptive ValueError exceptions. Rule violations during play are not
handled here; those are reported through ActionResult.
"""

from typing import Any, Mapping, Sequence

from dungeon_rush.engine.base import TileKind, UnitCosts, UnitKind


def parse_tile_kind(value: TileKind | str) -> TileKind:
    """
    Convert a tile kind name to TileKind.

    Args:
        value: TileKind or its string value (e.g. "spike_trap")

    Returns:
        The matching TileKind

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(value, TileKind):
        return value
    try:
        return TileKind(value)
    except ValueError:
        raise ValueError(f"Unknown tile kind {value!r}.") from None


def parse_unit_kind(value: UnitKind | str) -> UnitKind:
    """
    Convert a unit kind name to UnitKind.

    Raises:
        ValueError: If the name is unknown
    """
    if isinstance(value, UnitKind):
        return value
    try:
        return UnitKind(value)
    except ValueError:
        raise ValueError(f"Unknown unit kind {value!r}.") from None


def validate_tile_counts(counts: Mapping[Any, int]) -> dict[TileKind, int]:
    """
    Validate and normalize a tile supply composition.

    Args:
        counts: Mapping of tile kind (enum or name) to number of copies

    Returns:
        Dict keyed by TileKind

    Raises:
        ValueError: If a kind is unknown or a count is not a non-negative int
    """
    normalized: dict[TileKind, int] = {}
    for key, count in counts.items():
        kind = parse_tile_kind(key)
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValueError(
                f"Tile count for {kind.value} must be an integer, got {type(count).__name__}."
            )
        if count < 0:
            raise ValueError(f"Tile count for {kind.value} cannot be negative, got {count}.")
        normalized[kind] = count
    return normalized


def validate_unit_costs(costs: Mapping[Any, Any]) -> dict[UnitKind, UnitCosts]:
    """
    Validate and normalize per-unit costs.

    Args:
        costs: Mapping of unit kind to UnitCosts or {"summon": n, "move": m}

    Returns:
        Dict keyed by UnitKind

    Raises:
        ValueError: If a kind is unknown or a cost is not a non-negative int
    """
    normalized: dict[UnitKind, UnitCosts] = {}
    for key, value in costs.items():
        kind = parse_unit_kind(key)
        if isinstance(value, Mapping):
            value = UnitCosts(summon=value["summon"], move=value["move"])
        for cost in (value.summon, value.move):
            if not isinstance(cost, int) or isinstance(cost, bool):
                raise ValueError(
                    f"Costs for {kind.value} must be integers, got {type(cost).__name__}."
                )
        if value.summon < 0 or value.move < 0:
            raise ValueError(f"Costs for {kind.value} cannot be negative.")
        normalized[kind] = value
    return normalized


def validate_column(kinds: Sequence[TileKind | str], total_paths: int) -> tuple[TileKind, ...]:
    """
    Validate an ordered column of tile kinds (one per row).

    Args:
        kinds: Tile kinds in row order
        total_paths: Required column height

    Returns:
        Normalized tuple of TileKind

    Raises:
        ValueError: If the length is wrong or a kind is unknown
    """
    if len(kinds) != total_paths:
        raise ValueError(f"Expected {total_paths} tiles, got {len(kinds)}.")
    return tuple(parse_tile_kind(kind) for kind in kinds)


def validate_seed(seed: int) -> int:
    """
    Validate a supply shuffle seed.

    Raises:
        ValueError: If the seed is not an integer
    """
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise ValueError(f"Seed must be an integer, got {type(seed).__name__}.")
    return seed
