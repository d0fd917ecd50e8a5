"""Transition smoothing between discordant neighboring land biomes."""

import logging

import numpy as np

from ..tile_types import TileType
from .config import BiomeRichness
from .grid import TileGrid
from .water import touches

logger = logging.getLogger(__name__)

TRANSITION_PASSES = 3

# (cell biome, any of these 8-neighbors, becomes). Later rules win.
Rule = tuple[TileType, frozenset[TileType], TileType]

RICH_RULES: tuple[Rule, ...] = (
    (TileType.GRASS, frozenset({TileType.DESERT}), TileType.PLAINS),
    (TileType.DESERT, frozenset({TileType.GRASS}), TileType.PLAINS),
    (TileType.GRASS, frozenset({TileType.TUNDRA}), TileType.TAIGA),
    (TileType.TUNDRA, frozenset({TileType.GRASS}), TileType.TAIGA),
    (TileType.GRASS, frozenset({TileType.SNOW}), TileType.TAIGA),
    (TileType.SNOW, frozenset({TileType.GRASS}), TileType.TUNDRA),
    (TileType.SNOW, frozenset({TileType.TAIGA}), TileType.TUNDRA),
    (TileType.SNOW, frozenset({TileType.PLAINS}), TileType.TUNDRA),
    (
        TileType.DESERT,
        frozenset({TileType.TAIGA, TileType.TUNDRA, TileType.SNOW}),
        TileType.PLAINS,
    ),
    (TileType.PLAINS, frozenset({TileType.TUNDRA, TileType.SNOW}), TileType.GRASS),
    (TileType.TAIGA, frozenset({TileType.DESERT}), TileType.GRASS),
)

BASIC_RULES: tuple[Rule, ...] = (
    (TileType.GRASS, frozenset({TileType.DESERT}), TileType.PLAINS),
    (TileType.DESERT, frozenset({TileType.GRASS}), TileType.PLAINS),
    (TileType.DESERT, frozenset({TileType.SNOW}), TileType.PLAINS),
    (TileType.SNOW, frozenset({TileType.GRASS, TileType.DESERT}), TileType.PLAINS),
    (TileType.PLAINS, frozenset({TileType.SNOW}), TileType.GRASS),
)

TRANSITION_RULES: dict[BiomeRichness, tuple[Rule, ...]] = {
    BiomeRichness.RICH: RICH_RULES,
    BiomeRichness.BASIC: BASIC_RULES,
}


def apply_transitions(grid: TileGrid, rules: tuple[Rule, ...]) -> TileGrid:
    """Run one smoothing pass.

    Every rule reads the grid as it was at the start of the pass and writes
    a separate output buffer, so rewrites never cascade within a pass.
    Water cells are never sources, so they are left untouched.

    Args:
        grid: Input grid (not modified).
        rules: Ordered rule table.

    Returns:
        New grid after one pass.
    """
    original = grid.to_array()
    result = original.copy()

    for source, neighbors, target in rules:
        neighbor_values = np.array([int(t) for t in neighbors], dtype=np.uint8)
        hit = (original == int(source)) & touches(np.isin(original, neighbor_values))
        result[hit] = int(target)

    return TileGrid(result)


def smooth_transitions(
    grid: TileGrid,
    richness: BiomeRichness,
    passes: int = TRANSITION_PASSES,
) -> TileGrid:
    """Relax discordant biome adjacencies over several passes.

    Args:
        grid: Grid after water zoning.
        richness: Selects the rule table.
        passes: Number of passes.

    Returns:
        New smoothed grid.
    """
    rules = TRANSITION_RULES[richness]
    for index in range(passes):
        smoothed = apply_transitions(grid, rules)
        if logger.isEnabledFor(logging.DEBUG):
            changed = np.count_nonzero(smoothed.to_array() != grid.to_array())
            logger.debug(f"Transition pass {index + 1}: {changed} cells changed")
        grid = smoothed
    return grid
