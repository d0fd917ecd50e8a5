"""Biome classification: ocean placeholders and weighted temperature bands."""

import logging

import numpy as np
from numpy.typing import NDArray

from ..tile_types import TileType
from .config import BiomeRichness, BiomeWeights
from .grid import TileGrid

logger = logging.getLogger(__name__)

# Biomes whose shared boundaries are resolved by moisture
MOISTURE_SENSITIVE = frozenset({
    TileType.GRASS,
    TileType.PLAINS,
    TileType.DESERT,
})

BOUNDARY_HALF_WIDTH = 0.05
MOISTURE_THRESHOLD = 0.45


def temperature_bands(
    weights: BiomeWeights,
    richness: BiomeRichness,
) -> tuple[list[TileType], NDArray[np.float64]]:
    """Partition the temperature axis proportionally to biome weights.

    Zero-weight biomes get no band.

    Args:
        weights: Configured biome shares.
        richness: Which biomes take part.

    Returns:
        Tuple of (biomes cold to hot, upper band edges). The last edge is 1.
        Both are empty when the total weight is 0.
    """
    active = [(biome, weight) for biome, weight in weights.active(richness) if weight > 0]
    if not active:
        return [], np.empty(0, dtype=np.float64)

    shares = np.array([weight for _, weight in active], dtype=np.float64)
    edges = np.cumsum(shares) / shares.sum()
    edges[-1] = 1.0
    return [biome for biome, _ in active], edges


def classify_biomes(
    elevation: NDArray[np.float64],
    temperature: NDArray[np.float64],
    moisture: NDArray[np.float64],
    ocean_ratio: float,
    weights: BiomeWeights,
    richness: BiomeRichness,
) -> TileGrid:
    """Classify each cell into ocean or a land biome.

    Cells below ``ocean_ratio`` stay ocean (all cells when it is 1.0); water
    depth is resolved later by water zoning. Land cells take the biome of
    their temperature band. Near a boundary between two moisture-sensitive biomes, wet cells go to
    the cooler biome and dry cells to the warmer one.

    Args:
        elevation: Normalized elevation field.
        temperature: Temperature field [0, 1].
        moisture: Moisture field [0, 1].
        ocean_ratio: Elevation threshold for land.
        weights: Configured biome shares.
        richness: Which biomes take part.

    Returns:
        Initial tile grid.
    """
    tiles = np.full(elevation.shape, int(TileType.OCEAN), dtype=np.uint8)

    biomes, edges = temperature_bands(weights, richness)
    if not biomes:
        logger.info("All biome weights are zero, map stays ocean")
        return TileGrid(tiles)

    band = np.searchsorted(edges[:-1], temperature, side="right")

    for k in range(len(biomes) - 1):
        cooler, warmer = biomes[k], biomes[k + 1]
        if cooler not in MOISTURE_SENSITIVE or warmer not in MOISTURE_SENSITIVE:
            continue
        near = np.abs(temperature - edges[k]) < BOUNDARY_HALF_WIDTH
        band[near] = np.where(moisture[near] > MOISTURE_THRESHOLD, k, k + 1)

    values = np.array([int(biome) for biome in biomes], dtype=np.uint8)
    if ocean_ratio >= 1.0:
        # Whole elevation range is below sea level, including the peak at 1.0
        land = np.zeros(elevation.shape, dtype=bool)
    else:
        land = elevation >= ocean_ratio
    tiles[land] = values[band[land]]

    return TileGrid(tiles)
