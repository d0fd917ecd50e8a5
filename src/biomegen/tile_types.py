"""Tile categories and their properties."""

from enum import IntEnum

import numpy as np
from numpy.typing import NDArray


class TileType(IntEnum):
    """Tile categories, stored as uint8 in tile grids."""

    OCEAN = 0
    SEA = 1
    SHALLOW = 2
    GRASS = 3
    PLAINS = 4
    DESERT = 5
    TAIGA = 6
    TUNDRA = 7
    SNOW = 8

    @property
    def is_land(self) -> bool:
        """Whether this category is a land biome."""
        return self in LAND_TYPES

    @property
    def is_deep_water(self) -> bool:
        """Whether this category is sea or ocean."""
        return self in DEEP_WATER_TYPES

    @property
    def display_name(self) -> str:
        return TILE_NAMES[self]


# Define sets for O(1) lookup
LAND_TYPES = frozenset({
    TileType.GRASS,
    TileType.PLAINS,
    TileType.DESERT,
    TileType.TAIGA,
    TileType.TUNDRA,
    TileType.SNOW,
})

DEEP_WATER_TYPES = frozenset({
    TileType.OCEAN,
    TileType.SEA,
})

TILE_NAMES: dict[TileType, str] = {
    TileType.OCEAN: "ocean",
    TileType.SEA: "sea",
    TileType.SHALLOW: "shallow",
    TileType.GRASS: "grass",
    TileType.PLAINS: "plains",
    TileType.DESERT: "desert",
    TileType.TAIGA: "taiga",
    TileType.TUNDRA: "tundra",
    TileType.SNOW: "snow",
}

# Colors for each tile type (RGB)
TILE_COLORS: dict[TileType, tuple[int, int, int]] = {
    TileType.OCEAN: (13, 71, 161),      # Navy
    TileType.SEA: (21, 101, 192),       # Blue
    TileType.SHALLOW: (66, 165, 245),   # Light blue
    TileType.GRASS: (76, 175, 80),      # Green
    TileType.PLAINS: (192, 202, 51),    # Olive
    TileType.DESERT: (255, 183, 77),    # Sand
    TileType.TAIGA: (46, 125, 50),      # Dark green
    TileType.TUNDRA: (120, 144, 156),   # Slate
    TileType.SNOW: (232, 234, 246),     # Off-white
}

_LAND_VALUES = np.array(sorted(int(t) for t in LAND_TYPES), dtype=np.uint8)
_DEEP_WATER_VALUES = np.array(sorted(int(t) for t in DEEP_WATER_TYPES), dtype=np.uint8)


def land_mask(tiles: NDArray[np.uint8]) -> NDArray[np.bool_]:
    """Boolean mask of land cells in a raw tile array."""
    return np.isin(tiles, _LAND_VALUES)


def deep_water_mask(tiles: NDArray[np.uint8]) -> NDArray[np.bool_]:
    """Boolean mask of sea and ocean cells in a raw tile array."""
    return np.isin(tiles, _DEEP_WATER_VALUES)


def tile_from_name(name: str) -> TileType:
    """Look up a TileType by its display name.

    Raises:
        KeyError: If no tile has that name.
    """
    for tile, tile_name in TILE_NAMES.items():
        if tile_name == name:
            return tile
    raise KeyError(f"Unknown tile name: {name!r}")
