"""Shared test fixtures for map generation tests."""

from collections.abc import Callable

import numpy as np
import pytest

from biomegen.terrain.config import GenerationConfig
from biomegen.terrain.grid import TileGrid
from biomegen.tile_types import TileType

# One character per tile for compact grid literals
TILE_CHARS: dict[str, TileType] = {
    "~": TileType.OCEAN,
    "s": TileType.SEA,
    ".": TileType.SHALLOW,
    "g": TileType.GRASS,
    "p": TileType.PLAINS,
    "d": TileType.DESERT,
    "t": TileType.TAIGA,
    "u": TileType.TUNDRA,
    "*": TileType.SNOW,
}


def grid_from_rows(*rows: str) -> TileGrid:
    """Build a TileGrid from strings of tile characters, top row first."""
    values = [[int(TILE_CHARS[ch]) for ch in row] for row in rows]
    return TileGrid(np.array(values, dtype=np.uint8))


@pytest.fixture
def make_grid() -> Callable[..., TileGrid]:
    """Builder for small literal grids."""
    return grid_from_rows


@pytest.fixture
def small_config() -> GenerationConfig:
    """32x32 fractal map with a fixed seed."""
    return GenerationConfig(width=32, height=32, seed=7)


@pytest.fixture
def island_grid() -> TileGrid:
    """9x9 ocean with a single grass cell in the middle."""
    grid = np.full((9, 9), int(TileType.OCEAN), dtype=np.uint8)
    grid[4, 4] = int(TileType.GRASS)
    return TileGrid(grid)
