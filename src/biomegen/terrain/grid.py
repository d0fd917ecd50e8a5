"""Tile grid container handed to renderers and UIs."""

from collections.abc import Iterator

import numpy as np
from numpy.typing import NDArray

from ..tile_types import TILE_NAMES, TileType, deep_water_mask, land_mask

_VALID_VALUES = np.array(sorted(int(t) for t in TileType), dtype=np.uint8)


class TileGrid:
    """H x W grid of tile categories.

    The grid owns its buffer. Stages that need to modify a grid take a
    ``copy()``; ``to_array()`` and ``land_mask()`` never expose the
    internal buffer.
    """

    def __init__(self, tiles: NDArray[np.uint8]):
        if tiles.ndim != 2:
            raise ValueError(f"Tile grid must be 2D, got shape {tiles.shape}")
        if not np.isin(tiles, _VALID_VALUES).all():
            raise ValueError("Tile grid contains unknown tile values")
        self._tiles = tiles.astype(np.uint8, copy=True)

    @classmethod
    def filled(cls, width: int, height: int, tile: TileType = TileType.OCEAN) -> "TileGrid":
        """Grid of the given size with every cell set to ``tile``."""
        return cls(np.full((height, width), int(tile), dtype=np.uint8))

    @property
    def width(self) -> int:
        return self._tiles.shape[1]

    @property
    def height(self) -> int:
        return self._tiles.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self._tiles.shape

    def tile_at(self, x: int, y: int) -> TileType:
        """Get the category of the cell at column x, row y.

        Raises:
            IndexError: If (x, y) is outside the grid.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return TileType(int(self._tiles[y, x]))

    def rows(self) -> Iterator[list[TileType]]:
        """Iterate over rows as lists of TileType, top to bottom."""
        for row in self._tiles:
            yield [TileType(int(value)) for value in row]

    def count(self, tile: TileType) -> int:
        return int(np.count_nonzero(self._tiles == int(tile)))

    def land_mask(self) -> NDArray[np.bool_]:
        return land_mask(self._tiles)

    def deep_water_mask(self) -> NDArray[np.bool_]:
        return deep_water_mask(self._tiles)

    def to_array(self) -> NDArray[np.uint8]:
        """Copy of the underlying uint8 array."""
        return self._tiles.copy()

    def copy(self) -> "TileGrid":
        return TileGrid(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._tiles, other._tiles))

    def __repr__(self) -> str:
        return f"TileGrid(width={self.width}, height={self.height})"


def tile_stats(grid: TileGrid) -> dict[str, float]:
    """Percentage of cells per category, for categories present on the grid.

    Args:
        grid: Tile grid.

    Returns:
        Mapping of tile name to percentage of all cells, rounded to 0.1.
    """
    total = grid.width * grid.height
    stats: dict[str, float] = {}
    for tile in TileType:
        count = grid.count(tile)
        if count:
            stats[TILE_NAMES[tile]] = round(count / total * 100, 1)
    return stats
