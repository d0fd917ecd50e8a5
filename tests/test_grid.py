"""Tests for the tile grid container."""

import numpy as np
import pytest

from biomegen.terrain.grid import TileGrid, tile_stats
from biomegen.tile_types import TileType


class TestTileGrid:
    """Tests for TileGrid."""

    def test_filled(self) -> None:
        """filled() builds a width x height grid of one category."""
        grid = TileGrid.filled(5, 3, TileType.SHALLOW)
        assert grid.width == 5
        assert grid.height == 3
        assert grid.shape == (3, 5)
        assert grid.count(TileType.SHALLOW) == 15

    def test_tile_at_is_column_row(self, make_grid) -> None:
        """tile_at takes x then y."""
        grid = make_grid("~g", "d*")
        assert grid.tile_at(1, 0) == TileType.GRASS
        assert grid.tile_at(0, 1) == TileType.DESERT
        assert isinstance(grid.tile_at(1, 1), TileType)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
    def test_tile_at_out_of_bounds(self, make_grid, x: int, y: int) -> None:
        """Coordinates outside the grid raise IndexError."""
        grid = make_grid("~g", "d*")
        with pytest.raises(IndexError):
            grid.tile_at(x, y)

    def test_rows(self, make_grid) -> None:
        """rows() yields top to bottom lists of TileType."""
        rows = list(make_grid("~g", "d*").rows())
        assert rows == [[TileType.OCEAN, TileType.GRASS], [TileType.DESERT, TileType.SNOW]]

    def test_owns_buffer(self) -> None:
        """Neither the source array nor to_array() aliases the grid."""
        source = np.zeros((2, 2), dtype=np.uint8)
        grid = TileGrid(source)
        source[0, 0] = int(TileType.SNOW)
        exported = grid.to_array()
        exported[1, 1] = int(TileType.SNOW)
        assert grid.count(TileType.SNOW) == 0

    def test_masks(self, make_grid) -> None:
        """Land and deep-water masks partition out shallow water."""
        grid = make_grid("~s.g")
        np.testing.assert_array_equal(grid.land_mask(), [[False, False, False, True]])
        np.testing.assert_array_equal(grid.deep_water_mask(), [[True, True, False, False]])

    def test_rejects_unknown_values(self) -> None:
        """Values outside the category set are refused."""
        with pytest.raises(ValueError, match="unknown"):
            TileGrid(np.array([[0, 9]], dtype=np.uint8))

    def test_rejects_non_2d(self) -> None:
        """Only 2D arrays make a grid."""
        with pytest.raises(ValueError, match="2D"):
            TileGrid(np.zeros(4, dtype=np.uint8))

    def test_equality(self, make_grid) -> None:
        """Grids compare by content."""
        assert make_grid("~g") == make_grid("~g")
        assert make_grid("~g") != make_grid("g~")
        assert make_grid("~g") != make_grid("~", "g")

    def test_copy_is_independent(self, make_grid) -> None:
        """copy() gives an equal but separate grid."""
        grid = make_grid("~g")
        clone = grid.copy()
        assert clone == grid
        assert clone is not grid


class TestTileStats:
    """Tests for tile_stats."""

    def test_percentages(self, make_grid) -> None:
        """Only present categories appear, as rounded percentages."""
        stats = tile_stats(make_grid("~~g", "~.."))
        assert stats == {"ocean": 50.0, "shallow": 33.3, "grass": 16.7}

    def test_sums_to_hundred(self, make_grid) -> None:
        """Percentages add up to about 100."""
        stats = tile_stats(make_grid("~sg", "pd*", "ut."))
        assert sum(stats.values()) == pytest.approx(100.0, abs=0.5)
