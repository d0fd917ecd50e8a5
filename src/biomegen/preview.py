"""Palette rendering of tile grids for previews and debugging."""

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .terrain.grid import TileGrid
from .tile_types import TILE_COLORS, TileType

logger = logging.getLogger(__name__)

# Row i holds the RGB color of tile value i
_PALETTE = np.array([TILE_COLORS[tile] for tile in TileType], dtype=np.uint8)


def render_rgb(grid: TileGrid) -> NDArray[np.uint8]:
    """Map every tile to its palette color.

    Args:
        grid: Tile grid.

    Returns:
        Array of shape (height, width, 3).
    """
    return _PALETTE[grid.to_array()]


def render_image(grid: TileGrid, tile_size: int = 1) -> Image.Image:
    """Render a grid as a PIL image with ``tile_size`` pixels per tile.

    Raises:
        ValueError: If tile_size is not positive.
    """
    if tile_size < 1:
        raise ValueError(f"tile_size must be positive, got {tile_size}")

    img = Image.fromarray(render_rgb(grid))
    if tile_size > 1:
        img = img.resize(
            (grid.width * tile_size, grid.height * tile_size),
            resample=Image.Resampling.NEAREST,
        )
    return img


def save_preview(grid: TileGrid, path: Path, tile_size: int = 4) -> None:
    """Save a PNG preview of a grid.

    Args:
        grid: Tile grid.
        path: Output path (parent directories are created).
        tile_size: Pixels per tile.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    render_image(grid, tile_size).save(path)
    logger.info(f"Saved preview to {path}")
