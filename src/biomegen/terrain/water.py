"""Water zoning: distance-from-land depth bands and shallow border repair."""

import logging
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..exceptions import InvariantViolationError
from ..tile_types import TileType, deep_water_mask, land_mask
from .grid import TileGrid

logger = logging.getLogger(__name__)

# 3x3 kernel for counting neighbors, 8-connected, exclude center
NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)

SHALLOW_DEPTH = 1


def touches(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Cells with at least one 8-neighbor set in ``mask``.

    Args:
        mask: Boolean mask.

    Returns:
        Boolean mask of cells adjacent to the input mask.
    """
    neighbor_count = ndimage.convolve(
        mask.astype(np.int32), NEIGHBOR_KERNEL, mode="constant", cval=0
    )
    return neighbor_count > 0


def compute_distance_to_land(land: NDArray[np.bool_]) -> NDArray[np.float64]:
    """Compute 8-directional step distance from each cell to the nearest land.

    Diagonal steps count as 1, which makes this the multi-source
    breadth-first distance seeded from every land cell.

    Args:
        land: Boolean mask where True = land.

    Returns:
        Distance field (0 on land). Infinite everywhere when there is no land.
    """
    if not land.any():
        return np.full(land.shape, np.inf)

    distance = ndimage.distance_transform_cdt(~land, metric="chessboard")
    return distance.astype(np.float64)


def iteration_cap(shape: tuple[int, int]) -> int:
    """Maximum sweeps a fixpoint pass may take: the grid perimeter."""
    height, width = shape
    return 2 * (width + height)


def run_fixpoint(
    tiles: NDArray[np.uint8],
    sweep: Callable[[NDArray[np.uint8]], int],
    label: str,
    max_iterations: int | None = None,
) -> int:
    """Repeat an in-place sweep until it reports no changes.

    Args:
        tiles: Tile array modified in place by ``sweep``.
        sweep: Function applying one full-grid pass, returning cells changed.
        label: Name of the pass for logs and errors.
        max_iterations: Sweep cap (default: grid perimeter).

    Returns:
        Number of sweeps run, including the final no-change sweep.

    Raises:
        InvariantViolationError: If the cap is reached before settling.
    """
    cap = iteration_cap(tiles.shape) if max_iterations is None else max_iterations

    for iteration in range(1, cap + 1):
        changed = sweep(tiles)
        logger.debug(f"{label}: sweep {iteration} changed {changed} cells")
        if changed == 0:
            return iteration

    raise InvariantViolationError(
        f"{label} did not settle within {cap} sweeps on a "
        f"{tiles.shape[1]}x{tiles.shape[0]} grid"
    )


def _demote_deep_water_near_land(tiles: NDArray[np.uint8]) -> int:
    """Turn every sea/ocean cell next to land into shallow water."""
    exposed = deep_water_mask(tiles) & touches(land_mask(tiles))
    tiles[exposed] = int(TileType.SHALLOW)
    return int(np.count_nonzero(exposed))


def apply_water_zones(
    grid: TileGrid,
    sea_depth: int,
    max_iterations: int | None = None,
) -> TileGrid:
    """Reclassify water cells into shallow, sea and ocean bands.

    Water within 1 step of land becomes shallow, within ``sea_depth`` steps
    sea, and everything further ocean. A repair pass then demotes any deep
    water still touching land.

    Args:
        grid: Grid with land biomes and ocean placeholders.
        sea_depth: Largest distance from land classified as sea.
        max_iterations: Repair sweep cap (default: grid perimeter).

    Returns:
        New grid with water zones assigned.
    """
    tiles = grid.to_array()
    land = land_mask(tiles)
    distance = compute_distance_to_land(land)

    water = ~land
    tiles[water & (distance <= SHALLOW_DEPTH)] = int(TileType.SHALLOW)
    tiles[water & (distance > SHALLOW_DEPTH) & (distance <= sea_depth)] = int(TileType.SEA)
    tiles[water & (distance > sea_depth)] = int(TileType.OCEAN)

    sweeps = run_fixpoint(
        tiles, _demote_deep_water_near_land, "Water zone repair", max_iterations
    )
    logger.debug(f"Water zone repair settled after {sweeps} sweeps")

    return TileGrid(tiles)


def enforce_shallow_border(
    grid: TileGrid,
    max_iterations: int | None = None,
) -> TileGrid:
    """Guarantee that only shallow water borders land.

    Deep water next to land is demoted until a sweep changes nothing (the
    land-side rule, demoting deep neighbors of land, selects the same cells
    in an 8-neighborhood). A last sweep then demotes any sea cell still
    touching land.

    Args:
        grid: Grid after transition smoothing.
        max_iterations: Sweep cap (default: grid perimeter).

    Returns:
        New grid satisfying the land/deep-water non-adjacency invariant.
    """
    tiles = grid.to_array()

    sweeps = run_fixpoint(
        tiles, _demote_deep_water_near_land, "Shallow border", max_iterations
    )
    logger.debug(f"Shallow border settled after {sweeps} sweeps")

    stray_sea = (tiles == int(TileType.SEA)) & touches(land_mask(tiles))
    tiles[stray_sea] = int(TileType.SHALLOW)

    return TileGrid(tiles)
