"""Post-generation validation of tile grids."""

import logging

import numpy as np

from ..tile_types import TileType
from .config import GenerationConfig
from .grid import TileGrid
from .water import touches

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of map validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_tiles(
    grid: TileGrid,
    config: GenerationConfig | None = None,
) -> ValidationResult:
    """Validate a generated grid against the map invariants.

    Args:
        grid: Generated tile grid.
        config: Configuration it was generated from, for dimension checks.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    # Check 1: Dimensions match the request
    if config is not None:
        _check_dimensions(grid, config, result)

    # Check 2: Deep water never touches land
    _check_shallow_buffer(grid, result)

    # Check 3: There is some land at all
    _check_land_present(grid, result)

    # Log results
    if result.passed:
        logger.info("Map validation passed")
    else:
        logger.warning(f"Map validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_dimensions(
    grid: TileGrid,
    config: GenerationConfig,
    result: ValidationResult,
) -> None:
    """Check grid size equals the configured size."""
    if (grid.width, grid.height) != (config.width, config.height):
        result.add_error(
            f"Grid is {grid.width}x{grid.height}, "
            f"expected {config.width}x{config.height}"
        )


def _check_shallow_buffer(grid: TileGrid, result: ValidationResult) -> None:
    """Check that no sea/ocean cell is 8-adjacent to land."""
    land = grid.land_mask()
    deep = grid.deep_water_mask()

    exposed_water = int(np.count_nonzero(deep & touches(land)))
    exposed_land = int(np.count_nonzero(land & touches(deep)))

    if exposed_water > 0:
        result.add_error(f"{exposed_water} deep water cells border land")
    if exposed_land > 0:
        result.add_error(f"{exposed_land} land cells border deep water")


def _check_land_present(grid: TileGrid, result: ValidationResult) -> None:
    """Warn when the map has no land."""
    if not grid.land_mask().any():
        ocean_pct = grid.count(TileType.OCEAN) / (grid.width * grid.height)
        result.add_warning(f"No land generated ({ocean_pct:.0%} ocean)")
