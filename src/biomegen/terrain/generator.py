"""Main map generation orchestration."""

import logging
import random
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError

from ..exceptions import ConfigurationError, InvariantViolationError
from ..tile_types import TILE_COLORS, TileType
from .classification import classify_biomes
from .climate import derive_moisture, derive_temperature
from .config import GenerationConfig
from .grid import TileGrid, tile_stats
from .landmass import shape_land
from .noise import value_noise
from .smoothing import smooth_transitions
from .validation import validate_tiles
from .water import apply_water_zones, enforce_shallow_border

logger = logging.getLogger(__name__)

CLIMATE_OCTAVES = 3
TEMPERATURE_SEED_OFFSET = 1111
MOISTURE_SEED_OFFSET = 2222
TEMPERATURE_SCALE_FACTOR = 1.8
MOISTURE_SCALE_FACTOR = 1.4

# Seeds drawn when none is configured
RANDOM_SEED_LIMIT = 999999


class GenerationResult:
    """Result of map generation with intermediate fields."""

    def __init__(
        self,
        tiles: TileGrid,
        config: GenerationConfig,
        elevation: NDArray[np.float64],
        temperature: NDArray[np.float64],
        moisture: NDArray[np.float64],
    ):
        self.tiles = tiles
        self.config = config
        self.elevation = elevation
        self.temperature = temperature
        self.moisture = moisture

    @property
    def seed(self) -> int:
        # Always resolved by generate_map
        assert self.config.seed is not None
        return self.config.seed

    @property
    def stats(self) -> dict[str, float]:
        """Percentage of cells per tile category."""
        return tile_stats(self.tiles)


def resolve_config(config: GenerationConfig | Mapping[str, Any]) -> GenerationConfig:
    """Validate a mapping into a GenerationConfig and fill in a missing seed.

    Args:
        config: Config model or plain mapping of config fields.

    Returns:
        Config with a concrete seed.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    if not isinstance(config, GenerationConfig):
        try:
            config = GenerationConfig.model_validate(config)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid generation config: {exc}") from exc

    if config.seed is None:
        config = config.model_copy(update={"seed": random.randint(0, RANDOM_SEED_LIMIT)})
    return config


def generate_map(config: GenerationConfig | Mapping[str, Any]) -> GenerationResult:
    """Generate a biome map from configuration.

    Args:
        config: Map generation configuration.

    Returns:
        GenerationResult with the finished tile grid.

    Raises:
        ConfigurationError: If the configuration is invalid.
        InvariantViolationError: If border repair fails to settle.
    """
    config = resolve_config(config)
    seed = config.seed
    assert seed is not None
    width, height = config.width, config.height

    logger.info(
        f"Generating map {width}x{height} with seed {seed} ({config.land_mass.value})"
    )

    # Stage A: Base noise fields
    logger.info("Stage A: Generating noise fields...")
    elevation = value_noise(
        width, height, config.noise_scale, config.noise_octaves, seed
    )
    temperature_noise = value_noise(
        width,
        height,
        config.noise_scale * TEMPERATURE_SCALE_FACTOR,
        CLIMATE_OCTAVES,
        seed + TEMPERATURE_SEED_OFFSET,
    )
    moisture_noise = value_noise(
        width,
        height,
        config.noise_scale * MOISTURE_SCALE_FACTOR,
        CLIMATE_OCTAVES,
        seed + MOISTURE_SEED_OFFSET,
    )

    # Stage B: Land shaping
    logger.info("Stage B: Shaping land masses...")
    elevation = shape_land(elevation, config, seed)

    # Stage C: Climate
    logger.info("Stage C: Deriving climate...")
    temperature = derive_temperature(temperature_noise, config.temperature_bias)
    moisture = derive_moisture(moisture_noise, config.moisture_bias)

    # Stage D: Biomes
    logger.info("Stage D: Classifying biomes...")
    tiles = classify_biomes(
        elevation,
        temperature,
        moisture,
        config.ocean_ratio,
        config.biome_weights,
        config.biome_richness,
    )

    # Stage E: Water zones
    logger.info("Stage E: Assigning water zones...")
    tiles = apply_water_zones(tiles, config.sea_depth)

    # Stage F: Transitions
    logger.info("Stage F: Smoothing biome transitions...")
    tiles = smooth_transitions(tiles, config.biome_richness)

    # Stage G: Border enforcement
    logger.info("Stage G: Enforcing shallow border...")
    tiles = enforce_shallow_border(tiles)

    validation = validate_tiles(tiles, config)
    if not validation.passed:
        raise InvariantViolationError("; ".join(validation.errors))

    _log_map_stats(tiles)

    # Debug output if enabled
    if config.debug_output_dir:
        _dump_debug_images(
            Path(config.debug_output_dir),
            elevation=elevation,
            temperature=temperature,
            moisture=moisture,
            tiles=tiles.to_array(),
        )

    return GenerationResult(
        tiles=tiles,
        config=config,
        elevation=elevation,
        temperature=temperature,
        moisture=moisture,
    )


def generate_tiles(config: GenerationConfig | Mapping[str, Any]) -> TileGrid:
    """Generate a map and return only its tile grid."""
    return generate_map(config).tiles


def _log_map_stats(tiles: TileGrid) -> None:
    """Log map generation statistics."""
    total = tiles.width * tiles.height
    logger.info(f"Map stats ({total:,} tiles):")
    for name, pct in tile_stats(tiles).items():
        logger.info(f"  {name}: {pct:.1f}%")


def _dump_debug_images(output_dir: Path, **arrays: NDArray) -> None:
    """Save intermediate fields and the tile grid as PNGs.

    Float fields are drawn over a fixed [0, 1] color range, uint8 arrays
    with the tile palette.

    Args:
        output_dir: Directory to save images.
        **arrays: Named arrays to save.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.colors import ListedColormap
    except ImportError:
        logger.warning("matplotlib not available, skipping debug images")
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    tile_cmap = ListedColormap(
        [np.array(TILE_COLORS[tile]) / 255.0 for tile in TileType]
    )
    field_cmaps = {"elevation": "terrain", "temperature": "coolwarm", "moisture": "YlGnBu"}

    for name, arr in arrays.items():
        fig, ax = plt.subplots(figsize=(8, 8 * arr.shape[0] / arr.shape[1]))

        if arr.dtype == np.uint8:
            ax.imshow(
                arr, cmap=tile_cmap, vmin=0, vmax=len(TileType) - 1,
                interpolation="nearest",
            )
        else:
            image = ax.imshow(arr, cmap=field_cmaps.get(name, "viridis"), vmin=0.0, vmax=1.0)
            fig.colorbar(image, ax=ax, shrink=0.8)

        ax.set_title(f"{name} ({arr.shape[1]}x{arr.shape[0]})")
        ax.axis("off")

        fig.savefig(output_dir / f"{name}.png", dpi=100, bbox_inches="tight")
        plt.close(fig)

    logger.info(f"Debug images for {len(arrays)} fields saved to {output_dir}")
