"""Deterministic biome-labelled tile maps from a seed and shaping parameters."""

from .config import find_config, list_configs, load_config
from .exceptions import (
    BiomegenError,
    ConfigurationError,
    InvariantViolationError,
    UnknownPresetError,
)
from .presets import MAP_PRESETS, apply_preset, default_config
from .preview import render_image, render_rgb, save_preview
from .terrain import (
    BiomeRichness,
    BiomeWeights,
    GenerationConfig,
    GenerationResult,
    LandMassType,
    TileGrid,
    ValidationResult,
    generate_map,
    generate_tiles,
    tile_stats,
    validate_tiles,
)
from .tile_types import TILE_COLORS, TILE_NAMES, TileType

__all__ = [
    # Tiles
    "TileType",
    "TILE_NAMES",
    "TILE_COLORS",
    # Generation
    "GenerationConfig",
    "GenerationResult",
    "BiomeWeights",
    "BiomeRichness",
    "LandMassType",
    "TileGrid",
    "generate_map",
    "generate_tiles",
    "tile_stats",
    # Validation
    "ValidationResult",
    "validate_tiles",
    # Presets and config files
    "MAP_PRESETS",
    "apply_preset",
    "default_config",
    "load_config",
    "find_config",
    "list_configs",
    # Preview
    "render_rgb",
    "render_image",
    "save_preview",
    # Exceptions
    "BiomegenError",
    "ConfigurationError",
    "UnknownPresetError",
    "InvariantViolationError",
]
