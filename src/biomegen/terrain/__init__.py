"""Procedural biome map generation package.

This package implements the seeded generation pipeline: value noise,
land-mass shaping, climate, biome classification, water zoning, transition
smoothing and shallow border enforcement.
"""

from .config import BiomeRichness, BiomeWeights, GenerationConfig, LandMassType
from .generator import GenerationResult, generate_map, generate_tiles
from .grid import TileGrid, tile_stats
from .validation import ValidationResult, validate_tiles

__all__ = [
    "BiomeRichness",
    "BiomeWeights",
    "GenerationConfig",
    "GenerationResult",
    "LandMassType",
    "TileGrid",
    "ValidationResult",
    "generate_map",
    "generate_tiles",
    "tile_stats",
    "validate_tiles",
]
