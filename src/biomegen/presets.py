"""Named configuration presets."""

import random
from typing import Any

from .exceptions import UnknownPresetError
from .terrain.config import BiomeRichness, GenerationConfig, LandMassType
from .terrain.generator import RANDOM_SEED_LIMIT

# Every preset sets all shaping fields; width, height and seed are left alone
MAP_PRESETS: dict[str, dict[str, Any]] = {
    "default": {
        "land_mass": LandMassType.FRACTAL,
        "ocean_ratio": 0.35,
        "noise_scale": 12.0,
        "noise_octaves": 5,
        "island_count": 3,
        "falloff": 0.55,
        "temperature_bias": 0.0,
        "moisture_bias": 0.0,
        "biome_richness": BiomeRichness.RICH,
        "biome_weights": {
            "snow": 10, "tundra": 10, "taiga": 10,
            "grass": 40, "plains": 15, "desert": 15,
        },
    },
    "pangaea": {
        "land_mass": LandMassType.PANGAEA,
        "ocean_ratio": 0.30,
        "noise_scale": 14.0,
        "noise_octaves": 5,
        "island_count": 1,
        "falloff": 0.55,
        "temperature_bias": 0.0,
        "moisture_bias": 0.0,
        "biome_richness": BiomeRichness.RICH,
        "biome_weights": {
            "snow": 8, "tundra": 8, "taiga": 12,
            "grass": 40, "plains": 17, "desert": 15,
        },
    },
    "archipelago": {
        "land_mass": LandMassType.ARCHIPELAGO,
        "ocean_ratio": 0.50,
        "noise_scale": 6.0,
        "noise_octaves": 6,
        "island_count": 8,
        "falloff": 0.55,
        "temperature_bias": 0.2,
        "moisture_bias": 0.3,
        "biome_richness": BiomeRichness.BASIC,
        "biome_weights": {
            "snow": 2, "tundra": 0, "taiga": 0,
            "grass": 55, "plains": 28, "desert": 15,
        },
    },
    "desert_world": {
        "land_mass": LandMassType.CONTINENTS,
        "ocean_ratio": 0.20,
        "noise_scale": 12.0,
        "noise_octaves": 4,
        "island_count": 2,
        "falloff": 0.55,
        "temperature_bias": 0.6,
        "moisture_bias": -0.6,
        "biome_richness": BiomeRichness.BASIC,
        "biome_weights": {
            "snow": 0, "tundra": 0, "taiga": 0,
            "grass": 10, "plains": 25, "desert": 65,
        },
    },
    "ice_age": {
        "land_mass": LandMassType.CONTINENTS,
        "ocean_ratio": 0.35,
        "noise_scale": 12.0,
        "noise_octaves": 5,
        "island_count": 3,
        "falloff": 0.55,
        "temperature_bias": -0.6,
        "moisture_bias": 0.1,
        "biome_richness": BiomeRichness.RICH,
        "biome_weights": {
            "snow": 35, "tundra": 25, "taiga": 20,
            "grass": 15, "plains": 5, "desert": 0,
        },
    },
    "lakes": {
        "land_mass": LandMassType.LAKES,
        "ocean_ratio": 0.25,
        "noise_scale": 10.0,
        "noise_octaves": 5,
        "island_count": 1,
        "falloff": 0.55,
        "temperature_bias": 0.0,
        "moisture_bias": 0.2,
        "biome_richness": BiomeRichness.RICH,
        "biome_weights": {
            "snow": 5, "tundra": 8, "taiga": 17,
            "grass": 45, "plains": 15, "desert": 10,
        },
    },
    "tropical": {
        "land_mass": LandMassType.ARCHIPELAGO,
        "ocean_ratio": 0.45,
        "noise_scale": 8.0,
        "noise_octaves": 5,
        "island_count": 5,
        "falloff": 0.55,
        "temperature_bias": 0.5,
        "moisture_bias": 0.5,
        "biome_richness": BiomeRichness.BASIC,
        "biome_weights": {
            "snow": 0, "tundra": 0, "taiga": 0,
            "grass": 60, "plains": 30, "desert": 10,
        },
    },
}


def default_config(width: int, height: int, seed: int | None = None) -> GenerationConfig:
    """Build the default configuration for a map size."""
    return GenerationConfig(width=width, height=height, seed=seed, **MAP_PRESETS["default"])


def apply_preset(
    config: GenerationConfig,
    name: str,
    rng: random.Random | None = None,
) -> GenerationConfig:
    """Return a copy of ``config`` with a preset's shaping fields and a new seed.

    Args:
        config: Current configuration; width and height are kept.
        name: Preset name from MAP_PRESETS.
        rng: Source for the new seed (default: module-level random).

    Returns:
        New GenerationConfig.

    Raises:
        UnknownPresetError: If the preset does not exist.
    """
    if name not in MAP_PRESETS:
        raise UnknownPresetError(
            f"Unknown preset {name!r}, expected one of: {', '.join(MAP_PRESETS)}"
        )

    seed = (rng or random).randint(0, RANDOM_SEED_LIMIT)
    fields = config.model_dump(exclude=set(MAP_PRESETS[name]))
    fields.update(MAP_PRESETS[name])
    fields["seed"] = seed
    return GenerationConfig.model_validate(fields)
