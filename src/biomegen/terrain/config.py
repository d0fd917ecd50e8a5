"""Map generation configuration models."""

from enum import Enum

from pydantic import BaseModel, Field

from ..tile_types import TileType


class LandMassType(str, Enum):
    """Macro-shape strategy applied to the elevation field."""

    PANGAEA = "pangaea"
    CONTINENTS = "continents"
    ARCHIPELAGO = "archipelago"
    LAKES = "lakes"
    FRACTAL = "fractal"


class BiomeRichness(str, Enum):
    """How many land biomes the classifier and smoother work with."""

    BASIC = "basic"
    RICH = "rich"


# Land biomes from coldest to hottest
BIOME_ORDER: tuple[TileType, ...] = (
    TileType.SNOW,
    TileType.TUNDRA,
    TileType.TAIGA,
    TileType.GRASS,
    TileType.PLAINS,
    TileType.DESERT,
)

BASIC_BIOMES = frozenset({
    TileType.SNOW,
    TileType.GRASS,
    TileType.PLAINS,
    TileType.DESERT,
})


class BiomeWeights(BaseModel):
    """Relative share of land temperature bands per biome."""

    snow: float = Field(default=10.0, ge=0.0, description="Snow share")
    tundra: float = Field(default=10.0, ge=0.0, description="Tundra share")
    taiga: float = Field(default=10.0, ge=0.0, description="Taiga share")
    grass: float = Field(default=40.0, ge=0.0, description="Grass share")
    plains: float = Field(default=15.0, ge=0.0, description="Plains share")
    desert: float = Field(default=15.0, ge=0.0, description="Desert share")

    def active(self, richness: BiomeRichness) -> list[tuple[TileType, float]]:
        """Return (biome, weight) pairs in cold-to-hot order.

        Basic richness drops taiga and tundra regardless of their weight.
        """
        pairs = []
        for biome in BIOME_ORDER:
            if richness == BiomeRichness.BASIC and biome not in BASIC_BIOMES:
                continue
            pairs.append((biome, getattr(self, biome.display_name)))
        return pairs


class GenerationConfig(BaseModel):
    """Complete map generation configuration."""

    width: int = Field(default=64, gt=0, description="Map width in tiles")
    height: int = Field(default=64, gt=0, description="Map height in tiles")
    seed: int | None = Field(
        default=None, description="Random seed (None = pick one per generation)"
    )

    land_mass: LandMassType = Field(
        default=LandMassType.FRACTAL, description="Land-mass shaping variant"
    )
    ocean_ratio: float = Field(
        default=0.35, ge=0.0, le=1.0, description="Elevation below this is water"
    )
    noise_scale: float = Field(
        default=12.0, gt=0.0, description="Feature size of the base noise"
    )
    noise_octaves: int = Field(default=5, ge=1, description="Octaves of value noise")
    island_count: int = Field(
        default=3, ge=1, description="Number of centers for multi-center variants"
    )
    falloff: float = Field(
        default=0.55, ge=0.0, description="Strength of the generic radial falloff"
    )

    temperature_bias: float = Field(
        default=0.0, ge=-1.0, le=1.0, description="Global temperature shift"
    )
    moisture_bias: float = Field(
        default=0.0, ge=-1.0, le=1.0, description="Global moisture shift"
    )

    biome_richness: BiomeRichness = Field(
        default=BiomeRichness.RICH, description="Basic (4) or rich (6) land biomes"
    )
    biome_weights: BiomeWeights = Field(default_factory=BiomeWeights)

    # Debug options
    debug_output_dir: str | None = Field(
        default=None, description="Directory for debug images (None = disabled)"
    )

    @property
    def sea_depth(self) -> int:
        """Largest distance from land still classified as sea."""
        return 4 if self.biome_richness == BiomeRichness.RICH else 3
