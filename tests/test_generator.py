"""Integration tests for the generation pipeline."""

import logging

import numpy as np
import pytest

from biomegen.exceptions import ConfigurationError
from biomegen.terrain.classification import classify_biomes
from biomegen.terrain.config import GenerationConfig, LandMassType
from biomegen.terrain.generator import (
    RANDOM_SEED_LIMIT,
    GenerationResult,
    generate_map,
    generate_tiles,
    resolve_config,
)
from biomegen.terrain.validation import validate_tiles
from biomegen.terrain.water import touches
from biomegen.tile_types import TileType


class TestGenerateMap:
    """Tests for generate_map."""

    def test_returns_result(self, small_config: GenerationConfig) -> None:
        """Result carries the grid, config and intermediate fields."""
        result = generate_map(small_config)
        assert isinstance(result, GenerationResult)
        assert result.tiles.shape == (32, 32)
        assert result.seed == 7
        for field in (result.elevation, result.temperature, result.moisture):
            assert field.shape == (32, 32)

    def test_deterministic(self, small_config: GenerationConfig) -> None:
        """Same config, same map."""
        a = generate_map(small_config)
        b = generate_map(small_config)
        assert a.tiles == b.tiles
        np.testing.assert_array_equal(a.elevation, b.elevation)

    def test_seed_changes_map(self, small_config: GenerationConfig) -> None:
        """A different seed gives a different map."""
        other = small_config.model_copy(update={"seed": 8})
        assert generate_map(small_config).tiles != generate_map(other).tiles

    def test_fields_normalized(self, small_config: GenerationConfig) -> None:
        """Intermediate fields stay within [0, 1]."""
        result = generate_map(small_config)
        for field in (result.elevation, result.temperature, result.moisture):
            assert field.min() >= 0.0
            assert field.max() <= 1.0

    @pytest.mark.parametrize("land_mass", list(LandMassType))
    def test_invariant_for_every_land_mass(self, land_mass: LandMassType) -> None:
        """No deep water ever touches land, whatever the shaping variant."""
        config = GenerationConfig(width=24, height=24, seed=11, land_mass=land_mass)
        result = generate_map(config)
        assert validate_tiles(result.tiles, config).passed

    def test_full_ocean(self) -> None:
        """Ocean ratio 1.0 floods the whole map."""
        config = GenerationConfig(width=8, height=8, seed=1, ocean_ratio=1.0)
        tiles = generate_map(config).tiles
        assert tiles.count(TileType.OCEAN) == 64

    def test_pangaea_centered(self) -> None:
        """A single continent leaves the corners wet and the middle dry."""
        config = GenerationConfig(
            width=16, height=16, seed=42, land_mass=LandMassType.PANGAEA, ocean_ratio=0.35
        )
        tiles = generate_map(config).tiles
        assert not tiles.tile_at(0, 0).is_land
        assert not tiles.tile_at(15, 15).is_land
        assert tiles.land_mask()[4:12, 4:12].any()

    def test_land_shoreline_becomes_shallow(self, small_config: GenerationConfig) -> None:
        """Water that touched land after classification ends up shallow."""
        result = generate_map(small_config)
        config = result.config
        raw = classify_biomes(
            result.elevation,
            result.temperature,
            result.moisture,
            config.ocean_ratio,
            config.biome_weights,
            config.biome_richness,
        )
        raw_land = raw.land_mask()
        shore = ~raw_land & touches(raw_land)
        assert shore.any()
        final = result.tiles.to_array()
        assert np.all(final[shore] == int(TileType.SHALLOW))
        np.testing.assert_array_equal(result.tiles.land_mask(), raw_land)

    def test_missing_seed_is_recorded(self) -> None:
        """A random seed is drawn and reported back."""
        result = generate_map(GenerationConfig(width=8, height=8))
        assert 0 <= result.seed <= RANDOM_SEED_LIMIT
        again = generate_map(result.config)
        assert again.tiles == result.tiles

    def test_stats_sum_to_hundred(self, small_config: GenerationConfig) -> None:
        """Tile statistics cover the whole map."""
        stats = generate_map(small_config).stats
        assert sum(stats.values()) == pytest.approx(100.0, abs=0.5)

    def test_accepts_mapping(self) -> None:
        """Plain dicts are validated into a config."""
        result = generate_map({"width": 12, "height": 10, "seed": 3})
        assert result.tiles.shape == (10, 12)

    @pytest.mark.parametrize(
        "fields",
        [
            {"width": 0, "height": 8},
            {"width": 8, "height": 8, "ocean_ratio": 1.5},
            {"width": 8, "height": 8, "noise_scale": 0},
            {"width": 8, "height": 8, "land_mass": "pancake"},
        ],
    )
    def test_invalid_config(self, fields: dict) -> None:
        """Invalid fields raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            generate_map(fields)

    def test_logs_stages(self, small_config: GenerationConfig, caplog) -> None:
        """Each pipeline stage is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="biomegen"):
            generate_map(small_config)
        assert "Stage A" in caplog.text
        assert "Stage G" in caplog.text

    def test_debug_images(self, tmp_path, small_config: GenerationConfig) -> None:
        """Intermediate fields are dumped when a debug directory is set."""
        pytest.importorskip("matplotlib")
        config = small_config.model_copy(update={"debug_output_dir": str(tmp_path / "debug")})
        generate_map(config)
        for name in ("elevation", "temperature", "moisture", "tiles"):
            assert (tmp_path / "debug" / f"{name}.png").exists()


class TestHelpers:
    """Tests for resolve_config and generate_tiles."""

    def test_resolve_keeps_explicit_seed(self, small_config: GenerationConfig) -> None:
        """An explicit seed passes through unchanged."""
        assert resolve_config(small_config).seed == 7

    def test_resolve_does_not_mutate(self) -> None:
        """Filling the seed returns a new config."""
        config = GenerationConfig(width=8, height=8)
        resolved = resolve_config(config)
        assert config.seed is None
        assert resolved.seed is not None

    def test_generate_tiles(self, small_config: GenerationConfig) -> None:
        """generate_tiles returns just the grid."""
        assert generate_tiles(small_config) == generate_map(small_config).tiles
