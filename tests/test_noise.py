"""Tests for value noise and normalization."""

import math

import numpy as np
import pytest

from biomegen.exceptions import ConfigurationError
from biomegen.terrain.noise import normalize, smoothstep, value_noise
from biomegen.terrain.rng import Rng


def _reference_noise(width: int, height: int, scale: float, octaves: int, seed: int) -> np.ndarray:
    """Straightforward per-cell value noise drawing the full lattice."""
    rng = Rng(seed)
    out = np.zeros((height, width))

    for octave in range(octaves):
        freq = 2**octave / scale
        amp = 0.5**octave
        size = math.ceil(max(width, height) * freq) + 2
        lattice = [[rng.next() for _ in range(size)] for _ in range(size)]

        def v(gx: int, gy: int) -> float:
            return lattice[gy % size][gx % size]

        for y in range(height):
            for x in range(width):
                fx, fy = x * freq, y * freq
                ix, iy = math.floor(fx), math.floor(fy)
                tx, ty = fx - ix, fy - iy
                sx = tx * tx * (3 - 2 * tx)
                sy = ty * ty * (3 - 2 * ty)
                top = v(ix, iy) + sx * (v(ix + 1, iy) - v(ix, iy))
                bottom = v(ix, iy + 1) + sx * (v(ix + 1, iy + 1) - v(ix, iy + 1))
                out[y, x] += (top + sy * (bottom - top)) * amp

    low, high = out.min(), out.max()
    return (out - low) / ((high - low) or 1.0)


class TestValueNoise:
    """Tests for value_noise."""

    def test_shape(self) -> None:
        """Output is (height, width)."""
        field = value_noise(20, 10, 5.0, 3, 1)
        assert field.shape == (10, 20)

    def test_normalized(self) -> None:
        """Output spans exactly [0, 1]."""
        field = value_noise(32, 32, 8.0, 4, 42)
        assert field.min() == pytest.approx(0.0)
        assert field.max() == pytest.approx(1.0)

    def test_deterministic(self) -> None:
        """Same inputs produce identical fields."""
        a = value_noise(24, 16, 6.0, 5, 1234)
        b = value_noise(24, 16, 6.0, 5, 1234)
        np.testing.assert_array_equal(a, b)

    def test_seed_changes_field(self) -> None:
        """Different seeds produce different fields."""
        a = value_noise(24, 24, 6.0, 3, 1)
        b = value_noise(24, 24, 6.0, 3, 2)
        assert not np.array_equal(a, b)

    @pytest.mark.parametrize(
        "width,height,scale,octaves,seed",
        [
            (6, 5, 3.0, 3, 17),
            (12, 12, 12.0, 5, 42),
            (9, 14, 2.5, 2, -8),
            (1, 7, 1.0, 4, 3),
        ],
    )
    def test_matches_full_lattice_reference(
        self, width: int, height: int, scale: float, octaves: int, seed: int
    ) -> None:
        """Sparse lattice evaluation equals drawing every lattice value."""
        expected = _reference_noise(width, height, scale, octaves, seed)
        actual = value_noise(width, height, scale, octaves, seed)
        np.testing.assert_allclose(actual, expected, rtol=0, atol=1e-12)

    @pytest.mark.parametrize(
        "width,height,scale,octaves",
        [(0, 10, 5.0, 3), (10, -1, 5.0, 3), (10, 10, 0.0, 3), (10, 10, -2.0, 3), (10, 10, 5.0, 0)],
    )
    def test_invalid_parameters(
        self, width: int, height: int, scale: float, octaves: int
    ) -> None:
        """Invalid dimensions, scale or octaves raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            value_noise(width, height, scale, octaves, 1)


class TestNormalize:
    """Tests for normalize."""

    def test_affine_map(self) -> None:
        """Min maps to 0 and max to 1."""
        field = np.array([[2.0, 4.0], [6.0, 10.0]])
        np.testing.assert_allclose(normalize(field), [[0.0, 0.25], [0.5, 1.0]])

    def test_flat_field_becomes_zero(self) -> None:
        """A field without variance flattens to 0 instead of dividing by zero."""
        field = np.full((3, 4), 0.7)
        np.testing.assert_array_equal(normalize(field), np.zeros((3, 4)))

    def test_input_untouched(self) -> None:
        """normalize returns a new array."""
        field = np.array([[1.0, 3.0]])
        normalize(field)
        np.testing.assert_array_equal(field, [[1.0, 3.0]])


class TestSmoothstep:
    """Tests for smoothstep."""

    def test_endpoints_and_midpoint(self) -> None:
        """Eases from 0 to 1 through 0.5."""
        values = smoothstep(0.0, 1.0, np.array([0.0, 0.5, 1.0]))
        np.testing.assert_allclose(values, [0.0, 0.5, 1.0])

    def test_clamps(self) -> None:
        """Values outside the edges clamp."""
        values = smoothstep(0.2, 0.8, np.array([-1.0, 2.0]))
        np.testing.assert_allclose(values, [0.0, 1.0])
