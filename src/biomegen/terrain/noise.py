"""Noise generation functions for map generation.

Provides multi-octave value noise over a random lattice drawn from the
seeded Park-Miller stream, plus the normalization and easing helpers the
shaping stages share.
"""

import math

import numpy as np
from numpy.typing import NDArray

from ..exceptions import ConfigurationError
from .rng import Rng


def value_noise(
    width: int,
    height: int,
    scale: float,
    octaves: int,
    seed: int,
) -> NDArray[np.float64]:
    """Generate fractal value noise normalized to [0, 1].

    Each octave doubles the lattice frequency and halves the amplitude.
    Lattice values are drawn row-major from a single stream, one
    ``size * size`` block per octave; only the lattice entries the grid
    actually samples are evaluated, but the stream is advanced past the
    whole block so later octaves see the same values as a full draw.

    Args:
        width: Output width in tiles.
        height: Output height in tiles.
        scale: Wavelength of the base octave in tiles (larger = smoother).
        octaves: Number of noise layers to sum.
        seed: Random seed for the lattice stream.

    Returns:
        2D array of shape (height, width) with values in [0, 1].

    Raises:
        ConfigurationError: If dimensions, scale or octaves are invalid.
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError(
            f"Noise dimensions must be positive, got {width}x{height}"
        )
    if not scale > 0:
        raise ConfigurationError(f"Noise scale must be positive, got {scale}")
    if octaves < 1:
        raise ConfigurationError(f"Noise octaves must be at least 1, got {octaves}")

    rng = Rng(seed)
    result = np.zeros((height, width), dtype=np.float64)

    ys = np.arange(height, dtype=np.float64)[:, np.newaxis]
    xs = np.arange(width, dtype=np.float64)[np.newaxis, :]

    for octave in range(octaves):
        frequency = 2.0**octave / scale
        amplitude = 0.5**octave
        lattice_size = math.ceil(max(width, height) * frequency) + 2

        fx = xs * frequency
        fy = ys * frequency
        ix = np.floor(fx).astype(np.int64)
        iy = np.floor(fy).astype(np.int64)
        sx = smoothstep(0.0, 1.0, fx - ix)
        sy = smoothstep(0.0, 1.0, fy - iy)

        # Lattice corners, wrapped into the lattice
        x0, x1 = ix % lattice_size, (ix + 1) % lattice_size
        y0, y1 = iy % lattice_size, (iy + 1) % lattice_size

        rows = np.unique(np.concatenate([y0.ravel(), y1.ravel()]))
        cols = np.unique(np.concatenate([x0.ravel(), x1.ravel()]))
        lattice = rng.values_at(rows[:, np.newaxis] * lattice_size + cols[np.newaxis, :])

        r0, r1 = np.searchsorted(rows, y0), np.searchsorted(rows, y1)
        c0, c1 = np.searchsorted(cols, x0), np.searchsorted(cols, x1)

        top = lattice[r0, c0] + sx * (lattice[r0, c1] - lattice[r0, c0])
        bottom = lattice[r1, c0] + sx * (lattice[r1, c1] - lattice[r1, c0])
        result += (top + sy * (bottom - top)) * amplitude

        rng.advance(lattice_size * lattice_size)

    return normalize(result)


def normalize(field: NDArray[np.float64]) -> NDArray[np.float64]:
    """Affinely map a field onto [0, 1] using its observed min and max.

    A field with no variance maps to all zeros.

    Args:
        field: Input 2D field.

    Returns:
        New normalized array; the input is not modified.
    """
    low = float(np.min(field))
    high = float(np.max(field))
    span = (high - low) or 1.0
    return (field - low) / span


def smoothstep(edge0: float, edge1: float, x: NDArray[np.float64]) -> NDArray[np.float64]:
    """Smooth Hermite interpolation between 0 and 1.

    Args:
        edge0: Lower edge of transition.
        edge1: Upper edge of transition.
        x: Input values.

    Returns:
        Smoothly interpolated values in [0, 1].
    """
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
